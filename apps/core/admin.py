# PATH: apps/core/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from apps.core.models import User


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ("id", "username", "name", "email", "role", "is_active")
    list_display_links = ("id", "username")
    list_filter = ("role", "is_active")
    search_fields = ("username", "name", "email")
    ordering = ("-id",)

    fieldsets = DjangoUserAdmin.fieldsets + (
        ("LMS", {"fields": ("name", "phone", "role")}),
    )
    add_fieldsets = DjangoUserAdmin.add_fieldsets + (
        ("LMS", {"fields": ("name", "role")}),
    )
