from django.contrib import admin

from .models import Course, Enrollment


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("id", "code", "title", "teacher", "is_active")
    list_display_links = ("id", "code")
    list_filter = ("is_active",)
    search_fields = ("code", "title", "teacher__username")
    ordering = ("code",)


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    list_display = ("id", "student", "course", "status", "enrolled_at")
    list_display_links = ("id", "student")
    list_filter = ("status", "course")
    search_fields = ("student__username", "student__name", "course__code")
    ordering = ("-id",)
