from django.contrib import admin

from .models import ExamResult


@admin.register(ExamResult)
class ExamResultAdmin(admin.ModelAdmin):
    list_display = ("id", "exam", "student", "score", "max_score", "percentage", "status", "submitted_at")
    list_filter = ("status", "is_auto_graded")
    search_fields = ("exam__title", "student__username", "student__name")
    readonly_fields = ("answers", "score", "max_score", "percentage", "time_spent", "started_at", "submitted_at")
