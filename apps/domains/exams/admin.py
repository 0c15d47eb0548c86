from django.contrib import admin

from .models import Exam, ExamQuestion


class ExamQuestionInline(admin.TabularInline):
    model = ExamQuestion
    extra = 0
    ordering = ("index",)
    fields = ("index", "text", "option_a", "option_b", "option_c", "option_d", "correct_answer", "points")


@admin.register(Exam)
class ExamAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "course", "teacher", "exam_type", "is_published", "due_date")
    list_filter = ("exam_type", "is_published")
    search_fields = ("title", "course__title", "course__code")
    inlines = [ExamQuestionInline]
