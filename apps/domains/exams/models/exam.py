from __future__ import annotations

from django.conf import settings
from django.db import models
from django.db.models import Sum
from django.utils import timezone

from apps.api.common.models import BaseModel
from lms.domain.exams.entities import ExamDefinition, ExamType


class Exam(BaseModel):
    """
    시험 정의 (객관식 4지선다)

    - 만점(max_score)은 저장하지 않고 문항 배점 합으로 계산
    - 학생에게는 is_published=True 인 시험만 노출
    """

    class ExamTypeChoices(models.TextChoices):
        ASSIGNMENT = ExamType.ASSIGNMENT.value, "Assignment"
        MIDTERM = ExamType.MIDTERM.value, "Midterm"
        FINAL = ExamType.FINAL.value, "Final"

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    instructions = models.TextField(blank=True)

    course = models.ForeignKey(
        "courses.Course",
        on_delete=models.CASCADE,
        related_name="exams",
    )
    teacher = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="authored_exams",
    )

    exam_type = models.CharField(
        max_length=20,
        choices=ExamTypeChoices.choices,
        default=ExamTypeChoices.ASSIGNMENT,
    )

    due_date = models.DateTimeField(null=True, blank=True)

    is_published = models.BooleanField(default=False)
    published_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "exams_exam"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["course", "exam_type"], name="exams_exam_course__6f1d2a_idx"),
            models.Index(fields=["is_published", "published_at"], name="exams_exam_is_publ_9c3b4e_idx"),
        ]

    def __str__(self):
        return self.title

    @property
    def max_score(self) -> int:
        if hasattr(self, "_prefetched_objects_cache") and "questions" in self._prefetched_objects_cache:
            return sum(int(q.points) for q in self.questions.all())
        return int(self.questions.aggregate(total=Sum("points"))["total"] or 0)

    def set_published(self, published: bool) -> None:
        self.is_published = bool(published)
        if self.is_published and self.published_at is None:
            self.published_at = timezone.now()
        self.save(update_fields=["is_published", "published_at", "updated_at"])

    def to_definition(self) -> ExamDefinition:
        return ExamDefinition(
            title=self.title,
            questions=tuple(q.to_domain() for q in self.questions.all()),
            exam_type=ExamType(self.exam_type),
        )
