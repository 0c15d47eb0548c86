from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.db import models
from django.utils import timezone

from apps.api.common.models import BaseModel


class ExamResult(BaseModel):
    """
    results SSOT

    - (exam, student) 당 결과 1개 (DB unique constraint)
    - 객관식 자동채점 결과를 제출 시점에 고정 저장 → 이후 읽기는 재계산 없음
    - 교사 피드백은 점수를 바꾸지 않는다
    """

    class Status(models.TextChoices):
        SUBMITTED = "submitted", "Submitted"
        GRADED = "graded", "Graded"

    exam = models.ForeignKey(
        "exams.Exam",
        on_delete=models.CASCADE,
        related_name="results",
    )
    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="exam_results",
    )

    # 예: [{"questionIndex": 0, "selectedAnswer": "B", "isCorrect": true, "points": 2}, ...]
    answers = models.JSONField(default=list, blank=True)

    score = models.PositiveIntegerField(default=0)
    max_score = models.PositiveIntegerField(default=0)
    percentage = models.DecimalField(max_digits=5, decimal_places=2, default=Decimal("0.00"))

    time_spent = models.PositiveIntegerField(default=0, help_text="seconds")
    started_at = models.DateTimeField(null=True, blank=True)
    submitted_at = models.DateTimeField(default=timezone.now)

    status = models.CharField(max_length=20, choices=Status.choices, default=Status.SUBMITTED)
    is_auto_graded = models.BooleanField(default=True)

    # 교사 피드백
    feedback = models.TextField(blank=True)
    graded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="graded_results",
    )
    graded_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "results_exam_result"
        ordering = ["-submitted_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["exam", "student"],
                name="unique_result_per_exam_student",
            )
        ]
        indexes = [
            models.Index(fields=["exam", "status"], name="results_exam_status_idx"),
            models.Index(fields=["exam", "score"], name="results_exam_score_idx"),
        ]

    def __str__(self):
        return f"{self.exam_id}:{self.student_id} {self.score}/{self.max_score}"

    def give_feedback(self, *, feedback: str, grader) -> None:
        self.feedback = feedback
        self.graded_by = grader
        self.graded_at = timezone.now()
        self.status = self.Status.GRADED
        self.save(update_fields=["feedback", "graded_by", "graded_at", "status", "updated_at"])
