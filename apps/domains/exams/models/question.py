from django.core.validators import MinValueValidator
from django.db import models

from apps.api.common.models import BaseModel
from lms.domain.exams.entities import Choice, Question


class ExamQuestion(BaseModel):
    """
    시험 문항 정의 (보기 A–D 4개 필수)
    index는 0부터, 시험 내 유일 — 클라이언트 AnswerBuffer 와 index 정렬
    """

    class ChoiceField(models.TextChoices):
        A = Choice.A.value, "A"
        B = Choice.B.value, "B"
        C = Choice.C.value, "C"
        D = Choice.D.value, "D"

    exam = models.ForeignKey(
        "exams.Exam",
        on_delete=models.CASCADE,
        related_name="questions",
    )

    index = models.PositiveIntegerField()
    text = models.TextField()

    option_a = models.TextField()
    option_b = models.TextField()
    option_c = models.TextField()
    option_d = models.TextField()

    correct_answer = models.CharField(max_length=1, choices=ChoiceField.choices)
    explanation = models.TextField(blank=True)

    points = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])

    class Meta:
        db_table = "exams_question"
        unique_together = ("exam", "index")
        ordering = ["index"]

    def __str__(self):
        return f"{self.exam} Q{self.index + 1}"

    @property
    def options(self) -> dict:
        return {
            "A": self.option_a,
            "B": self.option_b,
            "C": self.option_c,
            "D": self.option_d,
        }

    def to_domain(self) -> Question:
        return Question(
            text=self.text,
            options={Choice(k): v for k, v in self.options.items()},
            correct=Choice(self.correct_answer),
            points=int(self.points),
            explanation=self.explanation,
        )
