from django.conf import settings
from django.db import models

from apps.api.common.models import TimestampModel


# ========================================================
# Course
# ========================================================

class Course(TimestampModel):
    title = models.CharField(max_length=255)
    code = models.CharField(max_length=50, unique=True)
    description = models.TextField(blank=True)

    # 담당 교사 (미배정 가능)
    teacher = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="taught_courses",
    )

    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "courses_course"
        ordering = ["code"]

    def __str__(self):
        return f"{self.code} {self.title}"


# ========================================================
# Enrollment (코스 단위 수강 등록)
# ========================================================

class Enrollment(TimestampModel):
    """
    학생이 특정 코스를 수강하는 행위.
    ENROLLED 상태만 해당 코스 시험 응시 권한을 준다.
    """

    class Status(models.TextChoices):
        ENROLLED = "enrolled", "Enrolled"
        DROPPED = "dropped", "Dropped"
        COMPLETED = "completed", "Completed"

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="enrollments",
    )
    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name="enrollments",
    )

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ENROLLED,
    )

    enrolled_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "courses_enrollment"
        constraints = [
            models.UniqueConstraint(
                fields=["student", "course"],
                name="unique_enrollment_per_course",
            )
        ]

    def __str__(self):
        return f"{self.student} -> {self.course.code}"


def is_enrolled(student, course) -> bool:
    return Enrollment.objects.filter(
        student=student,
        course=course,
        status=Enrollment.Status.ENROLLED,
    ).exists()
