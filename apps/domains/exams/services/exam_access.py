# PATH: apps/domains/exams/services/exam_access.py
"""
학생 시험 접근 판단 (단일 진실)

학생 입장에서 "없음 / 미공개 / 수강 안 함"은 구분하지 않는다 → 모두 ExamNotFound(404).
"""
from __future__ import annotations

import logging

from apps.domains.courses.models import is_enrolled
from apps.domains.exams.models import Exam
from lms.domain.exams.errors import ExamNotFound

logger = logging.getLogger(__name__)


def get_exam_for_student(exam_id: int, student) -> Exam:
    exam = (
        Exam.objects
        .select_related("course")
        .prefetch_related("questions")
        .filter(id=int(exam_id))
        .first()
    )
    if exam is None:
        raise ExamNotFound()

    if not exam.is_published:
        logger.info("exam not published exam_id=%s user_id=%s", exam.id, student.id)
        raise ExamNotFound()

    if not is_enrolled(student, exam.course):
        logger.info("exam access without enrollment exam_id=%s user_id=%s", exam.id, student.id)
        raise ExamNotFound()

    return exam


def get_exam(exam_id: int) -> Exam:
    exam = Exam.objects.prefetch_related("questions").filter(id=int(exam_id)).first()
    if exam is None:
        raise ExamNotFound()
    return exam
