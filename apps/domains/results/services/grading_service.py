# PATH: apps/domains/results/services/grading_service.py
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.domains.results.models import ExamResult
from lms.domain.exams.errors import DuplicateSubmission
from lms.domain.exams.scoring import grade
from lms.domain.exams.submission import normalize_answers, normalize_time_spent

logger = logging.getLogger(__name__)


def get_existing_result(exam, student):
    return ExamResult.objects.filter(exam=exam, student=student).first()


def submit_exam(*, exam, student, answers: Any, time_spent: Any = None) -> ExamResult:
    """
    시험 제출 → 자동채점 → ExamResult 1건 생성

    Guarantees:
    - (exam, student) 당 결과 1개. 이미 있으면 DuplicateSubmission(existing), 재계산 없음
    - 형식 오류는 채점 전에 InvalidSubmission
    - 동시 제출 경합은 DB unique constraint 로 판정 (먼저 쓴 쪽이 이김)

    exam 접근 판단(공개/수강)은 호출 전에 끝나 있어야 한다 (get_exam_for_student).
    """
    existing = get_existing_result(exam, student)
    if existing is not None:
        logger.info(
            "duplicate submission rejected exam_id=%s student_id=%s result_id=%s",
            exam.id,
            student.id,
            existing.id,
        )
        raise DuplicateSubmission(existing)

    definition = exam.to_definition()
    selections = normalize_answers(answers, definition.question_count)
    seconds = normalize_time_spent(time_spent)

    scored = grade(definition.questions, selections)
    now = timezone.now()

    try:
        with transaction.atomic():
            result = ExamResult.objects.create(
                exam=exam,
                student=student,
                answers=[a.as_dict() for a in scored.answers],
                score=scored.score,
                max_score=scored.max_score,
                percentage=scored.percentage,
                time_spent=seconds,
                started_at=now - timedelta(seconds=seconds),
                submitted_at=now,
                status=ExamResult.Status.SUBMITTED,
                is_auto_graded=True,
            )
    except IntegrityError:
        winner = get_existing_result(exam, student)
        if winner is None:
            raise
        logger.info(
            "concurrent submission lost exam_id=%s student_id=%s result_id=%s",
            exam.id,
            student.id,
            winner.id,
        )
        raise DuplicateSubmission(winner)

    logger.info(
        "exam submitted exam_id=%s student_id=%s score=%s/%s percentage=%s",
        exam.id,
        student.id,
        result.score,
        result.max_score,
        result.percentage,
    )
    return result
