# PATH: apps/domains/results/services/feedback_service.py
from __future__ import annotations

import logging

from apps.domains.results.models import ExamResult
from lms.domain.exams.errors import ResultNotFound

logger = logging.getLogger(__name__)


def give_feedback(*, exam, result_id: int, feedback: str, grader) -> ExamResult:
    """교사 피드백 저장. 점수/정답 내역은 건드리지 않는다."""
    result = ExamResult.objects.filter(exam=exam, id=int(result_id)).first()
    if result is None:
        raise ResultNotFound("Result not found")

    result.give_feedback(feedback=feedback, grader=grader)
    logger.info(
        "feedback saved exam_id=%s result_id=%s grader_id=%s",
        exam.id,
        result.id,
        grader.id,
    )
    return result
