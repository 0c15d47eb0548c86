# PATH: apps/domains/results/services/ownership.py
from __future__ import annotations

import logging

from lms.domain.access import Forbidden, Role

logger = logging.getLogger(__name__)


def ensure_exam_owner(user, exam) -> None:
    """
    결과 조회 소유권
    - admin: 전체
    - teacher: 본인이 출제한 시험만
    """
    if user.role_enum is Role.ADMIN:
        return
    if exam.teacher_id == user.id:
        return

    logger.info("results access denied exam_id=%s user_id=%s", exam.id, user.id)
    raise Forbidden(
        "Access denied. You can only view results for your own exams.",
        policy="exam-owner",
    )
