"""
시험 도메인 오류 — 순수 파이썬
"""
from __future__ import annotations

from typing import Any, Optional


class ExamDomainError(Exception):
    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ExamNotFound(ExamDomainError):
    """시험 없음 / 미공개 / 수강 등록 안 됨 (호출자 입장에서는 모두 '없음')."""
    status_code = 404

    def __init__(self, message: str = "Exam not found"):
        super().__init__(message)


class ResultNotFound(ExamDomainError):
    status_code = 404

    def __init__(self, message: str = "No result found for this exam"):
        super().__init__(message)


class DuplicateSubmission(ExamDomainError):
    """
    (exam, student) 결과가 이미 있음.
    기존 결과를 그대로 들고 다닌다 (재계산 ❌).
    """
    status_code = 409

    def __init__(self, existing: Any = None, message: str = "You have already submitted this exam"):
        self.existing = existing
        super().__init__(message)


class InvalidSubmission(ExamDomainError):
    status_code = 400

    def __init__(self, message: str, errors: Optional[dict] = None):
        self.errors = errors or {}
        super().__init__(message)


class InvalidExamDefinition(ExamDomainError):
    status_code = 400

    def __init__(self, message: str, errors: Optional[dict] = None):
        self.errors = errors or {}
        super().__init__(message)
