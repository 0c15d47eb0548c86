# apps/api/common/exceptions.py
"""
DRF 전역 예외 핸들러 (settings.REST_FRAMEWORK["EXCEPTION_HANDLER"])

모든 오류 응답 형식 고정:
    {"status": <int>, "message": <str>}
    + "errors" (검증 오류 상세) / "result" (중복 제출 시 기존 결과) 등 extra

도메인 예외(lms.domain.*.errors)는 여기서 HTTP로 매핑한다.
뷰는 도메인 예외를 그대로 던져도 된다.
"""
from __future__ import annotations

import logging

from rest_framework import exceptions, status
from rest_framework.views import exception_handler

from lms.domain.access import AccessDenied, Unauthenticated
from lms.domain.exams.errors import (
    DuplicateSubmission,
    ExamNotFound,
    InvalidExamDefinition,
    InvalidSubmission,
    ResultNotFound,
)

logger = logging.getLogger(__name__)


class Conflict(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict."
    default_code = "conflict"

    def __init__(self, detail=None, code=None, *, extra=None):
        super().__init__(detail, code)
        self.extra = extra or {}


class DomainValidationError(exceptions.ValidationError):
    """도메인 검증 오류: message + errors 를 분리해서 보존."""

    def __init__(self, message: str, errors=None):
        super().__init__(errors or {"non_field_errors": [message]})
        self.message = message


def to_api_exception(exc):
    if isinstance(exc, Unauthenticated):
        return exceptions.NotAuthenticated(exc.message)
    if isinstance(exc, AccessDenied):
        return exceptions.PermissionDenied(exc.message)
    if isinstance(exc, (ExamNotFound, ResultNotFound)):
        return exceptions.NotFound(exc.message)
    if isinstance(exc, DuplicateSubmission):
        return Conflict(exc.message)
    if isinstance(exc, (InvalidSubmission, InvalidExamDefinition)):
        return DomainValidationError(exc.message, exc.errors)
    return exc


def _message_from(exc, data) -> str:
    message = getattr(exc, "message", None)
    if message:
        return str(message)

    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])

    if isinstance(exc, exceptions.ValidationError):
        return "Validation failed"

    return str(getattr(exc, "detail", "") or exc)


def api_exception_handler(exc, context):
    exc = to_api_exception(exc)
    response = exception_handler(exc, context)

    if response is None:
        # DRF가 모르는 예외 → UnhandledExceptionMiddleware 가 500 처리
        return None

    data = response.data
    body = {
        "status": response.status_code,
        "message": _message_from(exc, data),
    }

    if isinstance(exc, exceptions.ValidationError):
        body["errors"] = data

    body.update(getattr(exc, "extra", None) or {})

    if response.status_code >= 500:
        logger.error("api error status=%s message=%s", response.status_code, body["message"])

    response.data = body
    return response
