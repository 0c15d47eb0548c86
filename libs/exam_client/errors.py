# PATH: libs/exam_client/errors.py
"""
응시 클라이언트 오류

서버 오류 body 계약: {"status": int, "message": str, ["errors"], ["result"]}
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class ExamClientError(Exception):
    """클라이언트 측 오류 공통 베이스"""


class ExamAPIError(ExamClientError):
    def __init__(self, status: int, message: str, payload: Optional[Dict[str, Any]] = None):
        self.status = int(status)
        self.message = message
        self.payload = payload or {}
        super().__init__(f"[{self.status}] {message}")


class AuthenticationRequiredError(ExamAPIError):
    """401"""


class ExamNotAvailableError(ExamAPIError):
    """403 / 404: 권한 없음, 미공개, 수강 안 함"""


class SubmissionRejectedError(ExamAPIError):
    """400: 제출 형식 오류"""

    @property
    def errors(self) -> Dict[str, Any]:
        return self.payload.get("errors") or {}


class ResultAlreadyExistsError(ExamAPIError):
    """409: 이미 제출함. 서버가 돌려준 기존 결과를 들고 다닌다."""

    @property
    def result(self) -> Optional[Dict[str, Any]]:
        return self.payload.get("result")


class ExamAPIUnavailableError(ExamClientError):
    """네트워크 / 타임아웃 / 5xx 이전 단계 실패"""


# --------------------------------------------------
# 세션 상태 오류 (서버 호출 없이 로컬에서 거절)
# --------------------------------------------------

class SessionStateError(ExamClientError):
    pass


class IncompleteAnswersError(ExamClientError):
    def __init__(self, answered: int, total: int):
        self.answered = answered
        self.total = total
        super().__init__(f"Please answer all questions ({answered}/{total})")


class SubmissionInProgressError(ExamClientError):
    def __init__(self):
        super().__init__("A submission is already in progress")


_BY_STATUS = {
    400: SubmissionRejectedError,
    401: AuthenticationRequiredError,
    403: ExamNotAvailableError,
    404: ExamNotAvailableError,
    409: ResultAlreadyExistsError,
}


def error_for(status: int, payload: Optional[Dict[str, Any]]) -> ExamAPIError:
    payload = payload if isinstance(payload, dict) else {}
    message = str(payload.get("message") or payload.get("detail") or f"HTTP {status}")
    cls = _BY_STATUS.get(int(status), ExamAPIError)
    return cls(status, message, payload)
