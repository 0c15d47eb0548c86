from .errors import (
    AuthenticationRequiredError,
    ExamAPIError,
    ExamAPIUnavailableError,
    ExamClientError,
    ExamNotAvailableError,
    IncompleteAnswersError,
    ResultAlreadyExistsError,
    SessionStateError,
    SubmissionInProgressError,
    SubmissionRejectedError,
)
from .http_client import ExamAPIClient
from .session import ElapsedTimer, ExamSession, SessionState

__all__ = [
    "AuthenticationRequiredError",
    "ElapsedTimer",
    "ExamAPIClient",
    "ExamAPIError",
    "ExamAPIUnavailableError",
    "ExamClientError",
    "ExamNotAvailableError",
    "ExamSession",
    "IncompleteAnswersError",
    "ResultAlreadyExistsError",
    "SessionState",
    "SessionStateError",
    "SubmissionInProgressError",
    "SubmissionRejectedError",
]
