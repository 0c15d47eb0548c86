# PATH: libs/exam_client/session.py
"""
학생 응시 세션 (클라이언트 상태 머신)

LOADING ──load()──▶ IN_PROGRESS ──submit()──▶ COMPLETED
   │                                    ▲
   └──── load() 시 hasSubmitted ────────┘

규칙:
- 답안 버퍼는 문항 index 정렬 Optional[Choice] 리스트 (None = 미응답)
- 제출은 동시에 1건만 (non-blocking lock). 두 번째 호출은 즉시 SubmissionInProgressError
- 409(이미 제출) → 서버가 준 기존 결과로 COMPLETED
- 그 외 제출 실패 → IN_PROGRESS 유지, 버퍼 보존, 예외 그대로 전파 (자동 재시도 ❌)
- load 실패는 이 인스턴스에 치명적: 이후 모든 조작 거절 (새 세션을 만들 것)
"""
from __future__ import annotations

import enum
import logging
import threading
import time
from typing import Any, Callable, Dict, List, Optional

from lms.domain.exams.entities import Choice

from .errors import (
    IncompleteAnswersError,
    ResultAlreadyExistsError,
    SessionStateError,
    SubmissionInProgressError,
)

logger = logging.getLogger("exam_client.session")

Clock = Callable[[], float]


class SessionState(str, enum.Enum):
    LOADING = "loading"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ElapsedTimer:
    """단조 시계 기반 경과 시간. 버퍼와 무관 (읽기 전용)."""

    def __init__(self, clock: Clock = time.monotonic):
        self._clock = clock
        self._started_at: Optional[float] = None

    def start(self) -> None:
        self._started_at = self._clock()

    def elapsed_seconds(self) -> int:
        if self._started_at is None:
            return 0
        return max(0, int(self._clock() - self._started_at))


class ExamSession:
    def __init__(self, client, exam_id: int, *, clock: Clock = time.monotonic):
        self._client = client
        self._exam_id = int(exam_id)
        self._timer = ElapsedTimer(clock)

        self._state = SessionState.LOADING
        self._failed: Optional[BaseException] = None

        self._exam: Optional[Dict[str, Any]] = None
        self._answers: List[Optional[Choice]] = []
        self._result: Optional[Dict[str, Any]] = None

        self._submit_lock = threading.Lock()

    # --------------------------------------------------
    # read-only views
    # --------------------------------------------------

    @property
    def exam_id(self) -> int:
        return self._exam_id

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def exam(self) -> Optional[Dict[str, Any]]:
        return self._exam

    @property
    def result(self) -> Optional[Dict[str, Any]]:
        return self._result

    @property
    def answers(self) -> tuple:
        return tuple(self._answers)

    @property
    def question_count(self) -> int:
        return len(self._answers)

    @property
    def answered_count(self) -> int:
        return sum(1 for a in self._answers if a is not None)

    @property
    def is_complete(self) -> bool:
        return self._state is SessionState.IN_PROGRESS and self.answered_count == self.question_count

    @property
    def is_submitting(self) -> bool:
        return self._submit_lock.locked()

    @property
    def can_submit(self) -> bool:
        return self.is_complete and not self.is_submitting

    @property
    def elapsed_seconds(self) -> int:
        return self._timer.elapsed_seconds()

    # --------------------------------------------------
    # lifecycle
    # --------------------------------------------------

    def load(self) -> SessionState:
        self._ensure_usable()
        if self._state is not SessionState.LOADING:
            raise SessionStateError(f"load() not allowed in state {self._state.value}")

        try:
            data = self._client.fetch_exam(self._exam_id)
            exam = data["exam"]
            has_submitted = bool(data.get("hasSubmitted"))
            questions = [] if has_submitted else list(exam["questions"])
        except Exception as e:
            self._failed = e
            logger.warning("exam load failed exam_id=%s error=%s", self._exam_id, e)
            raise

        self._exam = exam

        if has_submitted:
            self._result = data.get("result")
            self._state = SessionState.COMPLETED
            logger.info("exam already submitted exam_id=%s", self._exam_id)
            return self._state

        self._answers = [None] * len(questions)
        self._timer.start()
        self._state = SessionState.IN_PROGRESS
        return self._state

    def set_answer(self, index: int, choice) -> None:
        self._ensure_in_progress("set_answer")
        self._check_index(index)
        self._answers[index] = Choice.parse(choice)

    def clear_answer(self, index: int) -> None:
        self._ensure_in_progress("clear_answer")
        self._check_index(index)
        self._answers[index] = None

    def submit(self, *, require_complete: bool = True) -> Dict[str, Any]:
        self._ensure_in_progress("submit")

        if not self._submit_lock.acquire(blocking=False):
            raise SubmissionInProgressError()

        try:
            # lock 획득 사이에 다른 호출이 끝냈을 수 있다
            self._ensure_in_progress("submit")

            if require_complete and self.answered_count != self.question_count:
                raise IncompleteAnswersError(self.answered_count, self.question_count)

            payload = [
                {"questionIndex": i, "selectedAnswer": a.value if a is not None else None}
                for i, a in enumerate(self._answers)
            ]

            try:
                data = self._client.submit(
                    self._exam_id,
                    answers=payload,
                    time_spent=self.elapsed_seconds,
                )
            except ResultAlreadyExistsError as e:
                logger.info("submission conflict exam_id=%s, adopting server result", self._exam_id)
                self._complete(e.result)
                return self._result

            self._complete(data.get("result"))
            return self._result
        finally:
            self._submit_lock.release()

    def refresh_result(self) -> Dict[str, Any]:
        """COMPLETED 상태에서 상세 결과(examDetails 포함) 재조회"""
        self._ensure_usable()
        if self._state is not SessionState.COMPLETED:
            raise SessionStateError("refresh_result() requires a completed session")

        data = self._client.fetch_my_result(self._exam_id)
        self._result = data.get("result")
        return self._result

    # --------------------------------------------------
    # internal
    # --------------------------------------------------

    def _complete(self, result: Optional[Dict[str, Any]]) -> None:
        self._result = result
        self._state = SessionState.COMPLETED

    def _ensure_usable(self) -> None:
        if self._failed is not None:
            raise SessionStateError("session failed to load; create a new session")

    def _ensure_in_progress(self, op: str) -> None:
        self._ensure_usable()
        if self._state is not SessionState.IN_PROGRESS:
            raise SessionStateError(f"{op}() not allowed in state {self._state.value}")

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexError(f"question index must be int, got {index!r}")
        if not (0 <= index < len(self._answers)):
            raise IndexError(f"question index {index} out of range [0, {len(self._answers)})")
