"""
제출 payload 정규화 — 순수 파이썬

입력 (클라이언트 계약):
  answers   = [{"questionIndex": int, "selectedAnswer": "A"|"B"|"C"|"D"|null}, ...]  (정확히 N개)
  timeSpent = int (초, >= 0, 생략 시 0)

출력: questionIndex 순으로 정렬된 Optional[Choice] 리스트
형식 오류는 채점 전에 InvalidSubmission 으로 거절.
"""
from __future__ import annotations

from typing import Any, Optional

from .entities import Choice
from .errors import InvalidSubmission


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def normalize_answers(answers: Any, question_count: int) -> list[Optional[Choice]]:
    if not isinstance(answers, list):
        raise InvalidSubmission(
            "answers must be a list",
            errors={"answers": ["Expected a list of answers."]},
        )

    if len(answers) != question_count:
        raise InvalidSubmission(
            f"Expected {question_count} answers, got {len(answers)}",
            errors={"answers": [f"Expected {question_count} items."]},
        )

    selections: list[Optional[Choice]] = [None] * question_count
    seen: set[int] = set()
    errors: dict[str, list[str]] = {}

    for position, item in enumerate(answers):
        key = f"answers[{position}]"

        if not isinstance(item, dict):
            errors[key] = ["Expected an object with questionIndex and selectedAnswer."]
            continue

        index = item.get("questionIndex")
        if not _is_int(index) or not (0 <= index < question_count):
            errors[key] = [f"questionIndex must be an integer in [0, {question_count})."]
            continue

        if index in seen:
            errors[key] = [f"Duplicate questionIndex {index}."]
            continue
        seen.add(index)

        try:
            selections[index] = Choice.parse_optional(item.get("selectedAnswer"))
        except ValueError as e:
            errors[key] = [str(e)]

    if errors:
        raise InvalidSubmission("Malformed submission", errors=errors)

    return selections


def normalize_time_spent(raw: Any) -> int:
    if raw is None:
        return 0
    if not _is_int(raw) or raw < 0:
        raise InvalidSubmission(
            "timeSpent must be a non-negative integer",
            errors={"timeSpent": ["Must be a non-negative integer (seconds)."]},
        )
    return int(raw)
