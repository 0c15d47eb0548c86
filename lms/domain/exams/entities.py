"""
시험 도메인 엔티티 — 순수 파이썬 (Django/ORM 미사용)

apps.domains.exams.models 의 값과 1:1 로 맞춘다.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional


class Choice(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"

    @classmethod
    def parse(cls, raw) -> "Choice":
        if isinstance(raw, cls):
            return raw
        value = str(raw or "").strip().upper()
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"choice must be one of A, B, C, D (got {raw!r})") from None

    @classmethod
    def parse_optional(cls, raw) -> Optional["Choice"]:
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return None
        return cls.parse(raw)


class ExamType(str, Enum):
    ASSIGNMENT = "assignment"
    MIDTERM = "midterm"
    FINAL = "final"


@dataclass(frozen=True)
class Question:
    text: str
    options: Mapping[Choice, str]
    correct: Choice
    points: int = 1
    explanation: str = ""

    def __post_init__(self):
        missing = [c.value for c in Choice if not str(self.options.get(c, "") or "").strip()]
        if missing:
            raise ValueError(f"question options missing: {', '.join(missing)}")
        if int(self.points) < 1:
            raise ValueError("points must be >= 1")


@dataclass(frozen=True)
class ExamDefinition:
    title: str
    questions: tuple[Question, ...] = field(default_factory=tuple)
    exam_type: ExamType = ExamType.ASSIGNMENT

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def max_score(self) -> int:
        return sum(int(q.points) for q in self.questions)
