"""
자동 채점 — 순수 파이썬

규칙 (문항 단위):
- 선택 == 정답 → 문항 배점 전부
- 그 외 (오답 / 미응답 None) → 0  ※ 미응답은 오류가 아니다
- score = Σ, max_score = Σ 배점
- percentage = score / max_score × 100, ROUND_HALF_UP 소수 둘째 자리
  (max_score == 0 이면 0.00)
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from .entities import Choice, Question

PERCENT_QUANT = Decimal("0.01")


def percentage_of(score, max_score) -> Decimal:
    if not max_score:
        return Decimal("0.00")
    raw = Decimal(str(score)) * Decimal(100) / Decimal(str(max_score))
    return raw.quantize(PERCENT_QUANT, rounding=ROUND_HALF_UP)


def round_half_up(value, quant: Decimal = PERCENT_QUANT) -> Decimal:
    return Decimal(str(value)).quantize(quant, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class GradedAnswer:
    question_index: int
    selected: Optional[Choice]
    is_correct: bool
    points: int

    def as_dict(self) -> dict:
        return {
            "questionIndex": self.question_index,
            "selectedAnswer": self.selected.value if self.selected else None,
            "isCorrect": self.is_correct,
            "points": self.points,
        }


@dataclass(frozen=True)
class Score:
    answers: tuple[GradedAnswer, ...]
    score: int
    max_score: int
    percentage: Decimal

    @property
    def correct_count(self) -> int:
        return sum(1 for a in self.answers if a.is_correct)


def grade(questions: Sequence[Question], selections: Sequence[Optional[Choice]]) -> Score:
    """
    selections는 questions와 index 정렬된 길이 N 시퀀스.
    길이 검증은 호출 전에 (submission.normalize_answers) 끝나 있어야 한다.
    """
    if len(selections) != len(questions):
        raise ValueError(
            f"selections length {len(selections)} != question count {len(questions)}"
        )

    graded = []
    for index, (question, selected) in enumerate(zip(questions, selections)):
        is_correct = selected is not None and selected == question.correct
        graded.append(
            GradedAnswer(
                question_index=index,
                selected=selected,
                is_correct=is_correct,
                points=int(question.points) if is_correct else 0,
            )
        )

    total = sum(a.points for a in graded)
    max_score = sum(int(q.points) for q in questions)

    return Score(
        answers=tuple(graded),
        score=total,
        max_score=max_score,
        percentage=percentage_of(total, max_score),
    )
