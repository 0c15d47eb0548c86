"""
시험 결과 통계 — 순수 파이썬 (teacher/admin 결과 화면용)
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from .scoring import round_half_up


@dataclass(frozen=True)
class ResultRow:
    score: int
    percentage: Decimal
    status: str


def summarize(rows: Iterable[ResultRow]) -> dict:
    rows = list(rows)
    if not rows:
        return {
            "totalStudents": 0,
            "submitted": 0,
            "averageScore": Decimal("0.00"),
            "averagePercentage": Decimal("0.00"),
            "highestScore": 0,
            "lowestScore": 0,
        }

    scores = [int(r.score) for r in rows]
    percentages = [Decimal(str(r.percentage)) for r in rows]

    return {
        "totalStudents": len(rows),
        # graded 도 제출 완료 이후 상태
        "submitted": sum(1 for r in rows if r.status in ("submitted", "graded")),
        "averageScore": round_half_up(Decimal(sum(scores)) / len(scores)),
        "averagePercentage": round_half_up(sum(percentages) / len(percentages)),
        "highestScore": max(scores),
        "lowestScore": min(scores),
    }
