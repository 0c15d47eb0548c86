"""
외부 문항 생성 서비스 출력(텍스트) → Question 리스트

기대 형식:

    Question 1: [문항]
    A) [보기]
    B) [보기]
    C) [보기]
    D) [보기]
    Correct Answer: [A-D]

보기 4개 + 정답이 모두 있는 블록만 채택, 나머지는 조용히 버린다.
"""
from __future__ import annotations

import logging
import re

from .entities import Choice, Question

logger = logging.getLogger(__name__)

_BLOCK_SPLIT = re.compile(r"Question\s+\d+\s*:", re.IGNORECASE)
_OPTION = re.compile(r"^([A-D])\)\s*(.+)$", re.IGNORECASE)
_ANSWER = re.compile(r"Correct Answer:\s*([A-D])", re.IGNORECASE)


def parse_generated_questions(text: str, *, points: int = 1) -> list[Question]:
    questions: list[Question] = []
    blocks = [b for b in _BLOCK_SPLIT.split(text or "") if b.strip()]

    for block in blocks:
        lines = [ln.strip() for ln in block.strip().splitlines() if ln.strip()]
        if len(lines) < 5:
            continue

        question_text = lines[0]
        options: dict[Choice, str] = {}
        correct = None

        for line in lines[1:]:
            m = _OPTION.match(line)
            if m:
                options[Choice.parse(m.group(1))] = m.group(2).strip()
            m = _ANSWER.search(line)
            if m:
                correct = Choice.parse(m.group(1))

        if question_text and len(options) == 4 and correct is not None:
            questions.append(
                Question(text=question_text, options=options, correct=correct, points=points)
            )

    skipped = len(blocks) - len(questions)
    if skipped:
        logger.info("generated question parse: kept=%s skipped=%s", len(questions), skipped)

    return questions
