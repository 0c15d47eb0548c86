# PATH: apps/domains/exams/services/exam_factory.py
from __future__ import annotations

import logging
from typing import Optional, Sequence

from django.db import transaction

from apps.domains.exams.models import Exam, ExamQuestion
from lms.domain.access import Forbidden, Role
from lms.domain.exams.entities import Choice, Question
from lms.domain.exams.errors import InvalidExamDefinition
from lms.domain.exams.parsing import parse_generated_questions

logger = logging.getLogger(__name__)


def _questions_from_input(items: Sequence[dict]) -> list[Question]:
    questions = []
    for position, item in enumerate(items):
        try:
            questions.append(
                Question(
                    text=item["question"].strip(),
                    options={Choice(k): v for k, v in item["options"].items()},
                    correct=Choice.parse(item["correctAnswer"]),
                    points=int(item.get("points") or 1),
                    explanation=item.get("explanation") or "",
                )
            )
        except ValueError as e:
            raise InvalidExamDefinition(
                "Invalid question",
                errors={f"questions[{position}]": [str(e)]},
            )
    return questions


class ExamFactory:
    """
    교사/관리자 시험 생성

    원칙:
    - 교사는 본인 담당 코스에만 생성 가능, 관리자는 전체
    - 문항은 구조화 입력 또는 생성 텍스트 중 하나
    - 파싱 결과 문항 0개면 생성 거절 (빈 시험 금지)
    """

    @staticmethod
    def ensure_can_author(user, course) -> None:
        if user.role_enum is Role.ADMIN:
            return
        if course.teacher_id != user.id:
            raise Forbidden(
                "You can only create exams for courses you teach",
                policy="course-owner",
            )

    @classmethod
    @transaction.atomic
    def create(
        cls,
        *,
        author,
        course,
        title: str,
        description: str = "",
        instructions: str = "",
        exam_type: str = Exam.ExamTypeChoices.ASSIGNMENT,
        due_date=None,
        is_published: bool = False,
        questions: Optional[Sequence[dict]] = None,
        generated_text: Optional[str] = None,
        points_per_question: int = 1,
    ) -> Exam:
        cls.ensure_can_author(author, course)

        if generated_text:
            parsed = parse_generated_questions(generated_text, points=points_per_question)
        else:
            parsed = _questions_from_input(questions or [])

        if not parsed:
            raise InvalidExamDefinition(
                "Could not parse any complete question",
                errors={"generatedText": ["No question with 4 options and a correct answer was found."]},
            )

        exam = Exam.objects.create(
            title=title.strip(),
            description=description or "",
            instructions=instructions or f"Please answer all {len(parsed)} questions.",
            course=course,
            teacher=author,
            exam_type=exam_type,
            due_date=due_date,
        )

        ExamQuestion.objects.bulk_create([
            ExamQuestion(
                exam=exam,
                index=index,
                text=q.text,
                option_a=q.options[Choice.A],
                option_b=q.options[Choice.B],
                option_c=q.options[Choice.C],
                option_d=q.options[Choice.D],
                correct_answer=q.correct.value,
                explanation=q.explanation,
                points=q.points,
            )
            for index, q in enumerate(parsed)
        ])

        if is_published:
            exam.set_published(True)

        logger.info(
            "exam created exam_id=%s course_id=%s author_id=%s questions=%s published=%s",
            exam.id,
            course.id,
            author.id,
            len(parsed),
            exam.is_published,
        )
        return exam
