# PATH: apps/domains/results/views/submit_view.py
"""
POST /api/v1/exam/{exam_id}/submit/

body: {"answers": [{"questionIndex": 0, "selectedAnswer": "B"}, ...], "timeSpent": 120}
201 → {"result": {...}}
409 → {"status": 409, "message": ..., "result": <기존 결과>}
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.common.exceptions import Conflict
from apps.core.permissions import IsAuthenticatedUser
from apps.domains.exams.services.exam_access import get_exam_for_student
from apps.domains.results.serializers.exam_result import ExamResultSerializer
from apps.domains.results.services.grading_service import submit_exam
from lms.domain.exams.errors import DuplicateSubmission, InvalidSubmission


class SubmitExamView(APIView):
    permission_classes = [IsAuthenticatedUser]

    def post(self, request, exam_id: int):
        exam = get_exam_for_student(exam_id, request.user)

        # JSON 배열 / 스칼라 body 는 채점 전에 거절
        if not isinstance(request.data, dict):
            raise InvalidSubmission(
                "Malformed submission",
                errors={"non_field_errors": ["Expected an object with answers and timeSpent."]},
            )

        try:
            result = submit_exam(
                exam=exam,
                student=request.user,
                answers=request.data.get("answers"),
                time_spent=request.data.get("timeSpent"),
            )
        except DuplicateSubmission as e:
            raise Conflict(
                e.message,
                extra={"result": ExamResultSerializer(e.existing).data},
            )

        return Response(
            {"result": ExamResultSerializer(result).data},
            status=status.HTTP_201_CREATED,
        )
