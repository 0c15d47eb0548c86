# PATH: apps/domains/results/views/my_result_view.py
from __future__ import annotations

from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.permissions import IsAuthenticatedUser
from apps.domains.exams.services.exam_access import get_exam
from apps.domains.results.models import ExamResult
from apps.domains.results.serializers.my_result import MyExamResultSerializer
from lms.domain.exams.errors import ResultNotFound


class MyExamResultView(APIView):
    """
    GET /api/v1/exam/{exam_id}/my-result/

    ✅ 저장된 결과만 읽는다 (재채점 ❌) → 몇 번을 불러도 같은 payload
    """

    permission_classes = [IsAuthenticatedUser]

    def get(self, request, exam_id: int):
        exam = get_exam(exam_id)

        result = (
            ExamResult.objects
            .select_related("exam")
            .filter(exam=exam, student=request.user)
            .first()
        )
        if result is None:
            raise ResultNotFound()

        return Response({"result": MyExamResultSerializer(result).data})
