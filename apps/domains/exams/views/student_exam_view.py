# PATH: apps/domains/exams/views/student_exam_view.py
from __future__ import annotations

from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.permissions import IsAuthenticatedUser
from apps.domains.exams.serializers.exam import (
    ExamStudentSerializer,
    ExamSummarySerializer,
)
from apps.domains.exams.services.exam_access import get_exam_for_student
from apps.domains.results.models import ExamResult
from apps.domains.results.serializers.exam_result import ExamResultSerializer


class StudentExamView(APIView):
    """
    GET /api/v1/exam/{exam_id}/

    - 제출 이력 있음 → 문항 없이 요약 + 기존 결과 (재응시 화면 진입 차단)
    - 제출 이력 없음 → 응시용 문항 (정답 제외)
    """

    permission_classes = [IsAuthenticatedUser]

    def get(self, request, exam_id: int):
        exam = get_exam_for_student(exam_id, request.user)

        result = ExamResult.objects.filter(exam=exam, student=request.user).first()
        if result is not None:
            return Response({
                "exam": ExamSummarySerializer(exam).data,
                "hasSubmitted": True,
                "result": ExamResultSerializer(result).data,
            })

        return Response({
            "exam": ExamStudentSerializer(exam).data,
            "hasSubmitted": False,
            "existingResult": None,
        })
