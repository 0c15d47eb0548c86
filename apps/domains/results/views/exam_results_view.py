# PATH: apps/domains/results/views/exam_results_view.py
"""
교사/관리자 시험 결과 화면

GET   /api/v1/exam/{exam_id}/results/?status=graded
PATCH /api/v1/exam/{exam_id}/results/{result_id}/feedback/
"""
from __future__ import annotations

from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.permissions import IsTeacher, IsTeacherOrAdmin
from apps.domains.exams.serializers.exam import ExamSummarySerializer
from apps.domains.exams.services.exam_access import get_exam
from apps.domains.results.filters import ExamResultFilter
from apps.domains.results.models import ExamResult
from apps.domains.results.serializers.result_row import (
    FeedbackSerializer,
    ResultRowSerializer,
)
from apps.domains.results.services.feedback_service import give_feedback
from apps.domains.results.services.ownership import ensure_exam_owner
from lms.domain.exams.statistics import ResultRow, summarize


class ExamResultsView(APIView):
    permission_classes = [IsTeacherOrAdmin]

    def get(self, request, exam_id: int):
        exam = get_exam(exam_id)
        ensure_exam_owner(request.user, exam)

        base_qs = (
            ExamResult.objects
            .filter(exam=exam)
            .select_related("student")
            .order_by("-score", "submitted_at", "id")
        )

        filterset = ExamResultFilter(request.query_params, queryset=base_qs)
        if not filterset.is_valid():
            raise ValidationError(filterset.errors)

        # 통계는 필터와 무관하게 시험 전체 기준
        statistics = summarize(
            ResultRow(score=r.score, percentage=r.percentage, status=r.status)
            for r in base_qs
        )

        return Response({
            "exam": ExamSummarySerializer(exam).data,
            "results": ResultRowSerializer(filterset.qs, many=True).data,
            "statistics": {
                **statistics,
                "averageScore": float(statistics["averageScore"]),
                "averagePercentage": float(statistics["averagePercentage"]),
            },
        })


class ExamResultFeedbackView(APIView):
    permission_classes = [IsTeacher]

    def patch(self, request, exam_id: int, result_id: int):
        exam = get_exam(exam_id)
        ensure_exam_owner(request.user, exam)

        serializer = FeedbackSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = give_feedback(
            exam=exam,
            result_id=result_id,
            feedback=serializer.validated_data["feedback"],
            grader=request.user,
        )
        return Response({"result": ResultRowSerializer(result).data})
