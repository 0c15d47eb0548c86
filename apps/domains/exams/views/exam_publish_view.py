# PATH: apps/domains/exams/views/exam_publish_view.py
from __future__ import annotations

import logging

from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.permissions import IsStaff
from apps.domains.exams.serializers.exam import ExamStaffSerializer
from apps.domains.exams.serializers.exam_publish import ExamPublishSerializer
from apps.domains.exams.services.exam_access import get_exam

logger = logging.getLogger(__name__)


class ExamPublishView(APIView):
    """PATCH /api/v1/exam/{exam_id}/publish/ — 공개 여부 토글"""

    permission_classes = [IsStaff]

    def patch(self, request, exam_id: int):
        exam = get_exam(exam_id)

        serializer = ExamPublishSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        exam.set_published(serializer.validated_data["isPublished"])
        logger.info(
            "exam publish toggled exam_id=%s published=%s by user_id=%s",
            exam.id,
            exam.is_published,
            request.user.id,
        )
        return Response({"exam": ExamStaffSerializer(exam).data})
