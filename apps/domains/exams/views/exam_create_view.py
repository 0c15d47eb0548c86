# PATH: apps/domains/exams/views/exam_create_view.py
"""
POST /api/v1/exam/
교사/관리자 시험 생성 (구조화 문항 또는 생성 텍스트)
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.permissions import IsTeacherOrAdmin
from apps.domains.exams.serializers.exam import ExamStaffSerializer
from apps.domains.exams.serializers.exam_create import ExamCreateSerializer
from apps.domains.exams.services.exam_factory import ExamFactory


class ExamCreateView(APIView):
    permission_classes = [IsTeacherOrAdmin]

    def post(self, request):
        serializer = ExamCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        exam = ExamFactory.create(
            author=request.user,
            course=data["course"],
            title=data["title"],
            description=data["description"],
            instructions=data["instructions"],
            exam_type=data["examType"],
            due_date=data["dueDate"],
            is_published=data["isPublished"],
            questions=data.get("questions"),
            generated_text=data.get("generatedText"),
            points_per_question=data["pointsPerQuestion"],
        )

        return Response(
            {"exam": ExamStaffSerializer(exam).data},
            status=status.HTTP_201_CREATED,
        )
