from rest_framework import serializers

from apps.domains.exams.models import Exam
from apps.domains.exams.serializers.question import (
    QuestionStaffSerializer,
    QuestionStudentSerializer,
)


class ExamSummarySerializer(serializers.ModelSerializer):
    """이미 제출한 학생 / 결과 화면 상단에 쓰는 최소 정보"""

    type = serializers.CharField(source="exam_type")
    maxScore = serializers.IntegerField(source="max_score")
    dueDate = serializers.DateTimeField(source="due_date", allow_null=True)

    class Meta:
        model = Exam
        fields = [
            "id",
            "title",
            "description",
            "type",
            "maxScore",
            "dueDate",
        ]


class ExamStudentSerializer(ExamSummarySerializer):
    """응시 화면: 문항 포함, 정답 제외"""

    instructions = serializers.CharField()
    questions = QuestionStudentSerializer(many=True)

    class Meta(ExamSummarySerializer.Meta):
        fields = ExamSummarySerializer.Meta.fields + [
            "instructions",
            "questions",
        ]


class ExamStaffSerializer(ExamSummarySerializer):
    """교사/관리자용: 정답 포함"""

    course = serializers.IntegerField(source="course_id")
    teacher = serializers.IntegerField(source="teacher_id")
    instructions = serializers.CharField()
    isPublished = serializers.BooleanField(source="is_published")
    publishedAt = serializers.DateTimeField(source="published_at", allow_null=True)
    questions = QuestionStaffSerializer(many=True)

    class Meta(ExamSummarySerializer.Meta):
        fields = ExamSummarySerializer.Meta.fields + [
            "course",
            "teacher",
            "instructions",
            "isPublished",
            "publishedAt",
            "questions",
        ]
