from rest_framework import serializers

from apps.domains.results.serializers.exam_result import ExamResultSerializer


class ResultRowSerializer(ExamResultSerializer):
    """교사/관리자 결과 목록 행"""

    studentName = serializers.CharField(source="student.display_name")
    studentUsername = serializers.CharField(source="student.username")
    gradedBy = serializers.IntegerField(source="graded_by_id", allow_null=True)

    class Meta(ExamResultSerializer.Meta):
        fields = ExamResultSerializer.Meta.fields + [
            "studentName",
            "studentUsername",
            "gradedBy",
        ]
        read_only_fields = fields


class FeedbackSerializer(serializers.Serializer):
    feedback = serializers.CharField(allow_blank=False, max_length=5000, trim_whitespace=True)
