from rest_framework import serializers

from apps.domains.results.models import ExamResult


class AnswerSerializer(serializers.Serializer):
    questionIndex = serializers.IntegerField()
    selectedAnswer = serializers.CharField(allow_null=True)
    isCorrect = serializers.BooleanField()
    points = serializers.IntegerField()


class ExamResultSerializer(serializers.ModelSerializer):
    """
    학생 결과 (제출 응답 / 재조회 / 409 body 공용)
    percentage 는 JSON number (66.67)
    """

    exam = serializers.IntegerField(source="exam_id")
    student = serializers.IntegerField(source="student_id")
    answers = AnswerSerializer(many=True)
    maxScore = serializers.IntegerField(source="max_score")
    percentage = serializers.DecimalField(max_digits=5, decimal_places=2, coerce_to_string=False)
    timeSpent = serializers.IntegerField(source="time_spent")
    startedAt = serializers.DateTimeField(source="started_at", allow_null=True)
    submittedAt = serializers.DateTimeField(source="submitted_at")
    isAutoGraded = serializers.BooleanField(source="is_auto_graded")
    gradedAt = serializers.DateTimeField(source="graded_at", allow_null=True)

    class Meta:
        model = ExamResult
        fields = [
            "id",
            "exam",
            "student",
            "answers",
            "score",
            "maxScore",
            "percentage",
            "timeSpent",
            "startedAt",
            "submittedAt",
            "status",
            "isAutoGraded",
            "feedback",
            "gradedAt",
        ]
        read_only_fields = fields
