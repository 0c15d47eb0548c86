from rest_framework import serializers

from apps.domains.exams.models import ExamQuestion
from lms.domain.exams.entities import Choice


class OptionsSerializer(serializers.Serializer):
    A = serializers.CharField(trim_whitespace=True)
    B = serializers.CharField(trim_whitespace=True)
    C = serializers.CharField(trim_whitespace=True)
    D = serializers.CharField(trim_whitespace=True)


class QuestionInputSerializer(serializers.Serializer):
    """시험 생성 시 구조화된 문항 입력"""

    question = serializers.CharField()
    options = OptionsSerializer()
    correctAnswer = serializers.ChoiceField(choices=[c.value for c in Choice])
    explanation = serializers.CharField(required=False, allow_blank=True, default="")
    points = serializers.IntegerField(required=False, min_value=1, default=1)

    def to_internal_value(self, data):
        # 정답 소문자 허용
        if isinstance(data, dict) and isinstance(data.get("correctAnswer"), str):
            data = {**data, "correctAnswer": data["correctAnswer"].strip().upper()}
        return super().to_internal_value(data)


class QuestionStudentSerializer(serializers.ModelSerializer):
    """
    ✅ 학생 응시 화면용 — 정답/해설 절대 포함 금지
    """

    question = serializers.CharField(source="text")
    options = serializers.DictField(child=serializers.CharField())

    class Meta:
        model = ExamQuestion
        fields = [
            "question",
            "options",
            "points",
        ]


class QuestionStaffSerializer(serializers.ModelSerializer):
    question = serializers.CharField(source="text")
    options = serializers.DictField(child=serializers.CharField())
    correctAnswer = serializers.CharField(source="correct_answer")

    class Meta:
        model = ExamQuestion
        fields = [
            "index",
            "question",
            "options",
            "correctAnswer",
            "explanation",
            "points",
        ]
