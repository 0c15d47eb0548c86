from rest_framework import serializers

from apps.domains.courses.models import Course
from apps.domains.exams.models import Exam
from apps.domains.exams.serializers.question import QuestionInputSerializer

MAX_QUESTIONS = 50


class ExamCreateSerializer(serializers.Serializer):
    """
    생성 전용 serializer

    문항 입력은 둘 중 하나만:
    - questions: 구조화된 문항 리스트
    - generatedText: 외부 생성 서비스가 준 "Question N: ..." 텍스트
    """

    title = serializers.CharField(min_length=3, max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    instructions = serializers.CharField(required=False, allow_blank=True, default="")
    course = serializers.PrimaryKeyRelatedField(queryset=Course.objects.filter(is_active=True))
    examType = serializers.ChoiceField(
        choices=Exam.ExamTypeChoices.choices,
        default=Exam.ExamTypeChoices.ASSIGNMENT,
    )
    dueDate = serializers.DateTimeField(required=False, allow_null=True, default=None)
    isPublished = serializers.BooleanField(required=False, default=False)
    pointsPerQuestion = serializers.IntegerField(required=False, min_value=1, default=1)

    questions = QuestionInputSerializer(many=True, required=False)
    generatedText = serializers.CharField(required=False, allow_blank=False)

    def validate_questions(self, value):
        if len(value) > MAX_QUESTIONS:
            raise serializers.ValidationError(f"at most {MAX_QUESTIONS} questions")
        return value

    def validate(self, attrs):
        has_questions = bool(attrs.get("questions"))
        has_text = bool(attrs.get("generatedText"))

        if has_questions == has_text:
            raise serializers.ValidationError(
                {"questions": "Provide exactly one of questions or generatedText."}
            )

        return attrs
