from rest_framework import serializers

from apps.domains.results.serializers.exam_result import ExamResultSerializer


class MyExamResultSerializer(ExamResultSerializer):
    """
    학생 본인 결과 + 문항별 해설 (examDetails)

    ✅ 제출 이후에만 노출되므로 정답/해설 포함 허용
    ✅ 저장된 answers 기준으로 만든다 (재채점 ❌) → 반복 조회 결과 동일
    """

    examDetails = serializers.SerializerMethodField()

    class Meta(ExamResultSerializer.Meta):
        fields = ExamResultSerializer.Meta.fields + ["examDetails"]
        read_only_fields = fields

    def get_examDetails(self, obj):
        exam = obj.exam
        answers = {a["questionIndex"]: a for a in (obj.answers or [])}

        questions = []
        # 채점 시 questionIndex 는 index 정렬 기준 위치 (index 값 자체가 아님)
        for position, q in enumerate(exam.questions.all().order_by("index")):
            a = answers.get(position) or {}
            questions.append({
                "index": position,
                "question": q.text,
                "options": q.options,
                "correctAnswer": q.correct_answer,
                "studentAnswer": a.get("selectedAnswer"),
                "isCorrect": bool(a.get("isCorrect", False)),
                "points": int(q.points),
                "earned": int(a.get("points", 0)),
                "explanation": q.explanation,
            })

        return {
            "title": exam.title,
            "description": exam.description,
            "type": exam.exam_type,
            "questions": questions,
        }
