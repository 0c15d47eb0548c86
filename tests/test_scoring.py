from decimal import Decimal

import pytest

from lms.domain.exams.entities import Choice, Question
from lms.domain.exams.scoring import grade, percentage_of
from lms.domain.exams.statistics import ResultRow, summarize


def q(correct, points=1):
    return Question(
        text="q",
        options={Choice.A: "a", Choice.B: "b", Choice.C: "c", Choice.D: "d"},
        correct=Choice(correct),
        points=points,
    )


class TestPercentage:
    def test_half_up_two_decimals(self):
        assert percentage_of(2, 3) == Decimal("66.67")
        assert percentage_of(1, 3) == Decimal("33.33")
        assert percentage_of(1, 8) == Decimal("12.50")

    def test_zero_max_score(self):
        assert percentage_of(0, 0) == Decimal("0.00")

    def test_full(self):
        assert percentage_of(5, 5) == Decimal("100.00")


class TestGrade:
    def test_end_to_end_example(self):
        score = grade([q("B", 2), q("A", 1)], [Choice.B, Choice.C])
        assert score.score == 2
        assert score.max_score == 3
        assert score.percentage == Decimal("66.67")
        assert [a.is_correct for a in score.answers] == [True, False]
        assert [a.points for a in score.answers] == [2, 0]

    def test_unanswered_scores_zero(self):
        score = grade([q("A"), q("B")], [None, None])
        assert score.score == 0
        assert score.max_score == 2
        assert score.answers[0].as_dict() == {
            "questionIndex": 0,
            "selectedAnswer": None,
            "isCorrect": False,
            "points": 0,
        }

    @pytest.mark.parametrize("k", [0, 1, 3, 4])
    def test_k_correct_of_n_unit_questions(self, k):
        n = 4
        questions = [q("A") for _ in range(n)]
        selections = [Choice.A] * k + [Choice.B] * (n - k)
        score = grade(questions, selections)
        assert score.score == k
        assert score.correct_count == k
        assert score.percentage == percentage_of(k, n)

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            grade([q("A")], [])


class TestQuestion:
    def test_requires_all_four_options(self):
        with pytest.raises(ValueError):
            Question(text="q", options={Choice.A: "a"}, correct=Choice.A)

    def test_points_must_be_positive(self):
        with pytest.raises(ValueError):
            q("A", points=0)


class TestSummarize:
    def test_empty(self):
        stats = summarize([])
        assert stats["totalStudents"] == 0
        assert stats["averageScore"] == Decimal("0.00")

    def test_aggregates(self):
        stats = summarize([
            ResultRow(score=2, percentage=Decimal("66.67"), status="submitted"),
            ResultRow(score=3, percentage=Decimal("100.00"), status="graded"),
            ResultRow(score=0, percentage=Decimal("0.00"), status="submitted"),
        ])
        assert stats["totalStudents"] == 3
        assert stats["submitted"] == 3
        assert stats["averageScore"] == Decimal("1.67")
        assert stats["averagePercentage"] == Decimal("55.56")
        assert stats["highestScore"] == 3
        assert stats["lowestScore"] == 0
