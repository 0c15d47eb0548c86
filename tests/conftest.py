import pytest
from rest_framework.test import APIClient

from apps.core.models import User
from apps.domains.courses.models import Course, Enrollment
from apps.domains.exams.models import Exam, ExamQuestion


def make_user(username, role, **extra):
    return User.objects.create_user(
        username=username,
        password="pw-12345",
        role=role,
        name=username.title(),
        **extra,
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_user(db):
    return make_user("admin1", "admin")


@pytest.fixture
def teacher(db):
    return make_user("teacher1", "teacher")


@pytest.fixture
def other_teacher(db):
    return make_user("teacher2", "teacher")


@pytest.fixture
def student(db):
    return make_user("student1", "student")


@pytest.fixture
def other_student(db):
    return make_user("student2", "student")


@pytest.fixture
def course(teacher):
    return Course.objects.create(title="Algebra", code="ALG-1", teacher=teacher)


@pytest.fixture
def enrollment(course, student):
    return Enrollment.objects.create(student=student, course=course)


def add_question(exam, index, correct, points=1, text=None):
    return ExamQuestion.objects.create(
        exam=exam,
        index=index,
        text=text or f"Question {index + 1}",
        option_a="alpha",
        option_b="beta",
        option_c="gamma",
        option_d="delta",
        correct_answer=correct,
        points=points,
        explanation=f"Explanation {index + 1}",
    )


@pytest.fixture
def exam(course, teacher, enrollment):
    """Q1 정답 B (2점), Q2 정답 A (1점), 공개됨"""
    exam = Exam.objects.create(
        title="Quiz 1",
        description="two questions",
        course=course,
        teacher=teacher,
        is_published=True,
    )
    add_question(exam, 0, "B", points=2)
    add_question(exam, 1, "A", points=1)
    return exam


@pytest.fixture
def as_user(api_client):
    def _as(user):
        api_client.force_authenticate(user=user)
        return api_client
    return _as


def answers_payload(*choices):
    return [
        {"questionIndex": i, "selectedAnswer": c}
        for i, c in enumerate(choices)
    ]
