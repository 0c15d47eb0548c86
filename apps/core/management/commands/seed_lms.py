# PATH: apps/core/management/commands/seed_lms.py
"""
로컬 개발용 데모 데이터

- admin / teacher / student 유저 (비밀번호 공통)
- 코스 1개 (teacher 담당) + student 수강 등록
- 공개된 2문항 시험 (Q1 정답 B 2점, Q2 정답 A 1점)

사용:
  python manage.py seed_lms --password=demo1234
"""
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.domains.courses.models import Course, Enrollment
from apps.domains.exams.models import Exam
from apps.domains.exams.services.exam_factory import ExamFactory
from lms.domain.access import Role

DEMO_QUESTIONS = [
    {
        "question": "What is 2 + 2?",
        "options": {"A": "3", "B": "4", "C": "5", "D": "22"},
        "correctAnswer": "B",
        "points": 2,
        "explanation": "Basic addition.",
    },
    {
        "question": "Which planet is closest to the sun?",
        "options": {"A": "Mercury", "B": "Venus", "C": "Earth", "D": "Mars"},
        "correctAnswer": "A",
        "points": 1,
    },
]


class Command(BaseCommand):
    help = "Seed demo users, a course, an enrollment and a published exam."

    def add_arguments(self, parser):
        parser.add_argument(
            "--password",
            type=str,
            default="demo1234",
            help="Password for all demo users (default: demo1234)",
        )

    def handle(self, *args, **options):
        password = (options["password"] or "demo1234").strip()
        User = get_user_model()

        with transaction.atomic():
            users = {}
            for role in Role:
                username = f"demo_{role.value}"
                user, created = User.objects.get_or_create(
                    username=username,
                    defaults={
                        "name": f"Demo {role.name.title()}",
                        "email": f"{username}@local.dev",
                        "role": role.value,
                        "is_staff": role is Role.ADMIN,
                    },
                )
                user.set_password(password)
                user.save(update_fields=["password"])
                users[role] = user
                if created:
                    self.stdout.write(self.style.SUCCESS(f"Created User: {username} ({role.value})"))
                else:
                    self.stdout.write(f"User already exists: {username}")

            course, _ = Course.objects.get_or_create(
                code="DEMO-101",
                defaults={"title": "Demo Course", "teacher": users[Role.TEACHER]},
            )
            Enrollment.objects.get_or_create(student=users[Role.STUDENT], course=course)

            exam = Exam.objects.filter(course=course, title="Demo Quiz").first()
            if exam is None:
                exam = ExamFactory.create(
                    author=users[Role.TEACHER],
                    course=course,
                    title="Demo Quiz",
                    description="Two question demo exam",
                    is_published=True,
                    questions=DEMO_QUESTIONS,
                )
                self.stdout.write(self.style.SUCCESS(f"Created Exam: id={exam.id} title={exam.title}"))
            else:
                self.stdout.write(f"Exam already exists: id={exam.id}")

        self.stdout.write(
            self.style.SUCCESS(
                f"Done. Log in as demo_student / {password} and open /api/v1/exam/{exam.id}/"
            )
        )
