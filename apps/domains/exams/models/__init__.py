# apps/domains/exams/models/__init__.py
from .exam import Exam
from .question import ExamQuestion

__all__ = [
    "Exam",
    "ExamQuestion",
]
