from .exam_result import ExamResult

__all__ = ["ExamResult"]
