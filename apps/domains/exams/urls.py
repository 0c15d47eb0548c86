# apps/domains/exams/urls.py
from django.urls import path

from .views.exam_create_view import ExamCreateView
from .views.exam_publish_view import ExamPublishView
from .views.student_exam_view import StudentExamView

urlpatterns = [
    path("", ExamCreateView.as_view(), name="exam-create"),
    path("<int:exam_id>/", StudentExamView.as_view(), name="exam-detail"),
    path("<int:exam_id>/publish/", ExamPublishView.as_view(), name="exam-publish"),
]
