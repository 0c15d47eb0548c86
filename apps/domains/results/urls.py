# apps/domains/results/urls.py
from django.urls import path

from .views.exam_results_view import ExamResultFeedbackView, ExamResultsView
from .views.my_result_view import MyExamResultView
from .views.submit_view import SubmitExamView

urlpatterns = [
    path("<int:exam_id>/submit/", SubmitExamView.as_view(), name="exam-submit"),
    path("<int:exam_id>/my-result/", MyExamResultView.as_view(), name="exam-my-result"),
    path("<int:exam_id>/results/", ExamResultsView.as_view(), name="exam-results"),
    path(
        "<int:exam_id>/results/<int:result_id>/feedback/",
        ExamResultFeedbackView.as_view(),
        name="exam-result-feedback",
    ),
]
