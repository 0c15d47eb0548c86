# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Domain APIs
    # =========================
    # 시험 응시 / 제출 / 결과는 모두 exam/ 하위 (프론트 계약)
    path("exam/", include("apps.domains.exams.urls")),
    path("exam/", include("apps.domains.results.urls")),

    path("core/", include("apps.core.urls")),
]
