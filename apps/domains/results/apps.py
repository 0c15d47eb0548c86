from django.apps import AppConfig


class ResultsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"

    # 🔥 Django 내부 경로
    name = "apps.domains.results"

    # 🔥 migration / FK 참조용 앱 라벨
    label = "results"
