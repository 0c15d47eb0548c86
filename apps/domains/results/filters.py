import django_filters

from apps.domains.results.models import ExamResult


class ExamResultFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=ExamResult.Status.choices)
    min_score = django_filters.NumberFilter(field_name="score", lookup_expr="gte")

    class Meta:
        model = ExamResult
        fields = ["status", "min_score"]
