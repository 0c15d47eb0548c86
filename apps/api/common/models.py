# PATH: apps/api/common/models.py
from django.db import models


class TimestampModel(models.Model):
    """생성 / 수정 시각 자동 기록 (Course, Enrollment 등)"""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class BaseModel(TimestampModel):
    """
    시험 / 문항 / 결과 공통 베이스

    update_fields 로 저장할 때는 updated_at 을 함께 넘길 것
    (auto_now 는 update_fields 에 없으면 갱신되지 않음)
    """

    class Meta:
        abstract = True
