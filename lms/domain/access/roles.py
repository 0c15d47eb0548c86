"""
역할(Role) — 닫힌 열거형

apps.core.models.User.role 컬럼에는 value 문자열이 저장된다.
호출부에서 role 문자열을 직접 비교하지 않는다 (항상 Role.parse 경유).
"""
from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"

    @classmethod
    def parse(cls, raw) -> "Role":
        """
        DB/토큰에서 온 값을 Role로 변환.
        알 수 없는 값은 ValueError (오타가 권한 우회로 이어지지 않도록).
        """
        if isinstance(raw, cls):
            return raw
        value = str(raw or "").strip().lower()
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown role: {raw!r}") from None

    @classmethod
    def choices(cls) -> list[tuple[str, str]]:
        return [(r.value, r.name.title()) for r in cls]

    @property
    def is_staff(self) -> bool:
        return self is not Role.STUDENT
