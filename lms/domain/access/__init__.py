"""
접근 제어(AccessGuard) 도메인 — 순수 파이썬

DRF 어댑터: apps.core.permissions
"""
from .errors import AccessDenied, Forbidden, Unauthenticated
from .policies import (
    AUTHENTICATED,
    STAFF_ONLY,
    TEACHER_ONLY,
    TEACHER_OR_ADMIN,
    Policy,
    Principal,
    check,
    require_any_role,
    require_non_student,
    require_role,
)
from .roles import Role

__all__ = [
    "AUTHENTICATED",
    "AccessDenied",
    "Forbidden",
    "Unauthenticated",
    "Policy",
    "Principal",
    "Role",
    "check",
    "require_any_role",
    "require_non_student",
    "require_role",
    "STAFF_ONLY",
    "TEACHER_ONLY",
    "TEACHER_OR_ADMIN",
]
