"""
접근 제어 오류 — 순수 파이썬

- Unauthenticated: principal 없음 → 401
- Forbidden: principal 있음, 역할 불충분 → 403 (정책별 메시지)
"""
from __future__ import annotations


class AccessDenied(Exception):
    status_code = 403

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class Unauthenticated(AccessDenied):
    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class Forbidden(AccessDenied):
    status_code = 403

    def __init__(self, message: str, *, policy: str = ""):
        self.policy = policy
        super().__init__(message)
