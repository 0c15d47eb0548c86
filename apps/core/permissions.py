# PATH: apps/core/permissions.py
"""
AccessGuard DRF 어댑터

정책 판단은 lms.domain.access 가 단일 진실.
여기서는 request → Principal 변환 + 도메인 오류 → DRF 예외 변환만 한다.

- principal 없음 → NotAuthenticated (401)
- 역할 불충분  → PermissionDenied (403, 정책별 메시지)

has_permission 에서 직접 raise 하므로 실패 시 뷰 핸들러는 절대 실행되지 않는다.
"""
from __future__ import annotations

import logging
from typing import Optional

from rest_framework import exceptions
from rest_framework.permissions import BasePermission

from lms.domain.access import (
    AUTHENTICATED,
    STAFF_ONLY,
    TEACHER_ONLY,
    TEACHER_OR_ADMIN,
    Forbidden,
    Policy,
    Principal,
    Unauthenticated,
    check,
)

logger = logging.getLogger(__name__)


def principal_from_request(request) -> Optional[Principal]:
    user = getattr(request, "user", None)
    if not user or not getattr(user, "is_authenticated", False):
        return None
    return user.as_principal()


class RolePolicyPermission(BasePermission):
    policy: Policy = None

    def has_permission(self, request, view):
        principal = principal_from_request(request)
        try:
            check(principal, self.policy)
        except Unauthenticated as e:
            raise exceptions.NotAuthenticated(e.message)
        except Forbidden as e:
            logger.info(
                "access denied policy=%s user_id=%s role=%s path=%s",
                e.policy,
                principal.user_id,
                principal.role.value,
                getattr(request, "path", ""),
            )
            raise exceptions.PermissionDenied(e.message)
        return True


class IsAuthenticatedUser(RolePolicyPermission):
    """로그인만 요구. 미인증 메시지를 정책과 동일하게 맞추기 위해 DRF IsAuthenticated 대신 사용."""
    policy = AUTHENTICATED


class IsTeacher(RolePolicyPermission):
    """교사 전용"""
    policy = TEACHER_ONLY


class IsTeacherOrAdmin(RolePolicyPermission):
    """교사 또는 관리자"""
    policy = TEACHER_OR_ADMIN


class IsStaff(RolePolicyPermission):
    """학생이 아닌 모든 역할 (staff)"""
    policy = STAFF_ONLY
