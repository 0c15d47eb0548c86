"""
AccessGuard 정책 — 순수 파이썬

정책 = "역할에 대한 술어(predicate) + 거부 메시지".
check()는 부수효과 없이 통과(None) 또는 예외만 낸다.

검사 순서 (고정):
1) principal 없음 → Unauthenticated (역할 검사 전에)
2) 술어 불만족 → Forbidden(policy.message)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .errors import Forbidden, Unauthenticated
from .roles import Role


@dataclass(frozen=True)
class Principal:
    """인증된 요청 주체. 요청 수명 동안 불변."""
    user_id: int
    role: Role


@dataclass(frozen=True)
class Policy:
    name: str
    predicate: Callable[[Role], bool]
    message: str

    def allows(self, role: Role) -> bool:
        return bool(self.predicate(role))


def require_role(exact: Role, *, name: Optional[str] = None, message: Optional[str] = None) -> Policy:
    exact = Role.parse(exact)
    return Policy(
        name=name or f"{exact.value}-only",
        predicate=lambda role: role is exact,
        message=message or f"Access denied. {exact.name.title()} privileges required.",
    )


def require_any_role(roles: Iterable[Role], *, name: Optional[str] = None, message: Optional[str] = None) -> Policy:
    allowed = frozenset(Role.parse(r) for r in roles)
    if not allowed:
        raise ValueError("require_any_role needs at least one role")

    ordered = [r for r in Role if r in allowed]
    return Policy(
        name=name or "-or-".join(r.value for r in ordered),
        predicate=lambda role: role in allowed,
        message=message or (
            "Access denied. "
            + " or ".join(r.name.title() for r in ordered)
            + " privileges required."
        ),
    )


def require_non_student(*, name: str = "staff-only", message: str = "Access denied. Staff privileges required.") -> Policy:
    return Policy(
        name=name,
        predicate=lambda role: role.is_staff,
        message=message,
    )


# ==================================================
# 라우트에서 쓰는 정책 3종
# ==================================================

TEACHER_ONLY = require_role(Role.TEACHER, name="teacher-only")

TEACHER_OR_ADMIN = require_any_role(
    [Role.TEACHER, Role.ADMIN],
    name="teacher-or-admin",
    message="Access denied. Teacher or Admin privileges required.",
)

STAFF_ONLY = require_non_student()

# 역할 무관, 로그인만 요구 (학생 응시 라우트)
AUTHENTICATED = require_any_role(list(Role), name="authenticated")


def check(principal: Optional[Principal], policy: Policy) -> None:
    if principal is None:
        raise Unauthenticated()

    if not policy.allows(principal.role):
        raise Forbidden(policy.message, policy=policy.name)
