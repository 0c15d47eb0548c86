import pytest

from lms.domain.access import (
    AUTHENTICATED,
    STAFF_ONLY,
    TEACHER_ONLY,
    TEACHER_OR_ADMIN,
    Forbidden,
    Principal,
    Role,
    Unauthenticated,
    check,
    require_any_role,
    require_non_student,
    require_role,
)


def principal(role):
    return Principal(user_id=1, role=role)


class TestRole:
    def test_parse_is_case_insensitive(self):
        assert Role.parse(" Teacher ") is Role.TEACHER

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError, match="unknown role"):
            Role.parse("superuser")

    def test_is_staff(self):
        assert Role.ADMIN.is_staff
        assert Role.TEACHER.is_staff
        assert not Role.STUDENT.is_staff


class TestRequireRole:
    @pytest.mark.parametrize("role", list(Role))
    def test_passes_only_for_exact_role(self, role):
        policy = require_role(Role.TEACHER)
        assert policy.allows(role) is (role is Role.TEACHER)

    def test_default_message(self):
        assert require_role(Role.ADMIN).message == "Access denied. Admin privileges required."


class TestRequireAnyRole:
    def test_membership(self):
        policy = require_any_role([Role.TEACHER, Role.ADMIN])
        assert policy.allows(Role.TEACHER)
        assert policy.allows(Role.ADMIN)
        assert not policy.allows(Role.STUDENT)

    def test_empty_roles_rejected(self):
        with pytest.raises(ValueError):
            require_any_role([])


class TestRequireNonStudent:
    def test_all_but_student(self):
        policy = require_non_student()
        assert policy.allows(Role.ADMIN)
        assert policy.allows(Role.TEACHER)
        assert not policy.allows(Role.STUDENT)


class TestStaffOnly:
    @pytest.mark.parametrize("role", list(Role))
    def test_follows_role_is_staff(self, role):
        assert STAFF_ONLY.allows(role) is role.is_staff


class TestCheck:
    @pytest.mark.parametrize("policy", [TEACHER_ONLY, TEACHER_OR_ADMIN, STAFF_ONLY, AUTHENTICATED])
    def test_missing_principal_is_unauthenticated_before_role_check(self, policy):
        with pytest.raises(Unauthenticated) as e:
            check(None, policy)
        assert e.value.status_code == 401
        assert e.value.message == "Authentication required"

    @pytest.mark.parametrize(
        "policy,role,message",
        [
            (TEACHER_ONLY, Role.STUDENT, "Access denied. Teacher privileges required."),
            (TEACHER_ONLY, Role.ADMIN, "Access denied. Teacher privileges required."),
            (TEACHER_OR_ADMIN, Role.STUDENT, "Access denied. Teacher or Admin privileges required."),
            (STAFF_ONLY, Role.STUDENT, "Access denied. Staff privileges required."),
        ],
    )
    def test_forbidden_messages(self, policy, role, message):
        with pytest.raises(Forbidden) as e:
            check(principal(role), policy)
        assert e.value.status_code == 403
        assert e.value.message == message
        assert e.value.policy == policy.name

    @pytest.mark.parametrize(
        "policy,role",
        [
            (TEACHER_ONLY, Role.TEACHER),
            (TEACHER_OR_ADMIN, Role.TEACHER),
            (TEACHER_OR_ADMIN, Role.ADMIN),
            (STAFF_ONLY, Role.ADMIN),
            (STAFF_ONLY, Role.TEACHER),
            (AUTHENTICATED, Role.STUDENT),
        ],
    )
    def test_allowed_returns_none(self, policy, role):
        assert check(principal(role), policy) is None
