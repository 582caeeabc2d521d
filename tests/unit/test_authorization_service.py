"""Tests for AuthorizationService guards (require_* raise, check_* return)."""

import logging

import pytest

from orgperm.application.services import AuthorizationService
from orgperm.domain.entities import (
    CustomRoleTarget,
    PredefinedAuthority,
    UserOrganization,
)
from orgperm.domain.enums import UserRole
from orgperm.domain.exceptions import (
    AuthorizationException,
    CustomRoleValidationException,
    RoleRequiredException,
)


@pytest.fixture
def auth_svc() -> AuthorizationService:
    return AuthorizationService()


class TestRequirePermission:
    def test_allowed_returns_none(self, auth_svc: AuthorizationService) -> None:
        assert auth_svc.require_permission(UserRole.FINANCE_MANAGER, "finance:read") is None

    def test_denied_carries_permission(self, auth_svc: AuthorizationService) -> None:
        with pytest.raises(AuthorizationException) as exc_info:
            auth_svc.require_permission(UserRole.FINANCE_MANAGER, "hr:write")
        assert exc_info.value.message == "Access denied. Required permission: hr:write"
        assert exc_info.value.details == {"permissions": ["hr:write"]}

    def test_denial_is_logged(
        self, auth_svc: AuthorizationService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            with pytest.raises(AuthorizationException):
                auth_svc.require_permission(UserRole.VIEWER, "crm:write")
        assert "Permission denied: crm:write" in caplog.text

    @pytest.mark.parametrize(
        "subject",
        [None, "", UserOrganization(user_id="u1", organization_id="o1")],
    )
    def test_no_role(self, auth_svc: AuthorizationService, subject) -> None:
        with pytest.raises(RoleRequiredException):
            auth_svc.require_permission(subject, "crm:read")

    def test_custom_role(self, auth_svc: AuthorizationService, make_custom) -> None:
        authority = make_custom("crm:write")
        auth_svc.require_permission(authority, "crm:read")
        with pytest.raises(AuthorizationException):
            auth_svc.require_permission(authority, "crm:admin")


class TestRequireAnyPermission:
    def test_allowed(self, auth_svc: AuthorizationService) -> None:
        auth_svc.require_any_permission(UserRole.EMPLOYEE, ["crm:write", "crm:read"])

    def test_denied_lists_all(self, auth_svc: AuthorizationService) -> None:
        with pytest.raises(AuthorizationException) as exc_info:
            auth_svc.require_any_permission(UserRole.CONTRACTOR, ["crm:read", "hr:read"])
        assert exc_info.value.message == (
            "Access denied. Required permissions: crm:read OR hr:read"
        )
        assert exc_info.value.details["permissions"] == ["crm:read", "hr:read"]

    def test_no_role(self, auth_svc: AuthorizationService) -> None:
        with pytest.raises(RoleRequiredException):
            auth_svc.require_any_permission(None, ["crm:read"])


class TestCheckPermission:
    def test_check_never_raises(self, auth_svc: AuthorizationService) -> None:
        assert auth_svc.check_permission(UserRole.VIEWER, "crm:read")
        assert not auth_svc.check_permission(None, "crm:read")
        assert auth_svc.effective_permissions(None) == []


class TestCustomRoleValidation:
    def test_catalog_errors_merged(self, auth_svc: AuthorizationService) -> None:
        result = auth_svc.validate_custom_role(
            UserRole.ORGANIZATION_OWNER, ["crm:read", "billing:read"]
        )
        assert not result.valid
        assert result.errors == ("Invalid permissions: billing:read",)

    def test_catalog_check_disabled(self) -> None:
        auth_svc = AuthorizationService(enforce_permission_catalog=False)
        result = auth_svc.validate_custom_role(
            UserRole.ORGANIZATION_OWNER, ["crm:read", "billing:read"]
        )
        assert result.valid

    def test_missing_read_reported_once(self, auth_svc: AuthorizationService) -> None:
        result = auth_svc.validate_custom_role(UserRole.SUPER_ADMIN, ["crm:write"])
        assert result.errors == ("Custom role must include at least one read permission",)

    def test_require_returns_requested(self, auth_svc: AuthorizationService) -> None:
        requested = ["crm:read", "crm:write"]
        assert auth_svc.require_custom_role_permissions(UserRole.SUPER_ADMIN, requested) == requested

    def test_require_raises_with_every_error(self, auth_svc: AuthorizationService) -> None:
        with pytest.raises(CustomRoleValidationException) as exc_info:
            auth_svc.require_custom_role_permissions(
                UserRole.EMPLOYEE, ["hr:admin", "finance:write"]
            )
        details = exc_info.value.details
        assert details["ungrantable_permissions"] == ["hr:admin", "finance:write"]
        assert len(details["errors"]) == 3


class TestRequireRoleAssignment:
    def test_allowed(self, auth_svc: AuthorizationService) -> None:
        auth_svc.require_role_assignment(
            PredefinedAuthority(UserRole.SUPER_ADMIN), UserRole.DEPARTMENT_MANAGER
        )

    def test_denied_predefined_target(self, auth_svc: AuthorizationService) -> None:
        with pytest.raises(AuthorizationException, match="Cannot assign role: SUPER_ADMIN"):
            auth_svc.require_role_assignment(
                PredefinedAuthority(UserRole.SUPER_ADMIN), UserRole.SUPER_ADMIN
            )

    def test_denied_custom_target(self, auth_svc: AuthorizationService) -> None:
        with pytest.raises(AuthorizationException, match="Cannot assign role: cr-7"):
            auth_svc.require_role_assignment(
                PredefinedAuthority(UserRole.EMPLOYEE), CustomRoleTarget("cr-7")
            )

    def test_no_role(self, auth_svc: AuthorizationService) -> None:
        with pytest.raises(RoleRequiredException):
            auth_svc.require_role_assignment(None, UserRole.VIEWER)
