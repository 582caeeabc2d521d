"""Tests for domain exceptions (error_code, message, details)."""

import pytest

from orgperm.domain.exceptions import (
    AuthorizationException,
    CustomRoleValidationException,
    OrgPermException,
    RoleRequiredException,
    UnknownRoleException,
    ValidationException,
)


def test_orgperm_exception_default_error_code() -> None:
    """Base OrgPermException uses class name as error_code when not provided."""
    exc = OrgPermException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "OrgPermException"
    assert exc.details == {}


def test_orgperm_exception_to_dict() -> None:
    exc = OrgPermException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid format", field="id")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "id"}
    assert ValidationException("Invalid").details == {}


def test_authorization_exception_single_permission() -> None:
    exc = AuthorizationException(permissions=["crm:write"])
    assert exc.message == "Access denied. Required permission: crm:write"
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.details == {"permissions": ["crm:write"]}


def test_authorization_exception_any_of() -> None:
    exc = AuthorizationException(permissions=["crm:write", "crm:admin"])
    assert exc.message == "Access denied. Required permissions: crm:write OR crm:admin"


def test_authorization_exception_default() -> None:
    exc = AuthorizationException()
    assert exc.message == "Access denied"
    assert exc.details == {}


def test_authorization_exception_custom_message() -> None:
    exc = AuthorizationException(message="Access denied. Cannot assign role: VIEWER")
    assert exc.message == "Access denied. Cannot assign role: VIEWER"
    assert exc.error_code == "PERMISSION_DENIED"


def test_role_required_exception() -> None:
    exc = RoleRequiredException()
    assert exc.message == "User role is required"
    assert exc.error_code == "ROLE_REQUIRED"


def test_unknown_role_exception() -> None:
    exc = UnknownRoleException("CHIEF")
    assert exc.message == "Unknown role: CHIEF"
    assert exc.error_code == "UNKNOWN_ROLE"
    assert exc.details == {"role": "CHIEF"}


def test_custom_role_validation_exception() -> None:
    exc = CustomRoleValidationException(["bad"], ungrantable_permissions=["hr:admin"])
    assert exc.error_code == "CUSTOM_ROLE_INVALID"
    assert exc.details == {"errors": ["bad"], "ungrantable_permissions": ["hr:admin"]}


def test_all_are_orgperm_exceptions() -> None:
    with pytest.raises(OrgPermException):
        raise RoleRequiredException()
