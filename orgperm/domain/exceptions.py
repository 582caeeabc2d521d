"""Domain exceptions for orgperm.

Query functions in the evaluator never raise; these exceptions are raised
only by guard helpers at the boundary of a privileged operation. The
presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class OrgPermException(Exception):
    """Base exception for all orgperm errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. permission, role).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the API exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(OrgPermException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthorizationException(OrgPermException):
    """Raised when a principal lacks the permission(s) a guarded operation needs."""

    def __init__(
        self,
        permissions: list[str] | None = None,
        message: str | None = None,
    ) -> None:
        """Initialize with the denied permission name(s).

        Args:
            permissions: Permission names that were required. One name means
                a single requirement; several mean any-of.
            message: Optional override; built from permissions when omitted.
        """
        permissions = list(permissions or [])
        if message is None:
            if len(permissions) == 1:
                message = f"Access denied. Required permission: {permissions[0]}"
            elif permissions:
                message = (
                    "Access denied. Required permissions: " + " OR ".join(permissions)
                )
            else:
                message = "Access denied"
        details: dict[str, Any] = {}
        if permissions:
            details["permissions"] = permissions
        super().__init__(message, "PERMISSION_DENIED", details)


class RoleRequiredException(OrgPermException):
    """Raised by guards when the caller has no role at all."""

    def __init__(self, message: str = "User role is required") -> None:
        super().__init__(message, "ROLE_REQUIRED")


class UnknownRoleException(OrgPermException):
    """Raised when a role name does not match any predefined role."""

    def __init__(self, role: str) -> None:
        super().__init__(
            f"Unknown role: {role}",
            "UNKNOWN_ROLE",
            {"role": role},
        )


class CustomRoleValidationException(OrgPermException):
    """Raised when a custom role's permission set cannot be created as requested."""

    def __init__(
        self,
        errors: list[str],
        ungrantable_permissions: list[str] | None = None,
    ) -> None:
        """Initialize with every validation error.

        Args:
            errors: Human-readable reasons, one per problem.
            ungrantable_permissions: Permission names the creator may not grant.
        """
        super().__init__(
            "Custom role permissions are invalid",
            "CUSTOM_ROLE_INVALID",
            {
                "errors": list(errors),
                "ungrantable_permissions": list(ungrantable_permissions or []),
            },
        )
