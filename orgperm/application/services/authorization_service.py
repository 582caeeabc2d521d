"""Authorization service: guards for privileged operations.

Query functions in orgperm.domain return booleans and structured results.
This service turns a negative answer into an exception at the boundary of
a privileged operation (e.g. before an API handler mutates state).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from orgperm.domain.assignment import can_assign_role_to
from orgperm.domain.delegation import (
    CustomRoleValidation,
    validate_custom_role_catalog,
    validate_custom_role_permissions,
)
from orgperm.domain.entities.principal import Authority, RoleTarget, UserOrganization
from orgperm.domain.enums import UserRole
from orgperm.domain.exceptions import (
    AuthorizationException,
    CustomRoleValidationException,
    RoleRequiredException,
)
from orgperm.domain.permissions import (
    Subject,
    get_user_effective_permissions,
    has_any_permission,
    has_permission,
)

logger = logging.getLogger(__name__)


def _has_role(subject: Subject) -> bool:
    if subject is None:
        return False
    if isinstance(subject, str):
        return bool(subject)
    if isinstance(subject, UserOrganization):
        return subject.authority is not None
    return True


class AuthorizationService:
    """Centralized guard checks; stateless apart from the catalog setting."""

    def __init__(self, enforce_permission_catalog: bool = True) -> None:
        self.enforce_permission_catalog = enforce_permission_catalog

    def check_permission(self, subject: Subject, permission: str) -> bool:
        """Return True if subject holds permission (directly or by inference)."""
        return has_permission(subject, permission)

    def require_permission(self, subject: Subject, permission: str) -> None:
        """Raise unless subject holds permission.

        Raises:
            RoleRequiredException: If subject has no role.
            AuthorizationException: If permission is not held.
        """
        if not _has_role(subject):
            raise RoleRequiredException()
        if not has_permission(subject, permission):
            logger.warning("Permission denied: %s", permission)
            raise AuthorizationException(permissions=[permission])

    def require_any_permission(self, subject: Subject, permissions: Iterable[str]) -> None:
        """Raise unless subject holds at least one of permissions.

        Raises:
            RoleRequiredException: If subject has no role.
            AuthorizationException: If none of permissions is held.
        """
        required = list(permissions)
        if not _has_role(subject):
            raise RoleRequiredException()
        if not has_any_permission(subject, required):
            logger.warning("Permission denied: none of %s", ", ".join(required))
            raise AuthorizationException(permissions=required)

    def validate_custom_role(
        self,
        creator_role: UserRole | str | None,
        requested_permissions: Iterable[str],
    ) -> CustomRoleValidation:
        """Run grant validation and, when enabled, the catalog check.

        Errors from both checks are merged; the missing-read error is
        reported once.
        """
        requested = list(requested_permissions)
        result = validate_custom_role_permissions(creator_role, requested)
        if not self.enforce_permission_catalog:
            return result

        catalog = validate_custom_role_catalog(requested)
        errors = list(result.errors)
        for error in catalog.errors:
            if error.startswith("Invalid permissions:"):
                errors.append(error)
        return CustomRoleValidation(
            valid=not errors,
            errors=tuple(errors),
            ungrantable_permissions=result.ungrantable_permissions,
        )

    def require_custom_role_permissions(
        self,
        creator_role: UserRole | str | None,
        requested_permissions: Iterable[str],
    ) -> list[str]:
        """Return the requested names if valid; otherwise raise with every error.

        Raises:
            CustomRoleValidationException: If any permission is ungrantable,
                unknown, or no read permission is present.
        """
        requested = list(requested_permissions)
        result = self.validate_custom_role(creator_role, requested)
        if not result.valid:
            logger.info(
                "Rejected custom role: %d error(s), ungrantable=%s",
                len(result.errors),
                list(result.ungrantable_permissions),
            )
            raise CustomRoleValidationException(
                errors=list(result.errors),
                ungrantable_permissions=list(result.ungrantable_permissions),
            )
        return requested

    def require_role_assignment(
        self,
        principal: UserOrganization | Authority | None,
        target: RoleTarget,
    ) -> None:
        """Raise unless principal may assign target to another member.

        Raises:
            RoleRequiredException: If principal has no role.
            AuthorizationException: If the assignment is not allowed.
        """
        if not _has_role(principal):
            raise RoleRequiredException()
        if not can_assign_role_to(principal, target):
            target_name = target.value if isinstance(target, UserRole) else target.custom_role_id
            logger.warning("Role assignment denied: target=%s", target_name)
            raise AuthorizationException(
                message=f"Access denied. Cannot assign role: {target_name}"
            )

    def effective_permissions(self, subject: Subject) -> list[str]:
        return get_user_effective_permissions(subject)
