"""Grant delegation: which permissions a role may bestow on others.

Granting is stricter than holding. Billing permissions (the `billing`
module and `organization:billing`) can only be granted by the
organization owner, and `:admin` permissions only by roles at delegation
level 4 or above.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from orgperm.core import constants as perms
from orgperm.domain.catalog import get_available_permission_names
from orgperm.domain.enums import UserRole
from orgperm.domain.permissions import Subject, get_user_permissions, has_any_permission
from orgperm.domain.roles import coerce_role, get_user_role_level
from orgperm.domain.value_objects.core import parse_permission

MIN_LEVEL_TO_GRANT_ADMIN = 4
MIN_LEVEL_TO_CREATE_CUSTOM_ROLES = 5

MISSING_READ_ERROR = "Custom role must include at least one read permission"
CATALOG_MISSING_READ_ERROR = "Role must have at least one read permission"


@dataclass(frozen=True)
class CustomRoleValidation:
    """Outcome of validating a requested custom-role permission set.

    Never raised; callers decide how to surface errors (one entry per
    problem, in request order, missing-read last).
    """

    valid: bool
    errors: tuple[str, ...] = field(default_factory=tuple)
    ungrantable_permissions: tuple[str, ...] = field(default_factory=tuple)


def is_billing_permission(permission: str) -> bool:
    """Return True for anything in the billing module or `organization:billing`."""
    module, _ = parse_permission(permission)
    return module == perms.BILLING_MODULE or permission == perms.ORG_BILLING


def _has_read_permission(permissions: list[str]) -> bool:
    return any(p.endswith(":read") for p in permissions)


def get_grantable_permissions(role: UserRole | str | None) -> list[str]:
    """Return the permissions role may grant, in table order.

    - ORGANIZATION_OWNER: everything it holds, billing included.
    - SUPER_ADMIN: everything it holds except billing.
    - Others: held permissions except billing, flat literals, and `:admin`
      below delegation level 4.
    """
    resolved = coerce_role(role)
    held = get_user_permissions(resolved)
    if resolved is UserRole.ORGANIZATION_OWNER:
        return held
    if resolved is UserRole.SUPER_ADMIN:
        return [p for p in held if not is_billing_permission(p)]

    level = get_user_role_level(resolved)
    grantable: list[str] = []
    for permission in held:
        module, action = parse_permission(permission)
        if not module or not action:
            continue
        if is_billing_permission(permission):
            continue
        if action == "admin" and level < MIN_LEVEL_TO_GRANT_ADMIN:
            continue
        grantable.append(permission)
    return grantable


def can_grant_permission(role: UserRole | str | None, permission: str) -> bool:
    """Return True if role may put permission on a custom role or another member.

    Beyond the grantable list, a level-4+ holder of `module:admin` may grant
    any non-admin action in that module, and any holder of `module:write`
    may grant `module:read`.
    """
    if permission in get_grantable_permissions(role):
        return True

    module, action = parse_permission(permission)
    if not module or not action:
        return False

    held = get_user_permissions(role)
    if (
        action != "admin"
        and f"{module}:admin" in held
        and get_user_role_level(role) >= MIN_LEVEL_TO_GRANT_ADMIN
    ):
        return True
    return action == "read" and f"{module}:write" in held


def _ungrantable_reason(permission: str) -> str:
    module, action = parse_permission(permission)
    if is_billing_permission(permission):
        return (
            f"You cannot grant billing permissions ({permission}) - "
            "only Organization Owners can manage billing"
        )
    if action == "admin":
        return (
            f"You cannot grant admin permissions ({permission}) because "
            f"you don't have admin access to {module}"
        )
    return (
        f"You cannot grant permission ({permission}) because "
        "you don't have this permission yourself"
    )


def validate_custom_role_permissions(
    role: UserRole | str | None,
    requested_permissions: Iterable[str],
) -> CustomRoleValidation:
    """Check that role may create a custom role with requested_permissions.

    Every ungrantable permission gets its own reason (billing-restricted,
    admin-restricted or not-held). A non-empty request must also contain a
    `:read` permission. An empty request is valid.
    """
    requested = list(requested_permissions)
    errors: list[str] = []
    ungrantable: list[str] = []

    for permission in requested:
        if not can_grant_permission(role, permission):
            ungrantable.append(permission)
            errors.append(_ungrantable_reason(permission))

    if requested and not _has_read_permission(requested):
        errors.append(MISSING_READ_ERROR)

    return CustomRoleValidation(
        valid=not errors,
        errors=tuple(errors),
        ungrantable_permissions=tuple(ungrantable),
    )


def validate_custom_role_catalog(permission_names: Iterable[str]) -> CustomRoleValidation:
    """Check requested names against the custom-role catalog.

    Unknown names are reported together in one error; the read rule is the
    same as for validate_custom_role_permissions.
    """
    names = list(permission_names)
    available = get_available_permission_names()
    errors: list[str] = []

    invalid = [n for n in names if n not in available]
    if invalid:
        errors.append(f"Invalid permissions: {', '.join(invalid)}")
    if names and not _has_read_permission(names):
        errors.append(CATALOG_MISSING_READ_ERROR)

    return CustomRoleValidation(valid=not errors, errors=tuple(errors))


def can_create_custom_roles(role: UserRole | str | None) -> bool:
    """Return True for SUPER_ADMIN and ORGANIZATION_OWNER (level 5+)."""
    return get_user_role_level(role) >= MIN_LEVEL_TO_CREATE_CUSTOM_ROLES


def can_manage_custom_roles(subject: Subject) -> bool:
    """Return True if subject may edit or delete existing custom roles."""
    return has_any_permission(subject, [perms.ORG_ADMIN, perms.SETTINGS_ADMIN])
