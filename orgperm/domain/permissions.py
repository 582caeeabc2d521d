"""Permission evaluation: does a principal hold a permission.

Pure functions over already-fetched data. A "subject" is anything a
permission set can be resolved from:

- a UserRole (or its string value): the static role table
- a UserOrganization: its governing authority
- a PredefinedAuthority / CustomAuthority
- any other iterable of permission names, used as-is
- None: no permissions

Hierarchy inference is module-scoped and only escalates: `module:admin`
satisfies every action in the module, `module:write` satisfies
`module:read`. Names without a `module:action` shape only match exactly.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from orgperm.core import constants as perms
from orgperm.domain.entities.custom_role import DEFAULT_CUSTOM_ROLE_COLOR
from orgperm.domain.entities.principal import (
    Authority,
    CustomAuthority,
    PredefinedAuthority,
    UserOrganization,
)
from orgperm.domain.enums import RoleCategory, RoleSource, UserRole
from orgperm.domain.roles import ROLE_INFO, ROLE_PERMISSIONS, coerce_role
from orgperm.domain.value_objects.core import PERMISSION_SEP, Permission

Subject = Union[UserRole, str, UserOrganization, Authority, Iterable[str], None]

NAV_MODULES: tuple[str, ...] = (
    "crm",
    "projects",
    "finance",
    "hr",
    "marketing",
    "collaboration",
    "settings",
)


def get_user_permissions(role: UserRole | str | None) -> list[str]:
    """Return the static permission list for a predefined role (empty if unknown)."""
    resolved = coerce_role(role)
    if resolved is None:
        return []
    return list(ROLE_PERMISSIONS.get(resolved, ()))


def _resolve_authority(subject: Subject) -> Authority | None:
    if isinstance(subject, UserOrganization):
        return subject.authority
    if isinstance(subject, (PredefinedAuthority, CustomAuthority)):
        return subject
    return None


def get_user_effective_permissions(subject: Subject) -> list[str]:
    """Return the permission names the subject holds.

    Total: a subject without a role resolves to an empty list.
    """
    if subject is None:
        return []
    if isinstance(subject, (UserRole, str)):
        return get_user_permissions(subject)
    if isinstance(subject, (UserOrganization, PredefinedAuthority, CustomAuthority)):
        authority = _resolve_authority(subject)
        if isinstance(authority, CustomAuthority):
            return list(authority.permissions)
        if isinstance(authority, PredefinedAuthority):
            return get_user_permissions(authority.role)
        return []
    return list(subject)


def _held(subject: Subject) -> frozenset[str]:
    return frozenset(get_user_effective_permissions(subject))


def _is_granted(held: frozenset[str], permission: str) -> bool:
    if permission in held:
        return True
    requested = Permission(permission)
    if not requested.is_hierarchical:
        return False
    if requested.admin_of_module() in held:
        return True
    return requested.action == "read" and requested.write_of_module() in held


def has_permission(subject: Subject, permission: str) -> bool:
    """Return True if subject holds permission directly or by inference."""
    return _is_granted(_held(subject), permission)


def has_any_permission(subject: Subject, permissions: Iterable[str]) -> bool:
    """Return True if subject holds at least one of permissions."""
    held = _held(subject)
    return any(_is_granted(held, p) for p in permissions)


def has_all_permissions(subject: Subject, permissions: Iterable[str]) -> bool:
    """Return True if subject holds every one of permissions (vacuously True)."""
    held = _held(subject)
    return all(_is_granted(held, p) for p in permissions)


def can_access_module(subject: Subject, module: str) -> bool:
    """Return True if subject holds any permission in module."""
    prefix = f"{module.lower()}{PERMISSION_SEP}"
    return any(p.startswith(prefix) for p in get_user_effective_permissions(subject))


def can_write_module(subject: Subject, module: str) -> bool:
    return has_any_permission(subject, [f"{module}:write", f"{module}:admin"])


def can_read_module(subject: Subject, module: str) -> bool:
    return has_any_permission(
        subject, [f"{module}:read", f"{module}:write", f"{module}:admin"]
    )


@dataclass(frozen=True)
class NavPermissions:
    """Navigation flags: which modules a principal may view or change."""

    can_view_crm: bool
    can_view_projects: bool
    can_view_finance: bool
    can_view_hr: bool
    can_view_marketing: bool
    can_view_collaboration: bool
    can_view_settings: bool
    can_write_crm: bool
    can_write_projects: bool
    can_write_finance: bool
    can_write_hr: bool
    can_write_marketing: bool
    can_write_collaboration: bool
    can_write_settings: bool
    can_manage_organization: bool
    can_manage_members: bool
    can_manage_billing: bool


def get_nav_permissions(subject: Subject) -> NavPermissions:
    """Return navigation flags for subject.

    Custom-role holders are matched literally (a module is writable only if
    `module:write` or `module:admin` is in the set); predefined roles go
    through has_permission.
    """
    held = _held(subject)
    literal = isinstance(_resolve_authority(subject), CustomAuthority)

    def can_write(module: str) -> bool:
        write, admin = f"{module}:write", f"{module}:admin"
        if literal:
            return write in held or admin in held
        if module == "collaboration":
            return _is_granted(held, write)
        return _is_granted(held, write) or _is_granted(held, admin)

    def can_manage(permission: str) -> bool:
        return permission in held if literal else _is_granted(held, permission)

    flags: dict[str, bool] = {}
    for module in NAV_MODULES:
        prefix = f"{module}{PERMISSION_SEP}"
        flags[f"can_view_{module}"] = any(p.startswith(prefix) for p in held)
        flags[f"can_write_{module}"] = can_write(module)
    flags["can_manage_organization"] = can_manage(perms.ORG_ADMIN)
    flags["can_manage_members"] = can_manage(perms.ORG_MEMBERS)
    flags["can_manage_billing"] = can_manage(perms.ORG_BILLING)
    return NavPermissions(**flags)


@dataclass(frozen=True)
class RoleType:
    """Read model describing a principal's role for display."""

    type: RoleSource
    name: str
    description: str
    color: str
    permissions: tuple[str, ...]
    role: UserRole | None = None
    custom_role_id: str | None = None
    category: RoleCategory | None = None


_NO_ROLE_COLOR = "bg-gray-100 text-gray-800"


def get_governing_authority(member: UserOrganization | Authority | None) -> Authority | None:
    """Return the authority that decides the member's role for display and assignment.

    A custom role governs only when it has a name. An unnamed one falls
    back to the member's predefined role column, or to no role at all.
    """
    authority = _resolve_authority(member)
    if isinstance(authority, CustomAuthority):
        if authority.custom_role.name:
            return authority
        if isinstance(member, UserOrganization) and member.role is not None:
            return PredefinedAuthority(member.role)
        return None
    return authority


def get_user_role_type(member: UserOrganization | Authority | None) -> RoleType:
    """Describe the member's governing role.

    A member with neither role is reported as a VIEWER named "No Role
    Assigned" with no permissions.
    """
    authority = get_governing_authority(member)
    if isinstance(authority, CustomAuthority):
        custom = authority.custom_role
        return RoleType(
            type=RoleSource.CUSTOM,
            custom_role_id=custom.id,
            name=custom.name,
            description=custom.description or "",
            color=custom.color or DEFAULT_CUSTOM_ROLE_COLOR,
            permissions=tuple(custom.permissions),
        )
    if isinstance(authority, PredefinedAuthority):
        info = ROLE_INFO[authority.role]
        return RoleType(
            type=RoleSource.PREDEFINED,
            role=authority.role,
            name=info.name,
            description=info.description,
            color=info.color,
            permissions=tuple(get_user_effective_permissions(member)),
            category=info.category,
        )
    return RoleType(
        type=RoleSource.PREDEFINED,
        role=UserRole.VIEWER,
        name="No Role Assigned",
        description="No permissions assigned",
        color=_NO_ROLE_COLOR,
        permissions=(),
    )
