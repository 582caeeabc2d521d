"""Role-assignment authority: who may change another member's role.

Separate from grant delegation. Predefined roles are bounded by the
assignment rank table; custom-role holders are authorized by permission
content alone.
"""

from dataclasses import dataclass, field

from orgperm.core import constants as perms
from orgperm.domain.entities.principal import (
    Authority,
    CustomAuthority,
    CustomRoleTarget,
    PredefinedAuthority,
    RoleTarget,
    UserOrganization,
)
from orgperm.domain.enums import UserRole
from orgperm.domain.permissions import get_governing_authority, has_any_permission
from orgperm.domain.roles import ROLE_INFO, coerce_role, get_role_assignment_rank

MIN_RANK_TO_ASSIGN = 3

# Predefined roles allowed to hand out custom roles.
CUSTOM_ROLE_ASSIGNERS: frozenset[UserRole] = frozenset(
    {
        UserRole.ORGANIZATION_OWNER,
        UserRole.SUPER_ADMIN,
        UserRole.DEPARTMENT_MANAGER,
    }
)

_MEMBER_MANAGEMENT = (perms.ORG_ADMIN, perms.ORG_MEMBERS)


def can_assign_role(
    current_role: UserRole | str | None,
    target_role: UserRole | str | None,
) -> bool:
    """Return True if a holder of current_role may give someone target_role.

    - Rank < 3: never.
    - ORGANIZATION_OWNER: anything but another owner.
    - SUPER_ADMIN: ranks below 4 (no super admins, no owners).
    - DEPARTMENT_MANAGER: ranks 2 and below.
    """
    current = coerce_role(current_role)
    target = coerce_role(target_role)
    if current is None or target is None:
        return False

    current_rank = get_role_assignment_rank(current)
    target_rank = get_role_assignment_rank(target)
    if current_rank < MIN_RANK_TO_ASSIGN:
        return False
    if current is UserRole.ORGANIZATION_OWNER:
        return target is not UserRole.ORGANIZATION_OWNER
    if current is UserRole.SUPER_ADMIN:
        return target_rank < 4
    if current is UserRole.DEPARTMENT_MANAGER:
        return target_rank <= 2
    return False


def get_assignable_roles(current_role: UserRole | str | None) -> list[UserRole]:
    """Return the predefined roles current_role may assign, in canonical order."""
    return [role for role in ROLE_INFO if can_assign_role(current_role, role)]


def can_manage_roles(role: UserRole | str | None) -> bool:
    """Return True if role may open role management at all."""
    return (
        has_any_permission(role, _MEMBER_MANAGEMENT)
        or coerce_role(role) is UserRole.DEPARTMENT_MANAGER
    )


@dataclass(frozen=True)
class AssignableRoles:
    """What a principal may assign: predefined roles and whether custom roles."""

    predefined_roles: tuple[UserRole, ...] = field(default_factory=tuple)
    can_assign_custom_roles: bool = False


def can_assign_role_to(
    principal: UserOrganization | Authority | None,
    target: RoleTarget,
) -> bool:
    """Return True if principal may make target another member's role.

    The acting role is resolved by get_governing_authority, so an unnamed
    custom role never governs. Custom-role holders with `organization:admin`
    or `organization:members` may assign any role; their hierarchy is not
    checked.
    """
    authority = get_governing_authority(principal)
    if isinstance(authority, PredefinedAuthority):
        if isinstance(target, CustomRoleTarget):
            return authority.role in CUSTOM_ROLE_ASSIGNERS
        return can_assign_role(authority.role, target)
    if isinstance(authority, CustomAuthority):
        return has_any_permission(authority, _MEMBER_MANAGEMENT)
    return False


def get_assignable_roles_for(
    principal: UserOrganization | Authority | None,
) -> AssignableRoles:
    """Return the roles principal may assign to other members."""
    authority = get_governing_authority(principal)
    if isinstance(authority, PredefinedAuthority):
        return AssignableRoles(
            predefined_roles=tuple(get_assignable_roles(authority.role)),
            can_assign_custom_roles=authority.role in CUSTOM_ROLE_ASSIGNERS,
        )
    if isinstance(authority, CustomAuthority):
        manages_members = has_any_permission(authority, _MEMBER_MANAGEMENT)
        return AssignableRoles(
            predefined_roles=tuple(ROLE_INFO) if manages_members else (),
            can_assign_custom_roles=manages_members,
        )
    return AssignableRoles()
