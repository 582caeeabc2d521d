"""Predefined role tables.

Process-wide static configuration: which permissions each predefined role
holds, how it is displayed, and its two numeric ranks. All tables are
read-only mappings built once at import time.

Two rank scales exist and must be kept in step with the permission tables
by hand:

- ROLE_HIERARCHY (1-6) drives grant delegation and custom-role creation.
- ROLE_ASSIGNMENT_RANK (1-5) drives who may change another member's role.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from orgperm.core import constants as perms
from orgperm.domain.enums import RoleCategory, UserRole

ROLE_PERMISSIONS: Mapping[UserRole, tuple[str, ...]] = MappingProxyType(
    {
        # Organization level
        UserRole.ORGANIZATION_OWNER: (
            perms.CRM_ADMIN,
            perms.FINANCE_ADMIN,
            perms.HR_ADMIN,
            perms.PROJECTS_ADMIN,
            perms.COLLABORATION_WRITE,
            perms.MARKETING_ADMIN,
            perms.SETTINGS_ADMIN,
            perms.ORG_ADMIN,
            perms.ORG_BILLING,
            perms.ORG_MEMBERS,
            perms.BILLING_READ,
            perms.BILLING_MANAGE,
            perms.BILLING_ADMIN,
        ),
        UserRole.SUPER_ADMIN: (
            perms.CRM_ADMIN,
            perms.FINANCE_ADMIN,
            perms.HR_ADMIN,
            perms.PROJECTS_ADMIN,
            perms.COLLABORATION_WRITE,
            perms.MARKETING_ADMIN,
            perms.SETTINGS_ADMIN,
            perms.ORG_MEMBERS,
        ),
        UserRole.DEPARTMENT_MANAGER: (
            perms.CRM_WRITE,
            perms.FINANCE_READ,
            perms.HR_READ,
            perms.PROJECTS_WRITE,
            perms.COLLABORATION_WRITE,
            perms.MARKETING_READ,
            perms.SETTINGS_READ,
        ),
        # Departmental
        UserRole.HR_MANAGER: (
            perms.HR_ADMIN,
            perms.CRM_READ,
            perms.FINANCE_READ,  # payroll
            perms.PROJECTS_READ,
            perms.COLLABORATION_WRITE,
            perms.SETTINGS_READ,
        ),
        UserRole.SALES_MANAGER: (
            perms.CRM_ADMIN,
            perms.PROJECTS_READ,
            perms.COLLABORATION_WRITE,
            perms.MARKETING_READ,
            perms.FINANCE_READ,
            perms.SETTINGS_READ,
        ),
        UserRole.FINANCE_MANAGER: (
            perms.FINANCE_ADMIN,
            perms.HR_READ,  # payroll
            perms.CRM_READ,
            perms.PROJECTS_READ,
            perms.COLLABORATION_WRITE,
            perms.SETTINGS_READ,
        ),
        UserRole.PROJECT_MANAGER: (
            perms.PROJECTS_ADMIN,
            perms.CRM_READ,
            perms.COLLABORATION_WRITE,
            perms.HR_READ,
            perms.SETTINGS_READ,
        ),
        # Standard
        UserRole.EMPLOYEE: (
            perms.CRM_READ,
            perms.PROJECTS_READ,
            perms.COLLABORATION_WRITE,
            perms.HR_READ,  # own HR data only, filtered by the caller
            perms.SETTINGS_READ,
        ),
        # Time-based contractor restrictions belong to the calling application.
        UserRole.CONTRACTOR: (
            perms.PROJECTS_READ,
            perms.COLLABORATION_READ,
        ),
        UserRole.VIEWER: (
            perms.CRM_READ,
            perms.PROJECTS_READ,
            perms.COLLABORATION_READ,
            perms.FINANCE_READ,
            perms.HR_READ,
            perms.MARKETING_READ,
        ),
    }
)


@dataclass(frozen=True)
class RoleInfo:
    """Display information for a predefined role."""

    name: str
    description: str
    category: RoleCategory
    color: str


ROLE_INFO: Mapping[UserRole, RoleInfo] = MappingProxyType(
    {
        UserRole.ORGANIZATION_OWNER: RoleInfo(
            name="Organization Owner",
            description="Full platform access and billing control",
            category=RoleCategory.ORGANIZATION,
            color="bg-red-100 text-red-800",
        ),
        UserRole.SUPER_ADMIN: RoleInfo(
            name="Super Admin",
            description="Platform-wide administrative access except billing",
            category=RoleCategory.ORGANIZATION,
            color="bg-purple-100 text-purple-800",
        ),
        UserRole.DEPARTMENT_MANAGER: RoleInfo(
            name="Department Manager",
            description="Full access to assigned business modules",
            category=RoleCategory.ORGANIZATION,
            color="bg-blue-100 text-blue-800",
        ),
        UserRole.HR_MANAGER: RoleInfo(
            name="HR Manager",
            description="Full HR module access, read access to other modules",
            category=RoleCategory.DEPARTMENTAL,
            color="bg-green-100 text-green-800",
        ),
        UserRole.SALES_MANAGER: RoleInfo(
            name="Sales Manager",
            description="Full CRM access, project viewing permissions",
            category=RoleCategory.DEPARTMENTAL,
            color="bg-orange-100 text-orange-800",
        ),
        UserRole.FINANCE_MANAGER: RoleInfo(
            name="Finance Manager",
            description="Full finance module access, read access to HR payroll",
            category=RoleCategory.DEPARTMENTAL,
            color="bg-yellow-100 text-yellow-800",
        ),
        UserRole.PROJECT_MANAGER: RoleInfo(
            name="Project Manager",
            description="Full project management access, limited CRM access",
            category=RoleCategory.DEPARTMENTAL,
            color="bg-indigo-100 text-indigo-800",
        ),
        UserRole.EMPLOYEE: RoleInfo(
            name="Employee",
            description="Basic access to relevant modules based on job function",
            category=RoleCategory.STANDARD,
            color="bg-gray-100 text-gray-800",
        ),
        UserRole.CONTRACTOR: RoleInfo(
            name="Contractor",
            description="Limited access with time-based restrictions",
            category=RoleCategory.STANDARD,
            color="bg-pink-100 text-pink-800",
        ),
        UserRole.VIEWER: RoleInfo(
            name="Viewer",
            description="Read-only access to specific modules",
            category=RoleCategory.STANDARD,
            color="bg-cyan-100 text-cyan-800",
        ),
    }
)

# Delegation level: grant authority and custom-role creation.
DEFAULT_ROLE_LEVEL = 1

ROLE_HIERARCHY: Mapping[UserRole, int] = MappingProxyType(
    {
        UserRole.VIEWER: 1,
        UserRole.CONTRACTOR: 1,
        UserRole.EMPLOYEE: 2,
        UserRole.PROJECT_MANAGER: 3,
        UserRole.SALES_MANAGER: 3,
        UserRole.HR_MANAGER: 3,
        UserRole.FINANCE_MANAGER: 3,
        UserRole.DEPARTMENT_MANAGER: 4,
        UserRole.SUPER_ADMIN: 5,
        UserRole.ORGANIZATION_OWNER: 6,
    }
)

# Assignment rank: who may change another member's predefined role.
ROLE_ASSIGNMENT_RANK: Mapping[UserRole, int] = MappingProxyType(
    {
        UserRole.ORGANIZATION_OWNER: 5,
        UserRole.SUPER_ADMIN: 4,
        UserRole.DEPARTMENT_MANAGER: 3,
        UserRole.HR_MANAGER: 2,
        UserRole.SALES_MANAGER: 2,
        UserRole.FINANCE_MANAGER: 2,
        UserRole.PROJECT_MANAGER: 2,
        UserRole.EMPLOYEE: 1,
        UserRole.CONTRACTOR: 1,
        UserRole.VIEWER: 1,
    }
)



def coerce_role(role: UserRole | str | None) -> UserRole | None:
    """Return the UserRole for role, or None if it is empty or unknown."""
    if role is None or isinstance(role, UserRole):
        return role
    try:
        return UserRole(role)
    except ValueError:
        return None


def get_all_required_permission_names() -> list[str]:
    """Return every permission name that should exist in storage."""
    return list(perms.ALL_PERMISSIONS)


def get_user_role_level(role: UserRole | str | None) -> int:
    """Return the delegation level for role (1 for unknown roles)."""
    resolved = coerce_role(role)
    if resolved is None:
        return DEFAULT_ROLE_LEVEL
    return ROLE_HIERARCHY.get(resolved, DEFAULT_ROLE_LEVEL)


def get_role_assignment_rank(role: UserRole) -> int:
    return ROLE_ASSIGNMENT_RANK.get(role, 1)


def get_role_display_name(role: UserRole | str) -> str:
    """Return the display name for role, or the raw value when unknown."""
    resolved = coerce_role(role)
    if resolved is None:
        return str(role)
    return ROLE_INFO[resolved].name
