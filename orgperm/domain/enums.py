"""Domain enumerations for orgperm.

Enums represent fixed sets of domain values (roles, role categories,
permission actions). Declaration order of UserRole is the canonical
listing order used by role pickers and assignable-role lists.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class UserRole(_ValuesMixin, str, Enum):
    """Predefined organization roles.

    Each role maps to a static permission set (see orgperm.domain.roles)
    and to a hierarchy level governing delegation authority.
    """

    ORGANIZATION_OWNER = "ORGANIZATION_OWNER"
    SUPER_ADMIN = "SUPER_ADMIN"
    DEPARTMENT_MANAGER = "DEPARTMENT_MANAGER"
    HR_MANAGER = "HR_MANAGER"
    SALES_MANAGER = "SALES_MANAGER"
    FINANCE_MANAGER = "FINANCE_MANAGER"
    PROJECT_MANAGER = "PROJECT_MANAGER"
    EMPLOYEE = "EMPLOYEE"
    CONTRACTOR = "CONTRACTOR"
    VIEWER = "VIEWER"


class RoleCategory(_ValuesMixin, str, Enum):
    """Display grouping for predefined roles."""

    ORGANIZATION = "Organization"
    DEPARTMENTAL = "Departmental"
    STANDARD = "Standard"


class PermissionAction(_ValuesMixin, str, Enum):
    """Known actions in the `module:action` permission format."""

    READ = "read"
    WRITE = "write"
    ADMIN = "admin"
    MANAGE = "manage"
    BILLING = "billing"
    MEMBERS = "members"


class RoleSource(_ValuesMixin, str, Enum):
    """Where a principal's authority comes from."""

    PREDEFINED = "predefined"
    CUSTOM = "custom"
