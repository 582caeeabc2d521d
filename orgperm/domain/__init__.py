"""Domain layer: roles, permissions, delegation and assignment rules.

Pure and synchronous; no dependencies on infrastructure or presentation.
Callers pass already-fetched role and custom-role data.
"""

from orgperm.domain.assignment import (
    AssignableRoles,
    can_assign_role,
    can_assign_role_to,
    can_manage_roles,
    get_assignable_roles,
    get_assignable_roles_for,
)
from orgperm.domain.delegation import (
    CustomRoleValidation,
    can_create_custom_roles,
    can_grant_permission,
    can_manage_custom_roles,
    get_grantable_permissions,
    validate_custom_role_catalog,
    validate_custom_role_permissions,
)
from orgperm.domain.entities import (
    CustomAuthority,
    CustomRole,
    CustomRoleTarget,
    PredefinedAuthority,
    UserOrganization,
)
from orgperm.domain.enums import PermissionAction, RoleCategory, RoleSource, UserRole
from orgperm.domain.exceptions import (
    AuthorizationException,
    CustomRoleValidationException,
    OrgPermException,
    RoleRequiredException,
    UnknownRoleException,
    ValidationException,
)
from orgperm.domain.permissions import (
    NavPermissions,
    RoleType,
    can_access_module,
    can_read_module,
    can_write_module,
    get_governing_authority,
    get_nav_permissions,
    get_user_effective_permissions,
    get_user_permissions,
    get_user_role_type,
    has_all_permissions,
    has_any_permission,
    has_permission,
)
from orgperm.domain.value_objects import Permission, parse_permission

__all__ = [
    # Entities
    "CustomAuthority",
    "CustomRole",
    "CustomRoleTarget",
    "PredefinedAuthority",
    "UserOrganization",
    # Enums
    "PermissionAction",
    "RoleCategory",
    "RoleSource",
    "UserRole",
    # Exceptions
    "AuthorizationException",
    "CustomRoleValidationException",
    "OrgPermException",
    "RoleRequiredException",
    "UnknownRoleException",
    "ValidationException",
    # Value objects
    "Permission",
    "parse_permission",
    # Evaluation
    "NavPermissions",
    "RoleType",
    "can_access_module",
    "can_read_module",
    "can_write_module",
    "get_governing_authority",
    "get_nav_permissions",
    "get_user_effective_permissions",
    "get_user_permissions",
    "get_user_role_type",
    "has_all_permissions",
    "has_any_permission",
    "has_permission",
    # Delegation
    "CustomRoleValidation",
    "can_create_custom_roles",
    "can_grant_permission",
    "can_manage_custom_roles",
    "get_grantable_permissions",
    "validate_custom_role_catalog",
    "validate_custom_role_permissions",
    # Assignment
    "AssignableRoles",
    "can_assign_role",
    "can_assign_role_to",
    "can_manage_roles",
    "get_assignable_roles",
    "get_assignable_roles_for",
]
