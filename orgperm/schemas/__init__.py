"""Pydantic request/response schemas for the API."""

from orgperm.schemas.authorization import (
    EffectivePermissionsResponse,
    PermissionCheckRequest,
    PermissionCheckResponse,
    RoleAssignmentRequest,
    RoleAssignmentResponse,
)
from orgperm.schemas.custom_role import (
    CanGrantRequest,
    CanGrantResponse,
    CustomRolePrepareRequest,
    CustomRolePrepareResponse,
    CustomRoleValidateRequest,
    CustomRoleValidationResponse,
)
from orgperm.schemas.health import HealthResponse
from orgperm.schemas.permission import PermissionGroupResponse, SyncStatusResponse
from orgperm.schemas.principal import CustomPrincipal, Principal, PredefinedPrincipal
from orgperm.schemas.role import RoleResponse, RoleSummary

__all__ = [
    "CanGrantRequest",
    "CanGrantResponse",
    "CustomPrincipal",
    "CustomRolePrepareRequest",
    "CustomRolePrepareResponse",
    "CustomRoleValidateRequest",
    "CustomRoleValidationResponse",
    "EffectivePermissionsResponse",
    "HealthResponse",
    "PermissionCheckRequest",
    "PermissionCheckResponse",
    "PermissionGroupResponse",
    "PredefinedPrincipal",
    "Principal",
    "RoleAssignmentRequest",
    "RoleAssignmentResponse",
    "RoleResponse",
    "RoleSummary",
    "SyncStatusResponse",
]
