"""Authorization API: permission checks and guards for a caller-supplied principal."""

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends

from orgperm.api.v1.dependencies import get_authorization_service
from orgperm.application.services import AuthorizationService
from orgperm.domain.assignment import can_assign_role_to, get_assignable_roles_for
from orgperm.domain.delegation import can_manage_custom_roles
from orgperm.domain.entities import CustomRoleTarget, RoleTarget
from orgperm.domain.permissions import (
    get_nav_permissions,
    get_user_effective_permissions,
    get_user_role_type,
    has_all_permissions,
    has_any_permission,
)
from orgperm.schemas.authorization import (
    EffectivePermissionsResponse,
    NavPermissionsResponse,
    PermissionCheckRequest,
    PermissionCheckResponse,
    PrincipalRequest,
    RoleAssignmentRequest,
    RoleAssignmentResponse,
    RoleTypeResponse,
)
from orgperm.schemas.principal import to_authority

router = APIRouter()


def _target_of(body: RoleAssignmentRequest) -> RoleTarget:
    if body.target_custom_role_id is not None:
        return CustomRoleTarget(body.target_custom_role_id)
    return body.target_role


@router.post("/check", response_model=PermissionCheckResponse)
def check_permissions(body: PermissionCheckRequest) -> PermissionCheckResponse:
    """Answer whether the principal holds all (or any) of the permissions."""
    authority = to_authority(body.principal)
    check = has_any_permission if body.mode == "any" else has_all_permissions
    return PermissionCheckResponse(
        allowed=check(authority, body.permissions),
        mode=body.mode,
        permissions=body.permissions,
    )


@router.post("/require", response_model=PermissionCheckResponse)
def require_permissions(
    body: PermissionCheckRequest,
    auth_svc: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> PermissionCheckResponse:
    """Return 200 when allowed; 403 (PERMISSION_DENIED) or 400 (ROLE_REQUIRED) otherwise.

    mode "all" checks each permission in turn and fails on the first
    missing one; mode "any" fails only if none is held.
    """
    authority = to_authority(body.principal)
    if body.mode == "any":
        auth_svc.require_any_permission(authority, body.permissions)
    else:
        for permission in body.permissions:
            auth_svc.require_permission(authority, permission)
    return PermissionCheckResponse(
        allowed=True, mode=body.mode, permissions=body.permissions
    )


@router.post("/effective-permissions", response_model=EffectivePermissionsResponse)
def effective_permissions(body: PrincipalRequest) -> EffectivePermissionsResponse:
    """Return the principal's role description, permissions and navigation flags."""
    authority = to_authority(body.principal)
    role_type = get_user_role_type(authority)
    return EffectivePermissionsResponse(
        role_type=RoleTypeResponse(
            type=role_type.type,
            name=role_type.name,
            description=role_type.description,
            color=role_type.color,
            role=role_type.role,
            custom_role_id=role_type.custom_role_id,
            category=role_type.category,
        ),
        permissions=get_user_effective_permissions(authority),
        navigation=NavPermissionsResponse(**asdict(get_nav_permissions(authority))),
        can_manage_custom_roles=can_manage_custom_roles(authority),
    )


@router.post("/can-assign", response_model=RoleAssignmentResponse)
def can_assign(body: RoleAssignmentRequest) -> RoleAssignmentResponse:
    """Answer whether the principal may give another member the target role."""
    authority = to_authority(body.principal)
    target = _target_of(body)
    assignable = get_assignable_roles_for(authority)
    return RoleAssignmentResponse(
        allowed=can_assign_role_to(authority, target),
        assignable_roles=list(assignable.predefined_roles),
        can_assign_custom_roles=assignable.can_assign_custom_roles,
    )


@router.post("/require-assignment", response_model=RoleAssignmentResponse)
def require_assignment(
    body: RoleAssignmentRequest,
    auth_svc: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> RoleAssignmentResponse:
    """Guard a role change: 200 when allowed, 403 (PERMISSION_DENIED) otherwise."""
    authority = to_authority(body.principal)
    target = _target_of(body)
    auth_svc.require_role_assignment(authority, target)
    assignable = get_assignable_roles_for(authority)
    return RoleAssignmentResponse(
        allowed=True,
        assignable_roles=list(assignable.predefined_roles),
        can_assign_custom_roles=assignable.can_assign_custom_roles,
    )
