"""Custom roles API: validate a requested permission set before it is persisted."""

from typing import Annotated

from fastapi import APIRouter, Depends

from orgperm.api.v1.dependencies import get_authorization_service
from orgperm.application.services import AuthorizationService
from orgperm.domain.delegation import (
    can_create_custom_roles,
    can_grant_permission,
    get_grantable_permissions,
)
from orgperm.domain.exceptions import AuthorizationException
from orgperm.schemas.custom_role import (
    CanGrantRequest,
    CanGrantResponse,
    CustomRolePrepareRequest,
    CustomRolePrepareResponse,
    CustomRoleValidateRequest,
    CustomRoleValidationResponse,
)

router = APIRouter()


@router.post("/validate", response_model=CustomRoleValidationResponse)
def validate_custom_role(
    body: CustomRoleValidateRequest,
    auth_svc: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> CustomRoleValidationResponse:
    """Return every reason the creator may not create this role (200 either way)."""
    result = auth_svc.validate_custom_role(body.creator_role, body.permissions)
    return CustomRoleValidationResponse(
        valid=result.valid,
        errors=list(result.errors),
        ungrantable_permissions=list(result.ungrantable_permissions),
        can_create_custom_roles=can_create_custom_roles(body.creator_role),
    )


@router.post("/can-grant", response_model=CanGrantResponse)
def can_grant(body: CanGrantRequest) -> CanGrantResponse:
    """Answer whether the role may grant one permission."""
    return CanGrantResponse(
        allowed=can_grant_permission(body.role, body.permission),
        grantable_permissions=get_grantable_permissions(body.role),
    )


@router.post("/prepare", response_model=CustomRolePrepareResponse)
def prepare_custom_role(
    body: CustomRolePrepareRequest,
    auth_svc: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> CustomRolePrepareResponse:
    """Guard a custom-role create or edit before the caller persists it.

    403 when the creator may not create custom roles; 400
    (CUSTOM_ROLE_INVALID) listing every error when the set is invalid.
    """
    if not can_create_custom_roles(body.creator_role):
        raise AuthorizationException(
            message="Access denied. Only Super Admins and Organization Owners can create custom roles"
        )
    permissions = auth_svc.require_custom_role_permissions(
        body.creator_role, body.permissions
    )
    return CustomRolePrepareResponse(
        name=body.name.strip(),
        description=body.description,
        color=body.color,
        permissions=sorted(set(permissions)),
    )
