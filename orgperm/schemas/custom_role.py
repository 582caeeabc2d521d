"""Custom role API schemas."""

from pydantic import BaseModel, Field

from orgperm.domain.entities import DEFAULT_CUSTOM_ROLE_COLOR
from orgperm.domain.enums import UserRole


class CustomRoleValidateRequest(BaseModel):
    """Request body for POST /custom-roles/validate."""

    creator_role: UserRole
    permissions: list[str] = Field(default_factory=list, max_length=100)


class CustomRoleValidationResponse(BaseModel):
    valid: bool
    errors: list[str]
    ungrantable_permissions: list[str]
    can_create_custom_roles: bool


class CanGrantRequest(BaseModel):
    """Request body for POST /custom-roles/can-grant."""

    role: UserRole
    permission: str = Field(..., min_length=1, max_length=128)


class CanGrantResponse(BaseModel):
    allowed: bool
    grantable_permissions: list[str]


class CustomRolePrepareRequest(BaseModel):
    """Request body for POST /custom-roles/prepare."""

    creator_role: UserRole
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=500)
    color: str = Field(default=DEFAULT_CUSTOM_ROLE_COLOR, max_length=100)
    permissions: list[str] = Field(..., min_length=1, max_length=100)


class CustomRolePrepareResponse(BaseModel):
    """Validated custom role, ready for the caller to persist."""

    name: str
    description: str | None
    color: str
    permissions: list[str]
