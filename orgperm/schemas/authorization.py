"""Authorization API schemas (permission checks, guards, role assignment)."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from orgperm.domain.enums import RoleCategory, RoleSource, UserRole
from orgperm.schemas.principal import Principal


class PermissionCheckRequest(BaseModel):
    """Request body for POST /authorization/check and /authorization/require.

    mode "all" requires every permission; "any" requires at least one.
    """

    principal: Principal | None = None
    permissions: list[str] = Field(..., min_length=1, max_length=100)
    mode: Literal["all", "any"] = "all"


class PermissionCheckResponse(BaseModel):
    allowed: bool
    mode: Literal["all", "any"]
    permissions: list[str]


class PrincipalRequest(BaseModel):
    """Request body carrying only a principal."""

    principal: Principal | None = None


class NavPermissionsResponse(BaseModel):
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


class RoleTypeResponse(BaseModel):
    type: RoleSource
    name: str
    description: str
    color: str
    role: UserRole | None = None
    custom_role_id: str | None = None
    category: RoleCategory | None = None


class EffectivePermissionsResponse(BaseModel):
    """Response for POST /authorization/effective-permissions."""

    role_type: RoleTypeResponse
    permissions: list[str]
    navigation: NavPermissionsResponse
    can_manage_custom_roles: bool


class RoleAssignmentRequest(BaseModel):
    """Request body for POST /authorization/can-assign.

    Exactly one of target_role and target_custom_role_id must be set.
    """

    principal: Principal | None = None
    target_role: UserRole | None = None
    target_custom_role_id: str | None = Field(default=None, min_length=1, max_length=64)

    @model_validator(mode="after")
    def exactly_one_target(self) -> "RoleAssignmentRequest":
        if (self.target_role is None) == (self.target_custom_role_id is None):
            raise ValueError("Set exactly one of target_role or target_custom_role_id")
        return self


class RoleAssignmentResponse(BaseModel):
    allowed: bool
    assignable_roles: list[UserRole]
    can_assign_custom_roles: bool
