"""Role API schemas."""

from pydantic import BaseModel, Field

from orgperm.domain.enums import RoleCategory, UserRole


class RoleSummary(BaseModel):
    """Role list item."""

    role: UserRole
    name: str
    description: str
    category: RoleCategory
    color: str
    level: int = Field(..., description="Delegation level (1-6)")


class RoleResponse(RoleSummary):
    """Role detail: static permissions plus what the role may delegate."""

    assignment_rank: int = Field(..., description="Role-assignment rank (1-5)")
    permissions: list[str]
    grantable_permissions: list[str]
    assignable_roles: list[UserRole]
    can_create_custom_roles: bool
    can_manage_roles: bool
