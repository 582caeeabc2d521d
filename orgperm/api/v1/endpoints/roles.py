"""Roles API: predefined role tables and their delegation rules (read-only)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from orgperm.api.v1.dependencies import get_role
from orgperm.domain.assignment import can_manage_roles, get_assignable_roles
from orgperm.domain.delegation import can_create_custom_roles, get_grantable_permissions
from orgperm.domain.enums import UserRole
from orgperm.domain.permissions import get_user_permissions
from orgperm.domain.roles import (
    ROLE_INFO,
    get_role_assignment_rank,
    get_user_role_level,
)
from orgperm.schemas.role import RoleResponse, RoleSummary

router = APIRouter()


def _summary(role: UserRole) -> RoleSummary:
    info = ROLE_INFO[role]
    return RoleSummary(
        role=role,
        name=info.name,
        description=info.description,
        category=info.category,
        color=info.color,
        level=get_user_role_level(role),
    )


@router.get("", response_model=list[RoleSummary])
def list_roles() -> list[RoleSummary]:
    """List predefined roles in canonical order."""
    return [_summary(role) for role in ROLE_INFO]


@router.get("/{role}", response_model=RoleResponse)
def get_role_detail(role: Annotated[UserRole, Depends(get_role)]) -> RoleResponse:
    """Return a role's permissions and what it may grant or assign."""
    return RoleResponse(
        **_summary(role).model_dump(),
        assignment_rank=get_role_assignment_rank(role),
        permissions=get_user_permissions(role),
        grantable_permissions=get_grantable_permissions(role),
        assignable_roles=get_assignable_roles(role),
        can_create_custom_roles=can_create_custom_roles(role),
        can_manage_roles=can_manage_roles(role),
    )
