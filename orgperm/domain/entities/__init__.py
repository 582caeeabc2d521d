"""Domain entities: custom roles and principals."""

from orgperm.domain.entities.custom_role import DEFAULT_CUSTOM_ROLE_COLOR, CustomRole
from orgperm.domain.entities.principal import (
    Authority,
    CustomAuthority,
    CustomRoleTarget,
    PredefinedAuthority,
    RoleTarget,
    UserOrganization,
)

__all__ = [
    "Authority",
    "CustomAuthority",
    "CustomRole",
    "CustomRoleTarget",
    "DEFAULT_CUSTOM_ROLE_COLOR",
    "PredefinedAuthority",
    "RoleTarget",
    "UserOrganization",
]
