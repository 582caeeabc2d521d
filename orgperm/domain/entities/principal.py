"""Principal model: who is asking, in which organization.

A member's authority comes from exactly one source, either a predefined
role or a custom role. Authority is the tagged variant of the two;
UserOrganization is the stored assignment row and resolves to it.
"""

from dataclasses import dataclass
from typing import Union

from orgperm.domain.entities.custom_role import CustomRole
from orgperm.domain.enums import RoleSource, UserRole


@dataclass(frozen=True)
class PredefinedAuthority:
    """Authority granted by a predefined role."""

    role: UserRole

    @property
    def source(self) -> RoleSource:
        return RoleSource.PREDEFINED


@dataclass(frozen=True)
class CustomAuthority:
    """Authority granted by a custom role's permission set."""

    custom_role: CustomRole

    @property
    def source(self) -> RoleSource:
        return RoleSource.CUSTOM

    @property
    def permissions(self) -> tuple[str, ...]:
        return self.custom_role.permissions


Authority = Union[PredefinedAuthority, CustomAuthority]


@dataclass(frozen=True)
class UserOrganization:
    """A user's membership in one organization.

    Mirrors the stored row: both role and custom role columns may be set.
    The custom role governs only when custom_role_id is set and the custom
    role itself was loaded; otherwise the predefined role governs.
    """

    user_id: str
    organization_id: str
    role: UserRole | None = None
    custom_role_id: str | None = None
    custom_role: CustomRole | None = None

    @property
    def authority(self) -> Authority | None:
        """Return the governing authority, or None when no role is assigned."""
        if self.custom_role_id and self.custom_role is not None:
            return CustomAuthority(self.custom_role)
        if self.role is not None:
            return PredefinedAuthority(self.role)
        return None


@dataclass(frozen=True)
class CustomRoleTarget:
    """Target of a role change that assigns a custom role."""

    custom_role_id: str


RoleTarget = Union[UserRole, CustomRoleTarget]
