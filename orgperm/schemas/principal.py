"""Principal payload schemas.

The caller sends the already-resolved principal; orgperm never looks it
up. The `type` field discriminates predefined from custom roles.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from orgperm.domain.entities import (
    DEFAULT_CUSTOM_ROLE_COLOR,
    CustomAuthority,
    CustomRole,
    PredefinedAuthority,
)
from orgperm.domain.enums import UserRole


class PredefinedPrincipal(BaseModel):
    """A member governed by a predefined role."""

    type: Literal["predefined"] = "predefined"
    role: UserRole

    def to_authority(self) -> PredefinedAuthority:
        return PredefinedAuthority(self.role)


class CustomPrincipal(BaseModel):
    """A member governed by a custom role with an explicit permission set."""

    type: Literal["custom"] = "custom"
    custom_role_id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(default="", max_length=255)
    description: str | None = Field(default=None, max_length=500)
    color: str = Field(default=DEFAULT_CUSTOM_ROLE_COLOR, max_length=100)
    permissions: list[str] = Field(default_factory=list, max_length=200)

    def to_authority(self) -> CustomAuthority:
        return CustomAuthority(
            CustomRole(
                id=self.custom_role_id,
                name=self.name,
                description=self.description,
                color=self.color,
                permissions=tuple(self.permissions),
            )
        )


Principal = Annotated[
    Union[PredefinedPrincipal, CustomPrincipal],
    Field(discriminator="type"),
]


def to_authority(
    principal: PredefinedPrincipal | CustomPrincipal | None,
) -> PredefinedAuthority | CustomAuthority | None:
    """Return the domain authority for principal (None when no role)."""
    return principal.to_authority() if principal is not None else None
