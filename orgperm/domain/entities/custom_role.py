"""Custom role domain entity.

An organization-defined role with an explicit permission set. Custom roles
carry no hierarchy level; their holders' authority comes only from the
permissions listed here.
"""

from dataclasses import dataclass, field

from orgperm.domain.exceptions import ValidationException

DEFAULT_CUSTOM_ROLE_COLOR = "bg-blue-100 text-blue-800"


@dataclass(frozen=True)
class CustomRole:
    """Already-fetched custom role with its flattened permission names."""

    id: str
    name: str
    permissions: tuple[str, ...] = field(default_factory=tuple)
    organization_id: str | None = None
    description: str | None = None
    color: str = DEFAULT_CUSTOM_ROLE_COLOR
    is_active: bool = True

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Custom role ID is required", field="id")
        # Accept any iterable of names from callers; store a tuple.
        object.__setattr__(self, "permissions", tuple(self.permissions))
