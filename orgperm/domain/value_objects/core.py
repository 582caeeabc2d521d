"""Domain value objects for orgperm.

Value objects are immutable types that represent domain concepts. They
have no identity, only value.
"""

from dataclasses import dataclass

PERMISSION_SEP = ":"


def parse_permission(name: str) -> tuple[str, str]:
    """Split a permission name into (module, action).

    Only the first two colon-separated segments are used ("a:b:c" gives
    ("a", "b")). Missing parts come back as empty strings; parsing never
    fails.
    """
    parts = name.split(PERMISSION_SEP)
    module = parts[0] if parts else ""
    action = parts[1] if len(parts) > 1 else ""
    return module, action


@dataclass(frozen=True)
class Permission:
    """Value object for a `module:action` permission name.

    A name that does not parse into a non-empty module and action is a flat
    literal: it only ever matches itself, and no admin/write/read inference
    applies to it.
    """

    name: str

    @property
    def module(self) -> str:
        return parse_permission(self.name)[0]

    @property
    def action(self) -> str:
        return parse_permission(self.name)[1]

    @property
    def is_hierarchical(self) -> bool:
        """Return True when both module and action are present."""
        module, action = parse_permission(self.name)
        return bool(module) and bool(action)

    def admin_of_module(self) -> str:
        """Return the `module:admin` name for this permission's module."""
        return f"{self.module}{PERMISSION_SEP}admin"

    def write_of_module(self) -> str:
        """Return the `module:write` name for this permission's module."""
        return f"{self.module}{PERMISSION_SEP}write"

    def __str__(self) -> str:
        return self.name
