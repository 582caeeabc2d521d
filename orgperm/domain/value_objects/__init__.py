"""Domain value objects (permission names)."""

from orgperm.domain.value_objects.core import (
    PERMISSION_SEP,
    Permission,
    parse_permission,
)

__all__ = ["PERMISSION_SEP", "Permission", "parse_permission"]
