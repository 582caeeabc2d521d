"""Permission sync analysis: stored permission rows vs. the canonical table.

Pure comparison; the caller fetches rows from storage and applies changes.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from orgperm.domain.catalog import CatalogPermission, get_permission_metadata
from orgperm.domain.roles import get_all_required_permission_names


@dataclass(frozen=True)
class StoredPermission:
    """A permission row as it exists in storage."""

    name: str
    module: str
    action: str
    description: str | None = None


@dataclass(frozen=True)
class SyncStatistics:
    total_required: int
    total_in_db: int
    matched: int
    to_add: int
    to_remove: int
    to_update: int
    sync_percentage: int


@dataclass(frozen=True)
class SyncAnalysis:
    """Result of comparing stored permissions with the canonical set."""

    needs_sync: bool
    statistics: SyncStatistics
    permissions_to_add: tuple[CatalogPermission, ...] = field(default_factory=tuple)
    permissions_to_remove: tuple[StoredPermission, ...] = field(default_factory=tuple)
    permissions_to_update: tuple[CatalogPermission, ...] = field(default_factory=tuple)


def _differs(stored: StoredPermission, expected: CatalogPermission) -> bool:
    return (
        stored.description != expected.description
        or stored.module != expected.module
        or stored.action != expected.action
    )


class PermissionSyncAnalyzer:
    """Compare stored permission rows with the canonical permission table."""

    def __init__(self, required_names: Iterable[str] | None = None) -> None:
        names = required_names if required_names is not None else get_all_required_permission_names()
        self.required_names: tuple[str, ...] = tuple(names)

    def analyze_sync_status(self, stored: Iterable[StoredPermission]) -> SyncAnalysis:
        """Return what must be added, removed, or updated to match the table.

        Rows are matched by name. A row whose description, module or action
        differs from the generated metadata is reported for update.
        """
        rows = list(stored)
        # Duplicate names: the first stored row wins.
        by_name: dict[str, StoredPermission] = {}
        for row in rows:
            by_name.setdefault(row.name, row)
        required = set(self.required_names)

        to_add = tuple(
            get_permission_metadata(name)
            for name in self.required_names
            if name not in by_name
        )
        to_remove = tuple(row for row in rows if row.name not in required)
        to_update = tuple(
            expected
            for expected in (get_permission_metadata(n) for n in self.required_names)
            if expected.name in by_name and _differs(by_name[expected.name], expected)
        )

        total_required = len(self.required_names)
        matched = total_required - len(to_add)
        # Half-up rounding.
        percentage = math.floor(matched / total_required * 100 + 0.5) if total_required else 100
        statistics = SyncStatistics(
            total_required=total_required,
            total_in_db=len(rows),
            matched=matched,
            to_add=len(to_add),
            to_remove=len(to_remove),
            to_update=len(to_update),
            sync_percentage=percentage,
        )
        return SyncAnalysis(
            needs_sync=bool(to_add or to_remove or to_update),
            statistics=statistics,
            permissions_to_add=to_add,
            permissions_to_remove=to_remove,
            permissions_to_update=to_update,
        )

    def get_modules_needing_sync(self, stored: Iterable[StoredPermission]) -> list[str]:
        """Return sorted module names touched by any pending change."""
        analysis = self.analyze_sync_status(stored)
        if not analysis.needs_sync:
            return []
        modules = {p.module for p in analysis.permissions_to_add}
        modules.update(p.module for p in analysis.permissions_to_update)
        modules.update(p.module for p in analysis.permissions_to_remove)
        return sorted(modules)
