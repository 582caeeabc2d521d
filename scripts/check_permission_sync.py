"""Report how stored permission rows differ from the canonical permission table.

Usage:
    uv run python -m scripts.check_permission_sync <permissions.json>

The JSON file holds a list of {"name", "module", "action", "description"}
objects, e.g. exported from the permissions table. Exits 1 when a sync is
needed so the script can gate deployments.
"""

import json
import sys

from orgperm.application.services import PermissionSyncAnalyzer, StoredPermission


def main() -> None:
    """Print the sync analysis for the given export file."""
    if len(sys.argv) < 2:
        print(
            "Usage: uv run python -m scripts.check_permission_sync <permissions.json>",
            file=sys.stderr,
        )
        sys.exit(2)

    with open(sys.argv[1], encoding="utf-8") as fh:
        rows = json.load(fh)
    stored = [
        StoredPermission(
            name=row["name"],
            module=row.get("module", ""),
            action=row.get("action", ""),
            description=row.get("description"),
        )
        for row in rows
    ]

    analyzer = PermissionSyncAnalyzer()
    analysis = analyzer.analyze_sync_status(stored)
    stats = analysis.statistics
    print(
        f"{stats.matched}/{stats.total_required} required permissions present "
        f"({stats.sync_percentage}%), {stats.total_in_db} stored"
    )
    for p in analysis.permissions_to_add:
        print(f"  + {p.name}: {p.description}")
    for p in analysis.permissions_to_update:
        print(f"  ~ {p.name}: {p.description}")
    for p in analysis.permissions_to_remove:
        print(f"  - {p.name}")
    if analysis.needs_sync:
        modules = ", ".join(analyzer.get_modules_needing_sync(stored))
        print(f"Modules needing sync: {modules}")
        sys.exit(1)
    print("In sync")


if __name__ == "__main__":
    main()
