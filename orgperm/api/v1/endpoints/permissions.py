"""Permissions API: custom-role catalog and storage sync status."""

from typing import Annotated

from fastapi import APIRouter, Depends

from orgperm.api.v1.dependencies import get_permission_sync_analyzer
from orgperm.application.services import PermissionSyncAnalyzer, StoredPermission
from orgperm.domain.catalog import (
    PERMISSION_MODULES,
    CatalogPermission,
    format_permission_name,
    get_permission_color,
)
from orgperm.schemas.permission import (
    CatalogPermissionResponse,
    PermissionGroupResponse,
    StoredPermissionIn,
    SyncStatisticsResponse,
    SyncStatusRequest,
    SyncStatusResponse,
)

router = APIRouter()


def _to_response(permission: CatalogPermission) -> CatalogPermissionResponse:
    return CatalogPermissionResponse(
        name=permission.name,
        description=permission.description,
        module=permission.module,
        action=permission.action,
        label=format_permission_name(permission.name),
        color=get_permission_color(permission.name),
    )


@router.get("", response_model=list[PermissionGroupResponse])
def list_permission_catalog() -> list[PermissionGroupResponse]:
    """Return grantable permissions grouped by module."""
    return [
        PermissionGroupResponse(
            module=group.module,
            label=group.label,
            description=group.description,
            permissions=[_to_response(p) for p in group.permissions],
        )
        for group in PERMISSION_MODULES
    ]


@router.post("/sync-status", response_model=SyncStatusResponse)
def get_sync_status(
    body: SyncStatusRequest,
    analyzer: Annotated[PermissionSyncAnalyzer, Depends(get_permission_sync_analyzer)],
) -> SyncStatusResponse:
    """Compare the caller's stored permission rows with the canonical table."""
    stored = [
        StoredPermission(
            name=p.name, module=p.module, action=p.action, description=p.description
        )
        for p in body.permissions
    ]
    analysis = analyzer.analyze_sync_status(stored)
    return SyncStatusResponse(
        needs_sync=analysis.needs_sync,
        statistics=SyncStatisticsResponse.model_validate(analysis.statistics),
        permissions_to_add=[_to_response(p) for p in analysis.permissions_to_add],
        permissions_to_remove=[
            StoredPermissionIn(
                name=p.name, module=p.module, action=p.action, description=p.description
            )
            for p in analysis.permissions_to_remove
        ],
        permissions_to_update=[_to_response(p) for p in analysis.permissions_to_update],
        modules_needing_sync=analyzer.get_modules_needing_sync(stored),
    )
