"""Permission catalog and sync API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CatalogPermissionResponse(BaseModel):
    """One permission in the catalog (also used for sync metadata)."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    description: str
    module: str
    action: str
    label: str = ""
    color: str = ""


class PermissionGroupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    module: str
    label: str
    description: str
    permissions: list[CatalogPermissionResponse]


class StoredPermissionIn(BaseModel):
    """A permission row as currently stored by the caller."""

    name: str = Field(..., min_length=1, max_length=128)
    module: str = Field(..., max_length=64)
    action: str = Field(..., max_length=64)
    description: str | None = Field(default=None, max_length=500)


class SyncStatusRequest(BaseModel):
    permissions: list[StoredPermissionIn] = Field(default_factory=list, max_length=1000)


class SyncStatisticsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_required: int
    total_in_db: int
    matched: int
    to_add: int
    to_remove: int
    to_update: int
    sync_percentage: int


class SyncStatusResponse(BaseModel):
    """Response for POST /permissions/sync-status."""

    needs_sync: bool
    statistics: SyncStatisticsResponse
    permissions_to_add: list[CatalogPermissionResponse]
    permissions_to_remove: list[StoredPermissionIn]
    permissions_to_update: list[CatalogPermissionResponse]
    modules_needing_sync: list[str]
