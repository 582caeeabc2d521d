"""Application services: authorization guards and permission sync analysis."""

from orgperm.application.services.authorization_service import AuthorizationService
from orgperm.application.services.permission_sync import (
    PermissionSyncAnalyzer,
    StoredPermission,
    SyncAnalysis,
    SyncStatistics,
)

__all__ = [
    "AuthorizationService",
    "PermissionSyncAnalyzer",
    "StoredPermission",
    "SyncAnalysis",
    "SyncStatistics",
]
