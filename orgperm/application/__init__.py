"""Application layer: services built on the domain rules.

Depends only on the domain layer.
"""

from orgperm.application.services import AuthorizationService, PermissionSyncAnalyzer

__all__ = ["AuthorizationService", "PermissionSyncAnalyzer"]
