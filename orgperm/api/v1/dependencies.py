"""Presentation-layer dependency injection (composition root).

Routes depend on these providers, never on construction details.
"""

from __future__ import annotations

from orgperm.application.services import AuthorizationService, PermissionSyncAnalyzer
from orgperm.core.config import get_settings
from orgperm.domain.enums import UserRole
from orgperm.domain.exceptions import UnknownRoleException
from orgperm.domain.roles import coerce_role


def get_authorization_service() -> AuthorizationService:
    """Authorization guards configured from settings."""
    settings = get_settings()
    return AuthorizationService(
        enforce_permission_catalog=settings.enforce_permission_catalog
    )


def get_permission_sync_analyzer() -> PermissionSyncAnalyzer:
    """Sync analyzer against the canonical permission table."""
    return PermissionSyncAnalyzer()


def get_role(role: str) -> UserRole:
    """Resolve the {role} path parameter; raise UnknownRoleException (404) if invalid."""
    resolved = coerce_role(role.upper())
    if resolved is None:
        raise UnknownRoleException(role)
    return resolved
