"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags.
"""

from fastapi import APIRouter

from orgperm.api.v1.endpoints import (
    authorization,
    custom_roles,
    health,
    permissions,
    roles,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])
api_router.include_router(permissions.router, prefix="/permissions", tags=["permissions"])
api_router.include_router(
    authorization.router, prefix="/authorization", tags=["authorization"]
)
api_router.include_router(
    custom_roles.router, prefix="/custom-roles", tags=["custom-roles"]
)
