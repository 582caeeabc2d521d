"""Application lifespan: startup and shutdown.

The evaluator holds no connections; startup only configures logging and
records the loaded role tables.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from orgperm.core.config import get_settings
from orgperm.domain.roles import ROLE_PERMISSIONS, get_all_required_permission_names
from orgperm.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; log on shutdown."""
    settings = get_settings()
    setup_logging()
    logger.info(
        "%s %s started: %d roles, %d permissions, catalog enforcement %s",
        settings.app_name,
        settings.app_version,
        len(ROLE_PERMISSIONS),
        len(get_all_required_permission_names()),
        "on" if settings.enforce_permission_catalog else "off",
    )
    yield
    logger.info("%s shutting down", settings.app_name)
