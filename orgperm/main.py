"""FastAPI application entry point for orgperm.

create_app() only wires things together: lifespan, exception handlers,
middleware and the v1 router. Permission rules live in orgperm.domain.

Settings are read inside create_app(), so tests can change the environment
and clear the get_settings cache before building a fresh app.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orgperm.api.v1 import api_router
from orgperm.core.config import get_settings
from orgperm.core.exception_handlers import register_exception_handlers
from orgperm.core.lifespan import create_lifespan
from orgperm.middleware import RequestIDMiddleware


def create_app() -> FastAPI:
    """Build the orgperm API application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    register_exception_handlers(app)

    # Last added = outermost: the request ID is bound before CORS runs.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=[settings.request_id_header],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
