"""Exception-to-response mapping for the FastAPI app.

Every error body has the same shape: error code, message, details and the
request ID the middleware bound for the request. Domain errors keep the
code they were raised with; framework errors get a fixed one.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from orgperm.core.config import get_settings
from orgperm.domain.exceptions import OrgPermException
from orgperm.middleware.request_id import get_request_id

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[str, int] = {
    "PERMISSION_DENIED": 403,
    "ROLE_REQUIRED": 400,
    "CUSTOM_ROLE_INVALID": 400,
    "VALIDATION_ERROR": 400,
    "UNKNOWN_ROLE": 404,
}


def _error_response(
    status_code: int,
    error: str,
    message: Any,
    details: Any = None,
) -> JSONResponse:
    content: dict[str, Any] = {
        "error": error,
        "message": message,
        "details": details if details is not None else {},
        "request_id": get_request_id(),
    }
    return JSONResponse(status_code=status_code, content=content)


def _handle_orgperm_error(request: Request, exc: OrgPermException) -> JSONResponse:
    """Domain errors: status from ERROR_STATUS (400 for unmapped codes)."""
    status_code = ERROR_STATUS.get(exc.error_code, 400)
    if status_code == 403:
        logger.info("%s %s denied: %s", request.method, request.url.path, exc.message)
    body = exc.to_dict()
    return _error_response(status_code, body["error"], body["message"], body["details"])


def _handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_response(
        422,
        "VALIDATION_ERROR",
        "Request validation failed",
        jsonable_encoder(exc.errors()),
    )


def _handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, "HTTP_ERROR", exc.detail)


def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is only exposed when debug is on."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to app; call once from create_app()."""
    app.add_exception_handler(OrgPermException, _handle_orgperm_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)
    app.add_exception_handler(Exception, _handle_unexpected)
