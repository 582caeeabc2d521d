"""Request ID middleware and log filter.

Forwards a sane client X-Request-ID (or generates one), echoes it on the
response, and exposes it to logging so permission denials can be traced
to the request that caused them. Raw ASGI, no BaseHTTPMiddleware.
"""

import logging
import re
import uuid
from contextvars import ContextVar
from typing import Callable

REQUEST_ID_MAX_LENGTH = 64
_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,%d}$" % REQUEST_ID_MAX_LENGTH)

_request_id: ContextVar[str] = ContextVar("request_id", default="-")


def get_request_id() -> str:
    """Return the current request's ID, or "-" outside a request."""
    return _request_id.get()


def normalize_request_id(raw: str | None) -> str:
    """Return raw when it is safe to log; otherwise a fresh UUID4."""
    candidate = (raw or "").strip()
    if _REQUEST_ID_RE.match(candidate):
        return candidate
    return str(uuid.uuid4())


def _header_value(scope: dict, name: bytes) -> str | None:
    for key, value in scope.get("headers", []):
        if key.lower() == name:
            return value.decode("latin-1")
    return None


class RequestIDLogFilter(logging.Filter):
    """Attach `request_id` to every record passing through the handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()
        return True


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Wrap app so each HTTP request runs with a request ID bound."""
    header_key = header_name.lower().encode("latin-1")

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        request_id = normalize_request_id(_header_value(scope, header_key))
        scope.setdefault("state", {})["request_id"] = request_id
        token = _request_id.set(request_id)

        async def send_with_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_key, request_id.encode("latin-1")),
                ]
            await send(message)

        try:
            await app(scope, receive, send_with_id)
        finally:
            _request_id.reset(token)

    return asgi_app
