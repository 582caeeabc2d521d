"""Logging configuration for the application."""

import logging
import sys

from orgperm.core.config import get_settings
from orgperm.middleware.request_id import RequestIDLogFilter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


def setup_logging() -> None:
    """Configure root logging once at startup.

    Level comes from settings.effective_log_level. Output goes to stdout;
    each line carries the ID of the request being served ("-" outside one).
    """
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())
    logging.basicConfig(
        level=settings.effective_log_level,
        format=LOG_FORMAT,
        handlers=[handler],
    )
