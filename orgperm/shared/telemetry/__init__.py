"""Shared telemetry: logging setup."""

from orgperm.shared.telemetry.logging import LOG_FORMAT, setup_logging

__all__ = ["LOG_FORMAT", "setup_logging"]
