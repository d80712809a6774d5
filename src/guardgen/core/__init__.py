"""Core module exports."""

from guardgen.core.errors import (
    ConfigError,
    ErrorCode,
    GuardGenError,
    TargetNotFoundError,
)
from guardgen.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "GuardGenError",
    "TargetNotFoundError",
    # Logging
    "configure_logging",
    "get_logger",
]
