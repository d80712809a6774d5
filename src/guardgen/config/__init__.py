"""Config module exports."""

from guardgen.config.loader import load_config
from guardgen.config.models import (
    EmitConfig,
    GuardGenConfig,
    LoggingConfig,
    LogOutputConfig,
    QueueConfig,
)

__all__ = [
    "load_config",
    "GuardGenConfig",
    "EmitConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "QueueConfig",
]
