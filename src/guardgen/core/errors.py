"""guardgen error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Generation
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Generation (3xxx)
    TARGET_NOT_FOUND = 3001


@dataclass(frozen=True, slots=True)
class GuardGenError(Exception):
    """Base error with structured context for CLI and JSON output."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'TARGET_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(GuardGenError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class TargetNotFoundError(GuardGenError):
    """The input has no top-level class with the requested name."""

    @classmethod
    def for_target(cls, input_file_name: str, target_class: str) -> "TargetNotFoundError":
        source = input_file_name or "<input>"
        return cls(
            code=ErrorCode.TARGET_NOT_FOUND,
            message=f'Input "{source}" does not declare a top-level class named "{target_class}"',
            details={"input_file_name": input_file_name, "target_class": target_class},
        )
