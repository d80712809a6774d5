"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (GUARDGEN__SECTION__KEY)
3. Project YAML (.guardgen/config.yaml)
4. Global YAML (~/.config/guardgen/config.yaml)
5. Built-in defaults (this file)

Examples:
    GUARDGEN__LOGGING__LEVEL=DEBUG
    GUARDGEN__QUEUE__TYPE_NAME=SerialQueue
    GUARDGEN__EMIT__INDENT="  "
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_IDENTIFIER_HINT = "must be a non-empty identifier"


def _require_identifier(v: str) -> str:
    if not v or not v.replace("_", "a").replace("$", "a").isalnum() or v[0].isdigit():
        raise ValueError(f"{_IDENTIFIER_HINT}, got {v!r}")
    return v


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        GUARDGEN__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every dispatch decision.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class QueueConfig(BaseModel):
    """The execution queue referenced by generated guard classes.

    The queue is never instantiated here; these names are substituted into
    the emitted text.

    Env vars:
        GUARDGEN__QUEUE__TYPE_NAME: Queue class name
        GUARDGEN__QUEUE__IMPORT_MODULE: Module the queue class is imported from
        GUARDGEN__QUEUE__STREAM_METHOD: Entry point for Observable results
        GUARDGEN__QUEUE__DEFERRED_METHOD: Entry point for Promise results
    """

    type_name: str = Field(default="CommandQueue", description="Queue class name.")
    import_module: str = Field(
        default="@obsidize/command-queue",
        description="Module specifier the queue class is imported from.",
    )
    field_name: str = Field(default="queue", description="Guard field holding the queue.")
    stream_method: str = Field(
        default="observe",
        description="Queue method wrapping calls that return an Observable.",
    )
    deferred_method: str = Field(
        default="add",
        description="Queue method wrapping calls that return a Promise.",
    )

    @field_validator("type_name", "field_name", "stream_method", "deferred_method")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        return _require_identifier(v)


class EmitConfig(BaseModel):
    """Shape of the emitted guard file.

    Env vars:
        GUARDGEN__EMIT__INDENT: Indentation unit for printed output
        GUARDGEN__EMIT__INCLUDE_IMPORTS: Emit the rxjs / queue imports
    """

    indent: str = Field(default="    ", description="Indentation unit for printed output.")
    include_imports: bool = Field(
        default=True,
        description="Emit import declarations for the stream type and the queue.",
    )
    stream_type_name: str = Field(default="Observable")
    stream_type_module: str = Field(default="rxjs")
    source_ref_name: str = Field(
        default="source",
        description="Constructor parameter holding the wrapped instance.",
    )
    interface_suffix: str = Field(default="Like")
    guard_suffix: str = Field(default="Guard")

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: str) -> str:
        if not v or v.strip(" \t"):
            raise ValueError(f"Indent must be non-empty spaces or tabs, got {v!r}")
        return v

    @field_validator("source_ref_name", "stream_type_name")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        return _require_identifier(v)

    @model_validator(mode="after")
    def validate_suffixes(self) -> "EmitConfig":
        if self.interface_suffix == self.guard_suffix:
            raise ValueError(
                f"interface_suffix and guard_suffix must differ, both are {self.interface_suffix!r}"
            )
        return self


class GuardGenConfig(BaseModel):
    """Root configuration for guardgen.

    All settings can be configured via:
    1. Environment variables: GUARDGEN__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    queue: QueueConfig = Field(default_factory=QueueConfig)
    emit: EmitConfig = Field(default_factory=EmitConfig)
