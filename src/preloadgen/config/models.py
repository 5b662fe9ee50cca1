"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (PRELOADGEN__SECTION__KEY)
3. Project YAML (preload.yaml)
4. Built-in defaults (this file)

Environment Variable Format:
    PRELOADGEN__<SECTION>__<KEY>=<VALUE>

Examples:
    PRELOADGEN__LOGGING__LEVEL=DEBUG
    PRELOADGEN__PRELOAD__DEBUG=true
    PRELOADGEN__PRELOAD__EXCLUDE_GLOBS='["web/assets/**"]'
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from preloadgen.config.constants import DEFAULT_INCLUDE_GLOBS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


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
        PRELOADGEN__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class PreloadConfig(BaseModel):
    """Asset selection configuration. Immutable once built.

    Env vars:
        PRELOADGEN__PRELOAD__INCLUDE_GLOBS: JSON list of include globs
        PRELOADGEN__PRELOAD__EXCLUDE_GLOBS: JSON list of exclude globs
        PRELOADGEN__PRELOAD__DEBUG: Log a table of skipped assets
    """

    model_config = ConfigDict(frozen=True)

    include_globs: tuple[str, ...] = Field(
        default=DEFAULT_INCLUDE_GLOBS,
        description="Globs queried for candidate assets.",
    )
    exclude_globs: tuple[str, ...] = Field(
        default=(),
        description="Candidates matching any of these globs are skipped.",
    )
    debug: bool = Field(
        default=False,
        description="Warn with a table of every skipped asset and the reason.",
    )

    @field_validator("include_globs", "exclude_globs")
    @classmethod
    def validate_globs(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for glob in v:
            if not glob.strip():
                raise ValueError("Globs must be non-empty")
        return v


class PreloadGenConfig(BaseModel):
    """Root configuration model (for type hints)."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    preload: PreloadConfig = Field(default_factory=PreloadConfig)
