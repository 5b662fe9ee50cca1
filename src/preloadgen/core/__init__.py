"""Core module exports."""

from preloadgen.core.errors import (
    BuildError,
    ConfigError,
    ErrorCode,
    InternalError,
    PreloadError,
    UnimplementedRootError,
)
from preloadgen.core.logging import (
    BuildContext,
    configure_logging,
)

__all__ = [
    # Errors
    "BuildError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "PreloadError",
    "UnimplementedRootError",
    # Logging
    "BuildContext",
    "configure_logging",
]
