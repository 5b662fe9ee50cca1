"""Config module exports."""

from preloadgen.config.loader import load_config
from preloadgen.config.models import (
    LoggingConfig,
    LogOutputConfig,
    PreloadConfig,
    PreloadGenConfig,
)

__all__ = [
    "load_config",
    "LoggingConfig",
    "LogOutputConfig",
    "PreloadConfig",
    "PreloadGenConfig",
]
