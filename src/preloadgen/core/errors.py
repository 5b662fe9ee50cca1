"""preloadgen error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Selection
- 4xxx: Build / asset host
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Selection (3xxx)
    UNIMPLEMENTED_ROOT = 3001

    # Build (4xxx)
    NOT_A_TEMPLATE = 4001
    ASSET_NOT_FOUND = 4002
    PATH_ESCAPES_ROOT = 4003

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class PreloadError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'UNIMPLEMENTED_ROOT')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(PreloadError):
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

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class UnimplementedRootError(PreloadError):
    """A candidate lives outside every known source root.

    Raised when the include globs surface an asset this generator cannot map
    to a destination href. Always aborts the whole selection.
    """

    @classmethod
    def for_asset(cls, path: str, segments: list[str]) -> "UnimplementedRootError":
        return cls(
            code=ErrorCode.UNIMPLEMENTED_ROOT,
            message=f"No source root handles `{path}` (root segment `{segments[0]}`)",
            details={"path": path, "root": segments[0]},
        )


class BuildError(PreloadError):
    """Errors raised while reading or writing build assets."""

    @classmethod
    def not_a_template(cls, path: str, marker: str) -> "BuildError":
        return cls(
            code=ErrorCode.NOT_A_TEMPLATE,
            message=f"Input '{path}' does not end with '{marker}'",
            details={"path": path, "marker": marker},
        )

    @classmethod
    def asset_not_found(cls, path: str) -> "BuildError":
        return cls(
            code=ErrorCode.ASSET_NOT_FOUND,
            message=f"Asset not found: {path}",
            details={"path": path},
        )

    @classmethod
    def path_escapes_root(cls, path: str, root: str) -> "BuildError":
        return cls(
            code=ErrorCode.PATH_ESCAPES_ROOT,
            message=f"Path '{path}' escapes project root",
            details={"path": path, "root": root},
        )



class InternalError(PreloadError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
