"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
For configurable values, see models.py (PreloadConfig, LoggingConfig).
"""

# =============================================================================
# Template
# =============================================================================

PRELOAD_PLACEHOLDER = "<!--PRELOAD-HERE-->"
"""Anchor replaced by the generated preload lines."""

TEMPLATE_SUFFIX = ".template.html"
OUTPUT_SUFFIX = ".html"

BUILD_EXTENSIONS: dict[str, tuple[str, ...]] = {
    "web/index.template.html": ("web/index.html",),
}
"""Static input -> output mapping for the builder."""

# =============================================================================
# Selection defaults
# =============================================================================

DEFAULT_INCLUDE_GLOBS: tuple[str, ...] = ("web/**", "lib/**")

# Generated or non-deployable outputs of the Dart build pipeline.
EXCLUDE_ENDS_WITH: tuple[str, ...] = (
    ".dart",
    ".dart.bootstrap.js",
    ".digests",
    ".g.part",
    ".html",
    ".ico",
    ".module.library",
    ".ng_placeholder",
)

# Intermediate artifacts of dart2js / dartdevc compilation.
EXCLUDE_CONTAINS: tuple[str, ...] = (
    ".dart2js.",
    ".dartdevc.",
    ".ddc.js",
)

# =============================================================================
# Filesystem host
# =============================================================================

HOST_SKIPPED_DIRS: frozenset[str] = frozenset(
    (
        ".git",
        ".hg",
        ".svn",
        ".dart_tool",
        "build",
    )
)
"""Directories never walked when discovering assets on disk."""

CONFIG_FILE_NAME = "preload.yaml"
PUBSPEC_FILE_NAME = "pubspec.yaml"
