"""Render preload entries as link tags and splice them into a template."""

from __future__ import annotations

import re
from collections.abc import Iterable

from preloadgen.config.constants import PRELOAD_PLACEHOLDER
from preloadgen.preload.models import PreloadEntry, ResourceKind

_PLACEHOLDER_PATTERN = re.compile(r"([\t ]*)(" + re.escape(PRELOAD_PLACEHOLDER) + r")")
_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")


def is_absolute(href: str) -> bool:
    """True for root-relative paths and URLs with a scheme and authority."""
    return href.startswith("/") or bool(_SCHEME_PATTERN.match(href))


def to_markup(entry: PreloadEntry) -> str:
    # Only same-origin scripts go without crossorigin.
    cross_origin = ""
    if is_absolute(entry.href) or entry.kind is not ResourceKind.SCRIPT:
        cross_origin = " crossorigin"
    return f'<link rel="preload" href="{entry.href}" as="{entry.kind.value}"{cross_origin}>'


def render(template_text: str, entries: Iterable[PreloadEntry]) -> str:
    """Replace the first placeholder with one link line per entry.

    The whitespace preceding the placeholder on its line is repeated in front
    of every emitted line. Templates without a placeholder come back unchanged.
    """
    lines = [to_markup(entry) for entry in entries]

    def substitute(match: re.Match[str]) -> str:
        indent = match.group(1)
        return "\n".join(f"{indent}{line}" for line in lines)

    return _PLACEHOLDER_PATTERN.sub(substitute, template_text, count=1)
