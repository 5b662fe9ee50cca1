"""Map a candidate asset to a preload entry, a skip, or an unknown root.

Pure: nothing here logs or raises for data. The caller decides what to do
with each outcome; ``UnknownRoot`` is the only one that must abort a build.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from preloadgen.config.constants import EXCLUDE_CONTAINS, EXCLUDE_ENDS_WITH
from preloadgen.preload.models import AssetId, PreloadEntry, ResourceKind


class SourceRoot(Enum):
    """First path segment of every asset this generator knows how to serve."""

    WEB = "web"
    LIB = "lib"

    @classmethod
    def of(cls, segment: str) -> SourceRoot | None:
        try:
            return cls(segment)
        except ValueError:
            return None

    def rewrite(self, asset_id: AssetId) -> list[str]:
        """Destination segments, relative to the served document."""
        rest = asset_id.path_segments[1:]
        if self is SourceRoot.WEB:
            return rest
        if self is SourceRoot.LIB:
            return ["packages", asset_id.package, *rest]
        raise AssertionError(f"unhandled source root {self!r}")


@dataclass(frozen=True, slots=True)
class Classified:
    entry: PreloadEntry


@dataclass(frozen=True, slots=True)
class Skipped:
    reason: str


@dataclass(frozen=True, slots=True)
class UnknownRoot:
    """Fatal: the asset's root segment has no rewrite rule."""

    asset_id: AssetId


Outcome = Classified | Skipped | UnknownRoot


def skip_reason(asset_id: AssetId) -> str | None:
    """Name/suffix/substring exclusion, in that order. None when kept."""
    if asset_id.path_segments[-1].startswith("."):
        return 'starts with "."'
    for suffix in EXCLUDE_ENDS_WITH:
        if asset_id.path.endswith(suffix):
            return f'ends with "{suffix}"'
    for infix in EXCLUDE_CONTAINS:
        if infix in asset_id.path:
            return f'contains "{infix}"'
    return None


def classify(asset_id: AssetId) -> Outcome:
    if (reason := skip_reason(asset_id)) is not None:
        return Skipped(reason)

    segments = asset_id.path_segments
    root = SourceRoot.of(segments[0]) if len(segments) > 1 else None
    if root is None:
        return UnknownRoot(asset_id)

    segments = root.rewrite(asset_id)
    kind = ResourceKind.from_file_name(segments[-1])
    return Classified(PreloadEntry("/".join(segments), kind))
