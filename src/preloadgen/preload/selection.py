"""Asset selection: discovery, filtering, classification, dedup and ordering."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable, Iterable

import structlog
from wcmatch.glob import DOTGLOB, FORCEUNIX, GLOBSTAR, globmatch

from preloadgen.config.constants import DEFAULT_INCLUDE_GLOBS
from preloadgen.core.errors import UnimplementedRootError
from preloadgen.preload.classifier import Classified, Skipped, UnknownRoot, classify
from preloadgen.preload.models import AssetId, PreloadEntry, SkipReason

log = structlog.get_logger(__name__)

FindAssets = Callable[[str], AsyncIterator[AssetId]]
SkipSink = Callable[[AssetId, str], None]

_GLOB_FLAGS = GLOBSTAR | DOTGLOB | FORCEUNIX


def matches_glob(rel_path: str, pattern: str) -> bool:
    """Check if a posix path matches a glob pattern.

    ``*`` stays within one path segment; ``**`` spans zero or more
    directories. Dot files are matched like any other name.
    """
    return globmatch(rel_path, pattern, flags=_GLOB_FLAGS)


class SkipLog:
    """Collects skip reasons and renders them as an aligned table."""

    def __init__(self) -> None:
        self._reasons: list[SkipReason] = []

    def __call__(self, asset_id: AssetId, reason: str) -> None:
        self._reasons.append(SkipReason(asset_id.path, reason))

    def __len__(self) -> int:
        return len(self._reasons)

    @property
    def reasons(self) -> list[SkipReason]:
        return sorted(self._reasons, key=lambda r: r.path)

    def format_table(self) -> str:
        reasons = self.reasons
        width = max((len(r.path) for r in reasons), default=0)
        lines = [f"{'ASSET'.ljust(width)} REASON"]
        lines.extend(f"{r.path.ljust(width)} {r.reason}" for r in reasons)
        return "\n".join(f"  {line}" for line in lines)


class PreloadSelector:
    """Selects and orders the preload entries for one build.

    Configuration is fixed at construction. ``select`` may be called any
    number of times; it keeps no state between calls.
    """

    def __init__(
        self,
        include_globs: Iterable[str] | None = None,
        exclude_globs: Iterable[str] | None = None,
        *,
        debug: bool = False,
    ) -> None:
        self.include_globs = (
            tuple(include_globs) if include_globs is not None else DEFAULT_INCLUDE_GLOBS
        )
        self.exclude_globs = tuple(exclude_globs or ())
        self.debug = debug

    def _excluded_by(self, asset_id: AssetId) -> str | None:
        for glob in self.exclude_globs:
            if matches_glob(asset_id.path, glob):
                return glob
        return None

    async def _discover(self, find_assets: FindAssets) -> list[AssetId]:
        async def collect(glob: str) -> list[AssetId]:
            return [asset_id async for asset_id in find_assets(glob)]

        batches = await asyncio.gather(*(collect(glob) for glob in self.include_globs))
        found = {asset_id for batch in batches for asset_id in batch}
        return sorted(found, key=lambda a: (a.path, a.package))

    async def select(
        self,
        find_assets: FindAssets,
        sink: SkipSink | None = None,
    ) -> list[PreloadEntry]:
        """Return the deduplicated, ordered entries for every candidate.

        Args:
            find_assets: Yields asset ids matching one include glob.
            sink: Optional receiver for ``(asset_id, reason)`` skips.

        Raises:
            UnimplementedRootError: A candidate has no known source root.
        """
        skip_log = SkipLog() if self.debug else None

        def skip(asset_id: AssetId, reason: str) -> None:
            if skip_log is not None:
                skip_log(asset_id, reason)
            if sink is not None:
                sink(asset_id, reason)

        candidates = await self._discover(find_assets)
        log.debug("candidates_discovered", count=len(candidates), globs=list(self.include_globs))

        preloads: set[PreloadEntry] = set()
        for asset_id in candidates:
            if (glob := self._excluded_by(asset_id)) is not None:
                skip(asset_id, f'excluded by glob "{glob}"')
                continue

            outcome = classify(asset_id)
            if isinstance(outcome, Classified):
                preloads.add(outcome.entry)
            elif isinstance(outcome, Skipped):
                skip(asset_id, outcome.reason)
            elif isinstance(outcome, UnknownRoot):
                raise UnimplementedRootError.for_asset(
                    outcome.asset_id.path, outcome.asset_id.path_segments
                )

        if skip_log:
            log.warning(
                "These assets were excluded when generating preload tags:\n"
                + skip_log.format_table()
            )

        entries = sorted(preloads)
        log.info("preloads_selected", count=len(entries))
        return entries
