"""Disk-backed asset host.

Serves a project directory (the one holding pubspec.yaml) to the preload
builder: glob discovery, template reads, output writes.
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import AsyncIterator
from pathlib import Path

import structlog
import yaml

from preloadgen.config.constants import HOST_SKIPPED_DIRS, PUBSPEC_FILE_NAME
from preloadgen.core.errors import BuildError
from preloadgen.preload.models import AssetId
from preloadgen.preload.selection import matches_glob

log = structlog.get_logger(__name__)


def validate_path_in_root(project_root: Path, rel_path: str) -> Path:
    """Resolve rel_path under project_root, refusing traversal outside it.

    Raises:
        BuildError(PATH_ESCAPES_ROOT): If path escapes project_root
    """
    resolved_root = project_root.resolve()
    full_path = (project_root / rel_path).resolve()
    if not full_path.is_relative_to(resolved_root):
        raise BuildError.path_escapes_root(rel_path, str(resolved_root))
    return full_path


def detect_package_name(project_root: Path) -> str:
    """Package name from pubspec.yaml, else the directory name."""
    pubspec = project_root / PUBSPEC_FILE_NAME
    if pubspec.is_file():
        with pubspec.open() as f:
            data = yaml.safe_load(f) or {}
        if isinstance(data, dict) and isinstance(data.get("name"), str):
            return data["name"]
    return project_root.resolve().name


class FileSystemHost:
    """AssetHost over a single package directory."""

    def __init__(self, project_root: Path, package: str | None = None) -> None:
        self._project_root = project_root
        self.package = package or detect_package_name(project_root)
        self._paths: list[str] | None = None
        self._walk_lock = asyncio.Lock()

    def _walk(self) -> list[str]:
        paths: list[str] = []
        for dirpath, dirnames, filenames in os.walk(self._project_root):
            # Prune in place so os.walk never descends
            dirnames[:] = sorted(d for d in dirnames if d not in HOST_SKIPPED_DIRS)
            rel_dir = Path(dirpath).relative_to(self._project_root)
            for name in sorted(filenames):
                paths.append((rel_dir / name).as_posix())
        return paths

    async def _list_paths(self) -> list[str]:
        """Walk the tree once; concurrent callers share the result."""
        async with self._walk_lock:
            if self._paths is None:
                self._paths = await asyncio.to_thread(self._walk)
                log.debug("tree_walked", files=len(self._paths))
            return self._paths

    async def find_assets(self, glob: str) -> AsyncIterator[AssetId]:
        paths = await self._list_paths()
        matched = 0
        for rel_path in paths:
            if matches_glob(rel_path, glob):
                matched += 1
                yield AssetId(self.package, rel_path)
        log.debug("assets_found", glob=glob, count=matched)

    async def read_as_string(self, asset_id: AssetId) -> str:
        full_path = validate_path_in_root(self._project_root, asset_id.path)
        if not full_path.is_file():
            raise BuildError.asset_not_found(asset_id.path)
        return await asyncio.to_thread(full_path.read_text, encoding="utf-8")

    async def write_as_string(self, asset_id: AssetId, contents: str) -> None:
        full_path = validate_path_in_root(self._project_root, asset_id.path)
        full_path.parent.mkdir(parents=True, exist_ok=True)
        await asyncio.to_thread(full_path.write_text, contents, encoding="utf-8")
        self._paths = None
