"""Shared fixtures for preload tests."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest

from preloadgen.core.errors import BuildError
from preloadgen.preload.models import AssetId
from preloadgen.preload.selection import matches_glob


class InMemoryHost:
    """AssetHost backed by a dict of path -> contents."""

    def __init__(self, package: str, files: dict[str, str]) -> None:
        self.package = package
        self.files = dict(files)
        self.writes: dict[str, str] = {}
        self.globs_queried: list[str] = []

    async def find_assets(self, glob: str) -> AsyncIterator[AssetId]:
        self.globs_queried.append(glob)
        for path in self.files:
            if matches_glob(path, glob):
                yield AssetId(self.package, path)

    async def read_as_string(self, asset_id: AssetId) -> str:
        if asset_id.path not in self.files:
            raise BuildError.asset_not_found(asset_id.path)
        return self.files[asset_id.path]

    async def write_as_string(self, asset_id: AssetId, contents: str) -> None:
        self.writes[asset_id.path] = contents


@pytest.fixture
def make_host():
    def _make(files: dict[str, str] | list[str], package: str = "demo") -> InMemoryHost:
        if isinstance(files, list):
            files = {path: "" for path in files}
        return InMemoryHost(package, files)

    return _make
