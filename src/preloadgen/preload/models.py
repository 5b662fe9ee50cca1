"""Value types shared by the classifier, selector and renderer."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from enum import Enum


class ResourceKind(str, Enum):
    """Value of the ``as`` attribute on a preload link."""

    SCRIPT = "script"
    FONT = "font"
    FETCH = "fetch"

    @classmethod
    def from_file_name(cls, file_name: str) -> ResourceKind:
        extension = posixpath.splitext(file_name)[1]
        if extension == ".js":
            return cls.SCRIPT
        if extension in (".ttf", ".woff"):
            return cls.FONT
        return cls.FETCH


@dataclass(frozen=True, slots=True)
class AssetId:
    """A build output: owning package plus a forward-slash path inside it."""

    package: str
    path: str

    @property
    def path_segments(self) -> list[str]:
        return self.path.split("/")

    def __str__(self) -> str:
        return f"{self.package}|{self.path}"


@dataclass(frozen=True, slots=True)
class PreloadEntry:
    """One resource hint.

    Equality and hashing are structural on ``(href, kind)``, so a set of
    entries is already deduplicated.
    """

    href: str
    kind: ResourceKind

    @property
    def sort_key(self) -> tuple[int, str]:
        """Scripts first, then lexicographic by href."""
        return (0 if self.kind is ResourceKind.SCRIPT else 1, self.href)

    def __lt__(self, other: PreloadEntry) -> bool:
        return self.sort_key < other.sort_key


@dataclass(frozen=True, slots=True)
class SkipReason:
    """Why a candidate produced no entry. Diagnostics only."""

    path: str
    reason: str
