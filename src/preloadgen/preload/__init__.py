"""Preload module - asset selection and preload tag rendering."""

from preloadgen.preload.builder import AssetHost, PreloadBuilder, output_id_for
from preloadgen.preload.classifier import (
    Classified,
    Outcome,
    Skipped,
    SourceRoot,
    UnknownRoot,
    classify,
)
from preloadgen.preload.models import AssetId, PreloadEntry, ResourceKind, SkipReason
from preloadgen.preload.render import render, to_markup
from preloadgen.preload.selection import PreloadSelector, SkipLog, matches_glob

__all__ = [
    "AssetHost",
    "AssetId",
    "Classified",
    "Outcome",
    "PreloadBuilder",
    "PreloadEntry",
    "PreloadSelector",
    "ResourceKind",
    "SkipLog",
    "SkipReason",
    "Skipped",
    "SourceRoot",
    "UnknownRoot",
    "classify",
    "matches_glob",
    "output_id_for",
    "render",
    "to_markup",
]
