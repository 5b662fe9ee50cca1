"""Preload builder - one template in, one document out.

The builder owns no I/O. Everything it reads or writes goes through an
``AssetHost`` supplied by the caller (see files/host.py for the disk-backed
implementation used by the CLI).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Protocol

import structlog

from preloadgen.config.constants import BUILD_EXTENSIONS, OUTPUT_SUFFIX, TEMPLATE_SUFFIX
from preloadgen.config.models import PreloadConfig
from preloadgen.core.errors import BuildError
from preloadgen.core.logging import BuildContext
from preloadgen.preload.models import AssetId
from preloadgen.preload.render import render
from preloadgen.preload.selection import PreloadSelector, SkipSink

log = structlog.get_logger(__name__)


class AssetHost(Protocol):
    """Build-graph operations the builder depends on."""

    def find_assets(self, glob: str) -> AsyncIterator[AssetId]: ...

    async def read_as_string(self, asset_id: AssetId) -> str: ...

    async def write_as_string(self, asset_id: AssetId, contents: str) -> None: ...


def output_id_for(input_id: AssetId) -> AssetId:
    """``web/index.template.html`` -> ``web/index.html``, same package.

    Only the trailing marker is rewritten; a ``.template.html`` elsewhere in
    the path is left alone.
    """
    if not input_id.path.endswith(TEMPLATE_SUFFIX):
        raise BuildError.not_a_template(input_id.path, TEMPLATE_SUFFIX)
    stem = input_id.path[: -len(TEMPLATE_SUFFIX)]
    return AssetId(input_id.package, stem + OUTPUT_SUFFIX)


class PreloadBuilder:
    """Writes ``index.html`` from ``index.template.html`` with preload links."""

    build_extensions = BUILD_EXTENSIONS

    def __init__(self, config: PreloadConfig | None = None) -> None:
        self.config = config or PreloadConfig()
        self.selector = PreloadSelector(
            self.config.include_globs,
            self.config.exclude_globs,
            debug=self.config.debug,
        )

    async def build(
        self,
        host: AssetHost,
        input_id: AssetId,
        sink: SkipSink | None = None,
    ) -> AssetId:
        """Render ``input_id`` and write the derived document.

        Selection runs before anything is read or written, so a fatal
        selection error leaves no output behind.

        Returns:
            The id of the written document.
        """
        output_id = output_id_for(input_id)
        with BuildContext(template=input_id.path, package=input_id.package):
            entries = await self.selector.select(host.find_assets, sink)
            template = await host.read_as_string(input_id)
            await host.write_as_string(output_id, render(template, entries))
            log.info("preload_written", output=output_id.path, entries=len(entries))
        return output_id
