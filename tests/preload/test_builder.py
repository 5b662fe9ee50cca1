"""Tests for PreloadBuilder and output id mapping."""

from __future__ import annotations

import pytest

from preloadgen.config.models import PreloadConfig
from preloadgen.core.errors import BuildError, ErrorCode, UnimplementedRootError
from preloadgen.preload.builder import PreloadBuilder, output_id_for
from preloadgen.preload.models import AssetId

TEMPLATE_ID = AssetId("demo", "web/index.template.html")

TEMPLATE = """\
<!DOCTYPE html>
<html>
  <head>
    <!--PRELOAD-HERE-->
    <script defer src="main.dart.js"></script>
  </head>
</html>
"""


class TestOutputIdFor:
    def test_strips_template_marker(self) -> None:
        assert output_id_for(TEMPLATE_ID) == AssetId("demo", "web/index.html")

    def test_only_trailing_marker_is_rewritten(self) -> None:
        input_id = AssetId("demo", "web/a.template.html/index.template.html")
        assert output_id_for(input_id).path == "web/a.template.html/index.html"

    def test_non_template_rejected(self) -> None:
        with pytest.raises(BuildError) as exc_info:
            output_id_for(AssetId("demo", "web/index.html"))
        assert exc_info.value.code == ErrorCode.NOT_A_TEMPLATE

    def test_build_extensions_match_mapping(self) -> None:
        for source, outputs in PreloadBuilder.build_extensions.items():
            assert output_id_for(AssetId("demo", source)).path in outputs


class TestBuild:
    @pytest.mark.asyncio
    async def test_writes_rendered_document(self, make_host) -> None:
        host = make_host(
            {
                "web/index.template.html": TEMPLATE,
                "web/main.dart.js": "",
                "web/main.dart": "",
                "lib/src/x.ttf": "",
            }
        )

        output_id = await PreloadBuilder().build(host, TEMPLATE_ID)

        assert output_id == AssetId("demo", "web/index.html")
        assert host.writes == {
            "web/index.html": """\
<!DOCTYPE html>
<html>
  <head>
    <link rel="preload" href="main.dart.js" as="script">
    <link rel="preload" href="packages/demo/src/x.ttf" as="font" crossorigin>
    <script defer src="main.dart.js"></script>
  </head>
</html>
"""
        }

    @pytest.mark.asyncio
    async def test_repeated_builds_are_byte_identical(self, make_host) -> None:
        files = {"web/index.template.html": TEMPLATE, "web/a.js": "", "web/b.json": ""}
        first = make_host(files)
        second = make_host(files)

        await PreloadBuilder().build(first, TEMPLATE_ID)
        await PreloadBuilder().build(second, TEMPLATE_ID)

        assert first.writes == second.writes

    @pytest.mark.asyncio
    async def test_template_without_anchor_copied_verbatim(self, make_host) -> None:
        host = make_host({"web/index.template.html": "<html></html>\n", "web/a.js": ""})

        await PreloadBuilder().build(host, TEMPLATE_ID)

        assert host.writes == {"web/index.html": "<html></html>\n"}

    @pytest.mark.asyncio
    async def test_config_is_applied(self, make_host) -> None:
        host = make_host(
            {"web/index.template.html": "<!--PRELOAD-HERE-->", "web/a.js": "", "web/b.js": ""}
        )
        builder = PreloadBuilder(PreloadConfig(exclude_globs=("web/b.js",)))

        await builder.build(host, TEMPLATE_ID)

        assert host.writes["web/index.html"] == '<link rel="preload" href="a.js" as="script">'

    @pytest.mark.asyncio
    async def test_unknown_root_writes_nothing(self, make_host) -> None:
        host = make_host({"web/index.template.html": TEMPLATE, "other/x.js": ""})
        builder = PreloadBuilder(PreloadConfig(include_globs=("web/**", "other/**")))

        with pytest.raises(UnimplementedRootError) as exc_info:
            await builder.build(host, TEMPLATE_ID)

        assert type(exc_info.value) is UnimplementedRootError
        assert exc_info.value.details == {"path": "other/x.js", "root": "other"}
        assert host.writes == {}

    @pytest.mark.asyncio
    async def test_missing_template_writes_nothing(self, make_host) -> None:
        host = make_host({"web/a.js": ""})

        with pytest.raises(BuildError) as exc_info:
            await PreloadBuilder().build(host, TEMPLATE_ID)

        assert exc_info.value.code == ErrorCode.ASSET_NOT_FOUND
        assert host.writes == {}

    @pytest.mark.asyncio
    async def test_sink_is_forwarded(self, make_host) -> None:
        host = make_host({"web/index.template.html": TEMPLATE, "web/main.dart": ""})
        skipped: list[str] = []

        await PreloadBuilder().build(host, TEMPLATE_ID, lambda a, _r: skipped.append(a.path))

        assert sorted(skipped) == ["web/index.template.html", "web/main.dart"]
