"""preload build command - render index.html from index.template.html."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click
from pydantic import ValidationError

from preloadgen.cli.utils import find_project_root
from preloadgen.config.loader import load_config
from preloadgen.config.models import PreloadConfig
from preloadgen.core.errors import InternalError, PreloadError
from preloadgen.core.logging import configure_logging
from preloadgen.files.host import FileSystemHost
from preloadgen.preload.builder import PreloadBuilder
from preloadgen.preload.models import AssetId

DEFAULT_TEMPLATE = next(iter(PreloadBuilder.build_extensions))


@click.command()
@click.argument("path", default=None, required=False, type=click.Path(exists=True, path_type=Path))
@click.option(
    "--template",
    default=DEFAULT_TEMPLATE,
    show_default=True,
    help="Template path relative to the package root",
)
@click.option(
    "--include",
    "include_globs",
    multiple=True,
    help="Include glob (repeatable; replaces the configured include globs)",
)
@click.option(
    "--exclude",
    "exclude_globs",
    multiple=True,
    help="Exclude glob (repeatable; replaces the configured exclude globs)",
)
@click.option(
    "--debug/--no-debug",
    default=None,
    help="Log every skipped asset and why (default: from config)",
)
@click.option("--package", default=None, help="Package name (default: from pubspec.yaml)")
@click.option(
    "--config",
    "config_file",
    default=None,
    type=click.Path(path_type=Path),
    help="Config file (default: preload.yaml in the package root)",
)
@click.pass_context
def build_command(
    ctx: click.Context,
    path: Path | None,
    template: str,
    include_globs: tuple[str, ...],
    exclude_globs: tuple[str, ...],
    debug: bool | None,
    package: str | None,
    config_file: Path | None,
) -> None:
    """Write preload link tags into the package's index.html.

    PATH is the package root. If not specified, auto-detects by walking
    up from the current directory to find pubspec.yaml.
    """
    project_root = find_project_root(path)

    try:
        config = load_config(project_root, config_file=config_file)
    except PreloadError as e:
        raise click.ClickException(str(e)) from e

    if not (ctx.obj or {}).get("verbose"):
        configure_logging(config=config.logging)

    overrides: dict[str, object] = {}
    if include_globs:
        overrides["include_globs"] = include_globs
    if exclude_globs:
        overrides["exclude_globs"] = exclude_globs
    if debug is not None:
        overrides["debug"] = debug
    try:
        preload_config = PreloadConfig.model_validate(
            {**config.preload.model_dump(), **overrides}
        )
    except ValidationError as e:
        raise click.ClickException(f"Invalid preload options: {e.errors()[0]['msg']}") from e

    host = FileSystemHost(project_root, package)
    builder = PreloadBuilder(preload_config)
    try:
        output_id = asyncio.run(builder.build(host, AssetId(host.package, template)))
    except PreloadError as e:
        raise click.ClickException(str(e)) from e
    except Exception as e:
        error = InternalError.unexpected(f"{type(e).__name__}: {e}", template=template)
        raise click.ClickException(str(error)) from e

    click.echo(f"Wrote {project_root / output_id.path}")
