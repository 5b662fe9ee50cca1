"""preloadgen CLI - preload command."""

import click

from preloadgen import __version__
from preloadgen.cli.build import build_command
from preloadgen.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="preload")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """preloadgen - Generate <link rel="preload"> tags for a web build."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(build_command, name="build")


if __name__ == "__main__":
    cli()
