"""CLI utilities."""

from pathlib import Path

import click

from preloadgen.config.constants import PUBSPEC_FILE_NAME


def find_project_root(start_path: Path | None = None) -> Path:
    """Find the package root from the given path.

    Walks up the directory tree looking for a pubspec.yaml.
    If start_path is None, uses the current working directory.

    Raises:
        click.ClickException: If no pubspec.yaml is found
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while current != current.parent:
        if (current / PUBSPEC_FILE_NAME).exists():
            return current
        current = current.parent

    if (current / PUBSPEC_FILE_NAME).exists():
        return current

    raise click.ClickException(
        f"No {PUBSPEC_FILE_NAME} found at or above {start_path}\n"
        "preload commands must be run from within a package."
    )
