# SPDX-License-Identifier: MIT
"""CLI entry point for the semtag command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ..config import ConfigError, SortConfig, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[SortConfig] = None
        self.project_dir: Optional[Path] = None

    def load_config(self) -> SortConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def resolve_config(ctx: Context, **overrides: Optional[bool]) -> SortConfig:
    """Load configuration and apply command-line overrides.

    Exits with status 1 if the configuration is invalid.
    """
    try:
        config = ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)
    return config.with_overrides(**overrides)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(package_name="semantic-tag")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read configuration from this directory instead of the current one.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Sort and inspect semantic version tags.

    Lines that are not v-prefixed SemVer 2.0 tags are ignored.

    \b
    Examples:
        git tag | semtag sort
        git tag | semtag sort --reverse --no-pre-releases
        semtag latest tags.txt
        semtag parse v1.2.3-rc.1+build.5
        semtag compare v1.0.0-rc.1 v1.0.0
    """
    ctx.project_dir = directory
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("semantic_tag").setLevel(level)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# Import and register commands
from .commands import sort, latest, parse, compare

cli.add_command(sort.sort)
cli.add_command(latest.latest)
cli.add_command(parse.parse)
cli.add_command(compare.compare)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
