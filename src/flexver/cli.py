# SPDX-License-Identifier: MIT
"""CLI entry point for the flexver command."""

from __future__ import annotations

import json
import sys
from typing import TextIO

import click

from . import __version__
from .components import decompose
from .compare import compare, version_key

# Exit statuses for `flexver compare --exit-code`
EXIT_EQUAL = 0
EXIT_LESS = 1
EXIT_GREATER = 2

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(version=__version__, prog_name="flexver")
def cli() -> None:
    """Compare and sort free-form version strings.

    \b
    Examples:
        flexver compare 1.9 1.10
        flexver sort 1.0 1.0-rc1 0.9.9
        flexver decompose 1.0.0-beta.2+build.5
    """


@click.command("compare")
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--exit-code",
    is_flag=True,
    help="Report the result through the exit status (0 equal, 1 less, 2 greater).",
)
def compare_command(version1: str, version2: str, exit_code: bool) -> None:
    """Compare VERSION1 with VERSION2."""
    result = compare(version1, version2)
    click.echo(f"{version1} {_SYMBOLS[result]} {version2}")

    if exit_code:
        sys.exit({-1: EXIT_LESS, 0: EXIT_EQUAL, 1: EXIT_GREATER}[result])


@click.command("sort")
@click.argument("versions", nargs=-1)
@click.option("-r", "--reverse", is_flag=True, help="Sort from newest to oldest.")
@click.option(
    "-f",
    "--file",
    "source",
    type=click.File("r"),
    default="-",
    help="Read versions from FILE when none are given (default: stdin).",
)
def sort_command(versions: tuple[str, ...], reverse: bool, source: TextIO) -> None:
    """Print VERSIONS in ascending order, one per line.

    Reads newline-separated versions from stdin (or --file) when no VERSIONS
    are given.
    """
    if versions:
        items = list(versions)
    else:
        items = [line.strip() for line in source if line.strip()]
        if not items:
            echo_warning("No versions given")

    for version in sorted(items, key=version_key, reverse=reverse):
        click.echo(version)


@click.command("decompose")
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Output components as JSON.")
def decompose_command(version: str, as_json: bool) -> None:
    """Show the components VERSION is compared by."""
    components = decompose(version)

    if as_json:
        click.echo(json.dumps([{"kind": c.kind.value, "text": c.text} for c in components]))
        return

    for component in components:
        click.echo(f"{component.kind.value}\t{component.text}")


cli.add_command(compare_command)
cli.add_command(sort_command)
cli.add_command(decompose_command)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
