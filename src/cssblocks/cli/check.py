"""CLI command: cssblocks check -- validate a block stylesheet."""

from __future__ import annotations

from pathlib import Path

import click

from cssblocks.cli.common import compile_file, load_options


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--options",
    "options_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file with compiler options",
)
def check(cssfile: str, options_file: str | None) -> None:
    """Check that a block stylesheet compiles.

    Exits with code 0 when it does, or prints the error and exits with 1.
    """
    result = compile_file(cssfile, load_options(options_file))
    click.echo(f"OK: {Path(cssfile).name} ({len(result.block)} state(s))")
