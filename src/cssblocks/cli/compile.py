"""CLI command: cssblocks compile -- rewrite a block stylesheet to plain CSS."""

from __future__ import annotations

import json
from pathlib import Path

import click

from cssblocks.cli.common import compile_file, load_options


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", default=None, help="Write CSS here instead of stdout")
@click.option("--mapping", default=None, help="Write the block/state class mapping as JSON")
@click.option(
    "--options",
    "options_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file with compiler options",
)
def compile(cssfile: str, output: str | None, mapping: str | None, options_file: str | None) -> None:
    """Compile a block stylesheet.

    Replaces every :block and :state(...) selector with its generated class.
    Nothing is written when compilation fails.
    """
    options = load_options(options_file)
    result = compile_file(cssfile, options)

    if output:
        Path(output).write_text(result.css, encoding="utf-8")
    else:
        click.echo(result.css, nl=False)

    if mapping:
        Path(mapping).write_text(
            json.dumps(result.block.to_dict(options), indent=2) + "\n", encoding="utf-8"
        )
