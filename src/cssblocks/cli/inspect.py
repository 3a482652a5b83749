"""CLI command: cssblocks inspect -- list a block's states and classes."""

from __future__ import annotations

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
def inspect(cssfile: str, options_file: str | None) -> None:
    """Compile a block stylesheet and show the classes it generates."""
    options = load_options(options_file)
    block = compile_file(cssfile, options).block

    click.echo(f"Block: {block.name}")
    click.echo(f"Class: {block.class_token(options)}")
    click.echo(f"States: {len(block)}")
    for state in block:
        parts = [f"  {state.name}"]
        if state.group:
            parts.append(f"group={state.group}")
        parts.append(f"class={state.class_token(options)}")
        click.echo("  ".join(parts))
