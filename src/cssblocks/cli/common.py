"""Helpers shared by the CLI commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from cssblocks.errors import CssBlocksError
from cssblocks.options import CssBlocksOptions
from cssblocks.parser import ParseError
from cssblocks.transforms import CompileResult, compile_css


def load_options(options_file: str | None) -> CssBlocksOptions:
    """Read compiler options from a JSON file, or return the defaults."""
    if not options_file:
        return CssBlocksOptions()
    try:
        data = json.loads(Path(options_file).read_text(encoding="utf-8"))
        return CssBlocksOptions.from_mapping(data)
    except (json.JSONDecodeError, ValueError, TypeError) as exc:
        click.echo(f"Invalid options file {options_file}: {exc}", err=True)
        sys.exit(1)


def compile_file(cssfile: str, options: CssBlocksOptions) -> CompileResult:
    """Compile *cssfile*, exiting with status 1 on any compile error."""
    css_path = Path(cssfile)
    try:
        source = css_path.read_text(encoding="utf-8")
        return compile_css(source, str(css_path), options)
    except ParseError as exc:
        # Selector positions are relative to the selector, not the file.
        if exc.selector is None and exc.line is not None:
            location = exc.location
            location.filename = str(css_path)
            click.echo(f"Parse error: {location}: {exc}", err=True)
        else:
            click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except CssBlocksError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
