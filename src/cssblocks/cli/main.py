"""cssblocks CLI entry point: Click group with subcommands."""

import logging

import click

from cssblocks import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssblocks")
@click.option("-v", "--verbose", is_flag=True, help="Log compiler activity to stderr")
def cli(verbose: bool) -> None:
    """cssblocks - compile :block and :state selectors into plain CSS."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from cssblocks.cli.compile import compile  # noqa: E402
from cssblocks.cli.check import check  # noqa: E402
from cssblocks.cli.inspect import inspect  # noqa: E402

cli.add_command(compile)
cli.add_command(check)
cli.add_command(inspect)
