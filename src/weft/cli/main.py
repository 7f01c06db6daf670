"""Weft CLI entry point: Click group with subcommands."""

import logging

import click

from weft import __version__


@click.group()
@click.version_option(version=__version__, prog_name="weft")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """Weft - compile typed style rules to CSS and place anchored overlays."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from weft.cli.compile import compile_source  # noqa: E402
from weft.cli.inspect import inspect  # noqa: E402
from weft.cli.place import place  # noqa: E402

cli.add_command(compile_source)
cli.add_command(inspect)
cli.add_command(place)
