"""objtasks CLI entry point: Click group with subcommands."""

import logging

import click

from objtasks import __version__


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """objtasks - CSS selector builder and object helpers."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# Import and register subcommands
from objtasks.cli.selector import combine, selector  # noqa: E402
from objtasks.cli.objects import json_cmd, rectangle  # noqa: E402

cli.add_command(selector)
cli.add_command(combine)
cli.add_command(rectangle)
cli.add_command(json_cmd)
