"""cssembed CLI entry point: Click group with subcommands."""

import logging

import click

from cssembed import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssembed")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """cssembed - embed stylesheet images for packaging and live development."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# Import and register subcommands
from cssembed.cli.build import build  # noqa: E402
from cssembed.cli.rewrite import rewrite  # noqa: E402
from cssembed.cli.inspect import inspect  # noqa: E402
from cssembed.cli.serve import serve  # noqa: E402

cli.add_command(build)
cli.add_command(rewrite)
cli.add_command(inspect)
cli.add_command(serve)
