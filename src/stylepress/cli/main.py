"""Stylepress CLI entry point: Click group with subcommands."""

import logging

import click

from stylepress import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylepress")
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug)")
def cli(verbose: int) -> None:
    """Stylepress - compress, expand and cache CSS stylesheets."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from stylepress.cli.compress import compress  # noqa: E402
from stylepress.cli.cache import clear_cache, status  # noqa: E402
from stylepress.cli.serve import serve  # noqa: E402

cli.add_command(compress)
cli.add_command(status)
cli.add_command(clear_cache)
cli.add_command(serve)
