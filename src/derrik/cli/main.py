"""Derrik CLI main entry point with global options."""

import click

from .. import __version__
from ..context import DerrikContext


@click.group()
@click.version_option(__version__, prog_name="derrik")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase diagnostic output (repeat for more)",
)
@click.option(
    "-q",
    "--quiet",
    count=True,
    help="Decrease diagnostic output (repeat for less)",
)
@click.pass_context
def cli(ctx, verbose, quiet):
    """Derrik helps you move around data with confidence."""
    ctx.ensure_object(DerrikContext)
    ctx.obj.set_verbosity(verbose, quiet)


# Register commands at module level so tests can import cli with commands attached
from .commands.filter import filter
from .commands.read import read
from .commands.test import test

cli.add_command(filter)
cli.add_command(read)
cli.add_command(test)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
