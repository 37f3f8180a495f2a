"""Derrik context for passing state between commands."""

import click

from .log import Diagnostics, Level


class DerrikContext:
    def __init__(self):
        self.diagnostics = Diagnostics(Level.ERROR)

    def set_verbosity(self, verbose: int, quiet: int) -> None:
        self.diagnostics = Diagnostics(Level.from_flags(verbose, quiet))


pass_context = click.make_pass_decorator(DerrikContext, ensure=True)
