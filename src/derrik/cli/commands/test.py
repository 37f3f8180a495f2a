"""Test command - exercise every diagnostic level."""

import click

from ...context import pass_context


@click.command(hidden=True)
@click.argument("text")
@pass_context
def test(ctx, text):
    """Test conditional output."""
    diagnostics = ctx.diagnostics
    diagnostics.trace(f"trace {text}")
    diagnostics.debug(f"debug {text}")
    diagnostics.info(f"info {text}")
    diagnostics.warn(f"warn {text}")
    diagnostics.error(f"error {text}")
