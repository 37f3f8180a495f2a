"""Read command - print a file's contents."""

import sys
from pathlib import Path

import click

from ...context import pass_context
from ...models.errors import IOOpenError


def read_text(path: str | Path) -> str:
    """Return the whole file as text.

    Raises:
        IOOpenError: If the file cannot be opened or decoded
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise IOOpenError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise IOOpenError(path, f"not valid UTF-8 ({e.reason})") from e


@click.command()
@click.argument("path", type=click.Path())
@pass_context
def read(ctx, path):
    """Print file content.

    Examples:
        derrik read notes.txt
    """
    try:
        contents = read_text(path)
    except IOOpenError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    ctx.diagnostics.debug(f"Read {len(contents)} characters from {path}")
    click.echo("With text:")
    click.echo(contents)
