"""Filter command - keep JSONL records whose fields contain a keyword."""

import sys

import click

from ...context import pass_context
from ...core.pipeline import run_filter
from ...models.errors import DerrikError
from ...models.filter_spec import FilterSpec, Operator


def split_fields(values) -> list:
    """Flatten repeated --where values, splitting each on spaces."""
    fields = []
    for value in values:
        fields.extend(part for part in value.split(" ") if part)
    return fields


@click.command()
@click.argument("input_files", nargs=-1, required=True, type=click.Path())
@click.option(
    "--where",
    "where",
    multiple=True,
    required=True,
    help="Field to search. Repeat, or quote several names separated "
    'by spaces (--where "name description").',
)
@click.option(
    "--operator",
    type=click.Choice([op.value for op in Operator], case_sensitive=False),
    default=None,
    help='Operators: "contains" or "icontains" (insensitive-case).',
)
@click.option("--what", required=True, help="Keyword to search for.")
@click.option(
    "--output",
    type=click.Path(),
    default=None,
    help="Path to the output file (default: stdout).",
)
@pass_context
def filter(ctx, input_files, where, operator, what, output):
    """Filter JSONL records by field content.

    Emits, byte for byte and in input order, every line whose listed
    top-level fields contain WHAT in their JSON rendering. Lines that are
    not valid JSON are dropped silently.

    Examples:
        # Records whose name contains "John"
        derrik filter users.jsonl --where name --what John

        # Search several fields, ignoring case in the data
        derrik filter a.jsonl b.jsonl --where "name description" \\
            --operator icontains --what engineer

        # Write matches to a file
        derrik filter app.log --where level --what error --output errors.jsonl

    Note:
        icontains lower-cases the field text only, so WHAT should be
        given in lower case.
    """
    diagnostics = ctx.diagnostics
    try:
        spec = FilterSpec.build(
            fields=split_fields(where),
            needle=what,
            operator=operator.lower() if operator else None,
        )
        run_filter(input_files, spec, output=output, diagnostics=diagnostics)
    except DerrikError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
