"""thankful export / import: CSV backups."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from .common import get_journal


@click.command()
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, allow_dash=True),
    default=None,
    help="Where to write the CSV ('-' for stdout). Default: gratitude-entries-<today>.csv",
)
@click.pass_context
def export(ctx: click.Context, output: str | None) -> None:
    """Back up every entry to a CSV file."""
    journal = get_journal(ctx)
    content = journal.export_table()

    if output == "-":
        click.echo(content)
        return

    path = Path(output or journal.export_filename())
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise click.ClickException(f"Could not write {path}: {e}") from e

    click.echo(f"Exported {journal.store.total_entry_count()} entries to {path}")


@click.command("import")
@click.argument("file", type=click.Path(dir_okay=False))
@click.pass_context
def import_cmd(ctx: click.Context, file: str) -> None:
    """Merge entries from a CSV backup into your journal."""
    from thankful.core.exceptions import ThankfulError

    journal = get_journal(ctx)
    try:
        count = asyncio.run(journal.import_table_file(file))
    except ThankfulError as e:
        raise click.ClickException(str(e) or "Error importing CSV file") from e

    click.echo(f"Imported {count} entries successfully!")
