"""thankful add / edit / show / history: write and review entries."""

from __future__ import annotations

import click

from .common import DateParam, get_journal


def _date_key(journal, day) -> str:
    from thankful.journal.dates import format_date

    return format_date(day) if day else journal.today_key()


@click.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--date", "day", type=DateParam(), default=None, help="Day to file the entry under (default: today).")
@click.pass_context
def add(ctx: click.Context, text: tuple[str, ...], day) -> None:
    """Record something you're grateful for."""
    from thankful.core.storage import StorageError
    from thankful.journal.dates import format_date_display

    journal = get_journal(ctx)
    key = _date_key(journal, day)

    try:
        saved = journal.add(key, " ".join(text))
    except StorageError as e:
        raise click.ClickException(f"Could not save your entry: {e}") from e
    if not saved:
        raise click.ClickException("Entry cannot be empty.")

    count = len(journal.get_by_date(key))
    noun = "entry" if count == 1 else "entries"
    click.echo(f"Saved for {format_date_display(key, journal.clock)} ({count} {noun}).")


@click.command()
@click.argument("day", type=DateParam())
@click.argument("number", type=click.IntRange(min=1))
@click.argument("text", nargs=-1, required=True)
@click.pass_context
def edit(ctx: click.Context, day, number: int, text: tuple[str, ...]) -> None:
    """Replace entry NUMBER (as listed by 'show') on DAY."""
    from thankful.core.storage import StorageError
    from thankful.journal.dates import format_date

    journal = get_journal(ctx)
    key = format_date(day)

    try:
        updated = journal.update(key, number - 1, " ".join(text))
    except StorageError as e:
        raise click.ClickException(f"Could not save your edit: {e}") from e
    if not updated:
        if not " ".join(text).strip():
            raise click.ClickException("Entry cannot be empty.")
        raise click.ClickException(f"There is no entry #{number} on {key}.")

    click.echo(f"Updated entry #{number} on {key}.")


@click.command()
@click.argument("day", type=DateParam(), required=False)
@click.pass_context
def show(ctx: click.Context, day) -> None:
    """List the entries for DAY (default: today)."""
    from thankful.journal.dates import format_date_header, parse_date_key

    journal = get_journal(ctx)
    key = _date_key(journal, day)
    items = journal.get_by_date(key)

    click.echo(format_date_header(parse_date_key(key)))
    if not items:
        click.echo("  No entries yet.")
        return
    for i, item in enumerate(items, start=1):
        click.echo(f"  {i}. {item}")


@click.command()
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice(["date", "alpha"]),
    default="date",
    show_default=True,
    help="Group by day (newest first) or list alphabetically.",
)
@click.pass_context
def history(ctx: click.Context, sort_by: str) -> None:
    """Show every entry you've written."""
    from thankful.journal.dates import format_date_display

    journal = get_journal(ctx)
    pairs = journal.list_entries(sort_by)
    if not pairs:
        click.echo("No entries yet. Start with 'thankful add'.")
        return

    if sort_by == "alpha":
        for key, item in pairs:
            click.echo(f"- {item}  ({format_date_display(key, journal.clock)})")
        return

    current = None
    for key, item in pairs:
        if key != current:
            if current is not None:
                click.echo("")
            click.echo(format_date_display(key, journal.clock))
            current = key
        click.echo(f"  - {item}")
