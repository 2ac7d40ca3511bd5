"""thankful stats / look-back: streaks, favourites and reflections."""

from __future__ import annotations

import click

from .common import get_journal


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


@click.command()
@click.option("--entries-limit", type=click.IntRange(min=0), default=None, help="How many top entries to show.")
@click.option("--words-limit", type=click.IntRange(min=0), default=None, help="How many top words to show.")
@click.pass_context
def stats(ctx: click.Context, entries_limit: int | None, words_limit: int | None) -> None:
    """Show streaks, totals and your most frequent entries and words."""
    journal = get_journal(ctx)
    snapshot = journal.stats()

    click.echo(f"Current streak:  {_plural(snapshot.current_streak, 'day')}")
    click.echo(f"Longest streak:  {_plural(snapshot.longest_streak, 'day')}")
    click.echo(f"Total entries:   {snapshot.total_entries}")
    click.echo(f"Days completed:  {snapshot.days_with_entries}")

    top_entries = journal.most_frequent_entries(entries_limit)
    click.echo("\nMost frequent entries:")
    if not top_entries:
        click.echo("  No frequent entries yet")
    for item in top_entries:
        click.echo(f"  {item.value} ({item.count}x)")

    top_words = journal.most_frequent_words(words_limit)
    click.echo("\nMost frequent words:")
    if not top_words:
        click.echo("  No frequent words yet")
    for item in top_words:
        click.echo(f"  {item.value} ({item.count}x)")


@click.command("look-back")
@click.option("--random", "with_random", is_flag=True, help="Also show entries from a random day.")
@click.pass_context
def look_back(ctx: click.Context, with_random: bool) -> None:
    """Revisit what you were grateful for a week, a month and a year ago."""
    from thankful.journal.dates import format_date, format_date_display

    journal = get_journal(ctx)

    highlights = journal.look_back()
    if with_random:
        picked = journal.random_highlight()
        if picked is not None:
            highlights.insert(0, picked)

    for highlight in highlights:
        click.echo(highlight.label)
        if highlight.resolved_date is None:
            click.echo("  Nothing written back then.")
            continue
        label = format_date_display(format_date(highlight.resolved_date), journal.clock)
        suffix = "" if highlight.is_exact else " (closest earlier day)"
        click.echo(f"  {label}{suffix}")
        for item in highlight.entries:
            click.echo(f"  - {item}")
