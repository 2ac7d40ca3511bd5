"""Reflections: look-back highlights, random highlights and listings."""

from __future__ import annotations

import random
from collections.abc import Mapping
from datetime import date, timedelta

from .dates import format_date, nearest_date_with_entries, random_date_with_entries
from .models import Highlight

# (label, days back from today)
LOOK_BACK_PERIODS: tuple[tuple[str, int], ...] = (
    ("A Week Ago", 7),
    ("A Month Ago", 30),
    ("3 Months Ago", 90),
    ("6 Months Ago", 180),
    ("1 Year Ago", 365),
)

SORT_KEYS = ("date", "alpha")


def highlight_for(label: str, target: date, entries: Mapping[str, list[str]]) -> Highlight:
    """Entries for ``target``, or for the nearest earlier day that has some."""
    items = entries.get(format_date(target))
    if items:
        return Highlight(label=label, requested_date=target, resolved_date=target, entries=list(items))

    nearest = nearest_date_with_entries(target, entries)
    if nearest is None:
        return Highlight(label=label, requested_date=target)
    return Highlight(
        label=label,
        requested_date=target,
        resolved_date=nearest,
        entries=list(entries[format_date(nearest)]),
    )


def look_back(entries: Mapping[str, list[str]], today: date) -> list[Highlight]:
    return [highlight_for(label, today - timedelta(days=days), entries) for label, days in LOOK_BACK_PERIODS]


def random_highlight(
    entries: Mapping[str, list[str]],
    rng: random.Random | None = None,
) -> Highlight | None:
    """Entries from a randomly picked day, or None for an empty journal."""
    day = random_date_with_entries(entries, rng)
    if day is None:
        return None
    return Highlight(
        label="Random Highlight",
        requested_date=day,
        resolved_date=day,
        entries=list(entries[format_date(day)]),
    )


def list_entries(entries: Mapping[str, list[str]], sort_by: str = "date") -> list[tuple[str, str]]:
    """Flatten entries into ``(date key, text)`` pairs.

    ``sort_by="date"`` puts the newest day first and orders each day's
    entries alphabetically; ``sort_by="alpha"`` orders everything by text,
    ignoring case.
    """
    if sort_by not in SORT_KEYS:
        raise ValueError(f"Unknown sort key {sort_by!r}; expected one of {', '.join(SORT_KEYS)}")

    pairs = [(key, item) for key, items in entries.items() for item in items]
    if sort_by == "alpha":
        return sorted(pairs, key=lambda pair: (pair[1].casefold(), pair[1]))

    pairs.sort(key=lambda pair: (pair[1].casefold(), pair[1]))
    # Stable second pass: newest day first, text order kept within a day.
    pairs.sort(key=lambda pair: pair[0], reverse=True)
    return pairs
