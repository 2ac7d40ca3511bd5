"""Streak analytics over a snapshot of entries.

A day counts toward a streak when it has at least one entry; a key with an
empty list counts the same as a missing key.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, timedelta

from .dates import format_date, is_date_key, parse_date_key


def _has_entries(entries: Mapping[str, list[str]], day: date) -> bool:
    return bool(entries.get(format_date(day)))


def current_streak(entries: Mapping[str, list[str]], today: date) -> int:
    """Consecutive days with entries, ending today or yesterday.

    An empty today doesn't break the streak yet: the count then runs back
    from yesterday, since the user can still write something today.
    """
    streak = 1 if _has_entries(entries, today) else 0
    day = today - timedelta(days=1)
    while _has_entries(entries, day):
        streak += 1
        day -= timedelta(days=1)
    return streak


def longest_streak(entries: Mapping[str, list[str]]) -> int:
    """Longest run of calendar-consecutive days with entries, all time."""
    days = sorted(parse_date_key(key) for key, items in entries.items() if items and is_date_key(key))
    if not days:
        return 0

    longest = current = 1
    for prev, day in zip(days, days[1:]):
        if (day - prev).days == 1:
            current += 1
            longest = max(longest, current)
        else:
            current = 1
    return longest
