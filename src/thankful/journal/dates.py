"""Date helpers: canonical keys, day/month arithmetic, calendar grids.

Every entry is filed under a ``YYYY-MM-DD`` key. Functions here convert
between those keys and :class:`datetime.date`, and provide the small
amount of calendar arithmetic the journal needs. "Today" is never read
from the wall clock directly; it comes from a :class:`Clock`, so callers
(and tests) can pin it.
"""

from __future__ import annotations

import calendar
import random
import re
from collections.abc import Mapping
from datetime import date, timedelta
from typing import Protocol, runtime_checkable

DATE_KEY_FORMAT = "%Y-%m-%d"
CALENDAR_GRID_DAYS = 42

_DATE_SHAPE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

_DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
_MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


@runtime_checkable
class Clock(Protocol):
    """Anything that can tell the current local calendar date."""

    def today(self) -> date: ...


class SystemClock:
    """Clock backed by the local system date."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Clock that always reports the same day. Handy for tests and backfills."""

    def __init__(self, day: date | str):
        self._day = parse_date_key(day) if isinstance(day, str) else day

    def today(self) -> date:
        return self._day

    def __repr__(self) -> str:
        return f"FixedClock({format_date(self._day)!r})"


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------


def format_date(day: date) -> str:
    """Format a date as its canonical ``YYYY-MM-DD`` key."""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def matches_date_shape(value: str) -> bool:
    """Whether ``value`` looks like ``YYYY-MM-DD``. No calendar check."""
    return isinstance(value, str) and bool(_DATE_SHAPE_RE.fullmatch(value))


def parse_date_key(key: str) -> date:
    """Parse a canonical key into a date.

    Raises:
        ValueError: If ``key`` is not ``YYYY-MM-DD`` or not a real day.
    """
    if not matches_date_shape(key):
        raise ValueError(f"Not a YYYY-MM-DD date key: {key!r}")
    year, month, day = (int(part) for part in key.split("-"))
    return date(year, month, day)


def is_date_key(value: str) -> bool:
    """Whether ``value`` is a canonical key for a real calendar day."""
    try:
        parse_date_key(value)
    except ValueError:
        return False
    return True


def today_key(clock: Clock) -> str:
    return format_date(clock.today())


# ---------------------------------------------------------------------------
# Day arithmetic
# ---------------------------------------------------------------------------


def previous_day(key: str) -> str:
    return format_date(parse_date_key(key) - timedelta(days=1))


def next_day(key: str) -> str:
    return format_date(parse_date_key(key) + timedelta(days=1))


def date_days_ago(clock: Clock, days: int) -> date:
    """The day ``days`` days before the clock's today."""
    return clock.today() - timedelta(days=days)


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------


def ordinal_suffix(day: int) -> str:
    """English ordinal suffix for a day of the month (st, nd, rd, th)."""
    if 3 < day < 21:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def month_name(day: date) -> str:
    return _MONTH_NAMES[day.month - 1]


def format_date_display(key: str, clock: Clock) -> str:
    """Human label for a day: ``Today``, ``Yesterday`` or the full date.

    The full form reads like ``Tuesday, November 11, 2025``.
    """
    day = parse_date_key(key)
    today = clock.today()
    if day == today:
        return "Today"
    if day == today - timedelta(days=1):
        return "Yesterday"
    return f"{_DAY_NAMES[day.weekday()]}, {month_name(day)} {day.day}, {day.year}"


def format_date_header(day: date) -> str:
    """Header form of a date, e.g. ``Tuesday 11th, November 2025``."""
    return f"{_DAY_NAMES[day.weekday()]} {day.day}{ordinal_suffix(day.day)}, {month_name(day)} {day.year}"


# ---------------------------------------------------------------------------
# Months and calendar grid
# ---------------------------------------------------------------------------


def first_day_of_month(day: date) -> date:
    return day.replace(day=1)


def last_day_of_month(day: date) -> date:
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def _shift_months(day: date, months: int) -> date:
    # Clamp the day so Jan 31 + 1 month lands on the last day of February.
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last))


def previous_month(day: date) -> date:
    return _shift_months(day, -1)


def next_month(day: date) -> date:
    return _shift_months(day, 1)


def previous_year(day: date) -> date:
    return _shift_months(day, -12)


def next_year(day: date) -> date:
    return _shift_months(day, 12)


def calendar_start_date(day: date) -> date:
    """The Sunday on or before the first of ``day``'s month."""
    first = first_day_of_month(day)
    # date.weekday() is 0 for Monday; a Sunday-first grid wants Sunday == 0.
    return first - timedelta(days=(first.weekday() + 1) % 7)


def calendar_grid_dates(day: date) -> list[date]:
    """Six full weeks of days covering ``day``'s month, Sunday first."""
    start = calendar_start_date(day)
    return [start + timedelta(days=offset) for offset in range(CALENDAR_GRID_DAYS)]


# ---------------------------------------------------------------------------
# Lookups over entries
# ---------------------------------------------------------------------------


def _dates_with_entries(entries: Mapping[str, list[str]]) -> list[str]:
    return [key for key, items in entries.items() if items and is_date_key(key)]


def nearest_date_with_entries(target: date, entries: Mapping[str, list[str]]) -> date | None:
    """Most recent day on or before ``target`` that has entries."""
    target_key = format_date(target)
    candidates = [key for key in _dates_with_entries(entries) if key <= target_key]
    if not candidates:
        return None
    return parse_date_key(max(candidates))


def random_date_with_entries(
    entries: Mapping[str, list[str]],
    rng: random.Random | None = None,
) -> date | None:
    """A uniformly chosen day that has entries, or None for an empty journal."""
    candidates = _dates_with_entries(entries)
    if not candidates:
        return None
    return parse_date_key((rng or random).choice(candidates))
