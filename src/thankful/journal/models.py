"""Core data models for the gratitude journal.

The persisted shape is deliberately plain: a dict mapping ``YYYY-MM-DD``
keys to lists of entry strings. Everything here is either an alias for
that shape or a derived, never-persisted result type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

DateKey = str
EntryList = list[str]
Entries = dict[DateKey, EntryList]


@dataclass(frozen=True)
class RankedItem:
    """One row of a frequency ranking.

    Attributes:
        value: The counted item (a normalized entry or a word).
        count: How many times it occurred.
    """

    value: str
    count: int

    def __repr__(self) -> str:
        return f"RankedItem({self.value!r}, count={self.count})"


@dataclass
class Highlight:
    """Entries surfaced for a look-back view.

    Attributes:
        label: Human label, e.g. ``"A Week Ago"``.
        requested_date: The day the look-back aimed for.
        resolved_date: The day the entries actually come from; the nearest
            earlier day with entries when ``requested_date`` had none.
            None when nothing on or before the requested day exists.
        entries: Entries of ``resolved_date`` (empty when unresolved).
    """

    label: str
    requested_date: date
    resolved_date: date | None = None
    entries: EntryList = field(default_factory=list)

    @property
    def is_exact(self) -> bool:
        """Whether the entries come from the requested day itself."""
        return self.resolved_date == self.requested_date


@dataclass(frozen=True)
class JournalStats:
    """Totals snapshot for the insights view."""

    total_entries: int
    days_with_entries: int
    current_streak: int
    longest_streak: int
