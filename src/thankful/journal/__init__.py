"""Gratitude journal: entry store, streak and frequency analytics, CSV backups.

Provides the persisted EntryStore, pure analyzers over its snapshots,
the CSV backup codec, and the GratitudeJournal facade tying them together.
"""

from .config import InsightsConfig
from .dates import Clock, FixedClock, SystemClock
from .gratitude import GratitudeJournal
from .models import Highlight, JournalStats, RankedItem
from .store import EntryStore

__all__ = [
    "Clock",
    "EntryStore",
    "FixedClock",
    "GratitudeJournal",
    "Highlight",
    "InsightsConfig",
    "JournalStats",
    "RankedItem",
    "SystemClock",
]
