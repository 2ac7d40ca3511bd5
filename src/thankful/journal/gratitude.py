"""GratitudeJournal: the one object a front end needs.

Bundles the entry store, a clock and the analyzers behind a small
read/write/query surface. A front end (the CLI, or anything else) calls
into it and re-renders; nothing here prints or formats for display.
"""

from __future__ import annotations

import random
from collections.abc import Mapping

from thankful.core.config import Config
from thankful.core.storage import LocalFileSlot, SlotBackend

from . import csv_codec, frequency, reflections, streaks
from .config import InsightsConfig
from .dates import Clock, SystemClock, format_date
from .models import Entries, Highlight, JournalStats, RankedItem
from .store import EntryStore


class GratitudeJournal:
    """Collaborator-facing facade over the entry store and analytics.

    Example::

        journal = GratitudeJournal(MemorySlot(), clock=FixedClock("2025-01-04"))
        journal.add_today("Sunny walk")
        journal.current_streak()
    """

    def __init__(
        self,
        slot: SlotBackend,
        clock: Clock | None = None,
        insights: InsightsConfig | None = None,
        rng: random.Random | None = None,
    ):
        self.store = EntryStore(slot)
        self.clock = clock or SystemClock()
        self.insights = insights or InsightsConfig()
        self._rng = rng

    @classmethod
    def from_config(cls, config: Config, clock: Clock | None = None) -> GratitudeJournal:
        """Build a journal backed by the entries file named in ``config``."""
        slot = LocalFileSlot(config.get_storage_path())
        return cls(slot, clock=clock, insights=InsightsConfig.from_config(config))

    # -- store ---------------------------------------------------------------

    def get_all(self) -> Entries:
        return self.store.get_all()

    def get_by_date(self, key: str) -> list[str]:
        return self.store.get_by_date(key)

    def add(self, key: str, text: str) -> bool:
        return self.store.add(key, text)

    def add_today(self, text: str) -> bool:
        return self.store.add(self.today_key(), text)

    def update(self, key: str, index: int, new_text: str) -> bool:
        return self.store.update(key, index, new_text)

    def merge_imported(self, imported: Mapping[str, list[str]]) -> Entries:
        return self.store.merge_imported(imported)

    def save_all(self, entries: Mapping[str, list[str]]) -> None:
        self.store.save_all(entries)

    def today_key(self) -> str:
        return format_date(self.clock.today())

    # -- analytics -----------------------------------------------------------

    def current_streak(self) -> int:
        return streaks.current_streak(self.store.get_all(), self.clock.today())

    def longest_streak(self) -> int:
        return streaks.longest_streak(self.store.get_all())

    def most_frequent_entries(self, limit: int | None = None) -> list[RankedItem]:
        if limit is None:
            limit = self.insights.frequent_entries_limit
        return frequency.most_frequent_entries(self.store.get_all(), limit)

    def most_frequent_words(self, limit: int | None = None) -> list[RankedItem]:
        if limit is None:
            limit = self.insights.frequent_words_limit
        return frequency.most_frequent_words(
            self.store.get_all(),
            limit,
            min_word_length=self.insights.min_word_length,
        )

    def stats(self) -> JournalStats:
        entries = self.store.get_all()
        return JournalStats(
            total_entries=sum(len(items) for items in entries.values()),
            days_with_entries=sum(1 for items in entries.values() if items),
            current_streak=streaks.current_streak(entries, self.clock.today()),
            longest_streak=streaks.longest_streak(entries),
        )

    # -- reflections ---------------------------------------------------------

    def look_back(self) -> list[Highlight]:
        return reflections.look_back(self.store.get_all(), self.clock.today())

    def random_highlight(self) -> Highlight | None:
        return reflections.random_highlight(self.store.get_all(), self._rng)

    def list_entries(self, sort_by: str = "date") -> list[tuple[str, str]]:
        return reflections.list_entries(self.store.get_all(), sort_by)

    # -- backup --------------------------------------------------------------

    def export_table(self) -> str:
        return csv_codec.export_table(self.store.get_all())

    def export_filename(self) -> str:
        return csv_codec.export_filename(self.clock.today())

    def import_table(self, content: str) -> int:
        return csv_codec.import_table(self.store, content)

    async def import_table_file(self, path: str) -> int:
        return await csv_codec.import_table_file(self.store, path)
