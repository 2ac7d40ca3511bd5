"""Entry store: the single source of truth for gratitude entries.

Entries live in one storage slot as a JSON object mapping ``YYYY-MM-DD``
keys to ordered lists of entry strings. Every query re-reads the slot and
every change rewrites it whole.

Reads fail open: a missing, unreadable or corrupt slot reads as an empty
journal, so the app always starts. Writes fail hard: a save that doesn't
land raises, because losing text the user just typed must never be silent.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from loguru import logger

from thankful.core.storage import SlotBackend, StorageError

from .dates import is_date_key
from .models import Entries


def _is_valid_payload(data: object) -> bool:
    if not isinstance(data, dict):
        return False
    for key, items in data.items():
        if not isinstance(key, str) or not isinstance(items, list):
            return False
        if not all(isinstance(item, str) for item in items):
            return False
    return True


class EntryStore:
    """CRUD over the persisted ``date key -> entries`` mapping.

    Example::

        store = EntryStore(LocalFileSlot("~/.thankful-data/gratitude_entries.json"))
        store.add("2025-01-01", "Warm coffee on a cold morning")
        store.get_by_date("2025-01-01")
    """

    def __init__(self, slot: SlotBackend):
        self.slot = slot

    # -- reads ---------------------------------------------------------------

    def get_all(self) -> Entries:
        """Return every stored entry, or ``{}`` if nothing usable is stored."""
        try:
            payload = self.slot.read()
        except StorageError as e:
            logger.warning(f"Could not read journal storage, starting empty: {e}")
            return {}

        if not payload:
            return {}

        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            logger.warning(f"Journal storage is not valid JSON, starting empty: {e}")
            return {}

        if not _is_valid_payload(data):
            logger.warning("Journal storage has an unexpected shape, starting empty")
            return {}
        return data

    def get_by_date(self, key: str) -> list[str]:
        return self.get_all().get(key, [])

    def dates_with_entries(self) -> list[str]:
        """Keys that hold at least one entry, in storage order."""
        return [key for key, items in self.get_all().items() if items]

    def total_entry_count(self) -> int:
        return sum(len(items) for items in self.get_all().values())

    def days_with_entries_count(self) -> int:
        return len(self.dates_with_entries())

    # -- writes --------------------------------------------------------------

    def save_all(self, entries: Mapping[str, list[str]]) -> None:
        """Persist the whole mapping in a single write.

        Raises:
            StorageError: If the underlying slot rejects the write.
        """
        payload = json.dumps(dict(entries), ensure_ascii=False)
        try:
            self.slot.write(payload)
        except StorageError as e:
            logger.error(f"Failed to save journal entries: {e}")
            raise

    def add(self, key: str, text: str) -> bool:
        """Append an entry to a day.

        Returns:
            False if ``text`` is blank or ``key`` is not a real ``YYYY-MM-DD``
            day; True once the entry is saved.
        """
        item = text.strip() if isinstance(text, str) else ""
        if not item:
            return False
        if not is_date_key(key):
            logger.warning(f"Refusing entry for invalid date key {key!r}")
            return False

        entries = self.get_all()
        entries.setdefault(key, []).append(item)
        self.save_all(entries)
        logger.debug(f"Added entry for {key} ({len(entries[key])} that day)")
        return True

    def update(self, key: str, index: int, new_text: str) -> bool:
        """Replace one entry in place. The previous text is not kept.

        Returns:
            False if the new text is blank, the day has no entries list, or
            ``index`` is out of range; True once the change is saved.
        """
        item = new_text.strip() if isinstance(new_text, str) else ""
        if not item:
            return False

        entries = self.get_all()
        items = entries.get(key)
        if items is None:
            return False
        if not 0 <= index < len(items):
            return False

        items[index] = item
        self.save_all(entries)
        logger.debug(f"Updated entry {index} for {key}")
        return True

    def merge_imported(self, imported: Mapping[str, list[str]]) -> Entries:
        """Union imported entries into the stored ones without saving.

        An imported entry is skipped when the exact same string already
        exists on that day. The comparison is case- and whitespace-sensitive.
        Days that don't exist yet take the imported list as-is.
        """
        merged = {key: list(items) for key, items in self.get_all().items()}

        for key, items in imported.items():
            incoming = [item.strip() for item in items if item and item.strip()]
            existing = merged.get(key)
            if existing is None:
                merged[key] = incoming
                continue
            for item in incoming:
                if item not in existing:
                    existing.append(item)

        return merged
