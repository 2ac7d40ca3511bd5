"""CSV backup format: export all entries, parse and merge them back.

The format is a two-column table with a ``Date,Gratitude Entry`` header
and one row per entry::

    Date,Gratitude Entry
    2025-01-01,Warm coffee on a cold morning
    2025-01-01,"A call from an old friend, out of the blue"

A field is quoted only when it contains a comma, a double quote or a
newline; quotes inside a quoted field are doubled.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date

import aiofiles
from loguru import logger

from thankful.core.exceptions import TableImportError

from .dates import format_date, matches_date_shape
from .models import Entries
from .store import EntryStore

HEADER = ("Date", "Gratitude Entry")

_NEEDS_QUOTING = (",", '"', "\n")


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


def _quote_field(value: str) -> str:
    if any(ch in value for ch in _NEEDS_QUOTING):
        return '"' + value.replace('"', '""') + '"'
    return value


def export_table(entries: Mapping[str, list[str]]) -> str:
    """Serialize entries to CSV, day by day in storage order."""
    rows = [HEADER]
    for key, items in entries.items():
        for item in items:
            rows.append((key, item))
    return "\n".join(",".join(_quote_field(str(cell)) for cell in row) for row in rows)


def export_filename(today: date) -> str:
    """Default download name for a backup made on ``today``."""
    return f"gratitude-entries-{format_date(today)}.csv"


# ---------------------------------------------------------------------------
# Parse
# ---------------------------------------------------------------------------


def _split_records(content: str) -> list[str]:
    """Split on newlines that sit outside quoted fields.

    Only a quote that opens a field starts a quoted field, so a stray
    quote inside plain text (``a 5" phone``) never hides the rows after
    it. If the file ends inside an unterminated quoted field, the open
    record and everything after it fall back to plain line splitting.
    """
    records: list[str] = []
    start = 0
    in_quotes = False
    at_field_start = True
    i = 0
    while i < len(content):
        ch = content[i]
        if in_quotes:
            if ch == '"':
                if i + 1 < len(content) and content[i + 1] == '"':
                    i += 1
                else:
                    in_quotes = False
        elif ch == '"' and at_field_start:
            in_quotes = True
        elif ch == "\n":
            records.append(content[start:i])
            start = i + 1
        at_field_start = not in_quotes and ch in (",", "\n")
        i += 1

    tail = content[start:]
    if in_quotes:
        records.extend(tail.split("\n"))
    else:
        records.append(tail)
    return records


def _parse_row(line: str) -> list[str]:
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        ch = line[i]
        if in_quotes and ch == '"':
            if i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = False
        elif ch == '"' and not current:
            in_quotes = True
        elif ch == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1

    fields.append("".join(current))
    return fields


def parse_table(content: str) -> Entries:
    """Parse CSV content into entries grouped by date.

    The first row is always treated as a header. Rows are dropped unless
    they have a ``YYYY-MM-DD``-shaped date and a non-blank entry; the date
    is checked for shape only.
    """
    entries: Entries = {}
    records = _split_records(content)

    for number, record in enumerate(records[1:], start=2):
        line = record.strip()
        if not line:
            continue

        row = _parse_row(line)
        if len(row) < 2:
            logger.debug(f"Skipping CSV row {number}: expected 2 columns, got {len(row)}")
            continue

        key, item = row[0].strip(), row[1].strip()
        if not key or not item or not matches_date_shape(key):
            logger.debug(f"Skipping CSV row {number}: missing entry or malformed date {key!r}")
            continue

        entries.setdefault(key, []).append(item)

    return entries


# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------


def import_table(store: EntryStore, content: str) -> int:
    """Parse CSV content and merge it into the store.

    Returns:
        The number of valid rows in the file. Rows that were already in the
        journal are counted too, even though the merge skips them.

    Raises:
        TableImportError: If the file has no valid rows. The store is not
            touched.
        StorageError: If saving the merged entries fails.
    """
    imported = parse_table(content)
    if not imported:
        raise TableImportError("No valid entries found in CSV file")

    merged = store.merge_imported(imported)
    store.save_all(merged)

    count = sum(len(items) for items in imported.values())
    logger.info(f"Imported {count} entries across {len(imported)} days")
    return count


async def read_table_file(path: str) -> str:
    """Read a whole CSV file as text.

    Raises:
        TableImportError: If the file can't be opened or isn't valid UTF-8.
    """
    try:
        async with aiofiles.open(path, encoding="utf-8-sig") as f:
            return await f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read import file {path}: {e}")
        raise TableImportError("Error reading file") from e


async def import_table_file(store: EntryStore, path: str) -> int:
    """Read a CSV file and merge its entries into the store."""
    content = await read_table_file(path)
    return import_table(store, content)
