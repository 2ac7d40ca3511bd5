"""Tests for thankful.journal.csv_codec."""

import json
from datetime import date

import pytest

from thankful.core.exceptions import TableImportError
from thankful.core.storage import MemorySlot, StorageQuotaError
from thankful.journal.csv_codec import (
    export_filename,
    export_table,
    import_table,
    import_table_file,
    parse_table,
    read_table_file,
)
from thankful.journal.store import EntryStore


class TestExport:
    def test_header_only_for_empty_store(self):
        assert export_table({}) == "Date,Gratitude Entry"

    def test_rows_in_storage_order(self):
        entries = {"2025-01-02": ["b"], "2025-01-01": ["a1", "a2"]}
        assert export_table(entries) == "Date,Gratitude Entry\n2025-01-02,b\n2025-01-01,a1\n2025-01-01,a2"

    def test_quotes_only_when_needed(self):
        entries = {
            "2025-01-01": [
                "plain text",
                "A call from an old friend, out of the blue",
                'She said "thanks"',
                "two\nlines",
            ]
        }
        lines = export_table(entries).split("\n", 2)
        assert lines[1] == "2025-01-01,plain text"
        assert lines[2].split("\n")[0] == '2025-01-01,"A call from an old friend, out of the blue"'
        assert '2025-01-01,"She said ""thanks"""' in export_table(entries)
        assert '2025-01-01,"two\nlines"' in export_table(entries)

    def test_comma_and_quote_field(self):
        assert export_table({"2025-01-01": ['a,b"c']}).endswith('2025-01-01,"a,b""c"')

    def test_export_filename(self):
        assert export_filename(date(2025, 3, 9)) == "gratitude-entries-2025-03-09.csv"


class TestParse:
    def test_header_is_always_skipped(self):
        assert parse_table("2025-01-01,looks like data\n2025-01-02,real") == {"2025-01-02": ["real"]}

    def test_groups_by_date(self):
        content = "Date,Gratitude Entry\n2025-01-01,a\n2025-01-02,b\n2025-01-01,c\n"
        assert parse_table(content) == {"2025-01-01": ["a", "c"], "2025-01-02": ["b"]}

    def test_quoted_comma_and_escaped_quote(self):
        content = 'Date,Gratitude Entry\n2025-01-01,"a,b""c"'
        assert parse_table(content) == {"2025-01-01": ['a,b"c']}

    def test_trims_fields_and_skips_blank_lines(self):
        content = "Date,Gratitude Entry\n\n   \n 2025-01-01 ,  tea  \r\n"
        assert parse_table(content) == {"2025-01-01": ["tea"]}

    def test_crlf_file(self):
        content = "Date,Gratitude Entry\r\n2025-01-01,tea\r\n2025-01-02,sun\r\n"
        assert parse_table(content) == {"2025-01-01": ["tea"], "2025-01-02": ["sun"]}

    @pytest.mark.parametrize(
        "row",
        [
            "2025-01-01",
            "2025-01-01,",
            ",orphan entry",
            "01/02/2025,wrong format",
            "2025-1-2,short date",
            "Jan 1,text",
            "\u0662\u0660\u0662\u0665-\u0660\u0661-\u0660\u0662,non-ascii digits",
        ],
    )
    def test_rejects_invalid_rows(self, row):
        assert parse_table(f"Date,Gratitude Entry\n{row}") == {}

    def test_date_is_checked_for_shape_only(self):
        assert parse_table("Date,Gratitude Entry\n2025-13-45,odd") == {"2025-13-45": ["odd"]}

    def test_extra_columns_are_ignored(self):
        assert parse_table("Date,Gratitude Entry\n2025-01-01,tea,extra") == {"2025-01-01": ["tea"]}

    def test_quoted_newline_survives(self):
        content = 'Date,Gratitude Entry\n2025-01-01,"two\nlines"\n2025-01-02,next'
        assert parse_table(content) == {"2025-01-01": ["two\nlines"], "2025-01-02": ["next"]}

    def test_unterminated_quote_falls_back_to_lines(self):
        content = 'Date,Gratitude Entry\n2025-01-01,"never closed\n2025-01-02,fine'
        assert parse_table(content) == {"2025-01-01": ["never closed"], "2025-01-02": ["fine"]}

    def test_stray_quotes_in_plain_text_do_not_swallow_rows(self):
        content = 'Date,Gratitude Entry\n2025-01-01,My new 5" phone\n2025-01-02,Sunny walk\n2025-01-03,A 7" tablet'
        assert parse_table(content) == {
            "2025-01-01": ['My new 5" phone'],
            "2025-01-02": ["Sunny walk"],
            "2025-01-03": ['A 7" tablet'],
        }

    def test_stray_quote_in_header_does_not_swallow_rows(self):
        content = 'Date,Gratitude "Entry\n2025-01-01,tea\n2025-01-02,sun'
        assert parse_table(content) == {"2025-01-01": ["tea"], "2025-01-02": ["sun"]}

    def test_empty_content(self):
        assert parse_table("") == {}


class TestRoundTrip:
    def test_export_then_parse_reproduces_entries(self, sample_entries):
        tricky = {**sample_entries, "2025-02-01": ['a,b"c', 'He said "hi"', "multi\nline", "Tea", "Tea"]}
        assert parse_table(export_table(tricky)) == tricky

    def test_reimport_into_empty_store(self, sample_entries):
        store = EntryStore(MemorySlot())
        import_table(store, export_table(sample_entries))
        assert store.get_all() == sample_entries


class TestImport:
    def test_import_merges_and_persists(self):
        store = EntryStore(MemorySlot())
        store.add("2025-01-01", "Coffee")

        count = import_table(store, "Date,Gratitude Entry\n2025-01-01,Coffee\n2025-01-01,Tea\n2025-01-02,Sun")

        assert count == 3  # rows in the file, not rows actually added
        assert store.get_all() == {"2025-01-01": ["Coffee", "Tea"], "2025-01-02": ["Sun"]}

    def test_reimport_is_idempotent(self, sample_entries):
        store = EntryStore(MemorySlot(json.dumps(sample_entries)))
        content = export_table(sample_entries)
        assert import_table(store, content) == 5
        assert store.get_all() == sample_entries

    def test_stray_quotes_count_every_row(self, store):
        content = 'Date,Gratitude Entry\n2025-01-01,A 5" phone\n2025-01-02,Tea\n2025-01-03,A 7" tablet\n2025-01-04,Sun'
        assert import_table(store, content) == 4
        assert store.dates_with_entries() == ["2025-01-01", "2025-01-02", "2025-01-03", "2025-01-04"]

    def test_header_only_fails_and_leaves_store(self):
        slot = MemorySlot()
        store = EntryStore(slot)
        store.add("2025-01-01", "Coffee")
        before = slot.read()

        with pytest.raises(TableImportError, match="No valid entries"):
            import_table(store, "Date,Gratitude Entry\n")
        assert slot.read() == before

    def test_only_invalid_rows_fails(self, store, slot):
        with pytest.raises(TableImportError):
            import_table(store, "Date,Gratitude Entry\nnot-a-date,tea\n2025-01-01,")
        assert slot.read() is None

    def test_persist_failure_propagates(self):
        store = EntryStore(MemorySlot(max_bytes=5))
        with pytest.raises(StorageQuotaError):
            import_table(store, "Date,Gratitude Entry\n2025-01-01,Coffee")


class TestFileImport:
    @pytest.mark.asyncio
    async def test_read_table_file(self, tmp_path):
        path = tmp_path / "backup.csv"
        path.write_text("Date,Gratitude Entry\n2025-01-01,tea", encoding="utf-8")
        assert await read_table_file(str(path)) == "Date,Gratitude Entry\n2025-01-01,tea"

    @pytest.mark.asyncio
    async def test_read_strips_bom(self, tmp_path):
        path = tmp_path / "excel.csv"
        path.write_bytes("\ufeffDate,Gratitude Entry\n2025-01-01,tea".encode())
        assert (await read_table_file(str(path))).startswith("Date,")

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        with pytest.raises(TableImportError, match="Error reading file"):
            await read_table_file(str(tmp_path / "nope.csv"))

    @pytest.mark.asyncio
    async def test_binary_file(self, tmp_path):
        path = tmp_path / "image.csv"
        path.write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe")
        with pytest.raises(TableImportError, match="Error reading file"):
            await read_table_file(str(path))

    @pytest.mark.asyncio
    async def test_import_table_file(self, tmp_path, store):
        path = tmp_path / "backup.csv"
        path.write_text('Date,Gratitude Entry\n2025-01-01,"Rain, finally"', encoding="utf-8")
        assert await import_table_file(store, str(path)) == 1
        assert store.get_by_date("2025-01-01") == ["Rain, finally"]
