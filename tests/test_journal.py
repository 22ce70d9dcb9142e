"""Tests for asientos.journal."""

from decimal import Decimal

import pytest

from asientos.config import AsientosConfig
from asientos.errors import DuplicateEntryId, EntryNotFound
from asientos.journal import Journal, load_journal
from asientos.violations import (
    DUPLICATE_ENTRY_ID,
    IMBALANCED_ENTRY,
    PARSE_ERROR,
    UNKNOWN_ACCOUNT_CODE,
)
from tests.helpers import make_entry, make_entry_text


# ---------------------------------------------------------------------------
# Journal container
# ---------------------------------------------------------------------------


class TestJournal:
    def test_iterates_in_id_order(self):
        journal = Journal([
            make_entry("20240301001", [("430", "1")], [("700", "1")]),
            make_entry("20240115002", [("430", "1")], [("700", "1")]),
            make_entry("20240115001", [("430", "1")], [("700", "1")]),
        ])
        ids = [entry.id for entry in journal.iter_chronological()]
        assert ids == ["20240115001", "20240115002", "20240301001"]
        assert ids == [entry.id for entry in journal]

    def test_append_duplicate_raises(self):
        journal = Journal([make_entry("20240115001", [("430", "1")], [("700", "1")])])
        with pytest.raises(DuplicateEntryId):
            journal.append(make_entry("20240115001", [("430", "2")], [("700", "2")]))

    def test_get(self):
        entry = make_entry("20240115001", [("430", "1")], [("700", "1")])
        journal = Journal([entry])
        assert journal.get("20240115001") is entry
        assert "20240115001" in journal
        with pytest.raises(EntryNotFound):
            journal.get("20240115002")


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoadJournal:
    def test_valid_files_are_loaded(self, registry, sale_text):
        journal, failures = load_journal(
            {"20240115001.txt": sale_text, "20240116001.txt": sale_text},
            registry,
        )
        assert failures == []
        assert len(journal) == 2

    def test_parse_error_does_not_affect_other_files(self, registry, sale_text):
        broken = make_entry_text(debit=[("430", "500.00 sobra")])
        journal, failures = load_journal(
            {
                "20240115001.txt": sale_text,
                "20240115002.txt": broken,
                "20240115003.txt": sale_text,
            },
            registry,
        )

        assert [entry.id for entry in journal] == ["20240115001", "20240115003"]
        [failure] = failures
        assert failure.source == "20240115002.txt"
        assert failure.kind == "parse"
        assert failure.violations[0].category == PARSE_ERROR
        assert failure.violations[0].line_number == 4

    def test_bad_filename_is_a_parse_failure(self, registry, sale_text):
        journal, failures = load_journal({"notas.txt": sale_text}, registry)
        assert len(journal) == 0
        assert failures[0].entry_id is None
        assert failures[0].kind == "parse"

    def test_invalid_entry_keeps_every_violation(self, registry):
        text = make_entry_text(debit=[("999", "100.00")], credit=[("700", "99.99")])
        journal, failures = load_journal({"20240115001.txt": text}, registry)

        assert len(journal) == 0
        [failure] = failures
        assert failure.kind == "invalid"
        assert failure.entry is not None
        categories = [v.category for v in failure.violations]
        assert UNKNOWN_ACCOUNT_CODE in categories
        assert IMBALANCED_ENTRY in categories

    def test_duplicate_id_reported_once_for_later_file(self, registry, sale_text):
        journal, failures = load_journal(
            {"20240115001.txt": sale_text, "20240115001.bak": sale_text},
            registry,
        )

        assert len(journal) == 1
        duplicates = [f for f in failures if f.kind == "duplicate"]
        assert len(duplicates) == 1
        # ".bak" sorts before ".txt"
        assert duplicates[0].source == "20240115001.txt"
        assert duplicates[0].violations[0].category == DUPLICATE_ENTRY_ID

    def test_invalid_first_file_still_claims_id(self, registry, sale_text):
        broken = make_entry_text(debit=[("430", "1.00")], credit=[("700", "2.00")])
        journal, failures = load_journal(
            {"20240115001.a": broken, "20240115001.b": sale_text},
            registry,
        )
        assert len(journal) == 0
        assert [f.kind for f in failures] == ["invalid", "duplicate"]

    def test_journal_entries_are_balanced(self, registry, sale_text):
        journal, _ = load_journal({"20240115001.txt": sale_text}, registry)
        for entry in journal:
            assert entry.total_debit == entry.total_credit

    def test_parallel_load_matches_sequential(self, registry, sale_text):
        files = {f"202401{day:02d}001.txt": sale_text for day in range(1, 29)}
        files["20240110001.dup"] = sale_text
        files["20240111001.txt"] = make_entry_text(debit=[("430", "x")])

        sequential = load_journal(files, registry)
        parallel = load_journal(files, registry, AsientosConfig(workers=4))

        assert [e.id for e in sequential[0]] == [e.id for e in parallel[0]]
        assert [(f.source, f.kind) for f in sequential[1]] == [
            (f.source, f.kind) for f in parallel[1]
        ]

    def test_load_all_by_id(self, registry, sale_text):
        journal, failures = Journal.load_all({"20240115001": sale_text}, registry)
        assert failures == []
        assert journal.get("20240115001").total_debit == Decimal("500.00")

    def test_load_all_rejects_malformed_id(self, registry, sale_text):
        journal, failures = Journal.load_all(
            {"not-an-id": sale_text, "20240115001": sale_text}, registry
        )
        assert [entry.id for entry in journal] == ["20240115001"]
        [failure] = failures
        assert failure.source == "not-an-id"
        assert failure.kind == "parse"
        assert failure.entry_id is None

    def test_oversized_amount_does_not_affect_other_files(self, registry, sale_text):
        huge = make_entry_text(debit=[("430", "1" * 27)], credit=[("700", "1" * 27)])
        journal, failures = load_journal(
            {"20240115001.txt": sale_text, "20240116001.txt": huge},
            registry,
        )
        assert [entry.id for entry in journal] == ["20240115001"]
        [failure] = failures
        assert failure.kind == "parse"
        assert failure.violations[0].line_number == 4

    def test_other_ordinal_widths_are_rejected(self, registry, sale_text):
        journal, failures = load_journal(
            {"2024011501.txt": sale_text, "202401151.txt": sale_text, "20240115001.txt": sale_text},
            registry,
        )
        assert [entry.id for entry in journal] == ["20240115001"]
        assert sorted(f.source for f in failures) == ["202401151.txt", "2024011501.txt"]
        assert all(f.kind == "parse" for f in failures)

    def test_undecodable_bytes_fail_only_that_file(self, registry, sale_text):
        journal, failures = load_journal(
            {
                "20240115001.txt": sale_text.encode("utf-8"),
                "20240115002.txt": b"Venta\n\xff\nDEBE\n430 1\nHABER\n700 1\n",
            },
            registry,
        )
        assert [entry.id for entry in journal] == ["20240115001"]
        [failure] = failures
        assert failure.source == "20240115002.txt"
        assert failure.entry_id == "20240115002"
        assert "UTF-8" in failure.violations[0].message
