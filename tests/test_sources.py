"""Tests for asientos.sources."""

import pytest

from asientos.sources import load_books, read_entry_dir, read_optional_text
from tests.helpers import make_entry_text, write_entries


class TestReadEntryDir:
    def test_reads_sorted_visible_files(self, tmp_path):
        write_entries(tmp_path, {
            "20240116001.txt": "b",
            "20240115001.txt": "a",
            ".hidden": "x",
        })
        (tmp_path / "sub").mkdir()

        entries = read_entry_dir(tmp_path)

        assert list(entries) == ["20240115001.txt", "20240116001.txt"]
        assert entries["20240115001.txt"] == b"a"

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_entry_dir(tmp_path / "nope")

    def test_file_is_not_a_directory(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("x", encoding="utf-8")
        with pytest.raises(NotADirectoryError):
            read_entry_dir(path)


class TestReadOptionalText:
    def test_none(self):
        assert read_optional_text(None) is None

    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "cuadro.txt"
        path.write_text("572 Bancos c/c año\n", encoding="utf-8")
        assert read_optional_text(path) == "572 Bancos c/c año\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_optional_text(tmp_path / "nope.txt")


class TestLoadBooks:
    def test_loads_everything(self, tmp_path, opening_text):
        entries = tmp_path / "diario"
        entries.mkdir()
        write_entries(entries, {"20240115001.txt": make_entry_text()})
        chart = tmp_path / "cuadro.txt"
        chart.write_text("4300001 Cliente Pérez\n", encoding="utf-8")
        opening = tmp_path / "apertura.txt"
        opening.write_text(opening_text, encoding="utf-8")

        books = load_books(entries, chart, opening)

        assert len(books.journal) == 1
        assert books.failures == []
        assert books.registry.contains("4300001")
        assert len(books.balances) == 4

    def test_undecodable_file_is_a_failure(self, tmp_path):
        entries = tmp_path / "diario"
        entries.mkdir()
        write_entries(entries, {"20240115001.txt": make_entry_text()})
        (entries / "20240116001.txt").write_bytes(b"\xff\xfe")

        books = load_books(entries)

        assert len(books.journal) == 1
        [failure] = books.failures
        assert failure.source == "20240116001.txt"
        assert failure.kind == "parse"
