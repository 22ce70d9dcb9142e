"""CLI smoke tests using Click's CliRunner."""

import pytest
from click.testing import CliRunner

from asientos import __version__
from asientos.cli import main
from tests.helpers import make_entry_text, write_entries


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def books_dir(tmp_path, opening_text):
    """
    A directory tree with a balanced opening file and two valid entries:

        diario/20240115001.txt   430 / 700  500.00
        diario/20240120001.txt   572 / 430  300.00
        apertura.txt             opening_text fixture
    """
    entries = tmp_path / "diario"
    entries.mkdir()
    write_entries(entries, {
        "20240115001.txt": make_entry_text("Venta", [("430", "500.00")], [("700", "500.00")]),
        "20240120001.txt": make_entry_text("Cobro", [("572", "300.00")], [("430", "300.00")]),
    })
    (tmp_path / "apertura.txt").write_text(opening_text, encoding="utf-8")
    return tmp_path


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------


class TestMainGroup:
    def test_version_option(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_shows_all_commands(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for command in ("accounts", "validate", "balance-sheet", "trial-balance", "journal", "ledger"):
            assert command in result.output

    def test_help_shows_description(self, runner):
        result = runner.invoke(main, ["--help"])
        assert "ASIENTOS" in result.output


# ---------------------------------------------------------------------------
# accounts
# ---------------------------------------------------------------------------


class TestAccounts:
    def test_lists_builtin_chart(self, runner):
        result = runner.invoke(main, ["accounts", "--prefix", "57"])
        assert result.exit_code == 0
        assert "(   572) Bancos" in result.output
        assert "(   430)" not in result.output

    def test_chart_override(self, runner, tmp_path):
        chart = tmp_path / "cuadro.txt"
        chart.write_text("572 Banco Santander\n", encoding="utf-8")
        result = runner.invoke(main, ["accounts", "--chart", str(chart), "--prefix", "572"])
        assert result.exit_code == 0
        assert "(   572) Banco Santander" in result.output

    def test_no_match(self, runner):
        result = runner.invoke(main, ["accounts", "--prefix", "0"])
        assert result.exit_code == 0
        assert "No accounts match" in result.output


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidate:
    def test_clean_books_exit_zero(self, runner, books_dir):
        result = runner.invoke(main, ["validate", "--entries", str(books_dir / "diario")])
        assert result.exit_code == 0
        assert "[OK]" in result.output

    def test_failures_exit_one(self, runner, books_dir):
        write_entries(books_dir / "diario", {
            "20240121001.txt": make_entry_text(debit=[("430", "100.00")], credit=[("700", "99.99")]),
        })
        result = runner.invoke(main, ["validate", "--entries", str(books_dir / "diario")])
        assert result.exit_code == 1
        assert "IMBALANCED_ENTRY" in result.output
        assert "20240121001.txt" in result.output

    def test_non_utf8_file_is_reported(self, runner, books_dir):
        (books_dir / "diario" / "20240122001.txt").write_bytes(b"\xff")
        result = runner.invoke(main, ["validate", "--entries", str(books_dir / "diario")])
        assert result.exit_code == 1
        assert "20240122001.txt" in result.output
        assert "not valid UTF-8" in result.output
        assert "Entries accepted:   2" in result.output

    def test_json_format(self, runner, books_dir):
        result = runner.invoke(
            main, ["validate", "--entries", str(books_dir / "diario"), "--format", "json", "--workers", "2"]
        )
        assert result.exit_code == 0
        assert '"accepted_count": 2' in result.output

    def test_missing_directory(self, runner, tmp_path):
        result = runner.invoke(main, ["validate", "--entries", str(tmp_path / "nope")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# reports
# ---------------------------------------------------------------------------


class TestBalanceSheet:
    def test_balanced_exit_zero(self, runner, books_dir):
        result = runner.invoke(main, [
            "balance-sheet",
            "--entries", str(books_dir / "diario"),
            "--opening", str(books_dir / "apertura.txt"),
        ])
        assert result.exit_code == 0
        assert "BALANCE DE SITUACIÓN" in result.output
        assert "[OK]" in result.output

    def test_mismatch_exit_one(self, runner, books_dir):
        opening = books_dir / "descuadre.txt"
        opening.write_text("572 1000.00\n", encoding="utf-8")
        result = runner.invoke(main, [
            "balance-sheet",
            "--entries", str(books_dir / "diario"),
            "--opening", str(opening),
        ])
        assert result.exit_code == 1
        assert "[X] WARNING" in result.output

    def test_csv_format(self, runner, books_dir):
        result = runner.invoke(main, [
            "balance-sheet", "--entries", str(books_dir / "diario"), "--format", "csv",
        ])
        assert result.exit_code == 0
        assert "Masa,Cuenta,Nombre,Saldo" in result.output


class TestTrialBalance:
    def test_text(self, runner, books_dir):
        result = runner.invoke(main, [
            "trial-balance",
            "--entries", str(books_dir / "diario"),
            "--opening", str(books_dir / "apertura.txt"),
        ])
        assert result.exit_code == 0
        assert "BALANCE DE SUMAS Y SALDOS" in result.output


class TestJournalAndLedger:
    def test_journal(self, runner, books_dir):
        result = runner.invoke(main, ["journal", "--entries", str(books_dir / "diario")])
        assert result.exit_code == 0
        assert "N.º 20240115001" in result.output
        assert "N.º 20240120001" in result.output

    def test_ledger(self, runner, books_dir):
        result = runner.invoke(main, [
            "ledger",
            "--entries", str(books_dir / "diario"),
            "--account", "430",
            "--opening", str(books_dir / "apertura.txt"),
        ])
        assert result.exit_code == 0
        assert "LIBRO MAYOR" in result.output
        assert "1,200.00" in result.output

    def test_ledger_account_without_movements(self, runner, books_dir):
        result = runner.invoke(main, [
            "ledger", "--entries", str(books_dir / "diario"), "--account", "570",
        ])
        assert result.exit_code == 0
        assert "Saldo final" in result.output

    def test_ledger_unknown_account(self, runner, books_dir):
        result = runner.invoke(main, [
            "ledger", "--entries", str(books_dir / "diario"), "--account", "999",
        ])
        assert result.exit_code == 1
        assert "no existe" in result.output
