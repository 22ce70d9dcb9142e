"""
Shared test helpers for ASIENTOS unit tests.

Provides factory functions for entry file text and for Entry objects built
directly, without going through the parser.
"""

from __future__ import annotations

from decimal import Decimal

from asientos.entry import Entry, EntryLine
from asientos.journal import Journal


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------


def make_entry_text(
    description: str = "Venta de mercaderías",
    debit: list[tuple[str, str]] | None = None,
    credit: list[tuple[str, str]] | None = None,
) -> str:
    """Render an entry file with DEBE and HABER sections."""
    debit = debit if debit is not None else [("430", "500.00")]
    credit = credit if credit is not None else [("700", "500.00")]

    lines = [description, "", "DEBE"]
    lines += [f"{code} {amount}" for code, amount in debit]
    lines += ["", "HABER"]
    lines += [f"{code} {amount}" for code, amount in credit]
    return "\n".join(lines) + "\n"


def make_entry(
    entry_id: str,
    debit: list[tuple[str, str]],
    credit: list[tuple[str, str]],
    description: str = "Asiento de prueba",
) -> Entry:
    """Create an Entry with Decimal amounts."""
    return Entry(
        id=entry_id,
        description=description,
        debit_lines=tuple(EntryLine(code, Decimal(amount)) for code, amount in debit),
        credit_lines=tuple(EntryLine(code, Decimal(amount)) for code, amount in credit),
    )


def make_journal(*entries: Entry) -> Journal:
    """Create a Journal holding the given entries."""
    return Journal(list(entries))


def write_entries(directory, files: dict[str, str]) -> None:
    """Write entry files into a directory (a pathlib.Path)."""
    for name, text in files.items():
        (directory / name).write_text(text, encoding="utf-8")
