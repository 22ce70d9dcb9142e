"""
Libro diario and libro mayor text reports.

The journal ("libro diario") prints every entry in a box with its id,
description and date followed by its DEBE and HABER lines. The ledger
("libro mayor") prints the movements of a single account with the
running balance.
"""

import logging
from decimal import Decimal
from io import StringIO
from typing import Optional

from ..chart import ChartOfAccounts
from ..entry import DEBIT_MARKER, Entry
from ..journal import Journal
from .balance_sheet import BalanceRecord

logger = logging.getLogger(__name__)

BOX_WIDTH = 120

_INNER = BOX_WIDTH - 2
_BORDER = "+" + "-" * _INNER + "+\n"


def _boxed(text: str) -> str:
    return f"|{text[:_INNER]:^{_INNER}}|\n"


def _account_name(registry: Optional[ChartOfAccounts], code: str) -> str:
    if registry is None:
        return ""
    account = registry.get(code)
    return account.name if account else "(cuenta desconocida)"


def format_entry(entry: Entry, registry: Optional[ChartOfAccounts] = None) -> str:
    """
    Render one entry as a box.

    Args:
        entry: Entry to render.
        registry: Optional chart used to print account names.

    Returns:
        Formatted text, ending with a newline.
    """
    out = StringIO()

    out.write(_BORDER)
    out.write(_boxed(f"N.º {entry.id}"))
    for line in entry.description.split("\n"):
        out.write(_boxed(line))
    out.write(_boxed(entry.date.strftime("%Y-%m-%d")))
    out.write(_BORDER)

    for side, line in entry.iter_lines():
        name = _account_name(registry, line.account_code)
        debit = f"{line.amount:,.2f}" if side == DEBIT_MARKER else ""
        credit = "" if side == DEBIT_MARKER else f"{line.amount:,.2f}"
        row = f" {line.account_code:<10} {name[:70]:<70} {debit:>16} {credit:>16} "
        out.write(f"|{row:<{_INNER}}|\n")

    totals = (
        f" {'':<10} {'Sumas':<70} "
        f"{entry.total_debit:>16,.2f} {entry.total_credit:>16,.2f} "
    )
    out.write(_BORDER)
    out.write(f"|{totals:<{_INNER}}|\n")
    out.write(_BORDER)

    return out.getvalue()


def format_journal(journal: Journal, registry: Optional[ChartOfAccounts] = None) -> str:
    """
    Render the whole libro diario in chronological order.

    Args:
        journal: Journal to print.
        registry: Optional chart used to print account names.

    Returns:
        Formatted text.
    """
    out = StringIO()
    out.write("=" * BOX_WIDTH + "\n")
    out.write("LIBRO DIARIO\n")
    out.write(f"{len(journal)} asiento(s)\n")
    out.write("=" * BOX_WIDTH + "\n\n")

    total = Decimal("0")
    for entry in journal.iter_chronological():
        out.write(format_entry(entry, registry))
        out.write("\n")
        total += entry.total_debit

    out.write(f"Total movimientos: {total:,.2f}\n")
    return out.getvalue()


def format_ledger(
    record: BalanceRecord,
    journal: Journal,
    registry: Optional[ChartOfAccounts] = None
) -> str:
    """
    Render the libro mayor of one account.

    Movements are signed in the account's natural sign: a positive amount
    increases its normal balance.

    Args:
        record: BalanceRecord of the account.
        journal: Journal the movements come from, for dates and descriptions.
        registry: Optional chart used to print the account name.

    Returns:
        Formatted text.
    """
    out = StringIO()
    sep = "=" * 100
    thin = "-" * 100

    out.write(sep + "\n")
    out.write("LIBRO MAYOR\n")
    name = _account_name(registry, record.account_code)
    out.write(f"Cuenta {record.account_code} {name}".rstrip() + "\n")
    out.write(sep + "\n\n")

    out.write(f"{'Asiento':<14} {'Fecha':<10} {'Concepto':<40} {'Importe':>15} {'Saldo':>15}\n")
    out.write(thin + "\n")
    out.write(f"{'':<14} {'':<10} {'Saldo inicial':<40} {'':>15} {record.opening_balance:>15,.2f}\n")

    running = record.opening_balance
    for entry_id, delta in record.movements:
        running += delta
        entry = journal.get(entry_id)
        concept = entry.description.split("\n", 1)[0]
        when = entry.date.strftime("%Y-%m-%d")
        out.write(f"{entry_id:<14} {when:<10} {concept[:40]:<40} {delta:>15,.2f} {running:>15,.2f}\n")

    out.write(thin + "\n")
    out.write(f"{'Saldo final':<66} {'':>15} {record.closing_balance:>15,.2f}\n")

    return out.getvalue()
