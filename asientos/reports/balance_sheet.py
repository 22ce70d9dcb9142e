"""
Balance engine and Balance Sheet ("balance de situación") generation.

Folds the opening balances and the journal, in chronological order, into
one BalanceRecord per account, then groups the closing balances into
patrimonial masses and checks the accounting equation
(Activo = Pasivo + Patrimonio neto).
"""

import csv
import json
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from io import StringIO
from typing import Mapping, Optional, Union

from ..chart import Account, ChartOfAccounts
from ..config import AsientosConfig
from ..entry import DEBIT_MARKER
from ..journal import Journal
from ..masses import (
    BALANCE_SHEET_MASSES,
    DEBIT_NORMAL,
    Classification,
    Mass,
    hint_matches,
)
from ..opening import InitialBalances
from ..violations import (
    BALANCE_MISMATCH,
    MASS_HINT_MISMATCH,
    UNCLASSIFIED_ACCOUNT,
    Violation,
)

logger = logging.getLogger(__name__)

RESULT_CODE = "PYG"
RESULT_NAME = "Resultado del ejercicio (pérdidas y ganancias)"

ZERO = Decimal("0")


@dataclass(frozen=True)
class BalanceRecord:
    """
    Running balance of one account.

    Attributes:
        account_code: Account code.
        opening_balance: Balance from the initial balance file.
        movements: ``(entry_id, signed delta)`` pairs in chronological order.
        closing_balance: Opening balance plus every delta.
    """

    account_code: str
    opening_balance: Decimal
    movements: tuple[tuple[str, Decimal], ...]
    closing_balance: Decimal

    @property
    def total_increase(self) -> Decimal:
        return sum((d for _, d in self.movements if d > 0), ZERO)

    @property
    def total_decrease(self) -> Decimal:
        return -sum((d for _, d in self.movements if d < 0), ZERO)


def signed_delta(classification: Classification, side: str, amount: Decimal) -> Decimal:
    """
    Effect of a DEBE or HABER line on an account's natural balance.

    Debits increase asset and expense accounts and decrease liability,
    equity and income accounts; credits do the opposite.

    Args:
        classification: Account classification.
        side: "DEBE" or "HABER".
        amount: Unsigned line amount.

    Returns:
        Signed change of the account balance.
    """
    debit_normal = classification in DEBIT_NORMAL
    is_debit = side == DEBIT_MARKER
    return amount if debit_normal == is_debit else -amount


def _classification_for(registry: ChartOfAccounts, code: str) -> Classification:
    account = registry.get(code)
    return account.classification if account else Classification.OTHER


def compute_balances(
    registry: ChartOfAccounts,
    balances: Optional[Mapping[str, Decimal]],
    journal: Journal
) -> dict[str, BalanceRecord]:
    """
    Compute one BalanceRecord per account referenced anywhere.

    Args:
        registry: Chart of accounts for classifications.
        balances: Opening balances (InitialBalances or a plain mapping);
                  None means all zero.
        journal: Journal of valid entries.

    Returns:
        BalanceRecords keyed by account code, in code order.
    """
    opening: dict[str, Decimal] = dict(balances.items()) if balances else {}
    movements: dict[str, list[tuple[str, Decimal]]] = {code: [] for code in opening}

    for entry in journal.iter_chronological():
        for side, line in entry.iter_lines():
            classification = _classification_for(registry, line.account_code)
            delta = signed_delta(classification, side, line.amount)
            movements.setdefault(line.account_code, []).append((entry.id, delta))

    records: dict[str, BalanceRecord] = {}
    for code in sorted(movements):
        opening_balance = opening.get(code, ZERO)
        deltas = tuple(movements[code])
        closing = opening_balance + sum((d for _, d in deltas), ZERO)
        records[code] = BalanceRecord(
            account_code=code,
            opening_balance=opening_balance,
            movements=deltas,
            closing_balance=closing,
        )

    logger.info(f"Computed balances for {len(records)} account(s)")
    return records


@dataclass
class BalanceSheetLine:
    """
    A single line item in a Balance Sheet.

    Attributes:
        account_code: Account code (RESULT_CODE for the period result).
        account_name: Account name.
        classification: Account classification.
        balance: Closing balance in the account's natural sign.
        level: Indentation level from the chart hierarchy.
    """

    account_code: str
    account_name: str
    classification: Classification
    balance: Decimal
    level: int = 0


@dataclass
class BalanceMismatchWarning:
    """
    Assets do not equal liabilities plus equity.

    Individual entries balance by construction, so a mismatch points at
    the opening balances or at accounts left out of the masses.
    """

    total_assets: Decimal
    total_liabilities: Decimal
    total_equity: Decimal
    delta: Decimal

    def __str__(self) -> str:
        return (
            f"Balance sheet does not balance: Activo {self.total_assets:,.2f} != "
            f"Pasivo {self.total_liabilities:,.2f} + Patrimonio neto "
            f"{self.total_equity:,.2f} (diferencia {self.delta:,.2f})"
        )

    def to_violation(self) -> Violation:
        return Violation(BALANCE_MISMATCH, "warning", str(self), amount=self.delta)


@dataclass
class BalanceSheet:
    """
    Balance de situación.

    Attributes:
        masses: Line items per balance sheet mass.
        unclassified: Accounts with no mass; excluded from the totals.
        total_income: Sum of income account balances.
        total_expense: Sum of expense account balances.
        records: Every BalanceRecord the sheet was built from.
        notes: Warnings found while classifying (hints, unclassified).
        mismatch: Set when the accounting equation does not hold.
        currency: Currency symbol.
    """

    masses: dict[Mass, list[BalanceSheetLine]] = field(
        default_factory=lambda: {mass: [] for mass in BALANCE_SHEET_MASSES}
    )
    unclassified: list[BalanceSheetLine] = field(default_factory=list)
    total_income: Decimal = ZERO
    total_expense: Decimal = ZERO
    records: dict[str, BalanceRecord] = field(default_factory=dict)
    notes: list[Violation] = field(default_factory=list)
    mismatch: Optional[BalanceMismatchWarning] = None
    currency: str = "EUR"

    @property
    def period_result(self) -> Decimal:
        """Income minus expense; positive is a profit."""
        return self.total_income - self.total_expense

    def subtotal(self, mass: Mass) -> Decimal:
        """Sum of the line balances of one mass."""
        return sum((line.balance for line in self.masses.get(mass, [])), ZERO)

    @property
    def total_assets(self) -> Decimal:
        return self.subtotal(Mass.NON_CURRENT_ASSET) + self.subtotal(Mass.CURRENT_ASSET)

    @property
    def total_liabilities(self) -> Decimal:
        return (
            self.subtotal(Mass.NON_CURRENT_LIABILITY)
            + self.subtotal(Mass.CURRENT_LIABILITY)
        )

    @property
    def total_equity(self) -> Decimal:
        """Equity accounts plus the period result."""
        return self.subtotal(Mass.EQUITY) + self.period_result

    @property
    def total_liabilities_and_equity(self) -> Decimal:
        return self.total_liabilities + self.total_equity

    def check_balance(self, tolerance: Decimal = ZERO) -> tuple[bool, Decimal]:
        """
        Check if the accounting equation holds: Assets = Liabilities + Equity.

        Args:
            tolerance: Accepted absolute difference.

        Returns:
            Tuple of (is_balanced, delta) where delta = Assets - (Liabilities + Equity).
        """
        delta = self.total_assets - self.total_liabilities_and_equity
        return abs(delta) <= tolerance, delta


def compute_balance_sheet(
    registry: ChartOfAccounts,
    balances: Optional[Union[InitialBalances, Mapping[str, Decimal]]],
    journal: Journal,
    config: Optional[AsientosConfig] = None,
    include_zero: bool = False
) -> BalanceSheet:
    """
    Build the Balance Sheet from the chart, opening balances and journal.

    A mismatch between assets and liabilities plus equity beyond
    ``config.tolerance`` is reported in ``sheet.mismatch`` and logged; it
    is not raised.

    Args:
        registry: Chart of accounts.
        balances: Opening balances; None means all zero.
        journal: Journal of valid entries.
        config: Optional configuration; uses default if not provided.
        include_zero: Also list accounts whose closing balance is zero.

    Returns:
        BalanceSheet.
    """
    if config is None:
        from ..config import default_config
        config = default_config

    logger.info("Generating Balance Sheet")
    records = compute_balances(registry, balances, journal)

    sheet = BalanceSheet(records=records, currency=config.currency)

    hints = getattr(balances, "hints", {}) if balances else {}
    for code, hint in hints.items():
        account = registry.get(code)
        if account is not None and not hint_matches(hint, account.mass, account.classification):
            hint_label = hint.value if isinstance(hint, Mass) else hint.name
            sheet.notes.append(Violation(
                MASS_HINT_MISMATCH,
                "warning",
                f"Account {code} listed under '{hint_label}' in the initial balance "
                f"but belongs to '{account.mass.label if account.mass else account.classification.name}'",
                account_code=code,
            ))

    for code, record in records.items():
        account: Optional[Account] = registry.get(code)
        balance = record.closing_balance

        if account is None or account.mass is None:
            sheet.unclassified.append(BalanceSheetLine(
                account_code=code,
                account_name=account.name if account else "(cuenta desconocida)",
                classification=Classification.OTHER,
                balance=balance,
            ))
            sheet.notes.append(Violation(
                UNCLASSIFIED_ACCOUNT,
                "warning",
                f"Account {code} has no patrimonial mass and is left out of the totals",
                account_code=code,
                amount=balance,
            ))
            continue

        if account.mass == Mass.INCOME:
            sheet.total_income += balance
            continue
        if account.mass == Mass.EXPENSE:
            sheet.total_expense += balance
            continue

        if balance == 0 and not include_zero:
            continue

        sheet.masses[account.mass].append(BalanceSheetLine(
            account_code=code,
            account_name=account.name,
            classification=account.classification,
            balance=balance,
            level=registry.level_of(code),
        ))

    if sheet.period_result != 0:
        logger.info(f"Period result: {sheet.period_result:,.2f}")

    logger.info(
        f"Classified: {sum(len(lines) for lines in sheet.masses.values())} line(s), "
        f"{len(sheet.unclassified)} unclassified"
    )

    is_balanced, delta = sheet.check_balance(config.tolerance)
    if not is_balanced:
        sheet.mismatch = BalanceMismatchWarning(
            total_assets=sheet.total_assets,
            total_liabilities=sheet.total_liabilities,
            total_equity=sheet.total_equity,
            delta=delta,
        )
        logger.warning(str(sheet.mismatch))
    else:
        logger.info("[OK] Accounting equation verified (Activo = Pasivo + Patrimonio neto)")

    for note in sheet.notes:
        logger.warning(str(note))

    return sheet


def format_as_text(sheet: BalanceSheet) -> str:
    """
    Format a Balance Sheet as human-readable text.

    Args:
        sheet: BalanceSheet to format.

    Returns:
        Formatted text string.
    """
    output = StringIO()

    def write_row(label: str, amount: Decimal) -> None:
        output.write(f"{label[:62]:<62} {amount:>17,.2f}\n")

    def write_mass(mass: Mass) -> None:
        output.write(f"  {mass.label.upper()}\n")
        total = sheet.subtotal(mass)
        for line in sheet.masses[mass]:
            indent = "  " * (line.level + 2)
            write_row(f"{indent}{line.account_code} {line.account_name}", line.balance)
        if mass == Mass.EQUITY:
            write_row(f"    {RESULT_NAME}", sheet.period_result)
            total += sheet.period_result
        write_row(f"  Total {mass.label.lower()}", total)

    output.write("=" * 80 + "\n")
    output.write("BALANCE DE SITUACIÓN\n")
    output.write(f"Moneda: {sheet.currency}\n")
    output.write("=" * 80 + "\n\n")

    output.write("ACTIVO\n")
    output.write("-" * 80 + "\n")
    write_mass(Mass.NON_CURRENT_ASSET)
    write_mass(Mass.CURRENT_ASSET)
    output.write("-" * 80 + "\n")
    write_row("TOTAL ACTIVO", sheet.total_assets)
    output.write("\n")

    output.write("PATRIMONIO NETO Y PASIVO\n")
    output.write("-" * 80 + "\n")
    write_mass(Mass.EQUITY)
    write_mass(Mass.NON_CURRENT_LIABILITY)
    write_mass(Mass.CURRENT_LIABILITY)
    output.write("-" * 80 + "\n")
    write_row("TOTAL PATRIMONIO NETO Y PASIVO", sheet.total_liabilities_and_equity)
    output.write("\n")

    if sheet.unclassified:
        output.write("SIN CLASIFICAR (fuera de los totales)\n")
        output.write("-" * 80 + "\n")
        for line in sheet.unclassified:
            write_row(f"  {line.account_code} {line.account_name}", line.balance)
        output.write("\n")

    output.write("=" * 80 + "\n")
    if sheet.mismatch is None:
        output.write("[OK] Activo = Pasivo + Patrimonio neto\n")
    else:
        output.write(f"[X] WARNING: {sheet.mismatch}\n")

    for note in sheet.notes:
        output.write(f"{note}\n")

    return output.getvalue()


def format_as_csv(sheet: BalanceSheet) -> str:
    """
    Format a Balance Sheet as CSV.

    Args:
        sheet: BalanceSheet to format.

    Returns:
        CSV string.
    """
    output = StringIO()
    writer = csv.writer(output)

    writer.writerow(["Balance de situación"])
    writer.writerow([f"Moneda: {sheet.currency}"])
    writer.writerow([])
    writer.writerow(["Masa", "Cuenta", "Nombre", "Saldo"])

    for mass in BALANCE_SHEET_MASSES:
        for line in sheet.masses[mass]:
            writer.writerow([mass.label, line.account_code, line.account_name, f"{line.balance:.2f}"])
        if mass == Mass.EQUITY:
            writer.writerow([mass.label, RESULT_CODE, RESULT_NAME, f"{sheet.period_result:.2f}"])
        writer.writerow([mass.label, "", "TOTAL", f"{sheet.subtotal(mass):.2f}"])

    for line in sheet.unclassified:
        writer.writerow(["Sin clasificar", line.account_code, line.account_name, f"{line.balance:.2f}"])

    writer.writerow([])
    writer.writerow(["RESUMEN", "", "Total activo", f"{sheet.total_assets:.2f}"])
    writer.writerow(["RESUMEN", "", "Total pasivo", f"{sheet.total_liabilities:.2f}"])
    writer.writerow(["RESUMEN", "", "Total patrimonio neto", f"{sheet.total_equity:.2f}"])

    return output.getvalue()


def format_as_json(sheet: BalanceSheet) -> str:
    """
    Format a Balance Sheet as JSON.

    Amounts are written as strings to keep exact decimals.

    Args:
        sheet: BalanceSheet to format.

    Returns:
        JSON string.
    """
    def line_to_dict(line: BalanceSheetLine) -> dict:
        return {
            "account_code": line.account_code,
            "account_name": line.account_name,
            "classification": line.classification.value,
            "balance": f"{line.balance:.2f}",
            "level": line.level,
        }

    is_balanced = sheet.mismatch is None

    data = {
        "balance_sheet": {
            "currency": sheet.currency,
            "masses": {
                mass.name.lower(): {
                    "label": mass.label,
                    "line_items": [line_to_dict(line) for line in sheet.masses[mass]],
                    "total": f"{sheet.subtotal(mass):.2f}",
                }
                for mass in BALANCE_SHEET_MASSES
            },
            "period_result": f"{sheet.period_result:.2f}",
            "unclassified": [line_to_dict(line) for line in sheet.unclassified],
            "summary": {
                "total_assets": f"{sheet.total_assets:.2f}",
                "total_liabilities": f"{sheet.total_liabilities:.2f}",
                "total_equity": f"{sheet.total_equity:.2f}",
                "total_liabilities_and_equity": f"{sheet.total_liabilities_and_equity:.2f}",
                "accounting_equation_balanced": is_balanced,
                "imbalance": f"{sheet.mismatch.delta:.2f}" if sheet.mismatch else "0.00",
            },
            "notes": [note.to_dict() for note in sheet.notes],
        }
    }

    return json.dumps(data, indent=2, ensure_ascii=False)
