"""
Trial Balance ("balance de sumas y saldos") report generation.

Lists every account with the sum of its debits and credits and the
resulting debit or credit balance. Total debits must equal total credits
for a set of books in balance.
"""

import csv
import json
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from io import StringIO
from typing import Mapping, Optional

from ..chart import ChartOfAccounts
from ..config import AsientosConfig
from ..entry import DEBIT_MARKER
from ..journal import Journal
from ..masses import DEBIT_NORMAL, Classification

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class TrialBalanceLine:
    """
    A single account line in a Trial Balance.

    Attributes:
        account_code: Account code.
        account_name: Account name, or a placeholder for unknown codes.
        classification: High-level classification.
        debit_sum: Opening debit balance plus every DEBE amount.
        credit_sum: Opening credit balance plus every HABER amount.
        level: Indentation level for display.
    """

    account_code: str
    account_name: str
    classification: Classification
    debit_sum: Decimal = ZERO
    credit_sum: Decimal = ZERO
    level: int = 0

    @property
    def debit_balance(self) -> Decimal:
        """Saldo deudor; zero when the account has a credit balance."""
        return max(self.debit_sum - self.credit_sum, ZERO)

    @property
    def credit_balance(self) -> Decimal:
        """Saldo acreedor; zero when the account has a debit balance."""
        return max(self.credit_sum - self.debit_sum, ZERO)


@dataclass
class TrialBalance:
    """
    Sumas y saldos.

    Attributes:
        lines: All account lines sorted by code.
        currency: Currency symbol.
    """

    lines: list[TrialBalanceLine] = field(default_factory=list)
    currency: str = "EUR"

    @property
    def total_debits(self) -> Decimal:
        """Sum of all debit sums."""
        return sum((line.debit_sum for line in self.lines), ZERO)

    @property
    def total_credits(self) -> Decimal:
        """Sum of all credit sums."""
        return sum((line.credit_sum for line in self.lines), ZERO)

    @property
    def total_debit_balances(self) -> Decimal:
        return sum((line.debit_balance for line in self.lines), ZERO)

    @property
    def total_credit_balances(self) -> Decimal:
        return sum((line.credit_balance for line in self.lines), ZERO)

    def is_balanced(self, tolerance: Decimal = ZERO) -> bool:
        """
        Check whether total debits equal total credits.

        Args:
            tolerance: Maximum acceptable difference.

        Returns:
            True if abs(total_debits - total_credits) <= tolerance.
        """
        return abs(self.imbalance()) <= tolerance

    def imbalance(self) -> Decimal:
        """Debits minus credits; zero for a balanced trial balance."""
        return self.total_debits - self.total_credits


# ---------------------------------------------------------------------------
# Debit / credit assignment
# ---------------------------------------------------------------------------


def _assign_debit_credit(balance: Decimal, classification: Classification) -> tuple[Decimal, Decimal]:
    """
    Place an opening balance in the debit or credit column.

    Opening balances are in the natural sign of the account: a positive
    balance of a debit-normal account is a debit, a positive balance of a
    credit-normal account is a credit. A negative (contra) balance goes to
    the opposite column.

    Args:
        balance: Opening balance in natural sign.
        classification: Account classification.

    Returns:
        Tuple of (debit, credit); at most one is non-zero.
    """
    if classification in DEBIT_NORMAL:
        if balance >= 0:
            return balance, ZERO
        return ZERO, -balance
    if balance >= 0:
        return ZERO, balance
    return -balance, ZERO


# ---------------------------------------------------------------------------
# Core generation function
# ---------------------------------------------------------------------------


def generate_trial_balance(
    registry: ChartOfAccounts,
    balances: Optional[Mapping[str, Decimal]],
    journal: Journal,
    config: Optional[AsientosConfig] = None,
) -> TrialBalance:
    """
    Generate a Trial Balance from the opening balances and the journal.

    Args:
        registry: Chart of accounts for names and classifications.
        balances: Opening balances; None means all zero.
        journal: Journal of valid entries.
        config: Optional configuration; uses default if not provided.

    Returns:
        TrialBalance instance.
    """
    if config is None:
        from ..config import default_config
        config = default_config

    logger.info("Generating Trial Balance")

    lines: dict[str, TrialBalanceLine] = {}

    def line_for(code: str) -> TrialBalanceLine:
        line = lines.get(code)
        if line is None:
            account = registry.get(code)
            line = TrialBalanceLine(
                account_code=code,
                account_name=account.name if account else "(cuenta desconocida)",
                classification=account.classification if account else Classification.OTHER,
                level=registry.level_of(code),
            )
            lines[code] = line
        return line

    for code, balance in (balances.items() if balances else ()):
        line = line_for(code)
        debit, credit = _assign_debit_credit(balance, line.classification)
        line.debit_sum += debit
        line.credit_sum += credit

    for entry in journal.iter_chronological():
        for side, entry_line in entry.iter_lines():
            line = line_for(entry_line.account_code)
            if side == DEBIT_MARKER:
                line.debit_sum += entry_line.amount
            else:
                line.credit_sum += entry_line.amount

    trial_balance = TrialBalance(
        lines=[lines[code] for code in sorted(lines)],
        currency=config.currency,
    )

    logger.info(
        f"Trial Balance: {len(trial_balance.lines)} accounts | "
        f"Debits: {trial_balance.total_debits:,.2f} | "
        f"Credits: {trial_balance.total_credits:,.2f}"
    )

    if trial_balance.is_balanced(config.tolerance):
        logger.info("[OK] Trial Balance is balanced (Debits = Credits)")
    else:
        logger.warning(f"[!] Trial Balance imbalance: {trial_balance.imbalance():,.2f}")

    return trial_balance


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


def _blank_if_zero(amount: Decimal, fmt: str) -> str:
    return format(amount, fmt) if amount else ""


def format_as_text(trial_balance: TrialBalance) -> str:
    """
    Format a Trial Balance as human-readable text.

    Args:
        trial_balance: TrialBalance to format.

    Returns:
        Formatted text string.
    """
    out = StringIO()
    sep = "=" * 110
    thin = "-" * 110

    out.write(sep + "\n")
    out.write("BALANCE DE SUMAS Y SALDOS\n")
    out.write(f"Moneda: {trial_balance.currency}\n")
    out.write(sep + "\n\n")

    out.write(
        f"{'Cuenta':<46} {'Sumas debe':>15} {'Sumas haber':>15} "
        f"{'Saldo deudor':>15} {'Saldo acreedor':>15}\n"
    )
    out.write(thin + "\n")

    for line in trial_balance.lines:
        indent = "  " * line.level
        name = f"{indent}{line.account_code} {line.account_name}"[:46]
        out.write(
            f"{name:<46} "
            f"{_blank_if_zero(line.debit_sum, '>15,.2f'):>15} "
            f"{_blank_if_zero(line.credit_sum, '>15,.2f'):>15} "
            f"{_blank_if_zero(line.debit_balance, '>15,.2f'):>15} "
            f"{_blank_if_zero(line.credit_balance, '>15,.2f'):>15}\n"
        )

    out.write(thin + "\n")
    out.write(
        f"{'TOTALES':<46} "
        f"{trial_balance.total_debits:>15,.2f} "
        f"{trial_balance.total_credits:>15,.2f} "
        f"{trial_balance.total_debit_balances:>15,.2f} "
        f"{trial_balance.total_credit_balances:>15,.2f}\n"
    )
    out.write(sep + "\n")

    if trial_balance.is_balanced():
        out.write("\n[OK] TRIAL BALANCE IS BALANCED (Debits = Credits)\n")
    else:
        out.write(f"\n[X] IMBALANCE: {trial_balance.imbalance():,.2f}\n")

    return out.getvalue()


def format_as_csv(trial_balance: TrialBalance) -> str:
    """
    Format a Trial Balance as CSV.

    Args:
        trial_balance: TrialBalance to format.

    Returns:
        CSV string.
    """
    out = StringIO()
    writer = csv.writer(out)

    writer.writerow(["Balance de sumas y saldos"])
    writer.writerow([f"Moneda: {trial_balance.currency}"])
    writer.writerow([])
    writer.writerow([
        "Cuenta", "Nombre", "Clasificación", "Sumas debe", "Sumas haber",
        "Saldo deudor", "Saldo acreedor",
    ])

    for line in trial_balance.lines:
        writer.writerow([
            line.account_code,
            line.account_name,
            line.classification.value,
            f"{line.debit_sum:.2f}",
            f"{line.credit_sum:.2f}",
            _blank_if_zero(line.debit_balance, ".2f"),
            _blank_if_zero(line.credit_balance, ".2f"),
        ])

    writer.writerow([])
    writer.writerow([
        "TOTALES", "", "",
        f"{trial_balance.total_debits:.2f}",
        f"{trial_balance.total_credits:.2f}",
        f"{trial_balance.total_debit_balances:.2f}",
        f"{trial_balance.total_credit_balances:.2f}",
    ])

    return out.getvalue()


def format_as_json(trial_balance: TrialBalance) -> str:
    """
    Format a Trial Balance as JSON.

    Args:
        trial_balance: TrialBalance to format.

    Returns:
        JSON string.
    """
    def line_to_dict(line: TrialBalanceLine) -> dict:
        return {
            "account_code": line.account_code,
            "account_name": line.account_name,
            "classification": line.classification.value,
            "debit_sum": f"{line.debit_sum:.2f}",
            "credit_sum": f"{line.credit_sum:.2f}",
            "debit_balance": f"{line.debit_balance:.2f}",
            "credit_balance": f"{line.credit_balance:.2f}",
            "level": line.level,
        }

    data = {
        "trial_balance": {
            "currency": trial_balance.currency,
            "accounts": [line_to_dict(line) for line in trial_balance.lines],
            "summary": {
                "total_debits": f"{trial_balance.total_debits:.2f}",
                "total_credits": f"{trial_balance.total_credits:.2f}",
                "is_balanced": trial_balance.is_balanced(),
                "imbalance": f"{trial_balance.imbalance():.2f}",
            },
        }
    }

    return json.dumps(data, indent=2, ensure_ascii=False)
