"""
Validation engine for ASIENTOS.

Checks a parsed entry against the chart of accounts and against the
double-entry rule (total DEBE == total HABER). Every checker appends its
violations to a shared ValidationResult instead of stopping at the first
problem, so a single run reports everything that needs correcting.
"""

import logging
from typing import Optional

from .chart import ChartOfAccounts
from .config import AsientosConfig
from .entry import CREDIT_MARKER, DEBIT_MARKER, Entry
from .violations import IMBALANCED_ENTRY, UNKNOWN_ACCOUNT_CODE, ZERO_AMOUNT, ValidationResult

logger = logging.getLogger(__name__)


def validate_entry(
    entry: Entry,
    registry: ChartOfAccounts,
    config: Optional[AsientosConfig] = None
) -> ValidationResult:
    """
    Perform every check on one entry.

    Args:
        entry: Parsed entry.
        registry: Chart of accounts used to resolve codes.
        config: Optional configuration; uses default if not provided.

    Returns:
        ValidationResult; ``is_valid`` is False if any error was found.
    """
    if config is None:
        from .config import default_config
        config = default_config

    result = ValidationResult()

    check_account_codes(entry, registry, result)
    check_amounts(entry, result)
    check_balance(entry, config, result)

    if result.is_valid:
        logger.debug(f"Entry {entry.id} is valid")
    else:
        logger.debug(f"Entry {entry.id} has {result.error_count} error(s)")

    return result


def check_account_codes(
    entry: Entry,
    registry: ChartOfAccounts,
    result: ValidationResult
) -> None:
    """
    Report every line whose account code is not in the chart.

    Args:
        entry: Entry to check.
        registry: Chart of accounts.
        result: ValidationResult to append violations to.
    """
    for side, line in entry.iter_lines():
        if registry.contains(line.account_code):
            continue
        result.add_error(
            UNKNOWN_ACCOUNT_CODE,
            f"El código de cuenta '{line.account_code}' no existe ({side})",
            line_number=line.line_number or None,
            account_code=line.account_code,
        )


def check_amounts(entry: Entry, result: ValidationResult) -> None:
    """
    Report lines with a zero amount.

    Args:
        entry: Entry to check.
        result: ValidationResult to append violations to.
    """
    for side, line in entry.iter_lines():
        if line.amount > 0:
            continue
        result.add_error(
            ZERO_AMOUNT,
            f"Amount must be greater than zero ({side} {line.account_code})",
            line_number=line.line_number or None,
            account_code=line.account_code,
            amount=line.amount,
        )


def check_balance(
    entry: Entry,
    config: AsientosConfig,
    result: ValidationResult
) -> None:
    """
    Check that the debit total equals the credit total exactly.

    The reported amount is the signed discrepancy (debit - credit).

    Args:
        entry: Entry to check.
        config: Configuration with the amount precision.
        result: ValidationResult to append violations to.
    """
    discrepancy = config.quantize(entry.discrepancy)
    if discrepancy == 0:
        return

    result.add_error(
        IMBALANCED_ENTRY,
        f"El debe y el haber no coinciden: {DEBIT_MARKER} {entry.total_debit} "
        f"vs {CREDIT_MARKER} {entry.total_credit} (diferencia {discrepancy})",
        amount=discrepancy,
    )
