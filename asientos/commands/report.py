"""
Report command group for asientos.

Commands: balance-sheet, trial-balance
"""

import logging
import sys

import click

from ..errors import AsientosError
from ..reports import balance_sheet as balance_sheet_report
from ..reports import trial_balance as trial_balance_report
from ..sources import load_books
from ._options import chart_option, entries_option, format_option, opening_option

logger = logging.getLogger(__name__)


def _warn_rejected(failures) -> None:
    if failures:
        click.echo(
            f"[X] WARNING: {len(failures)} file(s) rejected and left out of the report; "
            "run 'asientos validate' for details",
            err=True,
        )


@click.command(name="balance-sheet")
@entries_option
@chart_option
@opening_option
@format_option()
def balance_sheet(entries_dir, chart_file, opening_file, format):
    """
    Generate the Balance Sheet (balance de situación).

    Folds the opening balances and every valid entry into closing
    balances, groups them by patrimonial mass and checks that
    Activo = Pasivo + Patrimonio neto.

    Returns exit code 1 if the accounting equation does not hold.
    """
    logger.info("=== ASIENTOS Balance Sheet Report ===")

    try:
        books = load_books(entries_dir, chart_file, opening_file)
        sheet = balance_sheet_report.compute_balance_sheet(
            books.registry, books.balances, books.journal
        )
    except (FileNotFoundError, NotADirectoryError) as e:
        logger.error(f"File not found: {e}")
        click.echo(f"ERROR: File not found: {e}")
        sys.exit(1)
    except AsientosError as e:
        logger.error(f"Report generation failed: {e}")
        click.echo(f"\n[ERROR] {e}")
        sys.exit(1)

    _warn_rejected(books.failures)

    if format.lower() == "csv":
        output = balance_sheet_report.format_as_csv(sheet)
    elif format.lower() == "json":
        output = balance_sheet_report.format_as_json(sheet)
    else:
        output = balance_sheet_report.format_as_text(sheet)

    click.echo(output)

    if sheet.mismatch is not None:
        sys.exit(1)
    sys.exit(0)


@click.command(name="trial-balance")
@entries_option
@chart_option
@opening_option
@format_option()
def trial_balance(entries_dir, chart_file, opening_file, format):
    """
    Generate the Trial Balance (balance de sumas y saldos).

    Lists every account with its debit and credit sums and the resulting
    balance. Opening balances are counted on their natural side.
    """
    logger.info("=== ASIENTOS Trial Balance Report ===")

    try:
        books = load_books(entries_dir, chart_file, opening_file)
        result = trial_balance_report.generate_trial_balance(
            books.registry, books.balances, books.journal
        )
    except (FileNotFoundError, NotADirectoryError) as e:
        logger.error(f"File not found: {e}")
        click.echo(f"ERROR: File not found: {e}")
        sys.exit(1)
    except AsientosError as e:
        logger.error(f"Report generation failed: {e}")
        click.echo(f"\n[ERROR] {e}")
        sys.exit(1)

    _warn_rejected(books.failures)

    if format.lower() == "csv":
        output = trial_balance_report.format_as_csv(result)
    elif format.lower() == "json":
        output = trial_balance_report.format_as_json(result)
    else:
        output = trial_balance_report.format_as_text(result)

    click.echo(output)
