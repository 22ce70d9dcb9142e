"""
Book command group for asientos.

Commands: accounts, validate, journal, ledger
"""

import logging
import sys
from decimal import Decimal

import click

from ..chart import load_registry
from ..config import AsientosConfig
from ..errors import AsientosError
from ..reports import load_report
from ..reports.balance_sheet import BalanceRecord, compute_balances
from ..reports.diario import format_journal, format_ledger
from ..sources import load_books, read_optional_text
from ._options import chart_option, entries_option, format_option, opening_option, workers_option

logger = logging.getLogger(__name__)


@click.command(name="accounts")
@chart_option
@click.option(
    "--prefix",
    "-p",
    type=str,
    default=None,
    help="Only list accounts whose code starts with this prefix.",
)
def accounts(chart_file, prefix):
    """
    List the chart of accounts.

    Prints the built-in PGC accounts plus any accounts from --chart, one
    per line as "(code) name".
    """
    try:
        registry = load_registry(override_text=read_optional_text(chart_file))
    except (FileNotFoundError, AsientosError) as e:
        logger.error(f"Cannot load chart of accounts: {e}")
        click.echo(f"ERROR: {e}")
        sys.exit(1)

    shown = 0
    for account in registry:
        if prefix and not account.code.startswith(prefix):
            continue
        click.echo(str(account))
        shown += 1

    if shown == 0:
        click.echo(f"No accounts match prefix '{prefix}'.")


@click.command(name="validate")
@entries_option
@chart_option
@format_option()
@workers_option
def validate(entries_dir, chart_file, format, workers):
    """
    Parse and validate every journal entry.

    Each file is checked on its own: a broken file never hides the
    problems of another. Every violation of every rejected file is
    listed.

    Returns exit code 0 if every entry is valid, 1 otherwise.
    """
    logger.info("=== ASIENTOS Validation ===")

    try:
        config = AsientosConfig(workers=workers)
        books = load_books(entries_dir, chart_file, config=config)
    except (FileNotFoundError, NotADirectoryError) as e:
        logger.error(f"File not found: {e}")
        click.echo(f"ERROR: File not found: {e}")
        sys.exit(1)
    except AsientosError as e:
        logger.error(f"Error during validation: {e}")
        click.echo(f"ERROR: {e}")
        sys.exit(1)

    if format.lower() == "json":
        output = load_report.format_as_json(books.journal, books.failures)
    elif format.lower() == "csv":
        output = load_report.format_as_csv(books.journal, books.failures)
    else:
        output = load_report.format_as_text(books.journal, books.failures)

    click.echo(output)

    if books.failures:
        sys.exit(1)
    sys.exit(0)


@click.command(name="journal")
@entries_option
@chart_option
def journal(entries_dir, chart_file):
    """
    Print the libro diario.

    Only valid entries are printed, in chronological order. Rejected files
    are counted at the end; use 'asientos validate' for details.
    """
    try:
        books = load_books(entries_dir, chart_file)
    except (FileNotFoundError, NotADirectoryError, AsientosError) as e:
        logger.error(f"Cannot load the books: {e}")
        click.echo(f"ERROR: {e}")
        sys.exit(1)

    click.echo(format_journal(books.journal, books.registry))

    if books.failures:
        click.echo(f"[X] {len(books.failures)} file(s) rejected; run 'asientos validate' for details")


@click.command(name="ledger")
@entries_option
@click.option(
    "--account",
    "-a",
    "account_code",
    type=str,
    required=True,
    help="Account code to print.",
)
@chart_option
@opening_option
def ledger(entries_dir, account_code, chart_file, opening_file):
    """
    Print the libro mayor of one account.

    Shows the opening balance, every movement of the account with its
    running balance, and the closing balance.
    """
    try:
        books = load_books(entries_dir, chart_file, opening_file)
    except (FileNotFoundError, NotADirectoryError, AsientosError) as e:
        logger.error(f"Cannot load the books: {e}")
        click.echo(f"ERROR: {e}")
        sys.exit(1)

    records = compute_balances(books.registry, books.balances, books.journal)
    record = records.get(account_code)
    if record is None:
        if not books.registry.contains(account_code):
            click.echo(f"ERROR: El código de cuenta '{account_code}' no existe")
            sys.exit(1)
        record = BalanceRecord(account_code, Decimal("0"), (), Decimal("0"))

    click.echo(format_ledger(record, books.journal, books.registry))
