"""
Command-line interface for ASIENTOS.

Provides CLI commands for listing the chart of accounts, validating the
journal and generating the accounting reports.
"""

import logging

import click

from . import __version__
from .commands.books import accounts, journal, ledger, validate
from .commands.report import balance_sheet, trial_balance
from .config import setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="asientos")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose (DEBUG level) logging."
)
@click.pass_context
def main(ctx, verbose):
    """
    ASIENTOS - Spanish PGC double-entry bookkeeping.

    Validates plain-text journal entries against the Plan General de
    Contabilidad and generates the libro diario, libro mayor, trial balance
    and balance sheet.
    """
    setup_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    logger.debug(f"ASIENTOS version {__version__}")


main.add_command(accounts)
main.add_command(validate)
main.add_command(journal)
main.add_command(ledger)
main.add_command(balance_sheet)
main.add_command(trial_balance)


if __name__ == "__main__":
    main()
