"""
ASIENTOS – Spanish PGC double-entry bookkeeping

A Python library and command-line tool that parses plain-text journal
entries, validates them against the Plan General de Contabilidad chart of
accounts and produces the balance sheet with a strict accounting equation
check.
"""

__version__ = "0.1.0"
__author__ = "Conrad"

from .chart import Account, ChartOfAccounts, load_registry
from .entry import Entry, EntryLine, parse_entry, parse_entry_id
from .journal import Journal, LoadFailure, load_journal
from .opening import InitialBalances, load_initial_balances
from .reports.balance_sheet import BalanceSheet, compute_balance_sheet, compute_balances
from .validate import validate_entry

__all__ = [
    "Account",
    "BalanceSheet",
    "ChartOfAccounts",
    "Entry",
    "EntryLine",
    "InitialBalances",
    "Journal",
    "LoadFailure",
    "compute_balance_sheet",
    "compute_balances",
    "load_initial_balances",
    "load_journal",
    "load_registry",
    "parse_entry",
    "parse_entry_id",
    "validate_entry",
]
