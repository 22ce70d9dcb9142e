"""
Budget ("presupuesto") planning for ASIENTOS.

A budget covers a date range and holds items for accounts of the chart.
Daily items are multiplied by the number of days in the range; one-off
items count once. Comparing a budget with the journal shows how much of
each account's allocation has been consumed.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal
from io import StringIO
from typing import Optional

from .chart import ChartOfAccounts
from .config import AsientosConfig
from .entry import DEBIT_MARKER
from .errors import AccountNotFound, InvalidDateRange
from .journal import Journal

logger = logging.getLogger(__name__)

DAILY = "daily"
ONE_OFF = "one-off"

# One "#" per this many percentage points in the text report.
BAR_STEP = Decimal("5")
BAR_MAX = 40


def _first_of_next_month(day: date) -> date:
    if day.month == 12:
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive date range of a budget.

    Attributes:
        start: First day.
        end: Last day.
    """

    start: date
    end: date

    def __post_init__(self):
        if self.end < self.start:
            raise InvalidDateRange(self.start, self.end)

    @classmethod
    def create(
        cls,
        start: Optional[date] = None,
        end: Optional[date] = None,
        today: Optional[date] = None
    ) -> "DateRange":
        """
        Build a range, defaulting each missing bound to next calendar month.

        Args:
            start: First day; first day of next month if None.
            end: Last day; last day of next month if None.
            today: Reference date for the defaults; today if None.

        Raises:
            InvalidDateRange: If the end falls before the start.
        """
        today = today or date.today()
        next_month = _first_of_next_month(today)
        if start is None:
            start = next_month
        if end is None:
            end = _first_of_next_month(next_month) - timedelta(days=1)
        return cls(start, end)

    @property
    def days(self) -> int:
        """Number of days, both ends included."""
        return (self.end - self.start).days + 1

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start <= day <= self.end


@dataclass(frozen=True)
class BudgetItem:
    """
    One budgeted concept.

    Attributes:
        concept: Free-text description.
        account_code: Account the amount is charged to.
        amount: Daily amount, or total amount for one-off items.
        kind: DAILY or ONE_OFF.
    """

    concept: str
    account_code: str
    amount: Decimal
    kind: str = ONE_OFF

    def __post_init__(self):
        if self.kind not in (DAILY, ONE_OFF):
            raise ValueError(f"Invalid budget item kind: {self.kind}. Must be '{DAILY}' or '{ONE_OFF}'.")

    def allocation(self, date_range: DateRange) -> Decimal:
        """Total amount this item contributes over the range."""
        if self.kind == DAILY:
            return self.amount * date_range.days
        return self.amount


@dataclass
class BudgetComparison:
    """Budgeted versus actual amount of one account."""

    account_code: str
    account_name: str
    budgeted: Decimal
    spent: Decimal

    @property
    def remaining(self) -> Decimal:
        return self.budgeted - self.spent

    @property
    def percentage(self) -> Optional[Decimal]:
        """Share of the allocation consumed, or None with no allocation."""
        if not self.budgeted:
            return None
        return (self.spent / self.budgeted * 100).quantize(Decimal("0.1"))


@dataclass
class Budget:
    """
    Budget over a date range, validated against a chart of accounts.

    Attributes:
        date_range: Period covered.
        registry: Chart that every item's account must belong to.
        items: Items in insertion order.
    """

    date_range: DateRange
    registry: ChartOfAccounts
    items: list[BudgetItem] = field(default_factory=list)

    def add_item(self, item: BudgetItem) -> BudgetItem:
        """
        Add an item.

        Raises:
            AccountNotFound: If the item's account is not in the chart.
        """
        if not self.registry.contains(item.account_code):
            raise AccountNotFound(item.account_code)
        self.items.append(item)
        logger.debug(f"Budget item '{item.concept}' added to account {item.account_code}")
        return item

    def add_daily(self, concept: str, account_code: str, amount: Decimal) -> BudgetItem:
        return self.add_item(BudgetItem(concept, account_code, Decimal(amount), DAILY))

    def add_one_off(self, concept: str, account_code: str, amount: Decimal) -> BudgetItem:
        return self.add_item(BudgetItem(concept, account_code, Decimal(amount), ONE_OFF))

    @property
    def allocations(self) -> dict[str, Decimal]:
        """Total budgeted amount per account code."""
        totals: dict[str, Decimal] = {}
        for item in self.items:
            totals[item.account_code] = (
                totals.get(item.account_code, Decimal("0")) + item.allocation(self.date_range)
            )
        return totals

    def compare(self, journal: Journal) -> list[BudgetComparison]:
        """
        Compare each allocation with the journal.

        The amount spent on an account is its debits minus its credits in
        the entries dated within the range.

        Args:
            journal: Journal of valid entries.

        Returns:
            One BudgetComparison per budgeted account, in code order.
        """
        allocations = self.allocations
        spent = {code: Decimal("0") for code in allocations}

        for entry in journal.iter_chronological():
            if entry.date not in self.date_range:
                continue
            for side, line in entry.iter_lines():
                if line.account_code not in spent:
                    continue
                if side == DEBIT_MARKER:
                    spent[line.account_code] += line.amount
                else:
                    spent[line.account_code] -= line.amount

        comparisons = []
        for code in sorted(allocations):
            comparisons.append(BudgetComparison(
                account_code=code,
                account_name=self.registry.lookup(code).name,
                budgeted=allocations[code],
                spent=spent[code],
            ))

        logger.info(
            f"Budget {self.date_range.start} - {self.date_range.end}: "
            f"{len(comparisons)} account(s) compared"
        )
        return comparisons


def format_budget_report(
    budget: Budget,
    comparisons: list[BudgetComparison],
    config: Optional[AsientosConfig] = None
) -> str:
    """
    Format a budget comparison as text, with a "#" bar per 5% consumed.

    Args:
        budget: Budget that was compared.
        comparisons: Output of Budget.compare().
        config: Optional configuration; uses default if not provided.

    Returns:
        Formatted text report.
    """
    if config is None:
        from .config import default_config
        config = default_config

    out = StringIO()
    out.write("=" * 100 + "\n")
    out.write("PRESUPUESTO\n")
    out.write(f"{budget.date_range.start} - {budget.date_range.end} ({budget.date_range.days} días)\n")
    out.write(f"Moneda: {config.currency}\n")
    out.write("=" * 100 + "\n\n")

    out.write(f"{'Cuenta':<34} {'Presupuesto':>13} {'Gastado':>13} {'%':>7}  Consumo\n")
    out.write("-" * 100 + "\n")

    for row in comparisons:
        pct = row.percentage
        if pct is None:
            pct_str, bar = "", ""
        else:
            pct_str = f"{pct}"
            bar = "#" * min(int(max(pct, 0) // BAR_STEP), BAR_MAX)
        name = f"{row.account_code} {row.account_name}"[:34]
        out.write(f"{name:<34} {row.budgeted:>13,.2f} {row.spent:>13,.2f} {pct_str:>7}  {bar}\n")

    total_budgeted = sum((row.budgeted for row in comparisons), Decimal("0"))
    total_spent = sum((row.spent for row in comparisons), Decimal("0"))
    out.write("-" * 100 + "\n")
    out.write(f"{'TOTAL':<34} {total_budgeted:>13,.2f} {total_spent:>13,.2f}\n")

    return out.getvalue()
