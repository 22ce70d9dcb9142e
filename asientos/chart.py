"""
Chart of accounts ("cuadro de cuentas") for ASIENTOS.

Holds the mapping from account code to Account. A registry is populated
from the built-in PGC table, then extended or overridden by an optional
user chart file, and frozen for the rest of the run.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .errors import AccountNotFound, ChartDataError, DuplicateAccount
from .masses import Classification, Mass, interpret_code
from .pgc_data import PGC_ACCOUNTS

logger = logging.getLogger(__name__)

# "<code> <name>" where the name is the rest of the line.
CHART_LINE_RE = re.compile(r"^\s*(\d+)\s+(\S.*?)\s*$")


@dataclass(frozen=True)
class Account:
    """
    An account of the chart.

    Attributes:
        code: Hierarchical numeric code (e.g. "57", "572", "5720001").
        name: Account name.
        classification: ASSET, LIABILITY, EQUITY, INCOME, EXPENSE or OTHER.
        mass: Patrimonial mass, or None when the code has none.
    """

    code: str
    name: str
    classification: Classification = Classification.OTHER
    mass: Optional[Mass] = None

    @classmethod
    def from_code(cls, code: str, name: str) -> "Account":
        """Build an Account, deriving mass and classification from its code."""
        mass = interpret_code(code)
        classification = mass.classification if mass else Classification.OTHER
        return cls(code=code, name=name, classification=classification, mass=mass)

    def __str__(self) -> str:
        return f"({self.code:>6}) {self.name}"


@dataclass
class ChartOfAccounts:
    """
    Registry of valid account codes.

    Attributes:
        accounts: Accounts keyed by code.
        frozen: When True, any mutation raises RuntimeError.
    """

    accounts: dict[str, Account] = field(default_factory=dict)
    frozen: bool = False

    def __len__(self) -> int:
        return len(self.accounts)

    def __contains__(self, code: object) -> bool:
        return code in self.accounts

    def __iter__(self) -> Iterator[Account]:
        """Iterate accounts in code order."""
        for code in sorted(self.accounts):
            yield self.accounts[code]

    def __str__(self) -> str:
        return "".join(f"{account}\n" for account in self)

    def _check_mutable(self) -> None:
        if self.frozen:
            raise RuntimeError("Chart of accounts is frozen and cannot be modified")

    def freeze(self) -> None:
        """Make the registry read-only for the rest of the run."""
        self.frozen = True
        logger.debug(f"Chart of accounts frozen with {len(self)} account(s)")

    def load_defaults(self, data: Optional[Iterable[tuple[str, str]]] = None) -> None:
        """
        Populate the registry from the built-in PGC table.

        Args:
            data: Optional ``(code, name)`` rows replacing the built-in table.

        Raises:
            RuntimeError: If the registry is frozen or already has accounts.
            ChartDataError: If a row of the table is malformed.
        """
        self._check_mutable()
        if self.accounts:
            raise RuntimeError(
                "El cuadro ya contiene cuentas. Puedes añadir de una en una, "
                "pero no cargar el PGC"
            )

        rows = PGC_ACCOUNTS if data is None else data

        for index, row in enumerate(rows):
            try:
                code, name = row
            except (TypeError, ValueError) as e:
                raise ChartDataError(f"Malformed chart row #{index}: {row!r}") from e

            if not isinstance(code, str) or not code.isdigit() or not name:
                raise ChartDataError(f"Malformed chart row #{index}: {row!r}")
            if code in self.accounts:
                raise ChartDataError(f"Duplicate code '{code}' in chart data")

            account = Account.from_code(code, name)
            if account.mass is None:
                logger.warning(f"Código perdido al cargar el PGC: {code}")
            self.accounts[code] = account

        logger.info(f"Loaded {len(self.accounts)} account(s) from the default chart")

    def apply_overrides(self, text: str) -> int:
        """
        Insert or replace accounts from a chart override file.

        Each non-blank, non-comment line of the form ``<code> <name>`` is
        applied; any other line is skipped.

        Args:
            text: Raw content of the override file.

        Returns:
            Number of accounts inserted or replaced.
        """
        self._check_mutable()
        applied = 0

        for line_number, line in enumerate(text.splitlines(), start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue

            match = CHART_LINE_RE.match(line)
            if match is None:
                logger.debug(f"Chart override line {line_number} skipped: {line!r}")
                continue

            code, name = match.groups()
            if code in self.accounts:
                logger.debug(f"Replacing account {code}: '{self.accounts[code].name}' -> '{name}'")
            self.accounts[code] = Account.from_code(code, name)
            applied += 1

        logger.info(f"Applied {applied} chart override(s)")
        return applied

    def add_account(
        self,
        code: str,
        name: str,
        classification: Optional[Classification] = None
    ) -> Account:
        """
        Create an account and insert it, if the code is not taken.

        Args:
            code: Account code.
            name: Account name.
            classification: Explicit classification; derived from the code
                            when omitted.

        Returns:
            The new Account.

        Raises:
            DuplicateAccount: If the code already exists.
        """
        self._check_mutable()
        existing = self.accounts.get(code)
        if existing is not None:
            raise DuplicateAccount(existing.code, existing.name)

        account = Account.from_code(code, name)
        if classification is not None and classification != account.classification:
            account = Account(code=code, name=name, classification=classification, mass=None)

        self.accounts[code] = account
        return account

    def lookup(self, code: str) -> Account:
        """
        Find an account by code.

        Raises:
            AccountNotFound: If no account has this code.
        """
        try:
            return self.accounts[code]
        except KeyError:
            raise AccountNotFound(code) from None

    def get(self, code: str, default: Optional[Account] = None) -> Optional[Account]:
        return self.accounts.get(code, default)

    def contains(self, code: str) -> bool:
        return code in self.accounts

    def parent_of(self, code: str) -> Optional[Account]:
        """
        Find the closest registered ancestor of a code.

        The ancestor is the account whose code is the longest proper prefix
        of ``code``.
        """
        for length in range(len(code) - 1, 0, -1):
            parent = self.accounts.get(code[:length])
            if parent is not None:
                return parent
        return None

    def level_of(self, code: str) -> int:
        """Number of registered ancestors of a code."""
        level = 0
        parent = self.parent_of(code)
        while parent is not None:
            level += 1
            parent = self.parent_of(parent.code)
        return level

    def children_of(self, prefix: str) -> list[Account]:
        """All accounts under a code prefix, excluding the prefix itself."""
        return [
            account for account in self
            if account.code.startswith(prefix) and account.code != prefix
        ]


def load_registry(
    default_data: Optional[Iterable[tuple[str, str]]] = None,
    override_text: Optional[str] = None
) -> ChartOfAccounts:
    """
    Build the run's chart of accounts.

    Args:
        default_data: ``(code, name)`` rows; the built-in PGC table if None.
        override_text: Optional content of the user chart file.

    Returns:
        A frozen ChartOfAccounts.

    Raises:
        ChartDataError: If the default data is malformed.
    """
    registry = ChartOfAccounts()
    registry.load_defaults(default_data)

    if override_text:
        registry.apply_overrides(override_text)

    registry.freeze()
    return registry
