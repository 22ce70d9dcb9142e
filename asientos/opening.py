"""
Initial balance ("balance inicial") loading for ASIENTOS.

The opening balance file lists ``<code> <amount>`` lines, optionally
grouped under patrimonial mass headers::

    ACTIVO
    572 1000.00
    430 250.50

    PASIVO CORRIENTE
    400 -50

Amounts are in each account's natural sign: a positive amount is a normal
(debit for assets, credit for liabilities and equity) balance. Lines that
match neither form are ignored.
"""

import logging
import re
from dataclasses import dataclass, field
from decimal import Decimal
from functools import lru_cache
from typing import Iterator, Optional, Union

from .config import AsientosConfig
from .entry import amount_pattern, parse_amount
from .errors import ParseError
from .masses import Classification, Mass, parse_mass_hint

logger = logging.getLogger(__name__)

MassHint = Union[Mass, Classification]


@lru_cache(maxsize=None)
def opening_line_re(decimal_places: int = 2) -> re.Pattern:
    """Compiled pattern for a "[HEADER] <code> <amount>" line."""
    return re.compile(
        rf"^\s*(?:([^\W\d]+(?:\s+[^\W\d]+)*)\s*:?\s+)?(\d+)\s+({amount_pattern(decimal_places, signed=True)})\s*$"
    )


# A header alone on its line, e.g. "PASIVO CORRIENTE:".
HEADER_LINE_RE = re.compile(r"^\s*([^\W\d]+(?:\s+[^\W\d]+)*)\s*:?\s*$")


@dataclass
class InitialBalances:
    """
    Opening balance per account code.

    Attributes:
        balances: Signed opening balance keyed by account code.
        hints: Mass header under which each code was listed, when any.
    """

    balances: dict[str, Decimal] = field(default_factory=dict)
    hints: dict[str, MassHint] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.balances)

    def __contains__(self, code: object) -> bool:
        return code in self.balances

    def __iter__(self) -> Iterator[str]:
        return iter(self.balances)

    def __getitem__(self, code: str) -> Decimal:
        return self.balances[code]

    def get(self, code: str, default: Decimal = Decimal("0")) -> Decimal:
        return self.balances.get(code, default)

    def items(self):
        return self.balances.items()


def load_initial_balances(
    text: Optional[str] = None,
    config: Optional[AsientosConfig] = None
) -> InitialBalances:
    """
    Parse the opening balance file.

    Args:
        text: Raw file content, or None when there is no file (all opening
              balances are zero).
        config: Optional configuration; uses default if not provided.

    Returns:
        InitialBalances.
    """
    if config is None:
        from .config import default_config
        config = default_config

    result = InitialBalances()
    if not text:
        logger.info("No initial balance file: all opening balances are zero")
        return result

    line_re = opening_line_re(config.decimal_places)
    current_hint: Optional[MassHint] = None

    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        match = line_re.match(line)
        if match is None:
            header = HEADER_LINE_RE.match(line)
            hint = parse_mass_hint(header.group(1)) if header else None
            if hint is not None:
                current_hint = hint
            else:
                logger.debug(f"Initial balance line {line_number} ignored: {line!r}")
            continue

        token, code, amount = match.groups()
        hint = current_hint
        if token is not None:
            line_hint = parse_mass_hint(token)
            if line_hint is None:
                logger.debug(f"Initial balance line {line_number} ignored: {line!r}")
                continue
            hint = line_hint

        try:
            value = parse_amount(amount, config)
        except ParseError as e:
            logger.debug(f"Initial balance line {line_number} ignored: {e.reason}")
            continue

        if code in result.balances:
            logger.warning(
                f"Account {code} listed twice in the initial balance "
                f"(line {line_number}); keeping the later amount"
            )

        result.balances[code] = value
        if hint is not None:
            result.hints[code] = hint
        else:
            result.hints.pop(code, None)

    logger.info(f"Loaded {len(result)} opening balance(s)")
    return result
