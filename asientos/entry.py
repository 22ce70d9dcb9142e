"""
Journal entry ("asiento") parsing for ASIENTOS.

An entry file holds a free-text description followed by a DEBE (debit)
section and a HABER (credit) section, each made of ``<code> <amount>``
lines. The filename carries the entry id: an 8-digit YYYYMMDD date plus
a 3-digit daily ordinal.

Example::

    Compra de mercaderías a crédito

    DEBE
    600 1000.00
    472 210.00

    HABER
    400 1210.00
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from pathlib import PurePath
from typing import Iterator, Optional

from .config import AsientosConfig
from .errors import ParseError

logger = logging.getLogger(__name__)

DEBIT_MARKER = "DEBE"
CREDIT_MARKER = "HABER"

ORDINAL_WIDTH = 3

ENTRY_ID_RE = re.compile(rf"^(\d{{8}})(\d{{{ORDINAL_WIDTH}}})$")


@lru_cache(maxsize=None)
def amount_pattern(decimal_places: int = 2, signed: bool = False) -> str:
    """Regex source for an amount with up to ``decimal_places`` decimals."""
    sign = "[+-]?" if signed else ""
    return rf"{sign}\d+(?:[.,]\d{{1,{decimal_places}}})?"


@lru_cache(maxsize=None)
def entry_line_re(decimal_places: int = 2) -> re.Pattern:
    """Compiled pattern for a ``<code> <amount>`` entry line."""
    return re.compile(rf"^\s*(\S+)\s+({amount_pattern(decimal_places)})\s*$")


def parse_amount(token: str, config: Optional[AsientosConfig] = None) -> Decimal:
    """
    Convert an amount token to a Decimal with the configured precision.

    Both "." and "," are accepted as decimal separator.

    Raises:
        ParseError: If the amount does not fit the decimal context.
    """
    if config is None:
        from .config import default_config
        config = default_config
    try:
        return config.quantize(Decimal(token.replace(",", ".")))
    except InvalidOperation:
        raise ParseError(f"amount '{token}' out of range") from None


@dataclass(frozen=True)
class EntryLine:
    """
    One debit or credit line of an entry.

    Attributes:
        account_code: Account code as written in the file.
        amount: Unsigned amount; the side gives the sign.
        line_number: 1-based line in the entry file (0 when built in code).
    """

    account_code: str
    amount: Decimal
    line_number: int = 0


@dataclass(frozen=True)
class Entry:
    """
    A journal entry.

    Attributes:
        id: Date + daily ordinal, e.g. "20240115001".
        description: Description lines joined with newlines.
        debit_lines: DEBE lines in file order.
        credit_lines: HABER lines in file order.
    """

    id: str
    description: str
    debit_lines: tuple[EntryLine, ...]
    credit_lines: tuple[EntryLine, ...]

    @property
    def date(self) -> date:
        """Calendar date encoded in the id."""
        return datetime.strptime(self.id[:8], "%Y%m%d").date()

    @property
    def ordinal(self) -> int:
        """Daily ordinal encoded in the id."""
        return int(self.id[8:])

    @property
    def total_debit(self) -> Decimal:
        return sum((line.amount for line in self.debit_lines), Decimal("0"))

    @property
    def total_credit(self) -> Decimal:
        return sum((line.amount for line in self.credit_lines), Decimal("0"))

    @property
    def discrepancy(self) -> Decimal:
        """Debit total minus credit total; zero for a balanced entry."""
        return self.total_debit - self.total_credit

    def is_balanced(self) -> bool:
        return self.discrepancy == 0

    def iter_lines(self) -> Iterator[tuple[str, EntryLine]]:
        """Yield ("DEBE", line) then ("HABER", line) pairs in file order."""
        for line in self.debit_lines:
            yield DEBIT_MARKER, line
        for line in self.credit_lines:
            yield CREDIT_MARKER, line

    def account_codes(self) -> set[str]:
        return {line.account_code for _, line in self.iter_lines()}


def check_entry_id(entry_id: str, source: Optional[str] = None) -> str:
    """
    Check that an id is an 8-digit valid date plus a 3-digit daily ordinal.

    The fixed width keeps string order equal to chronological order.

    Args:
        entry_id: Candidate id, e.g. "20240115001".
        source: Filename the id came from, used in the error message.

    Returns:
        The id, unchanged.

    Raises:
        ParseError: If the id is malformed or its date does not exist.
    """
    where = f"filename '{source}'" if source is not None else f"id '{entry_id}'"

    match = ENTRY_ID_RE.match(entry_id)
    if match is None:
        raise ParseError(
            f"{where} does not encode an entry id "
            f"(YYYYMMDD + {ORDINAL_WIDTH}-digit ordinal)"
        )

    try:
        datetime.strptime(match.group(1), "%Y%m%d")
    except ValueError:
        raise ParseError(f"{where} encodes an invalid date '{match.group(1)}'") from None

    return entry_id


def parse_entry_id(filename: str) -> str:
    """
    Derive an entry id from its filename.

    Args:
        filename: File name or path, e.g. "20240115001.txt".

    Returns:
        The entry id, e.g. "20240115001".

    Raises:
        ParseError: If the name without extension is not a valid id.
    """
    name = PurePath(filename).name
    return check_entry_id(name.split(".", 1)[0], name)


def decode_entry_text(raw: bytes) -> str:
    """Decode raw entry file content as UTF-8, raising ParseError on bad bytes."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"file is not valid UTF-8 (byte {e.start})") from None


def _malformed_line_reason(line: str) -> str:
    tokens = line.split()
    if len(tokens) != 2:
        return (
            f"expected '<code> <amount>', found {len(tokens)} token(s): '{line.strip()}'"
        )
    return f"invalid amount '{tokens[1]}'"


def parse_entry(
    text: str,
    entry_id: str,
    config: Optional[AsientosConfig] = None
) -> Entry:
    """
    Parse the content of one entry file.

    Blank lines and lines starting with "#" are ignored. The text before
    DEBE is the description. Every other line between DEBE and HABER, and
    between HABER and the end of file or the end marker, must be a
    ``<code> <amount>`` pair. The chart of accounts is not consulted.

    Args:
        text: Raw file content.
        entry_id: Id derived from the filename.
        config: Optional configuration; uses default if not provided.

    Returns:
        The parsed Entry.

    Raises:
        ParseError: On a malformed line or a missing/misplaced section.
    """
    if config is None:
        from .config import default_config
        config = default_config

    line_re = entry_line_re(config.decimal_places)

    description: list[str] = []
    debit: list[EntryLine] = []
    credit: list[EntryLine] = []
    debit_at = credit_at = 0
    section = "description"

    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if stripped == DEBIT_MARKER:
            if section != "description":
                raise ParseError(f"unexpected {DEBIT_MARKER} marker", line_number, line)
            section = "debit"
            debit_at = line_number
            continue

        if stripped == CREDIT_MARKER:
            if section == "description":
                raise ParseError(
                    f"{CREDIT_MARKER} marker before {DEBIT_MARKER}", line_number, line
                )
            if section == "credit":
                raise ParseError(f"unexpected {CREDIT_MARKER} marker", line_number, line)
            section = "credit"
            credit_at = line_number
            continue

        if section == "description":
            description.append(stripped)
            continue

        if stripped == config.end_marker:
            if section == "debit":
                raise ParseError(
                    f"end marker before {CREDIT_MARKER} section", line_number, line
                )
            break

        match = line_re.match(line)
        if match is None:
            raise ParseError(_malformed_line_reason(line), line_number, line)

        code, amount = match.groups()
        try:
            value = parse_amount(amount, config)
        except ParseError as e:
            raise ParseError(e.reason, line_number, line) from None

        entry_line = EntryLine(code, value, line_number)
        if section == "debit":
            debit.append(entry_line)
        else:
            credit.append(entry_line)

    if not debit_at:
        raise ParseError(f"missing {DEBIT_MARKER} section")
    if not description:
        raise ParseError("empty description", debit_at)
    if not credit_at:
        raise ParseError(f"missing {CREDIT_MARKER} section")
    if not debit:
        raise ParseError(f"empty {DEBIT_MARKER} section", debit_at)
    if not credit:
        raise ParseError(f"empty {CREDIT_MARKER} section", credit_at)

    entry = Entry(
        id=entry_id,
        description="\n".join(description),
        debit_lines=tuple(debit),
        credit_lines=tuple(credit),
    )
    logger.debug(
        f"Parsed entry {entry_id}: {len(debit)} debit line(s), {len(credit)} credit line(s)"
    )
    return entry
