"""
Exception types raised by the ASIENTOS core.

Per-file problems (ParseError, DuplicateEntryId) are caught by the journal
loader and turned into reported failures; only ChartDataError is meant to
stop a run.
"""

from typing import Optional


class AsientosError(Exception):
    """Base class for all ASIENTOS errors."""


class ParseError(AsientosError):
    """
    Malformed entry file structure or line.
    
    Attributes:
        reason: Human-readable description of the problem.
        line_number: 1-based line number, or 0 when the problem is not tied
                     to a line (missing section, bad filename).
        line: The offending line text, if any.
    """
    
    def __init__(self, reason: str, line_number: int = 0, line: Optional[str] = None):
        self.reason = reason
        self.line_number = line_number
        self.line = line
        super().__init__(str(self))
    
    def __str__(self) -> str:
        if self.line_number:
            return f"line {self.line_number}: {self.reason}"
        return self.reason
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.reason, self.line_number, self.line) == (
            other.reason, other.line_number, other.line
        )
    
    def __hash__(self) -> int:
        return hash((self.reason, self.line_number, self.line))


class ChartDataError(AsientosError):
    """The built-in chart of accounts data could not be loaded."""


class AccountNotFound(AsientosError, KeyError):
    """No account with the given code exists in the chart."""
    
    def __init__(self, code: str):
        self.code = code
        super().__init__(code)
    
    def __str__(self) -> str:
        return f"El código de cuenta '{self.code}' no existe"


class DuplicateAccount(AsientosError):
    """An account with the given code already exists in the chart."""
    
    def __init__(self, code: str, name: str):
        self.code = code
        self.name = name
        super().__init__(f"La cuenta '{code} ~ {name}' ya existe")


class EntryNotFound(AsientosError, KeyError):
    """No entry with the given id exists in the journal."""
    
    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(entry_id)
    
    def __str__(self) -> str:
        return f"Entry '{self.entry_id}' not found in journal"


class DuplicateEntryId(AsientosError):
    """An entry id is already taken by an earlier entry."""
    
    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(f"Duplicate entry id '{entry_id}'")


class InvalidDateRange(AsientosError, ValueError):
    """A date range ends before it starts."""
    
    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"Invalid date range: end {end} is before start {start}")
