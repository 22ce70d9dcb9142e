"""
Violation records for ASIENTOS.

Every check in the validator, the journal loader and the balance engine
reports problems as Violation objects collected into a shared result, so a
single pass shows everything a user has to correct.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

logger = logging.getLogger(__name__)

# Violation categories
PARSE_ERROR = "PARSE_ERROR"
UNKNOWN_ACCOUNT_CODE = "UNKNOWN_ACCOUNT_CODE"
ZERO_AMOUNT = "ZERO_AMOUNT"
IMBALANCED_ENTRY = "IMBALANCED_ENTRY"
DUPLICATE_ENTRY_ID = "DUPLICATE_ENTRY_ID"
BALANCE_MISMATCH = "BALANCE_MISMATCH"
MASS_HINT_MISMATCH = "MASS_HINT_MISMATCH"
UNCLASSIFIED_ACCOUNT = "UNCLASSIFIED_ACCOUNT"


@dataclass(frozen=True)
class Violation:
    """
    A single problem found while loading or checking the books.

    Attributes:
        category: Violation category (e.g. "IMBALANCED_ENTRY").
        severity: "error" or "warning".
        message: Human-readable description.
        line_number: 1-based line in the source file, if the problem is
                     attributable to a line.
        account_code: Account code involved, if any.
        amount: Amount involved (e.g. the debit minus credit discrepancy).
    """

    category: str
    severity: str
    message: str
    line_number: Optional[int] = None
    account_code: Optional[str] = None
    amount: Optional[Decimal] = None

    def __post_init__(self):
        """Validate severity value."""
        if self.severity not in ("error", "warning"):
            raise ValueError(
                f"Invalid severity: {self.severity}. Must be 'error' or 'warning'."
            )

    def __str__(self) -> str:
        """Format violation for display."""
        location = f" (line {self.line_number})" if self.line_number else ""
        return f"[{self.severity.upper()}] {self.category}: {self.message}{location}"

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "severity": self.severity,
            "message": self.message,
            "line_number": self.line_number,
            "account_code": self.account_code,
            "amount": str(self.amount) if self.amount is not None else None,
        }


@dataclass
class ValidationResult:
    """
    Accumulated violations for one entry or one run.

    Attributes:
        violations: Violations in the order they were found.
    """

    violations: list[Violation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no error-severity violation was found."""
        return not self.has_errors

    @property
    def has_errors(self) -> bool:
        return any(v.severity == "error" for v in self.violations)

    @property
    def has_warnings(self) -> bool:
        return any(v.severity == "warning" for v in self.violations)

    @property
    def error_count(self) -> int:
        """Count of errors."""
        return sum(1 for v in self.violations if v.severity == "error")

    @property
    def warning_count(self) -> int:
        """Count of warnings."""
        return sum(1 for v in self.violations if v.severity == "warning")

    @property
    def discrepancy(self) -> Optional[Decimal]:
        """Debit minus credit difference reported by the balance check, if any."""
        for violation in self.violations:
            if violation.category == IMBALANCED_ENTRY:
                return violation.amount
        return None

    def by_category(self, category: str) -> list[Violation]:
        return [v for v in self.violations if v.category == category]

    def add(self, violation: Violation) -> None:
        self.violations.append(violation)

    def add_error(self, category: str, message: str, **kwargs) -> None:
        """
        Add an error to the result.

        Args:
            category: Violation category.
            message: Error message.
            **kwargs: line_number, account_code or amount.
        """
        self.violations.append(Violation(category, "error", message, **kwargs))

    def add_warning(self, category: str, message: str, **kwargs) -> None:
        """
        Add a warning to the result.

        Args:
            category: Violation category.
            message: Warning message.
            **kwargs: line_number, account_code or amount.
        """
        self.violations.append(Violation(category, "warning", message, **kwargs))

    def log_summary(self, label: str = "Validation") -> None:
        """
        Log a summary of the violations.

        Logs all violations and provides counts.
        """
        if not self.violations:
            logger.info(f"✓ {label} passed with no issues")
            return

        logger.info(
            f"{label} completed: {self.error_count} error(s), {self.warning_count} warning(s)"
        )

        for violation in self.violations:
            if violation.severity == "error":
                logger.error(str(violation))
            else:
                logger.warning(str(violation))

        if self.has_errors:
            logger.error(f"✗ {label} FAILED with {self.error_count} error(s)")
        else:
            logger.info(f"✓ {label} passed (with {self.warning_count} warning(s))")
