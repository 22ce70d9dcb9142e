"""
Configuration management for ASIENTOS.

Handles global configuration settings such as the decimal precision used
for amounts, the balance sheet mismatch tolerance and the entry file
end marker.
"""

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class AsientosConfig:
    """
    Global configuration for ASIENTOS parsing, validation and reporting.
    
    Attributes:
        tolerance: Maximum absolute difference accepted between total assets
                   and total liabilities plus equity. Amounts are exact
                   decimals, so the default is zero.
        decimal_places: Number of fractional digits carried by amounts.
                        Default: 2 (euro cents).
        currency: Currency symbol used in reports. Default: "EUR".
        end_marker: Optional line that terminates an entry file; anything
                    after it is ignored. Default: "FIN".
        workers: Number of worker threads used when loading the journal.
                 None or 1 loads sequentially.
    """
    
    tolerance: Decimal = Decimal("0")
    decimal_places: int = 2
    currency: str = "EUR"
    end_marker: str = "FIN"
    workers: Optional[int] = None
    
    @property
    def quantum(self) -> Decimal:
        """Smallest representable amount, e.g. Decimal("0.01")."""
        return Decimal(1).scaleb(-self.decimal_places)
    
    def quantize(self, value: Decimal) -> Decimal:
        """
        Round a value to the configured number of fractional digits.
        
        Args:
            value: Decimal amount.
            
        Returns:
            The amount with exactly ``decimal_places`` fractional digits.
        """
        return Decimal(value).quantize(self.quantum, rounding=ROUND_HALF_EVEN)
    
    def is_zero(self, value: Decimal) -> bool:
        """
        Check if an amount is zero within tolerance.
        
        Args:
            value: The amount to check.
            
        Returns:
            True if abs(value) <= tolerance, False otherwise.
        """
        return abs(value) <= self.tolerance
    
    def is_balanced(self, value: Decimal) -> bool:
        """
        Check if a delta represents a balanced state.
        
        Alias for is_zero() with clearer meaning when checking the
        accounting equation.
        """
        return self.is_zero(value)


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the application.
    
    Args:
        verbose: If True, sets log level to DEBUG. Otherwise, INFO.
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    if verbose:
        logger.debug("Verbose logging enabled")


# Global default configuration instance
default_config = AsientosConfig()
