"""
Shared pytest fixtures for ASIENTOS tests.
"""

import pytest

from asientos.chart import ChartOfAccounts, load_registry
from asientos.config import AsientosConfig
from tests.helpers import make_entry_text


@pytest.fixture
def sample_config() -> AsientosConfig:
    """Default ASIENTOS configuration."""
    return AsientosConfig()


@pytest.fixture
def registry() -> ChartOfAccounts:
    """Frozen registry holding the built-in PGC chart."""
    return load_registry()


@pytest.fixture
def small_registry() -> ChartOfAccounts:
    """
    Frozen registry with a handful of accounts:

        100 Capital social          EQUITY
        430 Clientes                ASSET (current)
        572 Bancos                  ASSET (current)
        400 Proveedores             LIABILITY (current)
        600 Compras de mercaderías  EXPENSE
        700 Ventas de mercaderías   INCOME
    """
    return load_registry(default_data=[
        ("100", "Capital social"),
        ("400", "Proveedores"),
        ("430", "Clientes"),
        ("572", "Bancos"),
        ("600", "Compras de mercaderías"),
        ("700", "Ventas de mercaderías"),
    ])


@pytest.fixture
def sale_text() -> str:
    """Balanced sale on credit: 430 / 700 for 500.00."""
    return make_entry_text(
        "Venta a crédito",
        debit=[("430", "500.00")],
        credit=[("700", "500.00")],
    )


@pytest.fixture
def opening_text() -> str:
    """
    Opening balances that satisfy Activo = Pasivo + Patrimonio neto:

        572 Bancos     1,000.00  (activo)
        430 Clientes   1,000.00  (activo)
        400 Proveedores  500.00  (pasivo)
        100 Capital    1,500.00  (patrimonio neto)
    """
    return "\n".join([
        "ACTIVO",
        "572 1000.00",
        "430 1000.00",
        "",
        "PASIVO CORRIENTE",
        "400 500.00",
        "",
        "PATRIMONIO NETO",
        "100 1500.00",
    ]) + "\n"
