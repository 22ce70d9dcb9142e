"""
Patrimonial masses ("masas patrimoniales") of the Spanish PGC.

Interprets a numeric account code to find the mass it belongs to and, from
the mass, the high-level classification used for the debit/credit sign
convention and for grouping the balance sheet.
"""

import logging
import re
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Classification(Enum):
    """High-level account classification."""

    ASSET = "ASSET"
    LIABILITY = "LIABILITY"
    EQUITY = "EQUITY"
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    OTHER = "OTHER"


class Mass(Enum):
    """Patrimonial mass of an account, with its Spanish label."""

    NON_CURRENT_ASSET = "Activo no corriente"
    CURRENT_ASSET = "Activo corriente"
    EQUITY = "Patrimonio neto"
    NON_CURRENT_LIABILITY = "Pasivo no corriente"
    CURRENT_LIABILITY = "Pasivo corriente"
    INCOME = "Ingresos"
    EXPENSE = "Gastos"

    @property
    def label(self) -> str:
        return self.value

    @property
    def classification(self) -> Classification:
        return MASS_CLASSIFICATION[self]


MASS_CLASSIFICATION = {
    Mass.NON_CURRENT_ASSET: Classification.ASSET,
    Mass.CURRENT_ASSET: Classification.ASSET,
    Mass.EQUITY: Classification.EQUITY,
    Mass.NON_CURRENT_LIABILITY: Classification.LIABILITY,
    Mass.CURRENT_LIABILITY: Classification.LIABILITY,
    Mass.INCOME: Classification.INCOME,
    Mass.EXPENSE: Classification.EXPENSE,
}

# Balance sheet order of the masses that appear on it.
BALANCE_SHEET_MASSES = (
    Mass.NON_CURRENT_ASSET,
    Mass.CURRENT_ASSET,
    Mass.EQUITY,
    Mass.NON_CURRENT_LIABILITY,
    Mass.CURRENT_LIABILITY,
)

# Classifications whose normal balance is a debit.
DEBIT_NORMAL = {Classification.ASSET, Classification.EXPENSE, Classification.OTHER}

# Classifications whose normal balance is a credit.
CREDIT_NORMAL = {Classification.LIABILITY, Classification.EQUITY, Classification.INCOME}

# Header tokens accepted in opening balance files, normalized to upper case
# without accents.
MASS_HINTS = {
    "ACTIVO": Classification.ASSET,
    "ACTIVO NO CORRIENTE": Mass.NON_CURRENT_ASSET,
    "ANC": Mass.NON_CURRENT_ASSET,
    "ACTIVO CORRIENTE": Mass.CURRENT_ASSET,
    "AC": Mass.CURRENT_ASSET,
    "PASIVO": Classification.LIABILITY,
    "PASIVO NO CORRIENTE": Mass.NON_CURRENT_LIABILITY,
    "PNC": Mass.NON_CURRENT_LIABILITY,
    "PASIVO CORRIENTE": Mass.CURRENT_LIABILITY,
    "PC": Mass.CURRENT_LIABILITY,
    "PATRIMONIO": Mass.EQUITY,
    "PATRIMONIO NETO": Mass.EQUITY,
    "NETO": Mass.EQUITY,
    "PN": Mass.EQUITY,
}

_CODE_RE = re.compile(r"^(\d)(\d)?(\d)?\d*$")


def interpret_code(code: str) -> Optional[Mass]:
    """
    Find the patrimonial mass of a PGC account code.

    Group (first digit), subgroup (second digit) and account (third digit)
    decide the mass. Codes that are not purely numeric, and codes the PGC
    leaves unassigned, return None.

    Args:
        code: Account code, e.g. "572" or "43000001".

    Returns:
        The Mass, or None if the code cannot be interpreted.
    """
    match = _CODE_RE.match(code.strip())
    if match is None:
        return None

    group, subgroup, account = match.groups()
    subgroup = subgroup or ""
    account = account or ""

    if group == "1":  # Financiación básica
        if subgroup in ("0", "1", "2", "3", "9"):
            return Mass.EQUITY
        if subgroup in ("4", "5", "6", "7", "8"):
            return Mass.NON_CURRENT_LIABILITY
        return None
    if group == "2":  # Activo no corriente
        return Mass.NON_CURRENT_ASSET
    if group == "3":  # Existencias
        return Mass.CURRENT_ASSET
    if group == "4":  # Acreedores y deudores por operaciones comerciales
        return _interpret_group_4(subgroup, account)
    if group == "5":  # Cuentas financieras
        return _interpret_group_5(subgroup, account)
    if group in ("6", "8"):
        return Mass.EXPENSE
    if group in ("7", "9"):
        return Mass.INCOME
    return None


def _interpret_group_4(subgroup: str, account: str) -> Optional[Mass]:
    if subgroup in ("0", "1"):  # Proveedores, acreedores varios
        if subgroup == "0" and account == "7":  # Anticipos a proveedores
            return Mass.CURRENT_ASSET
        return Mass.CURRENT_LIABILITY
    if subgroup == "2":  # Free slot, used for long-term debts
        return Mass.NON_CURRENT_LIABILITY
    if subgroup in ("3", "4"):  # Clientes, deudores varios
        if subgroup == "3" and account == "8":  # Anticipos de clientes
            return Mass.CURRENT_LIABILITY
        return Mass.CURRENT_ASSET
    if subgroup == "5":  # Free slot, used for long-term credits
        return Mass.NON_CURRENT_ASSET
    if subgroup == "6":  # Personal
        if account == "0":
            return Mass.CURRENT_ASSET
        if account in ("5", "6"):
            return Mass.CURRENT_LIABILITY
        return None
    if subgroup == "7":  # Administraciones públicas
        if account in ("0", "1", "2", "3", "4"):
            return Mass.CURRENT_ASSET
        if account in ("5", "6", "7"):
            return Mass.CURRENT_LIABILITY
        if account == "9":
            return Mass.NON_CURRENT_LIABILITY
        return None
    if subgroup == "8":  # Ajustes por periodificación
        if account == "0":
            return Mass.CURRENT_ASSET
        if account == "5":
            return Mass.CURRENT_LIABILITY
        return None
    if subgroup == "9":  # Deterioro y provisiones a corto plazo
        return Mass.CURRENT_LIABILITY
    return None


def _interpret_group_5(subgroup: str, account: str) -> Optional[Mass]:
    if subgroup in ("0", "1", "2"):  # Deudas a corto plazo
        return Mass.CURRENT_LIABILITY
    if subgroup in ("3", "4", "7", "9"):  # Inversiones a corto plazo, tesorería
        return Mass.CURRENT_ASSET
    if subgroup == "5":  # Otras cuentas no bancarias
        return Mass.CURRENT_ASSET
    if subgroup == "6":  # Fianzas y depósitos a corto plazo
        if account in ("0", "1"):
            return Mass.CURRENT_LIABILITY
        return Mass.CURRENT_ASSET
    if subgroup == "8":  # Activos y pasivos mantenidos para la venta
        if account in ("5", "6", "7", "8", "9"):
            return Mass.CURRENT_LIABILITY
        return Mass.CURRENT_ASSET
    return None


def classify_code(code: str) -> Classification:
    """
    Classify an account code.

    Args:
        code: Account code.

    Returns:
        The Classification of the code's mass, or OTHER when the code has
        no mass.
    """
    mass = interpret_code(code)
    if mass is None:
        logger.debug(f"No patrimonial mass for account code '{code}'")
        return Classification.OTHER
    return mass.classification


def parse_mass_hint(token: str):
    """
    Resolve an opening balance header token.

    Args:
        token: Header text such as "ACTIVO", "Pasivo corriente" or "PN:".

    Returns:
        A Mass or a Classification, or None if the token is not a header.
    """
    normalized = " ".join(token.strip().rstrip(":").split()).upper()
    for accented, plain in (("Á", "A"), ("É", "E"), ("Í", "I"), ("Ó", "O"), ("Ú", "U")):
        normalized = normalized.replace(accented, plain)
    return MASS_HINTS.get(normalized)


def hint_matches(hint, mass: Optional[Mass], classification: Classification) -> bool:
    """Check whether an opening balance header agrees with an account."""
    if hint is None:
        return True
    if isinstance(hint, Mass):
        return hint == mass
    return hint == classification
