"""Tests for asientos.chart."""

import pytest

from asientos.chart import Account, ChartOfAccounts, load_registry
from asientos.errors import AccountNotFound, ChartDataError, DuplicateAccount
from asientos.masses import Classification, Mass
from asientos.pgc_data import PGC_ACCOUNTS


# ---------------------------------------------------------------------------
# Account
# ---------------------------------------------------------------------------


class TestAccount:
    def test_from_code_derives_mass(self):
        account = Account.from_code("572", "Bancos")
        assert account.mass == Mass.CURRENT_ASSET
        assert account.classification == Classification.ASSET

    def test_from_code_without_mass_is_other(self):
        account = Account.from_code("0001", "Cuenta de orden")
        assert account.mass is None
        assert account.classification == Classification.OTHER

    def test_display(self):
        assert str(Account.from_code("572", "Bancos")) == "(   572) Bancos"


# ---------------------------------------------------------------------------
# Default chart
# ---------------------------------------------------------------------------


class TestDefaultChart:
    def test_every_builtin_code_has_a_mass(self):
        for code, _ in PGC_ACCOUNTS:
            assert Account.from_code(code, "x").mass is not None, code

    def test_builtin_codes_are_unique(self):
        codes = [code for code, _ in PGC_ACCOUNTS]
        assert len(codes) == len(set(codes))

    def test_registry_holds_every_builtin_account(self, registry):
        assert len(registry) == len(PGC_ACCOUNTS)
        assert registry.lookup("430").name == "Clientes"
        assert registry.lookup("700").name == "Ventas de mercaderías"

    def test_defaults_only_load_into_empty_registry(self):
        chart = ChartOfAccounts()
        chart.add_account("572", "Bancos")
        with pytest.raises(RuntimeError):
            chart.load_defaults()

    def test_malformed_row_raises(self):
        with pytest.raises(ChartDataError):
            ChartOfAccounts().load_defaults([("572",)])

    def test_non_numeric_code_raises(self):
        with pytest.raises(ChartDataError):
            ChartOfAccounts().load_defaults([("57A", "Bancos")])

    def test_duplicate_row_raises(self):
        with pytest.raises(ChartDataError):
            ChartOfAccounts().load_defaults([("572", "Bancos"), ("572", "Otra")])


# ---------------------------------------------------------------------------
# Overrides
# ---------------------------------------------------------------------------


class TestOverrides:
    def test_override_replaces_name_and_keeps_other_codes(self):
        registry = load_registry(override_text="572 Banco Santander c/c\n")

        assert registry.lookup("572").name == "Banco Santander c/c"
        for code, name in PGC_ACCOUNTS:
            if code != "572":
                assert registry.lookup(code).name == name

    def test_override_adds_subaccount(self):
        registry = load_registry(override_text="5720001 Cuenta nómina\n")
        account = registry.lookup("5720001")
        assert account.mass == Mass.CURRENT_ASSET
        assert registry.parent_of("5720001").code == "572"

    def test_comments_and_malformed_lines_are_skipped(self):
        chart = ChartOfAccounts()
        applied = chart.apply_overrides(
            "# cuentas propias\n"
            "\n"
            "Bancos sin código\n"
            "5720001 Cuenta nómina\n"
        )
        assert applied == 1
        assert list(chart.accounts) == ["5720001"]

    def test_name_keeps_inner_spaces(self):
        chart = ChartOfAccounts()
        chart.apply_overrides("  4300001   Cliente   Pérez  \n")
        assert chart.lookup("4300001").name == "Cliente   Pérez"


# ---------------------------------------------------------------------------
# Queries and mutation
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_lookup_missing_code_raises(self, small_registry):
        with pytest.raises(AccountNotFound) as exc_info:
            small_registry.lookup("999")
        assert exc_info.value.code == "999"
        assert "999" in str(exc_info.value)

    def test_contains(self, small_registry):
        assert small_registry.contains("572")
        assert "572" in small_registry
        assert not small_registry.contains("5720")

    def test_iteration_is_code_ordered(self, small_registry):
        codes = [account.code for account in small_registry]
        assert codes == sorted(codes)

    def test_add_duplicate_raises(self):
        chart = ChartOfAccounts()
        chart.add_account("572", "Bancos")
        with pytest.raises(DuplicateAccount, match="572 ~ Bancos"):
            chart.add_account("572", "Otro banco")

    def test_add_with_explicit_classification(self):
        chart = ChartOfAccounts()
        account = chart.add_account("0001", "Cuenta de orden", Classification.ASSET)
        assert account.classification == Classification.ASSET

    def test_frozen_registry_rejects_changes(self, small_registry):
        assert small_registry.frozen
        with pytest.raises(RuntimeError):
            small_registry.add_account("5720001", "Cuenta nómina")
        with pytest.raises(RuntimeError):
            small_registry.apply_overrides("5720001 Cuenta nómina\n")

    def test_parent_and_level(self):
        chart = ChartOfAccounts()
        chart.add_account("57", "Tesorería")
        chart.add_account("572", "Bancos")
        chart.add_account("5720001", "Cuenta nómina")

        assert chart.parent_of("5720001").code == "572"
        assert chart.parent_of("57") is None
        assert chart.level_of("5720001") == 2
        assert chart.level_of("57") == 0

    def test_children_of(self, registry):
        children = registry.children_of("57")
        assert children
        assert all(account.code.startswith("57") for account in children)
        assert all(account.code != "57" for account in children)

    def test_display_lists_one_account_per_line(self, small_registry):
        lines = str(small_registry).splitlines()
        assert len(lines) == len(small_registry)
        assert lines[0] == "(   100) Capital social"
