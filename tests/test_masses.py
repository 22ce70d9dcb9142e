"""Tests for asientos.masses."""

import pytest

from asientos.masses import (
    Classification,
    Mass,
    classify_code,
    hint_matches,
    interpret_code,
    parse_mass_hint,
)


# ---------------------------------------------------------------------------
# interpret_code
# ---------------------------------------------------------------------------


class TestInterpretCode:
    @pytest.mark.parametrize("code, expected", [
        ("100", Mass.EQUITY),
        ("129", Mass.EQUITY),
        ("170", Mass.NON_CURRENT_LIABILITY),
        ("210", Mass.NON_CURRENT_ASSET),
        ("300", Mass.CURRENT_ASSET),
        ("400", Mass.CURRENT_LIABILITY),
        ("407", Mass.CURRENT_ASSET),
        ("430", Mass.CURRENT_ASSET),
        ("438", Mass.CURRENT_LIABILITY),
        ("472", Mass.CURRENT_ASSET),
        ("475", Mass.CURRENT_LIABILITY),
        ("479", Mass.NON_CURRENT_LIABILITY),
        ("520", Mass.CURRENT_LIABILITY),
        ("540", Mass.CURRENT_ASSET),
        ("560", Mass.CURRENT_LIABILITY),
        ("565", Mass.CURRENT_ASSET),
        ("572", Mass.CURRENT_ASSET),
        ("586", Mass.CURRENT_LIABILITY),
        ("600", Mass.EXPENSE),
        ("700", Mass.INCOME),
        ("800", Mass.EXPENSE),
        ("900", Mass.INCOME),
    ])
    def test_known_codes(self, code, expected):
        assert interpret_code(code) == expected

    def test_subaccounts_follow_their_first_three_digits(self):
        assert interpret_code("5720001") == Mass.CURRENT_ASSET
        assert interpret_code("43000012") == Mass.CURRENT_ASSET

    def test_group_prefixes(self):
        assert interpret_code("2") == Mass.NON_CURRENT_ASSET
        assert interpret_code("57") == Mass.CURRENT_ASSET

    @pytest.mark.parametrize("code", ["", "0", "000", "abc", "57a", "461"])
    def test_uninterpretable_codes_return_none(self, code):
        assert interpret_code(code) is None


class TestClassifyCode:
    def test_classification_from_mass(self):
        assert classify_code("572") == Classification.ASSET
        assert classify_code("400") == Classification.LIABILITY
        assert classify_code("100") == Classification.EQUITY
        assert classify_code("700") == Classification.INCOME
        assert classify_code("600") == Classification.EXPENSE

    def test_no_mass_is_other(self):
        assert classify_code("0001") == Classification.OTHER


# ---------------------------------------------------------------------------
# Mass hints
# ---------------------------------------------------------------------------


class TestMassHints:
    @pytest.mark.parametrize("token, expected", [
        ("ACTIVO", Classification.ASSET),
        ("Pasivo", Classification.LIABILITY),
        ("PASIVO CORRIENTE:", Mass.CURRENT_LIABILITY),
        ("pasivo  no  corriente", Mass.NON_CURRENT_LIABILITY),
        ("PN", Mass.EQUITY),
        ("Patrimonio neto", Mass.EQUITY),
        ("AC", Mass.CURRENT_ASSET),
    ])
    def test_parse_mass_hint(self, token, expected):
        assert parse_mass_hint(token) == expected

    def test_unknown_token(self):
        assert parse_mass_hint("Caja") is None

    def test_classification_hint_matches_any_mass_of_the_class(self):
        assert hint_matches(Classification.ASSET, Mass.CURRENT_ASSET, Classification.ASSET)
        assert hint_matches(Classification.ASSET, Mass.NON_CURRENT_ASSET, Classification.ASSET)
        assert not hint_matches(Classification.ASSET, Mass.CURRENT_LIABILITY, Classification.LIABILITY)

    def test_mass_hint_must_match_exactly(self):
        assert hint_matches(Mass.CURRENT_LIABILITY, Mass.CURRENT_LIABILITY, Classification.LIABILITY)
        assert not hint_matches(
            Mass.NON_CURRENT_LIABILITY, Mass.CURRENT_LIABILITY, Classification.LIABILITY
        )

    def test_no_hint_always_matches(self):
        assert hint_matches(None, None, Classification.OTHER)

    def test_mass_labels_and_classification(self):
        assert Mass.CURRENT_ASSET.label == "Activo corriente"
        assert Mass.EQUITY.classification == Classification.EQUITY
