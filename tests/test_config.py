"""Tests for asientos.config."""

import logging
from decimal import Decimal
from unittest.mock import patch

from asientos.config import AsientosConfig, default_config, setup_logging


class TestAsientosConfig:
    def test_default_values(self):
        cfg = AsientosConfig()
        assert cfg.tolerance == Decimal("0")
        assert cfg.decimal_places == 2
        assert cfg.currency == "EUR"
        assert cfg.end_marker == "FIN"
        assert cfg.workers is None

    def test_quantum_follows_decimal_places(self):
        assert AsientosConfig().quantum == Decimal("0.01")
        assert AsientosConfig(decimal_places=3).quantum == Decimal("0.001")

    def test_quantize_pads_to_two_places(self):
        assert str(AsientosConfig().quantize(Decimal("5"))) == "5.00"

    def test_quantize_rounds_half_even(self):
        cfg = AsientosConfig()
        assert cfg.quantize(Decimal("0.125")) == Decimal("0.12")
        assert cfg.quantize(Decimal("0.135")) == Decimal("0.14")

    def test_is_zero_exact_by_default(self):
        cfg = AsientosConfig()
        assert cfg.is_zero(Decimal("0")) is True
        assert cfg.is_zero(Decimal("0.01")) is False
        assert cfg.is_zero(Decimal("-0.01")) is False

    def test_is_zero_within_custom_tolerance(self):
        cfg = AsientosConfig(tolerance=Decimal("0.01"))
        assert cfg.is_zero(Decimal("0.01")) is True   # exactly at boundary
        assert cfg.is_zero(Decimal("0.02")) is False

    def test_is_balanced_aliases_is_zero(self):
        cfg = AsientosConfig()
        assert cfg.is_balanced(Decimal("0")) is True
        assert cfg.is_balanced(Decimal("0.02")) is False

    def test_default_config_singleton(self):
        assert default_config.tolerance == Decimal("0")
        assert default_config.currency == "EUR"


class TestSetupLogging:
    """
    logging.basicConfig is a no-op if the root logger already has handlers
    (as is typically the case in a pytest environment).  Test the call
    signature via mock rather than relying on the root logger level.
    """

    def test_info_level_passed_to_basic_config(self):
        with patch("logging.basicConfig") as mock_cfg:
            setup_logging(verbose=False)

        mock_cfg.assert_called_once()
        assert mock_cfg.call_args.kwargs["level"] == logging.INFO

    def test_debug_level_passed_to_basic_config(self):
        with patch("logging.basicConfig") as mock_cfg:
            setup_logging(verbose=True)

        mock_cfg.assert_called_once()
        assert mock_cfg.call_args.kwargs["level"] == logging.DEBUG
