"""
Unit Tests for Core Configuration and Hashing

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from datetime import date
from decimal import Decimal

import pytest

from core.config import TaxConfig, load_tax_config
from core.hashing import calculate_sha256, canonical_json_dumps, verify_hash
from lib.validators import InvalidInputError, to_finite_decimal


class TestTaxConfig:
    """DEFAULT_TAX_RATE / DEFAULT_TAX_CODE environment handling."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DEFAULT_TAX_RATE", raising=False)
        monkeypatch.delenv("DEFAULT_TAX_CODE", raising=False)

        assert load_tax_config() == TaxConfig(default_rate=Decimal("18"), default_tax_code="GST")

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_TAX_RATE", "5.5")
        monkeypatch.setenv("DEFAULT_TAX_CODE", "vat")

        config = load_tax_config()

        assert config.default_rate == Decimal("5.5")
        assert config.default_tax_code == "VAT"

    def test_blank_rate_uses_default(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_TAX_RATE", "  ")
        assert load_tax_config().default_rate == Decimal("18")

    @pytest.mark.parametrize("raw", ["abc", "nan", "Infinity", "-1"])
    def test_invalid_rate(self, monkeypatch, raw):
        monkeypatch.setenv("DEFAULT_TAX_RATE", raw)

        with pytest.raises(InvalidInputError, match="DEFAULT_TAX_RATE"):
            load_tax_config()


class TestToFiniteDecimal:

    def test_numeric_types(self):
        assert to_finite_decimal(5, "x") == Decimal(5)
        assert to_finite_decimal(0.1, "x") == Decimal("0.1")
        assert to_finite_decimal(" 12.5 ", "x") == Decimal("12.5")
        assert to_finite_decimal(Decimal("7"), "x") == Decimal("7")

    def test_error_names_the_field(self):
        with pytest.raises(InvalidInputError, match="shipping_total must be finite"):
            to_finite_decimal(float("inf"), "shipping_total")


class TestHashing:
    """Canonical JSON and SHA256 seals."""

    def test_canonical_json_is_sorted_and_compact(self):
        assert canonical_json_dumps({"total": 1800, "rate": Decimal("18")}) == '{"rate":18,"total":1800}'

    def test_integral_decimals_seal_alike(self):
        assert calculate_sha256({"rate": Decimal("18.0")}) == calculate_sha256({"rate": Decimal("18")})

    def test_fractional_decimal_kept_exact(self):
        assert canonical_json_dumps({"rate": Decimal("12.50")}) == '{"rate":"12.5"}'

    def test_dates(self):
        assert canonical_json_dumps({"day": date(2026, 1, 15)}) == '{"day":"2026-01-15"}'

    def test_unserializable(self):
        with pytest.raises(TypeError):
            canonical_json_dumps({"x": object()})

    def test_verify_hash(self):
        data = {"subtotal": 10000, "total": 1800}
        digest = calculate_sha256(data)

        assert digest.startswith("sha256:")
        assert verify_hash(data, digest)
        assert not verify_hash({"subtotal": 10000, "total": 1801}, digest)
