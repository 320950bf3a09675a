"""Tests for the currency catalog and its formatting templates."""

from decimal import Decimal

import pytest

from paymenthub.domain.currency import CURRENCY_FORMATS, Currency
from paymenthub.domain.errors import UnsupportedCurrencyError


class TestFromCode:
    @pytest.mark.parametrize("code", ["BRL", "brl", " Brl ", Currency.BRL])
    def test_lookup_is_case_insensitive(self, code):
        assert Currency.from_code(code) is Currency.BRL

    @pytest.mark.parametrize("code", ["XYZ", "", "REAL", "BR"])
    def test_unknown_code_is_rejected(self, code):
        with pytest.raises(UnsupportedCurrencyError) as exc_info:
            Currency.from_code(code)
        assert exc_info.value.code.value == "UNSUPPORTED_CURRENCY"

    def test_non_string_is_rejected(self):
        with pytest.raises(UnsupportedCurrencyError):
            Currency.from_code(986)

    def test_unsupported_currency_is_a_value_error(self):
        with pytest.raises(ValueError):
            Currency.from_code("XYZ")


class TestCatalog:
    def test_every_currency_has_a_format(self):
        assert set(CURRENCY_FORMATS) == set(Currency)

    def test_every_currency_uses_two_decimal_places(self):
        assert all(currency.exponent == 2 for currency in Currency)

    def test_metadata(self):
        assert Currency.BRL.symbol == "R$"
        assert Currency.BRL.display_name == "Real Brasileiro"
        assert Currency.BRL.is_latin_american
        assert not Currency.EUR.is_latin_american
        assert str(Currency.USD) == "USD"


class TestFormat:
    @pytest.mark.parametrize("currency, expected", [
        (Currency.BRL, "R$ 1.234,56"),
        (Currency.USD, "$1.234,56"),
        (Currency.EUR, "1.234,56 €"),
        (Currency.GBP, "£1.234,56"),
        (Currency.PEN, "S/ 1.234,56"),
        (Currency.UYU, "$U 1.234,56"),
        (Currency.MXN, "$1.234,56"),
    ])
    def test_templates(self, currency, expected):
        assert currency.format(Decimal("1234.56")) == expected

    @pytest.mark.parametrize("amount, expected", [
        (Decimal("0"), "R$ 0,00"),
        (Decimal("5"), "R$ 5,00"),
        (Decimal("999.9"), "R$ 999,90"),
        (Decimal("1000"), "R$ 1.000,00"),
        (Decimal("1234567.8"), "R$ 1.234.567,80"),
        (Decimal("0.005"), "R$ 0,01"),
        (Decimal("0.004"), "R$ 0,00"),
    ])
    def test_grouping_and_rounding(self, amount, expected):
        assert Currency.BRL.format(amount) == expected
