"""Tests for locale-aware numeric formatting."""

import pytest

from numerus.config import configure
from numerus.errors import InvalidFormatError
from numerus.i18n.formatting import (
    LocaleNumberFormatter,
    format_currency,
    format_number,
    get_default_currency,
    get_number_symbols,
    ordinalize,
)
from numerus.i18n.protocols import (
    GrammaticalGender,
    LocaleInfo,
    NumberStyle,
    parse_format_specifier,
)


class TestFormatSpecifiers:
    """Tests for format specifier parsing."""

    def test_general(self):
        assert parse_format_specifier(None) == (NumberStyle.GENERAL, {})
        assert parse_format_specifier("") == (NumberStyle.GENERAL, {})

    def test_precision(self):
        assert parse_format_specifier("N2") == (NumberStyle.DECIMAL, {"precision": 2})
        assert parse_format_specifier("c0") == (NumberStyle.CURRENCY, {"precision": 0})
        assert parse_format_specifier("P") == (NumberStyle.PERCENT, {"precision": 2})

    def test_fixed_disables_grouping(self):
        style, options = parse_format_specifier("F1")
        assert style == NumberStyle.FIXED
        assert options == {"precision": 1, "use_grouping": False}

    def test_plain_integer(self):
        assert parse_format_specifier("D") == (
            NumberStyle.DECIMAL,
            {"precision": 0, "use_grouping": False},
        )

    @pytest.mark.parametrize("specifier", ["X2", "N-1", "D2", "Nx", "#,##0"])
    def test_invalid(self, specifier):
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_format_specifier(specifier)
        assert exc_info.value.specifier == specifier


class TestFormatNumber:
    """Tests for format_number."""

    def test_general(self):
        assert format_number(5, "en") == "5"
        assert format_number(2.0, "en") == "2"
        assert format_number(22.4, "en") == "22.4"
        assert format_number(-0.5, "en") == "-0.5"
        assert format_number(22.4, "fr") == "22,4"
        assert format_number(1234567, "en") == "1234567"

    def test_grouped_decimal(self):
        assert format_number(123456, "en", "N2") == "123,456.00"
        assert format_number(1234567, "it", "N2") == "1.234.567,00"
        assert format_number(1234567, "ru", "N0") == "1 234 567"
        assert format_number(1234567, "en-IN", "N0") == "12,34,567"
        assert format_number(123456789, "hi", "N0") == "12,34,56,789"

    def test_rounding_is_half_up(self):
        assert format_number(2.345, "en", "N2") == "2.35"
        assert format_number(2.5, "en", "N0") == "3"
        assert format_number(-2.5, "en", "N0") == "-3"

    def test_no_negative_zero(self):
        assert format_number(-0.001, "en", "N2") == "0.00"

    def test_fixed_and_plain(self):
        assert format_number(1234.56, "en", "F1") == "1234.6"
        assert format_number(1234, "en", "D") == "1234"

    def test_percent(self):
        assert format_number(0.25, "en", "P0") == "25%"
        assert format_number(0.25, "ru", "P0") == "25 %"

    def test_special_values(self):
        assert format_number(float("nan"), "en", "N2") == "NaN"
        assert format_number(float("-inf"), "en") == "-∞"


class TestCurrency:
    """Tests for currency formatting."""

    def test_symbol_before(self):
        assert format_number(2, "en", "C2") == "$2.00"
        assert format_number(-2, "en", "C0") == "-$2"

    def test_symbol_after(self):
        assert format_number(0, "es", "C0") == "0 €"
        assert format_number(-1, "es", "C0") == "-1 €"
        assert format_number(2, "es", "C2") == "2,00 €"

    def test_default_currency_by_region(self):
        assert get_default_currency(LocaleInfo.parse("pt-BR")) == "BRL"
        assert get_default_currency(LocaleInfo.parse("pt")) == "EUR"
        assert get_default_currency(LocaleInfo.parse("en-GB")) == "GBP"
        assert get_default_currency(LocaleInfo.parse("ja")) == "USD"

    def test_configured_currency(self):
        configure(default_currency="eur")
        assert format_number(5, "en", "C0") == "€5"

    def test_format_currency(self):
        assert format_currency(1234.56, "EUR", "it") == "1.234,56 €"
        assert format_currency(1000, "JPY", "en") == "¥1,000"


class TestOrdinalize:
    """Tests for numeric ordinals."""

    def test_english(self):
        expected = {1: "1st", 2: "2nd", 3: "3rd", 4: "4th", 11: "11th", 12: "12th",
                    13: "13th", 21: "21st", 22: "22nd", 111: "111th"}
        for n, text in expected.items():
            assert ordinalize(n, "en") == text

    def test_gendered(self):
        assert ordinalize(1, "fr") == "1er"
        assert ordinalize(1, "fr", GrammaticalGender.FEMININE) == "1re"
        assert ordinalize(2, "fr") == "2e"
        assert ordinalize(2, "pt-BR") == "2º"
        assert ordinalize(2, "pt-BR", GrammaticalGender.FEMININE) == "2ª"
        assert ordinalize(1, "ru") == "1-й"
        assert ordinalize(1, "ru", GrammaticalGender.FEMININE) == "1-я"
        assert ordinalize(1, "ru", GrammaticalGender.NEUTER) == "1-е"

    def test_other_languages(self):
        assert ordinalize(3, "nl") == "3e"
        assert ordinalize(3, "de") == "3."
        assert ordinalize(3, "ja") == "3"


class TestFormatter:
    """Tests for LocaleNumberFormatter directly."""

    def test_symbols_fall_back_to_english(self):
        assert get_number_symbols(LocaleInfo.parse("ja")).decimal == "."
        assert get_number_symbols(LocaleInfo.parse("de-CH")).group == "'"

    def test_format_returns_parts(self):
        formatter = LocaleNumberFormatter()
        result = formatter.format(1234.5, LocaleInfo.parse("de"), NumberStyle.DECIMAL, precision=2)

        assert result.formatted == "1.234,50"
        assert result.parts == {"integer": "1.234", "decimal": "50"}
        assert str(result) == "1.234,50"

    def test_default_precision(self):
        formatter = LocaleNumberFormatter(default_precision=1)
        result = formatter.format(2, LocaleInfo.parse("en"), NumberStyle.DECIMAL)
        assert result.formatted == "2.0"
