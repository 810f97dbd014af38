"""Locale-Aware Number Formatting.

Renders the digits of a quantity phrase in numeric display mode:
- General (shortest representation, locale decimal separator)
- Decimal with grouping ("N2"), fixed without grouping ("F2"), integer ("D")
- Currency with symbol positioning ("C2")
- Percent ("P1")
- Numeric ordinals ("21st", "2º", "1re", "3-й")

Usage:
    from numerus.i18n.formatting import format_number, ordinalize

    format_number(1234567, "it", "N2")  # "1.234.567,00"
    format_number(2, "es", "C2")        # "2,00 €"
    format_number(2, "en", "C0")        # "$2"
    ordinalize(22, "en")                # "22nd"
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from numerus.config import get_config
from numerus.i18n.protocols import (
    BaseNumberFormatter,
    FormattedNumber,
    GrammaticalGender,
    LocaleInfo,
    NumberStyle,
)


# ==============================================================================
# Locale Data: Number Symbols
# ==============================================================================

@dataclass
class NumberSymbols:
    """Locale-specific number symbols.

    Based on CLDR number symbols data.
    """
    decimal: str = "."
    group: str = ","
    minus: str = "-"
    percent: str = "%"
    infinity: str = "∞"
    nan: str = "NaN"


# Number symbols by locale
_NUMBER_SYMBOLS: dict[str, NumberSymbols] = {
    # Default (English)
    "en": NumberSymbols(),
    "en_IN": NumberSymbols(),

    # German, Austrian and Swiss German
    "de": NumberSymbols(decimal=",", group="."),
    "de_AT": NumberSymbols(decimal=",", group=" "),
    "de_CH": NumberSymbols(decimal=".", group="'"),

    # French
    "fr": NumberSymbols(decimal=",", group=" "),

    # Spanish
    "es": NumberSymbols(decimal=",", group="."),
    "es_MX": NumberSymbols(decimal=".", group=","),

    # Italian
    "it": NumberSymbols(decimal=",", group="."),
    "it_CH": NumberSymbols(decimal=".", group="'"),

    # Portuguese
    "pt": NumberSymbols(decimal=",", group="."),
    "pt_BR": NumberSymbols(decimal=",", group="."),

    # Dutch
    "nl": NumberSymbols(decimal=",", group="."),

    # Russian, Ukrainian, Belarusian
    "ru": NumberSymbols(decimal=",", group=" "),
    "uk": NumberSymbols(decimal=",", group=" "),
    "be": NumberSymbols(decimal=",", group=" "),

    # Polish, Czech
    "pl": NumberSymbols(decimal=",", group=" "),
    "cs": NumberSymbols(decimal=",", group=" "),
}


def get_number_symbols(locale: LocaleInfo) -> NumberSymbols:
    """Get number symbols for a locale.

    Args:
        locale: Target locale

    Returns:
        NumberSymbols for the locale (English symbols if unknown)
    """
    for code in locale.candidates():
        if code in _NUMBER_SYMBOLS:
            return _NUMBER_SYMBOLS[code]
    return _NUMBER_SYMBOLS["en"]


# ==============================================================================
# Locale Data: Currency Information
# ==============================================================================

@dataclass
class CurrencyInfo:
    """Currency formatting information."""
    code: str
    symbol: str
    name: str = ""
    decimal_digits: int = 2


# Common currencies
_CURRENCIES: dict[str, CurrencyInfo] = {
    "USD": CurrencyInfo("USD", "$", "US Dollar", 2),
    "EUR": CurrencyInfo("EUR", "€", "Euro", 2),
    "GBP": CurrencyInfo("GBP", "£", "British Pound", 2),
    "INR": CurrencyInfo("INR", "₹", "Indian Rupee", 2),
    "BRL": CurrencyInfo("BRL", "R$", "Brazilian Real", 2),
    "RUB": CurrencyInfo("RUB", "₽", "Russian Ruble", 2),
    "UAH": CurrencyInfo("UAH", "₴", "Ukrainian Hryvnia", 2),
    "CHF": CurrencyInfo("CHF", "CHF", "Swiss Franc", 2),
    "MXN": CurrencyInfo("MXN", "MX$", "Mexican Peso", 2),
    "PLN": CurrencyInfo("PLN", "zł", "Polish Zloty", 2),
    "CZK": CurrencyInfo("CZK", "Kč", "Czech Koruna", 2),
    "JPY": CurrencyInfo("JPY", "¥", "Japanese Yen", 0),
}

# Currency used by "C" formats when none is configured
_LOCALE_CURRENCIES: dict[str, str] = {
    "en": "USD",
    "en_GB": "GBP",
    "en_IN": "INR",
    "de": "EUR",
    "de_CH": "CHF",
    "fr": "EUR",
    "fr_CH": "CHF",
    "es": "EUR",
    "es_MX": "MXN",
    "it": "EUR",
    "it_CH": "CHF",
    "pt": "EUR",
    "pt_BR": "BRL",
    "nl": "EUR",
    "ru": "RUB",
    "uk": "UAH",
    "pl": "PLN",
    "cs": "CZK",
}

# Languages writing the symbol after the amount
_SYMBOL_AFTER = frozenset({"de", "fr", "es", "it", "pt", "nl", "pl", "cs", "ru", "uk", "be"})


def get_currency_info(code: str) -> CurrencyInfo:
    """Get currency information.

    Args:
        code: ISO 4217 currency code

    Returns:
        CurrencyInfo for the currency
    """
    return _CURRENCIES.get(code.upper(), CurrencyInfo(code.upper(), code.upper(), code.upper()))


def get_default_currency(locale: LocaleInfo) -> str:
    """Currency code for a locale, honouring the configured override."""
    configured = get_config().default_currency
    if configured:
        return configured
    for code in locale.candidates():
        if code in _LOCALE_CURRENCIES:
            return _LOCALE_CURRENCIES[code]
    return "USD"


# ==============================================================================
# Number Formatter
# ==============================================================================

class LocaleNumberFormatter(BaseNumberFormatter):
    """Locale-aware number formatter.

    Example:
        formatter = LocaleNumberFormatter()

        formatter.format(1234567, LocaleInfo.parse("it"), NumberStyle.DECIMAL, precision=2)
        # -> FormattedNumber(formatted="1.234.567,00")

        formatter.format(-2, LocaleInfo.parse("en"), NumberStyle.CURRENCY, precision=0)
        # -> FormattedNumber(formatted="-$2")

        formatter.format_spec(22.4, LocaleInfo.parse("en"))
        # -> "22.4"
    """

    def __init__(self, default_precision: int = 2) -> None:
        """Initialize formatter.

        Args:
            default_precision: Decimal places when a style needs them and none are given
        """
        self.default_precision = default_precision

    def format(
        self,
        value: float | int | Decimal,
        locale: LocaleInfo,
        style: NumberStyle = NumberStyle.GENERAL,
        **options: Any,
    ) -> FormattedNumber:
        """Format a number according to locale rules.

        Args:
            value: Number to format
            locale: Target locale
            style: Formatting style
            **options: Additional options:
                - precision: Decimal places
                - currency: Currency code (for CURRENCY style)
                - use_grouping: Whether to use grouping separators
                - gender: Grammatical gender (for ORDINAL style)

        Returns:
            Formatted number result
        """
        symbols = get_number_symbols(locale)

        precision = options.get("precision", self.default_precision)
        use_grouping = options.get("use_grouping", True)

        if style == NumberStyle.GENERAL:
            return self._format_general(value, symbols)
        elif style == NumberStyle.CURRENCY:
            return self._format_currency(value, locale, symbols, **options)
        elif style == NumberStyle.PERCENT:
            return self._format_percent(value, locale, symbols, precision)
        elif style == NumberStyle.ORDINAL:
            return self._format_ordinal(value, locale, options.get("gender"))
        elif style == NumberStyle.FIXED:
            return self._format_decimal(value, locale, symbols, precision, False)
        else:
            return self._format_decimal(value, locale, symbols, precision, use_grouping)

    def _format_special(self, value: float | int | Decimal, symbols: NumberSymbols) -> FormattedNumber | None:
        """Handle NaN and infinities."""
        if isinstance(value, int):
            return None
        if math.isnan(float(value)):
            return FormattedNumber(value=value, formatted=symbols.nan)
        if math.isinf(float(value)):
            sign = "" if value > 0 else symbols.minus
            return FormattedNumber(value=value, formatted=f"{sign}{symbols.infinity}")
        return None

    def _format_general(self, value: float | int | Decimal, symbols: NumberSymbols) -> FormattedNumber:
        """Shortest representation, no grouping."""
        special = self._format_special(value, symbols)
        if special is not None:
            return special

        if isinstance(value, float) and value.is_integer():
            text = str(int(abs(value)))
        else:
            text = str(abs(value))

        int_part, _, frac_part = text.partition(".")
        formatted = f"{int_part}{symbols.decimal}{frac_part}" if frac_part else int_part
        if value < 0:
            formatted = f"{symbols.minus}{formatted}"

        return FormattedNumber(
            value=value,
            formatted=formatted,
            parts={"integer": int_part, "decimal": frac_part},
        )

    def _format_decimal(
        self,
        value: float | int | Decimal,
        locale: LocaleInfo,
        symbols: NumberSymbols,
        precision: int,
        use_grouping: bool,
    ) -> FormattedNumber:
        """Format as decimal number."""
        special = self._format_special(value, symbols)
        if special is not None:
            return special

        # Round half away from zero on the exact decimal value
        exact = Decimal(value) if isinstance(value, int) else Decimal(str(value))
        quantum = Decimal(1).scaleb(-precision)
        rounded = abs(exact).quantize(quantum, rounding=ROUND_HALF_UP)
        int_part, _, frac_part = f"{rounded:f}".partition(".")

        # Apply grouping
        if use_grouping and len(int_part) > 3:
            int_part = self._apply_grouping(int_part, symbols.group, locale)

        # Build formatted string
        if frac_part:
            formatted = f"{int_part}{symbols.decimal}{frac_part}"
        else:
            formatted = int_part

        # Add sign
        if exact < 0 and rounded != 0:
            formatted = f"{symbols.minus}{formatted}"

        return FormattedNumber(
            value=value,
            formatted=formatted,
            parts={"integer": int_part, "decimal": frac_part},
        )

    def _apply_grouping(self, int_part: str, group_sep: str, locale: LocaleInfo) -> str:
        """Apply grouping separators to integer part."""
        # Indian numbering system uses 2,2,3 grouping
        if locale.language == "hi" or (locale.language == "en" and locale.region == "IN"):
            result = int_part[-3:]
            remaining = int_part[:-3]
            while remaining:
                result = remaining[-2:] + group_sep + result
                remaining = remaining[:-2]
            return result

        # Standard 3-digit grouping
        groups = []
        while len(int_part) > 3:
            groups.insert(0, int_part[-3:])
            int_part = int_part[:-3]
        groups.insert(0, int_part)
        return group_sep.join(groups)

    def _format_currency(
        self,
        value: float | int | Decimal,
        locale: LocaleInfo,
        symbols: NumberSymbols,
        **options: Any,
    ) -> FormattedNumber:
        """Format as currency."""
        currency_code = options.get("currency") or get_default_currency(locale)
        currency_info = get_currency_info(currency_code)
        precision = options.get("precision", currency_info.decimal_digits)

        amount = self._format_decimal(value, locale, symbols, precision, True).formatted
        negative = amount.startswith(symbols.minus)
        if negative:
            amount = amount[len(symbols.minus):]
        symbol = currency_info.symbol

        if locale.language in _SYMBOL_AFTER:
            formatted = f"{amount} {symbol}"
        else:
            formatted = f"{symbol}{amount}"

        # The sign always leads, even before the symbol
        if negative:
            formatted = f"{symbols.minus}{formatted}"

        return FormattedNumber(
            value=value,
            formatted=formatted,
            parts={"symbol": symbol, "amount": amount},
        )

    def _format_percent(
        self,
        value: float | int | Decimal,
        locale: LocaleInfo,
        symbols: NumberSymbols,
        precision: int,
    ) -> FormattedNumber:
        """Format as percentage."""
        percent_value = Decimal(str(value)) * 100
        decimal_result = self._format_decimal(percent_value, locale, symbols, precision, True)

        # Some locales put space before percent sign
        space = " " if locale.language in ("fr", "de", "ru") else ""
        formatted = f"{decimal_result.formatted}{space}{symbols.percent}"

        return FormattedNumber(value=value, formatted=formatted)

    def _format_ordinal(
        self,
        value: float | int | Decimal,
        locale: LocaleInfo,
        gender: GrammaticalGender | None = None,
    ) -> FormattedNumber:
        """Format as numeric ordinal."""
        n = int(value)
        feminine = gender == GrammaticalGender.FEMININE

        if locale.language == "en":
            # English ordinals: 1st, 2nd, 3rd, 4th...
            if 11 <= abs(n) % 100 <= 13:
                suffix = "th"
            else:
                suffix = {1: "st", 2: "nd", 3: "rd"}.get(abs(n) % 10, "th")
            formatted = f"{n}{suffix}"

        elif locale.language == "de":
            formatted = f"{n}."

        elif locale.language == "nl":
            formatted = f"{n}e"

        elif locale.language == "fr":
            if n == 1:
                formatted = "1re" if feminine else "1er"
            else:
                formatted = f"{n}e"

        elif locale.language in ("es", "it", "pt"):
            formatted = f"{n}ª" if feminine else f"{n}º"

        elif locale.language in ("ru", "uk"):
            ending = {
                GrammaticalGender.FEMININE: "я",
                GrammaticalGender.NEUTER: "е",
            }.get(gender, "й")
            formatted = f"{n}-{ending}"

        else:
            formatted = str(n)

        return FormattedNumber(value=value, formatted=formatted)


# ==============================================================================
# Convenience Functions
# ==============================================================================

_number_formatter = LocaleNumberFormatter()


def get_number_formatter() -> LocaleNumberFormatter:
    """Get the global number formatter."""
    return _number_formatter


def format_number(
    value: float | int | Decimal,
    locale: str | LocaleInfo = "en",
    specifier: str | None = None,
) -> str:
    """Format a number with an optional format specifier.

    Args:
        value: Number to format
        locale: Target locale
        specifier: "N<d>", "F<d>", "C<d>", "P<d>", "D" or None

    Returns:
        Formatted string
    """
    return _number_formatter.format_spec(value, LocaleInfo.coerce(locale), specifier)


def format_currency(
    value: float | int | Decimal,
    currency: str,
    locale: str | LocaleInfo = "en",
    precision: int | None = None,
) -> str:
    """Format a currency amount.

    Example:
        format_currency(1234.56, "EUR", "it")  # "1.234,56 €"
    """
    options: dict[str, Any] = {"currency": currency}
    if precision is not None:
        options["precision"] = precision
    return _number_formatter.format(value, LocaleInfo.coerce(locale), NumberStyle.CURRENCY, **options).formatted


def ordinalize(
    value: int,
    locale: str | LocaleInfo = "en",
    gender: GrammaticalGender | None = None,
) -> str:
    """Format a numeric ordinal.

    Example:
        ordinalize(1, "fr", GrammaticalGender.FEMININE)  # "1re"
    """
    return _number_formatter.format(value, LocaleInfo.coerce(locale), NumberStyle.ORDINAL, gender=gender).formatted
