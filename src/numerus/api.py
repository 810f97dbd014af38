"""Main API functions for numerus.

Every function accepts ``locale`` as a tag ("pt-BR", "pt_BR", "it"), a
LocaleInfo, or None for the ambient locale (see ``numerus.i18n.locale``).
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from numerus.errors import InvalidLocaleError, UnsupportedLocaleError
from numerus.i18n.formatter import get_resolver
from numerus.i18n.formatting import get_number_formatter
from numerus.i18n.locale import resolve_locale
from numerus.i18n.plural import get_classifier
from numerus.i18n.protocols import (
    GrammaticalGender,
    GrammaticalNumber,
    LocaleInfo,
    NumberStyle,
    ShowQuantityAs,
    TimeUnit,
)
from numerus.quantity import get_quantity_composer
from numerus.timespan import humanize_timedelta as _humanize_timedelta
from numerus.words.registry import get_locale_words, to_cardinal_words, to_ordinal_words as _to_ordinal_words


def to_words(
    number: int,
    gender: GrammaticalGender | str | None = None,
    locale: str | LocaleInfo | None = None,
) -> str:
    """Convert an integer to cardinal words.

    Args:
        number: Integer to convert (integral floats are accepted)
        gender: Grammatical gender for gendered locales
        locale: Target locale

    Returns:
        Cardinal words

    Raises:
        UnsupportedLocaleError: If the locale has no word tables
        InvalidArgumentError: If the number is not a whole number

    Example:
        >>> to_words(21, locale="fr")
        'vingt et un'
        >>> to_words(2, gender="feminine", locale="pt-BR")
        'duas'
    """
    return to_cardinal_words(number, resolve_locale(locale), gender)


def to_ordinal_words(
    number: int,
    gender: GrammaticalGender | str | None = None,
    locale: str | LocaleInfo | None = None,
) -> str:
    """Convert a non-negative integer to ordinal words.

    Example:
        >>> to_ordinal_words(1000000, locale="it")
        'milionesimo'
        >>> to_ordinal_words(3, "feminine", "ru")
        'третья'
    """
    return _to_ordinal_words(number, resolve_locale(locale), gender)


def to_quantity(
    noun: str,
    count: int | float | Decimal,
    show_as: ShowQuantityAs | str = ShowQuantityAs.NUMERIC,
    format: str | None = None,
    locale: str | LocaleInfo | None = None,
) -> str:
    """Prefix a noun with a count in the right grammatical number.

    Args:
        noun: Counted noun, singular or plural
        count: Count; fractional counts need numeric display
        show_as: "numeric" (default), "words" or "none"
        format: Numeric format specifier such as "N2" or "C0"
        locale: Locale of the rendered count

    Example:
        >>> to_quantity("man", 0)
        '0 men'
        >>> to_quantity("process", 1200, ShowQuantityAs.WORDS)
        'one thousand two hundred processes'
        >>> to_quantity("case", 1234567, format="N2", locale="it")
        '1.234.567,00 cases'
    """
    return get_quantity_composer().compose(noun, count, resolve_locale(locale), show_as, format)


def resolve_key(
    base_key: str,
    count: int | float,
    locale: str | LocaleInfo | None = None,
) -> str:
    """Resolve a template identifier to the key matching a count.

    Example:
        >>> resolve_key("DateHumanize_MultipleDaysAgo", 2, "fr")
        'DateHumanize_MultipleDaysAgo_Dual'
        >>> resolve_key("TimeSpanHumanize_MultipleDays", 22, "ru")
        'TimeSpanHumanize_MultipleDays_Paucal'
    """
    return get_resolver().resolve(base_key, count, resolve_locale(locale))


def classify(
    count: int | float,
    locale: str | LocaleInfo | None = None,
    key: str | None = None,
) -> GrammaticalNumber:
    """Grammatical number category of a count."""
    return get_classifier().classify(count, resolve_locale(locale), key)


def ordinalize(
    number: int,
    gender: GrammaticalGender | None = None,
    locale: str | LocaleInfo | None = None,
) -> str:
    """Numeric ordinal ("21st", "2ª", "1re").

    Example:
        >>> ordinalize(22)
        '22nd'
    """
    return get_number_formatter().format(
        number, resolve_locale(locale), NumberStyle.ORDINAL, gender=gender
    ).formatted


def humanize_timedelta(
    delta: timedelta,
    precision: int = 1,
    locale: str | LocaleInfo | None = None,
    max_unit: TimeUnit | str = TimeUnit.WEEK,
    min_unit: TimeUnit | str = TimeUnit.MILLISECOND,
    separator: str = ", ",
    words: bool = False,
) -> str:
    """Render a duration, keeping the ``precision`` largest non-zero parts.

    Example:
        >>> humanize_timedelta(timedelta(days=15), precision=2)
        '2 weeks, 1 day'
    """
    return _humanize_timedelta(delta, precision, locale, max_unit, min_unit, separator, words)


def supports_locale(locale: str | LocaleInfo) -> bool:
    """Whether number words are available for a locale.

    Callers that prefer digits to an error can check this before calling
    ``to_words``.
    """
    try:
        get_locale_words(locale)
    except (UnsupportedLocaleError, InvalidLocaleError):
        return False
    return True
