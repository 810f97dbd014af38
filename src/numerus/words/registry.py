"""Locale registry for the word converters.

Maps a language to its word tables and caches one cardinal converter and
one ordinalizer per language. A locale with no registered tables raises
UnsupportedLocaleError rather than borrowing another language's rules.

Usage:
    from numerus.words.registry import to_cardinal_words, to_ordinal_words

    to_cardinal_words(21, "fr")                 # "vingt et un"
    to_cardinal_words(2, "pt-BR", "feminine")   # "duas"
    to_ordinal_words(23, "it")                  # "ventitreesimo"
"""

from __future__ import annotations

import logging
import threading

from numerus.errors import InvalidArgumentError, UnsupportedLocaleError
from numerus.i18n.protocols import GrammaticalGender, LocaleInfo
from numerus.words.cardinal import CardinalConverter
from numerus.words.locales import DUTCH, ENGLISH, FRENCH, ITALIAN, PORTUGUESE, RUSSIAN
from numerus.words.ordinal import create_ordinalizer
from numerus.words.tables import LocaleWords

logger = logging.getLogger(__name__)


_LOCALE_WORDS: dict[str, LocaleWords] = {
    words.language: words
    for words in (ENGLISH, DUTCH, ITALIAN, PORTUGUESE, FRENCH, RUSSIAN)
}

_lock = threading.Lock()
_cardinals: dict[str, CardinalConverter] = {}
_ordinalizers: dict = {}


def register_locale_words(words: LocaleWords, code: str | None = None) -> None:
    """Register (or replace) the word tables of a locale.

    Args:
        words: Word tables
        code: Locale code to register under, defaults to ``words.language``
    """
    code = code or words.language
    with _lock:
        _LOCALE_WORDS[code] = words
        _cardinals.pop(code, None)
        _ordinalizers.pop(code, None)
    logger.debug(f"Registered number words for {code}")


def supported_languages() -> list[str]:
    """Locale codes with registered word tables."""
    return sorted(_LOCALE_WORDS)


def _find_code(locale: LocaleInfo, feature: str = "number words") -> str:
    for code in locale.candidates():
        if code in _LOCALE_WORDS:
            return code
    raise UnsupportedLocaleError(locale.tag, supported_languages(), feature)


def get_locale_words(locale: str | LocaleInfo) -> LocaleWords:
    """Word tables for a locale, trying the region then the language.

    Raises:
        UnsupportedLocaleError: If neither is registered
    """
    return _LOCALE_WORDS[_find_code(LocaleInfo.coerce(locale))]


def get_cardinal_converter(locale: str | LocaleInfo) -> CardinalConverter:
    code = _find_code(LocaleInfo.coerce(locale))
    with _lock:
        if code not in _cardinals:
            _cardinals[code] = CardinalConverter(_LOCALE_WORDS[code])
        return _cardinals[code]


def get_ordinalizer(locale: str | LocaleInfo):
    """Ordinalizer for a locale.

    Raises:
        UnsupportedLocaleError: If the locale has no ordinal rules
    """
    info = LocaleInfo.coerce(locale)
    code = _find_code(info, "ordinal words")
    words = _LOCALE_WORDS[code]
    if words.ordinal is None:
        supported = [c for c, w in _LOCALE_WORDS.items() if w.ordinal is not None]
        raise UnsupportedLocaleError(info.tag, supported, "ordinal words")

    cardinal = get_cardinal_converter(info)
    with _lock:
        if code not in _ordinalizers:
            _ordinalizers[code] = create_ordinalizer(words.ordinal, cardinal)
        return _ordinalizers[code]


def coerce_gender(gender: GrammaticalGender | str | None) -> GrammaticalGender | None:
    """Accept a gender as enum or case-insensitive name."""
    if gender is None or isinstance(gender, GrammaticalGender):
        return gender
    try:
        return GrammaticalGender(gender.lower())
    except ValueError:
        choices = ", ".join(g.value for g in GrammaticalGender)
        raise InvalidArgumentError(
            f"Unknown grammatical gender: '{gender}'",
            argument="gender",
            hint=f"Use one of: {choices}",
        ) from None


def to_cardinal_words(
    number: int,
    locale: str | LocaleInfo,
    gender: GrammaticalGender | str | None = None,
) -> str:
    """Convert an integer to cardinal words in a locale."""
    return get_cardinal_converter(locale).convert(number, coerce_gender(gender))


def to_ordinal_words(
    number: int,
    locale: str | LocaleInfo,
    gender: GrammaticalGender | str | None = None,
) -> str:
    """Convert a non-negative integer to ordinal words in a locale."""
    return get_ordinalizer(locale).convert(number, coerce_gender(gender))
