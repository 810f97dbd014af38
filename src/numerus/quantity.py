"""Quantity phrases ("5 cases", "one thousand two hundred processes").

The composer decides which noun form to ask for and how to render the count;
noun inflection, digit formatting and number words are collaborators.

Usage:
    from numerus.quantity import to_quantity

    to_quantity("man", 0)                      # "0 men"
    to_quantity("case", 1234567, format="N2", locale="it")
    # -> "1.234.567,00 cases"
    to_quantity("process", 1200, ShowQuantityAs.WORDS)
    # -> "one thousand two hundred processes"
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable

import inflection

from numerus.errors import InvalidArgumentError
from numerus.i18n.formatting import get_number_formatter
from numerus.i18n.locale import resolve_locale
from numerus.i18n.protocols import (
    BaseNumberFormatter,
    GrammaticalGender,
    LocaleInfo,
    NounInflector,
    ShowQuantityAs,
)
from numerus.words.cardinal import as_integer
from numerus.words.registry import to_cardinal_words

logger = logging.getLogger(__name__)


# Converts an integer to words: (number, locale, gender) -> text
WordConverter = Callable[[int, LocaleInfo, "GrammaticalGender | None"], str]


class InflectionNounInflector:
    """English noun inflection backed by the ``inflection`` package.

    Handles irregular nouns ("man"/"men", "person"/"people") and is
    idempotent on nouns already in the requested form.
    """

    def singularize(self, noun: str) -> str:
        return inflection.singularize(noun)

    def pluralize(self, noun: str) -> str:
        return inflection.pluralize(noun)


class QuantityComposer:
    """Combines a count and a counted noun into a phrase.

    Example:
        composer = QuantityComposer()
        en = LocaleInfo.parse("en")

        composer.compose("man", -1, en)                        # "-1 man"
        composer.compose("case", 2, en, ShowQuantityAs.NONE)   # "cases"
        composer.compose("dollar", 2, en, format="C2")         # "$2.00 dollars"
    """

    def __init__(
        self,
        inflector: NounInflector | None = None,
        formatter: BaseNumberFormatter | None = None,
        words: WordConverter | None = None,
    ) -> None:
        self.inflector = inflector or InflectionNounInflector()
        self.formatter = formatter or get_number_formatter()
        self.words = words or to_cardinal_words

    def compose(
        self,
        noun: str,
        count: int | float | Decimal,
        locale: LocaleInfo,
        show_as: ShowQuantityAs | str = ShowQuantityAs.NUMERIC,
        format: str | None = None,
        gender: GrammaticalGender | None = None,
    ) -> str:
        """Build the phrase.

        Args:
            noun: Counted noun, in either form
            count: Count; fractions are only displayable numerically
            locale: Locale of the rendered count
            show_as: Display mode of the count
            format: Numeric format specifier ("N2", "C0", ...), NUMERIC mode only
            gender: Gender of the count words, WORDS mode only

        Returns:
            The quantity phrase

        Raises:
            InvalidArgumentError: For a missing noun, a format outside NUMERIC
                mode or a fractional count in WORDS mode
            UnsupportedLocaleError: In WORDS mode, for a locale without words
        """
        if noun is None or not noun.strip():
            raise InvalidArgumentError("A noun is required for a quantity phrase", argument="noun")

        show_as = _coerce_show_as(show_as)
        if format and show_as != ShowQuantityAs.NUMERIC:
            raise InvalidArgumentError(
                f"A number format cannot be combined with {show_as.value} display",
                argument="format",
                hint="Formats only apply when the quantity is shown as a number.",
            )

        form = self._noun_form(noun, count)
        if show_as == ShowQuantityAs.NONE:
            return form

        if show_as == ShowQuantityAs.WORDS:
            rendered = self.words(as_integer(count, argument="count"), locale, gender)
        else:
            rendered = self.formatter.format_spec(count, locale, format)
        return f"{rendered} {form}"

    def _noun_form(self, noun: str, count: int | float | Decimal) -> str:
        if abs(count) == 1:
            return self.inflector.singularize(noun)
        return self.inflector.pluralize(noun)


def _coerce_show_as(show_as: ShowQuantityAs | str) -> ShowQuantityAs:
    if isinstance(show_as, ShowQuantityAs):
        return show_as
    try:
        return ShowQuantityAs(str(show_as).lower())
    except ValueError:
        choices = ", ".join(mode.value for mode in ShowQuantityAs)
        raise InvalidArgumentError(
            f"Unknown display mode: '{show_as}'",
            argument="show_as",
            hint=f"Use one of: {choices}",
        ) from None


# Global instance
_composer = QuantityComposer()


def get_quantity_composer() -> QuantityComposer:
    """Get the global quantity composer."""
    return _composer


def to_quantity(
    noun: str,
    count: int | float | Decimal,
    show_as: ShowQuantityAs | str = ShowQuantityAs.NUMERIC,
    format: str | None = None,
    locale: str | LocaleInfo | None = None,
    gender: GrammaticalGender | None = None,
) -> str:
    """Prefix a noun with a count, choosing its singular or plural form.

    The noun is singular only when the absolute value of ``count`` is one.
    ``locale`` defaults to the ambient locale.
    """
    return _composer.compose(noun, count, resolve_locale(locale), show_as, format, gender)
