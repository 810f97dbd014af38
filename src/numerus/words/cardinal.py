"""Cardinal number-to-words conversion.

One algorithm serves every locale family; the family is described by a
CardinalTable:

1. zero is a base case returning the zero word directly
2. a negative number wraps the words of its absolute value once, at the top
3. the magnitude table is walked from the largest scale down, each entry
   consuming ``remaining // value`` copies of itself
4. the rest below the magnitudes goes through the hundreds table (if any),
   then the 0-19 units table or a tens word joined to a unit word

Text is collected as an ordered list of fragments and joined once.

Example:
    from numerus.words.cardinal import CardinalConverter
    from numerus.words.locales.english import ENGLISH

    CardinalConverter(ENGLISH).convert(1200)  # "one thousand two hundred"
"""

from __future__ import annotations

import logging
import math
import numbers
from decimal import Decimal

from numerus.errors import InvalidArgumentError
from numerus.i18n.plural import GrammaticalNumberClassifier, get_classifier
from numerus.i18n.protocols import GrammaticalGender, LocaleInfo
from numerus.words.tables import CardinalTable, LocaleWords, MagnitudeRule

logger = logging.getLogger(__name__)


def as_integer(number: numbers.Number | Decimal, argument: str = "number") -> int:
    """Return ``number`` as an int, rejecting non-integral values.

    Raises:
        InvalidArgumentError: If the value is not a whole number
    """
    if isinstance(number, bool) or not isinstance(number, (numbers.Real, Decimal)):
        raise InvalidArgumentError(
            f"Expected an integer, got {type(number).__name__}",
            argument=argument,
        )
    if isinstance(number, numbers.Integral):
        return int(number)
    if not math.isfinite(number) or int(number) != number:
        raise InvalidArgumentError(
            f"Cannot convert non-integral value {number} to words",
            argument=argument,
            hint="Only whole numbers have a word form; use numeric display for fractions.",
        )
    return int(number)


class CardinalConverter:
    """Converts integers to cardinal words for one locale family."""

    def __init__(
        self,
        words: LocaleWords,
        classifier: GrammaticalNumberClassifier | None = None,
    ) -> None:
        self.language = words.language
        self.table: CardinalTable = words.cardinal
        self._locale = LocaleInfo(words.language)
        self._classifier = classifier or get_classifier()

    def convert(self, number: int, gender: GrammaticalGender | None = None) -> str:
        """Convert an integer to words.

        Args:
            number: Integer to convert
            gender: Requested grammatical gender (ignored by genderless tables)

        Returns:
            Cardinal words
        """
        n = as_integer(number)
        gender = gender or self.table.default_gender

        if n == 0:
            return self.table.zero

        if n < 0:
            return self.table.negative.format(self.convert(-n, gender))

        words = "".join(self._compose(n, gender, None))
        if self.table.finalize is not None:
            words = self.table.finalize(words)
        return words

    def _compose(
        self,
        n: int,
        gender: GrammaticalGender | None,
        before: MagnitudeRule | None,
    ) -> list[str]:
        """Fragments for a positive number.

        ``before`` is the magnitude this number multiplies, None at the top.
        """
        table = self.table
        fragments: list[str] = []
        remaining = n

        for rule in table.magnitudes:
            count, rest = divmod(remaining, rule.value)
            if count == 0:
                continue

            if count == 1 and rule.bare_when_one:
                fragments.append(rule.name)
            else:
                if count == 1 and rule.one_word is not None:
                    fragments.append(rule.one_word)
                else:
                    fragments.extend(self._compose(count, rule.gender or gender, rule))
                category = self._classifier.classify(count, self._locale)
                fragments.append(rule.prefix + rule.form(category))

            remaining = rest
            if rest:
                if table.conjunction is not None and table.conjunction_rule and table.conjunction_rule(rest):
                    fragments.append(table.conjunction)
                else:
                    fragments.append(rule.postfix)

        if remaining:
            fragments.append(self._below_thousand(remaining, gender, before))

        return fragments

    def _below_thousand(
        self,
        n: int,
        gender: GrammaticalGender | None,
        before: MagnitudeRule | None,
    ) -> str:
        table = self.table
        fragments: list[str] = []
        rest = n

        if table.hundreds is not None:
            hundreds, rest = divmod(n, 100)
            if hundreds:
                if hundreds == 1 and rest == 0 and table.exact_hundred is not None:
                    fragments.append(table.exact_hundred)
                else:
                    fragments.append(self._lookup(hundreds * 100, gender, table.hundreds[hundreds]))
                if rest:
                    fragments.append(table.hundreds_joiner)

        if rest:
            fragments.append(self._below_hundred(rest, gender))

        text = "".join(fragments)
        if table.adjust_group is not None:
            text = table.adjust_group(text, n, before)
        return text

    def _below_hundred(self, n: int, gender: GrammaticalGender | None) -> str:
        table = self.table
        if n < 20:
            return self._unit(n, gender)

        tens, unit = divmod(n, 10)
        if tens in table.teen_tens:
            return table.ligature(tens, 10 + unit, table.tens[tens - 1], self._unit(10 + unit, gender))
        if unit == 0:
            return table.tens[tens]
        return table.ligature(tens, unit, table.tens[tens], self._unit(unit, gender))

    def _unit(self, n: int, gender: GrammaticalGender | None) -> str:
        return self._lookup(n, gender, self.table.units[n])

    def _lookup(self, value: int, gender: GrammaticalGender | None, default: str) -> str:
        if gender is None:
            return default
        return self.table.gendered.get(gender, {}).get(value, default)
