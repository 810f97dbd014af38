"""Ordinal number-to-words conversion.

Three strategies cover the supported families, selected by the type of the
locale's ordinal rules:

- SuffixOrdinalizer: transforms the cardinal words (English, Dutch,
  Italian, French). Each step is a small pure function over the text.
- CompositeOrdinalizer: joins per-component ordinal stems (Portuguese).
- StemOrdinalizer: inflects only the final component (Russian).

The suffix and stem strategies reuse the cardinal converter for magnitude
traversal; the composite strategy walks its own table of ordinal magnitude
stems, since every component of its output is ordinal.
"""

from __future__ import annotations

import logging

from numerus.errors import InvalidArgumentError
from numerus.i18n.protocols import GrammaticalGender
from numerus.words.cardinal import CardinalConverter, as_integer
from numerus.words.tables import (
    CompositeOrdinalRules,
    OrdinalBoundary,
    OrdinalStem,
    StemOrdinalRules,
    SuffixOrdinalRules,
)

logger = logging.getLogger(__name__)


def _non_negative(number: int) -> int:
    n = as_integer(number)
    if n < 0:
        raise InvalidArgumentError(
            f"Negative numbers have no ordinal form: {n}",
            argument="number",
        )
    return n


# ==============================================================================
# Suffix Transformation Steps
# ==============================================================================

def drop_leading(words: str, prefix: str | None) -> str:
    """Remove a leading word ("one hundred" -> "hundred")."""
    if prefix and words.startswith(prefix):
        return words[len(prefix):]
    return words


def find_boundary(n: int, boundaries: tuple[OrdinalBoundary, ...]) -> OrdinalBoundary | None:
    """First (largest) magnitude the number is an exact multiple of."""
    for boundary in boundaries:
        if n % boundary.value == 0:
            return boundary
    return None


def join_boundary(words: str, n: int, boundary: OrdinalBoundary) -> str:
    """Collapse an exact magnitude into one word and drop a numeral of one."""
    if boundary.join is not None:
        words = words.replace(*boundary.join)
    if boundary.drop_one and n == boundary.value:
        words = drop_leading(words, boundary.drop_one)
    return words


def replace_tail(words: str, exceptions: tuple[tuple[str, str], ...]) -> str | None:
    """Apply the first matching irregular tail, or None if none matches."""
    for tail, replacement in exceptions:
        if words.endswith(tail):
            return words[: len(words) - len(tail)] + replacement
    return None


def truncate(words: str, count: int) -> str:
    """Remove the regular cardinal ending."""
    return words[: len(words) - count] if count else words


def restore_vowel(words: str, n: int, vowels: dict[int, str] | None) -> str:
    """Re-add a vowel removed by truncation for numbers ending in some digits.

    Teens are written as one word and never restore.
    """
    if not vowels or 11 <= n % 100 <= 19:
        return words
    return words + vowels.get(n % 10, "")


def add_suffix(words: str, rules: SuffixOrdinalRules) -> str:
    if rules.consonant_suffix and words and words[-1] in rules.consonant_cues:
        return words + rules.consonant_suffix
    return words + rules.suffix


def apply_gender(words: str, gender: GrammaticalGender | None, rules: SuffixOrdinalRules) -> str:
    """Rewrite the masculine ending for another gender."""
    if gender is None or gender not in rules.gender_endings:
        return words
    old, new = rules.gender_endings[gender]
    if words.endswith(old):
        return words[: len(words) - len(old)] + new
    return words


# ==============================================================================
# Ordinalizers
# ==============================================================================

class SuffixOrdinalizer:
    """Ordinals by transformation of the cardinal words.

    Example:
        ordinalizer = SuffixOrdinalizer(ITALIAN.ordinal, CardinalConverter(ITALIAN))
        ordinalizer.convert(23)       # "ventitreesimo"
        ordinalizer.convert(1000000)  # "milionesimo"
    """

    def __init__(self, rules: SuffixOrdinalRules, cardinal: CardinalConverter) -> None:
        self.rules = rules
        self.cardinal = cardinal

    def convert(self, number: int, gender: GrammaticalGender | None = None) -> str:
        rules = self.rules
        n = _non_negative(number)

        if n == 0:
            return rules.zero

        if n in rules.small:
            return apply_gender(rules.small[n], gender, rules)

        words = self.cardinal.convert(n)
        words = drop_leading(words, rules.drop_leading)

        boundary = find_boundary(n, rules.boundaries)
        if boundary is not None:
            words = join_boundary(words, n, boundary)

        irregular = replace_tail(words, rules.exceptions)
        if irregular is not None:
            return apply_gender(irregular, gender, rules)

        words = truncate(words, rules.truncate)
        words = restore_vowel(words, n, dict(rules.restore_vowels))
        if boundary is not None and n > boundary.value:
            words += boundary.append
        words = add_suffix(words, rules)
        return apply_gender(words, gender, rules)


class CompositeOrdinalizer:
    """Ordinals as a sequence of component stems.

    Example:
        ordinalizer.convert(2021)  # "segundo milésimo vigésimo primeiro"
    """

    def __init__(self, rules: CompositeOrdinalRules, cardinal: CardinalConverter) -> None:
        self.rules = rules
        self.cardinal = cardinal

    def convert(self, number: int, gender: GrammaticalGender | None = None) -> str:
        rules = self.rules
        n = _non_negative(number)
        if n == 0:
            return rules.zero
        return " ".join(self._components(n, gender or rules.default_gender))

    def _components(self, n: int, gender: GrammaticalGender) -> list[str]:
        rules = self.rules
        ending = rules.endings[gender]
        parts: list[str] = []
        remaining = n

        for value, stem in rules.magnitudes:
            count, remaining = divmod(remaining, value)
            if count == 0:
                continue
            if count > 1:
                parts.extend(self._components(count, gender))
            parts.append(stem + ending)

        hundreds, rest = divmod(remaining, 100)
        tens, units = divmod(rest, 10)
        if hundreds:
            parts.append(rules.hundreds[hundreds] + ending)
        if tens:
            parts.append(rules.tens[tens] + ending)
        if units:
            parts.append(rules.units[units] + ending)
        return parts


class StemOrdinalizer:
    """Ordinals inflecting the final component only.

    Example:
        ordinalizer.convert(21)    # "двадцать первый"
        ordinalizer.convert(2000)  # "двухтысячный"
    """

    def __init__(self, rules: StemOrdinalRules, cardinal: CardinalConverter) -> None:
        self.rules = rules
        self.cardinal = cardinal

    def convert(self, number: int, gender: GrammaticalGender | None = None) -> str:
        rules = self.rules
        n = _non_negative(number)
        gender = gender or rules.default_gender

        if n == 0:
            return self._inflect(rules.zero, gender)

        if n % 1000 == 0:
            value, stem, multiplier = self._exact_magnitude(n)
            prefix = "" if multiplier == 1 else self._genitive(multiplier)
            last = prefix + self._inflect(stem, gender)
            head = n - multiplier * value
        else:
            final = self._final_component(n)
            last = self._inflect(rules.stems[final], gender)
            head = n - final

        if head:
            return f"{self._head(head)} {last}"
        return last

    def _inflect(self, stem: OrdinalStem, gender: GrammaticalGender) -> str:
        return stem.stem + self.rules.endings[stem.declension][gender]

    def _final_component(self, n: int) -> int:
        """Value of the last non-zero component (unit, teen, ten or hundred)."""
        low = n % 100
        if low == 0:
            return n % 1000
        if low < 20 or low % 10 == 0:
            return low
        return low % 10

    def _exact_magnitude(self, n: int) -> tuple[int, OrdinalStem, int]:
        """Smallest magnitude with a non-zero multiplier in an exact multiple of 1000.

        The largest magnitude takes the whole quotient.
        """
        *smaller, (top_value, top_stem) = self.rules.magnitudes
        for value, stem in smaller:
            multiplier = (n // value) % 1000
            if multiplier:
                return value, stem, multiplier
        return top_value, top_stem, n // top_value

    def _genitive(self, multiplier: int) -> str:
        """Compound prefix for a multiplier ("двух", "стодвадцати")."""
        genitive = self.rules.genitive
        if multiplier >= 1000:
            return self.cardinal.convert(multiplier) + " "

        parts: list[str] = []
        hundreds, rest = divmod(multiplier, 100)
        if hundreds:
            parts.append(genitive[hundreds * 100])
        if rest:
            if rest < 20 or rest % 10 == 0:
                parts.append(genitive[rest])
            else:
                parts.append(genitive[rest - rest % 10])
                parts.append(genitive[rest % 10])
        return "".join(parts)

    def _head(self, head: int) -> str:
        """Cardinal words preceding the inflected component."""
        words = self.cardinal.convert(head)
        for prefix in self.rules.drop_leading:
            if words.startswith(prefix):
                return words[len(prefix):]
        return words


_ORDINALIZERS = {
    SuffixOrdinalRules: SuffixOrdinalizer,
    CompositeOrdinalRules: CompositeOrdinalizer,
    StemOrdinalRules: StemOrdinalizer,
}


def create_ordinalizer(rules, cardinal: CardinalConverter):
    """Build the ordinalizer matching the type of ``rules``."""
    return _ORDINALIZERS[type(rules)](rules, cardinal)
