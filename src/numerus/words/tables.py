"""Immutable per-locale rule tables for the word converters.

Each supported locale family is described entirely by data: a magnitude
table, unit/ten/hundred lookup arrays, gendered overrides and small hooks for
the few orthographic rules that are not expressible as lookups (Dutch
"ën", Italian "tré", French plural "cents"). The conversion algorithms in
``cardinal`` and ``ordinal`` are shared and parameterized by these tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping

from numerus.i18n.protocols import GrammaticalGender, GrammaticalNumber


# tens_digit, unit_value, tens_word, unit_word -> joined text
Ligature = Callable[[int, int, str, str], str]

# rest after a magnitude -> whether the conjunction replaces the postfix
ConjunctionRule = Callable[[int], bool]

# text of the part below 1000, its value, the magnitude it multiplies (or None)
GroupAdjuster = Callable[[str, int, "MagnitudeRule | None"], str]


def hyphen_ligature(tens_digit: int, unit_value: int, tens_word: str, unit_word: str) -> str:
    return f"{tens_word}-{unit_word}"


def space_ligature(tens_digit: int, unit_value: int, tens_word: str, unit_word: str) -> str:
    return f"{tens_word} {unit_word}"


# ==============================================================================
# Cardinal Tables
# ==============================================================================

@dataclass(frozen=True)
class MagnitudeRule:
    """One entry of a magnitude table ("thousand", "million", ...).

    Attributes:
        value: Scale value, e.g. 1000
        forms: Name of the scale by grammatical number of its multiplier
        prefix: Joiner between the multiplier words and the name
        postfix: Separator emitted after the name when a remainder follows
        bare_when_one: A multiplier of one renders the name alone ("cento", "mille")
        one_word: Word replacing the multiplier when it is one ("un milione")
        gender: Gender the multiplier agrees with; None inherits the caller's
    """
    value: int
    forms: Mapping[GrammaticalNumber, str]
    prefix: str = " "
    postfix: str = " "
    bare_when_one: bool = False
    one_word: str | None = None
    gender: GrammaticalGender | None = None

    @property
    def name(self) -> str:
        return self.forms[GrammaticalNumber.SINGULAR]

    def form(self, category: GrammaticalNumber) -> str:
        """Name for a multiplier of the given category."""
        if category in self.forms:
            return self.forms[category]
        return self.forms.get(GrammaticalNumber.PLURAL, self.name)


def magnitude(
    value: int,
    singular: str,
    plural: str | None = None,
    paucal: str | None = None,
    **options,
) -> MagnitudeRule:
    """Build a MagnitudeRule from its singular/plural/paucal names."""
    forms = {GrammaticalNumber.SINGULAR: singular, GrammaticalNumber.PLURAL: plural or singular}
    if paucal is not None:
        forms[GrammaticalNumber.PAUCAL] = paucal
    return MagnitudeRule(value=value, forms=forms, **options)


@dataclass(frozen=True)
class CardinalTable:
    """Cardinal vocabulary and joining rules of a locale.

    Attributes:
        zero: Word for zero
        negative: Template wrapping the words of the absolute value
        units: Words for 0-19
        tens: Words for 10, 20, ..., 90 indexed by tens digit (index 0 unused)
        magnitudes: Magnitude table, largest first
        hundreds: Words for 100..900 indexed by hundreds digit, when hundreds
            are a lookup rather than a magnitude
        exact_hundred: Word for exactly one hundred with no remainder ("cem")
        hundreds_joiner: Separator between the hundreds word and the rest
        gendered: Overrides by gender, keyed by value (units and hundreds)
        ligature: Joins a tens word and a unit word
        teen_tens: Tens digits written as the previous ten plus a teen ("soixante-dix")
        conjunction: Word emitted instead of a magnitude postfix when ``conjunction_rule`` holds
        conjunction_rule: Predicate on the rest after a magnitude
        adjust_group: Hook rewriting the words of a part below 1000
        finalize: Hook applied once to the complete words of a number
        default_gender: Gender used when the caller gives none
    """
    zero: str
    negative: str
    units: tuple[str, ...]
    tens: tuple[str, ...]
    magnitudes: tuple[MagnitudeRule, ...] = ()
    hundreds: tuple[str, ...] | None = None
    exact_hundred: str | None = None
    hundreds_joiner: str = " "
    gendered: Mapping[GrammaticalGender, Mapping[int, str]] = field(default_factory=dict)
    ligature: Ligature = hyphen_ligature
    teen_tens: frozenset[int] = frozenset()
    conjunction: str | None = None
    conjunction_rule: ConjunctionRule | None = None
    adjust_group: GroupAdjuster | None = None
    finalize: Callable[[str], str] | None = None
    default_gender: GrammaticalGender | None = None


# ==============================================================================
# Ordinal Tables
# ==============================================================================

@dataclass(frozen=True)
class OrdinalBoundary:
    """Rewrite applied when a number is an exact multiple of a magnitude.

    Attributes:
        value: Magnitude value
        join: (old, new) replacement collapsing the magnitude into one word
        drop_one: Numeral prefix removed when the number equals ``value``
        append: Letters added before the suffix when the number exceeds ``value``
    """
    value: int
    join: tuple[str, str] | None = None
    drop_one: str | None = None
    append: str = ""


@dataclass(frozen=True)
class SuffixOrdinalRules:
    """Ordinals derived from the cardinal words by suffixation.

    Steps, in order: small-number table, leading-word drop, magnitude
    boundaries, tail exceptions, truncation, vowel restoration, suffix,
    gender ending.

    Attributes:
        zero: Ordinal word for zero
        suffix: Regular ordinal suffix
        small: Irregular ordinals looked up directly, bypassing the cardinal
        exceptions: Ordered (cardinal tail, ordinal tail) replacements
        truncate: Trailing characters removed before suffixing
        restore_vowels: Letters re-added after truncation, by last digit
        boundaries: Exact-magnitude rewrites, largest first
        consonant_suffix: Suffix used when the word ends in a cue letter
        consonant_cues: Cue letters for ``consonant_suffix``
        drop_leading: Leading words removed from the cardinal ("one ")
        gender_endings: (old tail, new tail) rewrite per gender
    """
    zero: str
    suffix: str
    small: Mapping[int, str] = field(default_factory=dict)
    exceptions: tuple[tuple[str, str], ...] = ()
    truncate: int = 0
    restore_vowels: Mapping[int, str] = field(default_factory=dict)
    boundaries: tuple[OrdinalBoundary, ...] = ()
    consonant_suffix: str | None = None
    consonant_cues: str = ""
    drop_leading: str | None = None
    gender_endings: Mapping[GrammaticalGender, tuple[str, str]] = field(default_factory=dict)


@dataclass(frozen=True)
class CompositeOrdinalRules:
    """Ordinals built component by component ("décimo primeiro").

    Every non-zero component of the number has its own ordinal stem; the
    stems are joined with spaces and each takes the gender ending.

    Attributes:
        zero: Ordinal word for zero
        units: Stems for 1-9 (index 0 unused)
        tens: Stems for 10-90 by tens digit (index 0 unused)
        hundreds: Stems for 100-900 by hundreds digit (index 0 unused)
        magnitudes: (value, stem) pairs, largest first; a multiplier above
            one is itself rendered as an ordinal before the stem
        endings: Ending appended to each stem per gender
        default_gender: Gender used when the caller gives none
    """
    zero: str
    units: tuple[str, ...]
    tens: tuple[str, ...]
    hundreds: tuple[str, ...]
    magnitudes: tuple[tuple[int, str], ...]
    endings: Mapping[GrammaticalGender, str]
    default_gender: GrammaticalGender = GrammaticalGender.MASCULINE


@dataclass(frozen=True)
class OrdinalStem:
    """Adjectival stem and its declension class.

    ``declension`` keys into ``StemOrdinalRules.endings``.
    """
    stem: str
    declension: str = "hard"


@dataclass(frozen=True)
class StemOrdinalRules:
    """Ordinals where only the final component inflects ("двадцать первый").

    Preceding components stay cardinal. Exact multiples of a magnitude turn
    the multiplier into a genitive compound prefix ("двухтысячный").

    Attributes:
        zero: Stem for zero
        stems: Stems for 1-19, tens (20, 30, ...) and hundreds (100, 200, ...)
        magnitudes: (value, stem) pairs, smallest first
        genitive: Compound prefixes for multipliers, by value
        endings: Endings per declension class and gender
        drop_leading: Numeral words removed before a leading magnitude
        default_gender: Gender used when the caller gives none
    """
    zero: OrdinalStem
    stems: Mapping[int, OrdinalStem]
    magnitudes: tuple[tuple[int, OrdinalStem], ...]
    genitive: Mapping[int, str]
    endings: Mapping[str, Mapping[GrammaticalGender, str]]
    drop_leading: tuple[str, ...] = ()
    default_gender: GrammaticalGender = GrammaticalGender.MASCULINE


OrdinalRules = SuffixOrdinalRules | CompositeOrdinalRules | StemOrdinalRules


@dataclass(frozen=True)
class LocaleWords:
    """Complete word tables of one locale family."""
    language: str
    cardinal: CardinalTable
    ordinal: OrdinalRules | None = None
