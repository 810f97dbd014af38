"""French number words.

Seventy and ninety are built on the previous ten plus a teen
("soixante-dix", "quatre-vingt-dix"); "et" joins a unit of one to the tens
twenty through seventy. "cent" and "vingt" take a plural "s" when they end a
number (and when they multiply a magnitude above "mille").
"""

from __future__ import annotations

from numerus.i18n.protocols import GrammaticalGender
from numerus.words.tables import (
    CardinalTable,
    LocaleWords,
    MagnitudeRule,
    OrdinalBoundary,
    SuffixOrdinalRules,
    magnitude,
)


def _ligature(tens_digit: int, unit_value: int, tens_word: str, unit_word: str) -> str:
    if unit_value in (1, 11) and 2 <= tens_digit <= 7:
        return f"{tens_word} et {unit_word}"
    return f"{tens_word}-{unit_word}"


def _plural_group(text: str, value: int, before: MagnitudeRule | None) -> str:
    """Add the plural "s" of "cents" and "quatre-vingts"."""
    pluralizes = (value % 100 == 0 and value >= 200) or value % 100 == 80
    if pluralizes and (before is None or before.value > 1000):
        return text + "s"
    return text


FRENCH = LocaleWords(
    language="fr",
    cardinal=CardinalTable(
        zero="zéro",
        negative="moins {}",
        units=(
            "zéro", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf",
            "dix", "onze", "douze", "treize", "quatorze", "quinze", "seize", "dix-sept",
            "dix-huit", "dix-neuf",
        ),
        tens=(
            "", "dix", "vingt", "trente", "quarante", "cinquante", "soixante",
            "soixante-dix", "quatre-vingt", "quatre-vingt-dix",
        ),
        teen_tens=frozenset({7, 9}),
        hundreds=(
            "", "cent", "deux cent", "trois cent", "quatre cent", "cinq cent",
            "six cent", "sept cent", "huit cent", "neuf cent",
        ),
        magnitudes=(
            magnitude(10**9, "milliard", "milliards", one_word="un", gender=GrammaticalGender.MASCULINE),
            magnitude(10**6, "million", "millions", one_word="un", gender=GrammaticalGender.MASCULINE),
            magnitude(1000, "mille", bare_when_one=True),
        ),
        gendered={GrammaticalGender.FEMININE: {1: "une"}},
        ligature=_ligature,
        adjust_group=_plural_group,
        default_gender=GrammaticalGender.MASCULINE,
    ),
    ordinal=SuffixOrdinalRules(
        zero="zéroième",
        suffix="ième",
        small={1: "premier"},
        exceptions=(
            ("cinq", "cinquième"),
            ("neuf", "neuvième"),
            ("cents", "centième"),
            ("vingts", "vingtième"),
            ("millions", "millionième"),
            ("milliards", "milliardième"),
            ("e", "ième"),
        ),
        boundaries=(
            OrdinalBoundary(10**9, drop_one="un "),
            OrdinalBoundary(10**6, drop_one="un "),
        ),
        gender_endings={GrammaticalGender.FEMININE: ("premier", "première")},
    ),
)
