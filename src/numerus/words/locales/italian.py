"""Italian number words.

Everything below a million is written as one word ("tremilacinquecentouno");
millions and milliards are separate words with a plural form.
"""

from __future__ import annotations

from numerus.i18n.protocols import GrammaticalGender
from numerus.words.tables import (
    CardinalTable,
    LocaleWords,
    OrdinalBoundary,
    SuffixOrdinalRules,
    magnitude,
)


def _ligature(tens_digit: int, unit_value: int, tens_word: str, unit_word: str) -> str:
    # venti + uno -> ventuno, trenta + otto -> trentotto
    if unit_value in (1, 8):
        return tens_word[:-1] + unit_word
    return tens_word + unit_word


def _finalize(words: str) -> str:
    # A compound ending in "tre" takes the accent: ventitré, centotré
    if words.endswith("tre") and len(words) > 3 and words[-4] != " ":
        return words[:-1] + "é"
    return words


ITALIAN = LocaleWords(
    language="it",
    cardinal=CardinalTable(
        zero="zero",
        negative="meno {}",
        units=(
            "zero", "uno", "due", "tre", "quattro", "cinque", "sei", "sette", "otto", "nove",
            "dieci", "undici", "dodici", "tredici", "quattordici", "quindici", "sedici",
            "diciassette", "diciotto", "diciannove",
        ),
        tens=("", "dieci", "venti", "trenta", "quaranta", "cinquanta", "sessanta", "settanta", "ottanta", "novanta"),
        hundreds=(
            "", "cento", "duecento", "trecento", "quattrocento", "cinquecento",
            "seicento", "settecento", "ottocento", "novecento",
        ),
        hundreds_joiner="",
        magnitudes=(
            magnitude(10**9, "miliardo", "miliardi", one_word="un", gender=GrammaticalGender.MASCULINE),
            magnitude(10**6, "milione", "milioni", one_word="un", gender=GrammaticalGender.MASCULINE),
            magnitude(1000, "mille", "mila", prefix="", postfix="", bare_when_one=True),
        ),
        gendered={GrammaticalGender.FEMININE: {1: "una"}},
        ligature=_ligature,
        finalize=_finalize,
        default_gender=GrammaticalGender.MASCULINE,
    ),
    ordinal=SuffixOrdinalRules(
        zero="zero",
        suffix="esimo",
        small={
            1: "primo", 2: "secondo", 3: "terzo", 4: "quarto", 5: "quinto",
            6: "sesto", 7: "settimo", 8: "ottavo", 9: "nono",
        },
        exceptions=(("dieci", "decimo"),),
        # Drop the final vowel, restoring an unaccented one after 3 and 6
        truncate=1,
        restore_vowels={3: "e", 6: "i"},
        boundaries=(
            OrdinalBoundary(10**9, join=(" miliard", "miliard"), drop_one="un"),
            OrdinalBoundary(10**6, join=(" milion", "milion"), drop_one="un"),
            # duemillesimo, but millesimo
            OrdinalBoundary(1000, append="l"),
        ),
        gender_endings={GrammaticalGender.FEMININE: ("o", "a")},
    ),
)
