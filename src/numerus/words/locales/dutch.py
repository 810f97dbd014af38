"""Dutch number words.

Dutch spelling of numbers is not officially regulated; these tables follow
the common convention of writing everything below a million as one word and
separating millions and above with spaces.
"""

from __future__ import annotations

from numerus.words.tables import (
    CardinalTable,
    LocaleWords,
    OrdinalBoundary,
    SuffixOrdinalRules,
    magnitude,
)

_UNITS = (
    "nul", "een", "twee", "drie", "vier", "vijf", "zes", "zeven", "acht", "negen",
    "tien", "elf", "twaalf", "dertien", "veertien", "vijftien", "zestien", "zeventien",
    "achttien", "negentien",
)


def _ligature(tens_digit: int, unit_value: int, tens_word: str, unit_word: str) -> str:
    # Units come first; a trema separates a final "e" from "en"
    joiner = "ën" if unit_word.endswith("e") else "en"
    return f"{unit_word}{joiner}{tens_word}"


DUTCH = LocaleWords(
    language="nl",
    cardinal=CardinalTable(
        zero="nul",
        negative="min {}",
        units=_UNITS,
        tens=("", "tien", "twintig", "dertig", "veertig", "vijftig", "zestig", "zeventig", "tachtig", "negentig"),
        magnitudes=(
            magnitude(10**18, "triljoen"),
            magnitude(10**15, "biljard"),
            magnitude(10**12, "biljoen"),
            magnitude(10**9, "miljard"),
            magnitude(10**6, "miljoen"),
            magnitude(1000, "duizend", prefix="", postfix=" ", bare_when_one=True),
            magnitude(100, "honderd", prefix="", postfix="", bare_when_one=True),
        ),
        ligature=_ligature,
    ),
    ordinal=SuffixOrdinalRules(
        zero="nulde",
        suffix="de",
        exceptions=(
            ("een", "eerste"),
            ("drie", "derde"),
            ("miljoen", "miljoenste"),
        ),
        # achtste, twintigste, honderdste, duizendste
        consonant_suffix="ste",
        consonant_cues="tgd",
        boundaries=(
            OrdinalBoundary(10**9, drop_one="een "),
            OrdinalBoundary(10**6, drop_one="een "),
        ),
    ),
)
