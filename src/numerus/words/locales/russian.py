"""Russian number words.

Magnitude names agree with their multiplier in grammatical number
("одна тысяча", "две тысячи", "пять тысяч") and the thousand is feminine.
Ordinals inflect the final component only; an exact multiple of a magnitude
fuses the multiplier into a genitive prefix ("двухсоттысячный").
"""

from __future__ import annotations

from numerus.i18n.protocols import GrammaticalGender
from numerus.words.tables import (
    CardinalTable,
    LocaleWords,
    OrdinalStem,
    StemOrdinalRules,
    magnitude,
    space_ligature,
)

M = GrammaticalGender.MASCULINE
F = GrammaticalGender.FEMININE
N = GrammaticalGender.NEUTER


def _stems(values, stems, declensions=None):
    declensions = declensions or {}
    return {
        value: OrdinalStem(stem, declensions.get(value, "hard"))
        for value, stem in zip(values, stems)
    }


_ORDINAL_STEMS = {
    **_stems(
        range(1, 20),
        (
            "перв", "втор", "трет", "четвёрт", "пят", "шест", "седьм", "восьм", "девят",
            "десят", "одиннадцат", "двенадцат", "тринадцат", "четырнадцат", "пятнадцат",
            "шестнадцат", "семнадцат", "восемнадцат", "девятнадцат",
        ),
        {2: "stressed", 3: "soft", 6: "stressed", 7: "stressed", 8: "stressed"},
    ),
    **_stems(
        range(20, 100, 10),
        ("двадцат", "тридцат", "сороков", "пятидесят", "шестидесят", "семидесят", "восьмидесят", "девяност"),
        {40: "stressed"},
    ),
    **_stems(
        range(100, 1000, 100),
        ("сот", "двухсот", "трёхсот", "четырёхсот", "пятисот", "шестисот", "семисот", "восьмисот", "девятисот"),
    ),
}

_GENITIVE = {
    1: "одно", 2: "двух", 3: "трёх", 4: "четырёх", 5: "пяти", 6: "шести", 7: "семи",
    8: "восьми", 9: "девяти", 10: "десяти", 11: "одиннадцати", 12: "двенадцати",
    13: "тринадцати", 14: "четырнадцати", 15: "пятнадцати", 16: "шестнадцати",
    17: "семнадцати", 18: "восемнадцати", 19: "девятнадцати",
    20: "двадцати", 30: "тридцати", 40: "сорока", 50: "пятидесяти", 60: "шестидесяти",
    70: "семидесяти", 80: "восьмидесяти", 90: "девяноста",
    100: "сто", 200: "двухсот", 300: "трёхсот", 400: "четырёхсот", 500: "пятисот",
    600: "шестисот", 700: "семисот", 800: "восьмисот", 900: "девятисот",
}


RUSSIAN = LocaleWords(
    language="ru",
    cardinal=CardinalTable(
        zero="ноль",
        negative="минус {}",
        units=(
            "ноль", "один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять",
            "десять", "одиннадцать", "двенадцать", "тринадцать", "четырнадцать", "пятнадцать",
            "шестнадцать", "семнадцать", "восемнадцать", "девятнадцать",
        ),
        tens=(
            "", "десять", "двадцать", "тридцать", "сорок", "пятьдесят", "шестьдесят",
            "семьдесят", "восемьдесят", "девяносто",
        ),
        hundreds=(
            "", "сто", "двести", "триста", "четыреста", "пятьсот",
            "шестьсот", "семьсот", "восемьсот", "девятьсот",
        ),
        magnitudes=(
            magnitude(10**9, "миллиард", "миллиардов", "миллиарда", gender=M),
            magnitude(10**6, "миллион", "миллионов", "миллиона", gender=M),
            magnitude(1000, "тысяча", "тысяч", "тысячи", gender=F),
        ),
        gendered={F: {1: "одна", 2: "две"}, N: {1: "одно"}},
        ligature=space_ligature,
        default_gender=M,
    ),
    ordinal=StemOrdinalRules(
        zero=OrdinalStem("нулев", "stressed"),
        stems=_ORDINAL_STEMS,
        magnitudes=(
            (1000, OrdinalStem("тысячн")),
            (10**6, OrdinalStem("миллионн")),
            (10**9, OrdinalStem("миллиардн")),
        ),
        genitive=_GENITIVE,
        endings={
            "hard": {M: "ый", F: "ая", N: "ое"},
            "stressed": {M: "ой", F: "ая", N: "ое"},
            "soft": {M: "ий", F: "ья", N: "ье"},
        },
        drop_leading=("один ", "одна "),
    ),
)
