"""Portuguese (Brazilian) number words.

"e" joins hundreds, tens and units ("cento e vinte e dois") and links a
magnitude to a rest below one hundred or to a round hundred
("dois mil e quatorze", "oito mil e cem").
"""

from __future__ import annotations

from numerus.i18n.protocols import GrammaticalGender
from numerus.words.tables import (
    CardinalTable,
    CompositeOrdinalRules,
    LocaleWords,
    magnitude,
)


def _ligature(tens_digit: int, unit_value: int, tens_word: str, unit_word: str) -> str:
    return f"{tens_word} e {unit_word}"


def _takes_conjunction(rest: int) -> bool:
    return rest < 100 or (rest < 1000 and rest % 100 == 0)


PORTUGUESE = LocaleWords(
    language="pt",
    cardinal=CardinalTable(
        zero="zero",
        negative="menos {}",
        units=(
            "zero", "um", "dois", "três", "quatro", "cinco", "seis", "sete", "oito", "nove",
            "dez", "onze", "doze", "treze", "quatorze", "quinze", "dezesseis", "dezessete",
            "dezoito", "dezenove",
        ),
        tens=("", "dez", "vinte", "trinta", "quarenta", "cinquenta", "sessenta", "setenta", "oitenta", "noventa"),
        hundreds=(
            "", "cento", "duzentos", "trezentos", "quatrocentos", "quinhentos",
            "seiscentos", "setecentos", "oitocentos", "novecentos",
        ),
        exact_hundred="cem",
        hundreds_joiner=" e ",
        magnitudes=(
            magnitude(10**12, "trilhão", "trilhões", one_word="um", gender=GrammaticalGender.MASCULINE),
            magnitude(10**9, "bilhão", "bilhões", one_word="um", gender=GrammaticalGender.MASCULINE),
            magnitude(10**6, "milhão", "milhões", one_word="um", gender=GrammaticalGender.MASCULINE),
            magnitude(1000, "mil", bare_when_one=True),
        ),
        gendered={
            GrammaticalGender.FEMININE: {
                1: "uma",
                2: "duas",
                200: "duzentas",
                300: "trezentas",
                400: "quatrocentas",
                500: "quinhentas",
                600: "seiscentas",
                700: "setecentas",
                800: "oitocentas",
                900: "novecentas",
            },
        },
        ligature=_ligature,
        conjunction=" e ",
        conjunction_rule=_takes_conjunction,
        default_gender=GrammaticalGender.MASCULINE,
    ),
    ordinal=CompositeOrdinalRules(
        zero="zero",
        units=("", "primeir", "segund", "terceir", "quart", "quint", "sext", "sétim", "oitav", "non"),
        tens=(
            "", "décim", "vigésim", "trigésim", "quadragésim", "quinquagésim",
            "sexagésim", "septuagésim", "octogésim", "nonagésim",
        ),
        hundreds=(
            "", "centésim", "ducentésim", "trecentésim", "quadringentésim", "quingentésim",
            "sexcentésim", "septingentésim", "octingentésim", "noningentésim",
        ),
        magnitudes=(
            (10**9, "bilionésim"),
            (10**6, "milionésim"),
            (1000, "milésim"),
        ),
        endings={
            GrammaticalGender.MASCULINE: "o",
            GrammaticalGender.FEMININE: "a",
            GrammaticalGender.NEUTER: "o",
        },
    ),
)
