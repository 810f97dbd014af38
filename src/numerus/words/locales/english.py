"""English number words."""

from __future__ import annotations

from numerus.words.tables import (
    CardinalTable,
    LocaleWords,
    SuffixOrdinalRules,
    hyphen_ligature,
    magnitude,
)

ENGLISH = LocaleWords(
    language="en",
    cardinal=CardinalTable(
        zero="zero",
        negative="minus {}",
        units=(
            "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
            "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
            "seventeen", "eighteen", "nineteen",
        ),
        tens=("", "ten", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"),
        magnitudes=(
            magnitude(10**18, "quintillion"),
            magnitude(10**15, "quadrillion"),
            magnitude(10**12, "trillion"),
            magnitude(10**9, "billion"),
            magnitude(10**6, "million"),
            magnitude(1000, "thousand"),
            magnitude(100, "hundred"),
        ),
        ligature=hyphen_ligature,
        # "one thousand and one", "one hundred and twenty-two"
        conjunction=" and ",
        conjunction_rule=lambda rest: rest < 100,
    ),
    ordinal=SuffixOrdinalRules(
        zero="zeroth",
        suffix="th",
        exceptions=(
            ("one", "first"),
            ("two", "second"),
            ("three", "third"),
            ("five", "fifth"),
            ("eight", "eighth"),
            ("nine", "ninth"),
            ("twelve", "twelfth"),
            ("y", "ieth"),
        ),
        drop_leading="one ",
    ),
)
