"""Number-to-words conversion.

Cardinal and ordinal converters share one algorithm each, parameterized by
per-locale tables (see ``numerus.words.tables``).

Example:
    from numerus.words import to_cardinal_words, to_ordinal_words

    to_cardinal_words(1234, "en")  # "one thousand two hundred and thirty-four"
    to_ordinal_words(3, "ru", "feminine")  # "третья"
"""

from numerus.words.cardinal import CardinalConverter, as_integer
from numerus.words.ordinal import (
    CompositeOrdinalizer,
    StemOrdinalizer,
    SuffixOrdinalizer,
    create_ordinalizer,
)
from numerus.words.registry import (
    coerce_gender,
    get_cardinal_converter,
    get_locale_words,
    get_ordinalizer,
    register_locale_words,
    supported_languages,
    to_cardinal_words,
    to_ordinal_words,
)
from numerus.words.tables import (
    CardinalTable,
    CompositeOrdinalRules,
    LocaleWords,
    MagnitudeRule,
    OrdinalBoundary,
    OrdinalStem,
    StemOrdinalRules,
    SuffixOrdinalRules,
    magnitude,
)

__all__ = [
    # Converters
    "CardinalConverter",
    "SuffixOrdinalizer",
    "CompositeOrdinalizer",
    "StemOrdinalizer",
    "create_ordinalizer",
    "as_integer",
    # Registry
    "get_locale_words",
    "get_cardinal_converter",
    "get_ordinalizer",
    "register_locale_words",
    "supported_languages",
    "to_cardinal_words",
    "to_ordinal_words",
    "coerce_gender",
    # Tables
    "CardinalTable",
    "MagnitudeRule",
    "magnitude",
    "SuffixOrdinalRules",
    "CompositeOrdinalRules",
    "StemOrdinalRules",
    "OrdinalBoundary",
    "OrdinalStem",
    "LocaleWords",
]
