"""Grammatical-form resolution and locale services.

Core Features:
- Grammatical number classification (singular, dual, paucal, plural)
- Resource-key resolution with per-locale suffix strategies
- Ambient locale with per-thread overrides and a fallback chain
- Locale-aware numeric formatting (grouping, currency, percent, ordinals)
- In-memory string resource table with fallback

Example:
    from numerus.i18n import classify, resolve_resource_key, format_number

    classify(22, "ru")                                           # GrammaticalNumber.PAUCAL
    resolve_resource_key("TimeSpanHumanize_MultipleDays", 3, "ru")
    # -> "TimeSpanHumanize_MultipleDays_Paucal"
    format_number(1234567, "it", "N2")                           # "1.234.567,00"
"""

# Protocols and value types
from numerus.i18n.protocols import (
    BaseNumberFormatter,
    FormattedNumber,
    GrammaticalGender,
    GrammaticalNumber,
    LocaleInfo,
    NounInflector,
    NumberFormatter,
    NumberStyle,
    ResourceTable,
    ShowQuantityAs,
    TimeUnit,
    parse_format_specifier,
)

# Grammatical number classification
from numerus.i18n.plural import (
    GrammaticalNumberClassifier,
    NumberRule,
    classify,
    get_classifier,
    paucal_rule,
    two_form_rule,
)

# Resource-key resolution
from numerus.i18n.formatter import (
    ResourceKeyResolver,
    dual_suffix,
    get_resolver,
    no_suffix,
    paucal_suffix,
    resolve_resource_key,
)

# Ambient locale
from numerus.i18n.locale import (
    LocaleManager,
    get_locale,
    get_locale_manager,
    locale_context,
    resolve_locale,
    set_locale,
)

# Numeric formatting
from numerus.i18n.formatting import (
    CurrencyInfo,
    LocaleNumberFormatter,
    NumberSymbols,
    format_currency,
    format_number,
    get_currency_info,
    get_default_currency,
    get_number_formatter,
    get_number_symbols,
    ordinalize,
)

# String resources
from numerus.i18n.resources import (
    StringResourceTable,
    get_resource_table,
)

__all__ = [
    # Protocols and value types
    "BaseNumberFormatter",
    "FormattedNumber",
    "GrammaticalGender",
    "GrammaticalNumber",
    "LocaleInfo",
    "NounInflector",
    "NumberFormatter",
    "NumberStyle",
    "ResourceTable",
    "ShowQuantityAs",
    "TimeUnit",
    "parse_format_specifier",
    # Classification
    "GrammaticalNumberClassifier",
    "NumberRule",
    "classify",
    "get_classifier",
    "paucal_rule",
    "two_form_rule",
    # Resource keys
    "ResourceKeyResolver",
    "dual_suffix",
    "get_resolver",
    "no_suffix",
    "paucal_suffix",
    "resolve_resource_key",
    # Locale
    "LocaleManager",
    "get_locale",
    "get_locale_manager",
    "locale_context",
    "resolve_locale",
    "set_locale",
    # Formatting
    "CurrencyInfo",
    "LocaleNumberFormatter",
    "NumberSymbols",
    "format_currency",
    "format_number",
    "get_currency_info",
    "get_default_currency",
    "get_number_formatter",
    "get_number_symbols",
    "ordinalize",
    # Resources
    "StringResourceTable",
    "get_resource_table",
]
