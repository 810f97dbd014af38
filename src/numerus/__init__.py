"""Numerus - number words and grammatical forms in several languages."""

from numerus.api import (
    classify,
    humanize_timedelta,
    ordinalize,
    resolve_key,
    supports_locale,
    to_ordinal_words,
    to_quantity,
    to_words,
)
from numerus.config import NumerusConfig, configure, get_config, load_config, reset_config
from numerus.errors import (
    ConfigError,
    ErrorCode,
    InvalidArgumentError,
    InvalidFormatError,
    InvalidLocaleError,
    MissingResourceError,
    NumerusError,
    UnsupportedLocaleError,
)
from numerus.i18n import (
    GrammaticalGender,
    GrammaticalNumber,
    LocaleInfo,
    ShowQuantityAs,
    TimeUnit,
    get_locale,
    locale_context,
    set_locale,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "to_words",
    "to_ordinal_words",
    "to_quantity",
    "resolve_key",
    "classify",
    "ordinalize",
    "humanize_timedelta",
    "supports_locale",
    # Locale
    "LocaleInfo",
    "set_locale",
    "get_locale",
    "locale_context",
    # Enums
    "GrammaticalGender",
    "GrammaticalNumber",
    "ShowQuantityAs",
    "TimeUnit",
    # Configuration
    "NumerusConfig",
    "configure",
    "get_config",
    "load_config",
    "reset_config",
    # Errors
    "NumerusError",
    "ErrorCode",
    "UnsupportedLocaleError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "InvalidLocaleError",
    "MissingResourceError",
    "ConfigError",
]
