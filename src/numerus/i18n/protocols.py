"""Protocol definitions and shared value types.

This module defines the enums, the locale value object and the protocols
(interfaces) of the collaborators the word engine talks to, enabling
extensibility and loose coupling between components.

Protocols:
- NounInflector: singular/plural forms of a counted noun
- NumberFormatter: locale-aware digit rendering
- ResourceTable: template lookup by resolved resource key
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from numerus.errors import InvalidFormatError, InvalidLocaleError


# ==============================================================================
# Enums and Type Definitions
# ==============================================================================

class GrammaticalGender(str, Enum):
    """Agreement class requested for gender-sensitive locales."""
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


class GrammaticalNumber(str, Enum):
    """Grammatical number categories.

    A locale uses a subset: most only SINGULAR/PLURAL, Slavic rule sets add
    PAUCAL ("a few", 2-4), some Romance phrases add DUAL (exactly two).
    """
    SINGULAR = "singular"
    DUAL = "dual"
    PAUCAL = "paucal"
    PLURAL = "plural"


class ShowQuantityAs(str, Enum):
    """How the count is displayed in a quantity phrase."""
    NONE = "none"        # cases
    NUMERIC = "numeric"  # 5 cases
    WORDS = "words"      # five cases


class NumberStyle(str, Enum):
    """Number formatting style."""
    GENERAL = "general"
    DECIMAL = "decimal"
    FIXED = "fixed"
    CURRENCY = "currency"
    PERCENT = "percent"
    ORDINAL = "ordinal"


class TimeUnit(str, Enum):
    """Units a time span is bucketed into, smallest first."""
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"

    @property
    def milliseconds(self) -> int:
        """Length of one unit in milliseconds."""
        return _UNIT_MILLISECONDS[self]

    @property
    def rank(self) -> int:
        """Position of the unit, 0 for milliseconds."""
        return list(TimeUnit).index(self)


_UNIT_MILLISECONDS = {
    TimeUnit.MILLISECOND: 1,
    TimeUnit.SECOND: 1000,
    TimeUnit.MINUTE: 60 * 1000,
    TimeUnit.HOUR: 60 * 60 * 1000,
    TimeUnit.DAY: 24 * 60 * 60 * 1000,
    TimeUnit.WEEK: 7 * 24 * 60 * 60 * 1000,
}


# ==============================================================================
# Data Classes
# ==============================================================================

@dataclass(frozen=True)
class LocaleInfo:
    """Locale identity.

    Attributes:
        language: ISO 639-1 language code (e.g., "en", "pt")
        region: ISO 3166-1 region code (e.g., "US", "BR")
        script: ISO 15924 script code (e.g., "Latn", "Cyrl")
        variant: Locale variant
    """
    language: str
    region: str | None = None
    script: str | None = None
    variant: str | None = None

    @property
    def tag(self) -> str:
        """Get BCP 47 language tag."""
        parts = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        if self.variant:
            parts.append(self.variant)
        return "-".join(parts)

    @property
    def code(self) -> str:
        """Registry key form of the locale ("pt_BR", "en")."""
        return f"{self.language}_{self.region}" if self.region else self.language

    def candidates(self) -> list[str]:
        """Registry keys to try, most specific first.

        Example:
            LocaleInfo.parse("pt-BR").candidates()  # ["pt_BR", "pt"]
        """
        if self.region:
            return [self.code, self.language]
        return [self.language]

    @classmethod
    def parse(cls, tag: str) -> "LocaleInfo":
        """Parse a locale tag.

        Supports formats:
        - Simple: "en", "ru"
        - With region: "en-US", "pt-BR", "en_US", "pt_BR"
        - With script: "sr-Latn"
        - POSIX names with encoding: "it_IT.UTF-8"

        Args:
            tag: Locale tag string

        Returns:
            Parsed LocaleInfo

        Raises:
            InvalidLocaleError: If the language subtag is missing or malformed
        """
        # Drop POSIX encoding and modifier
        cleaned = tag.strip().split(".")[0].split("@")[0]
        parts = cleaned.replace("_", "-").split("-")

        language = parts[0].lower()
        if not (2 <= len(language) <= 3 and language.isalpha()):
            raise InvalidLocaleError(tag)

        region = None
        script = None
        variant = None

        for part in parts[1:]:
            if len(part) == 4 and part.isalpha():
                script = part.capitalize()
            elif len(part) == 2 and part.isalpha():
                region = part.upper()
            elif len(part) == 3 and part.isdigit():
                region = part
            elif part:
                variant = part.lower()

        return cls(language=language, region=region, script=script, variant=variant)

    @classmethod
    def coerce(cls, locale: "str | LocaleInfo") -> "LocaleInfo":
        """Accept either a tag or an existing LocaleInfo."""
        if isinstance(locale, LocaleInfo):
            return locale
        return cls.parse(locale)

    def __str__(self) -> str:
        return self.tag


@dataclass
class FormattedNumber:
    """Result of number formatting.

    Attributes:
        value: Original numeric value
        formatted: Formatted string representation
        parts: Component parts (for advanced rendering)
    """
    value: float | int | Decimal
    formatted: str
    parts: dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.formatted


# ==============================================================================
# Protocols
# ==============================================================================

@runtime_checkable
class NounInflector(Protocol):
    """Protocol for noun inflection providers."""

    def singularize(self, noun: str) -> str:
        """Return the singular form of a noun."""
        ...

    def pluralize(self, noun: str) -> str:
        """Return the plural form of a noun."""
        ...


@runtime_checkable
class NumberFormatter(Protocol):
    """Protocol for locale-aware number formatting."""

    def format(
        self,
        value: float | int | Decimal,
        locale: LocaleInfo,
        style: NumberStyle = NumberStyle.GENERAL,
        **options: Any,
    ) -> FormattedNumber:
        """Format a number according to locale rules."""
        ...


@runtime_checkable
class ResourceTable(Protocol):
    """Protocol for string resource lookup."""

    def lookup(self, key: str, locale: LocaleInfo) -> str | None:
        """Return the template stored under a resolved key, if any."""
        ...


# ==============================================================================
# Base Classes
# ==============================================================================

class BaseNumberFormatter(ABC):
    """Base class for number formatters."""

    @abstractmethod
    def format(
        self,
        value: float | int | Decimal,
        locale: LocaleInfo,
        style: NumberStyle = NumberStyle.GENERAL,
        **options: Any,
    ) -> FormattedNumber:
        """Format a number."""
        pass

    def format_spec(
        self,
        value: float | int | Decimal,
        locale: LocaleInfo,
        specifier: str | None = None,
    ) -> str:
        """Format a number using a compact specifier such as "N2" or "C0"."""
        style, options = parse_format_specifier(specifier)
        return self.format(value, locale, style, **options).formatted


# ==============================================================================
# Format Specifiers
# ==============================================================================

_SPECIFIER_STYLES = {
    "N": NumberStyle.DECIMAL,
    "F": NumberStyle.FIXED,
    "C": NumberStyle.CURRENCY,
    "P": NumberStyle.PERCENT,
    "D": NumberStyle.DECIMAL,
}


def parse_format_specifier(specifier: str | None) -> tuple[NumberStyle, dict[str, Any]]:
    """Translate a format specifier into a style and formatter options.

    Args:
        specifier: "N<d>", "F<d>", "C<d>", "P<d>", "D" or None

    Returns:
        Tuple of (style, options)

    Raises:
        InvalidFormatError: If the specifier is not recognised
    """
    if specifier is None or specifier == "":
        return NumberStyle.GENERAL, {}

    letter, digits = specifier[0].upper(), specifier[1:]
    if letter not in _SPECIFIER_STYLES or (digits and not digits.isdigit()):
        raise InvalidFormatError(specifier)

    if letter == "D":
        if digits:
            raise InvalidFormatError(specifier)
        return NumberStyle.DECIMAL, {"precision": 0, "use_grouping": False}

    precision = int(digits) if digits else 2
    options: dict[str, Any] = {"precision": precision}
    if letter == "F":
        options["use_grouping"] = False
    return _SPECIFIER_STYLES[letter], options
