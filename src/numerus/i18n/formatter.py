"""Resource-key resolution.

Turns a generic template identifier plus a count into the concrete key to
look up in a string-resource table, by appending the grammatical suffix the
locale needs. Per-locale behaviour is a strategy value, not a subclass:

    (base_key, category) -> suffix

The default strategy returns no suffix. Russian appends ``_Singular`` or
``_Paucal``; French appends ``_Dual`` for the phrases it marks as
dual-sensitive.
"""

from __future__ import annotations

import logging
from typing import Callable

from numerus.i18n.plural import GrammaticalNumberClassifier, get_classifier
from numerus.i18n.protocols import GrammaticalNumber, LocaleInfo

logger = logging.getLogger(__name__)


SuffixStrategy = Callable[[str, GrammaticalNumber], str]


# ==============================================================================
# Strategies
# ==============================================================================

def no_suffix(base_key: str, category: GrammaticalNumber) -> str:
    """The base key is already the right form."""
    return ""


def paucal_suffix(base_key: str, category: GrammaticalNumber) -> str:
    """Slavic resource keys carry singular and paucal variants."""
    if category == GrammaticalNumber.SINGULAR:
        return "_Singular"
    if category == GrammaticalNumber.PAUCAL:
        return "_Paucal"
    return ""


def dual_suffix(base_key: str, category: GrammaticalNumber) -> str:
    """Only dual-sensitive keys classify as DUAL, so no key filter is needed here."""
    if category == GrammaticalNumber.DUAL:
        return "_Dual"
    return ""


# ==============================================================================
# Resolver
# ==============================================================================

class ResourceKeyResolver:
    """Resolves template identifiers to locale-specific resource keys.

    Example:
        resolver = ResourceKeyResolver()
        ru = LocaleInfo.parse("ru")

        resolver.resolve("TimeSpanHumanize_MultipleDays", 1, ru)
        # -> "TimeSpanHumanize_MultipleDays_Singular"
        resolver.resolve("TimeSpanHumanize_MultipleDays", 3, ru)
        # -> "TimeSpanHumanize_MultipleDays_Paucal"
        resolver.resolve("TimeSpanHumanize_MultipleDays", 5, ru)
        # -> "TimeSpanHumanize_MultipleDays"
    """

    def __init__(self, classifier: GrammaticalNumberClassifier | None = None) -> None:
        self._classifier = classifier or get_classifier()
        self._strategies: dict[str, SuffixStrategy] = {
            "ru": paucal_suffix,
            "uk": paucal_suffix,
            "fr": dual_suffix,
        }

    def register_strategy(self, language: str, strategy: SuffixStrategy) -> None:
        """Register a suffix strategy for a language or language_REGION code."""
        self._strategies[language] = strategy

    def get_strategy(self, locale: LocaleInfo) -> SuffixStrategy:
        """Get the strategy for a locale (default: no suffix)."""
        for code in locale.candidates():
            if code in self._strategies:
                return self._strategies[code]
        return no_suffix

    def resolve(self, base_key: str, count: float | int, locale: LocaleInfo) -> str:
        """Resolve the concrete resource key.

        Args:
            base_key: Generic template identifier
            count: Count the template will describe
            locale: Target locale

        Returns:
            ``base_key`` followed by the locale's grammatical suffix, if any
        """
        strategy = self.get_strategy(locale)
        if strategy is no_suffix:
            return base_key

        category = self._classifier.classify(count, locale, key=base_key)
        resolved = base_key + strategy(base_key, category)
        logger.debug(f"Resolved {base_key!r} for count {count} in {locale.tag}: {resolved!r}")
        return resolved


# Global instance
_resolver = ResourceKeyResolver()


def resolve_resource_key(base_key: str, count: float | int, locale: str | LocaleInfo) -> str:
    """Resolve a template identifier for a count in a locale.

    Example:
        resolve_resource_key("DateHumanize_MultipleDaysAgo", 2, "fr")
        # -> "DateHumanize_MultipleDaysAgo_Dual"
    """
    return _resolver.resolve(base_key, count, LocaleInfo.coerce(locale))


def get_resolver() -> ResourceKeyResolver:
    """Get the global resolver instance."""
    return _resolver
