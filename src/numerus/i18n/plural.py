"""Grammatical Number Classification.

Maps an integer count to the grammatical number category a locale uses to
pick a word or template variant.

Features:
- Sign-insensitive: -n classifies like n
- Fractional counts are plural, matching the noun form of quantity phrases
- Explicit zero form per locale (never a fallthrough)
- Key-scoped dual forms (a locale can mark only some templates as dual-sensitive)
- Paucal rule for Slavic rule sets
- Extensible rule registration

Usage:
    from numerus.i18n.plural import classify

    classify(1, "en")   # GrammaticalNumber.SINGULAR
    classify(22, "ru")  # GrammaticalNumber.PAUCAL
    classify(2, "fr", key="DateHumanize_MultipleDaysAgo")  # GrammaticalNumber.DUAL
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

from numerus.i18n.protocols import GrammaticalNumber, LocaleInfo

logger = logging.getLogger(__name__)


# Type for a rule applied to a positive count
NumberRuleFunc = Callable[[int], GrammaticalNumber]


# ==============================================================================
# Rule Functions
# ==============================================================================

def two_form_rule(n: int) -> GrammaticalNumber:
    """Singular for exactly one, plural otherwise."""
    if n == 1:
        return GrammaticalNumber.SINGULAR
    return GrammaticalNumber.PLURAL


def paucal_rule(n: int) -> GrammaticalNumber:
    """Slavic singular/paucal/plural rule.

    Counts ending in 11-14 are excluded from the small-count path first,
    then the last digit decides.
    """
    if 11 <= n % 100 <= 14:
        return GrammaticalNumber.PLURAL
    if n % 10 == 1:
        return GrammaticalNumber.SINGULAR
    if 2 <= n % 10 <= 4:
        return GrammaticalNumber.PAUCAL
    return GrammaticalNumber.PLURAL


@dataclass(frozen=True)
class NumberRule:
    """Classification rule of one locale.

    Attributes:
        classify: Rule applied to positive counts
        zero_form: Category of a zero count
        dual_keys: Template identifiers for which exactly two is DUAL
    """
    classify: NumberRuleFunc = two_form_rule
    zero_form: GrammaticalNumber = GrammaticalNumber.PLURAL
    dual_keys: frozenset[str] = frozenset()

    def category(self, n: int, key: str | None = None) -> GrammaticalNumber:
        if n == 0:
            return self.zero_form
        if n == 2 and key is not None and key in self.dual_keys:
            return GrammaticalNumber.DUAL
        return self.classify(n)


DEFAULT_RULE = NumberRule()


class GrammaticalNumberClassifier:
    """Locale-aware grammatical number classifier.

    Example:
        classifier = GrammaticalNumberClassifier()

        classifier.classify(1, LocaleInfo.parse("en"))   # SINGULAR
        classifier.classify(-1, LocaleInfo.parse("en"))  # SINGULAR
        classifier.classify(0, LocaleInfo.parse("en"))   # PLURAL
        classifier.classify(3, LocaleInfo.parse("ru"))   # PAUCAL
        classifier.classify(11, LocaleInfo.parse("ru"))  # PLURAL
        classifier.classify(0, LocaleInfo.parse("fr"))   # SINGULAR
    """

    def __init__(self) -> None:
        self._rules: dict[str, NumberRule] = {}
        self._register_default_rules()

    def _register_default_rules(self) -> None:
        """Register built-in rules."""
        for lang in ["en", "de", "nl", "it", "pt", "es"]:
            self._rules[lang] = DEFAULT_RULE

        # French: zero takes the singular, "2 days ago" has its own phrase
        self._rules["fr"] = NumberRule(
            zero_form=GrammaticalNumber.SINGULAR,
            dual_keys=frozenset({
                "DateHumanize_MultipleDaysAgo",
                "DateHumanize_MultipleDaysFromNow",
            }),
        )

        # Russian, Ukrainian, Belarusian
        for lang in ["ru", "uk", "be"]:
            self._rules[lang] = NumberRule(classify=paucal_rule)

    def register_rule(self, language: str, rule: NumberRule) -> None:
        """Register a custom rule.

        Args:
            language: Language code or language_REGION code
            rule: Classification rule
        """
        self._rules[language] = rule

    def get_rule(self, locale: LocaleInfo) -> NumberRule:
        """Get the rule for a locale, falling back to the two-form default."""
        for code in locale.candidates():
            if code in self._rules:
                return self._rules[code]
        logger.debug(f"No number rule for {locale.tag}, using two-form default")
        return DEFAULT_RULE

    def classify(
        self,
        count: float | int,
        locale: LocaleInfo,
        key: str | None = None,
    ) -> GrammaticalNumber:
        """Get the grammatical number category for a count.

        Args:
            count: The count to categorize; the sign is ignored and a
                fractional count is always PLURAL
            locale: Target locale
            key: Template identifier, for locales with key-scoped forms

        Returns:
            Grammatical number category
        """
        n = abs(count)
        if not math.isfinite(n) or n != int(n):
            return GrammaticalNumber.PLURAL
        return self.get_rule(locale).category(int(n), key)

    def get_supported_languages(self) -> list[str]:
        """Get list of language codes with a registered rule."""
        return list(self._rules.keys())


# Global instance
_classifier = GrammaticalNumberClassifier()


def classify(
    count: float | int,
    locale: str | LocaleInfo,
    key: str | None = None,
) -> GrammaticalNumber:
    """Get the grammatical number category for a count.

    Args:
        count: The count to categorize
        locale: Target locale (string or LocaleInfo)
        key: Optional template identifier

    Returns:
        Grammatical number category

    Example:
        classify(1, "en")  # SINGULAR
        classify(5, "ru")  # PLURAL
    """
    return _classifier.classify(count, LocaleInfo.coerce(locale), key)


def get_classifier() -> GrammaticalNumberClassifier:
    """Get the global classifier instance."""
    return _classifier
