"""Ambient locale management.

The ambient locale is the caller-owned default consulted only by the
outermost entry points when no explicit locale is passed. It is kept per
thread; the rule engine underneath always receives an explicit LocaleInfo.

Example:
    from numerus.i18n.locale import locale_context, get_locale

    with locale_context("pt-BR"):
        get_locale()  # LocaleInfo(language="pt", region="BR")
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from numerus.config import get_config
from numerus.i18n.protocols import LocaleInfo

logger = logging.getLogger(__name__)


class LocaleManager:
    """Thread-safe locale management.

    Manages the current locale and provides fallback chain resolution.
    """

    def __init__(
        self,
        default_locale: str | None = None,
        fallback_locale: str | None = None,
    ):
        """Initialize locale manager.

        Args:
            default_locale: Default locale code (None reads the configuration)
            fallback_locale: Ultimate fallback locale (None reads the configuration)
        """
        self._default = default_locale
        self._fallback = fallback_locale
        self._current = threading.local()

    @property
    def default(self) -> LocaleInfo:
        """Get default locale."""
        return LocaleInfo.parse(self._default or get_config().default_locale)

    @property
    def fallback(self) -> LocaleInfo:
        """Get fallback locale."""
        return LocaleInfo.parse(self._fallback or get_config().fallback_locale)

    @property
    def current(self) -> LocaleInfo:
        """Get current locale for this thread."""
        locale = getattr(self._current, "locale", None)
        return locale if locale is not None else self.default

    @current.setter
    def current(self, value: LocaleInfo | None) -> None:
        """Set current locale for this thread."""
        self._current.locale = value

    def set_locale(self, locale: str | LocaleInfo | None) -> None:
        """Set the current locale.

        Args:
            locale: Locale tag or LocaleInfo; None restores the default
        """
        self.current = None if locale is None else LocaleInfo.coerce(locale)
        logger.debug(f"Ambient locale set to {self.current.tag}")

    def get_locale(self) -> LocaleInfo:
        """Get the current locale."""
        return self.current

    def resolve(self, locale: str | LocaleInfo | None) -> LocaleInfo:
        """Return the explicit locale if given, otherwise the current one."""
        if locale is None:
            return self.current
        return LocaleInfo.coerce(locale)

    def get_fallback_chain(self, locale: str | LocaleInfo | None = None) -> list[str]:
        """Get the fallback chain for a locale.

        The chain goes from specific to general:
        pt_BR -> pt -> en (fallback)

        Args:
            locale: Starting locale (default: current)

        Returns:
            List of locale codes to try in order
        """
        info = self.resolve(locale)
        chain = info.candidates()

        for code in self.fallback.candidates():
            if code not in chain:
                chain.append(code)

        return chain


# Global locale manager instance
_locale_manager = LocaleManager()


def get_locale_manager() -> LocaleManager:
    """Get the global locale manager."""
    return _locale_manager


def set_locale(locale: str | LocaleInfo | None) -> None:
    """Set the current locale for this thread."""
    _locale_manager.set_locale(locale)


def get_locale() -> LocaleInfo:
    """Get the current locale."""
    return _locale_manager.get_locale()


def resolve_locale(locale: str | LocaleInfo | None) -> LocaleInfo:
    """Return ``locale`` as a LocaleInfo, defaulting to the ambient locale."""
    return _locale_manager.resolve(locale)


class locale_context:
    """Context manager for temporary locale change.

    Example:
        with locale_context("ru"):
            to_words(21, gender=GrammaticalGender.FEMININE)
        # Original locale restored
    """

    def __init__(self, locale: str | LocaleInfo):
        self.locale = LocaleInfo.coerce(locale)
        self._previous: LocaleInfo | None = None

    def __enter__(self) -> "locale_context":
        self._previous = getattr(_locale_manager._current, "locale", None)
        set_locale(self.locale)
        return self

    def __exit__(self, *args: Any) -> None:
        _locale_manager.current = self._previous
