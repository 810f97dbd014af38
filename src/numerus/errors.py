"""Error types raised by numerus.

Every failure is a deterministic logic error: conversions either succeed
completely or raise before producing any text. The integer error codes double
as process exit codes for the command-line interface.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


# =============================================================================
# Error Codes
# =============================================================================


class ErrorCode(Enum):
    """Standard numerus error codes."""

    # General errors (1-9)
    GENERAL_ERROR = 1
    USAGE_ERROR = 2

    # Locale errors (10-19)
    UNSUPPORTED_LOCALE = 10
    INVALID_LOCALE = 11
    MISSING_RESOURCE = 12

    # Argument errors (20-29)
    INVALID_ARGUMENT = 20
    INVALID_FORMAT = 21

    # Configuration errors (30-39)
    CONFIG_INVALID = 30


# =============================================================================
# Exception Classes
# =============================================================================


class NumerusError(Exception):
    """Base exception for numerus errors.

    Attributes:
        message: Error message
        code: Error code
        details: Additional error details
        hint: Helpful hint for resolution
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.GENERAL_ERROR,
        details: dict[str, Any] | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.hint = hint

    def __str__(self) -> str:
        parts = [self.message]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        return "\n".join(parts)


class UnsupportedLocaleError(NumerusError, LookupError):
    """No rule table is registered for the requested locale.

    Raised instead of silently falling back to another locale's rules.
    """

    def __init__(
        self,
        locale: str,
        supported: list[str] | None = None,
        feature: str = "number words",
    ) -> None:
        supported = sorted(supported or [])
        hint = f"Supported locales: {', '.join(supported)}" if supported else None
        super().__init__(
            message=f"No {feature} available for locale '{locale}'",
            code=ErrorCode.UNSUPPORTED_LOCALE,
            details={"locale": locale, "feature": feature, "supported": supported},
            hint=hint,
        )
        self.locale = locale


class InvalidArgumentError(NumerusError, ValueError):
    """A required parameter is missing, malformed or conflicts with another."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        hint: str | None = None,
        code: ErrorCode = ErrorCode.INVALID_ARGUMENT,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            details={"argument": argument} if argument else {},
            hint=hint,
        )
        self.argument = argument


class InvalidFormatError(InvalidArgumentError):
    """A numeric format specifier could not be understood."""

    def __init__(self, specifier: str) -> None:
        super().__init__(
            message=f"Unknown number format specifier: '{specifier}'",
            argument="format",
            hint="Use one of N<digits>, F<digits>, C<digits>, P<digits> or D.",
            code=ErrorCode.INVALID_FORMAT,
        )
        self.specifier = specifier


class InvalidLocaleError(InvalidArgumentError):
    """A locale tag could not be parsed."""

    def __init__(self, tag: str) -> None:
        super().__init__(
            message=f"Invalid locale tag: '{tag}'",
            argument="locale",
            hint="Use a tag such as 'en', 'pt-BR' or 'pt_BR'.",
            code=ErrorCode.INVALID_LOCALE,
        )
        self.tag = tag


class ConfigError(NumerusError):
    """Configuration could not be loaded."""

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message=message, code=ErrorCode.CONFIG_INVALID, hint=hint)


class MissingResourceError(NumerusError, KeyError):
    """No template is stored under a resource key, even after fallback."""

    def __init__(self, key: str, locale: str) -> None:
        super().__init__(
            message=f"No resource '{key}' for locale '{locale}'",
            code=ErrorCode.MISSING_RESOURCE,
            details={"key": key, "locale": locale},
        )
        self.key = key
        self.locale = locale

    def __str__(self) -> str:
        return self.message
