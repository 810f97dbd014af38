"""Process-wide configuration for numerus.

Configuration is read from environment variables once, on first use, and is
never mutated by the conversion code itself. Applications that need different
values call ``configure`` during start-up.

Environment variables:
    NUMERUS_LOCALE:           default ambient locale (falls back to LC_ALL / LANG, then "en")
    NUMERUS_FALLBACK_LOCALE:  locale whose resources are used when a locale has none ("en")
    NUMERUS_LOG_LEVEL:        level applied by ``configure_logging`` ("WARNING")
    NUMERUS_CURRENCY:         ISO 4217 code overriding the per-locale default currency

Usage:
    >>> from numerus.config import get_config, configure
    >>> get_config().default_locale
    'en'
    >>> configure(default_locale="pt_BR")
"""

from __future__ import annotations

import dataclasses
import logging
import os
import threading
from dataclasses import dataclass
from typing import Any, Mapping

from numerus.errors import ConfigError

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class NumerusConfig:
    """Resolved configuration values.

    Attributes:
        default_locale: Locale used when an entry point receives no locale.
        fallback_locale: Locale whose string resources stand in for a missing locale.
        log_level: Logging level name for ``configure_logging``.
        default_currency: Currency code for "C" formats, or None for the locale default.
    """

    default_locale: str = "en"
    fallback_locale: str = "en"
    log_level: str = "WARNING"
    default_currency: str | None = None

    def __post_init__(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level: {self.log_level}",
                hint=f"Use one of {', '.join(_LOG_LEVELS)}.",
            )
        object.__setattr__(self, "log_level", self.log_level.upper())
        if self.default_currency is not None:
            object.__setattr__(self, "default_currency", self.default_currency.upper())

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return dataclasses.asdict(self)


def _system_locale(environ: Mapping[str, str]) -> str | None:
    """Derive a locale tag from POSIX environment variables."""
    for var in ("LC_ALL", "LANG"):
        value = environ.get(var, "")
        # "C" and "POSIX" carry no language
        tag = value.split(".")[0]
        if tag and tag not in ("C", "POSIX"):
            return tag
    return None


def load_config(environ: Mapping[str, str] | None = None) -> NumerusConfig:
    """Build configuration from environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ``.

    Returns:
        NumerusConfig instance.
    """
    env = os.environ if environ is None else environ

    default_locale = env.get("NUMERUS_LOCALE") or _system_locale(env) or "en"
    config = NumerusConfig(
        default_locale=default_locale,
        fallback_locale=env.get("NUMERUS_FALLBACK_LOCALE") or "en",
        log_level=env.get("NUMERUS_LOG_LEVEL") or "WARNING",
        default_currency=env.get("NUMERUS_CURRENCY") or None,
    )
    logger.debug(f"Loaded configuration: {config.to_dict()}")
    return config


# =============================================================================
# Global Configuration
# =============================================================================

_config: NumerusConfig | None = None
_config_lock = threading.Lock()


def get_config() -> NumerusConfig:
    """Get the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = load_config()
    return _config


def configure(**overrides: Any) -> NumerusConfig:
    """Replace the process-wide configuration.

    Args:
        **overrides: Fields of NumerusConfig to change.

    Returns:
        The new configuration.

    Raises:
        ConfigError: If an override names an unknown field or has an invalid value.
    """
    global _config
    known = {f.name for f in dataclasses.fields(NumerusConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise ConfigError(
            f"Unknown configuration option(s): {', '.join(sorted(unknown))}",
            hint=f"Valid options: {', '.join(sorted(known))}",
        )

    with _config_lock:
        base = _config if _config is not None else load_config()
        _config = dataclasses.replace(base, **overrides)
    return _config


def reset_config() -> None:
    """Forget the loaded configuration so the next access re-reads the environment."""
    global _config
    with _config_lock:
        _config = None


def configure_logging(level: str | None = None) -> None:
    """Attach a basic stderr handler to the root logger.

    Only the command-line interface calls this; the library never installs handlers.
    """
    logging.basicConfig(
        level=(level or get_config().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
