"""Tests for configuration loading."""

import pytest

from numerus.config import (
    NumerusConfig,
    configure,
    configure_logging,
    get_config,
    load_config,
    reset_config,
)
from numerus.errors import ConfigError, ErrorCode


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        config = load_config({})
        assert config.default_locale == "en"
        assert config.fallback_locale == "en"
        assert config.log_level == "WARNING"
        assert config.default_currency is None

    def test_numerus_variables(self):
        config = load_config({
            "NUMERUS_LOCALE": "pt_BR",
            "NUMERUS_FALLBACK_LOCALE": "fr",
            "NUMERUS_LOG_LEVEL": "debug",
            "NUMERUS_CURRENCY": "eur",
        })
        assert config.default_locale == "pt_BR"
        assert config.fallback_locale == "fr"
        assert config.log_level == "DEBUG"
        assert config.default_currency == "EUR"

    def test_posix_locale_variables(self):
        assert load_config({"LANG": "ru_RU.UTF-8"}).default_locale == "ru_RU"
        assert load_config({"LC_ALL": "it_IT.UTF-8", "LANG": "ru_RU.UTF-8"}).default_locale == "it_IT"
        assert load_config({"NUMERUS_LOCALE": "nl", "LANG": "ru_RU.UTF-8"}).default_locale == "nl"

    def test_posix_c_locale_ignored(self):
        assert load_config({"LANG": "C.UTF-8"}).default_locale == "en"
        assert load_config({"LC_ALL": "POSIX"}).default_locale == "en"

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError) as exc_info:
            load_config({"NUMERUS_LOG_LEVEL": "LOUD"})
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID

    def test_to_dict(self):
        assert NumerusConfig().to_dict() == {
            "default_locale": "en",
            "fallback_locale": "en",
            "log_level": "WARNING",
            "default_currency": None,
        }


class TestGlobalConfig:
    """Tests for the process-wide configuration."""

    def test_reads_environment_once(self, monkeypatch):
        monkeypatch.setenv("NUMERUS_LOCALE", "fr")
        reset_config()
        assert get_config().default_locale == "fr"

        monkeypatch.setenv("NUMERUS_LOCALE", "ru")
        assert get_config().default_locale == "fr"

        reset_config()
        assert get_config().default_locale == "ru"

    def test_configure_overrides(self):
        config = configure(default_locale="it", default_currency="gbp")
        assert config is get_config()
        assert config.default_locale == "it"
        assert config.default_currency == "GBP"
        assert config.fallback_locale == "en"

    def test_configure_unknown_option(self):
        with pytest.raises(ConfigError) as exc_info:
            configure(language="it")
        assert "language" in exc_info.value.message

    def test_configure_invalid_value(self):
        with pytest.raises(ConfigError):
            configure(log_level="chatty")
        assert get_config().log_level == "WARNING"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_explicit_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr("logging.basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging("debug")

        assert calls[0]["level"] == "DEBUG"

    def test_level_from_config(self, monkeypatch):
        calls = []
        monkeypatch.setattr("logging.basicConfig", lambda **kwargs: calls.append(kwargs))
        configure(log_level="error")

        configure_logging()

        assert calls[0]["level"] == "ERROR"
