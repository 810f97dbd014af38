"""Shared fixtures for numerus tests."""

import pytest

from numerus.config import reset_config
from numerus.i18n.locale import set_locale


_ENV_VARS = (
    "NUMERUS_LOCALE",
    "NUMERUS_FALLBACK_LOCALE",
    "NUMERUS_LOG_LEVEL",
    "NUMERUS_CURRENCY",
    "LC_ALL",
    "LANG",
)


@pytest.fixture(autouse=True)
def clean_locale_state(monkeypatch):
    """Run every test with English defaults and no ambient locale override."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_config()
    set_locale(None)
    yield
    set_locale(None)
    reset_config()
