"""Tests for resource-key resolution and the string resource table."""

import logging

import pytest

from numerus.errors import MissingResourceError
from numerus.i18n.formatter import (
    ResourceKeyResolver,
    dual_suffix,
    no_suffix,
    paucal_suffix,
    resolve_resource_key,
)
from numerus.i18n.protocols import GrammaticalNumber, LocaleInfo
from numerus.i18n.resources import StringResourceTable, get_resource_table

DAYS = "TimeSpanHumanize_MultipleDays"
DAYS_AGO = "DateHumanize_MultipleDaysAgo"


class TestSuffixStrategies:
    """Tests for the per-locale suffix functions."""

    def test_no_suffix(self):
        for category in GrammaticalNumber:
            assert no_suffix(DAYS, category) == ""

    def test_paucal_suffix(self):
        assert paucal_suffix(DAYS, GrammaticalNumber.SINGULAR) == "_Singular"
        assert paucal_suffix(DAYS, GrammaticalNumber.PAUCAL) == "_Paucal"
        assert paucal_suffix(DAYS, GrammaticalNumber.PLURAL) == ""

    def test_dual_suffix(self):
        assert dual_suffix(DAYS_AGO, GrammaticalNumber.DUAL) == "_Dual"
        assert dual_suffix(DAYS_AGO, GrammaticalNumber.PLURAL) == ""


class TestResourceKeyResolver:
    """Tests for ResourceKeyResolver."""

    def test_default_locale_keeps_base_key(self):
        for count in [0, 1, 2, 5]:
            assert resolve_resource_key(DAYS, count, "en") == DAYS
            assert resolve_resource_key(DAYS, count, "pt-BR") == DAYS

    def test_paucal_locale(self):
        assert resolve_resource_key(DAYS, 1, "ru") == f"{DAYS}_Singular"
        assert resolve_resource_key(DAYS, 21, "ru") == f"{DAYS}_Singular"
        assert resolve_resource_key(DAYS, 3, "ru") == f"{DAYS}_Paucal"
        assert resolve_resource_key(DAYS, 5, "ru") == DAYS
        assert resolve_resource_key(DAYS, 11, "ru") == DAYS
        assert resolve_resource_key(DAYS, -3, "uk") == f"{DAYS}_Paucal"

    def test_fractional_count_uses_plural_key(self):
        assert resolve_resource_key(DAYS, 1.5, "ru") == DAYS
        assert resolve_resource_key(DAYS, 2.5, "ru") == DAYS
        assert resolve_resource_key(DAYS, 2.0, "ru") == f"{DAYS}_Paucal"

    def test_dual_is_key_scoped(self):
        """Two days ago has its own key in French, two days does not."""
        two = resolve_resource_key(DAYS_AGO, 2, "fr")
        three = resolve_resource_key(DAYS_AGO, 3, "fr")

        assert two == f"{DAYS_AGO}_Dual"
        assert three == DAYS_AGO
        assert two != three
        assert resolve_resource_key(DAYS, 2, "fr") == DAYS

    def test_register_strategy(self):
        resolver = ResourceKeyResolver()
        resolver.register_strategy("pl", paucal_suffix)

        assert resolver.get_strategy(LocaleInfo.parse("pl")) is paucal_suffix
        assert resolver.get_strategy(LocaleInfo.parse("de")) is no_suffix
        # The default classifier has no Polish rule, so two-form applies
        assert resolver.resolve(DAYS, 1, LocaleInfo.parse("pl")) == f"{DAYS}_Singular"
        assert resolver.resolve(DAYS, 3, LocaleInfo.parse("pl")) == DAYS


class TestStringResourceTable:
    """Tests for StringResourceTable."""

    def test_template_by_count(self):
        table = get_resource_table()
        ru = LocaleInfo.parse("ru")

        assert table.template(DAYS, 21, ru) == "{0} день"
        assert table.template(DAYS, 3, ru) == "{0} дня"
        assert table.template(DAYS, 25, ru) == "{0} дней"

    def test_dual_template(self):
        table = get_resource_table()
        fr = LocaleInfo.parse("fr")

        assert table.template(DAYS_AGO, 2, fr) == "avant-hier"
        assert table.template(DAYS_AGO, 3, fr) == "il y a {0} jours"

    def test_resolved_key_falls_back_to_base_key(self):
        """Single-unit keys carry no paucal variants."""
        table = get_resource_table()
        assert table.template("TimeSpanHumanize_SingleDay", 1, LocaleInfo.parse("ru")) == "{0} день"

    def test_region_uses_language_catalog(self):
        table = get_resource_table()
        assert table.template(DAYS, 2, LocaleInfo.parse("pt-BR")) == "{0} dias"

    def test_missing_locale_falls_back(self, caplog):
        table = get_resource_table()

        with caplog.at_level(logging.WARNING, logger="numerus.i18n.resources"):
            template = table.template(DAYS, 2, LocaleInfo.parse("it"))

        assert template == "{0} days"
        assert "using en" in caplog.text

    def test_lookup(self):
        table = get_resource_table()
        ru = LocaleInfo.parse("ru")

        assert table.lookup(f"{DAYS}_Paucal", ru) == "{0} дня"
        assert table.lookup("NoSuchKey", ru) is None

    def test_missing_key_raises(self):
        table = StringResourceTable(catalogs={"en": {}})

        with pytest.raises(MissingResourceError) as exc_info:
            table.template(DAYS, 2, LocaleInfo.parse("en"))

        assert exc_info.value.key == DAYS
        assert isinstance(exc_info.value, KeyError)

    def test_add_extends_catalog(self):
        table = StringResourceTable(catalogs={"en": {DAYS: "{0} days"}})
        table.add("de", {DAYS: "{0} Tage"})

        assert table.locales == ["de", "en"]
        assert table.template(DAYS, 2, LocaleInfo.parse("de")) == "{0} Tage"
