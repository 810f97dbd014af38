"""Tests for the main API functions."""

from datetime import timedelta

import pytest

import numerus as nm
from numerus.errors import InvalidArgumentError, UnsupportedLocaleError


class TestPackage:
    """Tests for the package namespace."""

    def test_exports(self):
        for name in nm.__all__:
            assert hasattr(nm, name), name

    def test_version(self):
        assert nm.__version__ == "0.1.0"


class TestToWords:
    """Tests for nm.to_words()."""

    def test_default_locale(self):
        """English is used when no locale is given or configured."""
        assert nm.to_words(1234) == "one thousand two hundred and thirty-four"

    def test_explicit_locale(self):
        assert nm.to_words(21, locale="fr") == "vingt et un"
        assert nm.to_words(1234, locale="nl") == "duizend tweehonderdvierendertig"

    def test_gender_as_string(self):
        assert nm.to_words(2, gender="feminine", locale="pt-BR") == "duas"
        assert nm.to_words(2, gender=nm.GrammaticalGender.FEMININE, locale="pt") == "duas"

    def test_ambient_locale(self):
        """The ambient locale applies only when no locale is passed."""
        with nm.locale_context("it"):
            assert nm.to_words(23) == "ventitré"
            assert nm.to_words(23, locale="en") == "twenty-three"

    def test_configured_locale(self):
        nm.configure(default_locale="ru")
        assert nm.to_words(21000) == "двадцать одна тысяча"

    def test_unsupported_locale_raises(self):
        """Missing word tables raise rather than falling back to English."""
        with pytest.raises(UnsupportedLocaleError) as exc_info:
            nm.to_words(5, locale="de")
        assert "en" in exc_info.value.details["supported"]

    def test_fraction_raises(self):
        with pytest.raises(InvalidArgumentError):
            nm.to_words(1.5)


class TestToOrdinalWords:
    """Tests for nm.to_ordinal_words()."""

    def test_ordinals(self):
        assert nm.to_ordinal_words(101) == "hundred and first"
        assert nm.to_ordinal_words(1_000_000, locale="it") == "milionesimo"
        assert nm.to_ordinal_words(2021, locale="pt") == "segundo milésimo vigésimo primeiro"

    def test_negative_raises(self):
        with pytest.raises(InvalidArgumentError):
            nm.to_ordinal_words(-1)


class TestToQuantity:
    """Tests for nm.to_quantity()."""

    def test_numeric(self):
        assert nm.to_quantity("man", 0) == "0 men"
        assert nm.to_quantity("case", 1234567, format="N2", locale="it") == "1.234.567,00 cases"

    def test_words(self):
        assert nm.to_quantity("process", 1200, "words") == "one thousand two hundred processes"

    def test_none(self):
        assert nm.to_quantity("men", 1, nm.ShowQuantityAs.NONE) == "man"


class TestResolveKey:
    """Tests for nm.resolve_key() and nm.classify()."""

    def test_resolve_key(self):
        assert nm.resolve_key("TimeSpanHumanize_MultipleDays", 22, "ru") == "TimeSpanHumanize_MultipleDays_Paucal"
        assert nm.resolve_key("TimeSpanHumanize_MultipleDays", 25, "ru") == "TimeSpanHumanize_MultipleDays"
        assert nm.resolve_key("DateHumanize_MultipleDaysAgo", 2, "fr") == "DateHumanize_MultipleDaysAgo_Dual"
        assert nm.resolve_key("TimeSpanHumanize_MultipleDays", 3) == "TimeSpanHumanize_MultipleDays"

    def test_classify(self):
        assert nm.classify(1) == nm.GrammaticalNumber.SINGULAR
        assert nm.classify(3, "ru") == nm.GrammaticalNumber.PAUCAL
        assert nm.classify(2, "fr", key="DateHumanize_MultipleDaysAgo") == nm.GrammaticalNumber.DUAL


class TestOrdinalize:
    """Tests for nm.ordinalize()."""

    def test_english_suffixes(self):
        assert nm.ordinalize(1) == "1st"
        assert nm.ordinalize(22) == "22nd"
        assert nm.ordinalize(113) == "113th"


class TestHumanizeTimedelta:
    """Tests for nm.humanize_timedelta()."""

    def test_humanize(self):
        assert nm.humanize_timedelta(timedelta(days=15), precision=2) == "2 weeks, 1 day"
        assert nm.humanize_timedelta(timedelta(days=3), locale="ru") == "3 дня"


class TestSupportsLocale:
    """Tests for nm.supports_locale()."""

    def test_supported(self):
        assert nm.supports_locale("en")
        assert nm.supports_locale("pt-BR")
        assert nm.supports_locale(nm.LocaleInfo.parse("ru_RU"))

    def test_unsupported(self):
        assert not nm.supports_locale("de")
        assert not nm.supports_locale("not a locale")
