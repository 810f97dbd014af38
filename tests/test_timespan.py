"""Tests for time-span phrases."""

import logging
from datetime import timedelta

import pytest

from numerus.errors import InvalidArgumentError
from numerus.i18n.locale import locale_context
from numerus.i18n.protocols import GrammaticalGender, LocaleInfo, TimeUnit
from numerus.i18n.resources import StringResourceTable
from numerus.timespan import (
    TimeSpanHumanizer,
    humanize_timedelta,
    resource_key,
    split_duration,
    unit_gender,
)


class TestResourceKey:
    """Tests for unit resource keys."""

    def test_single_and_multiple(self):
        assert resource_key(TimeUnit.DAY, 1) == "TimeSpanHumanize_SingleDay"
        assert resource_key(TimeUnit.DAY, 0) == "TimeSpanHumanize_MultipleDays"
        assert resource_key(TimeUnit.MILLISECOND, 5) == "TimeSpanHumanize_MultipleMilliseconds"

    def test_unit_gender(self):
        assert unit_gender(TimeUnit.MINUTE, LocaleInfo.parse("ru-RU")) == GrammaticalGender.FEMININE
        assert unit_gender(TimeUnit.DAY, LocaleInfo.parse("ru")) is None
        assert unit_gender(TimeUnit.HOUR, LocaleInfo.parse("en")) is None


class TestSplitDuration:
    """Tests for split_duration."""

    def test_all_units(self):
        parts = split_duration(90_061_001, TimeUnit.DAY, TimeUnit.MILLISECOND)
        assert parts == [
            (TimeUnit.DAY, 1),
            (TimeUnit.HOUR, 1),
            (TimeUnit.MINUTE, 1),
            (TimeUnit.SECOND, 1),
            (TimeUnit.MILLISECOND, 1),
        ]

    def test_max_unit_absorbs_larger_units(self):
        parts = split_duration(15 * 86_400_000, TimeUnit.DAY, TimeUnit.DAY)
        assert parts == [(TimeUnit.DAY, 15)]

    def test_remainder_below_min_unit_dropped(self):
        parts = split_duration(1_500, TimeUnit.MINUTE, TimeUnit.SECOND)
        assert parts == [(TimeUnit.MINUTE, 0), (TimeUnit.SECOND, 1)]


class TestHumanizeEnglish:
    """Tests for English durations."""

    def test_precision(self):
        assert humanize_timedelta(timedelta(days=15)) == "2 weeks"
        assert humanize_timedelta(timedelta(days=15), precision=2) == "2 weeks, 1 day"
        assert humanize_timedelta(timedelta(seconds=90), precision=2) == "1 minute, 30 seconds"

    def test_zero_parts_skipped(self):
        delta = timedelta(weeks=1, minutes=5)
        assert humanize_timedelta(delta, precision=2) == "1 week, 5 minutes"

    def test_max_unit(self):
        assert humanize_timedelta(timedelta(days=15), max_unit=TimeUnit.DAY) == "15 days"
        assert humanize_timedelta(timedelta(days=1), max_unit="hour") == "24 hours"

    def test_separator(self):
        result = humanize_timedelta(timedelta(seconds=90), precision=2, separator=" and ")
        assert result == "1 minute and 30 seconds"

    def test_zero(self):
        assert humanize_timedelta(timedelta(0)) == "0 milliseconds"
        assert humanize_timedelta(timedelta(0), words=True) == "no time"
        assert humanize_timedelta(timedelta(milliseconds=500), min_unit="second") == "0 seconds"

    def test_negative_duration(self):
        assert humanize_timedelta(timedelta(days=-3)) == "3 days"

    def test_words(self):
        assert humanize_timedelta(timedelta(hours=3), words=True) == "three hours"
        assert humanize_timedelta(timedelta(hours=1), words=True) == "one hour"


class TestHumanizeLocales:
    """Tests for durations in other locales."""

    def test_russian_grammatical_number(self):
        assert humanize_timedelta(timedelta(days=1), locale="ru") == "1 день"
        assert humanize_timedelta(timedelta(days=3), locale="ru") == "3 дня"
        assert humanize_timedelta(timedelta(days=5), locale="ru") == "5 дней"
        assert humanize_timedelta(timedelta(days=21), locale="ru", max_unit="day") == "21 день"

    def test_russian_words_agree_in_gender(self):
        assert humanize_timedelta(timedelta(minutes=1), locale="ru", words=True) == "одна минута"
        assert humanize_timedelta(timedelta(minutes=2), locale="ru", words=True) == "две минуты"

    def test_french(self):
        assert humanize_timedelta(timedelta(days=1), locale="fr") == "1 jour"
        assert humanize_timedelta(timedelta(hours=2), locale="fr", words=True) == "deux heures"

    def test_portuguese_feminine_words(self):
        assert humanize_timedelta(timedelta(hours=1), locale="pt-BR", words=True) == "uma hora"

    def test_ambient_locale(self):
        with locale_context("nl"):
            assert humanize_timedelta(timedelta(days=2)) == "2 dagen"

    def test_missing_catalog_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger="numerus.i18n.resources"):
            assert humanize_timedelta(timedelta(days=2), locale="it") == "2 days"
        assert "using en" in caplog.text


class TestValidation:
    """Tests for rejected arguments."""

    def test_precision_must_be_positive(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            humanize_timedelta(timedelta(days=1), precision=0)
        assert exc_info.value.argument == "precision"

    def test_min_unit_above_max_unit(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            humanize_timedelta(timedelta(days=1), max_unit="minute", min_unit="hour")
        assert exc_info.value.argument == "min_unit"

    def test_unknown_unit(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            humanize_timedelta(timedelta(days=1), max_unit="fortnight")
        assert exc_info.value.argument == "max_unit"

    def test_not_a_timedelta(self):
        with pytest.raises(InvalidArgumentError):
            humanize_timedelta(3600)


class TestTimeSpanHumanizer:
    """Tests for TimeSpanHumanizer with a custom resource table."""

    def test_custom_catalog(self):
        table = StringResourceTable({
            "en": {
                "TimeSpanHumanize_SingleDay": "{0} day",
                "TimeSpanHumanize_MultipleDays": "{0} whole days",
            },
        })
        humanizer = TimeSpanHumanizer(resources=table)
        en = LocaleInfo.parse("en")

        assert humanizer.humanize(timedelta(days=4), en, max_unit="day") == "4 whole days"
        assert humanizer.humanize(timedelta(days=1), en, max_unit="day") == "1 day"
