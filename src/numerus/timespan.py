"""Time-span phrases ("2 weeks, 1 day", "три дня").

A duration is bucketed into weeks, days, hours, minutes, seconds and
milliseconds between a lower and an upper unit; the upper unit absorbs
everything above it. The largest ``precision`` non-zero parts are rendered
through the resource-key resolver and the string resource table, with the
count in digits or in words.

Usage:
    from datetime import timedelta
    from numerus.timespan import humanize_timedelta

    humanize_timedelta(timedelta(days=15), precision=2)           # "2 weeks, 1 day"
    humanize_timedelta(timedelta(days=3), locale="ru")            # "3 дня"
    humanize_timedelta(timedelta(hours=2), locale="fr", words=True)  # "deux heures"
"""

from __future__ import annotations

import logging
from datetime import timedelta

from numerus.errors import InvalidArgumentError
from numerus.i18n.locale import resolve_locale
from numerus.i18n.protocols import GrammaticalGender, LocaleInfo, TimeUnit
from numerus.i18n.resources import StringResourceTable, get_resource_table
from numerus.words.registry import to_cardinal_words

logger = logging.getLogger(__name__)


ZERO_KEY = "TimeSpanHumanize_Zero"

# Gender of the unit nouns, for counts rendered as words
_UNIT_GENDERS: dict[str, dict[TimeUnit, GrammaticalGender]] = {
    "ru": {
        TimeUnit.MILLISECOND: GrammaticalGender.FEMININE,
        TimeUnit.SECOND: GrammaticalGender.FEMININE,
        TimeUnit.MINUTE: GrammaticalGender.FEMININE,
        TimeUnit.WEEK: GrammaticalGender.FEMININE,
    },
    "fr": {
        TimeUnit.MILLISECOND: GrammaticalGender.FEMININE,
        TimeUnit.SECOND: GrammaticalGender.FEMININE,
        TimeUnit.MINUTE: GrammaticalGender.FEMININE,
        TimeUnit.HOUR: GrammaticalGender.FEMININE,
        TimeUnit.WEEK: GrammaticalGender.FEMININE,
    },
    "pt": {
        TimeUnit.HOUR: GrammaticalGender.FEMININE,
        TimeUnit.WEEK: GrammaticalGender.FEMININE,
    },
}


def resource_key(unit: TimeUnit, count: int) -> str:
    """Base resource key of a unit ("TimeSpanHumanize_MultipleDays")."""
    name = unit.value.capitalize()
    if count == 1:
        return f"TimeSpanHumanize_Single{name}"
    return f"TimeSpanHumanize_Multiple{name}s"


def unit_gender(unit: TimeUnit, locale: LocaleInfo) -> GrammaticalGender | None:
    for code in locale.candidates():
        if code in _UNIT_GENDERS:
            return _UNIT_GENDERS[code].get(unit)
    return None


def split_duration(
    milliseconds: int,
    max_unit: TimeUnit = TimeUnit.WEEK,
    min_unit: TimeUnit = TimeUnit.MILLISECOND,
) -> list[tuple[TimeUnit, int]]:
    """Bucket a non-negative duration, largest unit first.

    Units outside ``[min_unit, max_unit]`` are not used; the remainder below
    ``min_unit`` is dropped.

    Example:
        split_duration(90_061_001, TimeUnit.DAY, TimeUnit.SECOND)
        # -> [(DAY, 1), (HOUR, 1), (MINUTE, 1), (SECOND, 1)]
    """
    parts: list[tuple[TimeUnit, int]] = []
    remaining = milliseconds
    for unit in reversed(list(TimeUnit)):
        if unit.rank > max_unit.rank or unit.rank < min_unit.rank:
            continue
        count, remaining = divmod(remaining, unit.milliseconds)
        parts.append((unit, count))
    return parts


class TimeSpanHumanizer:
    """Renders durations with locale templates.

    Example:
        humanizer = TimeSpanHumanizer()
        humanizer.humanize(timedelta(days=2), LocaleInfo.parse("fr"))  # "2 jours"
    """

    def __init__(self, resources: StringResourceTable | None = None) -> None:
        self.resources = resources or get_resource_table()

    def humanize(
        self,
        delta: timedelta,
        locale: LocaleInfo,
        precision: int = 1,
        max_unit: TimeUnit | str = TimeUnit.WEEK,
        min_unit: TimeUnit | str = TimeUnit.MILLISECOND,
        separator: str = ", ",
        words: bool = False,
    ) -> str:
        if not isinstance(delta, timedelta):
            raise InvalidArgumentError(
                f"Expected a timedelta, got {type(delta).__name__}",
                argument="delta",
            )
        if precision < 1:
            raise InvalidArgumentError(
                f"Precision must be at least 1, got {precision}",
                argument="precision",
            )
        max_unit = _coerce_unit(max_unit, "max_unit")
        min_unit = _coerce_unit(min_unit, "min_unit")
        if min_unit.rank > max_unit.rank:
            raise InvalidArgumentError(
                f"min_unit {min_unit.value} is larger than max_unit {max_unit.value}",
                argument="min_unit",
            )

        milliseconds = abs(delta) // timedelta(milliseconds=1)
        parts = [
            (unit, count)
            for unit, count in split_duration(milliseconds, max_unit, min_unit)
            if count
        ][:precision]

        if not parts:
            return self._zero(locale, min_unit, words)

        return separator.join(self._render(unit, count, locale, words) for unit, count in parts)

    def _render(self, unit: TimeUnit, count: int, locale: LocaleInfo, words: bool) -> str:
        template = self.resources.template(resource_key(unit, count), count, locale)
        if words:
            text = to_cardinal_words(count, locale, unit_gender(unit, locale))
        else:
            text = str(count)
        return template.format(text)

    def _zero(self, locale: LocaleInfo, min_unit: TimeUnit, words: bool) -> str:
        if words:
            return self.resources.template(ZERO_KEY, 0, locale)
        return self._render(min_unit, 0, locale, words=False)


def _coerce_unit(unit: TimeUnit | str, argument: str) -> TimeUnit:
    if isinstance(unit, TimeUnit):
        return unit
    try:
        return TimeUnit(str(unit).lower())
    except ValueError:
        choices = ", ".join(u.value for u in TimeUnit)
        raise InvalidArgumentError(
            f"Unknown time unit: '{unit}'",
            argument=argument,
            hint=f"Use one of: {choices}",
        ) from None


# Global instance
_humanizer = TimeSpanHumanizer()


def humanize_timedelta(
    delta: timedelta,
    precision: int = 1,
    locale: str | LocaleInfo | None = None,
    max_unit: TimeUnit | str = TimeUnit.WEEK,
    min_unit: TimeUnit | str = TimeUnit.MILLISECOND,
    separator: str = ", ",
    words: bool = False,
) -> str:
    """Render a duration as text.

    Args:
        delta: Duration; the sign is ignored
        precision: Number of non-zero parts to keep
        locale: Target locale (default: ambient locale)
        max_unit: Largest unit used
        min_unit: Smallest unit used
        separator: Text between parts
        words: Spell the counts out

    Returns:
        The rendered duration
    """
    return _humanizer.humanize(
        delta,
        resolve_locale(locale),
        precision=precision,
        max_unit=max_unit,
        min_unit=min_unit,
        separator=separator,
        words=words,
    )
