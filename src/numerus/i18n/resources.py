"""In-memory string resource table.

Holds the templates the time-span composer fills in, keyed by the concrete
resource keys the resolver produces ("TimeSpanHumanize_MultipleDays_Paucal").
Templates use a ``{0}`` placeholder for the rendered count.

Lookup walks the fallback chain (pt_BR -> pt -> en); when the resolved key is
missing from a locale's catalog, the unsuffixed base key is tried before
moving on.
"""

from __future__ import annotations

import logging
from typing import Mapping

from numerus.errors import MissingResourceError
from numerus.i18n.formatter import ResourceKeyResolver, get_resolver
from numerus.i18n.locale import get_locale_manager
from numerus.i18n.protocols import LocaleInfo

logger = logging.getLogger(__name__)


# ==============================================================================
# Built-in Catalogs
# ==============================================================================

ENGLISH_RESOURCES: dict[str, str] = {
    "TimeSpanHumanize_Zero": "no time",
    "TimeSpanHumanize_SingleMillisecond": "{0} millisecond",
    "TimeSpanHumanize_MultipleMilliseconds": "{0} milliseconds",
    "TimeSpanHumanize_SingleSecond": "{0} second",
    "TimeSpanHumanize_MultipleSeconds": "{0} seconds",
    "TimeSpanHumanize_SingleMinute": "{0} minute",
    "TimeSpanHumanize_MultipleMinutes": "{0} minutes",
    "TimeSpanHumanize_SingleHour": "{0} hour",
    "TimeSpanHumanize_MultipleHours": "{0} hours",
    "TimeSpanHumanize_SingleDay": "{0} day",
    "TimeSpanHumanize_MultipleDays": "{0} days",
    "TimeSpanHumanize_SingleWeek": "{0} week",
    "TimeSpanHumanize_MultipleWeeks": "{0} weeks",
    "DateHumanize_MultipleDaysAgo": "{0} days ago",
    "DateHumanize_MultipleDaysFromNow": "{0} days from now",
}

FRENCH_RESOURCES: dict[str, str] = {
    "TimeSpanHumanize_Zero": "temps nul",
    "TimeSpanHumanize_SingleMillisecond": "{0} milliseconde",
    "TimeSpanHumanize_MultipleMilliseconds": "{0} millisecondes",
    "TimeSpanHumanize_SingleSecond": "{0} seconde",
    "TimeSpanHumanize_MultipleSeconds": "{0} secondes",
    "TimeSpanHumanize_SingleMinute": "{0} minute",
    "TimeSpanHumanize_MultipleMinutes": "{0} minutes",
    "TimeSpanHumanize_SingleHour": "{0} heure",
    "TimeSpanHumanize_MultipleHours": "{0} heures",
    "TimeSpanHumanize_SingleDay": "{0} jour",
    "TimeSpanHumanize_MultipleDays": "{0} jours",
    "TimeSpanHumanize_SingleWeek": "{0} semaine",
    "TimeSpanHumanize_MultipleWeeks": "{0} semaines",
    "DateHumanize_MultipleDaysAgo": "il y a {0} jours",
    "DateHumanize_MultipleDaysAgo_Dual": "avant-hier",
    "DateHumanize_MultipleDaysFromNow": "dans {0} jours",
    "DateHumanize_MultipleDaysFromNow_Dual": "après-demain",
}

DUTCH_RESOURCES: dict[str, str] = {
    "TimeSpanHumanize_Zero": "geen tijd",
    "TimeSpanHumanize_SingleMillisecond": "{0} milliseconde",
    "TimeSpanHumanize_MultipleMilliseconds": "{0} milliseconden",
    "TimeSpanHumanize_SingleSecond": "{0} seconde",
    "TimeSpanHumanize_MultipleSeconds": "{0} seconden",
    "TimeSpanHumanize_SingleMinute": "{0} minuut",
    "TimeSpanHumanize_MultipleMinutes": "{0} minuten",
    "TimeSpanHumanize_SingleHour": "{0} uur",
    "TimeSpanHumanize_MultipleHours": "{0} uur",
    "TimeSpanHumanize_SingleDay": "{0} dag",
    "TimeSpanHumanize_MultipleDays": "{0} dagen",
    "TimeSpanHumanize_SingleWeek": "{0} week",
    "TimeSpanHumanize_MultipleWeeks": "{0} weken",
    "DateHumanize_MultipleDaysAgo": "{0} dagen geleden",
    "DateHumanize_MultipleDaysFromNow": "over {0} dagen",
}

PORTUGUESE_RESOURCES: dict[str, str] = {
    "TimeSpanHumanize_Zero": "sem horário",
    "TimeSpanHumanize_SingleMillisecond": "{0} milissegundo",
    "TimeSpanHumanize_MultipleMilliseconds": "{0} milissegundos",
    "TimeSpanHumanize_SingleSecond": "{0} segundo",
    "TimeSpanHumanize_MultipleSeconds": "{0} segundos",
    "TimeSpanHumanize_SingleMinute": "{0} minuto",
    "TimeSpanHumanize_MultipleMinutes": "{0} minutos",
    "TimeSpanHumanize_SingleHour": "{0} hora",
    "TimeSpanHumanize_MultipleHours": "{0} horas",
    "TimeSpanHumanize_SingleDay": "{0} dia",
    "TimeSpanHumanize_MultipleDays": "{0} dias",
    "TimeSpanHumanize_SingleWeek": "{0} semana",
    "TimeSpanHumanize_MultipleWeeks": "{0} semanas",
    "DateHumanize_MultipleDaysAgo": "{0} dias atrás",
    "DateHumanize_MultipleDaysFromNow": "em {0} dias",
}

RUSSIAN_RESOURCES: dict[str, str] = {
    "TimeSpanHumanize_Zero": "нет времени",
    "TimeSpanHumanize_SingleMillisecond": "{0} миллисекунда",
    "TimeSpanHumanize_MultipleMilliseconds": "{0} миллисекунд",
    "TimeSpanHumanize_MultipleMilliseconds_Singular": "{0} миллисекунда",
    "TimeSpanHumanize_MultipleMilliseconds_Paucal": "{0} миллисекунды",
    "TimeSpanHumanize_SingleSecond": "{0} секунда",
    "TimeSpanHumanize_MultipleSeconds": "{0} секунд",
    "TimeSpanHumanize_MultipleSeconds_Singular": "{0} секунда",
    "TimeSpanHumanize_MultipleSeconds_Paucal": "{0} секунды",
    "TimeSpanHumanize_SingleMinute": "{0} минута",
    "TimeSpanHumanize_MultipleMinutes": "{0} минут",
    "TimeSpanHumanize_MultipleMinutes_Singular": "{0} минута",
    "TimeSpanHumanize_MultipleMinutes_Paucal": "{0} минуты",
    "TimeSpanHumanize_SingleHour": "{0} час",
    "TimeSpanHumanize_MultipleHours": "{0} часов",
    "TimeSpanHumanize_MultipleHours_Singular": "{0} час",
    "TimeSpanHumanize_MultipleHours_Paucal": "{0} часа",
    "TimeSpanHumanize_SingleDay": "{0} день",
    "TimeSpanHumanize_MultipleDays": "{0} дней",
    "TimeSpanHumanize_MultipleDays_Singular": "{0} день",
    "TimeSpanHumanize_MultipleDays_Paucal": "{0} дня",
    "TimeSpanHumanize_SingleWeek": "{0} неделя",
    "TimeSpanHumanize_MultipleWeeks": "{0} недель",
    "TimeSpanHumanize_MultipleWeeks_Singular": "{0} неделя",
    "TimeSpanHumanize_MultipleWeeks_Paucal": "{0} недели",
    "DateHumanize_MultipleDaysAgo": "{0} дней назад",
    "DateHumanize_MultipleDaysAgo_Singular": "{0} день назад",
    "DateHumanize_MultipleDaysAgo_Paucal": "{0} дня назад",
    "DateHumanize_MultipleDaysFromNow": "через {0} дней",
    "DateHumanize_MultipleDaysFromNow_Singular": "через {0} день",
    "DateHumanize_MultipleDaysFromNow_Paucal": "через {0} дня",
}


# ==============================================================================
# Resource Table
# ==============================================================================

class StringResourceTable:
    """Locale-keyed template catalogs with fallback.

    Example:
        table = StringResourceTable()
        ru = LocaleInfo.parse("ru")

        table.lookup("TimeSpanHumanize_MultipleDays_Paucal", ru)  # "{0} дня"
        table.template("TimeSpanHumanize_MultipleDays", 3, ru)    # "{0} дня"
        table.template("TimeSpanHumanize_MultipleDays", 25, ru)   # "{0} дней"
    """

    def __init__(
        self,
        catalogs: Mapping[str, Mapping[str, str]] | None = None,
        resolver: ResourceKeyResolver | None = None,
    ) -> None:
        self._catalogs: dict[str, dict[str, str]] = {}
        self._resolver = resolver or get_resolver()
        if catalogs is None:
            catalogs = {
                "en": ENGLISH_RESOURCES,
                "fr": FRENCH_RESOURCES,
                "nl": DUTCH_RESOURCES,
                "pt": PORTUGUESE_RESOURCES,
                "ru": RUSSIAN_RESOURCES,
            }
        for code, entries in catalogs.items():
            self.add(code, entries)

    def add(self, locale_code: str, entries: Mapping[str, str]) -> None:
        """Add or extend the catalog of a locale."""
        self._catalogs.setdefault(locale_code, {}).update(entries)

    @property
    def locales(self) -> list[str]:
        """Locale codes with a catalog."""
        return sorted(self._catalogs)

    def lookup(self, key: str, locale: LocaleInfo) -> str | None:
        """Return the template stored under ``key``, walking the fallback chain."""
        for code in get_locale_manager().get_fallback_chain(locale):
            catalog = self._catalogs.get(code)
            if catalog is not None and key in catalog:
                if code not in locale.candidates():
                    logger.warning(f"Resource {key!r} missing for {locale.tag}, using {code}")
                return catalog[key]
        return None

    def template(self, base_key: str, count: float | int, locale: LocaleInfo) -> str:
        """Return the template for ``base_key`` describing ``count`` items.

        Raises:
            MissingResourceError: If neither the resolved nor the base key exists
        """
        resolved = self._resolver.resolve(base_key, count, locale)

        for code in get_locale_manager().get_fallback_chain(locale):
            catalog = self._catalogs.get(code)
            if catalog is None:
                continue
            if code not in locale.candidates():
                logger.warning(f"No resources for {locale.tag}, using {code}")
            if resolved in catalog:
                return catalog[resolved]
            if base_key in catalog:
                logger.debug(f"Resource {resolved!r} missing in {code}, using {base_key!r}")
                return catalog[base_key]

        raise MissingResourceError(resolved, locale.tag)


# Global instance
_resources = StringResourceTable()


def get_resource_table() -> StringResourceTable:
    """Get the global resource table."""
    return _resources
