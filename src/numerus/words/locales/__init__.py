"""Built-in locale word tables."""

from numerus.words.locales.dutch import DUTCH
from numerus.words.locales.english import ENGLISH
from numerus.words.locales.french import FRENCH
from numerus.words.locales.italian import ITALIAN
from numerus.words.locales.portuguese import PORTUGUESE
from numerus.words.locales.russian import RUSSIAN

__all__ = [
    "DUTCH",
    "ENGLISH",
    "FRENCH",
    "ITALIAN",
    "PORTUGUESE",
    "RUSSIAN",
]
