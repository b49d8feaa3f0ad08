"""
Read-only lookup tables used when ranking and rendering.

- Category wording for brief reports
- Preferred order of language sections
- Language code to display name (ISO 639 via pycountry, plus contest overrides)
"""

from functools import lru_cache
from types import MappingProxyType
from typing import NamedTuple

import pycountry


class CategoryWording(NamedTuple):
    """How to talk about a category in a one-line summary."""
    phrase: str  # what was read, e.g. "books"
    actor: str  # who reads it, e.g. "bookworm"
    unit: str  # what the count measures, e.g. "pages"


CATEGORY_WORDING = MappingProxyType({
    "Book": CategoryWording("books", "bookworm", "pages"),
    "Manga": CategoryWording("manga", "manga fan", "pages"),
    "Net": CategoryWording("web pages", "netizen", "screens"),
    "Full game": CategoryWording("full-text games", "gamer", "screens"),
    "Game": CategoryWording("games", "gamer", "screens"),
    "Lyric": CategoryWording("song lyrics", "music lover", "songs"),
    "Subs": CategoryWording("subtitles", "film buff", "minutes"),
    "News": CategoryWording("news", "news hound", "articles"),
    "Nico": CategoryWording("Nico Nico videos", "commenter", "minutes"),
    "Sentences": CategoryWording("sentences", "sentence miner", "sentences"),
})

# Used for categories the contest adds that we have no wording for
GENERIC_WORDING = CategoryWording("raw counts", "thing reader", "raw units")

# Language sections are shown in this order; anything else follows alphabetically
LANGUAGE_PREFERENCE = ("jp", "zh", "ko", "en", "fr", "de", "es", "it", "ru", "pt")

# Contest codes that differ from ISO 639
LANGUAGE_OVERRIDES = MappingProxyType({
    "jp": "Japanese",
})

UNIDENTIFIED_LANGUAGE = "unidentified"


def category_wording(category: str) -> CategoryWording:
    """Wording for a category, falling back to generic terms."""
    return CATEGORY_WORDING.get(category, GENERIC_WORDING)


def language_sort_key(code: str) -> tuple:
    """
    Sort key putting preferred languages first, in preference order,
    and the rest after them alphabetically.
    """
    if code in LANGUAGE_PREFERENCE:
        return (0, LANGUAGE_PREFERENCE.index(code), "")
    return (1, 0, code)


@lru_cache(maxsize=None)
def language_name(code: str) -> str:
    """
    Display name for a contest language code.

    Args:
        code: Two or three letter code as used by the contest ("jp", "zh")

    Returns:
        English language name, or "unidentified"
    """
    key = code.strip().lower()
    if key in LANGUAGE_OVERRIDES:
        return LANGUAGE_OVERRIDES[key]

    language = None
    if len(key) == 2:
        language = pycountry.languages.get(alpha_2=key)
    elif len(key) == 3:
        language = pycountry.languages.get(alpha_3=key)

    if language is None:
        return UNIDENTIFIED_LANGUAGE
    return language.name
