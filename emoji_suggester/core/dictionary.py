# emoji_suggester/core/dictionary.py
"""
Keyword dictionary loading.

Raw dictionaries map keyword -> emoji or keyword -> [emoji, ...]. The bundled
data files store several glyphs as one space separated string ("❤️ 😍"), so
string values are split on whitespace. Everything is validated up front and
turned into a read-only LanguageIndex.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping

from .errors import FormatError, ResourceError
from .search_index import KeywordEntry, LanguageIndex

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

SUPPORTED_LANGUAGES = ("english", "russian", "spanish")


def _normalize_emojis(language_id: str, keyword: str, value: Any) -> List[str]:
    if isinstance(value, str):
        glyphs = value.split()
    elif isinstance(value, list):
        glyphs = []
        for item in value:
            if not isinstance(item, str) or not item.strip():
                raise FormatError(
                    f"{language_id}: keyword {keyword!r} has a non-string or empty emoji"
                )
            glyphs.append(item.strip())
    else:
        raise FormatError(
            f"{language_id}: keyword {keyword!r} maps to {type(value).__name__}, "
            "expected string or list of strings"
        )
    if not glyphs:
        raise FormatError(f"{language_id}: keyword {keyword!r} has no emoji")
    return glyphs


def load(language_id: str, raw_data: Any) -> LanguageIndex:
    """
    Build a LanguageIndex from raw keyword data.
    Raises FormatError if raw_data is not a mapping of str -> str | list[str].
    Many keywords may share an emoji; nothing is collapsed here.
    """
    if not isinstance(raw_data, Mapping):
        raise FormatError(
            f"{language_id}: dictionary must be a mapping, got {type(raw_data).__name__}"
        )

    entries: List[KeywordEntry] = []
    for keyword, value in raw_data.items():
        if not isinstance(keyword, str) or not keyword.strip():
            raise FormatError(f"{language_id}: invalid keyword {keyword!r}")
        glyphs = _normalize_emojis(language_id, keyword, value)
        entries.append(KeywordEntry(keyword, tuple(glyphs)))
    return LanguageIndex(language_id, entries)


def bundled_path(language_id: str) -> Path:
    return DATA_DIR / f"emoji_data_{language_id}.json"


def read_bundled(language_id: str) -> dict:
    """Raw JSON for one bundled language. Missing/unreadable file -> ResourceError."""
    path = bundled_path(language_id)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise ResourceError(f"cannot read emoji data for {language_id!r}: {e}") from e


def load_bundled(language_id: str) -> LanguageIndex:
    return load(language_id, read_bundled(language_id))
