# language_selector.py
# Script heuristic that narrows which dictionaries a query is run against.
# Cyrillic -> russian, Spanish diacritics -> spanish, otherwise the Latin
# languages. Never narrows to nothing: falls back to the full chosen list.

from __future__ import annotations

from typing import Iterable, List

RUSSIAN = "russian"
SPANISH = "spanish"

SPANISH_MARKS = frozenset("ñáéíóúü¿¡ÑÁÉÍÓÚÜ")


def has_cyrillic(text: str) -> bool:
    return any("\u0400" <= ch <= "\u04ff" for ch in text)


def has_spanish_marks(text: str) -> bool:
    return any(ch in SPANISH_MARKS for ch in text)


def select_languages(chosen: Iterable[str], query: str) -> List[str]:
    """Return the subset of `chosen` (order kept) worth searching for `query`."""
    chosen = list(chosen)
    if has_cyrillic(query):
        narrowed = [lang for lang in chosen if lang == RUSSIAN]
    elif has_spanish_marks(query):
        narrowed = [lang for lang in chosen if lang == SPANISH]
    else:
        narrowed = [lang for lang in chosen if lang != RUSSIAN]
    return narrowed or chosen
