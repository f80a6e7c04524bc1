# search_index.py
# Per-language keyword index for substring lookup.
# Keeps keywords in dictionary order plus a trigram posting map so that
# typing-speed queries stay well under a millisecond for ~10k keywords.

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

Match = Tuple[str, List[str]]  # (keyword, [emoji, ...])

GRAM = 3


@dataclass(frozen=True)
class KeywordEntry:
    """One dictionary row: keyword (case preserved) and its emojis, in order."""

    keyword: str
    emojis: Tuple[str, ...]

    def as_match(self) -> Match:
        return (self.keyword, list(self.emojis))


def _grams(text: str) -> Iterable[str]:
    for i in range(len(text) - GRAM + 1):
        yield text[i:i + GRAM]


class LanguageIndex:
    """
    Read-only index over one language's KeywordEntry records.

    find(query) returns every entry whose lowercase keyword contains the
    lowercase query, ordered:
     - exact keyword match first
     - then prefix matches
     - then infix matches
    each group in dictionary insertion order.
    """

    __slots__ = ("language", "_entries", "_folded", "_postings")

    def __init__(self, language: str, entries: Iterable[KeywordEntry]) -> None:
        self.language = language
        self._entries: List[KeywordEntry] = list(entries)
        self._folded: List[str] = [e.keyword.lower() for e in self._entries]

        # trigram -> ascending entry ids
        postings: Dict[str, List[int]] = defaultdict(list)
        for idx, folded in enumerate(self._folded):
            for g in set(_grams(folded)):
                postings[g].append(idx)
        self._postings: Dict[str, List[int]] = dict(postings)

    # lookup ----------------------------------------------------------
    def find(self, query: str) -> List[KeywordEntry]:
        if not query:
            return []
        q = query.lower()

        exact: List[KeywordEntry] = []
        prefix: List[KeywordEntry] = []
        infix: List[KeywordEntry] = []
        for idx in self._candidates(q):
            folded = self._folded[idx]
            pos = folded.find(q)
            if pos < 0:
                continue
            entry = self._entries[idx]
            if pos == 0 and len(folded) == len(q):
                exact.append(entry)
            elif pos == 0:
                prefix.append(entry)
            else:
                infix.append(entry)
        return exact + prefix + infix

    def _candidates(self, q: str) -> Iterable[int]:
        """Entry ids that may contain q, ascending. Short queries fall back to a scan."""
        if len(q) < GRAM:
            return range(len(self._folded))

        lists = []
        for g in set(_grams(q)):
            ids = self._postings.get(g)
            if not ids:
                return ()
            lists.append(ids)
        lists.sort(key=len)

        acc = set(lists[0])
        for ids in lists[1:]:
            acc.intersection_update(ids)
            if not acc:
                return ()
        return sorted(acc)

    # introspection ---------------------------------------------------
    def entries(self) -> List[KeywordEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, keyword: str) -> bool:
        return keyword.lower() in self._folded

    def __repr__(self) -> str:
        return f"<LanguageIndex {self.language} keywords={len(self._entries)}>"
