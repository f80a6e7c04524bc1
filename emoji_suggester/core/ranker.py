# emoji_suggester/core/ranker.py
"""
ResultRanker - merges engine output, custom mappings and popularity into the
final suggestion list.

Per query:
 1. decode the engine's [[keyword, [emoji, ...]], ...] output
 2. flatten to (emoji, keyword), first keyword seen for an emoji wins
 3. overlay custom keyword -> emoji mappings whose keyword contains the query
    (custom keyword overrides the dictionary one, or adds the emoji)
 4. stable sort by popularity, descending
 5. render "<emoji>" or "<emoji> (<keyword>)"

Steps 1-4 never raise to the caller: failures are logged and give [].
Ties keep step 3 order, so zero-popularity results do not flicker between
keystrokes. Ordering is a NumPy stable argsort over counts clipped to int64.
"""

from __future__ import annotations

import json
import logging
from typing import Dict, List, Mapping, Optional, Tuple

import numpy as np

from .errors import QueryError

logger = logging.getLogger(__name__)

# Types
Pair = Tuple[str, str]                 # (emoji, keyword)
PopularityTable = Mapping[str, int]    # emoji -> usage count
CustomMapping = Mapping[str, str]      # keyword -> emoji

COUNT_CEILING = int(np.iinfo(np.int64).max)


def _decode(engine_output) -> List[Tuple[str, List[str]]]:
    if isinstance(engine_output, (str, bytes)):
        try:
            engine_output = json.loads(engine_output)
        except ValueError as e:
            raise QueryError(f"engine returned invalid JSON: {e}") from e
    if not isinstance(engine_output, list):
        raise QueryError(f"engine returned {type(engine_output).__name__}, expected list")

    rows = []
    for row in engine_output:
        if not isinstance(row, (list, tuple)) or len(row) != 2:
            raise QueryError(f"malformed engine row {row!r}")
        keyword, emojis = row
        if not isinstance(keyword, str) or not isinstance(emojis, (list, tuple)):
            raise QueryError(f"malformed engine row {row!r}")
        rows.append((keyword, list(emojis)))
    return rows


def merge(engine_output, query: str, custom: Optional[CustomMapping] = None) -> List[Pair]:
    """Steps 1-3. Raises QueryError on malformed engine output."""
    emoji_map: Dict[str, str] = {}
    for keyword, emojis in _decode(engine_output):
        for emoji in emojis:
            if emoji not in emoji_map:
                emoji_map[emoji] = keyword

    q = query.lower()
    if q:
        for keyword, emoji in (custom or {}).items():
            if q in keyword.lower():
                emoji_map[emoji] = keyword
    return list(emoji_map.items())


def order_by_popularity(pairs: List[Pair], popularity: Optional[PopularityTable] = None) -> List[Pair]:
    """Stable sort, most used first. Missing emojis count as 0."""
    if not pairs or not popularity:
        return list(pairs)

    counts = np.fromiter(
        (min(max(int(popularity.get(emoji, 0) or 0), 0), COUNT_CEILING) for emoji, _ in pairs),
        dtype=np.int64,
        count=len(pairs),
    )
    order = np.argsort(-counts, kind="stable")
    return [pairs[i] for i in order.tolist()]


def render(pairs: List[Pair], show_keywords: bool = True) -> List[str]:
    if show_keywords:
        return [f"{emoji} ({keyword})" for emoji, keyword in pairs]
    return [emoji for emoji, _ in pairs]


def parse_display(value: str, show_keywords: bool = True) -> str:
    """Inverse of render(): the emoji part of a display string."""
    if show_keywords:
        return value.split(" ", 1)[0]
    return value


class ResultRanker:
    """
    Combine engine matches, custom mappings and usage counts into display strings.

    rank() is the hot path (called on every keystroke) and never raises.
    """

    def rank_pairs(self,
                   engine_output,
                   query: str,
                   custom: Optional[CustomMapping] = None,
                   popularity: Optional[PopularityTable] = None) -> List[Pair]:
        try:
            return order_by_popularity(merge(engine_output, query, custom), popularity)
        except Exception as e:
            logger.error("dropping results for %r: %s", query, e)
            return []

    def rank(self,
             engine_output,
             query: str,
             custom: Optional[CustomMapping] = None,
             popularity: Optional[PopularityTable] = None,
             show_keywords: bool = True) -> List[str]:
        return render(self.rank_pairs(engine_output, query, custom, popularity), show_keywords)

    @staticmethod
    def debug_ordering(pairs: List[Pair], popularity: PopularityTable) -> List[Tuple[str, str, int]]:
        """(emoji, keyword, count) rows, for inspecting why something ranks where it does."""
        return [(e, k, int(popularity.get(e, 0) or 0)) for e, k in order_by_popularity(pairs, popularity)]
