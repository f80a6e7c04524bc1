# emoji_suggester/context/trigger.py
# Finds the active "<trigger><query>" span ending at the cursor.

from __future__ import annotations

import re
from functools import lru_cache
from typing import NamedTuple, Optional

# Latin, accented Latin (Latin-1 + Extended-A/B) and Cyrillic letters
LETTERS = "A-Za-zÀ-ÖØ-öø-ɏЀ-ӿ"


class TriggerSpan(NamedTuple):
    start: int   # index of the trigger character
    end: int     # cursor position
    query: str   # text between trigger and cursor


@lru_cache(maxsize=32)
def _pattern(trigger_char: str) -> "re.Pattern[str]":
    t = re.escape(trigger_char)
    return re.compile(f"{t}([{LETTERS}][^\\s{t}]*)$")


def detect_trigger(line: str, cursor: int, trigger_char: str = ":") -> Optional[TriggerSpan]:
    """
    Return the trigger span ending at `cursor`, or None.
    The query must start with a letter and contain no whitespace or further
    trigger characters.
    """
    if not trigger_char or cursor <= 0:
        return None
    before = line[:cursor]
    m = _pattern(trigger_char).search(before)
    if m is None:
        return None
    return TriggerSpan(m.start(), cursor, m.group(1))
