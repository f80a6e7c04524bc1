"""
emoji_suggester.core

The search/ranking engine behind the emoji suggester.
Contains:
 - keyword dictionary loading and validation (load, load_bundled)
 - per-language substring index (LanguageIndex)
 - the query engine (EmojiSearchEngine)
 - result merging/ranking by popularity (ResultRanker)
 - script-based language narrowing (select_languages)
"""

from .dictionary import SUPPORTED_LANGUAGES, load, load_bundled
from .engine import EmojiSearchEngine
from .errors import EmojiSuggesterError, FormatError, QueryError, ResourceError
from .language_selector import select_languages
from .ranker import ResultRanker, parse_display
from .search_index import KeywordEntry, LanguageIndex

__all__ = [
    "SUPPORTED_LANGUAGES",
    "load",
    "load_bundled",
    "EmojiSearchEngine",
    "EmojiSuggesterError",
    "FormatError",
    "QueryError",
    "ResourceError",
    "select_languages",
    "ResultRanker",
    "parse_display",
    "KeywordEntry",
    "LanguageIndex",
]
