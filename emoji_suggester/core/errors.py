# emoji_suggester/core/errors.py
"""
Error taxonomy for the suggester core.

 - FormatError: malformed dictionary payload, fatal to initialization
 - QueryError: bad engine response / unknown language, always recovered locally
 - ResourceError: engine could not be set up at all, surfaced once to the front-end
"""


class EmojiSuggesterError(Exception):
    """Base class for every error raised by emoji_suggester."""


class FormatError(EmojiSuggesterError):
    """Dictionary data is not a mapping of keyword -> emoji | [emoji, ...]."""


class QueryError(EmojiSuggesterError):
    """A single query could not be answered. Never escapes the engine/ranker."""


class ResourceError(EmojiSuggesterError):
    """Bundled data missing or unloadable; suggestions stay disabled for the session."""
