# emoji_suggester/context/__init__.py
# editor-side helpers: locating the query in the current line

from .trigger import TriggerSpan, detect_trigger

__all__ = ["TriggerSpan", "detect_trigger"]
