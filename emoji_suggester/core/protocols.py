# emoji_suggester/core/protocols.py
"""
Protocol interfaces for the collaborators the suggester talks to but does
not own: the host editor and the settings store.

LineBuffer is the in-process editor used by the CLI, the TUI and the tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from typing_extensions import TypedDict


class RawSettings(TypedDict, total=False):
    """Stored settings payload as written by SettingsStore."""

    chosenLanguages: list
    triggerChar: str
    showKeywords: bool
    emojiPopularity: dict
    customEmojiMappings: dict
    defaultLanguage: str  # legacy, migrated on load


@runtime_checkable
class EditorProtocol(Protocol):
    """Minimal host editor surface: one current line and a cursor column."""

    def get_line(self) -> str:
        ...

    def get_cursor(self) -> int:
        ...

    def replace_range(self, text: str, start: int, end: int) -> None:
        ...

    def replace_selection(self, text: str) -> None:
        ...


class SettingsStoreProtocol(Protocol):
    def load(self):
        ...

    def save(self, settings) -> None:
        ...


class LineBuffer:
    """Single-line editor buffer with a cursor. Implements EditorProtocol."""

    def __init__(self, text: str = "", cursor: int = -1) -> None:
        self.text = text
        self.cursor = len(text) if cursor < 0 else min(cursor, len(text))

    def get_line(self) -> str:
        return self.text

    def get_cursor(self) -> int:
        return self.cursor

    def set_text(self, text: str) -> None:
        self.text = text
        self.cursor = len(text)

    def replace_range(self, text: str, start: int, end: int) -> None:
        self.text = self.text[:start] + text + self.text[end:]
        self.cursor = start + len(text)

    def replace_selection(self, text: str) -> None:
        self.replace_range(text, self.cursor, self.cursor)

    def __repr__(self) -> str:
        return f"<LineBuffer {self.text!r} cursor={self.cursor}>"
