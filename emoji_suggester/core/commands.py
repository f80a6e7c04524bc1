# emoji_suggester/core/commands.py
"""
Settings commands.

Every settings change is a small command object applied to the suggester's
Settings through CommandBus.dispatch(), which then persists and, for
commands that change the language set, rebuilds the engine.

Commands:
  AddMapping(keyword, emoji)     DeleteMapping(keyword)
  ResetPopularity()              ResetMappings()
  AddLanguage(language)          RemoveLanguage(language)
  SetTriggerChar(char)           SetShowKeywords(flag)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

from emoji_suggester.core.dictionary import SUPPORTED_LANGUAGES
from emoji_suggester.utils.config_manager import Settings, valid_emoji
from emoji_suggester.utils.logger_utils import Log


class CommandError(ValueError):
    """A command was given invalid arguments; settings are left untouched."""


class Command:
    name = "command"
    reindex = False

    def apply(self, settings: Settings) -> str:
        """Mutate settings, return a short human readable summary."""
        raise NotImplementedError


@dataclass
class AddMapping(Command):
    keyword: str
    emoji: str
    name = "map"

    def apply(self, settings: Settings) -> str:
        kw, em = self.keyword.strip(), self.emoji.strip()
        if not kw or not em:
            raise CommandError("keyword and emoji are both required")
        if not valid_emoji(em):
            raise CommandError("emoji must not contain spaces")
        settings.custom_emoji_mappings[kw] = em
        return f"mapped {kw} -> {em}"


@dataclass
class DeleteMapping(Command):
    keyword: str
    name = "unmap"

    def apply(self, settings: Settings) -> str:
        if settings.custom_emoji_mappings.pop(self.keyword.strip(), None) is None:
            raise CommandError(f"no custom mapping for {self.keyword!r}")
        return f"removed mapping {self.keyword}"


@dataclass
class ResetPopularity(Command):
    name = "reset-popularity"

    def apply(self, settings: Settings) -> str:
        settings.emoji_popularity = {}
        return "emoji popularity statistics have been reset"


@dataclass
class ResetMappings(Command):
    name = "reset-mappings"

    def apply(self, settings: Settings) -> str:
        settings.custom_emoji_mappings = {}
        return "custom mappings have been reset"


@dataclass
class AddLanguage(Command):
    language: str
    name = "lang-add"
    reindex = True

    def apply(self, settings: Settings) -> str:
        if self.language not in SUPPORTED_LANGUAGES:
            raise CommandError(
                f"unknown language {self.language!r}, pick one of {', '.join(SUPPORTED_LANGUAGES)}"
            )
        if not settings.add_language(self.language):
            raise CommandError(f"{self.language!r} is already selected")
        return f"languages: {', '.join(settings.chosen_languages)}"


@dataclass
class RemoveLanguage(Command):
    language: str
    name = "lang-remove"
    reindex = True

    def apply(self, settings: Settings) -> str:
        if not settings.remove_language(self.language):
            raise CommandError(f"{self.language!r} is not selected")
        return f"languages: {', '.join(settings.chosen_languages)}"


@dataclass
class SetTriggerChar(Command):
    char: str
    name = "trigger"

    def apply(self, settings: Settings) -> str:
        if len(self.char) != 1 or self.char.isspace():
            raise CommandError("trigger must be a single non-space character")
        settings.trigger_char = self.char
        return f"trigger is now {self.char!r}"


@dataclass
class SetShowKeywords(Command):
    show: bool
    name = "keywords"

    def apply(self, settings: Settings) -> str:
        settings.show_keywords = bool(self.show)
        return f"show keywords: {'on' if settings.show_keywords else 'off'}"


class CommandBus:
    """
    Applies commands to the suggester's settings, then persists and reindexes.
    Listeners get (command, summary) after a successful dispatch.
    """

    def __init__(self, suggester):
        self.suggester = suggester
        self._listeners: List[Callable[[Command, str], None]] = []

    def subscribe(self, listener: Callable[[Command, str], None]) -> None:
        self._listeners.append(listener)

    def dispatch(self, command: Command) -> str:
        summary = command.apply(self.suggester.settings)
        self.suggester.persist()
        if command.reindex:
            self.suggester.reload()
        Log.write(f"[CommandBus] {command.name}: {summary}")
        for listener in self._listeners:
            listener(command, summary)
        return summary
