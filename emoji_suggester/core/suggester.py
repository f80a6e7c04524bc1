# emoji_suggester/core/suggester.py
"""
EmojiSuggester - the piece front-ends talk to.

Purpose:
 - load the bundled dictionaries for the chosen languages into the engine
 - on every keystroke: detect the trigger span, narrow languages by script,
   search, merge custom mappings, rank by popularity, render
 - on acceptance: replace the span in the editor and bump the emoji's
   popularity exactly once, then persist
 - a random-emoji insertion command that does not touch the index

Public API:
  - start() / reload()
  - suggest(query) -> [display string]
  - suggestions_for(editor) -> (TriggerSpan | None, [display string])
  - select_suggestion(value, editor, span) -> emoji
  - insert_random(editor) -> emoji
  - top_emojis(n)
  - persist()

start() failure disables suggestions for the session (no retries);
suggest() then always returns [].
"""

from __future__ import annotations

import json
import random
import time
from typing import Callable, List, Optional, Tuple

from emoji_suggester.context.trigger import TriggerSpan, detect_trigger
from emoji_suggester.core.dictionary import read_bundled
from emoji_suggester.core.engine import EmojiSearchEngine
from emoji_suggester.core.errors import FormatError, ResourceError
from emoji_suggester.core.language_selector import select_languages
from emoji_suggester.core.protocols import EditorProtocol, SettingsStoreProtocol
from emoji_suggester.core.ranker import Pair, ResultRanker, parse_display, render
from emoji_suggester.utils.config_manager import Settings, SettingsStore
from emoji_suggester.utils.logger_utils import Log

RANDOM_EMOJIS = ["😀", "😂", "🥰", "😎", "🤔", "👍", "🎉", "✨", "🔥", "❤️"]

USAGE_HINT = 'Type "{trigger}" followed by a keyword to suggest emojis'


class EmojiSuggester:
    def __init__(self,
                 store: Optional[SettingsStoreProtocol] = None,
                 *,
                 engine: Optional[EmojiSearchEngine] = None,
                 ranker: Optional[ResultRanker] = None,
                 data_loader: Callable[[str], dict] = read_bundled,
                 rng: Optional[random.Random] = None):
        self.store = store or SettingsStore()
        self.settings: Settings = self.store.load()
        self.engine = engine or EmojiSearchEngine()
        self.ranker = ranker or ResultRanker()
        self.data_loader = data_loader
        self.rng = rng or random.Random()

        self.enabled = False
        self.error: Optional[str] = None
        self.last_latency = 0.0

    # lifecycle -------------------------------------------------------
    def start(self) -> None:
        """Load dictionaries once. Raises ResourceError and disables suggestions on failure."""
        try:
            self.reload()
        except ResourceError as e:
            Log.write(f"[EmojiSuggester] startup failed, suggestions disabled: {e}")
            raise

    def reload(self) -> None:
        """(Re)build the engine for the currently chosen languages."""
        languages = list(self.settings.chosen_languages)
        try:
            with Log.time_block(f"reindex {','.join(languages)}"):
                data = {lang: self.data_loader(lang) for lang in languages}
                try:
                    self.engine.initialize(data)
                except FormatError as e:
                    raise ResourceError(f"bundled emoji data is malformed: {e}") from e
        except ResourceError as e:
            self.enabled = False
            self.error = str(e)
            raise
        self.enabled = True
        self.error = None
        Log.write(f"[EmojiSuggester] loaded languages: {languages}")

    def persist(self) -> None:
        self.store.save(self.settings)

    def usage_hint(self) -> str:
        return USAGE_HINT.format(trigger=self.settings.trigger_char)

    # suggestions -----------------------------------------------------
    def languages_for(self, query: str) -> List[str]:
        return select_languages(self.settings.chosen_languages, query)

    def suggest_pairs(self, query: str) -> List[Pair]:
        if not self.enabled or not query:
            return []
        t0 = time.perf_counter()
        raw = self.engine.search_multiple_json(query, json.dumps(self.languages_for(query)))
        pairs = self.ranker.rank_pairs(
            raw,
            query,
            custom=self.settings.custom_emoji_mappings,
            popularity=self.settings.emoji_popularity,
        )
        self.last_latency = time.perf_counter() - t0
        return pairs

    def suggest(self, query: str) -> List[str]:
        return render(self.suggest_pairs(query), self.settings.show_keywords)

    def detect(self, editor: EditorProtocol) -> Optional[TriggerSpan]:
        return detect_trigger(editor.get_line(), editor.get_cursor(), self.settings.trigger_char)

    def suggestions_for(self, editor: EditorProtocol) -> Tuple[Optional[TriggerSpan], List[str]]:
        span = self.detect(editor)
        if span is None:
            return None, []
        return span, self.suggest(span.query)

    # acceptance ------------------------------------------------------
    def emoji_of(self, value: str) -> str:
        return parse_display(value, self.settings.show_keywords)

    def select_suggestion(self, value: str, editor: EditorProtocol, span: TriggerSpan) -> str:
        """Insert the chosen emoji over the trigger span and count one use."""
        emoji = self.emoji_of(value)
        editor.replace_range(emoji, span.start, span.end)
        self.record_use(emoji)
        return emoji

    def record_use(self, emoji: str) -> int:
        count = self.settings.record_use(emoji)
        self.persist()
        Log.write(f"[EmojiSuggester] accepted {emoji} (used {count}x)")
        return count

    def insert_random(self, editor: EditorProtocol) -> str:
        emoji = self.rng.choice(RANDOM_EMOJIS)
        editor.replace_selection(emoji)
        return emoji

    def top_emojis(self, n: int = 10) -> List[tuple]:
        return self.settings.top_emojis(n)
