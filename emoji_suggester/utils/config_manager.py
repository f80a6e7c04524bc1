# config_manager.py - user settings and their JSON store

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from emoji_suggester.core.dictionary import SUPPORTED_LANGUAGES
from emoji_suggester.core.protocols import RawSettings
from emoji_suggester.utils.logger_utils import Log

DEFAULT_LANGUAGE = "english"
HOME_DIR = os.environ.get(
    "EMOJI_SUGGESTER_HOME", os.path.join(os.path.expanduser("~"), ".emoji_suggester")
)
DEFAULT_PATH = os.path.join(HOME_DIR, "settings.json")

# counts are ranked as int64
MAX_COUNT = 2 ** 63 - 1


def valid_emoji(value: str) -> bool:
    """A mapped emoji must survive the "<emoji> (<keyword>)" display split."""
    return bool(value) and not any(ch.isspace() for ch in value)


@dataclass
class Settings:
    """
    Everything the user can change. Serialized with camelCase keys:
    chosenLanguages, triggerChar, showKeywords, emojiPopularity,
    customEmojiMappings.
    """

    chosen_languages: List[str] = field(default_factory=lambda: [DEFAULT_LANGUAGE])
    trigger_char: str = ":"
    show_keywords: bool = True
    emoji_popularity: Dict[str, int] = field(default_factory=dict)
    custom_emoji_mappings: Dict[str, str] = field(default_factory=dict)

    # languages -------------------------------------------------------
    def add_language(self, language: str) -> bool:
        if language in self.chosen_languages:
            return False
        self.chosen_languages.append(language)
        return True

    def remove_language(self, language: str) -> bool:
        """Drop a language; the list is never left empty (english comes back)."""
        if language not in self.chosen_languages:
            return False
        self.chosen_languages.remove(language)
        if not self.chosen_languages:
            self.chosen_languages.append(DEFAULT_LANGUAGE)
        return True

    # popularity ------------------------------------------------------
    def record_use(self, emoji: str) -> int:
        self.emoji_popularity[emoji] = min(self.emoji_popularity.get(emoji, 0) + 1, MAX_COUNT)
        return self.emoji_popularity[emoji]

    def top_emojis(self, n: int = 10) -> List[tuple]:
        ranked = sorted(self.emoji_popularity.items(), key=lambda kv: kv[1], reverse=True)
        return ranked[:n]

    # (de)serialization -----------------------------------------------
    def to_dict(self) -> RawSettings:
        return {
            "chosenLanguages": list(self.chosen_languages),
            "triggerChar": self.trigger_char,
            "showKeywords": self.show_keywords,
            "emojiPopularity": dict(self.emoji_popularity),
            "customEmojiMappings": dict(self.custom_emoji_mappings),
        }

    @classmethod
    def from_dict(cls, raw: Optional[Mapping[str, Any]]) -> "Settings":
        """
        Merge stored data onto defaults. Unknown keys are ignored, bad values
        fall back to defaults. A legacy `defaultLanguage` becomes the chosen
        list when no chosenLanguages are stored.
        """
        s = cls()
        if not isinstance(raw, Mapping):
            return s

        langs = raw.get("chosenLanguages")
        if isinstance(langs, list):
            clean: List[str] = []
            for lang in langs:
                if lang in SUPPORTED_LANGUAGES and lang not in clean:
                    clean.append(lang)
            if clean:
                s.chosen_languages = clean
        elif raw.get("defaultLanguage") in SUPPORTED_LANGUAGES:
            s.chosen_languages = [raw["defaultLanguage"]]
            Log.write(f"[Settings] migrated defaultLanguage={raw['defaultLanguage']}")

        trig = raw.get("triggerChar")
        if isinstance(trig, str) and len(trig) == 1 and not trig.isspace():
            s.trigger_char = trig

        if isinstance(raw.get("showKeywords"), bool):
            s.show_keywords = raw["showKeywords"]

        pop = raw.get("emojiPopularity")
        if isinstance(pop, Mapping):
            s.emoji_popularity = {
                k: min(v, MAX_COUNT) for k, v in pop.items()
                if isinstance(k, str) and isinstance(v, int) and not isinstance(v, bool) and v >= 0
            }

        custom = raw.get("customEmojiMappings")
        if isinstance(custom, Mapping):
            s.custom_emoji_mappings = {
                k.strip(): v.strip() for k, v in custom.items()
                if isinstance(k, str) and k.strip() and isinstance(v, str) and valid_emoji(v.strip())
            }
        return s


class SettingsStore:
    """JSON file persistence for Settings. Creates the file with defaults when missing."""

    def __init__(self, path: Optional[str] = None):
        self.path = path or DEFAULT_PATH

    def load(self) -> Settings:
        if not os.path.exists(self.path):
            settings = Settings()
            self.save(settings)
            return settings
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            Log.write(f"[Settings] unreadable {self.path}, using defaults: {e}")
            return Settings()
        return Settings.from_dict(raw)

    def save(self, settings: Settings) -> None:
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(settings.to_dict(), f, indent=2, ensure_ascii=False)
