# tests/conftest.py
import pytest

from emoji_suggester.core.suggester import EmojiSuggester
from emoji_suggester.utils.config_manager import SettingsStore
from emoji_suggester.utils.logger_utils import Log

SAMPLE_DATA = {
    "english": {
        "love": ["❤️", "😍"],
        "heart": ["❤️", "💖"],
        "glove": "🧤",
        "smile": "😀 😊",
        "grin": "😂",
        "mouse": "🐭",
    },
    "russian": {
        "любовь": ["❤️", "🥰"],
        "улыбка": "😀",
    },
    "spanish": {
        "amor": ["❤️", "😍"],
        "corazón": "💖",
    },
}


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch):
    # keep the application log out of the working tree
    monkeypatch.setattr(Log, "path", str(tmp_path / "logs" / "emoji_suggester.log"))


@pytest.fixture
def store(tmp_path):
    return SettingsStore(str(tmp_path / "settings.json"))


@pytest.fixture
def suggester(store):
    s = EmojiSuggester(store, data_loader=SAMPLE_DATA.__getitem__)
    s.start()
    return s
