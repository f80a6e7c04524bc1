# tests/test_config_manager.py
import json

from emoji_suggester.core.protocols import LineBuffer
from emoji_suggester.core.suggester import EmojiSuggester
from emoji_suggester.utils.config_manager import Settings, SettingsStore

from conftest import SAMPLE_DATA


def test_defaults():
    s = Settings()
    assert s.chosen_languages == ["english"]
    assert s.trigger_char == ":"
    assert s.show_keywords is True
    assert s.emoji_popularity == {}
    assert s.custom_emoji_mappings == {}


def test_store_creates_file_with_defaults(tmp_path):
    path = tmp_path / "cfg" / "settings.json"
    s = SettingsStore(str(path)).load()
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf8")) == s.to_dict()


def test_round_trip_through_store(store):
    s = Settings(chosen_languages=["english", "russian"], show_keywords=False)
    s.record_use("🔥")
    s.custom_emoji_mappings["mycompany"] = "🏢"
    store.save(s)
    assert store.load() == s


def test_legacy_default_language_migrates_once(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"defaultLanguage": "russian", "triggerChar": ";"}), encoding="utf8")
    store = SettingsStore(str(path))
    s = store.load()
    assert s.chosen_languages == ["russian"]
    assert s.trigger_char == ";"
    store.save(s)
    raw = json.loads(path.read_text(encoding="utf8"))
    assert "defaultLanguage" not in raw
    assert raw["chosenLanguages"] == ["russian"]


def test_chosen_languages_win_over_legacy_field():
    s = Settings.from_dict({"defaultLanguage": "russian", "chosenLanguages": ["spanish"]})
    assert s.chosen_languages == ["spanish"]


def test_invalid_fields_fall_back_to_defaults():
    s = Settings.from_dict(
        {
            "chosenLanguages": ["klingon", 3],
            "triggerChar": "::",
            "showKeywords": "yes",
            "emojiPopularity": {"😀": 3, "😂": -1, "🔥": "many", "👍": True},
            "customEmojiMappings": {"ok": "👌", "": "🙂", "bad": 1},
            "theme": "dark",
        }
    )
    assert s.chosen_languages == ["english"]
    assert s.trigger_char == ":"
    assert s.show_keywords is True
    assert s.emoji_popularity == {"😀": 3}
    assert s.custom_emoji_mappings == {"ok": "👌"}


def test_unreadable_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{broken", encoding="utf8")
    assert SettingsStore(str(path)).load() == Settings()


def test_language_set_never_becomes_empty():
    s = Settings()
    assert s.remove_language("english")
    assert s.chosen_languages == ["english"]
    s.add_language("russian")
    s.remove_language("english")
    assert s.chosen_languages == ["russian"]


def test_top_emojis():
    s = Settings(emoji_popularity={"a": 1, "b": 5, "c": 3})
    assert s.top_emojis(2) == [("b", 5), ("c", 3)]


def test_custom_mappings_are_stripped_and_spaced_emojis_dropped():
    s = Settings.from_dict(
        {"customEmojiMappings": {" mycompany ": " 🏢", "two": "🏢 x", "tab": "🙂\t"}}
    )
    assert s.custom_emoji_mappings == {"mycompany": "🏢", "tab": "🙂"}


def test_padded_mapping_inserts_its_emoji(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"customEmojiMappings": {"mycompany": " 🏢"}}), encoding="utf8")
    suggester = EmojiSuggester(SettingsStore(str(path)), data_loader=SAMPLE_DATA.__getitem__)
    suggester.start()

    buf = LineBuffer("hi :mycomp")
    span, found = suggester.suggestions_for(buf)
    assert found == ["🏢 (mycompany)"]
    assert suggester.select_suggestion(found[0], buf, span) == "🏢"
    assert buf.get_line() == "hi 🏢"
    assert suggester.settings.emoji_popularity == {"🏢": 1}


def test_huge_popularity_counts_are_capped():
    s = Settings.from_dict({"emojiPopularity": {"😀": 10 ** 20, "😂": 2}})
    assert s.emoji_popularity == {"😀": 2 ** 63 - 1, "😂": 2}
    s.record_use("😀")
    assert s.emoji_popularity["😀"] == 2 ** 63 - 1
