# tests/test_dictionary.py
import pytest

from emoji_suggester.core.dictionary import SUPPORTED_LANGUAGES, load, load_bundled, read_bundled
from emoji_suggester.core.errors import FormatError, ResourceError


def test_string_and_list_values_normalize_to_lists():
    idx = load("english", {"love": "❤️ 😍", "fire": "🔥", "star": ["⭐", "🌟"]})
    entries = {e.keyword: e.emojis for e in idx.entries()}
    assert entries == {"love": ("❤️", "😍"), "fire": ("🔥",), "star": ("⭐", "🌟")}


def test_many_to_one_is_preserved():
    idx = load("english", {"happy": "😀", "grin": "😀"})
    assert [e.keyword for e in idx.entries()] == ["happy", "grin"]


def test_keywords_keep_their_case():
    idx = load("english", {"OK": "👌"})
    assert idx.entries()[0].keyword == "OK"
    assert "ok" in idx


@pytest.mark.parametrize(
    "raw",
    [
        ["love", "❤️"],
        "love",
        {"love": 3},
        {"love": []},
        {"love": ""},
        {"love": ["❤️", 7]},
        {"": "❤️"},
        {5: "❤️"},
    ],
)
def test_malformed_data_raises_format_error(raw):
    with pytest.raises(FormatError):
        load("english", raw)


def test_bundled_languages_load():
    for lang in SUPPORTED_LANGUAGES:
        idx = load_bundled(lang)
        assert len(idx) > 10
        assert all(e.emojis for e in idx.entries())


def test_missing_bundle_is_a_resource_error():
    with pytest.raises(ResourceError):
        read_bundled("klingon")
