# tests/test_ranker.py
import json

from emoji_suggester.core.ranker import (
    ResultRanker,
    merge,
    order_by_popularity,
    parse_display,
    render,
)


def rows(*pairs):
    return json.dumps([[kw, emojis] for kw, emojis in pairs])


def test_first_keyword_wins_for_duplicate_emoji():
    out = merge(rows(("love", ["❤️", "😍"]), ("heart", ["❤️", "💖"])), "o")
    assert out == [("❤️", "love"), ("😍", "love"), ("💖", "heart")]


def test_custom_mapping_added_even_without_dictionary_match():
    out = merge("[]", "my", {"mycompany": "🏢"})
    assert out == [("🏢", "mycompany")]


def test_custom_mapping_overrides_dictionary_keyword():
    out = merge(rows(("heart", ["❤️"])), "HEA", {"heartfelt": "❤️", "other": "🙂"})
    assert out == [("❤️", "heartfelt")]


def test_custom_mapping_ignored_for_empty_query():
    assert merge("[]", "", {"anything": "🙂"}) == []


def test_malformed_engine_output_gives_empty_result():
    r = ResultRanker()
    assert r.rank("{oops", "love") == []
    assert r.rank(json.dumps({"love": ["❤️"]}), "love") == []
    assert r.rank(json.dumps([["love"]]), "love") == []
    assert r.rank(json.dumps([["love", "❤️"]]), "love") == []


def test_popularity_orders_descending():
    pairs = [("😂", "grin"), ("😀", "smile")]
    assert order_by_popularity(pairs, {"😀": 5, "😂": 2}) == [("😀", "smile"), ("😂", "grin")]


def test_ties_keep_merge_order():
    pairs = [("a", "k1"), ("b", "k2"), ("c", "k3"), ("d", "k4")]
    out = order_by_popularity(pairs, {"c": 1})
    assert [e for e, _ in out] == ["c", "a", "b", "d"]


def test_large_candidate_sets_sort_stably():
    pairs = [(f"e{i}", f"k{i}") for i in range(40)]
    popularity = {"e30": 3, "e5": 3, "e12": 1}
    out = [e for e, _ in order_by_popularity(pairs, popularity)]
    assert out[:3] == ["e5", "e30", "e12"]
    rest = [e for e in out[3:]]
    assert rest == [f"e{i}" for i in range(40) if f"e{i}" not in popularity]


def test_popularity_ordering_invariant():
    ranker = ResultRanker()
    pop = {"💖": 4, "😍": 9, "🧤": 1}
    out = ranker.rank_pairs(
        rows(("love", ["❤️", "😍"]), ("heart", ["❤️", "💖"]), ("glove", ["🧤"])), "o", popularity=pop
    )
    counts = [pop.get(e, 0) for e, _ in out]
    assert counts == sorted(counts, reverse=True)
    assert len({e for e, _ in out}) == len(out)


def test_render_and_parse_are_inverse():
    pairs = [("❤️", "love"), ("👨‍👩‍👧", "family")]
    for show in (True, False):
        shown = render(pairs, show)
        assert [parse_display(v, show) for v in shown] == ["❤️", "👨‍👩‍👧"]
    assert render(pairs, True)[0] == "❤️ (love)"
    assert render(pairs, False)[0] == "❤️"


def test_same_state_same_order():
    ranker = ResultRanker()
    raw = rows(("smile", ["😀", "😊"]), ("grin", ["😂"]))
    first = ranker.rank(raw, "i", {"wink": "😉"}, {"😂": 1})
    for _ in range(5):
        assert ranker.rank(raw, "i", {"wink": "😉"}, {"😂": 1}) == first
    assert first == ["😂 (grin)", "😀 (smile)", "😊 (smile)", "😉 (wink)"]


def test_debug_ordering_reports_counts():
    rows_out = ResultRanker.debug_ordering([("a", "x"), ("b", "y")], {"b": 2})
    assert rows_out == [("b", "y", 2), ("a", "x", 0)]


def test_counts_beyond_int64_still_rank():
    pairs = [(f"e{i}", f"kw{i}") for i in range(21)]
    out = order_by_popularity(pairs, {"e7": 10 ** 20, "e3": 5})
    assert [e for e, _ in out[:3]] == ["e7", "e3", "e0"]
    assert ResultRanker().rank_pairs(
        "[]", "kw", {f"kw{i}": f"e{i}" for i in range(21)}, {"e20": 10 ** 20}
    )[0] == ("e20", "kw20")


def test_bad_popularity_value_gives_empty_result():
    assert ResultRanker().rank_pairs(rows(("love", ["❤️"])), "love", popularity={"❤️": "lots"}) == []
