"""Tests for the Aho-Corasick phrase matcher."""

from textsonar._phrases import PhraseMatcher


def test_whole_words_only():
    matcher = PhraseMatcher(["wall street"])
    assert matcher.find("walk down wall street today") == [(10, 21, "wall street")]
    assert matcher.find("drywall streetcar") == []


def test_leftmost_longest_wins():
    matcher = PhraseMatcher(["new york", "new york city", "york city"])
    text = "visit new york city now"
    assert matcher.find(text) == [(6, 19, "new york city")]


def test_non_overlapping_in_order():
    matcher = PhraseMatcher(["a bit", "kind of"])
    found = matcher.find("kind of a bit odd")
    assert [m[2] for m in found] == ["kind of", "a bit"]


def test_phrases_are_normalized():
    matcher = PhraseMatcher(["  Apple   Watch "])
    assert len(matcher) == 1
    assert matcher.find("my apple watch") == [(3, 14, "apple watch")]


def test_empty_matcher():
    matcher = PhraseMatcher([])
    assert len(matcher) == 0
    assert matcher.find("anything") == []
