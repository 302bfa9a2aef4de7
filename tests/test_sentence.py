"""Tests for sentence splitting, typing and complexity."""

import pytest

from textsonar import SentenceSplitter, SentenceType, analyze_complexity, count_syllables
from textsonar._types import NEUTRAL_SENTIMENT


def _texts(sentences):
    return [s.text for s in sentences]


def test_titles_do_not_split(splitter):
    """Abbreviated titles before a name are not sentence ends."""
    sentences = splitter.split("Dr. Smith met Mrs. Jones. They left.")
    assert _texts(sentences) == ["Dr. Smith met Mrs. Jones.", "They left."]


def test_basic_enders(splitter):
    sentences = splitter.split("Is it ready? Yes! It works.")
    assert _texts(sentences) == ["Is it ready?", "Yes!", "It works."]


def test_enders_run_stays_together(splitter):
    assert _texts(splitter.split("Really?! Sure.")) == ["Really?!", "Sure."]


def test_decimal_number(splitter):
    sentences = splitter.split("The price rose 3.5 percent today. Analysts were surprised.")
    assert len(sentences) == 2


def test_ellipsis_before_lowercase(splitter):
    sentences = splitter.split("Wait... what happened? I don't know!")
    assert _texts(sentences) == ["Wait... what happened?", "I don't know!"]


def test_initials(splitter):
    sentences = splitter.split("J. K. Rowling wrote it. Fans loved it.")
    assert _texts(sentences) == ["J. K. Rowling wrote it.", "Fans loved it."]


def test_url_and_email(splitter):
    text = "Visit www.example.com for details. Write to help@example.org. Thanks."
    assert _texts(splitter.split(text)) == [
        "Visit www.example.com for details.",
        "Write to help@example.org.",
        "Thanks.",
    ]


def test_lowercase_continuation(splitter):
    assert len(splitter.split("The file is report.final and it works.")) == 1


def test_non_title_abbreviation_before_capital(splitter):
    sentences = splitter.split("We bought apples, pears, etc. The rest was sold.")
    assert len(sentences) == 2


def test_closing_quote_absorbed(splitter):
    sentences = splitter.split('She said "Stop." Then she left.')
    assert _texts(sentences) == ['She said "Stop."', "Then she left."]


@pytest.mark.parametrize("text", [
    "Dr. Smith met Mrs. Jones. They left.",
    "  Leading space. Trailing space.   ",
    "No terminal punctuation here",
    "One.Two. Three!",
    "",
])
def test_spans_ordered_and_cover_text(splitter, text):
    """Spans are ordered, disjoint, and only whitespace lies between them."""
    sentences = splitter.split(text)
    position = 0
    for sentence in sentences:
        assert text[position:sentence.start_offset].strip() == ""
        assert text[sentence.start_offset:sentence.end_offset] == sentence.text
        assert sentence.start_offset < sentence.end_offset
        position = sentence.end_offset
    assert text[position:].strip() == ""


def test_tokens_belong_to_sentence(splitter):
    text = "First one here. Second one there."
    for sentence in splitter.split(text):
        assert sentence.tokens
        for token in sentence.tokens:
            assert sentence.start_offset <= token.start_offset
            assert token.end_offset <= sentence.end_offset


def test_sentence_types(splitter):
    text = "Where are you? Watch out! Take the book home. The sky is blue."
    types = [s.sentence_type for s in splitter.split(text)]
    assert types == [
        SentenceType.INTERROGATIVE,
        SentenceType.EXCLAMATORY,
        SentenceType.IMPERATIVE,
        SentenceType.DECLARATIVE,
    ]


def test_type_ignores_closing_quote(splitter):
    sentence = splitter.split('He asked "why?"')[0]
    assert sentence.sentence_type is SentenceType.INTERROGATIVE


def test_empty_and_whitespace(splitter):
    assert splitter.split("") == ()
    assert splitter.split("   ") == ()


def test_syllables():
    assert count_syllables("the") == 1
    assert count_syllables("cake") == 1
    assert count_syllables("table") == 2
    assert count_syllables("beautiful") == 3


def test_complexity_empty():
    metrics = analyze_complexity(())
    assert metrics.complexity_score == 0.0
    assert metrics.word_count == 0


def test_complexity_orders_simple_below_complex(tokenizer):
    simple = analyze_complexity(tokenizer.tokenize("The cat sat."))
    hard = analyze_complexity(tokenizer.tokenize(
        "Although the committee deliberated extensively, which surprised observers, "
        "the administrative recommendations were ultimately implemented because "
        "regulatory requirements demanded immediate institutional accountability."
    ))
    assert 0 <= simple.complexity_score < hard.complexity_score <= 100
    assert hard.subordinate_clause_count >= 3


def test_fallback_sentiment_without_analyzer():
    plain = SentenceSplitter()
    happy, neutral = plain.split("This is great. The sky is blue.")
    assert happy.sentiment.overall == 1.0
    assert neutral.sentiment == NEUTRAL_SENTIMENT


def test_statistics(splitter):
    sentences = splitter.split("Is this fine? It is fine. It is.")
    stats = splitter.statistics(sentences)
    assert stats.count == 3
    assert stats.type_distribution[SentenceType.INTERROGATIVE] == pytest.approx(1 / 3)
    assert sum(stats.type_distribution.values()) == pytest.approx(1.0)
    empty = splitter.statistics(())
    assert empty.count == 0 and empty.avg_length == 0.0
