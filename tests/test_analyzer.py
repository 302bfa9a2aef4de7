"""Tests for the TextAnalyzer facade and textsonar.load()."""

import msgpack
import pytest

import textsonar
from textsonar import EntityType, KeywordConfig


def test_load_returns_analyzer(analyzer):
    assert isinstance(analyzer, textsonar.TextAnalyzer)


def test_unknown_attribute():
    with pytest.raises(AttributeError):
        getattr(textsonar, "NotAThing")


def test_engines_share_tokenizer(analyzer):
    assert analyzer.splitter._tokenizer is analyzer.tokenizer
    assert analyzer.keywords._splitter is analyzer.splitter
    assert analyzer.entities._tokenizer is analyzer.tokenizer


def test_sentences_use_full_sentiment(analyzer):
    """Sentence sentiment comes from the lexicon analyzer, not the fallback lists."""
    sentence = analyzer.split("This is good.")[0]
    assert sentence.sentiment == analyzer.analyze_sentiment("This is good.")
    assert sentence.sentiment.overall == pytest.approx(0.2)


def test_forwarding(analyzer):
    text = "Dr. Smith loves the new solar panels. Solar panels save money."
    assert analyzer.tokenize(text)
    assert len(analyzer.split(text)) == 2
    assert analyzer.analyze_sentiment(text).overall > 0
    assert analyzer.analyze_emotions(text).primary is not None
    assert analyzer.extract_keywords(text).keywords
    assert any(e.entity_type is EntityType.PERSON for e in analyzer.recognize_entities(text))


def test_keyword_config_passed_through():
    analyzer = textsonar.load(keyword_config=KeywordConfig(max_keywords=2))
    assert analyzer.keywords.config.max_keywords == 2


def test_load_with_extensions(tmp_path):
    path = tmp_path / "ext.bin"
    path.write_bytes(msgpack.packb({
        "version": "1.0",
        "sentiment": {"yeet": [4, 0.9, ["excitement"]]},
        "organizations": ["Initech"],
        "locations": ["Springfield"],
    }))
    analyzer = textsonar.load(path)
    assert analyzer.analyze_sentiment("yeet").overall > 0
    pairs = [(e.text, e.entity_type) for e in analyzer.recognize_entities("Initech opened in Springfield.")]
    assert ("Initech", EntityType.ORGANIZATION) in pairs
    assert ("Springfield", EntityType.LOCATION) in pairs


def test_clear_caches(analyzer):
    text = "Caches are cleared together."
    first = analyzer.tokenize(text)
    analyzer.clear_caches()
    assert analyzer.tokenize(text) is not first


def test_add_word_refreshes_sentence_sentiment():
    analyzer = textsonar.load()
    before = analyzer.split("Yeet.")[0].sentiment
    assert before.overall == 0.0

    analyzer.sentiment.add_word("yeet", 4, 0.9, ["joy"])
    after = analyzer.split("Yeet.")[0].sentiment
    assert after == analyzer.analyze_sentiment("Yeet.")
    assert after.overall > 0
