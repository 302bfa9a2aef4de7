"""Tests for keyword, keyphrase and statistics extraction."""

import math

import pytest

from textsonar import STOP_WORDS, KeywordConfig, KeywordExtractor, Token
from textsonar._keywords import merge, ngrams, rake, textrank, tfidf

TEXT = (
    "Machine learning models need training data. "
    "Machine learning teams collect training data from many sources. "
    "Good training data makes machine learning models accurate. "
    "Data quality matters for machine learning."
)

CORPUS = [
    "Weather reports mention rain and wind.",
    "Training schedules for athletes vary by season.",
    "Machine shops cut metal parts.",
]


def test_keywords_exclude_stop_words(extractor):
    keywords = extractor.extract(TEXT).keywords
    assert keywords
    for keyword in keywords:
        assert keyword.keyword not in STOP_WORDS


def test_keywords_sorted_by_score(extractor):
    scores = [k.score for k in extractor.extract(TEXT).keywords]
    assert scores == sorted(scores, reverse=True)


def test_frequent_term_ranks_high(extractor):
    top = [k.keyword for k in extractor.extract(TEXT).keywords[:10]]
    assert "machine" in top


def test_methods_recorded(extractor):
    keywords = extractor.extract(TEXT).keywords
    assert any(len(k.methods) > 1 for k in keywords)
    for keyword in keywords:
        assert keyword.methods <= {"textrank", "rake", "tfidf", "ngram"}


def test_rerun_with_corpus_is_stable(extractor):
    """Identical input and corpus give an identical ranking."""
    first = extractor.extract(TEXT, CORPUS)
    second = extractor.extract(TEXT, CORPUS)
    assert first is not second
    assert first.keywords == second.keywords
    assert first.topics == second.topics


def test_results_cached_without_corpus():
    extractor = KeywordExtractor()
    assert extractor.extract(TEXT) is extractor.extract(TEXT)


def test_keyphrases_are_multiword(extractor):
    result = extractor.extract(TEXT)
    assert result.keyphrases
    for phrase in result.keyphrases:
        assert 2 <= len(phrase.words) <= 5
        assert phrase.phrase == " ".join(phrase.words)
    phrases = [p.phrase for p in result.keyphrases]
    assert len(phrases) == len(set(phrases))


def test_keyphrase_frequency_counts_lemmas(extractor):
    result = extractor.extract(TEXT)
    by_phrase = {p.phrase: p for p in result.keyphrases}
    assert by_phrase["machine learn"].frequency == 4


def test_statistics(extractor):
    stats = extractor.extract(TEXT).statistics
    assert stats.sentence_count == 4
    assert stats.total_words == 29
    assert 0 < stats.vocabulary_richness <= 1
    assert stats.avg_words_per_sentence == pytest.approx(29 / 4)
    assert stats.top_keyword_score > 0


def test_empty_text(extractor):
    result = extractor.extract("")
    assert result.keywords == ()
    assert result.keyphrases == ()
    assert result.topics == ()
    assert result.statistics.total_words == 0
    assert result.statistics.top_keyword_score == 0.0


def test_method_toggles():
    config = KeywordConfig(use_textrank=False, use_rake=False, include_ngrams=False)
    result = KeywordExtractor(config=config).extract(TEXT)
    assert {m for k in result.keywords for m in k.methods} == {"tfidf"}


def test_limits_respected():
    config = KeywordConfig(max_keywords=3, max_keyphrases=2)
    result = KeywordExtractor(config=config).extract(TEXT)
    assert len(result.keywords) == 3
    assert len(result.keyphrases) <= 2


@pytest.mark.parametrize("kwargs", [
    {"max_keywords": -1},
    {"min_word_length": 0},
    {"min_phrase_length": 6},
    {"cooccurrence_window": 0},
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        KeywordConfig(**kwargs)


def test_textrank_symmetric_pair():
    scores = {word: score for word, score, _ in textrank(["alpha", "beta", "alpha"])}
    assert scores["alpha"] == pytest.approx(1.0, abs=1e-3)
    assert scores["beta"] == pytest.approx(1.0, abs=1e-3)
    assert textrank([]) == []


def test_rake_splits_on_stop_words(tokenizer):
    tokens = tokenizer.tokenize("solar panels and wind farms")
    assert rake(tokens, 5, 10) == [("solar panel", 4.0, 1), ("wind farm", 4.0, 1)]


def test_ngrams_need_two_occurrences(tokenizer):
    tokens = tokenizer.tokenize("red apple red apple green")
    assert ngrams(tokens) == [("red apple", 4.0, 2)]


def test_merge_boosts_agreement():
    merged = merge({
        "a": [("shared", 2.0, 1)],
        "b": [("shared", 1.0, 3), ("solo", 0.5, 1)],
    })
    assert [k.keyword for k in merged] == ["shared", "solo"]
    assert merged[0].score == pytest.approx(2.6)
    assert merged[0].frequency == 3
    assert merged[0].methods == frozenset({"a", "b"})
    assert merged[1].score == pytest.approx(0.5)


def test_merge_drops_stop_words():
    assert merge({"a": [("the", 1.0, 1)]}) == []


def _words(*lemmas):
    tokens = []
    offset = 0
    for i, lemma in enumerate(lemmas):
        tokens.append(Token(
            text=lemma, lemma=lemma, pos="NOUN", tag="NN",
            is_stop_word=False, is_punctuation=False, is_alpha=True,
            is_digit=False, index=i, start_offset=offset,
            end_offset=offset + len(lemma),
        ))
        offset += len(lemma) + 1
    return tokens


def test_tfidf_position_weighting():
    tokens = _words("solar", "panel", "solar")
    scores = {t: s for t, s, _ in tfidf(tokens, ["solar", "panel", "solar"])}
    # solar at positions 0 and 2, panel at 1; tf relative to the top count
    solar_idf = (1 / math.log(2) + 1 / math.log(4)) / math.log(4) + 1
    panel_idf = (1 / math.log(3)) / math.log(3) + 1
    assert scores["solar"] == pytest.approx(1.0 * solar_idf)
    assert scores["panel"] == pytest.approx(0.5 * panel_idf)


def test_tfidf_corpus_idf():
    tokens = _words("solar", "panel", "solar")
    corpus = [_words("solar", "wind"), _words("solar")]
    result = tfidf(tokens, ["solar", "panel", "solar"], corpus)
    scores = {t: s for t, s, _ in result}
    assert scores["solar"] == pytest.approx(math.log(3 / 3) + 1)
    assert scores["panel"] == pytest.approx(0.5 * (math.log(3 / 1) + 1))
    assert {t: f for t, _, f in result} == {"solar": 2, "panel": 1}


def test_tfidf_corpus_lowers_common_term():
    tokens = _words("solar", "panel", "solar")
    words = ["solar", "panel", "solar"]
    corpus = [_words("solar", "wind"), _words("solar")]
    alone = {t: s for t, s, _ in tfidf(tokens, words)}
    against = {t: s for t, s, _ in tfidf(tokens, words, corpus)}
    assert against["solar"] < alone["solar"]


def test_tfidf_empty():
    assert tfidf([], []) == []
