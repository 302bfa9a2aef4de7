"""Benchmark suite for the textsonar engines.

Engines are built with caching disabled so every round does the full work.

Run:  pytest tests/test_benchmarks.py --benchmark-enable
Skip: pytest tests/ -m "not benchmark"
"""

from __future__ import annotations

import pytest

import textsonar
from textsonar import (
    BoundedCache,
    KeywordExtractor,
    NamedEntityRecognizer,
    SentenceSplitter,
    SentimentAnalyzer,
    Tokenizer,
)

pytestmark = pytest.mark.benchmark

# ---------------------------------------------------------------------------
# Sample texts
# ---------------------------------------------------------------------------

SHORT_REVIEW = (
    "Honestly the new Zeta Phone is not bad, and it costs only $499 today."
)

SENTENCE_30W = (
    "Dr. Smith said the new solar panels from Acme Corp are absolutely "
    "amazing, but the battery life is not great and the price of $1,200 "
    "feels a bit steep."
)

NEWS_BRIEF = (
    "On March 3rd, 2025 Prof. Alan Reyes of Stanford University told reporters "
    "in San Francisco that the startup had raised $12 million. "
    "Investors were extremely excited, although a few analysts felt the "
    "valuation was a bit high. Revenue grew 45% last quarter, and the team "
    "expects to hire 30 engineers by 5pm Friday... or so the memo said! "
    "Was the launch a success? Early reviews at https://example.com/reviews "
    "call the product brilliant but not perfect. "
    "Contact press@example.com or follow @reyeslab and #zetalaunch for updates. "
    "Meanwhile, Microsoft and Google declined to comment on the deal."
)

PARAGRAPH_200W = " ".join([SENTENCE_30W] * 7)

DOCUMENT_1000W = " ".join([PARAGRAPH_200W] * 5)

SAMPLE_TEXTS = {
    "short_review": SHORT_REVIEW,
    "sentence_30w": SENTENCE_30W,
    "news_brief": NEWS_BRIEF,
    "paragraph_200w": PARAGRAPH_200W,
    "document_1000w": DOCUMENT_1000W,
}


def _uncached():
    return BoundedCache(0, 1)


@pytest.fixture(scope="module")
def engines():
    tokenizer = Tokenizer(cache=_uncached())
    sentiment = SentimentAnalyzer(tokenizer, cache=_uncached())
    splitter = SentenceSplitter(tokenizer, sentiment_analyzer=sentiment, cache=_uncached())
    return {
        "tokenizer": tokenizer,
        "sentiment": sentiment,
        "splitter": splitter,
        "keywords": KeywordExtractor(tokenizer, splitter=splitter, cache=_uncached()),
        "entities": NamedEntityRecognizer(tokenizer, cache=_uncached()),
    }


# ---------------------------------------------------------------------------
# 1. Startup
# ---------------------------------------------------------------------------


def test_bench_startup(benchmark):
    """Measure textsonar.load(): builds every engine, stem index and automaton."""
    benchmark.pedantic(textsonar.load, rounds=5, iterations=1, warmup_rounds=0)


# ---------------------------------------------------------------------------
# 2. Per-engine, across text sizes
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("text_key", list(SAMPLE_TEXTS.keys()))
def test_bench_tokenize(benchmark, engines, text_key):
    text = SAMPLE_TEXTS[text_key]
    benchmark.extra_info["text_key"] = text_key
    benchmark.extra_info["n_words"] = len(text.split())
    benchmark(engines["tokenizer"].tokenize, text)


@pytest.mark.parametrize("text_key", list(SAMPLE_TEXTS.keys()))
def test_bench_split(benchmark, engines, text_key):
    text = SAMPLE_TEXTS[text_key]
    benchmark.extra_info["text_key"] = text_key
    benchmark(engines["splitter"].split, text)


@pytest.mark.parametrize("text_key", list(SAMPLE_TEXTS.keys()))
def test_bench_sentiment(benchmark, engines, text_key):
    text = SAMPLE_TEXTS[text_key]
    benchmark.extra_info["text_key"] = text_key
    benchmark(engines["sentiment"].analyze, text)


@pytest.mark.parametrize("text_key", ["sentence_30w", "news_brief", "paragraph_200w"])
def test_bench_keywords(benchmark, engines, text_key):
    """Full extraction: four scorers, merge, clustering and statistics."""
    text = SAMPLE_TEXTS[text_key]
    benchmark.extra_info["text_key"] = text_key
    benchmark(engines["keywords"].extract, text)


@pytest.mark.parametrize("text_key", ["sentence_30w", "news_brief", "paragraph_200w"])
def test_bench_entities(benchmark, engines, text_key):
    text = SAMPLE_TEXTS[text_key]
    benchmark.extra_info["text_key"] = text_key
    benchmark(engines["entities"].recognize, text)


# ---------------------------------------------------------------------------
# 3. Micro-benchmarks: pedantic mode for sub-us operations
# ---------------------------------------------------------------------------


def test_bench_stemmer(benchmark):
    """Snowball stemmer on a single word (lexicon fallback path)."""
    import Stemmer

    stemmer = Stemmer.Stemmer("english")
    benchmark.pedantic(
        stemmer.stemWord, args=("loving",), rounds=1000, iterations=1000,
    )


def test_bench_lexicon_lookup(benchmark, engines):
    benchmark.pedantic(
        engines["sentiment"].lookup, args=("wonderful",), rounds=1000, iterations=100,
    )


def test_bench_cache_hit(benchmark):
    """Prefix cache hit: dict lookup plus full-text comparison."""
    cache = BoundedCache(1000, 100)
    cache.put(DOCUMENT_1000W, 1)
    benchmark.pedantic(
        cache.get, args=(DOCUMENT_1000W,), rounds=1000, iterations=100,
    )


# ---------------------------------------------------------------------------
# 4. Extension
# ---------------------------------------------------------------------------


def test_bench_add_word(benchmark):
    """add_word() on a fresh analyzer, unique word per round."""
    analyzer = SentimentAnalyzer()
    counter = {"n": 0}

    def add_word():
        counter["n"] += 1
        analyzer.add_word(f"benchword{counter['n']}", 2, 0.5, ["joy"])

    benchmark.pedantic(add_word, rounds=100, iterations=1, warmup_rounds=0)
