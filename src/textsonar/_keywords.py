"""Keyword, keyphrase and topic extraction.

Four scorers run over the same token sequence and are merged:

- TextRank over a co-occurrence graph of content words.
- RAKE over runs of words between stop words and punctuation.
- TF-IDF against a supplied corpus, or a position-based pseudo-IDF.
- Repeated 2- and 3-grams.

Each scorer's results are normalized to its own maximum before merging,
and keywords found by several scorers get a multiplicative boost.
"""

from __future__ import annotations

import logging
import math
import random
import re
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Sequence

from ._cache import BoundedCache
from ._errors import require_text
from ._sentence import SentenceSplitter
from ._stop_words import KEYWORD_STOP_WORDS, STOP_WORDS
from ._tokenizer import Tokenizer
from ._topics import cluster_topics
from ._types import (
    KeyPhrase,
    KeywordResult,
    KeywordStatistics,
    ScoredKeyword,
    Sentence,
    Token,
)

logger = logging.getLogger(__name__)

DAMPING = 0.85
CONVERGENCE = 1e-4
MAX_ITERATIONS = 100
TEXTRANK_WINDOW = 2
AGREEMENT_BOOST = 0.3
COVERAGE_TOP_N = 20

# (keyword, raw score, frequency) as produced by each scorer
_Scored = tuple[str, float, int]


@dataclass(slots=True, frozen=True)
class KeywordConfig:
    max_keywords: int = 30
    max_keyphrases: int = 20
    min_word_length: int = 3
    min_phrase_length: int = 2
    max_phrase_length: int = 5
    include_ngrams: bool = True
    use_tfidf: bool = True
    use_textrank: bool = True
    use_rake: bool = True
    cluster_count: int = 5
    cluster_candidates: int = 30
    cooccurrence_window: int = 5
    cluster_seed: int | None = 0

    def __post_init__(self) -> None:
        for name in ("max_keywords", "max_keyphrases", "cluster_count", "cluster_candidates"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.min_word_length < 1:
            raise ValueError(f"min_word_length must be >= 1, got {self.min_word_length}")
        if not 1 <= self.min_phrase_length <= self.max_phrase_length:
            raise ValueError(
                "phrase lengths must satisfy 1 <= min_phrase_length <= max_phrase_length, "
                f"got {self.min_phrase_length} and {self.max_phrase_length}"
            )
        if self.cooccurrence_window < 1:
            raise ValueError(
                f"cooccurrence_window must be >= 1, got {self.cooccurrence_window}"
            )


def _content_words(tokens: Sequence[Token], min_length: int) -> list[str]:
    return [
        t.lemma.lower() for t in tokens
        if t.is_alpha and not t.is_stop_word and len(t.text) >= min_length
    ]


def textrank(words: Sequence[str]) -> list[_Scored]:
    """Rank words by a PageRank-style walk over their co-occurrence graph.

    Each word links to the next ``TEXTRANK_WINDOW`` words. Scores are
    updated in place so later nodes in an iteration see earlier updates.
    """
    edges: dict[str, dict[str, float]] = defaultdict(dict)
    for i, first in enumerate(words):
        for second in words[i + 1:i + 1 + TEXTRANK_WINDOW]:
            if first == second:
                continue
            edges[first][second] = edges[first].get(second, 0.0) + 1.0
            edges[second][first] = edges[second].get(first, 0.0) + 1.0
    if not edges:
        return []

    totals = {word: sum(links.values()) for word, links in edges.items()}
    scores = dict.fromkeys(edges, 1.0)
    for iteration in range(MAX_ITERATIONS):
        max_diff = 0.0
        for word, links in edges.items():
            updated = (1 - DAMPING) + DAMPING * sum(
                weight / totals[other] * scores[other]
                for other, weight in links.items()
            )
            max_diff = max(max_diff, abs(updated - scores[word]))
            scores[word] = updated
        if max_diff < CONVERGENCE:
            logger.debug("textrank converged after %d iterations", iteration + 1)
            break

    counts = Counter(words)
    return [(word, score, counts[word]) for word, score in scores.items()]


def rake(
    tokens: Sequence[Token], max_phrase_length: int, limit: int
) -> list[_Scored]:
    """Score candidate phrases split on stop words and punctuation.

    A word scores degree / frequency, where degree sums the lengths of the
    candidates containing it; a phrase scores the sum of its words.
    """
    candidates: list[tuple[str, ...]] = []
    current: list[str] = []
    for token in (*tokens, None):
        word = token.text.lower() if token is not None else ""
        if token is None or not token.is_alpha or word in KEYWORD_STOP_WORDS:
            if 0 < len(current) <= max_phrase_length:
                candidates.append(tuple(current))
            current = []
            continue
        lemma = token.lemma.lower()
        if len(lemma) >= 2:
            current.append(lemma)

    frequency: Counter[str] = Counter()
    degree: Counter[str] = Counter()
    for phrase in candidates:
        for word in phrase:
            frequency[word] += 1
            degree[word] += len(phrase)
    word_score = {w: degree[w] / frequency[w] for w in frequency}

    occurrences = Counter(candidates)
    scored = [
        (" ".join(phrase), sum(word_score[w] for w in phrase), count)
        for phrase, count in occurrences.items()
    ]
    scored.sort(key=lambda s: -s[1])
    return scored[:limit]


def tfidf(
    tokens: Sequence[Token],
    words: Sequence[str],
    corpus: Sequence[Sequence[Token]] | None = None,
) -> list[_Scored]:
    """Term frequency (relative to the most frequent term) times IDF.

    With a corpus, IDF is ``log((N + 1) / (df + 1)) + 1``. Without one, terms
    seen early in the text and seen rarely get the larger weight.
    """
    counts = Counter(words)
    if not counts:
        return []
    max_count = max(counts.values())

    if corpus:
        n_docs = len(corpus)
        doc_terms = [{t.lemma.lower() for t in doc if t.is_alpha} for doc in corpus]
        idf = {
            term: math.log((n_docs + 1) / (sum(term in d for d in doc_terms) + 1)) + 1
            for term in counts
        }
    else:
        positions: dict[str, list[int]] = defaultdict(list)
        for index, token in enumerate(tokens):
            lemma = token.lemma.lower()
            if lemma in counts:
                positions[lemma].append(index)
        idf = {}
        for term in counts:
            seen = positions.get(term, [])
            position_score = sum(1 / math.log(p + 2) for p in seen)
            idf[term] = position_score / math.log(len(seen) + 2) + 1

    return [
        (term, count / max_count * idf[term], count)
        for term, count in counts.items()
    ]


def ngrams(tokens: Sequence[Token]) -> list[_Scored]:
    """Repeated 2- and 3-grams with at most one inner stop word."""
    words = [t for t in tokens if t.is_alpha and len(t.text) >= 2]
    counts: Counter[str] = Counter()
    for n in (2, 3):
        for i in range(len(words) - n + 1):
            gram = words[i:i + n]
            if gram[0].is_stop_word or gram[-1].is_stop_word:
                continue
            if sum(t.is_stop_word for t in gram) > 1:
                continue
            counts[" ".join(t.lemma.lower() for t in gram)] += 1
    return [
        (gram, float(count * (gram.count(" ") + 1)), count)
        for gram, count in counts.items()
        if count >= 2
    ]


def merge(results: dict[str, list[_Scored]]) -> list[ScoredKeyword]:
    """Combine per-method scores into one ranking, best first."""
    scores: dict[str, float] = defaultdict(float)
    frequencies: dict[str, int] = defaultdict(int)
    methods: dict[str, set[str]] = defaultdict(set)
    for method, scored in results.items():
        peak = max((score for _, score, _ in scored), default=0.0)
        peak = max(peak, 0.001)
        for keyword, score, frequency in scored:
            scores[keyword] += score / peak
            frequencies[keyword] = max(frequencies[keyword], frequency)
            methods[keyword].add(method)

    merged = [
        ScoredKeyword(
            keyword=keyword,
            score=score * (1 + AGREEMENT_BOOST * (len(methods[keyword]) - 1)),
            frequency=frequencies[keyword],
            methods=frozenset(methods[keyword]),
        )
        for keyword, score in scores.items()
        if " " in keyword or keyword not in STOP_WORDS
    ]
    merged.sort(key=lambda k: (-k.score, k.keyword))
    return merged


class KeywordExtractor:
    """Extracts ranked keywords, keyphrases and topic clusters from text."""

    __slots__ = ("_tokenizer", "_splitter", "_config", "_cache")

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        *,
        splitter: SentenceSplitter | None = None,
        config: KeywordConfig | None = None,
        cache: BoundedCache[KeywordResult] | None = None,
    ) -> None:
        self._tokenizer = tokenizer if tokenizer is not None else Tokenizer()
        self._splitter = (
            splitter if splitter is not None else SentenceSplitter(self._tokenizer)
        )
        self._config = config if config is not None else KeywordConfig()
        self._cache = cache if cache is not None else BoundedCache(200, 100)

    @property
    def config(self) -> KeywordConfig:
        return self._config

    def extract(
        self, text: str, corpus: Sequence[str] | None = None
    ) -> KeywordResult:
        """Extract keywords from ``text``.

        ``corpus`` supplies other documents for inverse document frequency.
        Results are cached only when no corpus is given.
        """
        require_text(text)
        if corpus is not None:
            corpus = [require_text(doc, "corpus item") for doc in corpus]
        else:
            cached = self._cache.get(text)
            if cached is not None:
                logger.debug("extract: cache hit (%d chars)", len(text))
                return cached

        cfg = self._config
        tokens = self._tokenizer.tokenize(text)
        content = _content_words(tokens, cfg.min_word_length)

        methods: dict[str, list[_Scored]] = {}
        if cfg.use_textrank:
            methods["textrank"] = textrank(content)
        if cfg.use_rake:
            methods["rake"] = rake(tokens, cfg.max_phrase_length, cfg.max_keyphrases * 2)
        if cfg.use_tfidf:
            corpus_tokens = (
                [self._tokenizer.tokenize(doc) for doc in corpus] if corpus else None
            )
            methods["tfidf"] = tfidf(tokens, content, corpus_tokens)
        if cfg.include_ngrams:
            methods["ngram"] = ngrams(tokens)
        merged = merge(methods)

        single_words = [k.keyword for k in merged if " " not in k.keyword]
        topics = cluster_topics(
            single_words[:cfg.cluster_candidates],
            tokens,
            k=cfg.cluster_count,
            window=cfg.cooccurrence_window,
            rng=random.Random(cfg.cluster_seed),
        )

        result = KeywordResult(
            keywords=tuple(merged[:cfg.max_keywords]),
            keyphrases=tuple(self._keyphrases(tokens, merged)[:cfg.max_keyphrases]),
            topics=topics,
            statistics=self._statistics(tokens, self._splitter.split(text), merged),
        )
        if corpus is None:
            self._cache.put(text, result)
        return result

    def top_keywords(self, text: str, count: int = 10) -> list[str]:
        return [k.keyword for k in self.extract(text).keywords[:count]]

    def top_keyphrases(self, text: str, count: int = 5) -> list[str]:
        return [p.phrase for p in self.extract(text).keyphrases[:count]]

    def clear_cache(self) -> None:
        self._cache.clear()

    def _keyphrases(
        self, tokens: Sequence[Token], merged: Sequence[ScoredKeyword]
    ) -> list[KeyPhrase]:
        # RAKE output is part of the merge, so its multi-word phrases are
        # already here with merged scores.
        cfg = self._config
        lemma_text = " ".join(t.lemma.lower() for t in tokens if t.is_alpha)
        phrases: list[KeyPhrase] = []
        for keyword in merged:
            words = tuple(keyword.keyword.split())
            if not cfg.min_phrase_length <= len(words) <= cfg.max_phrase_length:
                continue
            if len(words) < 2:
                continue
            pattern = r"\b" + r"\s+".join(map(re.escape, words)) + r"\b"
            phrases.append(KeyPhrase(
                phrase=keyword.keyword,
                score=keyword.score,
                frequency=len(re.findall(pattern, lemma_text)),
                words=words,
            ))
        return phrases

    @staticmethod
    def _statistics(
        tokens: Sequence[Token],
        sentences: Sequence[Sentence],
        merged: Sequence[ScoredKeyword],
    ) -> KeywordStatistics:
        lemmas = [t.lemma.lower() for t in tokens if t.is_alpha]
        total = len(lemmas)
        unique = len(set(lemmas))
        top = {k.keyword for k in merged[:COVERAGE_TOP_N]}
        covered = sum(1 for t in tokens if t.lemma.lower() in top)
        return KeywordStatistics(
            total_words=total,
            unique_words=unique,
            vocabulary_richness=unique / max(total, 1),
            keyword_density=len(merged) / max(total, 1),
            keyword_coverage=covered / max(total, 1),
            sentence_count=len(sentences),
            avg_words_per_sentence=total / max(len(sentences), 1),
            top_keyword_score=merged[0].score if merged else 0.0,
        )
