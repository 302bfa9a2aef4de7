"""Abbreviation-aware sentence splitter with per-sentence analysis."""

from __future__ import annotations

import bisect
import logging
import re
from typing import TYPE_CHECKING, Sequence

from ._cache import BoundedCache
from ._errors import require_text
from ._tokenizer import Tokenizer
from ._types import (
    NEUTRAL_SENTIMENT,
    ComplexityMetrics,
    Sentence,
    SentenceStatistics,
    SentenceType,
    SentimentScore,
    Token,
    frozen_mapping,
)

if TYPE_CHECKING:
    from ._sentiment import SentimentAnalyzer

logger = logging.getLogger(__name__)

TITLE_ABBREVIATIONS: frozenset[str] = frozenset({
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "rev", "hon", "gov",
    "pres", "gen", "col", "lt", "sgt", "cpl", "pvt", "adm", "capt",
    "cmdr", "maj", "rep", "sen", "amb", "treas", "sec", "atty", "supt",
})

ABBREVIATIONS: frozenset[str] = TITLE_ABBREVIATIONS | frozenset({
    # Academic
    "ph", "phd", "md", "ba", "bs", "ma", "mba", "jd", "llb", "llm",
    "ed", "edd", "dds", "dvm", "rn", "esq", "cpa", "pe", "ra",
    # Months
    "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "sept",
    "oct", "nov", "dec",
    # States
    "ala", "ariz", "ark", "calif", "colo", "conn", "del", "fla", "ill",
    "ind", "kans", "mass", "mich", "minn", "miss", "mont", "nebr", "nev",
    "okla", "oreg", "penn", "tenn", "tex", "wash", "wisc", "wyo",
    # Common
    "etc", "vs", "viz", "al", "eg", "ie", "cf", "approx", "dept", "est",
    "min", "max", "misc", "no", "nos", "op", "pp", "re", "ref", "tel",
    "temp", "vet", "vol", "vols", "yr", "yrs", "fig", "figs", "inc",
    "corp", "ltd", "co", "bros", "assn", "assoc", "natl", "intl", "govt",
    # Units
    "oz", "lb", "lbs", "kg", "km", "cm", "mm", "ml", "mg", "ft", "yd",
    "mi", "hr", "hrs", "mins", "secs", "cal", "sq", "cu",
})

_ENDERS = frozenset(".!?")
_QUOTES = frozenset("\"'“”‘’`")
_BRACKET_CLOSE = frozenset(")]}»")
_TRAILING = _ENDERS | _QUOTES | _BRACKET_CLOSE

_LINK_RE = re.compile(
    r"https?://\S+|www\.\S+|[\w.%+-]+@[\w-]+(?:\.[\w-]+)+",
    re.IGNORECASE,
)
_LINK_TRAILING = ".,;:!?)]}\"'"

_CLAUSE_MARKERS = frozenset({
    ",", ";", "and", "but", "or", "because", "although", "while", "when",
    "if", "that", "which", "who",
})
_SUBORDINATORS = frozenset({
    "because", "although", "while", "when", "if", "unless", "since",
    "after", "before", "that", "which", "who", "whom", "whose",
})

# Fallback sentiment word lists, independent of the full lexicon.
_POSITIVE_WORDS = frozenset({
    "good", "great", "excellent", "amazing", "wonderful", "fantastic",
    "awesome", "best", "love", "happy", "beautiful", "perfect", "incredible",
    "brilliant", "outstanding", "superb", "magnificent", "exceptional",
    "positive", "success", "win", "winning", "joy", "exciting", "excited",
})
_NEGATIVE_WORDS = frozenset({
    "bad", "terrible", "awful", "horrible", "worst", "hate", "sad",
    "ugly", "poor", "disappointing", "disappointed", "negative", "fail",
    "failure", "lose", "losing", "angry", "boring", "bored", "annoying",
    "annoyed", "frustrating", "frustrated", "painful", "pain", "wrong",
})


def count_syllables(word: str) -> int:
    """Vowel-group syllable estimate with silent-e and consonant-le fixes."""
    lower = word.lower()
    if len(lower) <= 3:
        return 1
    count = 0
    prev_vowel = False
    for ch in lower:
        is_vowel = ch in "aeiouy"
        if is_vowel and not prev_vowel:
            count += 1
        prev_vowel = is_vowel
    if lower.endswith("e") and count > 1:
        count -= 1
    if lower.endswith("le") and lower[-3] not in "aeiouy":
        count += 1
    return max(1, count)


def analyze_complexity(tokens: Sequence[Token]) -> ComplexityMetrics:
    """Readability metrics and a 0-100 complexity score for a token run."""
    words = [t for t in tokens if t.is_alpha]
    if not words:
        return ComplexityMetrics(
            word_count=0, avg_word_length=0.0, syllable_count=0,
            avg_syllables_per_word=0.0, clause_count=1,
            subordinate_clause_count=0, complexity_score=0.0,
        )

    n_words = len(words)
    avg_length = sum(len(t.text) for t in words) / n_words
    syllables = sum(count_syllables(t.text) for t in words)
    avg_syllables = syllables / n_words

    clauses = 1
    subordinate = 0
    for token in tokens:
        lower = token.text.lower()
        if lower in _CLAUSE_MARKERS:
            clauses += 1
        if lower in _SUBORDINATORS:
            subordinate += 1

    score = (
        min(avg_length / 8, 1.0) * 25
        + min(avg_syllables / 3, 1.0) * 25
        + min(clauses / 4, 1.0) * 25
        + min(n_words / 30, 1.0) * 25
    )
    return ComplexityMetrics(
        word_count=n_words,
        avg_word_length=avg_length,
        syllable_count=syllables,
        avg_syllables_per_word=avg_syllables,
        clause_count=clauses,
        subordinate_clause_count=subordinate,
        complexity_score=score,
    )


def basic_sentiment(tokens: Sequence[Token]) -> SentimentScore:
    """Two-word-list sentiment used when no SentimentAnalyzer is wired in."""
    positive = negative = 0
    for token in tokens:
        lemma = token.lemma.lower()
        if lemma in _POSITIVE_WORDS:
            positive += 1
        elif lemma in _NEGATIVE_WORDS:
            negative += 1
    total = positive + negative
    if not total:
        return NEUTRAL_SENTIMENT
    pos_share = positive / total
    neg_share = negative / total
    return SentimentScore(
        overall=pos_share - neg_share,
        positive=pos_share,
        negative=neg_share,
        neutral=1.0 - (pos_share + neg_share),
        confidence=min(total / 5, 1.0),
    )


def _classify(text: str, tokens: Sequence[Token]) -> SentenceType:
    closing = text.rstrip().rstrip("".join(_QUOTES | _BRACKET_CLOSE))
    if closing.endswith("?"):
        return SentenceType.INTERROGATIVE
    if closing.endswith("!"):
        return SentenceType.EXCLAMATORY
    first_alpha = next((t for t in tokens if t.is_alpha), None)
    if (
        first_alpha is not None
        and not first_alpha.is_stop_word
        and first_alpha.pos == "VERB"
    ):
        return SentenceType.IMPERATIVE
    return SentenceType.DECLARATIVE


def _word_before(text: str, pos: int) -> str:
    start = pos
    while start > 0 and text[start - 1].isalpha():
        start -= 1
    return text[start:pos]


def _next_non_space(text: str, pos: int) -> str | None:
    for ch in text[pos:pos + 256]:
        if not ch.isspace():
            return ch
    stripped = text[pos + 256:].lstrip()
    return stripped[0] if stripped else None


def _link_spans(text: str) -> list[tuple[int, int]]:
    spans = []
    for m in _LINK_RE.finditer(text):
        end = m.end()
        while end > m.start() and text[end - 1] in _LINK_TRAILING:
            end -= 1
        spans.append((m.start(), end))
    return spans


class SentenceSplitter:
    """Splits text into typed, scored sentences.

    A ``!`` or ``?`` always ends a sentence. A ``.`` ends one unless it
    follows a known abbreviation, sits inside a number, URL or email, is
    part of an ellipsis, or follows a single-letter initial; it also needs
    the next visible character to be something other than a lowercase
    letter. Closing quotes and brackets after the boundary stay with the
    sentence they close.
    """

    __slots__ = ("_tokenizer", "_sentiment", "_cache")

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        *,
        sentiment_analyzer: SentimentAnalyzer | None = None,
        cache: BoundedCache[tuple[Sentence, ...]] | None = None,
    ) -> None:
        self._tokenizer = tokenizer if tokenizer is not None else Tokenizer()
        self._sentiment = sentiment_analyzer
        self._cache = cache if cache is not None else BoundedCache(500, 200)
        if sentiment_analyzer is not None:
            # drop sentences scored against the previous lexicon
            sentiment_analyzer.on_lexicon_change(self.clear_cache)

    def split(self, text: str) -> tuple[Sentence, ...]:
        require_text(text)
        cached = self._cache.get(text)
        if cached is not None:
            logger.debug("split: cache hit (%d chars)", len(text))
            return cached

        tokens = self._tokenizer.tokenize(text)
        token_starts = [t.start_offset for t in tokens]

        sentences: list[Sentence] = []
        start = 0
        for end in [*self.find_boundaries(text), len(text)]:
            segment = text[start:end]
            s_start = start + (len(segment) - len(segment.lstrip()))
            s_end = start + len(segment.rstrip())
            start = end
            if s_start >= s_end:
                continue
            lo = bisect.bisect_left(token_starts, s_start)
            hi = bisect.bisect_left(token_starts, s_end)
            sentences.append(self._make_sentence(
                text[s_start:s_end], tokens[lo:hi], s_start, s_end,
            ))

        result = tuple(sentences)
        self._cache.put(text, result)
        return result

    def find_boundaries(self, text: str) -> list[int]:
        """Exclusive end offsets of every sentence but the trailing one."""
        links = _link_spans(text)
        ends: list[int] = []
        n = len(text)
        i = 0
        while i < n:
            if text[i] in _ENDERS and self._is_boundary(text, i, links):
                end = i + 1
                while end < n and text[end] in _TRAILING:
                    end += 1
                ends.append(end)
                i = end
            else:
                i += 1
        if ends and ends[-1] == n:
            ends.pop()
        return ends

    def statistics(self, sentences: Sequence[Sentence]) -> SentenceStatistics:
        distribution = dict.fromkeys(SentenceType, 0.0)
        if not sentences:
            return SentenceStatistics(
                count=0, avg_length=0.0, avg_complexity=0.0,
                type_distribution=frozen_mapping(distribution),
                avg_sentiment=0.0,
            )
        n = len(sentences)
        for sentence in sentences:
            distribution[sentence.sentence_type] += 1 / n
        return SentenceStatistics(
            count=n,
            avg_length=sum(
                sum(1 for t in s.tokens if t.is_alpha) for s in sentences
            ) / n,
            avg_complexity=sum(s.complexity_score for s in sentences) / n,
            type_distribution=frozen_mapping(distribution),
            avg_sentiment=sum(s.sentiment.overall for s in sentences) / n,
        )

    def clear_cache(self) -> None:
        self._cache.clear()

    def _make_sentence(
        self, text: str, tokens: tuple[Token, ...], start: int, end: int
    ) -> Sentence:
        if self._sentiment is not None:
            sentiment = self._sentiment.analyze_tokens(tokens)
        else:
            sentiment = basic_sentiment(tokens)
        return Sentence(
            text=text,
            tokens=tokens,
            start_offset=start,
            end_offset=end,
            sentence_type=_classify(text, tokens),
            sentiment=sentiment,
            complexity_score=analyze_complexity(tokens).complexity_score,
        )

    @staticmethod
    def _is_boundary(
        text: str, pos: int, links: list[tuple[int, int]]
    ) -> bool:
        if text[pos] != ".":
            return True

        word = _word_before(text, pos)
        following = _next_non_space(text, pos + 1)
        if word and word.lower() in ABBREVIATIONS:
            # "Dr. Smith" continues; "etc. The" ends the sentence
            if following is not None and following.isupper():
                return word.lower() not in TITLE_ABBREVIATIONS
            return False

        after = text[pos + 1] if pos + 1 < len(text) else ""
        if pos > 0 and text[pos - 1].isdigit() and after.isdigit():
            return False
        if after == ".":
            return False
        if (
            len(word) == 1 and word.isupper()
            and following is not None and following.isupper()
        ):
            return False
        for link_start, link_end in links:
            if link_start <= pos < link_end:
                return False
            if link_start > pos:
                break

        if following is None:
            return True
        return not following.islower()
