"""Lexicon-driven sentiment and emotion scoring with modifier scope tracking."""

from __future__ import annotations

import logging
import threading
from collections import Counter, defaultdict
from typing import TYPE_CHECKING, Callable, Iterable, Mapping, Sequence

import Stemmer

from ._cache import BoundedCache
from ._errors import require_text
from ._lexicon import (
    DIMINISHERS,
    INTENSIFIERS,
    MAX_WORD_SCORE,
    NEGATION_FACTOR,
    NEGATION_WINDOW,
    NEGATIONS,
    SENTIMENT_LEXICON,
)
from ._phrases import PhraseMatcher
from ._tokenizer import Tokenizer
from ._types import (
    NEUTRAL_SENTIMENT,
    AspectSentiment,
    EmotionAnalysis,
    EmotionCategory,
    LexiconEntry,
    SentimentScore,
    SentimentShift,
    TrendPoint,
    frozen_mapping,
)

if TYPE_CHECKING:
    from ._types import Token

logger = logging.getLogger(__name__)

SHIFT_THRESHOLD = 0.3
ASPECT_RADIUS = 5


class SentimentAnalyzer:
    """Scores text against a sentiment lexicon.

    Intensifiers and diminishers set a multiplier consumed by the next
    lexicon hit. A negation cue opens a window over the next three
    alphabetic tokens in which hits are multiplied by -0.5. Tokens are
    matched against the lexicon by lemma, then surface form, then Snowball
    stem.
    """

    __slots__ = (
        "_tokenizer", "_cache", "_lexicon", "_stem_index", "_stemmer",
        "_stem_lock", "_modifier_phrases", "_lexicon_listeners",
    )

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        *,
        lexicon: Mapping[str, LexiconEntry] | None = None,
        cache: BoundedCache[SentimentScore] | None = None,
    ) -> None:
        self._tokenizer = tokenizer if tokenizer is not None else Tokenizer()
        self._cache = cache if cache is not None else BoundedCache(1000, 100)
        self._stemmer = Stemmer.Stemmer("english")
        self._stem_lock = threading.Lock()
        self._lexicon: dict[str, LexiconEntry] = dict(SENTIMENT_LEXICON)
        if lexicon:
            self._lexicon.update(
                (" ".join(w.lower().split()), e) for w, e in lexicon.items()
            )
        self._stem_index: dict[str, str] = {}
        for word in self._lexicon:
            self._stem_index.setdefault(self._stem(word), word)
        self._modifier_phrases = PhraseMatcher(
            p for p in DIMINISHERS if " " in p
        )
        self._lexicon_listeners: list[Callable[[], None]] = []

    # -- Public API --

    def analyze(self, text: str) -> SentimentScore:
        """Document-level sentiment of ``text``."""
        require_text(text)
        cached = self._cache.get(text)
        if cached is not None:
            logger.debug("analyze: cache hit (%d chars)", len(text))
            return cached
        result = self.analyze_tokens(self._tokenizer.tokenize(text))
        self._cache.put(text, result)
        return result

    def analyze_tokens(self, tokens: Sequence[Token]) -> SentimentScore:
        """Score an already tokenized sequence."""
        phrase_at = self._modifier_spans(tokens)

        total = positive = negative = 0.0
        word_count = 0
        hits = 0
        multiplier = 1.0
        negation_left = 0

        i = 0
        while i < len(tokens):
            token = tokens[i]
            span = phrase_at.get(i)
            if span is not None:
                n_words, factor = span
                multiplier = factor
                i += n_words
                continue

            lower = token.text.lower()
            lemma = token.lemma.lower()
            if lemma in NEGATIONS or lower in NEGATIONS:
                negation_left = NEGATION_WINDOW
                i += 1
                continue
            modifier = _modifier(lower, lemma)
            if modifier is not None:
                multiplier = modifier
                i += 1
                continue

            entry = self._entry_for(token)
            if entry is not None:
                score = entry.score * entry.intensity * multiplier
                if negation_left > 0:
                    score *= NEGATION_FACTOR
                total += score
                if score > 0:
                    positive += score
                else:
                    negative -= score
                hits += 1
                multiplier = 1.0

            if token.is_alpha and not token.is_stop_word:
                word_count += 1
            if negation_left > 0 and token.is_alpha:
                negation_left -= 1
            i += 1

        if not hits:
            return NEUTRAL_SENTIMENT

        max_possible = hits * MAX_WORD_SCORE
        pos_norm = min(1.0, positive / max_possible)
        neg_norm = min(1.0, negative / max_possible)
        return SentimentScore(
            overall=max(-1.0, min(1.0, total / max_possible)),
            positive=pos_norm,
            negative=neg_norm,
            neutral=min(1.0, max(0.0, 1.0 - pos_norm - neg_norm)),
            confidence=min(1.0, hits / max(word_count, 1)),
        )

    def analyze_emotions(self, text: str) -> EmotionAnalysis:
        """Emotion distribution over the 16 emotion categories."""
        require_text(text)
        tokens = self._tokenizer.tokenize(text)

        counts: Counter[EmotionCategory] = Counter()
        intensities: dict[EmotionCategory, list[float]] = defaultdict(list)
        total_intensity = 0.0
        for token in tokens:
            entry = self._entry_for(token)
            if entry is None:
                continue
            for emotion in entry.emotions:
                counts[emotion] += 1
                intensities[emotion].append(entry.intensity)
                total_intensity += entry.intensity

        distinct = max(len(intensities), 1)
        raw = dict.fromkeys(EmotionCategory, 0.0)
        for emotion, values in intensities.items():
            raw[emotion] = (sum(values) / len(values)) * (len(values) / distinct)
        peak = max(max(raw.values()), 0.01)

        # most_common keeps first-seen order among equal counts
        ranked = counts.most_common(2)
        n_alpha = sum(1 for t in tokens if t.is_alpha)
        return EmotionAnalysis(
            primary=ranked[0][0] if ranked else None,
            secondary=ranked[1][0] if len(ranked) > 1 else None,
            emotions=frozen_mapping({e: v / peak for e, v in raw.items()}),
            intensity=min(1.0, total_intensity / max(n_alpha, 1)),
            confidence=min(1.0, len(counts) / 5),
        )

    def sentiment_trend(self, sentences: Sequence[str]) -> list[TrendPoint]:
        last = max(len(sentences) - 1, 1)
        return [
            TrendPoint(position=i / last, sentiment=self.analyze(s).overall)
            for i, s in enumerate(sentences)
        ]

    def find_sentiment_shifts(self, sentences: Sequence[str]) -> list[SentimentShift]:
        """Adjacent-sentence changes in overall sentiment larger than 0.3."""
        scores = [self.analyze(s).overall for s in sentences]
        shifts: list[SentimentShift] = []
        for i in range(1, len(scores)):
            diff = scores[i] - scores[i - 1]
            if abs(diff) > SHIFT_THRESHOLD:
                shifts.append(SentimentShift(
                    position=i,
                    from_score=scores[i - 1],
                    to_score=scores[i],
                    magnitude=abs(diff),
                    direction="positive" if diff > 0 else "negative",
                    sentence=sentences[i],
                ))
        return shifts

    def analyze_aspects(
        self, text: str, aspects: Iterable[str]
    ) -> list[AspectSentiment]:
        """Inverse-distance weighted sentiment around each aspect mention."""
        require_text(text)
        tokens = self._tokenizer.tokenize(text)
        entries = [self._entry_for(t) for t in tokens]

        results: list[AspectSentiment] = []
        for aspect in aspects:
            target = aspect.lower()
            mentions = [
                i for i, t in enumerate(tokens)
                if t.lemma.lower() == target or t.text.lower() == target
            ]
            weighted = 0.0
            count = 0
            for i in mentions:
                lo = max(0, i - ASPECT_RADIUS)
                hi = min(len(tokens), i + ASPECT_RADIUS + 1)
                for j in range(lo, hi):
                    entry = entries[j]
                    if j == i or entry is None:
                        continue
                    weighted += entry.score * entry.intensity / abs(i - j)
                    count += 1
            results.append(AspectSentiment(
                aspect=aspect,
                sentiment=weighted / count if count else 0.0,
                confidence=min(1.0, count / 3),
                mentions=len(mentions),
            ))
        return results

    # -- Lexicon access and extension --

    def lookup(self, word: str) -> LexiconEntry | None:
        """Look up a single word with the same normalization as scoring."""
        lower = word.lower()
        entry = self._lexicon.get(lower)
        if entry is not None:
            return entry
        base = self._stem_index.get(self._stem(lower))
        return self._lexicon[base] if base is not None else None

    def add_word(
        self,
        word: str,
        score: float,
        intensity: float,
        emotions: Iterable[str] = (),
    ) -> LexiconEntry:
        """Add a word to this analyzer's lexicon.

        Raises:
            ValueError: If the word is empty or already present, score is
                outside [-5, 5], intensity outside [0, 1], or an emotion
                name is unknown.
        """
        normalized = " ".join(word.lower().split())
        if not normalized:
            raise ValueError("word must not be empty")
        if normalized in self._lexicon:
            raise ValueError(f"word '{normalized}' already exists in lexicon")
        if not -MAX_WORD_SCORE <= score <= MAX_WORD_SCORE:
            raise ValueError(f"score must be in [-5, 5], got {score}")
        if not 0.0 <= intensity <= 1.0:
            raise ValueError(f"intensity must be in [0.0, 1.0], got {intensity}")
        tags: list[EmotionCategory] = []
        for name in emotions:
            try:
                tags.append(EmotionCategory(name))
            except ValueError:
                raise ValueError(f"unknown emotion {name!r}") from None

        entry = LexiconEntry(float(score), float(intensity), tuple(tags))
        self._lexicon[normalized] = entry
        self._stem_index.setdefault(self._stem(normalized), normalized)
        self._cache.clear()
        for listener in self._lexicon_listeners:
            listener()
        logger.debug("added lexicon word %r (score=%s)", normalized, score)
        return entry

    def on_lexicon_change(self, callback: Callable[[], None]) -> None:
        """Register a no-argument callback run after every ``add_word``."""
        self._lexicon_listeners.append(callback)

    def clear_cache(self) -> None:
        self._cache.clear()

    # -- Internals --

    def _stem(self, word: str) -> str:
        with self._stem_lock:
            return self._stemmer.stemWord(word)

    def _entry_for(self, token: Token) -> LexiconEntry | None:
        if not token.is_alpha:
            return None
        lemma = token.lemma.lower()
        entry = self._lexicon.get(lemma)
        if entry is not None:
            return entry
        lower = token.text.lower()
        entry = self._lexicon.get(lower)
        if entry is not None:
            return entry
        base = self._stem_index.get(self._stem(lower))
        return self._lexicon[base] if base is not None else None

    def _modifier_spans(self, tokens: Sequence[Token]) -> dict[int, tuple[int, float]]:
        """Map token index -> (n_tokens, factor) for multi-word diminishers."""
        if not len(self._modifier_phrases) or len(tokens) < 2:
            return {}
        starts: dict[int, int] = {}
        parts: list[str] = []
        offset = 0
        for i, token in enumerate(tokens):
            starts[offset] = i
            parts.append(token.text.lower())
            offset += len(parts[-1]) + 1
        spans: dict[int, tuple[int, float]] = {}
        for start, _end, phrase in self._modifier_phrases.find(" ".join(parts)):
            first = starts.get(start)
            if first is not None:
                spans[first] = (phrase.count(" ") + 1, DIMINISHERS[phrase])
        return spans


def _modifier(lower: str, lemma: str) -> float | None:
    for table in (INTENSIFIERS, DIMINISHERS):
        factor = table.get(lower)
        if factor is None:
            factor = table.get(lemma)
        if factor is not None:
            return factor
    return None
