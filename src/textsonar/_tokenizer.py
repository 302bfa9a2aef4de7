"""Single-pass tokenizer with rule-based POS tagging and lemmatization."""

from __future__ import annotations

import logging
import re
from collections import Counter
from functools import lru_cache
from typing import Iterable

from ._cache import BoundedCache
from ._errors import require_text
from ._stop_words import STOP_WORDS
from ._tokenizer_data import (
    IRREGULAR_PLURALS,
    IRREGULAR_VERBS,
    LEMMA_RULES,
    POS_RULES,
    WORD_POS,
)
from ._types import Token

logger = logging.getLogger(__name__)

# Letter runs with one optional internal apostrophe, numbers with decimal
# groups and a percent suffix, then any other single visible character.
_TOKEN_RE = re.compile(
    r"(?P<word>[^\W\d_]+(?:['’][^\W\d_]+)?)"
    r"|(?P<number>\d+(?:[.,]\d+)*%?)"
    r"|(?P<other>\S)"
)


def _normalize(word: str) -> str:
    return word.lower().replace("’", "'")


def pos_tag(word: str) -> tuple[str, str]:
    """Return (POS, tag) for a single word."""
    return _word_features(_normalize(word))[:2]


def lemmatize(word: str, pos: str) -> str:
    """Reduce a lowercased word to its base form given its POS."""
    irregular = IRREGULAR_VERBS.get(word) or IRREGULAR_PLURALS.get(word)
    if irregular is not None:
        return irregular
    for suffix, replacement, min_length, rule_pos in LEMMA_RULES:
        if len(word) >= min_length and word.endswith(suffix) and pos in rule_pos:
            stem = word[:-len(suffix)] + replacement
            if len(stem) >= 2:
                return stem
    return word


@lru_cache(maxsize=65536)
def _word_features(lower: str) -> tuple[str, str, str]:
    tagged = WORD_POS.get(lower)
    if tagged is not None:
        pos, tag = tagged
    else:
        pos, tag = "NOUN", "NN"
        for pattern, rule_pos, rule_tag in POS_RULES:
            if pattern.search(lower):
                pos, tag = rule_pos, rule_tag
                break
    return pos, tag, lemmatize(lower, pos)


class Tokenizer:
    """Splits text into annotated tokens; results are cached per text."""

    __slots__ = ("_cache",)

    def __init__(self, cache: BoundedCache[tuple[Token, ...]] | None = None) -> None:
        self._cache = cache if cache is not None else BoundedCache(1000, 100)

    def tokenize(self, text: str) -> tuple[Token, ...]:
        require_text(text)
        cached = self._cache.get(text)
        if cached is not None:
            logger.debug("tokenize: cache hit (%d chars)", len(text))
            return cached

        tokens = tuple(
            self._make_token(m.group(), i, m.start(), m.end())
            for i, m in enumerate(_TOKEN_RE.finditer(text))
        )
        self._cache.put(text, tokens)
        return tokens

    @staticmethod
    def _make_token(text: str, index: int, start: int, end: int) -> Token:
        lower = _normalize(text)
        pos, tag, lemma = _word_features(lower)
        return Token(
            text=text,
            lemma=lemma,
            pos=pos,
            tag=tag,
            is_stop_word=lower in STOP_WORDS,
            is_punctuation=pos == "PUNCT",
            is_alpha=text.isalpha(),
            is_digit=text.isdigit(),
            index=index,
            start_offset=start,
            end_offset=end,
        )

    @staticmethod
    def word_frequencies(tokens: Iterable[Token]) -> Counter[str]:
        """Lemma counts over alphabetic, non-stop-word tokens."""
        return Counter(
            t.lemma for t in tokens
            if t.is_alpha and not t.is_stop_word and not t.is_punctuation
        )

    @staticmethod
    def ngrams(tokens: Iterable[Token], n: int) -> list[tuple[str, ...]]:
        """Lemma n-grams over the non-punctuation tokens."""
        if n < 1:
            raise ValueError(f"n must be >= 1, got {n}")
        words = [t.lemma for t in tokens if not t.is_punctuation]
        return [tuple(words[i:i + n]) for i in range(len(words) - n + 1)]

    def clear_cache(self) -> None:
        self._cache.clear()
