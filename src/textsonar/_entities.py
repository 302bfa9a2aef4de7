"""Named entity recognition from patterns, capitalized runs and gazetteers."""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, NamedTuple, Sequence

from ._cache import BoundedCache
from ._errors import require_text
from ._gazetteers import CONNECTORS, DEFAULT_GAZETTEER, Gazetteer
from ._phrases import PhraseMatcher
from ._tokenizer import Tokenizer
from ._types import EntityType, NamedEntity, Token

logger = logging.getLogger(__name__)

_MONTHS = (
    "january|february|march|april|may|june|july|august|september|october"
    "|november|december"
)

# (type, confidence, pattern); every pattern is scanned over the whole text.
_PATTERNS: tuple[tuple[EntityType, float, re.Pattern[str]], ...] = tuple(
    (entity_type, confidence, re.compile(pattern, flags))
    for entity_type, confidence, pattern, flags in (
        (EntityType.URL, 0.95, r"https?://\S+|www\.\S+", re.I),
        (EntityType.EMAIL, 0.95, r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}", 0),
        (EntityType.HASHTAG, 0.95, r"#[a-zA-Z0-9_]+", 0),
        (EntityType.MENTION, 0.95, r"@[a-zA-Z0-9_]+", 0),
        (EntityType.DATE, 0.85, r"\b\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}\b", 0),
        (EntityType.DATE, 0.85, r"\b\d{4}[/\-]\d{1,2}[/\-]\d{1,2}\b", 0),
        (EntityType.DATE, 0.85,
         rf"\b(?:{_MONTHS})\s+\d{{1,2}}(?:st|nd|rd|th)?(?:,?\s*\d{{4}})?\b", re.I),
        (EntityType.DATE, 0.85,
         rf"\b\d{{1,2}}(?:st|nd|rd|th)?\s+(?:{_MONTHS})(?:,?\s*\d{{4}})?\b", re.I),
        (EntityType.DATE, 0.85,
         r"\b(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday)\b", re.I),
        (EntityType.DATE, 0.85,
         r"\b(?:today|tomorrow|yesterday|next week|last week|this month|next month)\b",
         re.I),
        (EntityType.TIME, 0.85, r"\b\d{1,2}:\d{2}(?::\d{2})?(?:\s*[ap]m)?\b", re.I),
        (EntityType.TIME, 0.85, r"\b\d{1,2}\s*[ap]m\b", re.I),
        (EntityType.TIME, 0.85,
         r"\b(?:noon|midnight|morning|afternoon|evening|night)\b", re.I),
        (EntityType.MONEY, 0.9,
         r"\$\d+(?:,\d{3})*(?:\.\d{2})?(?:\s*(?:million|billion|trillion|k|m|b)\b)?",
         re.I),
        (EntityType.MONEY, 0.9,
         r"\d+(?:,\d{3})*(?:\.\d{2})?\s*(?:dollars|usd|euros|eur|pounds|gbp|yen|jpy)\b",
         re.I),
        (EntityType.MONEY, 0.9, r"[€£¥]\d+(?:,\d{3})*(?:\.\d{2})?", 0),
        (EntityType.PERCENT, 0.9, r"\b\d+(?:\.\d+)?%", 0),
        (EntityType.PERCENT, 0.9, r"\b\d+(?:\.\d+)?\s*percent\b", re.I),
        (EntityType.EVENT, 0.75,
         r"\b(?:super bowl|world cup|olympics|grammy|oscar|emmy|tony)\b", re.I),
        (EntityType.EVENT, 0.75,
         r"\b(?:conference|summit|expo|convention|festival|championship)\b", re.I),
        (EntityType.EVENT, 0.75,
         r"\b(?:election|inauguration|ceremony|premiere|launch)\b", re.I),
        (EntityType.EVENT, 0.75,
         r"\b(?:black friday|cyber monday|prime day|christmas|thanksgiving)\b", re.I),
    )
)

_URL_TRAILING = ".,;:!?)]}\"'"

KNOWN_TOKEN_CONFIDENCE = 0.8
GAZETTEER_PHRASE_CONFIDENCE = 0.85
MAX_CONFIDENCE = 0.95
NEAR_DUPLICATE_DISTANCE = 5


class _Run(NamedTuple):
    """A capitalized token run, reduced to what classification looks at."""

    words: tuple[str, ...]     # lower-cased, excluding absorbed periods
    squashed: str              # words joined without spaces

    @property
    def first(self) -> str:
        return self.words[0]

    @property
    def last(self) -> str:
        return self.words[-1]


class _Lookups(NamedTuple):
    """Gazetteer plus its multi-word names with spaces removed."""

    gazetteer: Gazetteer
    squashed_locations: frozenset[str]
    squashed_products: frozenset[str]


_Rule = Callable[[_Lookups, _Run], bool]

# Evaluated top to bottom; the first matching predicate decides the type.
# A None result discards the run.
_CLASSIFY_RULES: tuple[tuple[_Rule, EntityType | None], ...] = (
    (lambda n, r: r.last in n.gazetteer.org_indicators
     or r.first in n.gazetteer.organizations,
     EntityType.ORGANIZATION),
    (lambda n, r: r.last in n.gazetteer.location_indicators
     or r.squashed in n.squashed_locations,
     EntityType.LOCATION),
    (lambda n, r: r.first in n.gazetteer.name_prefixes, EntityType.PERSON),
    (lambda n, r: r.last in n.gazetteer.name_suffixes, EntityType.PERSON),
    (lambda n, r: r.first in n.gazetteer.first_names and len(r.words) >= 2,
     EntityType.PERSON),
    (lambda n, r: r.squashed in n.squashed_products, EntityType.PRODUCT),
    (lambda n, r: len(r.words) == 1, None),
    (lambda n, r: len(r.words) <= 3, EntityType.PERSON),
    (lambda n, r: True, EntityType.ORGANIZATION),
)


def _squashed(names: frozenset[str]) -> frozenset[str]:
    return frozenset(n.replace(" ", "") for n in names)


def _is_capitalized(word: str) -> bool:
    return bool(word) and word[0].isupper()


def _lower_in_place(text: str) -> str:
    """Lower-case without changing length so offsets stay valid."""
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    return "".join(c if len(c.lower()) != 1 else c.lower() for c in text)


class NamedEntityRecognizer:
    """Finds entities in text and returns non-overlapping spans.

    Candidates come from regular expressions (links, dates, money and the
    like), from runs of capitalized tokens classified by the gazetteer, from
    single tokens that are known names, and from multi-word gazetteer names.
    Overlaps are resolved by keeping the earliest, then longest, span.
    """

    __slots__ = (
        "_tokenizer", "_gazetteer", "_cache", "_phrases", "_phrase_types", "_lookups",
    )

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        *,
        gazetteer: Gazetteer | None = None,
        cache: BoundedCache[tuple[NamedEntity, ...]] | None = None,
    ) -> None:
        self._tokenizer = tokenizer if tokenizer is not None else Tokenizer()
        self._gazetteer = gazetteer if gazetteer is not None else DEFAULT_GAZETTEER
        self._cache = cache if cache is not None else BoundedCache(500, 150)

        g = self._gazetteer
        self._phrase_types: dict[str, EntityType] = {}
        for names, entity_type in (
            (g.products, EntityType.PRODUCT),
            (g.locations, EntityType.LOCATION),
            (g.organizations, EntityType.ORGANIZATION),
        ):
            for name in names:
                if " " in name:
                    self._phrase_types[name] = entity_type
        self._phrases = PhraseMatcher(self._phrase_types)
        self._lookups = _Lookups(g, _squashed(g.locations), _squashed(g.products))

    @property
    def gazetteer(self) -> Gazetteer:
        return self._gazetteer

    def recognize(self, text: str) -> tuple[NamedEntity, ...]:
        require_text(text)
        cached = self._cache.get(text)
        if cached is not None:
            logger.debug("recognize: cache hit (%d chars)", len(text))
            return cached

        candidates: list[NamedEntity] = []
        candidates.extend(self._pattern_entities(text))
        candidates.extend(self._token_entities(text, self._tokenizer.tokenize(text)))
        candidates.extend(self._gazetteer_phrases(text))

        result = tuple(_deduplicate(candidates))
        self._cache.put(text, result)
        return result

    @staticmethod
    def entities_by_type(
        entities: Iterable[NamedEntity], entity_type: EntityType | str
    ) -> list[NamedEntity]:
        wanted = EntityType(entity_type)
        return [e for e in entities if e.entity_type is wanted]

    @staticmethod
    def entity_frequencies(
        entities: Iterable[NamedEntity],
    ) -> dict[str, tuple[EntityType, int]]:
        """Count entities by lower-cased text; the first type seen is kept."""
        frequencies: dict[str, tuple[EntityType, int]] = {}
        for entity in entities:
            key = entity.text.lower()
            entity_type, count = frequencies.get(key, (entity.entity_type, 0))
            frequencies[key] = (entity_type, count + 1)
        return frequencies

    def people(self, text: str) -> list[str]:
        return [e.text for e in self.recognize(text) if e.entity_type is EntityType.PERSON]

    def organizations(self, text: str) -> list[str]:
        return [
            e.text for e in self.recognize(text)
            if e.entity_type is EntityType.ORGANIZATION
        ]

    def locations(self, text: str) -> list[str]:
        return [
            e.text for e in self.recognize(text)
            if e.entity_type is EntityType.LOCATION
        ]

    def clear_cache(self) -> None:
        self._cache.clear()

    # -- Candidate passes --

    @staticmethod
    def _pattern_entities(text: str) -> list[NamedEntity]:
        found: list[NamedEntity] = []
        for entity_type, confidence, pattern in _PATTERNS:
            for m in pattern.finditer(text):
                start, end = m.span()
                if entity_type is EntityType.URL:
                    while end > start and text[end - 1] in _URL_TRAILING:
                        end -= 1
                if end > start:
                    found.append(
                        NamedEntity(text[start:end], entity_type, start, end, confidence)
                    )
        return found

    def _token_entities(
        self, text: str, tokens: Sequence[Token]
    ) -> list[NamedEntity]:
        found: list[NamedEntity] = []
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if not token.is_alpha:
                i += 1
                continue

            if _is_capitalized(token.text):
                run, consumed = self._capitalized_run(tokens, i)
                if run:
                    entity = self._classify_run(text, run)
                    if entity is not None:
                        found.append(entity)
                    i += consumed
                    continue

            entity_type = self._known_type(token.text.lower())
            if entity_type is not None:
                found.append(NamedEntity(
                    token.text, entity_type, token.start_offset,
                    token.end_offset, KNOWN_TOKEN_CONFIDENCE,
                ))
            i += 1
        return found

    def _gazetteer_phrases(self, text: str) -> list[NamedEntity]:
        return [
            NamedEntity(
                text[start:end], self._phrase_types[phrase], start, end,
                GAZETTEER_PHRASE_CONFIDENCE,
            )
            for start, end, phrase in self._phrases.find(_lower_in_place(text))
        ]

    # -- Capitalized runs --

    def _capitalized_run(
        self, tokens: Sequence[Token], start: int
    ) -> tuple[list[Token], int]:
        """Return the trimmed run starting at ``start`` and tokens scanned."""
        prefixes = self._gazetteer.name_prefixes
        run: list[Token] = []
        i = start
        while i < len(tokens):
            token = tokens[i]
            if token.is_alpha and _is_capitalized(token.text):
                run.append(token)
            elif run and token.text.lower() in CONNECTORS:
                run.append(token)
            elif (
                token.text == "."
                and run
                and run[-1].text.lower() in prefixes
                and run[-1].end_offset == token.start_offset
                and i + 1 < len(tokens)
                and _is_capitalized(tokens[i + 1].text)
            ):
                # "Dr. Smith"
                run.append(token)
            else:
                break
            i += 1
        consumed = i - start
        while run and (run[-1].text.lower() in CONNECTORS or run[-1].text == "."):
            run.pop()
        return run, consumed

    def _classify_run(self, text: str, run: list[Token]) -> NamedEntity | None:
        words = tuple(t.text.lower() for t in run if t.text != ".")
        info = _Run(words, "".join(words))
        for predicate, entity_type in _CLASSIFY_RULES:
            if predicate(self._lookups, info):
                break
        else:
            entity_type = None
        if entity_type is None:
            return None

        start, end = run[0].start_offset, run[-1].end_offset
        return NamedEntity(
            text[start:end], entity_type, start, end,
            self._confidence(info, entity_type),
        )

    def _confidence(self, run: _Run, entity_type: EntityType) -> float:
        g = self._gazetteer
        confidence = 0.5 + min(len(run.words) * 0.05, 0.2)
        if entity_type is EntityType.ORGANIZATION and run.last in g.org_indicators:
            confidence += 0.2
        if entity_type is EntityType.PERSON and run.first in g.name_prefixes:
            confidence += 0.2
        if entity_type is EntityType.LOCATION and run.last in g.location_indicators:
            confidence += 0.2
        if run.first in g.organizations or run.first in g.locations:
            confidence += 0.3
        return min(confidence, MAX_CONFIDENCE)

    def _known_type(self, word: str) -> EntityType | None:
        g = self._gazetteer
        if word in g.organizations:
            return EntityType.ORGANIZATION
        if word in g.locations:
            return EntityType.LOCATION
        if word in g.products:
            return EntityType.PRODUCT
        return None


def _deduplicate(candidates: list[NamedEntity]) -> list[NamedEntity]:
    """Keep earliest-then-longest spans; drop same text/type near-duplicates."""
    ordered = sorted(
        candidates, key=lambda e: (e.start_offset, -(e.end_offset - e.start_offset))
    )
    kept: list[NamedEntity] = []
    last_end = -1
    for entity in ordered:
        if entity.start_offset < last_end:
            continue
        if any(
            k.text == entity.text
            and k.entity_type is entity.entity_type
            and abs(k.start_offset - entity.start_offset) < NEAR_DUPLICATE_DISTANCE
            for k in kept
        ):
            continue
        kept.append(entity)
        last_end = entity.end_offset
    return kept
