"""Data structures for textsonar."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class EmotionCategory(str, Enum):
    JOY = "joy"
    SADNESS = "sadness"
    ANGER = "anger"
    FEAR = "fear"
    SURPRISE = "surprise"
    DISGUST = "disgust"
    TRUST = "trust"
    ANTICIPATION = "anticipation"
    LOVE = "love"
    OPTIMISM = "optimism"
    PRIDE = "pride"
    ADMIRATION = "admiration"
    GRATITUDE = "gratitude"
    SERENITY = "serenity"
    AMUSEMENT = "amusement"
    EXCITEMENT = "excitement"


class SentenceType(str, Enum):
    DECLARATIVE = "declarative"
    INTERROGATIVE = "interrogative"
    EXCLAMATORY = "exclamatory"
    IMPERATIVE = "imperative"


class EntityType(str, Enum):
    PERSON = "PERSON"
    ORGANIZATION = "ORGANIZATION"
    LOCATION = "LOCATION"
    PRODUCT = "PRODUCT"
    DATE = "DATE"
    TIME = "TIME"
    MONEY = "MONEY"
    PERCENT = "PERCENT"
    EVENT = "EVENT"
    URL = "URL"
    EMAIL = "EMAIL"
    HASHTAG = "HASHTAG"
    MENTION = "MENTION"


@dataclass(slots=True, frozen=True)
class Token:
    text: str
    lemma: str
    pos: str            # universal POS: NOUN, VERB, ADJ, PUNCT, ...
    tag: str            # Penn-style fine tag: NN, VBG, JJS, ...
    is_stop_word: bool
    is_punctuation: bool
    is_alpha: bool
    is_digit: bool
    index: int          # position in the token sequence of one call
    start_offset: int
    end_offset: int     # exclusive


@dataclass(slots=True, frozen=True)
class SentimentScore:
    overall: float      # [-1, 1]
    positive: float
    negative: float
    neutral: float
    confidence: float


NEUTRAL_SENTIMENT = SentimentScore(
    overall=0.0, positive=0.0, negative=0.0, neutral=1.0, confidence=0.5,
)


@dataclass(slots=True, frozen=True)
class Sentence:
    text: str
    tokens: tuple[Token, ...]
    start_offset: int
    end_offset: int
    sentence_type: SentenceType
    sentiment: SentimentScore
    complexity_score: float     # 0-100


@dataclass(slots=True, frozen=True)
class ComplexityMetrics:
    word_count: int
    avg_word_length: float
    syllable_count: int
    avg_syllables_per_word: float
    clause_count: int
    subordinate_clause_count: int
    complexity_score: float


@dataclass(slots=True, frozen=True)
class SentenceStatistics:
    count: int
    avg_length: float
    avg_complexity: float
    type_distribution: Mapping[SentenceType, float]
    avg_sentiment: float


@dataclass(slots=True, frozen=True)
class EmotionAnalysis:
    primary: EmotionCategory | None     # None when no emotion word was seen
    secondary: EmotionCategory | None
    emotions: Mapping[EmotionCategory, float]
    intensity: float
    confidence: float


@dataclass(slots=True, frozen=True)
class LexiconEntry:
    score: float        # [-5, 5]
    intensity: float    # [0, 1]
    emotions: tuple[EmotionCategory, ...] = ()


@dataclass(slots=True, frozen=True)
class TrendPoint:
    position: float     # 0.0 first sentence, 1.0 last
    sentiment: float


@dataclass(slots=True, frozen=True)
class SentimentShift:
    position: int       # index of the sentence the shift lands on
    from_score: float
    to_score: float
    magnitude: float
    direction: str      # "positive" | "negative"
    sentence: str


@dataclass(slots=True, frozen=True)
class AspectSentiment:
    aspect: str
    sentiment: float
    confidence: float
    mentions: int


@dataclass(slots=True, frozen=True)
class ScoredKeyword:
    keyword: str
    score: float
    frequency: int
    methods: frozenset[str] = field(default_factory=frozenset)


@dataclass(slots=True, frozen=True)
class KeyPhrase:
    phrase: str
    score: float
    frequency: int
    words: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class TopicCluster:
    id: str
    name: str
    keywords: tuple[str, ...]
    relevance: float
    document_count: int = 1


@dataclass(slots=True, frozen=True)
class KeywordStatistics:
    total_words: int
    unique_words: int
    vocabulary_richness: float
    keyword_density: float
    keyword_coverage: float
    sentence_count: int
    avg_words_per_sentence: float
    top_keyword_score: float


@dataclass(slots=True, frozen=True)
class KeywordResult:
    keywords: tuple[ScoredKeyword, ...]
    keyphrases: tuple[KeyPhrase, ...]
    topics: tuple[TopicCluster, ...]
    statistics: KeywordStatistics


@dataclass(slots=True, frozen=True)
class NamedEntity:
    text: str
    entity_type: EntityType
    start_offset: int
    end_offset: int
    confidence: float


def frozen_mapping(data: dict) -> Mapping:
    """Read-only view used for mapping fields of returned value objects."""
    return MappingProxyType(data)
