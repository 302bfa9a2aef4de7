"""textsonar: tokenizing, sentence splitting, sentiment, keywords and entities."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._cache import BoundedCache
from ._entities import NamedEntityRecognizer
from ._errors import (
    InvalidInputError,
    SonarChecksumError,
    SonarDataError,
    SonarError,
    SonarVersionError,
)
from ._gazetteers import Gazetteer
from ._keywords import KeywordConfig, KeywordExtractor
from ._loader import Extensions, load_extensions
from ._sentence import SentenceSplitter, analyze_complexity, count_syllables
from ._sentiment import SentimentAnalyzer
from ._stop_words import STOP_WORDS, is_stop_word
from ._tokenizer import Tokenizer
from ._types import (
    AspectSentiment,
    ComplexityMetrics,
    EmotionAnalysis,
    EmotionCategory,
    EntityType,
    KeyPhrase,
    KeywordResult,
    KeywordStatistics,
    LexiconEntry,
    NamedEntity,
    ScoredKeyword,
    Sentence,
    SentenceStatistics,
    SentenceType,
    SentimentScore,
    SentimentShift,
    Token,
    TopicCluster,
    TrendPoint,
)

if TYPE_CHECKING:
    from pathlib import Path

    from ._analyzer import TextAnalyzer

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "AspectSentiment",
    "BoundedCache",
    "ComplexityMetrics",
    "EmotionAnalysis",
    "EmotionCategory",
    "EntityType",
    "Extensions",
    "Gazetteer",
    "InvalidInputError",
    "KeyPhrase",
    "KeywordConfig",
    "KeywordExtractor",
    "KeywordResult",
    "KeywordStatistics",
    "LexiconEntry",
    "NamedEntity",
    "NamedEntityRecognizer",
    "STOP_WORDS",
    "ScoredKeyword",
    "Sentence",
    "SentenceSplitter",
    "SentenceStatistics",
    "SentenceType",
    "SentimentAnalyzer",
    "SentimentScore",
    "SentimentShift",
    "SonarChecksumError",
    "SonarDataError",
    "SonarError",
    "SonarVersionError",
    "TextAnalyzer",
    "Token",
    "Tokenizer",
    "TopicCluster",
    "TrendPoint",
    "analyze_complexity",
    "count_syllables",
    "is_stop_word",
    "load_extensions",
]


def load(
    extensions: Path | str | None = None,
    *,
    keyword_config: KeywordConfig | None = None,
    sha256: str | None = None,
) -> "TextAnalyzer":
    """Return a ready-to-use TextAnalyzer.

    Args:
        extensions: Optional msgpack extensions file adding lexicon words
            and gazetteer names.
        keyword_config: Settings for the keyword extractor.
        sha256: Expected digest of the extensions file.
    """
    from ._analyzer import TextAnalyzer

    data = load_extensions(extensions, sha256=sha256) if extensions is not None else None
    return TextAnalyzer(data, keyword_config=keyword_config)


# Deferred so the facade module loads only when first used.
def __getattr__(name: str):
    if name == "TextAnalyzer":
        from ._analyzer import TextAnalyzer
        return TextAnalyzer
    raise AttributeError(f"module 'textsonar' has no attribute {name!r}")
