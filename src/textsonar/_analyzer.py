"""TextAnalyzer: one instance of each engine, wired to share a tokenizer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ._entities import NamedEntityRecognizer
from ._gazetteers import DEFAULT_GAZETTEER
from ._keywords import KeywordConfig, KeywordExtractor
from ._sentence import SentenceSplitter
from ._sentiment import SentimentAnalyzer
from ._tokenizer import Tokenizer

if TYPE_CHECKING:
    from ._loader import Extensions
    from ._types import (
        EmotionAnalysis,
        KeywordResult,
        NamedEntity,
        Sentence,
        SentimentScore,
        Token,
    )


class TextAnalyzer:
    """Entry point bundling the five engines.

    The sentence splitter scores sentences with the full sentiment analyzer,
    and the keyword extractor counts sentences with the same splitter.

    Usage:
        analyzer = textsonar.load()
        entities = analyzer.recognize_entities("Dr. Smith joined Google.")
    """

    __slots__ = ("tokenizer", "sentiment", "splitter", "keywords", "entities")

    def __init__(
        self,
        extensions: Extensions | None = None,
        *,
        keyword_config: KeywordConfig | None = None,
    ) -> None:
        gazetteer = DEFAULT_GAZETTEER
        lexicon = None
        if extensions is not None:
            lexicon = extensions.sentiment
            gazetteer = gazetteer.extended(
                organizations=extensions.organizations,
                locations=extensions.locations,
                products=extensions.products,
                first_names=extensions.first_names,
            )

        self.tokenizer = Tokenizer()
        self.sentiment = SentimentAnalyzer(self.tokenizer, lexicon=lexicon)
        self.splitter = SentenceSplitter(
            self.tokenizer, sentiment_analyzer=self.sentiment
        )
        self.keywords = KeywordExtractor(
            self.tokenizer, splitter=self.splitter, config=keyword_config
        )
        self.entities = NamedEntityRecognizer(self.tokenizer, gazetteer=gazetteer)

    def tokenize(self, text: str) -> tuple[Token, ...]:
        return self.tokenizer.tokenize(text)

    def split(self, text: str) -> tuple[Sentence, ...]:
        return self.splitter.split(text)

    def analyze_sentiment(self, text: str) -> SentimentScore:
        return self.sentiment.analyze(text)

    def analyze_emotions(self, text: str) -> EmotionAnalysis:
        return self.sentiment.analyze_emotions(text)

    def extract_keywords(
        self, text: str, corpus: Sequence[str] | None = None
    ) -> KeywordResult:
        return self.keywords.extract(text, corpus)

    def recognize_entities(self, text: str) -> tuple[NamedEntity, ...]:
        return self.entities.recognize(text)

    def clear_caches(self) -> None:
        """Drop cached results in every engine."""
        for engine in (
            self.tokenizer, self.sentiment, self.splitter,
            self.keywords, self.entities,
        ):
            engine.clear_cache()
