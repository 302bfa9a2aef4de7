"""Tests for co-occurrence vectors and k-means topic clustering."""

import random

from textsonar import KeywordConfig, KeywordExtractor
from textsonar._topics import cluster_topics, cooccurrence_vectors, kmeans, topic_name

TEXT = (
    "Solar panels convert sunlight into electricity. Solar farms need sunlight. "
    "Bakers knead dough for bread. Fresh bread needs dough and ovens. "
    "Solar electricity powers homes. Bread ovens bake dough."
)


def test_cooccurrence_counts_within_window(tokenizer):
    tokens = tokenizer.tokenize("cat dog cat")
    assert cooccurrence_vectors(["cat", "dog"], tokens, 1) == [[0, 2], [2, 0]]


def test_kmeans_separates_groups():
    vectors = [[0, 0], [0, 0.1], [10, 10], [10, 10.1]]
    groups = kmeans(vectors, 2, random.Random(0))
    assert sorted(sorted(g) for g in groups) == [[0, 1], [2, 3]]


def test_kmeans_caps_k():
    groups = kmeans([[1.0], [2.0]], 5, random.Random(0))
    assert sorted(i for g in groups for i in g) == [0, 1]
    assert kmeans([], 3, random.Random(0)) == []


def test_topic_name():
    assert topic_name(["alpha", "beta", "gamma"]) == "Alpha & Beta"
    assert topic_name(["solo"]) == "Solo"
    assert topic_name([]) == "Unknown"


def test_no_keywords_no_topics(tokenizer):
    assert cluster_topics([], tokenizer.tokenize("text"), k=5, window=5, rng=random.Random(0)) == ()


def test_extracted_topics(extractor):
    result = extractor.extract(TEXT)
    topics = result.topics
    assert 1 <= len(topics) <= 5
    assert len({t.id for t in topics}) == len(topics)
    relevances = [t.relevance for t in topics]
    assert relevances == sorted(relevances, reverse=True)
    clustered = [w for t in topics for w in t.keywords]
    assert len(clustered) == len(set(clustered))
    for topic in topics:
        assert 0.0 <= topic.relevance <= 1.0
        assert all(" " not in w for w in topic.keywords)
        assert topic.document_count == 1


def test_fixed_seed_reproducible():
    config = KeywordConfig(cluster_seed=7)
    first = KeywordExtractor(config=config).extract(TEXT).topics
    second = KeywordExtractor(config=config).extract(TEXT).topics
    assert first == second
