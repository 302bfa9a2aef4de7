"""Keyword topic clustering: co-occurrence vectors grouped by k-means."""

from __future__ import annotations

import math
import random
from typing import Sequence

from ._types import Token, TopicCluster

MAX_ITERATIONS = 50
TOLERANCE = 0.001


def cooccurrence_vectors(
    keywords: Sequence[str], tokens: Sequence[Token], window: int
) -> list[list[float]]:
    """One row per keyword: counts of each keyword within ``window`` tokens."""
    position = {word: i for i, word in enumerate(keywords)}
    rows = [[0.0] * len(keywords) for _ in keywords]
    lemmas = [t.lemma.lower() for t in tokens]
    for i, word in enumerate(lemmas):
        row = position.get(word)
        if row is None:
            continue
        for j in range(max(0, i - window), min(len(lemmas), i + window + 1)):
            col = position.get(lemmas[j])
            if j != i and col is not None:
                rows[row][col] += 1
    return rows


def kmeans(
    vectors: Sequence[Sequence[float]], k: int, rng: random.Random
) -> list[list[int]]:
    """Partition vector indices into at most ``k`` groups.

    Centroids start at ``k`` distinct vectors drawn from ``rng``. A centroid
    whose group empties keeps its position. Iteration stops after
    ``MAX_ITERATIONS`` rounds or once no coordinate moves more than
    ``TOLERANCE``. Empty groups are not returned.
    """
    if not vectors:
        return []
    k = min(k, len(vectors))
    centroids = [list(vectors[i]) for i in rng.sample(range(len(vectors)), k)]

    groups: list[list[int]] = [[] for _ in centroids]
    for _ in range(MAX_ITERATIONS):
        groups = [[] for _ in centroids]
        for index, vector in enumerate(vectors):
            nearest = min(
                range(len(centroids)),
                key=lambda c: math.dist(vector, centroids[c]),
            )
            groups[nearest].append(index)

        converged = True
        for c, members in enumerate(groups):
            if not members:
                continue
            updated = [
                sum(vectors[m][d] for m in members) / len(members)
                for d in range(len(centroids[c]))
            ]
            if any(abs(a - b) > TOLERANCE for a, b in zip(updated, centroids[c])):
                converged = False
            centroids[c] = updated
        if converged:
            break
    return [members for members in groups if members]


def topic_name(keywords: Sequence[str]) -> str:
    if not keywords:
        return "Unknown"
    return " & ".join(k[:1].upper() + k[1:] for k in keywords[:2])


def cluster_topics(
    keywords: Sequence[str],
    tokens: Sequence[Token],
    *,
    k: int,
    window: int,
    rng: random.Random,
) -> tuple[TopicCluster, ...]:
    """Group ``keywords`` into topics, most relevant first.

    Relevance is the share of ``tokens`` whose lemma belongs to the topic.
    """
    if not keywords or k < 1:
        return ()
    vectors = cooccurrence_vectors(keywords, tokens, window)
    lemmas = [t.lemma.lower() for t in tokens]

    topics: list[TopicCluster] = []
    for i, members in enumerate(kmeans(vectors, k, rng)):
        words = tuple(keywords[m] for m in members)
        member_set = set(words)
        hits = sum(1 for lemma in lemmas if lemma in member_set)
        topics.append(TopicCluster(
            id=f"cluster_{i}",
            name=topic_name(words),
            keywords=words,
            relevance=min(hits / max(len(lemmas), 1), 1.0),
        ))
    topics.sort(key=lambda t: -t.relevance)
    return tuple(topics)
