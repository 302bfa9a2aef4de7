"""Shared fixtures for textsonar tests."""

import pytest

import textsonar


@pytest.fixture(scope="session")
def analyzer():
    """Build the engines once for all tests."""
    return textsonar.load()


@pytest.fixture(scope="session")
def tokenizer(analyzer):
    return analyzer.tokenizer


@pytest.fixture(scope="session")
def splitter(analyzer):
    return analyzer.splitter


@pytest.fixture(scope="session")
def sentiment(analyzer):
    return analyzer.sentiment


@pytest.fixture(scope="session")
def extractor(analyzer):
    return analyzer.keywords


@pytest.fixture(scope="session")
def recognizer(analyzer):
    return analyzer.entities
