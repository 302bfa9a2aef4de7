"""Extension data loading and SHA-256 checksum verification."""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import msgpack

from ._errors import SonarChecksumError, SonarDataError, SonarError, SonarVersionError
from ._types import EmotionCategory, LexiconEntry

logger = logging.getLogger(__name__)

_EXPECTED_VERSION = "1.0"

_NAME_LISTS = ("organizations", "locations", "products", "first_names")


@dataclass(slots=True, frozen=True)
class Extensions:
    """Extra lexicon words and gazetteer names read from an extensions file."""

    sentiment: Mapping[str, LexiconEntry] = field(default_factory=dict)
    organizations: frozenset[str] = frozenset()
    locations: frozenset[str] = frozenset()
    products: frozenset[str] = frozenset()
    first_names: frozenset[str] = frozenset()


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_msgpack(path: Path) -> Any:
    with open(path, "rb") as f:
        try:
            return msgpack.unpackb(f.read(), raw=False)
        except (ValueError, TypeError) as exc:
            raise SonarDataError(f"{path} is not valid msgpack: {exc}") from exc


def _lexicon_entry(word: Any, value: Any) -> LexiconEntry:
    if not isinstance(word, str) or not word.strip():
        raise SonarDataError(f"sentiment key must be a non-empty string, got {word!r}")
    if not isinstance(value, (list, tuple)) or not 2 <= len(value) <= 3:
        raise SonarDataError(
            f"sentiment[{word!r}] must be [score, intensity, emotions?], got {value!r}"
        )
    score, intensity = value[0], value[1]
    emotions = value[2] if len(value) == 3 else []
    if not isinstance(score, (int, float)) or not -5 <= score <= 5:
        raise SonarDataError(f"sentiment[{word!r}] score must be in [-5, 5], got {score!r}")
    if not isinstance(intensity, (int, float)) or not 0 <= intensity <= 1:
        raise SonarDataError(
            f"sentiment[{word!r}] intensity must be in [0, 1], got {intensity!r}"
        )
    try:
        tags = tuple(EmotionCategory(e) for e in emotions)
    except (TypeError, ValueError) as exc:
        raise SonarDataError(f"sentiment[{word!r}] has unknown emotion: {exc}") from exc
    return LexiconEntry(float(score), float(intensity), tags)


def _name_list(raw: Mapping[str, Any], key: str) -> frozenset[str]:
    values = raw.get(key, [])
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise SonarDataError(f"{key!r} must be a list of strings")
    return frozenset(" ".join(v.lower().split()) for v in values if v.strip())


def load_extensions(path: Path | str, *, sha256: str | None = None) -> Extensions:
    """Load a msgpack extensions file.

    Args:
        path: File holding one map with a ``version`` key and any of
            ``sentiment``, ``organizations``, ``locations``, ``products``
            and ``first_names``.
        sha256: Expected hex digest of the file. Verified when given.

    Raises:
        SonarError: The file does not exist.
        SonarChecksumError: The digest does not match ``sha256``.
        SonarVersionError: The data version is not supported.
        SonarDataError: The content is not the expected structure.
    """
    path = Path(path)
    if not path.is_file():
        raise SonarError(f"extensions file not found: {path}")
    if sha256 is not None:
        actual = _sha256(path)
        if actual != sha256.lower():
            raise SonarChecksumError(
                f"Checksum mismatch for {path.name}: "
                f"expected {sha256[:16]}..., got {actual[:16]}..."
            )

    raw = _load_msgpack(path)
    if not isinstance(raw, dict):
        raise SonarDataError(f"{path.name} must hold a map, got {type(raw).__name__}")
    version = raw.get("version")
    if version != _EXPECTED_VERSION:
        raise SonarVersionError(
            f"Expected data version {_EXPECTED_VERSION!r}, got {version!r}"
        )

    raw_sentiment = raw.get("sentiment", {})
    if not isinstance(raw_sentiment, dict):
        raise SonarDataError("'sentiment' must be a map of word to entry")
    sentiment: dict[str, LexiconEntry] = {}
    for word, value in raw_sentiment.items():
        entry = _lexicon_entry(word, value)
        sentiment[" ".join(word.lower().split())] = entry
    names = {key: _name_list(raw, key) for key in _NAME_LISTS}

    logger.info(
        "loaded extensions from %s: %d sentiment words, %d names",
        path, len(sentiment), sum(len(v) for v in names.values()),
    )
    return Extensions(sentiment=sentiment, **names)
