"""Tests for extension data loading and validation."""

import hashlib

import msgpack
import pytest

from textsonar import (
    EmotionCategory,
    SonarChecksumError,
    SonarDataError,
    SonarError,
    SonarVersionError,
    load_extensions,
)

VALID = {
    "version": "1.0",
    "sentiment": {"Yeet": [3, 0.8, ["joy", "excitement"]], "meh": [-1, 0.4]},
    "organizations": ["Acme Corp", "Initech"],
    "locations": ["Springfield"],
    "products": ["Widget Pro"],
    "first_names": ["Zelda"],
}


def _write(tmp_path, data, name="ext.bin"):
    path = tmp_path / name
    path.write_bytes(msgpack.packb(data, use_bin_type=True))
    return path


def test_load_valid(tmp_path):
    ext = load_extensions(_write(tmp_path, VALID))
    assert ext.sentiment["yeet"].score == 3.0
    assert ext.sentiment["yeet"].emotions == (EmotionCategory.JOY, EmotionCategory.EXCITEMENT)
    assert ext.sentiment["meh"].emotions == ()
    assert ext.organizations == frozenset({"acme corp", "initech"})
    assert ext.first_names == frozenset({"zelda"})


def test_optional_sections(tmp_path):
    ext = load_extensions(_write(tmp_path, {"version": "1.0"}))
    assert dict(ext.sentiment) == {}
    assert ext.products == frozenset()


def test_accepts_str_path(tmp_path):
    ext = load_extensions(str(_write(tmp_path, VALID)))
    assert "springfield" in ext.locations


def test_missing_file(tmp_path):
    with pytest.raises(SonarError, match="not found"):
        load_extensions(tmp_path / "nope.bin")


def test_version_mismatch(tmp_path):
    """Wrong data version should raise SonarVersionError."""
    with pytest.raises(SonarVersionError):
        load_extensions(_write(tmp_path, {**VALID, "version": "99.0"}))


def test_checksum_verified(tmp_path):
    path = _write(tmp_path, VALID)
    digest = hashlib.sha256(path.read_bytes()).hexdigest()
    assert load_extensions(path, sha256=digest).sentiment
    with open(path, "ab") as f:
        f.write(b"tampered")
    with pytest.raises(SonarChecksumError):
        load_extensions(path, sha256=digest)


def test_garbage_bytes(tmp_path):
    path = tmp_path / "bad.bin"
    path.write_bytes(b"\xc1\xc1\xc1")
    with pytest.raises(SonarDataError):
        load_extensions(path)


@pytest.mark.parametrize("data", [
    ["not", "a", "map"],
    {"version": "1.0", "sentiment": ["yeet"]},
    {"version": "1.0", "sentiment": {"yeet": [9, 0.5]}},
    {"version": "1.0", "sentiment": {"yeet": [1, 2.0]}},
    {"version": "1.0", "sentiment": {"yeet": [1, 0.5, ["glee"]]}},
    {"version": "1.0", "sentiment": {"yeet": "positive"}},
    {"version": "1.0", "organizations": "Acme"},
    {"version": "1.0", "locations": [1, 2]},
])
def test_malformed_content(tmp_path, data):
    with pytest.raises(SonarDataError):
        load_extensions(_write(tmp_path, data))


def test_errors_share_base():
    for cls in (SonarChecksumError, SonarDataError, SonarVersionError):
        assert issubclass(cls, SonarError)
