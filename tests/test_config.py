# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

import logging

import pytest

from hkdf_core.algorithms import SHA256, SHA512
from hkdf_core.config import HkdfConfig, load_config
from hkdf_core.hkdf import hkdf


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HKDF_DEFAULT_HASH", raising=False)
    monkeypatch.delenv("HKDF_LOG_LEVEL", raising=False)


def test_defaults() -> None:
    cfg = load_config()
    assert cfg == HkdfConfig()
    assert cfg.hash_algorithm is SHA256
    assert cfg.level == logging.INFO


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HKDF_DEFAULT_HASH", "SHA-512")
    monkeypatch.setenv("HKDF_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.hash_algorithm is SHA512
    assert cfg.level == logging.DEBUG


def test_blank_env_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HKDF_DEFAULT_HASH", "   ")
    assert load_config().default_hash == "sha256"


def test_bad_hash_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HKDF_DEFAULT_HASH", "md5")
    with pytest.raises(ValueError, match="HKDF_DEFAULT_HASH"):
        load_config()


def test_bad_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HKDF_LOG_LEVEL", "loud")
    with pytest.raises(ValueError, match="HKDF_LOG_LEVEL"):
        load_config()


def test_one_shot_uses_configured_hash(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HKDF_DEFAULT_HASH", "sha512")
    assert hkdf(b"s", b"ikm", b"i", 80) == hkdf(b"s", b"ikm", b"i", 80, algorithm="sha512")
    assert hkdf(b"s", b"ikm", b"i", 80) != hkdf(b"s", b"ikm", b"i", 80, algorithm="sha256")
