# MIT License © 2025 Motohiro Suzuki
"""
Known-answer tests: RFC 5869 Appendix A (SHA-256 / SHA-1) and SHA-256 KATs.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from hkdf_core.hkdf import create, hkdf_expand, hkdf_extract

_VECTORS = Path(__file__).parent / "vectors" / "rfc5869.json"
EXAMPLES = json.loads(_VECTORS.read_text(encoding="utf-8"))["examples"]


def _decode(ex: dict) -> tuple[str, bytes, bytes, bytes, int, bytes]:
    return (
        ex["hash"],
        bytes.fromhex(ex["ikm"]),
        bytes.fromhex(ex["salt"]),
        bytes.fromhex(ex["info"]),
        int(ex["length"]),
        bytes.fromhex(ex["okm"]),
    )


@pytest.mark.parametrize("ex", EXAMPLES, ids=[e["name"] for e in EXAMPLES])
def test_okm(ex: dict) -> None:
    hash_, ikm, salt, info, length, okm = _decode(ex)
    with create(hash_, ikm, salt, info) as gen:
        data = bytearray(length)
        gen.fill(data)
    assert data.hex() == okm.hex()


@pytest.mark.parametrize("ex", [e for e in EXAMPLES if "prk" in e], ids=lambda e: e["name"])
def test_extract_and_expand(ex: dict) -> None:
    hash_, ikm, salt, info, length, okm = _decode(ex)
    prk = hkdf_extract(salt, ikm, hash_)
    assert prk.hex() == ex["prk"]
    assert hkdf_expand(prk, info, length, hash_) == okm


@pytest.mark.parametrize("ex", EXAMPLES, ids=[e["name"] for e in EXAMPLES])
def test_every_prefix(ex: dict) -> None:
    hash_, ikm, salt, info, length, okm = _decode(ex)
    for outlen in range(length + 1):
        with create(hash_, ikm, salt, info) as gen:
            assert gen.read(outlen) == okm[:outlen]


@pytest.mark.parametrize("ex", EXAMPLES, ids=[e["name"] for e in EXAMPLES])
def test_every_split_point(ex: dict) -> None:
    hash_, ikm, salt, info, length, okm = _decode(ex)
    for cut in range(length + 1):
        with create(hash_, ikm, salt, info) as gen:
            head = gen.read(cut)
            tail = gen.read(length - cut)
        assert head + tail == okm


def test_rfc_case1_sha256(rfc_case1: dict) -> None:
    with create("SHA256", rfc_case1["ikm"], rfc_case1["salt"], rfc_case1["info"]) as gen:
        assert gen.read(42) == rfc_case1["okm"]
