# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

import pytest


@pytest.fixture
def rfc_case1() -> dict:
    return {
        "ikm": b"\x0b" * 22,
        "salt": bytes(range(13)),
        "info": bytes(range(0xF0, 0xFA)),
        "okm": bytes.fromhex(
            "3cb25f25faacd57a90434f64d0362f2a2d2d0a90cf1a5a4c5db02d56ecc4c5bf34007208d5b887185865"
        ),
    }
