# MIT License © 2025 Motohiro Suzuki
"""
hkdf_core/hmac_primitive.py

Keyed HMAC that can be re-keyed and reused across calls.

- key is held in a bytearray so release() can overwrite it
- the keyed hmac object is built once per key; compute() works on copies
"""

from __future__ import annotations

import hmac

from hkdf_core.algorithms import HashAlgorithm, select_hash
from hkdf_core.errors import UseAfterReleaseError
from hkdf_core.zeroize import wipe_bytes_like


class HmacPrimitive:
    def __init__(self, algorithm: HashAlgorithm | str, key: bytes = b"") -> None:
        self.algorithm = select_hash(algorithm)
        self.size = self.algorithm.digest_size
        self._key = bytearray()
        self._keyed = None
        self.rekey(key)

    @property
    def released(self) -> bool:
        return self._keyed is None

    def rekey(self, key: bytes) -> None:
        if not isinstance(key, (bytes, bytearray, memoryview)):
            raise TypeError("key must be bytes-like")
        wipe_bytes_like(self._key)
        self._key = bytearray(key)
        self._keyed = hmac.new(self._key, digestmod=self.algorithm.factory)

    def compute(self, *parts: bytes) -> bytes:
        if self._keyed is None:
            raise UseAfterReleaseError("HMAC key has been released")
        h = self._keyed.copy()
        for p in parts:
            h.update(p)
        return h.digest()

    def release(self) -> None:
        wipe_bytes_like(self._key)
        self._key = bytearray()
        self._keyed = None
