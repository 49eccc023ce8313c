# MIT License © 2025 Motohiro Suzuki
"""
hkdf_core/hkdf.py

HKDF (RFC 5869) with an incremental Expand stage.

- Extract runs once at construction: PRK = HMAC(salt, IKM)
- fill(buf) serves cached bytes of the last block first, then derives
  T(i) = HMAC(PRK, T(i-1) | info | i) until the request is satisfied
- at most 255 blocks per generator, across all fill() calls
- a request that cannot be satisfied is rejected before anything changes
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from hkdf_core.algorithms import SHA1, SHA256, SHA512, HashAlgorithm, select_hash
from hkdf_core.config import load_config
from hkdf_core.errors import InvalidArgumentError, OutputLimitExceededError, UseAfterReleaseError
from hkdf_core.hmac_primitive import HmacPrimitive
from hkdf_core.zeroize import wipe_bytes_like

logger = logging.getLogger(__name__)

MAX_BLOCKS = 255


def _as_bytes(name: str, value: Any) -> bytes:
    if value is None:
        return b""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like")
    return bytes(value)


def _writable_view(buffer: Any) -> memoryview:
    try:
        view = memoryview(buffer)
    except TypeError as e:
        raise TypeError("destination must support the buffer protocol") from e
    if view.readonly:
        raise TypeError("destination must be writable")
    return view.cast("B")


class Hkdf:
    """
    Expand-stage generator keyed with the Extract-stage PRK.

    Not thread-safe: fill() reads and mutates previous/cache/counter.
    After close(), algorithm / info / size stay readable; everything that
    touches derivation state raises UseAfterReleaseError.
    Use as a context manager (or call close()) so the PRK is wiped.
    """

    def __init__(
        self,
        algorithm: HashAlgorithm | str,
        ikm: Optional[bytes] = None,
        salt: Optional[bytes] = None,
        info: Optional[bytes] = None,
    ) -> None:
        ikm = _as_bytes("ikm", ikm)
        salt = _as_bytes("salt", salt)
        info = _as_bytes("info", info)

        # Extract
        hmac_ = HmacPrimitive(algorithm, salt)
        prk = bytearray(hmac_.compute(ikm))
        hmac_.rekey(prk)
        wipe_bytes_like(prk)
        self._setup(hmac_, info)

    @classmethod
    def from_prk(
        cls,
        algorithm: HashAlgorithm | str,
        prk: bytes,
        info: Optional[bytes] = None,
    ) -> "Hkdf":
        """Skip Extract for callers that already hold a pseudorandom key."""
        prk = _as_bytes("prk", prk)
        alg = select_hash(algorithm)
        if len(prk) < alg.digest_size:
            raise InvalidArgumentError(f"prk must be at least {alg.digest_size} bytes, got {len(prk)}")

        gen = cls.__new__(cls)
        gen._setup(HmacPrimitive(alg, prk), _as_bytes("info", info))
        return gen

    def _setup(self, hmac_: HmacPrimitive, info: bytes) -> None:
        self._hmac = hmac_
        self.algorithm = hmac_.algorithm
        self.info = info
        self.size = hmac_.size

        self._previous = bytearray()
        self._cache = memoryview(self._previous)
        self._counter = 1
        self._closed = False

        logger.debug("hkdf created alg=%s size=%d info_len=%d", self.algorithm.name, self.size, len(info))

    # -----------------------------
    # state
    # -----------------------------
    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def blocks_produced(self) -> int:
        self._check_open()
        return self._counter - 1

    @property
    def remaining(self) -> int:
        """Bytes this generator can still deliver."""
        self._check_open()
        return len(self._cache) + (MAX_BLOCKS + 1 - self._counter) * self.size

    def _check_open(self) -> None:
        if self._closed:
            raise UseAfterReleaseError("Hkdf generator has been released")

    # -----------------------------
    # Expand
    # -----------------------------
    def fill(self, buffer: Any) -> None:
        """Overwrite every byte of `buffer` with the next OKM bytes."""
        self._check_open()
        dest = _writable_view(buffer)

        need = len(dest)
        left = self.remaining
        if left < need:
            logger.debug("hkdf limit rejected need=%d left=%d", need, left)
            raise OutputLimitExceededError(
                f"Output length has exceeded {MAX_BLOCKS} blocks ({MAX_BLOCKS * self.size} bytes)"
            )

        n = min(len(self._cache), need)
        dest[:n] = self._cache[:n]
        self._cache = self._cache[n:]
        pos = n

        while pos < need:
            t = self._hmac.compute(self._previous, self.info, bytes([self._counter]))
            wipe_bytes_like(self._previous)
            self._previous = bytearray(t)
            self._counter += 1

            block = memoryview(self._previous)
            n = min(self.size, need - pos)
            dest[pos : pos + n] = block[:n]
            self._cache = block[n:]
            pos += n

    def read(self, n: int) -> bytes:
        if not isinstance(n, int):
            raise TypeError(f"n must be int, got {type(n).__name__}")
        if n < 0:
            raise ValueError("n must be >= 0")
        out = bytearray(n)
        self.fill(out)
        return bytes(out)

    # -----------------------------
    # release
    # -----------------------------
    def close(self) -> None:
        if self._closed:
            return
        blocks = self._counter - 1
        self._cache = memoryview(b"")
        wipe_bytes_like(self._previous)
        self._previous = bytearray()
        self._hmac.release()
        self._closed = True
        logger.debug("hkdf released alg=%s blocks=%d", self.algorithm.name, blocks)

    release = close

    def __enter__(self) -> "Hkdf":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# -----------------------------
# construction
# -----------------------------
def create(
    hash: HashAlgorithm | str,
    ikm: Optional[bytes] = None,
    salt: Optional[bytes] = None,
    info: Optional[bytes] = None,
) -> Hkdf:
    return Hkdf(hash, ikm=ikm, salt=salt, info=info)


def create_sha1_hkdf(ikm: Optional[bytes] = None, salt: Optional[bytes] = None, info: Optional[bytes] = None) -> Hkdf:
    return Hkdf(SHA1, ikm=ikm, salt=salt, info=info)


def create_sha256_hkdf(ikm: Optional[bytes] = None, salt: Optional[bytes] = None, info: Optional[bytes] = None) -> Hkdf:
    return Hkdf(SHA256, ikm=ikm, salt=salt, info=info)


def create_sha512_hkdf(ikm: Optional[bytes] = None, salt: Optional[bytes] = None, info: Optional[bytes] = None) -> Hkdf:
    return Hkdf(SHA512, ikm=ikm, salt=salt, info=info)


def fill(generator: Hkdf, buffer: Any) -> None:
    generator.fill(buffer)


def release(generator: Hkdf) -> None:
    generator.close()


# -----------------------------
# one-shot helpers
# -----------------------------
def _check_length(length: int) -> int:
    if not isinstance(length, int):
        raise TypeError("length must be int")
    if length < 0:
        raise ValueError("length must be >= 0")
    return length


def hkdf_extract(salt: Optional[bytes], ikm: bytes, algorithm: HashAlgorithm | str = SHA256) -> bytes:
    h = HmacPrimitive(algorithm, _as_bytes("salt", salt))
    try:
        return h.compute(_as_bytes("ikm", ikm))
    finally:
        h.release()


def hkdf_expand(prk: bytes, info: Optional[bytes], length: int, algorithm: HashAlgorithm | str = SHA256) -> bytes:
    length = _check_length(length)
    with Hkdf.from_prk(algorithm, prk, info) as gen:
        return gen.read(length)


def hkdf(
    salt: Optional[bytes],
    ikm: bytes,
    info: Optional[bytes],
    length: int,
    algorithm: HashAlgorithm | str | None = None,
) -> bytes:
    length = _check_length(length)
    if algorithm is None:
        algorithm = load_config().hash_algorithm
    with Hkdf(algorithm, ikm=ikm, salt=salt, info=info) as gen:
        return gen.read(length)
