# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any, Callable

from hkdf_core.errors import InvalidArgumentError


@dataclass(frozen=True)
class HashAlgorithm:
    name: str
    digest_size: int
    factory: Callable[..., Any]


SHA1 = HashAlgorithm("SHA-1", 20, hashlib.sha1)
SHA256 = HashAlgorithm("SHA-256", 32, hashlib.sha256)
SHA384 = HashAlgorithm("SHA-384", 48, hashlib.sha384)
SHA512 = HashAlgorithm("SHA-512", 64, hashlib.sha512)

_REGISTRY = {
    "sha1": SHA1,
    "sha256": SHA256,
    "sha384": SHA384,
    "sha512": SHA512,
}


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "").replace("_", "")


def supported_hashes() -> list[str]:
    return [alg.name for alg in _REGISTRY.values()]


def select_hash(algorithm: HashAlgorithm | str) -> HashAlgorithm:
    """
    Resolve "SHA-256", "sha256", "SHA_256" ... to a HashAlgorithm.
    HashAlgorithm instances pass through unchanged.
    """
    if isinstance(algorithm, HashAlgorithm):
        return algorithm
    if not isinstance(algorithm, str):
        raise InvalidArgumentError(f"hash algorithm must be a name, got {type(algorithm).__name__}")

    alg = _REGISTRY.get(_normalize(algorithm))
    if alg is None:
        raise InvalidArgumentError(
            f"unsupported hash algorithm: {algorithm!r} (supported: {', '.join(supported_hashes())})"
        )
    return alg
