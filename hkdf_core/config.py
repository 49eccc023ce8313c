# MIT License © 2025 Motohiro Suzuki
"""
hkdf_core/config.py

Runtime defaults, overridable from the environment:

- HKDF_DEFAULT_HASH: hash used when a caller does not name one (default sha256)
- HKDF_LOG_LEVEL:    level for diagnostics.logging_config (default INFO)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from hkdf_core.algorithms import HashAlgorithm, select_hash
from hkdf_core.errors import InvalidArgumentError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class HkdfConfig:
    default_hash: str = "sha256"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        select_hash(self.default_hash)
        if self.log_level.upper() not in _LEVELS:
            raise ValueError(f"log_level must be one of {_LEVELS}, got {self.log_level!r}")

    @property
    def hash_algorithm(self) -> HashAlgorithm:
        return select_hash(self.default_hash)

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def _read_env(name: str, default: str) -> str:
    v = os.environ.get(name, "").strip()
    return v or default


def load_config() -> HkdfConfig:
    default_hash = _read_env("HKDF_DEFAULT_HASH", HkdfConfig.default_hash)
    log_level = _read_env("HKDF_LOG_LEVEL", HkdfConfig.log_level)
    try:
        return HkdfConfig(default_hash=default_hash, log_level=log_level)
    except InvalidArgumentError as e:
        raise ValueError(f"HKDF_DEFAULT_HASH is invalid: {e}") from e
    except ValueError as e:
        raise ValueError(f"HKDF_LOG_LEVEL is invalid: {e}") from e
