# MIT License © 2025 Motohiro Suzuki
"""
hkdf_core/errors.py

Error types raised by the HKDF generator.
"""

from __future__ import annotations


class HkdfError(Exception):
    pass


class InvalidArgumentError(HkdfError, ValueError):
    """Unknown hash algorithm or malformed key input."""


class OutputLimitExceededError(HkdfError):
    """Request would exceed the 255-block lifetime output of a generator."""


class UseAfterReleaseError(HkdfError):
    pass
