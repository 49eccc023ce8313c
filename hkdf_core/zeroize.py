# MIT License © 2025 Motohiro Suzuki
"""
hkdf_core/zeroize.py

Best-effort zeroization of key buffers.

Python bytes are immutable, so a full wipe cannot be guaranteed.
bytearray / writable memoryview are overwritten in place.
"""

from __future__ import annotations

from typing import Any


def wipe_bytes_like(x: Any) -> None:
    """
    - bytearray: in-place overwrite
    - writable memoryview: in-place overwrite
    - bytes / readonly / None: no-op
    """
    if isinstance(x, bytearray):
        x[:] = bytes(len(x))
        return

    if isinstance(x, memoryview) and not x.readonly:
        x.cast("B")[:] = bytes(x.nbytes)
        return
