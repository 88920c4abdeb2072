"""Hashing utilities."""

from __future__ import annotations

import hashlib


def digest_bytes(data: bytes, algorithm: str = "sha256") -> str:
    """Return hex digest for bytes input.

    Raises ``ValueError`` when the runtime does not provide ``algorithm`` and
    ``TypeError`` for variable-length digests such as ``shake_128``.
    """
    h = hashlib.new(algorithm)
    h.update(data)
    return h.hexdigest()
