"""Content-based file identity."""

from __future__ import annotations

from sheetmark.core.logging import get_logger
from sheetmark.models.entities import FileIdentity
from sheetmark.utils.hashing import digest_bytes

logger = get_logger(__name__)

NO_CRYPTO_DIGEST = "no-crypto"


def resolve_identity(
    content: bytes,
    name: str,
    size: int | None = None,
    algorithm: str = "sha256",
) -> FileIdentity:
    """Build the identity ``{name}_{size}_{digest}`` for an imported file.

    When the runtime cannot provide ``algorithm`` the digest is the fixed
    ``no-crypto`` sentinel, so identities only distinguish name and size.
    """
    size = len(content) if size is None else size
    degraded = False
    try:
        digest = digest_bytes(content, algorithm)
    except (ValueError, TypeError) as exc:
        logger.warning(
            "Digest %s unavailable (%s); identity limited to name and size",
            algorithm,
            exc,
            extra={"ctx_file": name, "ctx_size": size},
        )
        digest = NO_CRYPTO_DIGEST
        degraded = True
    return FileIdentity(
        key=f"{name}_{size}_{digest}",
        name=name,
        size=size,
        digest=digest,
        degraded=degraded,
    )


__all__ = ["NO_CRYPTO_DIGEST", "resolve_identity"]
