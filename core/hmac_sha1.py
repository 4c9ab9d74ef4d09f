"""
HMAC-SHA1 (RFC 2104) backed by the ``cryptography`` package.
"""

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, hmac

from core.errors import HashFailure

DIGEST_SIZE = 20    # SHA-1 output, bytes
BLOCK_SIZE = 64     # SHA-1 block, bytes


def hmac_sha1(key: bytes, message: bytes) -> bytes:
    """
    Compute HMAC-SHA1 of *message* under *key*.

    Keys longer than the 64-byte block are hashed down and shorter keys are
    zero-padded by the backend, so any non-empty key is accepted.

    Args:
        key:     Raw key bytes (the decoded TOTP secret).
        message: Message bytes (the 8-byte counter for OTP use).

    Returns:
        20-byte digest.

    Raises:
        HashFailure: If the key is empty, an argument is not bytes, or the
            backend cannot compute SHA-1.
    """
    if not isinstance(key, (bytes, bytearray)) or not isinstance(message, (bytes, bytearray)):
        raise HashFailure("HMAC key and message must be bytes.")
    if not key:
        raise HashFailure("HMAC key must not be empty.")
    try:
        mac = hmac.HMAC(bytes(key), hashes.SHA1())
        mac.update(bytes(message))
        return mac.finalize()
    except UnsupportedAlgorithm as exc:
        raise HashFailure(f"HMAC-SHA1 unavailable: {exc}") from exc
