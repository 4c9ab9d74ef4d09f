"""
Base32 secret handling (RFC 4648 §6).

Secrets are decoded with the standard 5-bit to 8-bit regrouping. Lengths that
leave a partial final group (1, 3 or 6 characters past a multiple of 8) cannot
describe a whole number of bytes and are rejected.
"""

import base64
import binascii
import re

from core.errors import InvalidSecret

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

_SEPARATORS = re.compile(r"[\s\-]+")
# ASCII only, checked before uppercasing: "ı".upper() == "I"
_VALID = re.compile(r"[A-Za-z2-7]+")

# Number of trailing characters in the last 8-char group that map to whole bytes
_VALID_REMAINDERS = frozenset({0, 2, 4, 5, 7})


def normalize_secret(secret: str) -> str:
    """
    Normalise a base32 secret: strip separators and trailing padding, uppercase.

    Args:
        secret: Raw user-supplied secret string.

    Returns:
        Uppercase base32 string without padding.

    Raises:
        InvalidSecret: If the secret is empty, contains characters outside
            ``A-Z2-7`` or has a length that cannot decode to whole bytes.
    """
    if not isinstance(secret, str):
        raise InvalidSecret(f"Secret must be a string, got {type(secret).__name__}.")
    secret = _SEPARATORS.sub("", secret).rstrip("=")
    if not secret:
        raise InvalidSecret("Secret is empty.")
    if not _VALID.fullmatch(secret):
        raise InvalidSecret("Secret contains invalid base32 characters.")
    secret = secret.upper()
    if len(secret) % 8 not in _VALID_REMAINDERS:
        raise InvalidSecret(
            f"Secret length {len(secret)} does not decode to a whole number of bytes."
        )
    return secret


def decode_secret(secret: str) -> bytes:
    """
    Decode a base32-encoded secret string to raw bytes.

    Args:
        secret: Base32 secret (case-insensitive; spaces, dashes and ``=`` are
            ignored).

    Returns:
        Raw key bytes, at least one byte long.

    Raises:
        InvalidSecret: On invalid base32 input.
    """
    normalized = normalize_secret(secret)
    pad = (8 - len(normalized) % 8) % 8
    try:
        return base64.b32decode(normalized + "=" * pad)
    except binascii.Error as exc:
        raise InvalidSecret(f"Invalid base32 secret: {exc}") from exc


def encode_secret(raw: bytes) -> str:
    """Encode raw bytes as a base32 string (no padding)."""
    return base64.b32encode(raw).decode("ascii").rstrip("=")
