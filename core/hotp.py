"""
HOTP (HMAC-based One-Time Password) building blocks following RFC 4226.
"""

import struct

from core.errors import HashFailure
from core.hmac_sha1 import DIGEST_SIZE, hmac_sha1

DEFAULT_DIGITS = 6


def counter_bytes(counter: int) -> bytes:
    """
    Encode *counter* as the 8-byte big-endian moving factor.

    Raises:
        ValueError: If the counter is negative or does not fit in 64 bits.
    """
    if counter < 0 or counter >= 1 << 64:
        raise ValueError(f"Counter out of range: {counter}")
    return struct.pack(">Q", counter)


def dynamic_truncate(digest: bytes) -> int:
    """
    Dynamic truncation (RFC 4226 §5.3).

    The low nibble of the last byte selects a 4-byte window; the window is read
    big-endian with the sign bit cleared.

    Args:
        digest: 20-byte HMAC-SHA1 output.

    Returns:
        31-bit non-negative integer.

    Raises:
        HashFailure: If the digest is not 20 bytes long.
    """
    if len(digest) != DIGEST_SIZE:
        raise HashFailure(f"Expected a {DIGEST_SIZE}-byte digest, got {len(digest)}.")
    offset = digest[-1] & 0x0F
    (value,) = struct.unpack(">I", digest[offset : offset + 4])
    return value & 0x7FFFFFFF


def format_code(value: int, digits: int = DEFAULT_DIGITS) -> str:
    """Reduce *value* modulo ``10**digits`` and zero-pad it."""
    return str(value % 10**digits).zfill(digits)


def generate_hotp(secret_bytes: bytes, counter: int, digits: int = DEFAULT_DIGITS) -> str:
    """
    Generate an HOTP code.

    Args:
        secret_bytes: Raw decoded secret bytes.
        counter:      Moving factor (the time step for TOTP).
        digits:       Number of OTP digits.

    Returns:
        Zero-padded OTP string.

    Raises:
        HashFailure: If HMAC-SHA1 cannot be computed for the key.
    """
    digest = hmac_sha1(secret_bytes, counter_bytes(counter))
    return format_code(dynamic_truncate(digest), digits)
