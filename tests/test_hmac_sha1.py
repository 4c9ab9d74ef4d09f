"""Tests for core.hmac_sha1."""

import pytest

from core.errors import HashFailure
from core.hmac_sha1 import DIGEST_SIZE, hmac_sha1


# ── RFC 2202 §3 test cases ────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "key,data,expected",
    [
        (b"\x0b" * 20, b"Hi There", "b617318655057264e28bc0b6fb378c8ef146be00"),
        (b"Jefe", b"what do ya want for nothing?", "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"),
        (
            b"\xaa" * 80,
            b"Test Using Larger Than Block-Size Key - Hash Key First",
            "aa4ae5e15272d00e95705637ce8a3b55ed402112",
        ),
    ],
)
def test_hmac_sha1_rfc2202(key: bytes, data: bytes, expected: str) -> None:
    assert hmac_sha1(key, data).hex() == expected


def test_digest_length() -> None:
    assert len(hmac_sha1(b"k", b"\x00" * 8)) == DIGEST_SIZE


def test_accepts_odd_length_keys() -> None:
    # No key-length restriction beyond non-empty.
    for length in (1, 3, 7, 13, 64, 65):
        assert len(hmac_sha1(b"x" * length, b"msg")) == DIGEST_SIZE


def test_empty_key_raises() -> None:
    with pytest.raises(HashFailure):
        hmac_sha1(b"", b"msg")


def test_non_bytes_raise() -> None:
    with pytest.raises(HashFailure):
        hmac_sha1("key", b"msg")  # type: ignore[arg-type]
