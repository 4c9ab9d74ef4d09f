"""
TOTP (Time-based One-Time Password) implementation following RFC 6238.

Produces codes identical to Google Authenticator (HMAC-SHA1, 30-second steps,
6 digits).
"""

import logging
from typing import Optional

from core.base32 import decode_secret
from core.clock import Clock, system_clock
from core.config import Settings
from core.errors import TotpError
from core.hotp import DEFAULT_DIGITS, generate_hotp
from qr.provisioning import build_otpauth_uri
from qr.provisioning import chart_url as build_chart_url

logger = logging.getLogger(__name__)

STEP_SECONDS = 30


def time_counter(timestamp: float, period: int = STEP_SECONDS) -> int:
    """
    Return ``floor(timestamp / period)``.

    Raises:
        ValueError: If *timestamp* is before the Unix epoch.
    """
    if timestamp < 0:
        raise ValueError(f"Timestamp before the Unix epoch: {timestamp}")
    return int(timestamp) // period


def generate_totp(
    secret_bytes: bytes,
    digits: int = DEFAULT_DIGITS,
    period: int = STEP_SECONDS,
    timestamp: Optional[float] = None,
) -> str:
    """
    Generate a TOTP code.

    Args:
        secret_bytes: Raw (already base32-decoded) secret bytes.
        digits:       Number of digits in the OTP (default 6).
        period:       Time step in seconds (default 30).
        timestamp:    Override Unix timestamp (uses the system clock if None).

    Returns:
        OTP string, zero-padded to ``digits`` characters.
    """
    t = timestamp if timestamp is not None else system_clock()
    return generate_hotp(secret_bytes, time_counter(t, period), digits)


def remaining_seconds(period: int = STEP_SECONDS, timestamp: Optional[float] = None) -> int:
    """Return seconds until the current TOTP window expires (1..period)."""
    t = timestamp if timestamp is not None else system_clock()
    return period - (int(t) % period)


# ── Generator ─────────────────────────────────────────────────────────────────

class TotpGenerator:
    """
    Holds one secret and the code most recently derived from it.

    The generator is passive: it reads the clock only when asked. Something
    outside (see :class:`ui.ticker.StepTicker`) decides when to call
    :meth:`recompute`. Instances are not thread-safe.

    Usage::

        gen = TotpGenerator("JBSWY3DPEHPK3PXP", "alice@example.com")
        gen.current_code()            # "123456", or None if the secret is bad
        gen.seconds_until_next_step()
    """

    def __init__(
        self,
        secret: str,
        label: Optional[str] = None,
        clock: Clock = system_clock,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Args:
            secret:   Base32 secret. Not validated until the first recompute.
            label:    Display label for provisioning URIs. Defaults to
                      ``settings.default_label``.
            clock:    Source of Unix time.
            settings: Explicit configuration (defaults when None).
        """
        self._settings = settings or Settings()
        self._secret = secret
        self._label = label if label is not None else self._settings.default_label
        self._clock = clock
        self._code: Optional[str] = None
        self._counter: Optional[int] = None
        self.last_error: Optional[TotpError] = None

        try:
            self.recompute()
        except TotpError:
            # Already logged and recorded; the generator starts without a code.
            pass

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def label(self) -> str:
        return self._label

    @property
    def counter(self) -> Optional[int]:
        """Time step the cached code belongs to (None before the first success)."""
        return self._counter

    def recompute(self) -> str:
        """
        Derive the code for the current time step and cache it.

        Returns:
            The new 6-digit code.

        Raises:
            InvalidSecret: If the stored secret cannot be decoded.
            HashFailure:   If HMAC-SHA1 fails for the decoded key.

        On failure the previously cached code is left unchanged.
        """
        counter = time_counter(self._clock())
        try:
            key = decode_secret(self._secret)
            code = generate_hotp(key, counter, DEFAULT_DIGITS)
        except TotpError as exc:
            self.last_error = exc
            logger.warning("Cannot generate OTP for %s: %s", self._label, exc)
            raise

        self._code = code
        self._counter = counter
        self.last_error = None
        return code

    def current_code(self) -> Optional[str]:
        """Return the cached code without recomputing (None if none yet)."""
        return self._code

    def seconds_until_next_step(self) -> int:
        """Seconds left in the current step; 30 exactly on a step boundary."""
        return remaining_seconds(STEP_SECONDS, self._clock())

    def current_step(self) -> int:
        """Time step of the clock reading right now."""
        return time_counter(self._clock())

    def is_stale(self) -> bool:
        """True when the cached code is missing or belongs to an earlier step."""
        return self._counter is None or self._counter != self.current_step()

    def set_secret(self, secret: str) -> None:
        """Replace the secret. The cached code stays until the next recompute."""
        self._secret = secret
        logger.debug("Secret replaced for %s", self._label)

    def set_label(self, label: str) -> None:
        self._label = label

    def provisioning_uri(self, issuer: Optional[str] = None) -> str:
        """Return the ``otpauth://totp/`` URI for the current secret and label."""
        if issuer is None:
            issuer = self._settings.issuer
        return build_otpauth_uri(self._label, self._secret, issuer=issuer)

    def chart_url(self, issuer: Optional[str] = None) -> str:
        """Return the hosted-chart QR image link for :meth:`provisioning_uri`."""
        return build_chart_url(self.provisioning_uri(issuer), self._settings.chart_url)
