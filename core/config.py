"""
Runtime settings for totpgen.

Values that the provisioning and scheduling collaborators need are gathered
here and passed to them explicitly. Environment variables override defaults:

    TOTPGEN_LABEL       display label used in otpauth URIs
    TOTPGEN_ISSUER      issuer added to otpauth URIs
    TOTPGEN_CHART_URL   chart service used for hosted QR images
    TOTPGEN_TICK_MS     scheduler tick interval in milliseconds
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_LABEL = "user@example.com"
DEFAULT_CHART_URL = "https://chart.googleapis.com/chart?chs=200x200&chld=M|0&cht=qr"
DEFAULT_TICK_MS = 1000
_MIN_TICK_MS = 100


@dataclass(frozen=True)
class Settings:
    """Explicit configuration for the peripheral collaborators."""

    default_label: str = DEFAULT_LABEL
    issuer: str = ""
    chart_url: str = DEFAULT_CHART_URL
    tick_interval_ms: int = DEFAULT_TICK_MS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from ``TOTPGEN_*`` environment variables.

        Args:
            environ: Mapping to read instead of :data:`os.environ`.

        Raises:
            ValueError: If ``TOTPGEN_TICK_MS`` is not an integer >= 100.
        """
        env = os.environ if environ is None else environ

        raw_tick = env.get("TOTPGEN_TICK_MS", str(DEFAULT_TICK_MS))
        try:
            tick = int(raw_tick)
        except ValueError:
            raise ValueError(f"TOTPGEN_TICK_MS must be an integer, got {raw_tick!r}.")
        if tick < _MIN_TICK_MS:
            raise ValueError(f"TOTPGEN_TICK_MS must be at least {_MIN_TICK_MS}.")

        return cls(
            default_label=env.get("TOTPGEN_LABEL", DEFAULT_LABEL) or DEFAULT_LABEL,
            issuer=env.get("TOTPGEN_ISSUER", ""),
            chart_url=env.get("TOTPGEN_CHART_URL", DEFAULT_CHART_URL) or DEFAULT_CHART_URL,
            tick_interval_ms=tick,
        )
