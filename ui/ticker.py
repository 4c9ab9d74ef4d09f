"""
Once-per-second scheduler that keeps a :class:`~core.totp.TotpGenerator`
current.

The generator stays passive; the ticker owns the timer, asks the generator
whether its code has expired and publishes the result through Qt signals.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from core.errors import TotpError
from core.totp import TotpGenerator

logger = logging.getLogger(__name__)


class StepTicker(QObject):
    """Drives recomputation on step boundaries from the Qt event loop."""

    code_changed = pyqtSignal(str)
    countdown_changed = pyqtSignal(int)
    failed = pyqtSignal(str)

    def __init__(
        self,
        generator: TotpGenerator,
        interval_ms: int = 1000,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._generator = generator
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.tick)
        self._failed_step: Optional[int] = None

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def generator(self) -> TotpGenerator:
        return self._generator

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        """Tick immediately, then on every timer interval."""
        self.tick()
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def refresh_now(self) -> None:
        """Recompute regardless of the step, e.g. after a secret change."""
        self._recompute(self._generator.current_step())
        self.countdown_changed.emit(self._generator.seconds_until_next_step())

    def tick(self) -> None:
        """Recompute if the cached code has expired, then publish the countdown."""
        step = self._generator.current_step()
        # A failed step is retried on the next step, not on every tick.
        if self._generator.is_stale() and step != self._failed_step:
            self._recompute(step)
        self.countdown_changed.emit(self._generator.seconds_until_next_step())

    # ── Internal ─────────────────────────────────────────────────────────

    def _recompute(self, step: int) -> None:
        try:
            code = self._generator.recompute()
        except TotpError as exc:
            self._failed_step = step
            self.failed.emit(str(exc))
            return
        self._failed_step = None
        logger.debug("New OTP for %s", self._generator.label)
        self.code_changed.emit(code)
