"""
Main window for totpgen.

Layout
------
┌──────────────────────────────────────────┐
│  alice@example.com                       │
│        1 2 3   4 5 6                     │
│  ▓▓▓▓▓▓▓▓▓░░░░░░░░░░░░           18s     │
│  (error text, if any)                    │
│  [secret ...................] [Apply]    │
│  [label ..........] [Save QR] [QR link]  │
└──────────────────────────────────────────┘
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.errors import TotpError
from core.totp import STEP_SECONDS
from core.utils import format_otp, sanitise_label
from qr.render import save_qr_svg
from ui.ticker import StepTicker

logger = logging.getLogger(__name__)

_NO_CODE = "------"
_LOW_SECONDS = 5


class TotpWindow(QWidget):
    """Shows the current code of one generator and its countdown."""

    def __init__(self, ticker: StepTicker, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._ticker = ticker
        self._generator = ticker.generator

        self._setup_ui()

        ticker.code_changed.connect(self._on_code_changed)
        ticker.countdown_changed.connect(self._on_countdown)
        ticker.failed.connect(self._on_failed)

        self._show_code(self._generator.current_code())
        if self._generator.last_error is not None:
            self._on_failed(str(self._generator.last_error))

    # ── UI construction ───────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self.setWindowTitle("totpgen")
        self.setMinimumSize(380, 260)

        root = QVBoxLayout(self)
        root.setContentsMargins(20, 16, 20, 16)
        root.setSpacing(8)

        self._lbl_label = QLabel(self._generator.label)
        self._lbl_label.setObjectName("lbl_label")
        root.addWidget(self._lbl_label)

        self._lbl_code = QLabel(_NO_CODE)
        self._lbl_code.setObjectName("lbl_code")
        self._lbl_code.setTextInteractionFlags(
            Qt.TextInteractionFlag.TextSelectableByMouse
        )
        root.addWidget(self._lbl_code)

        count_row = QHBoxLayout()
        self._progress = QProgressBar()
        self._progress.setMaximum(STEP_SECONDS)
        self._progress.setTextVisible(False)
        count_row.addWidget(self._progress)
        self._lbl_remaining = QLabel("")
        self._lbl_remaining.setObjectName("lbl_remaining")
        count_row.addWidget(self._lbl_remaining)
        root.addLayout(count_row)

        self._lbl_error = QLabel("")
        self._lbl_error.setObjectName("lbl_error")
        self._lbl_error.setWordWrap(True)
        self._lbl_error.hide()
        root.addWidget(self._lbl_error)

        secret_row = QHBoxLayout()
        self._edit_secret = QLineEdit()
        self._edit_secret.setPlaceholderText("New base32 secret")
        self._edit_secret.setEchoMode(QLineEdit.EchoMode.Password)
        secret_row.addWidget(self._edit_secret)
        btn_apply = QPushButton("Apply")
        btn_apply.setObjectName("btn_primary")
        btn_apply.clicked.connect(self._on_apply_secret)
        secret_row.addWidget(btn_apply)
        root.addLayout(secret_row)

        label_row = QHBoxLayout()
        self._edit_label = QLineEdit(self._generator.label)
        self._edit_label.setPlaceholderText("Display label")
        self._edit_label.editingFinished.connect(self._on_label_edited)
        label_row.addWidget(self._edit_label)
        btn_qr = QPushButton("Save QR…")
        btn_qr.setToolTip("Save the provisioning QR code as SVG")
        btn_qr.clicked.connect(self._on_save_qr)
        label_row.addWidget(btn_qr)
        btn_link = QPushButton("Copy QR link")
        btn_link.setToolTip("Copy a hosted QR image link to the clipboard")
        btn_link.clicked.connect(self._on_copy_chart_url)
        label_row.addWidget(btn_link)
        root.addLayout(label_row)

    # ── Slots ─────────────────────────────────────────────────────────

    def _show_code(self, code: Optional[str]) -> None:
        self._lbl_code.setText(format_otp(code) if code else _NO_CODE)

    def _on_code_changed(self, code: str) -> None:
        self._lbl_error.hide()
        self._show_code(code)

    def _on_countdown(self, remaining: int) -> None:
        self._progress.setValue(remaining)
        self._progress.setProperty("low", str(remaining <= _LOW_SECONDS).lower())
        self._progress.style().unpolish(self._progress)
        self._progress.style().polish(self._progress)
        self._lbl_remaining.setText(f"{remaining}s")

    def _on_failed(self, message: str) -> None:
        # The last valid code stays on screen.
        self._lbl_error.setText(message)
        self._lbl_error.show()

    def _on_apply_secret(self) -> None:
        secret = self._edit_secret.text().strip()
        if not secret:
            return
        self._generator.set_secret(secret)
        self._edit_secret.clear()
        self._ticker.refresh_now()

    def _on_label_edited(self) -> None:
        label = sanitise_label(self._edit_label.text())
        if label and label != self._generator.label:
            self._generator.set_label(label)
            self._lbl_label.setText(label)

    def _on_save_qr(self) -> None:
        path, _ = QFileDialog.getSaveFileName(
            self, "Save QR code", "totp.svg", "SVG images (*.svg)"
        )
        if not path:
            return
        try:
            save_qr_svg(self._generator.provisioning_uri(), path)
        except (TotpError, OSError) as exc:
            logger.exception("Failed to save QR code")
            QMessageBox.critical(self, "Save QR", str(exc))

    def _on_copy_chart_url(self) -> None:
        try:
            url = self._generator.chart_url()
        except TotpError as exc:
            QMessageBox.critical(self, "QR link", str(exc))
            return
        QApplication.clipboard().setText(url)  # type: ignore[union-attr]
