"""
Qt stylesheet for the totpgen window.
"""

DARK_STYLESHEET = """
/* ── Global ──────────────────────────────────────────────────────── */
QWidget {
    background-color: #1e1e2e;
    color: #cdd6f4;
    font-family: "Segoe UI", "SF Pro Display", "Ubuntu", sans-serif;
    font-size: 14px;
}

/* ── Buttons ─────────────────────────────────────────────────────── */
QPushButton {
    background-color: #313244;
    color: #cdd6f4;
    border: 1px solid #45475a;
    border-radius: 8px;
    padding: 8px 16px;
    font-weight: 500;
}
QPushButton:hover {
    background-color: #45475a;
    border-color: #7f849c;
}
QPushButton#btn_primary {
    background-color: #89b4fa;
    color: #1e1e2e;
    border: none;
    font-weight: 700;
}

/* ── Input fields ────────────────────────────────────────────────── */
QLineEdit {
    background-color: #313244;
    border: 1px solid #45475a;
    border-radius: 8px;
    padding: 8px 12px;
}
QLineEdit:focus {
    border-color: #89b4fa;
}

/* ── Labels ──────────────────────────────────────────────────────── */
QLabel#lbl_code {
    font-size: 40px;
    font-weight: 700;
    letter-spacing: 6px;
    color: #cba6f7;
    qproperty-alignment: AlignCenter;
}
QLabel#lbl_label {
    font-size: 15px;
    font-weight: 600;
    color: #89b4fa;
}
QLabel#lbl_remaining {
    font-size: 12px;
    color: #a6e3a1;
}
QLabel#lbl_error {
    font-size: 12px;
    color: #f38ba8;
}

/* ── Progress bar ────────────────────────────────────────────────── */
QProgressBar {
    background-color: #313244;
    border: none;
    border-radius: 4px;
    height: 6px;
}
QProgressBar::chunk {
    background-color: #a6e3a1;
    border-radius: 4px;
}
QProgressBar[low="true"]::chunk {
    background-color: #f38ba8;
}
"""
