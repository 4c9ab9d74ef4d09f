"""Tests for qr.render."""

from pathlib import Path

from qr.render import render_qr_svg, save_qr_svg

URI = "otpauth://totp/alice@example.com?secret=JBSWY3DPEHPK3PXP"


def test_render_qr_svg_produces_svg() -> None:
    svg = render_qr_svg(URI)
    assert "<svg" in svg
    assert "<path" in svg


def test_render_is_deterministic() -> None:
    assert render_qr_svg(URI) == render_qr_svg(URI)


def test_save_qr_svg(tmp_path: Path) -> None:
    target = tmp_path / "alice.svg"
    written = save_qr_svg(URI, target)
    assert written == target
    assert target.read_text(encoding="utf-8") == render_qr_svg(URI)
