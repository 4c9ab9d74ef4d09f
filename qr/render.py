"""
Local QR rendering of provisioning URIs.

Uses ``qrcode`` with its SVG path factory, which needs no imaging library.
"""

import io
import logging
from pathlib import Path
from typing import Union

import qrcode
import qrcode.image.svg

logger = logging.getLogger(__name__)


def render_qr_svg(uri: str) -> str:
    """
    Render *uri* as an SVG QR code.

    Args:
        uri: Text to encode, typically an ``otpauth://`` URI.

    Returns:
        SVG document as a string.
    """
    factory = qrcode.image.svg.SvgPathImage
    img = qrcode.make(uri, image_factory=factory)
    buf = io.BytesIO()
    img.save(buf)
    return buf.getvalue().decode("utf-8")


def save_qr_svg(uri: str, path: Union[str, Path]) -> Path:
    """
    Write the SVG QR code for *uri* to *path*.

    Returns:
        The path written.
    """
    path = Path(path)
    path.write_text(render_qr_svg(uri), encoding="utf-8")
    logger.info("QR code written to %s", path)
    return path
