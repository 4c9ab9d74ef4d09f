"""
totpgen – entry point.

Usage
-----
    python main.py JBSWY3DPEHPK3PXP --label alice@example.com
    python main.py --uri "otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP" --once
    python main.py JBSWY3DPEHPK3PXP --qr alice.svg
    python main.py JBSWY3DPEHPK3PXP --label alice --chart-url

Or, if installed as a package:
    totpgen ...

The secret may also be supplied through ``TOTPGEN_SECRET``.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from core.config import Settings
from core.errors import TotpError
from core.totp import TotpGenerator
from qr.provisioning import parse_otpauth_uri

logger = logging.getLogger("totpgen")


# ── Logging setup ─────────────────────────────────────────────────────────────

def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


# ── Arguments ─────────────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="totpgen",
        description="Generate RFC 6238 time-based one-time passwords.",
    )
    parser.add_argument("secret", nargs="?", help="base32 secret (or TOTPGEN_SECRET)")
    parser.add_argument("--uri", help="otpauth://totp URI to take the secret and label from")
    parser.add_argument("--label", help="display label for the provisioning URI")
    parser.add_argument("--issuer", help="issuer for the provisioning URI")
    parser.add_argument("--once", action="store_true", help="print the current code and exit")
    parser.add_argument("--qr", metavar="PATH", help="write the provisioning QR code as SVG")
    parser.add_argument(
        "--chart-url", action="store_true", help="print a hosted QR image link (TOTPGEN_CHART_URL)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _resolve_source(args: argparse.Namespace) -> tuple[str, Optional[str], Optional[str]]:
    """Return (secret, label, issuer) from the URI, arguments or environment."""
    if args.uri:
        parsed = parse_otpauth_uri(args.uri)
        return (
            parsed.secret,
            args.label or parsed.account_name,
            args.issuer if args.issuer is not None else (parsed.issuer or None),
        )
    secret = args.secret or os.environ.get("TOTPGEN_SECRET", "")
    if not secret:
        raise ValueError("No secret given. Pass SECRET, --uri or set TOTPGEN_SECRET.")
    return secret, args.label, args.issuer


# ── GUI ───────────────────────────────────────────────────────────────────────

def _run_gui(generator: TotpGenerator, settings: Settings) -> int:
    from PyQt6.QtWidgets import QApplication

    from ui.main_window import TotpWindow
    from ui.styles import DARK_STYLESHEET
    from ui.ticker import StepTicker

    app = QApplication(sys.argv)
    app.setApplicationName("totpgen")
    app.setStyleSheet(DARK_STYLESHEET)

    ticker = StepTicker(generator, interval_ms=settings.tick_interval_ms)
    window = TotpWindow(ticker)
    window.show()
    ticker.start()

    return app.exec()


# ── Main ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        settings = Settings.from_env()
        secret, label, issuer = _resolve_source(args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    generator = TotpGenerator(secret, label, settings=settings)

    if args.qr:
        from qr.render import save_qr_svg

        try:
            save_qr_svg(generator.provisioning_uri(issuer), args.qr)
        except (TotpError, OSError) as exc:
            logger.error("Cannot write QR code: %s", exc)
            return 1

    if args.chart_url:
        try:
            print(generator.chart_url(issuer))
        except TotpError as exc:
            logger.error("Cannot build QR link: %s", exc)
            return 1

    if (args.qr or args.chart_url) and not args.once:
        return 0

    if args.once:
        code = generator.current_code()
        if code is None:
            logger.error("No code: %s", generator.last_error)
            return 1
        print(f"{code} {generator.seconds_until_next_step()}s")
        return 0

    return _run_gui(generator, settings)


if __name__ == "__main__":
    sys.exit(main())
