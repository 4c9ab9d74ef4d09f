"""
Display helpers for totpgen.

``sanitise_label`` cleans account labels taken from otpauth URIs or typed into
the window before they reach a provisioning URI; ``format_otp`` groups the
digits of a code for the window and is never applied to the code itself.
"""

import unicodedata

MAX_LABEL_LENGTH = 128


def sanitise_label(text: str) -> str:
    """Drop control characters (NFC-normalised) and cap at MAX_LABEL_LENGTH."""
    text = unicodedata.normalize("NFC", text)
    printable = "".join(ch for ch in text if not unicodedata.category(ch).startswith("C"))
    return printable[:MAX_LABEL_LENGTH].strip()


def format_otp(code: str, group: int = 3) -> str:
    """
    Split *code* into space-separated groups for display.

        >>> format_otp("742275")
        '742 275'
    """
    groups = [code[start : start + group] for start in range(0, len(code), group)]
    return " ".join(groups)
