"""
Build and parse otpauth:// provisioning URIs (Google Authenticator Key URI
Format) and the hosted-chart QR link.

Reference: https://github.com/google/google-authenticator/wiki/Key-Uri-Format

Only what the generator supports is accepted when parsing: TOTP, SHA1,
6 digits, 30-second period.
"""

import urllib.parse
from dataclasses import dataclass

from core.base32 import normalize_secret
from core.utils import sanitise_label

_SUPPORTED_ALGORITHM = "SHA1"
_SUPPORTED_DIGITS = 6
_SUPPORTED_PERIOD = 30


@dataclass
class ProvisioningURI:
    """Parsed representation of an otpauth://totp URI."""

    label: str          # full label (issuer:account or just account)
    secret: str         # normalised base32 secret
    issuer: str         # issuer parameter (may be empty)
    account_name: str   # account name extracted from label


def build_otpauth_uri(account_name: str, secret: str, issuer: str = "") -> str:
    """
    Build an ``otpauth://totp/`` URI.

    Args:
        account_name: Display label of the account.
        secret:       Base32 secret; normalised (uppercase, no padding).
        issuer:       Optional issuer, added to the label and as a parameter.

    Returns:
        ``otpauth://totp/<label>?secret=<SECRET>[&issuer=<issuer>]``

    Raises:
        InvalidSecret: If the secret is not valid base32.
    """
    label = f"{issuer}:{account_name}" if issuer else account_name
    params = {"secret": normalize_secret(secret)}
    if issuer:
        params["issuer"] = issuer

    query = urllib.parse.urlencode(params, quote_via=urllib.parse.quote)
    label_encoded = urllib.parse.quote(label, safe="@")
    return f"otpauth://totp/{label_encoded}?{query}"


def parse_otpauth_uri(uri: str) -> ProvisioningURI:
    """
    Parse and validate an ``otpauth://totp`` URI.

    Args:
        uri: Full otpauth URI string.

    Returns:
        Populated :class:`ProvisioningURI`.

    Raises:
        InvalidSecret: If the secret parameter is not valid base32.
        ValueError: If the URI is malformed or asks for parameters this
            generator does not support.
    """
    uri = uri.strip()

    parsed = urllib.parse.urlparse(uri)

    if parsed.scheme.lower() != "otpauth":
        raise ValueError(f"Expected 'otpauth' scheme, got '{parsed.scheme}'.")

    otp_type = parsed.netloc.lower()
    if otp_type != "totp":
        raise ValueError(f"Unsupported OTP type '{otp_type}'. Expected totp.")

    # Label is the path component (strip leading slash)
    raw_label = urllib.parse.unquote(parsed.path.lstrip("/"))
    if not raw_label:
        raise ValueError("Missing label in otpauth URI.")

    # "Issuer:AccountName"
    if ":" in raw_label:
        label_issuer, account_name = raw_label.split(":", 1)
        label_issuer = sanitise_label(label_issuer.strip())
    else:
        label_issuer = ""
        account_name = raw_label

    account_name = sanitise_label(account_name.strip())

    params = dict(urllib.parse.parse_qsl(parsed.query))

    raw_secret = params.get("secret", "")
    if not raw_secret:
        raise ValueError("Missing 'secret' parameter in otpauth URI.")
    secret = normalize_secret(raw_secret)

    # Issuer – prefer the query param; fall back to label prefix
    issuer = sanitise_label(params.get("issuer", label_issuer).strip())

    alg_str = params.get("algorithm", _SUPPORTED_ALGORITHM).upper()
    if alg_str != _SUPPORTED_ALGORITHM:
        raise ValueError(f"Unsupported algorithm '{alg_str}'. Only SHA1 is supported.")

    _check_int_param(params, "digits", _SUPPORTED_DIGITS)
    _check_int_param(params, "period", _SUPPORTED_PERIOD)

    full_label = f"{issuer}:{account_name}" if issuer else account_name

    return ProvisioningURI(
        label=full_label,
        secret=secret,
        issuer=issuer,
        account_name=account_name,
    )


def _check_int_param(params: dict, name: str, supported: int) -> None:
    raw = params.get(name)
    if raw is None:
        return
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"'{name}' must be an integer.")
    if value != supported:
        raise ValueError(f"Unsupported {name} {value}. Only {supported} is supported.")


def chart_url(otpauth_uri: str, base_url: str) -> str:
    """
    Return a hosted-chart QR image link for *otpauth_uri*.

    The whole otpauth URI is encoded as the ``chl`` query value so its own
    ``?`` and ``&`` survive.

    Args:
        otpauth_uri: URI from :func:`build_otpauth_uri`.
        base_url:    Chart service URL, possibly with its own query string.
    """
    separator = "&" if urllib.parse.urlparse(base_url).query else "?"
    return f"{base_url}{separator}{urllib.parse.urlencode({'chl': otpauth_uri})}"
