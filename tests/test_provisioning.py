"""Tests for qr.provisioning."""

import urllib.parse

import pytest

from core.errors import InvalidSecret
from qr.provisioning import ProvisioningURI, build_otpauth_uri, chart_url, parse_otpauth_uri


# ── Builder ───────────────────────────────────────────────────────────────────

def test_build_basic_uri() -> None:
    uri = build_otpauth_uri("alice@example.com", "JBSWY3DPEHPK3PXP")
    assert uri == "otpauth://totp/alice@example.com?secret=JBSWY3DPEHPK3PXP"


def test_build_normalises_secret() -> None:
    uri = build_otpauth_uri("alice", "jbsw y3dp ehpk 3pxp")
    assert uri.endswith("?secret=JBSWY3DPEHPK3PXP")


def test_build_escapes_label() -> None:
    uri = build_otpauth_uri("Alice Smith/home?x", "JBSWY3DPEHPK3PXP")
    assert uri.startswith("otpauth://totp/Alice%20Smith%2Fhome%3Fx?secret=")


def test_build_with_issuer() -> None:
    uri = build_otpauth_uri("alice", "JBSWY3DPEHPK3PXP", issuer="Big Corp")
    assert uri == "otpauth://totp/Big%20Corp%3Aalice?secret=JBSWY3DPEHPK3PXP&issuer=Big%20Corp"


def test_build_rejects_invalid_secret() -> None:
    with pytest.raises(InvalidSecret):
        build_otpauth_uri("alice", "NOT0BASE32")


def test_build_roundtrip() -> None:
    uri = build_otpauth_uri("alice@example.com", "JBSWY3DPEHPK3PXP", issuer="Example")
    parsed = parse_otpauth_uri(uri)
    assert parsed == ProvisioningURI(
        label="Example:alice@example.com",
        secret="JBSWY3DPEHPK3PXP",
        issuer="Example",
        account_name="alice@example.com",
    )


# ── Parser ────────────────────────────────────────────────────────────────────

def test_parse_basic_totp() -> None:
    uri = "otpauth://totp/Example%3Aalice%40example.com?secret=JBSWY3DPEHPK3PXP&issuer=Example"
    result = parse_otpauth_uri(uri)
    assert result.account_name == "alice@example.com"
    assert result.issuer == "Example"
    assert result.secret == "JBSWY3DPEHPK3PXP"


def test_parse_accepts_explicit_defaults() -> None:
    uri = "otpauth://totp/acc?secret=JBSWY3DPEHPK3PXP&algorithm=sha1&digits=6&period=30"
    assert parse_otpauth_uri(uri).secret == "JBSWY3DPEHPK3PXP"


def test_parse_no_issuer() -> None:
    result = parse_otpauth_uri("otpauth://totp/myaccount?secret=JBSWY3DPEHPK3PXP")
    assert result.account_name == "myaccount"
    assert result.issuer == ""
    assert result.label == "myaccount"


def test_parse_issuer_from_label() -> None:
    result = parse_otpauth_uri("otpauth://totp/GitHub%3Ajohn?secret=JBSWY3DPEHPK3PXP")
    assert result.issuer == "GitHub"
    assert result.account_name == "john"


def test_parse_wrong_scheme() -> None:
    with pytest.raises(ValueError, match="scheme"):
        parse_otpauth_uri("http://totp/acc?secret=ABC")


def test_parse_hotp_unsupported() -> None:
    with pytest.raises(ValueError, match="OTP type"):
        parse_otpauth_uri("otpauth://hotp/acc?secret=JBSWY3DPEHPK3PXP&counter=1")


def test_parse_missing_label() -> None:
    with pytest.raises(ValueError, match="label"):
        parse_otpauth_uri("otpauth://totp/?secret=JBSWY3DPEHPK3PXP")


def test_parse_missing_secret() -> None:
    with pytest.raises(ValueError, match="secret"):
        parse_otpauth_uri("otpauth://totp/acc")


def test_parse_invalid_secret() -> None:
    with pytest.raises(InvalidSecret):
        parse_otpauth_uri("otpauth://totp/acc?secret=JBSWY3DPEHPK3PX1")


@pytest.mark.parametrize(
    "query,match",
    [
        ("algorithm=SHA256", "algorithm"),
        ("digits=8", "digits"),
        ("digits=six", "digits"),
        ("period=60", "period"),
    ],
)
def test_parse_unsupported_parameters(query: str, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        parse_otpauth_uri(f"otpauth://totp/acc?secret=JBSWY3DPEHPK3PXP&{query}")


# ── Chart URL ─────────────────────────────────────────────────────────────────

def test_chart_url_encodes_whole_uri() -> None:
    otpauth = "otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP&issuer=X"
    url = chart_url(otpauth, "https://charts.example/chart?cht=qr")
    assert url.startswith("https://charts.example/chart?cht=qr&chl=")
    query = urllib.parse.parse_qs(urllib.parse.urlparse(url).query)
    assert query["chl"] == [otpauth]
    assert query["cht"] == ["qr"]


def test_chart_url_without_query() -> None:
    url = chart_url("otpauth://totp/a?secret=MY", "https://charts.example/qr")
    assert url == "https://charts.example/qr?chl=otpauth%3A%2F%2Ftotp%2Fa%3Fsecret%3DMY"
