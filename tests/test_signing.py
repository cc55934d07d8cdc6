"""Tests for Shopee request signing."""

import hashlib
import hmac

from src.marketplace.signing import (
    SignedRequest,
    build_base_string,
    compute_signature,
    sign_request,
)

PARTNER_ID = "2001234"
SECRET_KEY = "test-secret-key"
PATH = "/api/v2/item/search"
TIMESTAMP = 1700000000


def test_build_base_string_concatenates_in_fixed_order():
    """Base string is partner id, then path, then timestamp, no separators."""
    assert build_base_string(PARTNER_ID, PATH, TIMESTAMP) == (
        "2001234/api/v2/item/search1700000000"
    )


def test_compute_signature_matches_hmac_sha256_hex():
    """Signature is the lowercase hex HMAC-SHA256 keyed by the secret."""
    base_string = build_base_string(PARTNER_ID, PATH, TIMESTAMP)
    expected = hmac.new(
        SECRET_KEY.encode(), base_string.encode(), hashlib.sha256
    ).hexdigest()

    sign = compute_signature(base_string, SECRET_KEY)

    assert sign == expected
    assert len(sign) == 64
    assert sign == sign.lower()


def test_compute_signature_known_vector():
    """RFC 4231 test case 2 (key "Jefe")."""
    sign = compute_signature("what do ya want for nothing?", "Jefe")

    assert sign == (
        "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
    )


def test_sign_request_is_deterministic():
    """Same inputs always give the same signature."""
    first = sign_request(PARTNER_ID, SECRET_KEY, PATH, TIMESTAMP)
    second = sign_request(PARTNER_ID, SECRET_KEY, PATH, TIMESTAMP)

    assert first == second


def test_sign_request_changes_when_any_input_changes():
    """Changing partner id, path, timestamp or secret changes the signature."""
    baseline = sign_request(PARTNER_ID, SECRET_KEY, PATH, TIMESTAMP).sign

    variants = [
        sign_request("2001235", SECRET_KEY, PATH, TIMESTAMP).sign,
        sign_request(PARTNER_ID, SECRET_KEY, "/api/v2/item/get", TIMESTAMP).sign,
        sign_request(PARTNER_ID, SECRET_KEY, PATH, TIMESTAMP + 1).sign,
        sign_request(PARTNER_ID, "other-secret", PATH, TIMESTAMP).sign,
    ]

    for sign in variants:
        assert sign != baseline
    assert len(set(variants)) == len(variants)


def test_sign_request_defaults_to_current_time(monkeypatch):
    """Without a timestamp the current Unix second is used."""
    monkeypatch.setattr("src.marketplace.signing.time.time", lambda: 1700000123.9)

    signed = sign_request(PARTNER_ID, SECRET_KEY, PATH)

    assert signed.timestamp == 1700000123
    assert signed.base_string == f"{PARTNER_ID}{PATH}1700000123"


def test_signed_request_placements():
    """Signing material can be rendered as query params or headers."""
    signed = SignedRequest(
        partner_id=PARTNER_ID, path=PATH, timestamp=TIMESTAMP, sign="abc123"
    )

    assert signed.as_query_params() == {
        "partner_id": PARTNER_ID,
        "timestamp": "1700000000",
        "sign": "abc123",
    }
    assert signed.as_headers() == {
        "X-Partner-Id": PARTNER_ID,
        "X-Timestamp": "1700000000",
        "X-Sign": "abc123",
    }
