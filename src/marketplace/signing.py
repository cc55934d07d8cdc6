"""Request signing for the Shopee partner API.

Shopee v2 endpoints authenticate each call with an HMAC-SHA256 signature over
a canonical base string built from the partner id, the API path and a Unix
timestamp. The field order and the plain concatenation (no separators) are
part of the upstream contract.

Example:
    >>> signed = sign_request("1000", "secret", "/api/v2/item/search", 1700000000)
    >>> signed.base_string
    '1000/api/v2/item/search1700000000'
"""

import hashlib
import hmac
import time
from dataclasses import dataclass
from typing import Dict, Optional


def build_base_string(partner_id: str, path: str, timestamp: int) -> str:
    """Build the canonical string that gets signed.

    Args:
        partner_id: Partner identifier issued by Shopee.
        path: API path being invoked, e.g. "/api/v2/item/search".
        timestamp: Unix timestamp in whole seconds.

    Returns:
        partner_id, path and timestamp concatenated in that order.
    """
    return f"{partner_id}{path}{int(timestamp)}"


def compute_signature(base_string: str, secret_key: str) -> str:
    """Compute the lowercase hex HMAC-SHA256 of base_string keyed by secret_key."""
    return hmac.new(
        secret_key.encode("utf-8"),
        base_string.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


@dataclass(frozen=True)
class SignedRequest:
    """Authentication material for one upstream call."""

    partner_id: str
    path: str
    timestamp: int
    sign: str

    @property
    def base_string(self) -> str:
        return build_base_string(self.partner_id, self.path, self.timestamp)

    def as_query_params(self) -> Dict[str, str]:
        """Signing material as query parameters."""
        return {
            "partner_id": self.partner_id,
            "timestamp": str(self.timestamp),
            "sign": self.sign,
        }

    def as_headers(self) -> Dict[str, str]:
        """Signing material as request headers."""
        return {
            "X-Partner-Id": self.partner_id,
            "X-Timestamp": str(self.timestamp),
            "X-Sign": self.sign,
        }


def sign_request(
    partner_id: str,
    secret_key: str,
    path: str,
    timestamp: Optional[int] = None,
) -> SignedRequest:
    """Sign a call to path.

    Args:
        partner_id: Partner identifier issued by Shopee.
        secret_key: Shared secret key.
        path: API path being invoked.
        timestamp: Unix seconds. Defaults to the current time.

    Returns:
        SignedRequest holding the partner id, path, timestamp and signature.
    """
    if timestamp is None:
        timestamp = int(time.time())

    base_string = build_base_string(partner_id, path, timestamp)
    return SignedRequest(
        partner_id=partner_id,
        path=path,
        timestamp=int(timestamp),
        sign=compute_signature(base_string, secret_key),
    )
