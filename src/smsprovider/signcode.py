"""Aliyun RPC request signing (signature version 1.0, HMAC-SHA1).

The canonical query string is percent-encoded a second time when the
string-to-sign is built. Both encoding layers are required; a signature
computed over either layer alone is rejected by the gateway as an
authentication failure.
"""

import base64
import hashlib
import hmac
from typing import Mapping
from urllib.parse import quote

from smsprovider.models.sms_model import SignedRequest

SIGNATURE_KEY = "Signature"


def percent_encode(value: str) -> str:
    # RFC 3986: only A-Z a-z 0-9 - _ . ~ stay literal, space becomes %20.
    return quote(value, safe="~")


def canonical_query_string(params: Mapping[str, str]) -> str:
    keys = sorted(k for k in params if k != SIGNATURE_KEY)
    return "&".join(f"{percent_encode(k)}={percent_encode(params[k])}" for k in keys)


def string_to_sign(params: Mapping[str, str], method: str = "POST") -> str:
    return f"{method}&{percent_encode('/')}&{percent_encode(canonical_query_string(params))}"


def generate_signature(
    params: Mapping[str, str], access_key_secret: str, method: str = "POST"
) -> str:
    key = f"{access_key_secret}&".encode("utf-8")
    digest = hmac.new(
        key, string_to_sign(params, method).encode("utf-8"), hashlib.sha1
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def sign_params(params: Mapping[str, str], access_key_secret: str) -> SignedRequest:
    unsigned = {k: v for k, v in sorted(params.items()) if k != SIGNATURE_KEY}
    return SignedRequest(
        params=unsigned,
        signature=generate_signature(unsigned, access_key_secret),
        timestamp=unsigned.get("Timestamp", ""),
        nonce=unsigned.get("SignatureNonce", ""),
    )
