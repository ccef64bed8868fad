# -*- coding: utf-8 -*-
"""FatSecret — OAuth 1.0 HMAC-SHA1 request signing.

Only consumer-level credentials are used, so the token secret part of the
signing key is always empty. Parameters travel in the query string, which means
every parameter of a request takes part in the signature base string.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

from oauthlib.common import generate_timestamp
from oauthlib.oauth1.rfc5849 import signature as oauth_signature
from oauthlib.oauth1.rfc5849.utils import escape

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"
SIGNATURE_PARAM = "oauth_signature"


def percent_encode(value: Any) -> str:
    """RFC 3986 encoding: only ``A-Za-z0-9-._~`` pass through, hex is uppercase."""
    return escape(str(value))


def normalize_parameters(params: Mapping[str, Any]) -> str:
    # oauthlib drops oauth_signature and sorts the escaped pairs.
    return oauth_signature.normalize_parameters([(str(k), str(v)) for k, v in params.items()])


def signature_base_string(http_method: str, url: str, params: Mapping[str, Any]) -> str:
    return oauth_signature.signature_base_string(
        http_method,
        oauth_signature.base_string_uri(url),
        normalize_parameters(params),
    )


def signing_key(consumer_secret: str, token_secret: str = "") -> str:
    return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret)}"


def sign(http_method: str, url: str, params: Mapping[str, Any], consumer_secret: str) -> str:
    base = signature_base_string(http_method, url, params)
    return oauth_signature.sign_hmac_sha1(base, consumer_secret, "")


def generate_nonce() -> str:
    return os.urandom(16).hex()


def oauth_parameters(
    consumer_key: str,
    *,
    timestamp: Optional[int] = None,
    nonce: Optional[str] = None,
) -> Dict[str, str]:
    return {
        "oauth_consumer_key": consumer_key,
        "oauth_nonce": nonce or generate_nonce(),
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_timestamp": generate_timestamp() if timestamp is None else str(int(timestamp)),
        "oauth_version": OAUTH_VERSION,
    }


def signed_parameters(
    http_method: str,
    url: str,
    params: Mapping[str, Any],
    *,
    consumer_key: str,
    consumer_secret: str,
    timestamp: Optional[int] = None,
    nonce: Optional[str] = None,
) -> Dict[str, str]:
    """Return the full query mapping for a call, ``oauth_signature`` included."""
    merged: Dict[str, str] = {
        key: str(value) for key, value in params.items() if key != SIGNATURE_PARAM and value is not None
    }
    merged.setdefault("format", "json")
    merged.update(oauth_parameters(consumer_key, timestamp=timestamp, nonce=nonce))
    merged[SIGNATURE_PARAM] = sign(http_method, url, merged, consumer_secret)
    return merged
