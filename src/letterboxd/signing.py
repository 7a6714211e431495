"""Request signing for the Letterboxd API.

Every request carries apikey, nonce, timestamp and signature query
parameters. The signature is a lowercase hex HMAC-SHA256, keyed with the API
secret, over ``METHOD \\0 URL \\0 BODY`` where URL already includes the first
three parameters.
"""

from __future__ import annotations

import hashlib
import hmac
import time
import uuid
from typing import Callable, Sequence
from urllib.parse import urlencode

from letterboxd.config import ApiKeyPair

SIGNING_PARAMS = ("apikey", "nonce", "timestamp", "signature")


def new_nonce() -> str:
    """A fresh random 128-bit identifier."""
    return str(uuid.uuid4())


def current_timestamp() -> int:
    """Wall-clock time in whole seconds since the epoch."""
    return int(time.time())


def append_query(url: str, pairs: Sequence[tuple[str, str]]) -> str:
    """Append form-encoded pairs after any query the URL already has."""
    encoded = urlencode(list(pairs))
    if not encoded:
        return url
    if "?" not in url:
        return f"{url}?{encoded}"
    if url.endswith(("?", "&")):
        return url + encoded
    return f"{url}&{encoded}"


def compute_signature(method: str, url: str, body: bytes, secret: str) -> str:
    """HMAC-SHA256 over method, URL and body, separated by null bytes."""
    message = method.upper().encode() + b"\0" + url.encode() + b"\0" + (body or b"")
    return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()


def sign_url(
    url: str,
    method: str,
    body: bytes,
    key_pair: ApiKeyPair,
    *,
    nonce: str,
    timestamp: int,
) -> str:
    """Return ``url`` with apikey, nonce, timestamp and signature appended."""
    url = append_query(
        url,
        [("apikey", key_pair.api_key), ("nonce", nonce), ("timestamp", str(timestamp))],
    )
    signature = compute_signature(method, url, body, key_pair.api_secret)
    return append_query(url, [("signature", signature)])


class Signer:
    """Signs URLs with a fresh nonce and timestamp on every call.

    The nonce source and clock can be swapped out in tests.
    """

    def __init__(
        self,
        key_pair: ApiKeyPair,
        nonce_factory: Callable[[], str] = new_nonce,
        clock: Callable[[], int] = current_timestamp,
    ) -> None:
        self._key_pair = key_pair
        self._nonce_factory = nonce_factory
        self._clock = clock

    @property
    def api_key(self) -> str:
        return self._key_pair.api_key

    def sign(self, url: str, method: str, body: bytes = b"") -> str:
        return sign_url(
            url,
            method,
            body,
            self._key_pair,
            nonce=self._nonce_factory(),
            timestamp=self._clock(),
        )
