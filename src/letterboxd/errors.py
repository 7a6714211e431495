"""Error types raised by the Letterboxd client.

Every failure in the request pipeline surfaces as exactly one of these.
"""

from __future__ import annotations


class LetterboxdError(Exception):
    """Base class for all client errors."""


class ConfigurationError(LetterboxdError):
    """API credentials are missing from both explicit input and environment."""


class SerializationError(LetterboxdError):
    """A request object could not be encoded as a query string or body."""


class ApiConnectionError(LetterboxdError):
    """Transport-level failure (DNS, TLS, socket, timeout, decoding)."""


class ServerError(LetterboxdError):
    """The API answered with a non-2xx status.

    Signature mismatches, expired tokens and bad credentials all land here;
    the remote message is passed through untouched.
    """

    def __init__(self, status_code: int, message: str, url: str) -> None:
        self.status_code = status_code
        self.message = message
        self.url = url
        super().__init__(f"API error (HTTP {status_code}): {message}")


class DeserializationError(LetterboxdError):
    """A 2xx response body did not match the expected model."""
