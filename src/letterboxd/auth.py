"""Authentication against the Letterboxd auth/token endpoint.

Handles the password and refresh-token grants and expiry tracking.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from letterboxd.client import LetterboxdClient
from letterboxd.config import ApiKeyPair
from letterboxd.errors import ConfigurationError
from letterboxd.models.auth import (
    AccessToken,
    PasswordGrantRequest,
    RefreshGrantRequest,
    TokenStatus,
)

AUTH_PATH = "auth/token"

# Buffer before expiry to trigger refresh
EXPIRY_BUFFER = timedelta(minutes=5)


class AuthManager:
    """Obtains, refreshes and tracks the access token of a client."""

    def __init__(self, client: LetterboxdClient, expires_at: datetime | None = None) -> None:
        self._client = client
        self._token_expiry = expires_at

    @property
    def expires_at(self) -> datetime | None:
        return self._token_expiry

    async def login(self, username: str, password: str) -> AccessToken:
        """Exchange a username/password for a token and set it on the client."""
        request = PasswordGrantRequest(username=username, password=password)
        return await self._exchange(request)

    async def refresh(self) -> AccessToken:
        """Use the current refresh token to obtain a new access token."""
        token = self._client.token
        if token is None or not token.refresh_token:
            raise ConfigurationError("No refresh token available. Log in first.")
        return await self._exchange(RefreshGrantRequest(refresh_token=token.refresh_token))

    def logout(self) -> None:
        """Drop the token; later requests are unauthenticated."""
        self._client.set_token(None)
        self._token_expiry = None

    async def ensure_fresh(self) -> AccessToken | None:
        """Refresh the token if it is about to expire."""
        token = self._client.token
        if token is None or self._is_token_valid():
            return token
        if not token.refresh_token or self._token_expiry is None:
            return token
        return await self.refresh()

    def get_status(self) -> TokenStatus:
        """Get the current token status."""
        if not self._client.is_authenticated:
            return TokenStatus(has_token=False, is_expired=True)

        now = datetime.now()
        is_expired = self._token_expiry is not None and now > self._token_expiry
        seconds_remaining = None
        if self._token_expiry and not is_expired:
            seconds_remaining = int((self._token_expiry - now).total_seconds())

        return TokenStatus(
            has_token=True,
            is_expired=is_expired,
            expires_at=self._token_expiry,
            seconds_remaining=seconds_remaining,
        )

    def _is_token_valid(self) -> bool:
        """Check if the current token is valid with a safety buffer.

        A token with unknown expiry is assumed valid.
        """
        if not self._client.is_authenticated:
            return False
        if self._token_expiry is None:
            return True
        return datetime.now() + EXPIRY_BUFFER < self._token_expiry

    async def _exchange(self, grant: PasswordGrantRequest | RefreshGrantRequest) -> AccessToken:
        token = await self._client.request("POST", AUTH_PATH, AccessToken, body=grant, form=True)
        self._client.set_token(token)
        self._token_expiry = datetime.now() + timedelta(seconds=token.expires_in)
        return token


async def authenticate(
    api_key_pair: ApiKeyPair | None,
    username: str,
    password: str,
    **client_options: Any,
) -> LetterboxdClient:
    """Create a client and authenticate it with a username/password."""
    client = LetterboxdClient(api_key_pair, **client_options)
    try:
        await AuthManager(client).login(username, password)
    except Exception:
        await client.aclose()
        raise
    return client
