"""Client construction shared by the CLI command groups."""

from __future__ import annotations

from letterboxd.auth import AuthManager
from letterboxd.client import LetterboxdClient
from letterboxd.config import load_settings
from letterboxd.utils.token_store import TokenStore


def build_client(verbose: bool = False) -> tuple[LetterboxdClient, AuthManager, TokenStore]:
    """Build a client from settings, restoring any stored token."""
    settings = load_settings()
    store = TokenStore(settings.token_path)
    stored = store.load()

    client = LetterboxdClient(
        settings.api_key_pair,
        stored.token if stored else None,
        base_url=settings.base_url,
        timeout=settings.timeout,
        verbose=verbose,
    )
    auth = AuthManager(client, stored.expires_at if stored else None)
    return client, auth, store


async def refresh_if_needed(auth: AuthManager, store: TokenStore) -> None:
    """Refresh a stored token close to expiry and persist the new one."""
    before = auth.expires_at
    token = await auth.ensure_fresh()
    if token is not None and auth.expires_at != before:
        store.save(token, auth.expires_at)
