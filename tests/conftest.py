"""Shared fixtures for the letterboxd test suite."""
from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from letterboxd.client import LetterboxdClient
from letterboxd.config import ApiKeyPair, Settings
from letterboxd.models.auth import AccessToken

FIXED_NONCE = "0f8fad5b-d9cb-469f-a165-70867728950e"
FIXED_TIMESTAMP = 1_700_000_000


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep real credentials out of the tests.

    Setting before deleting makes teardown restore the original environment
    even if a test (or load_dotenv) writes to os.environ directly.
    """
    for name in (
        "LETTERBOXD_API_KEY",
        "LETTERBOXD_API_SECRET",
        "LETTERBOXD_BASE_URL",
        "LETTERBOXD_TIMEOUT",
        "LETTERBOXD_TOKEN_FILE",
        "LETTERBOXD_CONFIG",
    ):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def key_pair() -> ApiKeyPair:
    return ApiKeyPair(api_key="test-key", api_secret="test-secret")


@pytest.fixture
def access_token() -> AccessToken:
    return AccessToken(
        access_token="tok-abc",
        refresh_token="refresh-abc",
        token_type="bearer",
        expires_in=3600,
    )


@pytest.fixture
def fake_settings(tmp_path) -> Settings:
    return Settings(
        api_key="test-key",
        api_secret="test-secret",
        token_file=str(tmp_path / "token.json"),
    )


class Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: list[tuple[int, bytes] | Exception] = []

    def add(self, status_code: int = 200, json_data=None, content: bytes | None = None) -> None:
        if content is None:
            content = json.dumps(json_data if json_data is not None else {}).encode()
        self.responses.append((status_code, content))

    def fail(self, error: Exception) -> None:
        self.responses.append(error)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        status_code, content = response
        return httpx.Response(status_code, content=content)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def client(key_pair, recorder) -> LetterboxdClient:
    """Client over a mock transport with a fixed nonce and clock."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    return LetterboxdClient(
        key_pair,
        http=http,
        nonce_factory=lambda: FIXED_NONCE,
        clock=lambda: FIXED_TIMESTAMP,
    )


@pytest.fixture
def mock_client():
    """MagicMock standing in for LetterboxdClient."""
    client = MagicMock()
    client.get = AsyncMock()
    client.get_with_query = AsyncMock()
    client.post = AsyncMock()
    client.patch = AsyncMock()
    client.delete = AsyncMock()
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def build(mock_client):
    """The (client, auth, store) triple a command gets from build_client."""
    auth = MagicMock()
    auth.ensure_fresh = AsyncMock(return_value=None)
    return mock_client, auth, MagicMock()
