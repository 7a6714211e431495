"""Asynchronous API client for Letterboxd.

Handles URL construction, request signing, header injection and response
classification. Every request is signed; the bearer token is attached only
when one is set.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, TypeVar, Union

import httpx
from pydantic import BaseModel

from letterboxd.codec import (
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    decode_json,
    encode_form,
    encode_json,
    query_pairs,
)
from letterboxd.config import API_BASE_URL, ApiKeyPair, require_api_key_pair
from letterboxd.errors import ApiConnectionError, ServerError
from letterboxd.models.auth import AccessToken
from letterboxd.signing import Signer, append_query, current_timestamp, new_nonce

logger = logging.getLogger(__name__)

T = TypeVar("T")

Query = Union[BaseModel, Mapping[str, Any]]


class LetterboxdClient:
    """HTTP client for the Letterboxd API with request signing and token auth."""

    def __init__(
        self,
        api_key_pair: ApiKeyPair | None = None,
        token: AccessToken | None = None,
        *,
        base_url: str = API_BASE_URL,
        timeout: float = 30.0,
        http: httpx.AsyncClient | None = None,
        nonce_factory: Callable[[], str] = new_nonce,
        clock: Callable[[], int] = current_timestamp,
        verbose: bool = False,
    ) -> None:
        self._api_key_pair = require_api_key_pair(api_key_pair)
        self._token = token
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._signer = Signer(self._api_key_pair, nonce_factory=nonce_factory, clock=clock)
        self._verbose = verbose
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def with_token(cls, api_key_pair: ApiKeyPair, token: AccessToken, **kwargs: Any) -> LetterboxdClient:
        """Create a client that authenticates every call with ``token``.

        The token is not validated.
        """
        return cls(api_key_pair, token, **kwargs)

    # ── Token ────────────────────────────────────────────────────────

    @property
    def token(self) -> AccessToken | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        """Whether a token is set. Does not check that it is valid."""
        return self._token is not None

    def set_token(self, token: AccessToken | None) -> None:
        """Replace the token; None disables authentication.

        Requests already in flight keep the token they were built with.
        """
        self._token = token

    def swap_token(self, token: AccessToken | None) -> AccessToken | None:
        """Replace the token and return the previous one."""
        previous, self._token = self._token, token
        return previous

    # ── Request building ─────────────────────────────────────────────

    @property
    def base_url(self) -> str:
        return self._base_url

    def endpoint_url(self, path: str, query: Query | None = None) -> str:
        """Join ``path`` onto the base URL and append the encoded query.

        A query already present in ``path`` is kept ahead of the new pairs.
        """
        url = str(httpx.URL(self._base_url).join(path.lstrip("/")))
        if query is None:
            return url
        return append_query(url, query_pairs(query))

    def build_request(
        self,
        method: str,
        path: str,
        *,
        query: Query | None = None,
        body: bytes | None = None,
        content_type: str | None = None,
    ) -> httpx.Request:
        """Build a signed request.

        Query parameters are placed in the URL before signing so the four
        signing parameters always come last.
        """
        method = method.upper()
        body = body or b""
        url = self._signer.sign(self.endpoint_url(path, query), method, body)

        headers = {
            "Accept-Encoding": "application/json",
            "Content-Length": str(len(body)),
        }
        if body and content_type:
            headers["Content-Type"] = content_type

        token = self._token
        if token is not None:
            headers["Authorization"] = f"Bearer {token.access_token}"

        return httpx.Request(method, url, headers=headers, content=body)

    # ── Dispatch ─────────────────────────────────────────────────────

    async def send(self, request: httpx.Request) -> bytes:
        """Send a built request and return the raw body of a 2xx response.

        Raises:
            ApiConnectionError: On any transport-level failure.
            ServerError: If the status is not 2xx.
        """
        if self._verbose:
            logger.info(f"{request.method} {request.url.host}{request.url.path}")

        buffer = bytearray()
        try:
            response = await self._http.send(request, stream=True)
            try:
                async for chunk in response.aiter_bytes():
                    buffer.extend(chunk)
            finally:
                await response.aclose()
        except httpx.RequestError as e:
            raise ApiConnectionError(f"Request to {request.url.host}{request.url.path} failed: {e}") from e

        if self._verbose:
            logger.info(f"Response: {response.status_code} ({len(buffer)} bytes)")

        if not response.is_success:
            raise ServerError(
                response.status_code,
                bytes(buffer).decode("utf-8", errors="replace"),
                str(request.url),
            )
        return bytes(buffer)

    async def request_bytes(
        self,
        method: str,
        path: str,
        *,
        query: Query | None = None,
        body: bytes | None = None,
        content_type: str | None = None,
    ) -> bytes:
        """Sign and send a request, returning the raw success body."""
        request = self.build_request(method, path, query=query, body=body, content_type=content_type)
        return await self.send(request)

    async def request(
        self,
        method: str,
        path: str,
        response_model: type[T] | None,
        *,
        query: Query | None = None,
        body: Query | None = None,
        form: bool = False,
    ) -> T | None:
        """Make a typed API request.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE).
            path: Endpoint path relative to the base URL (e.g. "film/2bbs").
            response_model: Type to decode the JSON response into. None
                discards the body.
            query: Request model serialized into the query string.
            body: Request model serialized as the request body.
            form: Send the body form-encoded instead of as JSON.

        Returns:
            The decoded response, or None when no model was requested.
        """
        data = None
        content_type = None
        if body is not None:
            data = encode_form(body) if form else encode_json(body)
            content_type = FORM_CONTENT_TYPE if form else JSON_CONTENT_TYPE

        raw = await self.request_bytes(
            method, path, query=query, body=data, content_type=content_type
        )
        if response_model is None:
            return None
        return decode_json(response_model, raw)

    async def get(self, path: str, response_model: type[T]) -> T:
        """Convenience method for GET requests."""
        return await self.request("GET", path, response_model)

    async def get_with_query(self, path: str, query: Query, response_model: type[T]) -> T:
        """Convenience method for GET requests with a query."""
        return await self.request("GET", path, response_model, query=query)

    async def post(self, path: str, body: Query, response_model: type[T]) -> T:
        """Convenience method for POST requests."""
        return await self.request("POST", path, response_model, body=body)

    async def patch(self, path: str, body: Query, response_model: type[T]) -> T:
        """Convenience method for PATCH requests."""
        return await self.request("PATCH", path, response_model, body=body)

    async def delete(self, path: str) -> None:
        """Convenience method for DELETE requests."""
        await self.request_bytes("DELETE", path)

    # ── Lifecycle ────────────────────────────────────────────────────

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> LetterboxdClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"LetterboxdClient(api_key_pair=[hidden], token={self._token!r}, base_url={self._base_url!r})"
