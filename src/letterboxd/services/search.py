"""Search endpoint."""

from __future__ import annotations

from letterboxd.client import LetterboxdClient
from letterboxd.models.search import SearchRequest, SearchResponse


class SearchService:
    def __init__(self, client: LetterboxdClient) -> None:
        self._client = client

    async def search(self, request: SearchRequest) -> SearchResponse:
        """Search for films, lists, members, contributors and more."""
        return await self._client.get_with_query("search", request, SearchResponse)
