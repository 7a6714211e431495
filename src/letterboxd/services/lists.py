"""List endpoints."""

from __future__ import annotations

from letterboxd.client import LetterboxdClient
from letterboxd.models.lists import (
    FilmList,
    ListCreateResponse,
    ListCreationRequest,
    ListEntriesRequest,
    ListEntriesResponse,
    ListsRequest,
    ListsResponse,
    ListUpdateRequest,
    ListUpdateResponse,
)


class ListService:
    """Service for list CRUD operations."""

    def __init__(self, client: LetterboxdClient) -> None:
        self._client = client

    async def lists(self, request: ListsRequest | None = None) -> ListsResponse:
        """A cursored window over a list of lists."""
        return await self._client.get_with_query("lists", request or ListsRequest(), ListsResponse)

    async def create(self, request: ListCreationRequest) -> ListCreateResponse:
        return await self._client.post("lists", request, ListCreateResponse)

    async def get(self, list_id: str) -> FilmList:
        return await self._client.get(f"list/{list_id}", FilmList)

    async def update(self, list_id: str, request: ListUpdateRequest) -> ListUpdateResponse:
        return await self._client.patch(f"list/{list_id}", request, ListUpdateResponse)

    async def delete(self, list_id: str) -> None:
        await self._client.delete(f"list/{list_id}")

    async def entries(
        self, list_id: str, request: ListEntriesRequest | None = None
    ) -> ListEntriesResponse:
        return await self._client.get_with_query(
            f"list/{list_id}/entries", request or ListEntriesRequest(), ListEntriesResponse
        )
