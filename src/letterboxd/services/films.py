"""Film endpoints."""

from __future__ import annotations

from letterboxd.client import LetterboxdClient
from letterboxd.models.films import (
    Film,
    FilmAvailabilityResponse,
    FilmRelationship,
    FilmRelationshipUpdateRequest,
    FilmRelationshipUpdateResponse,
    FilmServicesResponse,
    FilmsRequest,
    FilmsResponse,
    FilmStatistics,
    GenresResponse,
)
from letterboxd.models.members import (
    MemberFilmRelationshipsRequest,
    MemberFilmRelationshipsResponse,
)


class FilmService:
    """Service for film lookups and the member's film relationships."""

    def __init__(self, client: LetterboxdClient) -> None:
        self._client = client

    async def films(self, request: FilmsRequest | None = None) -> FilmsResponse:
        """A cursored window over the list of films.

        Use the ``next`` cursor to move through the list.
        """
        return await self._client.get_with_query("films", request or FilmsRequest(), FilmsResponse)

    async def film_services(self) -> FilmServicesResponse:
        """Services supported by the /films endpoint, in alphabetical order."""
        return await self._client.get("films/film-services", FilmServicesResponse)

    async def genres(self) -> GenresResponse:
        """Genres supported by the /films endpoint, in alphabetical order."""
        return await self._client.get("films/genres", GenresResponse)

    async def film(self, film_id: str) -> Film:
        return await self._client.get(f"film/{film_id}", Film)

    async def availability(self, film_id: str) -> FilmAvailabilityResponse:
        return await self._client.get(f"film/{film_id}/availability", FilmAvailabilityResponse)

    async def relationship(self, film_id: str) -> FilmRelationship:
        """The authenticated member's relationship with a film."""
        return await self._client.get(f"film/{film_id}/me", FilmRelationship)

    async def update_relationship(
        self, film_id: str, request: FilmRelationshipUpdateRequest
    ) -> FilmRelationshipUpdateResponse:
        """Update the authenticated member's relationship with a film.

        Only the fields set on ``request`` are sent.
        """
        return await self._client.patch(f"film/{film_id}/me", request, FilmRelationshipUpdateResponse)

    async def relationship_members(
        self, film_id: str, request: MemberFilmRelationshipsRequest | None = None
    ) -> MemberFilmRelationshipsResponse:
        """Members with a relationship to a film."""
        return await self._client.get_with_query(
            f"film/{film_id}/members",
            request or MemberFilmRelationshipsRequest(),
            MemberFilmRelationshipsResponse,
        )

    async def statistics(self, film_id: str) -> FilmStatistics:
        return await self._client.get(f"film/{film_id}/statistics", FilmStatistics)
