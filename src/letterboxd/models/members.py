"""Member data models."""

from __future__ import annotations

from enum import Enum

from letterboxd.models.common import ApiModel, Cursor
from letterboxd.models.films import FilmRelationshipType, MemberFilmRelationship


class MemberFilmRelationshipsSort(str, Enum):
    DATE = "Date"
    NAME = "Name"
    MEMBER_POPULARITY = "MemberPopularity"
    MEMBER_POPULARITY_THIS_WEEK = "MemberPopularityThisWeek"
    MEMBER_POPULARITY_THIS_MONTH = "MemberPopularityThisMonth"
    MEMBER_POPULARITY_THIS_YEAR = "MemberPopularityThisYear"


class MemberFilmRelationshipsRequest(ApiModel):
    cursor: Cursor | None = None
    per_page: int | None = None
    sort: MemberFilmRelationshipsSort | None = None
    member: str | None = None
    member_relationship: FilmRelationshipType | None = None
    film_relationship: FilmRelationshipType | None = None


class MemberFilmRelationshipsResponse(ApiModel):
    next: Cursor | None = None
    items: list[MemberFilmRelationship] = []
