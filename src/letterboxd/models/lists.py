"""List data models."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from letterboxd.models.common import ApiModel, Cursor, Image, IncludeFriends, Link, MemberSummary
from letterboxd.models.films import FilmStatus, FilmSummary


class ListRequestSort(str, Enum):
    DATE = "Date"
    WHEN_PUBLISHED_LATEST_FIRST = "WhenPublishedLatestFirst"
    WHEN_PUBLISHED_EARLIEST_FIRST = "WhenPublishedEarliestFirst"
    WHEN_CREATED_LATEST_FIRST = "WhenCreatedLatestFirst"
    WHEN_CREATED_EARLIEST_FIRST = "WhenCreatedEarliestFirst"
    LIST_NAME = "ListName"
    LIST_POPULARITY = "ListPopularity"
    LIST_POPULARITY_THIS_WEEK = "ListPopularityThisWeek"
    LIST_POPULARITY_THIS_MONTH = "ListPopularityThisMonth"
    LIST_POPULARITY_THIS_YEAR = "ListPopularityThisYear"


class ListMemberRelationship(str, Enum):
    OWNER = "Owner"
    LIKED = "Liked"


class ListEntriesSort(str, Enum):
    LIST_RANKING = "ListRanking"
    FILM_NAME = "FilmName"
    RELEASE_DATE_LATEST_FIRST = "ReleaseDateLatestFirst"
    RELEASE_DATE_EARLIEST_FIRST = "ReleaseDateEarliestFirst"
    RATING_HIGH_TO_LOW = "RatingHighToLow"
    RATING_LOW_TO_HIGH = "RatingLowToHigh"
    FILM_POPULARITY = "FilmPopularity"


class ListsRequest(ApiModel):
    """Query for the cursored /lists endpoint."""
    cursor: Cursor | None = None
    per_page: int | None = None
    sort: ListRequestSort | None = None
    film: str | None = None
    clone_of: str | None = None
    member: str | None = None
    member_relationship: ListMemberRelationship | None = None
    include_friends: IncludeFriends | None = None
    tag_code: str | None = None
    tagger: str | None = None
    include_tagger_friends: IncludeFriends | None = None
    filter: list[str] | None = None


class ListSummary(ApiModel):
    id: str
    name: str
    film_count: int = 0
    published: bool = False
    ranked: bool = False
    description: str | None = None
    owner: MemberSummary | None = None
    preview_entries: list[dict] = []


class ListsResponse(ApiModel):
    next: Cursor | None = None
    items: list[ListSummary] = []


class ListEntry(ApiModel):
    rank: int | None = None
    notes: str | None = None
    contains_spoilers: bool = False
    film: FilmSummary


class FilmList(ApiModel):
    """Full details of a list."""
    id: str
    name: str
    film_count: int = 0
    published: bool = False
    ranked: bool = False
    has_entries_with_notes: bool = False
    description: str | None = None
    tags: list[str] = []
    when_created: str | None = None
    when_published: str | None = None
    owner: MemberSummary | None = None
    links: list[Link] = []
    backdrop: Image | None = None


class ListCreationEntry(ApiModel):
    film: str  # film LID
    rank: int | None = None
    notes: str | None = None
    contains_spoilers: bool | None = None


class ListCreationRequest(ApiModel):
    name: str
    published: bool = False
    ranked: bool = False
    description: str | None = None
    tags: list[str] | None = None
    entries: list[ListCreationEntry] | None = None


class ListMessage(ApiModel):
    message_type: str = Field(default="Error", alias="type")
    code: str
    title: str


class ListCreateResponse(ApiModel):
    data: FilmList
    messages: list[ListMessage] = []


class ListUpdateRequest(ApiModel):
    """PATCH body; only the fields that are set are sent."""
    name: str | None = None
    published: bool | None = None
    ranked: bool | None = None
    description: str | None = None
    tags: list[str] | None = None
    films_to_remove: list[str] | None = None
    entries: list[ListCreationEntry] | None = None


class ListUpdateResponse(ApiModel):
    data: FilmList
    messages: list[ListMessage] = []


class ListEntriesRequest(ApiModel):
    cursor: Cursor | None = None
    per_page: int | None = None
    sort: ListEntriesSort | None = None
    genre: str | None = None
    decade: int | None = None
    year: int | None = None
    service: str | None = None
    where_film_status: list[FilmStatus] | None = Field(default=None, alias="where")
    member: str | None = None


class ListEntriesResponse(ApiModel):
    next: Cursor | None = None
    items: list[ListEntry] = []
