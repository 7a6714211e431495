"""Film data models."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import Field

from letterboxd.models.common import (
    ApiModel,
    ContributionType,
    ContributorSummary,
    Country,
    Cursor,
    Genre,
    Image,
    IncludeFriends,
    Link,
    MemberSummary,
    RatingsHistogramBar,
    Service,
)


class FilmStatus(str, Enum):
    RELEASED = "Released"
    NOT_RELEASED = "NotReleased"
    IN_WATCHLIST = "InWatchlist"
    NOT_IN_WATCHLIST = "NotInWatchlist"
    WATCHED = "Watched"
    NOT_WATCHED = "NotWatched"
    FEATURE_LENGTH = "FeatureLength"
    NOT_FEATURE_LENGTH = "NotFeatureLength"


class FilmRelationshipType(str, Enum):
    WATCHED = "Watched"
    NOT_WATCHED = "NotWatched"
    LIKED = "Liked"
    NOT_LIKED = "NotLiked"
    IN_WATCHLIST = "InWatchlist"
    NOT_IN_WATCHLIST = "NotInWatchlist"
    FAVORITED = "Favorited"


class FilmRequestSort(str, Enum):
    FILM_NAME = "FilmName"
    RELEASE_DATE_LATEST_FIRST = "ReleaseDateLatestFirst"
    RELEASE_DATE_EARLIEST_FIRST = "ReleaseDateEarliestFirst"
    RATING_HIGH_TO_LOW = "RatingHighToLow"
    RATING_LOW_TO_HIGH = "RatingLowToHigh"
    FILM_DURATION_SHORTEST_FIRST = "FilmDurationShortestFirst"
    FILM_DURATION_LONGEST_FIRST = "FilmDurationLongestFirst"
    FILM_POPULARITY = "FilmPopularity"
    FILM_POPULARITY_THIS_WEEK = "FilmPopularityThisWeek"
    FILM_POPULARITY_THIS_MONTH = "FilmPopularityThisMonth"
    FILM_POPULARITY_THIS_YEAR = "FilmPopularityThisYear"
    FILM_POPULARITY_WITH_FRIENDS = "FilmPopularityWithFriends"
    FILM_POPULARITY_WITH_FRIENDS_THIS_WEEK = "FilmPopularityWithFriendsThisWeek"
    FILM_POPULARITY_WITH_FRIENDS_THIS_MONTH = "FilmPopularityWithFriendsThisMonth"
    FILM_POPULARITY_WITH_FRIENDS_THIS_YEAR = "FilmPopularityWithFriendsThisYear"


class FilmTrailer(ApiModel):
    id: str  # YouTube ID
    url: str


class FilmContributions(ApiModel):
    contribution_type: ContributionType | None = Field(default=None, alias="type")
    contributors: list[ContributorSummary] = []


class Film(ApiModel):
    """Full details of a film."""
    id: str
    name: str
    original_name: str | None = None
    alternative_names: list[str] = []
    release_year: int | None = None
    tagline: str | None = None
    description: str | None = None
    run_time: int | None = None
    poster: Image | None = None
    backdrop: Image | None = None
    backdrop_focal_point: float | None = None
    trailer: FilmTrailer | None = None
    genres: list[Genre] = []
    contributions: list[FilmContributions] = []
    links: list[Link] = []


class FilmIdentifier(ApiModel):
    id: str


class FilmRelationship(ApiModel):
    """The authenticated member's relationship with a film."""
    watched: bool = False
    liked: bool = False
    favorited: bool = False
    in_watchlist: bool = False
    rating: float | None = None
    reviews: list[str] = []
    diary_entries: list[str] = []


class MemberFilmRelationship(ApiModel):
    member: MemberSummary
    relationship: FilmRelationship


class FilmSummary(ApiModel):
    id: str
    name: str
    original_name: str | None = None
    alternative_names: list[str] | None = None
    release_year: int | None = None
    directors: list[ContributorSummary] = []
    poster: Image | None = None
    relationships: list[MemberFilmRelationship] = []


class FilmAvailability(ApiModel):
    service: str  # Amazon, AmazonVideo, AmazonPrime, iTunes, Netflix, ...
    display_name: str
    country: Country | str
    id: str | None = None
    url: str


class FilmAvailabilityResponse(ApiModel):
    items: list[FilmAvailability] | None = None


class FilmRelationshipUpdateRequest(ApiModel):
    """PATCH body; only the fields that are set are sent."""
    watched: bool | None = None
    liked: bool | None = None
    in_watchlist: bool | None = None
    rating: float | None = None


class FilmRelationshipUpdateMessage(ApiModel):
    message_type: Literal["Error", "Success"] = Field(default="Error", alias="type")
    code: str  # InvalidRatingValue, UnableToRemoveWatch
    title: str


class FilmRelationshipUpdateResponse(ApiModel):
    data: FilmRelationship
    messages: list[FilmRelationshipUpdateMessage] = []


class FilmServicesResponse(ApiModel):
    items: list[Service] = []


class GenresResponse(ApiModel):
    items: list[Genre] = []


class FilmStatisticsCounts(ApiModel):
    watches: int = 0
    likes: int = 0
    ratings: int = 0
    fans: int = 0
    lists: int = 0
    reviews: int = 0


class FilmStatistics(ApiModel):
    film: FilmIdentifier
    counts: FilmStatisticsCounts
    rating: float | None = None
    ratings_histogram: list[RatingsHistogramBar] = []


class FilmsRequest(ApiModel):
    """Query for the cursored /films endpoint."""
    cursor: Cursor | None = None
    per_page: int | None = None
    sort: FilmRequestSort | None = None
    genre: str | None = None
    decade: int | None = None
    year: int | None = None
    service: str | None = None
    where_film_status: list[FilmStatus] | None = Field(default=None, alias="where")
    member: str | None = None
    member_relationship: FilmRelationshipType | None = None
    include_friends: IncludeFriends | None = None
    tag_code: str | None = None
    tagger: str | None = None
    include_tagger_friends: IncludeFriends | None = None


class FilmsResponse(ApiModel):
    next: Cursor | None = None
    items: list[FilmSummary] = []
