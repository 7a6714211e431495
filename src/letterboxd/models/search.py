"""Search data models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from letterboxd.models.common import ApiModel, Cursor


class SearchMethod(str, Enum):
    FULL_TEXT = "FullText"
    AUTOCOMPLETE = "Autocomplete"
    NAMES_AND_KEYWORDS = "NamesAndKeywords"


class SearchResultType(str, Enum):
    CONTRIBUTOR = "ContributorSearchItem"
    FILM = "FilmSearchItem"
    LIST = "ListSearchItem"
    MEMBER = "MemberSearchItem"
    REVIEW = "ReviewSearchItem"
    TAG = "TagSearchItem"
    STORY = "StorySearchItem"


class SearchRequest(ApiModel):
    input: str
    cursor: Cursor | None = None
    per_page: int | None = None
    search_method: SearchMethod | None = None
    include: list[SearchResultType] | None = None
    contribution_type: str | None = None
    adult: bool | None = None


class SearchItem(ApiModel):
    """A single search hit; the payload depends on ``item_type``."""
    item_type: str = Field(alias="type")
    score: float | None = None
    film: dict[str, Any] | None = None
    film_list: dict[str, Any] | None = Field(default=None, alias="list")
    member: dict[str, Any] | None = None
    contributor: dict[str, Any] | None = None
    tag: str | None = None

    @property
    def label(self) -> str:
        for payload in (self.film, self.film_list, self.member, self.contributor):
            if payload:
                return str(payload.get("name") or payload.get("displayName") or payload.get("id", ""))
        return self.tag or ""


class SearchResponse(ApiModel):
    next: Cursor | None = None
    items: list[SearchItem] = []
