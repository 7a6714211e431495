"""Shared data models used across endpoints."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# Opaque pagination cursor returned as ``next`` by cursored endpoints.
Cursor = str


class ApiModel(BaseModel):
    """Base for all API models: camelCase on the wire, snake_case in Python."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class IncludeFriends(str, Enum):
    NONE = "None"
    ALL = "All"
    ONLY = "Only"


class ContributionType(str, Enum):
    DIRECTOR = "Director"
    CO_DIRECTOR = "CoDirector"
    ACTOR = "Actor"
    PRODUCER = "Producer"
    WRITER = "Writer"
    EDITOR = "Editor"
    CINEMATOGRAPHY = "Cinematography"
    PRODUCTION_DESIGN = "ProductionDesign"
    ART_DIRECTION = "ArtDirection"
    SET_DECORATION = "SetDecoration"
    VISUAL_EFFECTS = "VisualEffects"
    COMPOSER = "Composer"
    SOUND = "Sound"
    COSTUMES = "Costumes"
    MAKE_UP = "MakeUp"
    STUDIO = "Studio"


class ImageSize(ApiModel):
    width: int
    height: int
    url: str


class Image(ApiModel):
    """An image in multiple sizes."""
    sizes: list[ImageSize] = []


class Link(ApiModel):
    link_type: str = Field(alias="type")  # letterboxd, tmdb, imdb, ...
    id: str
    url: str


class Country(ApiModel):
    code: str
    name: str


class Genre(ApiModel):
    id: str
    name: str


class Service(ApiModel):
    id: str
    name: str
    icon: str | None = None


class ContributorSummary(ApiModel):
    id: str
    name: str
    character_name: str | None = None


class MemberSummary(ApiModel):
    id: str
    username: str
    given_name: str | None = None
    family_name: str | None = None
    display_name: str | None = None
    short_name: str | None = None
    avatar: Image | None = None


class RatingsHistogramBar(ApiModel):
    rating: float
    normalized_weight: float
    count: int
