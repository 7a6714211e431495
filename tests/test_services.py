"""Tests for the film, list and search services."""
import asyncio
import json
from urllib.parse import parse_qsl

import pytest

from letterboxd.errors import ServerError
from letterboxd.models.films import (
    Film,
    FilmRelationship,
    FilmRelationshipUpdateRequest,
    FilmRelationshipUpdateResponse,
    FilmsRequest,
    FilmsResponse,
    GenresResponse,
)
from letterboxd.models.lists import ListCreationRequest, ListEntriesRequest, ListsResponse, ListUpdateRequest
from letterboxd.models.members import MemberFilmRelationshipsRequest, MemberFilmRelationshipsResponse
from letterboxd.models.search import SearchRequest, SearchResultType
from letterboxd.services.films import FilmService
from letterboxd.services.lists import ListService
from letterboxd.services.search import SearchService

FILM_LIST = {"id": "l1", "name": "Noir", "filmCount": 2, "published": True}


def _query(request):
    return [(k, v) for k, v in parse_qsl(request.url.query.decode()) if k not in ("apikey", "nonce", "timestamp", "signature")]


# ── FilmService (mock client) ────────────────────────────────────────

def test_films_default_request(mock_client):
    mock_client.get_with_query.return_value = FilmsResponse()
    asyncio.run(FilmService(mock_client).films())
    mock_client.get_with_query.assert_awaited_once_with("films", FilmsRequest(), FilmsResponse)


def test_film_path(mock_client):
    mock_client.get.return_value = Film(id="2bbs", name="Heat")
    film = asyncio.run(FilmService(mock_client).film("2bbs"))
    assert film.name == "Heat"
    mock_client.get.assert_awaited_once_with("film/2bbs", Film)


def test_relationship_uses_relationship_model(mock_client):
    mock_client.get.return_value = FilmRelationship(watched=True)
    asyncio.run(FilmService(mock_client).relationship("2bbs"))
    mock_client.get.assert_awaited_once_with("film/2bbs/me", FilmRelationship)


def test_update_relationship_patches(mock_client):
    body = FilmRelationshipUpdateRequest(liked=True)
    asyncio.run(FilmService(mock_client).update_relationship("2bbs", body))
    mock_client.patch.assert_awaited_once_with("film/2bbs/me", body, FilmRelationshipUpdateResponse)


def test_relationship_members_default_request(mock_client):
    asyncio.run(FilmService(mock_client).relationship_members("2bbs"))
    mock_client.get_with_query.assert_awaited_once_with(
        "film/2bbs/members", MemberFilmRelationshipsRequest(), MemberFilmRelationshipsResponse
    )


# ── FilmService (over HTTP) ──────────────────────────────────────────

def test_genres_over_http(client, recorder):
    recorder.add(200, {"items": [{"id": "g1", "name": "Crime"}]})
    response = asyncio.run(FilmService(client).genres())
    assert isinstance(response, GenresResponse)
    assert response.items[0].name == "Crime"
    assert recorder.last.url.path == "/api/v0/films/genres"


def test_films_query_over_http(client, recorder):
    recorder.add(200, {"next": "start=20", "items": [{"id": "2bbs", "name": "Heat", "releaseYear": 1995}]})
    response = asyncio.run(FilmService(client).films(FilmsRequest(genre="g1", per_page=20)))
    assert response.next == "start=20"
    assert response.items[0].release_year == 1995
    assert _query(recorder.last) == [("perPage", "20"), ("genre", "g1")]


def test_statistics_over_http(client, recorder):
    recorder.add(200, {"film": {"id": "2bbs"}, "counts": {"watches": 3}})
    stats = asyncio.run(FilmService(client).statistics("2bbs"))
    assert stats.counts.watches == 3
    assert recorder.last.url.path == "/api/v0/film/2bbs/statistics"


def test_availability_over_http(client, recorder):
    recorder.add(200, {"items": [{"service": "Netflix", "displayName": "Netflix", "country": "USA", "url": "u"}]})
    response = asyncio.run(FilmService(client).availability("2bbs"))
    assert response.items[0].display_name == "Netflix"


def test_update_relationship_body_over_http(client, recorder, access_token):
    client.set_token(access_token)
    recorder.add(200, {"data": {"watched": True, "rating": 4.0}, "messages": []})
    response = asyncio.run(
        FilmService(client).update_relationship("2bbs", FilmRelationshipUpdateRequest(watched=True, rating=4.0))
    )
    assert response.data.rating == 4.0
    assert recorder.last.method == "PATCH"
    assert json.loads(recorder.last.content) == {"watched": True, "rating": 4.0}


# ── ListService ──────────────────────────────────────────────────────

def test_lists_over_http(client, recorder):
    recorder.add(200, {"items": [FILM_LIST]})
    response = asyncio.run(ListService(client).lists())
    assert isinstance(response, ListsResponse)
    assert response.items[0].film_count == 2


def test_create_list_posts_body(client, recorder, access_token):
    client.set_token(access_token)
    recorder.add(200, {"data": FILM_LIST})
    response = asyncio.run(ListService(client).create(ListCreationRequest(name="Noir", published=True)))
    assert response.data.id == "l1"
    assert recorder.last.method == "POST"
    assert recorder.last.url.path == "/api/v0/lists"
    assert json.loads(recorder.last.content) == {"name": "Noir", "published": True, "ranked": False}


def test_update_list_patches(client, recorder, access_token):
    client.set_token(access_token)
    recorder.add(200, {"data": FILM_LIST})
    asyncio.run(ListService(client).update("l1", ListUpdateRequest(name="Noir")))
    assert recorder.last.method == "PATCH"
    assert json.loads(recorder.last.content) == {"name": "Noir"}


def test_delete_list(client, recorder, access_token):
    client.set_token(access_token)
    recorder.add(204, content=b"")
    assert asyncio.run(ListService(client).delete("l1")) is None
    assert recorder.last.method == "DELETE"
    assert recorder.last.url.path == "/api/v0/list/l1"


def test_delete_list_not_found(client, recorder):
    recorder.add(404, content=b"Not found")
    with pytest.raises(ServerError) as exc_info:
        asyncio.run(ListService(client).delete("missing"))
    assert exc_info.value.status_code == 404


def test_list_entries(client, recorder):
    recorder.add(200, {"items": [{"rank": 1, "film": {"id": "2bbs", "name": "Heat"}}]})
    response = asyncio.run(ListService(client).entries("l1", ListEntriesRequest(per_page=50)))
    assert response.items[0].film.name == "Heat"
    assert recorder.last.url.path == "/api/v0/list/l1/entries"
    assert _query(recorder.last) == [("perPage", "50")]


# ── SearchService ────────────────────────────────────────────────────

def test_search_over_http(client, recorder):
    recorder.add(200, {"items": [{"type": "FilmSearchItem", "film": {"id": "2bbs", "name": "Heat"}}]})
    request = SearchRequest(input="heat", include=[SearchResultType.FILM, SearchResultType.LIST])
    response = asyncio.run(SearchService(client).search(request))
    assert response.items[0].label == "Heat"
    assert _query(recorder.last) == [
        ("input", "heat"),
        ("include", "FilmSearchItem"),
        ("include", "ListSearchItem"),
    ]
