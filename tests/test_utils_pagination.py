"""Tests for utils/pagination.py: uses a recording coroutine for fetch_fn."""
import asyncio

from letterboxd.models.films import FilmsRequest, FilmsResponse
from letterboxd.utils.pagination import paginate


def _page(ids, next_cursor=None):
    return FilmsResponse(next=next_cursor, items=[{"id": i, "name": f"Film {i}"} for i in ids])


def _collect(fetch, request, limit=None):
    async def run():
        return [item.id async for item in paginate(fetch, request, limit=limit)]

    return asyncio.run(run())


def _fetcher(pages):
    calls = []
    page_iter = iter(pages)

    async def fetch(request):
        calls.append(request)
        return next(page_iter)

    return fetch, calls


def test_single_page():
    fetch, calls = _fetcher([_page(["a", "b"])])
    assert _collect(fetch, FilmsRequest()) == ["a", "b"]
    assert len(calls) == 1


def test_follows_cursor():
    fetch, calls = _fetcher([
        _page(["a"], "start=1"),
        _page(["b"], "start=2"),
        _page(["c"]),
    ])
    assert _collect(fetch, FilmsRequest(per_page=1)) == ["a", "b", "c"]
    assert [c.cursor for c in calls] == [None, "start=1", "start=2"]
    assert all(c.per_page == 1 for c in calls)


def test_request_not_mutated():
    request = FilmsRequest(per_page=1)
    fetch, _ = _fetcher([_page(["a"], "start=1"), _page(["b"])])
    _collect(fetch, request)
    assert request.cursor is None


def test_empty_results():
    fetch, _ = _fetcher([_page([])])
    assert _collect(fetch, FilmsRequest()) == []


def test_limit_within_page():
    fetch, _ = _fetcher([_page(["a", "b", "c"], "start=3")])
    assert _collect(fetch, FilmsRequest(), limit=2) == ["a", "b"]


def test_limit_at_page_boundary_stops_fetching():
    fetch, calls = _fetcher([_page(["a", "b"], "start=2"), _page(["c"])])
    assert _collect(fetch, FilmsRequest(), limit=2) == ["a", "b"]
    assert len(calls) == 1


def test_limit_across_pages():
    fetch, calls = _fetcher([_page(["a", "b"], "start=2"), _page(["c", "d"], "start=4")])
    assert _collect(fetch, FilmsRequest(), limit=3) == ["a", "b", "c"]
    assert len(calls) == 2
