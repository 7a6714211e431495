"""Pagination helpers for cursored Letterboxd endpoints."""

from __future__ import annotations

from typing import Any, AsyncIterator, Awaitable, Callable, TypeVar

from pydantic import BaseModel

R = TypeVar("R", bound=BaseModel)


async def paginate(
    fetch_fn: Callable[[R], Awaitable[Any]],
    request: R,
    limit: int | None = None,
) -> AsyncIterator[Any]:
    """Yield items across pages by following the ``next`` cursor.

    Args:
        fetch_fn: Coroutine function taking a request model and returning a
                  response with ``items`` and ``next``.
        request: The initial request. It is copied, never mutated.
        limit: Stop after yielding this many items. None = all.
    """
    count = 0
    while True:
        response = await fetch_fn(request)
        for item in response.items:
            if limit is not None and count >= limit:
                return
            yield item
            count += 1

        if not response.next or (limit is not None and count >= limit):
            return
        request = request.model_copy(update={"cursor": response.next})
