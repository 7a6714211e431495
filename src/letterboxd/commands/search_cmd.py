"""CLI command for search."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer

from letterboxd.commands.common import build_client, refresh_if_needed
from letterboxd.errors import LetterboxdError
from letterboxd.models.search import SearchMethod, SearchRequest, SearchResponse, SearchResultType
from letterboxd.services.search import SearchService
from letterboxd.utils.errors import handle_error
from letterboxd.utils.output import OutputFormat, print_output


def search(
    query: Annotated[str, typer.Argument(help="Word, partial word or phrase to search for")],
    include: Annotated[list[SearchResultType] | None, typer.Option("--include", "-i", help="Result types to include (repeatable)")] = None,
    method: Annotated[SearchMethod | None, typer.Option("--method", help="Search method")] = None,
    per_page: Annotated[int, typer.Option("--per-page", help="Items per page (max 100)")] = 20,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Search for films, lists, members and contributors."""
    request = SearchRequest(input=query, include=include or None, search_method=method, per_page=per_page)

    async def _main() -> SearchResponse:
        client, auth, store = build_client(verbose)
        try:
            await refresh_if_needed(auth, store)
            return await SearchService(client).search(request)
        finally:
            await client.aclose()

    try:
        response = asyncio.run(_main())
    except LetterboxdError as e:
        handle_error(e)
        raise typer.Exit(1)

    rows = [{"type": item.item_type, "name": item.label, "score": item.score} for item in response.items]
    print_output(rows, output, columns=["type", "name", "score"], title=f"Search: {query}")
