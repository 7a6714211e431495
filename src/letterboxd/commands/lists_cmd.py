"""CLI commands for lists."""

from __future__ import annotations

import asyncio
from typing import Annotated, Any, Awaitable, Callable

import typer

from letterboxd.commands.common import build_client, refresh_if_needed
from letterboxd.errors import LetterboxdError
from letterboxd.models.lists import ListEntriesRequest, ListRequestSort, ListsRequest
from letterboxd.services.lists import ListService
from letterboxd.utils.errors import handle_error
from letterboxd.utils.output import OutputFormat, print_output, to_rows
from letterboxd.utils.pagination import paginate

app = typer.Typer(name="lists", help="Browse lists and their entries.")


def _run(verbose: bool, action: Callable[[ListService], Awaitable[Any]]) -> Any:
    async def _main() -> Any:
        client, auth, store = build_client(verbose)
        try:
            await refresh_if_needed(auth, store)
            return await action(ListService(client))
        finally:
            await client.aclose()

    try:
        return asyncio.run(_main())
    except LetterboxdError as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("list")
def list_lists(
    member: Annotated[str | None, typer.Option("--member", "-m", help="Member LID")] = None,
    film: Annotated[str | None, typer.Option("--film", "-f", help="Only lists containing this film LID")] = None,
    sort: Annotated[ListRequestSort | None, typer.Option("--sort", "-s", help="Sort order")] = None,
    per_page: Annotated[int, typer.Option("--per-page", help="Items per page (max 100)")] = 20,
    limit: Annotated[int, typer.Option("--limit", "-n", help="Maximum lists to return")] = 20,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List lists, following pagination cursors up to --limit."""
    request = ListsRequest(member=member, film=film, sort=sort, per_page=per_page)

    async def action(lists: ListService) -> list[Any]:
        return [item async for item in paginate(lists.lists, request, limit=limit)]

    results = _run(verbose, action)
    columns = ["id", "name", "filmCount", "owner"]
    print_output(to_rows(results), output, columns=columns, title="Lists")


@app.command("get")
def get_list(
    list_id: Annotated[str, typer.Argument(help="List LID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show details of a list."""
    film_list = _run(verbose, lambda lists: lists.get(list_id))
    columns = ["id", "name", "filmCount", "published", "ranked", "description"]
    print_output(to_rows(film_list)[0], output, columns=columns, title=film_list.name)


@app.command("entries")
def list_entries(
    list_id: Annotated[str, typer.Argument(help="List LID")],
    per_page: Annotated[int, typer.Option("--per-page", help="Items per page (max 100)")] = 20,
    limit: Annotated[int, typer.Option("--limit", "-n", help="Maximum entries to return")] = 100,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show the films in a list."""
    request = ListEntriesRequest(per_page=per_page)

    async def action(lists: ListService) -> list[Any]:
        fetch = lambda req: lists.entries(list_id, req)  # noqa: E731
        return [entry async for entry in paginate(fetch, request, limit=limit)]

    entries = _run(verbose, action)
    rows = [
        {"rank": entry.rank, "id": entry.film.id, "name": entry.film.name, "releaseYear": entry.film.release_year}
        for entry in entries
    ]
    print_output(rows, output, columns=["rank", "id", "name", "releaseYear"], title=f"Entries of {list_id}")
