"""CLI commands for films."""

from __future__ import annotations

import asyncio
from typing import Annotated, Any, Awaitable, Callable

import typer

from letterboxd.commands.common import build_client, refresh_if_needed
from letterboxd.errors import LetterboxdError
from letterboxd.models.films import FilmRequestSort, FilmsRequest, FilmStatus
from letterboxd.services.films import FilmService
from letterboxd.utils.errors import handle_error
from letterboxd.utils.output import OutputFormat, print_output, to_rows
from letterboxd.utils.pagination import paginate

app = typer.Typer(name="films", help="Browse films, genres and services.")


def _run(verbose: bool, action: Callable[[FilmService], Awaitable[Any]]) -> Any:
    """Run ``action`` against a FilmService, exiting with 1 on client errors."""

    async def _main() -> Any:
        client, auth, store = build_client(verbose)
        try:
            await refresh_if_needed(auth, store)
            return await action(FilmService(client))
        finally:
            await client.aclose()

    try:
        return asyncio.run(_main())
    except LetterboxdError as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("list")
def list_films(
    genre: Annotated[str | None, typer.Option("--genre", "-g", help="Genre LID")] = None,
    year: Annotated[int | None, typer.Option("--year", "-y", help="Release year")] = None,
    decade: Annotated[int | None, typer.Option("--decade", help="Starting year of a decade, e.g. 1990")] = None,
    service: Annotated[str | None, typer.Option("--service", help="Service ID (see `films services`)")] = None,
    sort: Annotated[FilmRequestSort | None, typer.Option("--sort", "-s", help="Sort order")] = None,
    where: Annotated[list[FilmStatus] | None, typer.Option("--where", "-w", help="Film status filter (repeatable)")] = None,
    member: Annotated[str | None, typer.Option("--member", "-m", help="Member LID")] = None,
    per_page: Annotated[int, typer.Option("--per-page", help="Items per page (max 100)")] = 20,
    limit: Annotated[int, typer.Option("--limit", "-n", help="Maximum films to return")] = 20,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List films, following pagination cursors up to --limit."""
    request = FilmsRequest(
        genre=genre,
        year=year,
        decade=decade,
        service=service,
        sort=sort,
        where_film_status=where or None,
        member=member,
        per_page=per_page,
    )

    async def action(films: FilmService) -> list[Any]:
        return [film async for film in paginate(films.films, request, limit=limit)]

    results = _run(verbose, action)
    columns = ["id", "name", "releaseYear", "directors"]
    print_output(to_rows(results), output, columns=columns, title="Films")


@app.command("get")
def get_film(
    film_id: Annotated[str, typer.Argument(help="Film LID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show details of a film."""
    film = _run(verbose, lambda films: films.film(film_id))
    columns = ["id", "name", "releaseYear", "runTime", "genres", "tagline"]
    print_output(to_rows(film)[0], output, columns=columns, title=film.name)


@app.command("genres")
def list_genres(
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List film genres."""
    response = _run(verbose, lambda films: films.genres())
    print_output(to_rows(response.items), output, columns=["id", "name"], title="Genres")


@app.command("services")
def list_services(
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List film services usable with `films list --service`."""
    response = _run(verbose, lambda films: films.film_services())
    print_output(to_rows(response.items), output, columns=["id", "name"], title="Film Services")


@app.command("stats")
def film_stats(
    film_id: Annotated[str, typer.Argument(help="Film LID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show watch, like and rating counts for a film."""
    stats = _run(verbose, lambda films: films.statistics(film_id))
    row = {"id": stats.film.id, "rating": stats.rating, **stats.counts.model_dump()}
    print_output(row, output, title=f"Statistics for {film_id}")


@app.command("availability")
def film_availability(
    film_id: Annotated[str, typer.Argument(help="Film LID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show where a film can be streamed or bought."""
    response = _run(verbose, lambda films: films.availability(film_id))
    columns = ["service", "displayName", "country", "url"]
    print_output(to_rows(response.items or []), output, columns=columns, title="Availability")
