"""Letterboxd CLI entry point.

Command-line access to the Letterboxd API: films, lists, search and
authentication.
"""

from __future__ import annotations

import logging

import typer

from letterboxd.commands.auth_cmd import app as auth_app
from letterboxd.commands.films_cmd import app as films_app
from letterboxd.commands.lists_cmd import app as lists_app
from letterboxd.commands.search_cmd import search

app = typer.Typer(
    name="letterboxd",
    help="CLI for the Letterboxd API.",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(auth_app, name="auth")
app.add_typer(films_app, name="films")
app.add_typer(lists_app, name="lists")
app.command("search")(search)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Letterboxd CLI: browse films and lists, search, manage your token."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


if __name__ == "__main__":
    app()
