"""CLI commands for authentication management."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer
from rich.console import Console

from letterboxd.commands.common import build_client
from letterboxd.config import load_settings
from letterboxd.errors import LetterboxdError
from letterboxd.utils.errors import handle_error
from letterboxd.utils.output import OutputFormat, print_output
from letterboxd.utils.token_store import TokenStore

console = Console(stderr=True)
app = typer.Typer(name="auth", help="Manage authentication tokens.")


@app.command()
def login(
    username: Annotated[str, typer.Option("--username", "-u", prompt=True, help="Letterboxd username or email")],
    password: Annotated[str, typer.Option("--password", "-p", prompt=True, hide_input=True, help="Letterboxd password")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show request details")] = False,
) -> None:
    """Authenticate with a username/password and store the token."""

    async def _run() -> None:
        client, auth, store = build_client(verbose)
        try:
            console.print(f"Authenticating as [bold]{username}[/bold]...", style="yellow")
            token = await auth.login(username, password)
            store.save(token, auth.expires_at)
            status = auth.get_status()
            result = {
                "status": "authenticated",
                "token_type": token.token_type,
                "expires_at": str(status.expires_at),
                "seconds_remaining": status.seconds_remaining,
            }
            print_output(result, output, title="Authentication")
        finally:
            await client.aclose()

    try:
        asyncio.run(_run())
    except LetterboxdError as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command()
def status(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Show the stored token status."""
    try:
        client, auth, _ = build_client()
    except LetterboxdError as e:
        handle_error(e)
        raise typer.Exit(1)

    token_status = auth.get_status()
    result = {
        "has_token": token_status.has_token,
        "is_expired": token_status.is_expired,
        "expires_at": str(token_status.expires_at) if token_status.expires_at else "N/A",
        "seconds_remaining": token_status.seconds_remaining or 0,
    }
    print_output(result, output, title="Token Status")
    asyncio.run(client.aclose())


@app.command()
def logout() -> None:
    """Forget the stored token. Needs no API credentials."""
    try:
        store = TokenStore(load_settings().token_path)
    except LetterboxdError as e:
        handle_error(e)
        raise typer.Exit(1)

    if store.clear():
        console.print(f"Removed token at {store.path}", style="green")
    else:
        console.print("[dim]No stored token.[/dim]")
