"""Structured error handling for CLI output."""

from __future__ import annotations

import json
import sys

from rich.console import Console

from letterboxd.errors import (
    ApiConnectionError,
    ConfigurationError,
    DeserializationError,
    LetterboxdError,
    SerializationError,
    ServerError,
)

console = Console(stderr=True)

# Actionable hints keyed by error substring
_ERROR_HINTS: list[tuple[str, str]] = [
    ("signature", "Signature rejected: check LETTERBOXD_API_SECRET and the system clock"),
    ("401", "Token may be expired or invalid: run `letterboxd auth login`"),
    ("unauthorized", "Token may be expired or invalid: run `letterboxd auth login`"),
    ("token", "Token may be expired or invalid: run `letterboxd auth login`"),
    ("403", "This endpoint may require an authenticated member: run `letterboxd auth login`"),
    ("404", "The requested entity does not exist: verify the LID"),
    ("429", "Rate limited: wait a moment and retry"),
    ("credentials", "Set LETTERBOXD_API_KEY and LETTERBOXD_API_SECRET (or add them to .env)"),
    ("timeout", "Request timed out: try again or check network connectivity"),
    ("timed out", "Request timed out: try again or check network connectivity"),
    ("connect", "Connection error: check network connectivity"),
]


def _get_hint(error_message: str) -> str | None:
    """Match an error message to an actionable hint."""
    lower = error_message.lower()
    for pattern, hint in _ERROR_HINTS:
        if pattern.lower() in lower:
            return hint
    return None


def _error_code(error: Exception) -> str:
    if isinstance(error, ServerError):
        if error.status_code == 401:
            return "AUTH_ERROR"
        if error.status_code == 403:
            return "FORBIDDEN"
        if error.status_code == 404:
            return "NOT_FOUND"
        if error.status_code == 429:
            return "RATE_LIMITED"
        return "SERVER_ERROR"
    if isinstance(error, ApiConnectionError):
        return "CONNECTION_ERROR"
    if isinstance(error, ConfigurationError):
        return "CONFIG_ERROR"
    if isinstance(error, SerializationError):
        return "SERIALIZATION_ERROR"
    if isinstance(error, DeserializationError):
        return "DESERIALIZATION_ERROR"
    if isinstance(error, LetterboxdError):
        return "CLIENT_ERROR"
    return "RUNTIME_ERROR"


def handle_error(error: Exception) -> None:
    """Handle an error with structured output to stdout and human-readable output to stderr.

    Outputs a JSON error object to stdout:
    {"error": true, "code": "AUTH_ERROR", "message": "...", "hint": "..."}

    Server errors also carry "status" and the signed request "url".
    """
    message = str(error)
    hint = _get_hint(message)

    error_obj: dict[str, object] = {
        "error": True,
        "code": _error_code(error),
        "message": message,
    }
    if isinstance(error, ServerError):
        error_obj["status"] = error.status_code
        error_obj["url"] = error.url
    if hint:
        error_obj["hint"] = hint

    json.dump(error_obj, sys.stdout)
    sys.stdout.write("\n")

    # Human-readable to stderr
    console.print(f"[red]Error:[/red] {message}")
    if hint:
        console.print(f"[dim]Hint: {hint}[/dim]")
