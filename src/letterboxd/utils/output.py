"""Rendering of API results as Rich tables, JSON or CSV."""

from __future__ import annotations

import csv
import json
import sys
from enum import Enum
from typing import Any, Sequence, Union

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

console = Console(stderr=True)

Rows = Union[Sequence[dict[str, Any]], dict[str, Any]]


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    CSV = "csv"


def to_rows(data: BaseModel | Sequence[BaseModel]) -> list[dict[str, Any]]:
    """Dump models to JSON-compatible dicts (camelCase keys)."""
    if isinstance(data, BaseModel):
        data = [data]
    return [item.model_dump(by_alias=True, exclude_none=True, mode="json") for item in data]


def _as_list(data: Rows) -> list[dict[str, Any]]:
    return [data] if isinstance(data, dict) else list(data)


def _columns(rows: list[dict[str, Any]], columns: list[str] | None) -> list[str]:
    return columns if columns is not None else list(rows[0])


def _cell(value: Any) -> str:
    """Flatten nested API values (genres, directors, owners) into one cell."""
    if isinstance(value, list):
        return ", ".join(_cell(v) for v in value)
    if isinstance(value, dict):
        return str(value.get("name") or value.get("id") or value)
    return "" if value is None else str(value)


def print_output(
    data: Rows,
    fmt: OutputFormat = OutputFormat.TABLE,
    columns: list[str] | None = None,
    title: str | None = None,
) -> None:
    """Print rows in the requested format.

    Args:
        data: A single row or a list of rows, as produced by ``to_rows``.
        fmt: Output format (table, json, csv).
        columns: Columns to show in table/csv mode. JSON always carries
            every key. None = the keys of the first row.
        title: Optional title for table output.
    """
    renderers = {
        OutputFormat.JSON: lambda: print_json(data),
        OutputFormat.CSV: lambda: print_csv(data, columns),
    }
    renderers.get(fmt, lambda: print_table(data, columns, title))()


def print_json(data: Any) -> None:
    """Print data as indented JSON to stdout."""
    sys.stdout.write(json.dumps(data, indent=2, default=str) + "\n")


def print_table(data: Rows, columns: list[str] | None = None, title: str | None = None) -> None:
    """Print rows as a Rich table on stderr."""
    rows = _as_list(data)
    if not rows:
        console.print("[dim]No results.[/dim]")
        return

    columns = _columns(rows, columns)
    table = Table(title=title)
    for col in columns:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*(_cell(row.get(col)) for col in columns))
    console.print(table)


def print_csv(data: Rows, columns: list[str] | None = None) -> None:
    """Print rows as CSV to stdout. Nothing is written for no rows."""
    rows = _as_list(data)
    if not rows:
        return

    fieldnames = _columns(rows, columns)
    writer = csv.writer(sys.stdout)
    writer.writerow(fieldnames)
    writer.writerows([_cell(row.get(col)) for col in fieldnames] for row in rows)
