"""Rich table builders for resource listings and single resources."""

from __future__ import annotations

import json
from typing import Any, Sequence

from rich.table import Table


def cell_text(value: Any) -> str:
    """Flatten a wire value into one table cell.

    Lists of scalars are comma-joined; nested objects such as dataset
    metadata or grant filters are shown as compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, dict) or (
        isinstance(value, (list, tuple)) and any(isinstance(v, (dict, list)) for v in value)
    ):
        return json.dumps(value, separators=(",", ":"), default=str)
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
) -> Table:
    """One row per resource, one column per header."""
    table = Table(title=title)
    for header in columns:
        table.add_column(header, overflow="fold")
    for row in rows:
        table.add_row(*map(cell_text, row))
    return table


def kv_table(data: dict[str, Any], *, title: str | None = None) -> Table:
    """Field/value view of a single resource."""
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for key, value in data.items():
        table.add_row(key, cell_text(value))
    return table
