"""Render command results as a table, JSON, YAML or CSV."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

import yaml
from rich.console import Console

from parcel_client.output.tables import cell_text, kv_table, make_table

console = Console()

FORMATS = ("table", "json", "yaml", "csv")


def to_plain(data: Any) -> Any:
    """Convert resources and models to JSON-compatible values with wire field names."""
    if hasattr(data, "to_pod"):
        return data.to_pod()
    if hasattr(data, "model_dump"):
        return data.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(data, (list, tuple)):
        return [to_plain(item) for item in data]
    if isinstance(data, dict):
        return {key: to_plain(value) for key, value in data.items()}
    return data


def output_json(data: Any) -> None:
    console.print_json(json.dumps(to_plain(data), default=str))


def output_yaml(data: Any) -> None:
    text = yaml.safe_dump(to_plain(data), default_flow_style=False, sort_keys=False)
    console.print(text, end="", markup=False, highlight=False)


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(columns)
    for row in rows:
        writer.writerow([cell_text(v) for v in row])
    console.print(buf.getvalue(), end="", markup=False, highlight=False, soft_wrap=True)


def output(
    data: Any,
    fmt: str = "table",
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
    kv: bool = False,
) -> None:
    """Print ``data`` in ``fmt``.

    ``table`` and ``csv`` use ``columns``/``rows`` when given; ``kv=True``
    renders a single resource as a field/value table instead. ``csv`` without
    rows falls back to JSON.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format '{fmt}'. Choose from: {', '.join(FORMATS)}")
    tabular = columns is not None and rows is not None and not kv
    if fmt == "json" or (fmt == "csv" and not tabular):
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    elif fmt == "csv":
        output_csv(columns, rows)
    elif tabular:
        console.print(make_table(title, columns, rows))
    else:
        plain = to_plain(data)
        if isinstance(plain, dict):
            console.print(kv_table(plain, title=title))
        else:
            console.print(plain)
