"""Shared helpers for CLI commands: client factory, options, pagination output."""

from __future__ import annotations

from typing import Annotated, Any, Callable

import typer

from parcel_client.output.formatter import output
from parcel_client.parcel import Parcel
from parcel_client.resources.base import Page

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Config profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="API URL override"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="API token override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (table, json, yaml, csv)"),
]
PageSizeOpt = Annotated[
    int | None,
    typer.Option("--page-size", help="Max items to return"),
]
PageTokenOpt = Annotated[
    str | None,
    typer.Option("--page-token", help="Continuation token from a previous listing"),
]


def make_parcel(profile: str | None, url: str | None, token: str | None) -> Parcel:
    """Create a Parcel client from CLI options, env vars, or config profile."""
    return Parcel.from_profile(profile, api_url=url, token=token)


def page_filter(page_size: int | None, page_token: str | None, **filters: Any) -> dict[str, Any]:
    """Collect non-empty listing options into a filter mapping."""
    values = {"page_size": page_size, "next_page_token": page_token, **filters}
    return {key: value for key, value in values.items() if value is not None}


def output_page(
    page: Page[Any],
    fmt: str,
    *,
    columns: list[str],
    row: Callable[[Any], list[Any]],
    title: str,
) -> None:
    """Render a page of resources; mention the continuation token when there is one."""
    data = {
        "results": [r.to_pod() for r in page.results],
        "nextPageToken": page.next_page_token,
    }
    output(data, fmt, columns=columns, rows=[row(r) for r in page.results], title=title)
    if page.next_page_token and fmt == "table":
        typer.echo(f"More results: --page-token {page.next_page_token}")
