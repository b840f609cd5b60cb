"""Dataset commands: list, show, upload, download, delete."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from parcel_client.client.errors import ParcelError, error_handler
from parcel_client.commands._common import (
    FormatOpt,
    PageSizeOpt,
    PageTokenOpt,
    ProfileOpt,
    TokenOpt,
    UrlOpt,
    make_parcel,
    output_page,
    page_filter,
)
from parcel_client.models.common import DatasetId
from parcel_client.output.formatter import output

app = typer.Typer(name="dataset", help="Manage datasets.")
console = Console()


def _parse_tags(tags: str | None) -> str | None:
    if tags is None:
        return None
    if not tags.startswith(("all:", "any:")):
        raise typer.BadParameter("Use 'all:tag1,tag2' or 'any:tag1,tag2'", param_hint="--tags")
    return tags


@app.command("list")
@error_handler
def list_datasets(
    owner: Annotated[str | None, typer.Option("--owner", help="Only datasets owned by this identity")] = None,
    creator: Annotated[str | None, typer.Option("--creator", help="Only datasets created by this identity")] = None,
    tags: Annotated[str | None, typer.Option("--tags", help="Tag matcher, e.g. all:tag1,tag2")] = None,
    page_size: PageSizeOpt = None,
    page_token: PageTokenOpt = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List datasets."""
    with make_parcel(profile, url, token) as parcel:
        page = parcel.list_datasets(
            page_filter(
                page_size, page_token, owner=owner, creator=creator, tags=_parse_tags(tags),
            )
        )
        output_page(
            page,
            fmt,
            columns=["ID", "Owner", "Creator", "Created"],
            row=lambda d: [d.id, d.owner, d.creator, d.created_at.isoformat()],
            title="Datasets",
        )


@app.command()
@error_handler
def show(
    dataset_id: Annotated[str, typer.Argument(help="Dataset ID")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show dataset details."""
    with make_parcel(profile, url, token) as parcel:
        dataset = parcel.get_dataset(DatasetId(dataset_id))
        output(dataset, fmt, kv=True, title=f"Dataset: {dataset.id}")


@app.command()
@error_handler
def upload(
    file: Annotated[Path, typer.Argument(help="File to upload", exists=True, dir_okay=False)],
    metadata: Annotated[str | None, typer.Option("--metadata", help="Metadata as a JSON object")] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Upload a file as a new dataset."""
    params = None
    if metadata is not None:
        try:
            params = {"metadata": json.loads(metadata)}
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"Invalid JSON: {exc}", param_hint="--metadata") from exc
    with make_parcel(profile, url, token) as parcel, open(file, "rb") as f:
        dataset = parcel.upload_dataset(f, params).finished()
        output(dataset, fmt, kv=True, title=f"Uploaded dataset: {dataset.id}")


@app.command()
@error_handler
def download(
    dataset_id: Annotated[str, typer.Argument(help="Dataset ID")],
    dest: Annotated[Path, typer.Option("--output", "-o", help="Destination file")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Download a dataset's contents to a file."""
    with make_parcel(profile, url, token) as parcel:
        try:
            total = parcel.download_dataset(DatasetId(dataset_id)).save(dest)
        except OSError as exc:
            raise ParcelError(f"Cannot write to {dest}: {exc}") from exc
        console.print(f"[green]Saved {total} bytes to {dest}.[/]")


@app.command()
@error_handler
def delete(
    dataset_id: Annotated[str, typer.Argument(help="Dataset ID")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete a dataset."""
    if not force:
        typer.confirm(f"Delete dataset '{dataset_id}'?", abort=True)
    with make_parcel(profile, url, token) as parcel:
        parcel.delete_dataset(DatasetId(dataset_id))
        console.print(f"[green]Dataset '{dataset_id}' deleted.[/]")
