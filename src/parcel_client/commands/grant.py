"""Grant commands: list, show, create, delete."""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.console import Console

from parcel_client.client.errors import error_handler
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
from parcel_client.models.common import GrantId
from parcel_client.output.formatter import output

app = typer.Typer(name="grant", help="Manage grants.")
console = Console()


@app.command("list")
@error_handler
def list_grants(
    granter: Annotated[str | None, typer.Option("--granter", help="Only grants made by this identity")] = None,
    grantee: Annotated[str | None, typer.Option("--grantee", help="Only grants made to this identity or app")] = None,
    page_size: PageSizeOpt = None,
    page_token: PageTokenOpt = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List grants."""
    with make_parcel(profile, url, token) as parcel:
        page = parcel.list_grants(
            page_filter(page_size, page_token, granter=granter, grantee=grantee)
        )
        output_page(
            page,
            fmt,
            columns=["ID", "Granter", "Grantee", "Consent"],
            row=lambda g: [g.id, g.granter, g.grantee, g.consent],
            title="Grants",
        )


@app.command()
@error_handler
def show(
    grant_id: Annotated[str, typer.Argument(help="Grant ID")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show grant details."""
    with make_parcel(profile, url, token) as parcel:
        grant = parcel.get_grant(GrantId(grant_id))
        output(grant, fmt, kv=True, title=f"Grant: {grant.id}")


@app.command()
@error_handler
def create(
    grantee: Annotated[str, typer.Argument(help="Identity or app receiving access")],
    condition: Annotated[
        str | None,
        typer.Option("--filter", help='Access condition as JSON, e.g. {"dataset.id": {"$eq": "..."}}'),
    ] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Grant an identity or app access to your datasets."""
    params: dict = {"grantee": grantee}
    if condition is not None:
        try:
            params["filter"] = json.loads(condition)
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"Invalid JSON: {exc}", param_hint="--filter") from exc
    with make_parcel(profile, url, token) as parcel:
        grant = parcel.create_grant(params)
        output(grant, fmt, kv=True, title=f"Created grant: {grant.id}")


@app.command()
@error_handler
def delete(
    grant_id: Annotated[str, typer.Argument(help="Grant ID")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete (revoke) a grant."""
    if not force:
        typer.confirm(f"Delete grant '{grant_id}'?", abort=True)
    with make_parcel(profile, url, token) as parcel:
        parcel.delete_grant(GrantId(grant_id))
        console.print(f"[green]Grant '{grant_id}' deleted.[/]")
