"""App commands: list, show, delete."""

from __future__ import annotations

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
from parcel_client.models.common import AppId
from parcel_client.output.formatter import output

app = typer.Typer(name="app", help="Manage apps.")
console = Console()


@app.command("list")
@error_handler
def list_apps(
    owner: Annotated[str | None, typer.Option("--owner", help="Only apps owned by this identity")] = None,
    participation: Annotated[
        str | None,
        typer.Option("--participation", help="Only apps you are 'invited' to or have 'joined'"),
    ] = None,
    page_size: PageSizeOpt = None,
    page_token: PageTokenOpt = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List apps."""
    with make_parcel(profile, url, token) as parcel:
        page = parcel.list_apps(
            page_filter(page_size, page_token, owner=owner, participation=participation)
        )
        output_page(
            page,
            fmt,
            columns=["ID", "Name", "Organization", "Published", "Owner"],
            row=lambda a: [a.id, a.name, a.organization, a.published, a.owner],
            title="Apps",
        )


@app.command()
@error_handler
def show(
    app_id: Annotated[str, typer.Argument(help="App ID")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show app details."""
    with make_parcel(profile, url, token) as parcel:
        found = parcel.get_app(AppId(app_id))
        output(found, fmt, kv=True, title=f"App: {found.name}")


@app.command()
@error_handler
def delete(
    app_id: Annotated[str, typer.Argument(help="App ID")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete an app."""
    if not force:
        typer.confirm(f"Delete app '{app_id}'?", abort=True)
    with make_parcel(profile, url, token) as parcel:
        parcel.delete_app(AppId(app_id))
        console.print(f"[green]App '{app_id}' deleted.[/]")
