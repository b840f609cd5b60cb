"""Identity commands."""

from __future__ import annotations

import typer

from parcel_client.client.errors import error_handler
from parcel_client.commands._common import FormatOpt, ProfileOpt, TokenOpt, UrlOpt, make_parcel
from parcel_client.output.formatter import output

app = typer.Typer(name="identity", help="Inspect identities.")


@app.command()
@error_handler
def me(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show the identity the API token authenticates as."""
    with make_parcel(profile, url, token) as parcel:
        identity = parcel.get_current_identity()
        output(identity, fmt, kv=True, title=f"Identity: {identity.id}")
