"""Config commands: API profiles stored in the user's config file."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.prompt import Confirm

from parcel_client.client.errors import error_handler
from parcel_client.config.constants import DEFAULT_API_URL, DEFAULT_TIMEOUT
from parcel_client.config.manager import ConfigManager
from parcel_client.config.models import ApiProfile
from parcel_client.output.formatter import output
from parcel_client.parcel import Parcel

app = typer.Typer(name="config", help="Manage API profiles.")
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


def _mask(token: str) -> str:
    return f"{token[:8]}..." if len(token) > 8 else "***"


def _require(mgr: ConfigManager, name: str) -> ApiProfile:
    profile = mgr.get_profile(name)
    if profile is None:
        console.print(f"[red]No profile named '{name}' in {mgr.config_path}.[/]")
        raise typer.Exit(1)
    return profile


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    url: Annotated[str, typer.Option("--url", "-u", help="Parcel API base URL")] = DEFAULT_API_URL,
    token: Annotated[str | None, typer.Option("--token", "-t", help="API token")] = None,
    timeout: Annotated[float, typer.Option("--timeout", help="Request timeout in seconds")] = DEFAULT_TIMEOUT,
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Skip TLS certificate checks")] = False,
    make_default: Annotated[bool, typer.Option("--default", help="Use this profile by default")] = False,
) -> None:
    """Save an API profile (replacing one with the same name)."""
    mgr = _get_manager()
    mgr.add_profile(ApiProfile(
        name=name, api_url=url, token=token, timeout=timeout, verify_ssl=not no_verify_ssl,
    ))
    if make_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added to {mgr.config_path}.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List saved profiles; the default one is starred."""
    mgr = _get_manager()
    cfg = mgr.config
    if not cfg.profiles:
        console.print("[yellow]No profiles configured. Run 'parcel config add' to get started.[/]")
        return
    saved = list(cfg.profiles.values())
    output(
        {"profiles": [p.model_dump(exclude={"token"}) for p in saved]},
        fmt,
        columns=["Name", "API URL", "Token", "Default"],
        rows=[
            [
                p.name,
                p.api_url,
                "yes" if p.token else "no",
                "*" if p.name == cfg.default_profile else "",
            ]
            for p in saved
        ],
        title="Parcel Profiles",
    )


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show one profile with its token masked."""
    profile = _require(_get_manager(), name)
    data = profile.model_dump(exclude_none=True)
    if profile.token:
        data["token"] = _mask(profile.token)
    output(data, fmt, kv=True, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile to use when --profile is omitted")],
) -> None:
    """Choose the profile commands use by default."""
    mgr = _get_manager()
    _require(mgr, name)
    mgr.set_default(name)
    console.print(f"[green]Default profile set to '{name}'.[/]")


@app.command()
@error_handler
def test(
    name: Annotated[str | None, typer.Argument(help="Profile name (default profile if omitted)")] = None,
) -> None:
    """Check that a profile's URL and token work by fetching the caller's identity."""
    mgr = _get_manager()
    with Parcel.from_profile(name, config=mgr) as parcel:
        console.print(f"Connecting to [bold]{parcel.client.base_url}[/]...")
        me = parcel.get_current_identity()
    console.print(f"[green]Authenticated as identity {me.id}.[/]")


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Do not ask for confirmation")] = False,
) -> None:
    """Delete a saved profile."""
    mgr = _get_manager()
    _require(mgr, name)
    if not force and not Confirm.ask(f"Remove profile '{name}'?"):
        console.print("Cancelled.")
        return
    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
