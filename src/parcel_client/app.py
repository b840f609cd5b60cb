"""Root Typer app: global options and command group registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from parcel_client import __version__
from parcel_client.commands import app as app_cmd
from parcel_client.commands import config_cmd, dataset, grant, identity, job

app = typer.Typer(
    name="parcel",
    help="CLI for the Parcel confidential data-exchange API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"parcel-client {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("parcel_client")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests."),
) -> None:
    """Parcel CLI: manage identities, apps, datasets, grants and compute jobs."""
    configure_logging(verbose)


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(identity.app, name="identity")
app.add_typer(app_cmd.app, name="app")
app.add_typer(dataset.app, name="dataset")
app.add_typer(grant.app, name="grant")
app.add_typer(job.app, name="job")


def main() -> None:
    app()
