"""Compute job commands: list, status, submit, terminate.

Jobs run asynchronously on the gateway; ``submit`` returns as soon as the
job is accepted. Use ``status`` to poll.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
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
from parcel_client.models.common import JobId
from parcel_client.models.job import JobSpec
from parcel_client.output.formatter import output

app = typer.Typer(name="job", help="Submit and monitor compute jobs.")
console = Console()


def _status_view(job) -> dict:
    status = job.status
    return {
        "id": job.id,
        "name": job.spec.name,
        "phase": status.phase.value,
        "message": status.message,
        "host": status.host,
        "outputs": [f"{o.mount_path} -> {o.id}" for o in status.output_datasets],
    }


@app.command("list")
@error_handler
def list_jobs(
    page_size: PageSizeOpt = None,
    page_token: PageTokenOpt = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List compute jobs."""
    with make_parcel(profile, url, token) as parcel:
        page = parcel.list_jobs(page_filter(page_size, page_token))
        output_page(
            page,
            fmt,
            columns=["ID", "Name", "Image", "Phase"],
            row=lambda j: [j.id, j.spec.name, j.spec.image, j.phase.value],
            title="Jobs",
        )


@app.command()
@error_handler
def status(
    job_id: Annotated[str, typer.Argument(help="Job ID")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a job's status."""
    with make_parcel(profile, url, token) as parcel:
        job = parcel.get_job(JobId(job_id))
        data = _status_view(job) if fmt == "table" else job
        output(data, fmt, kv=True, title=f"Job: {job.id}")


@app.command()
@error_handler
def submit(
    spec_file: Annotated[
        Path,
        typer.Argument(help="Job spec as a YAML or JSON file", exists=True, dir_okay=False),
    ],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Submit a compute job."""
    # YAML is a superset of JSON, so one loader handles both.
    raw = yaml.safe_load(spec_file.read_text())
    if not isinstance(raw, dict):
        raise typer.BadParameter("Job spec must be a mapping", param_hint="SPEC_FILE")
    spec = JobSpec.model_validate(raw)
    with make_parcel(profile, url, token) as parcel:
        job = parcel.submit_job(spec)
        data = _status_view(job) if fmt == "table" else job
        output(data, fmt, kv=True, title=f"Submitted job: {job.id}")


@app.command()
@error_handler
def terminate(
    job_id: Annotated[str, typer.Argument(help="Job ID")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Terminate a running job."""
    with make_parcel(profile, url, token) as parcel:
        parcel.terminate_job(JobId(job_id))
        console.print(f"[green]Job '{job_id}' terminated.[/]")
