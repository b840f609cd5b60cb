"""Compute jobs run inside the gateway's confidential workers."""

from __future__ import annotations

from typing import Any

from parcel_client.client.http import HttpClient
from parcel_client.models.common import JobId
from parcel_client.models.job import JobPhase, JobSpec, ListJobsFilter, PODJob
from parcel_client.resources.base import Page, Resource, list_page

JOBS_EP = "/compute/jobs"


def endpoint_for_id(job_id: JobId) -> str:
    return f"{JOBS_EP}/{job_id}"


class Job(Resource[PODJob]):
    pod_type = PODJob

    @property
    def id(self) -> JobId:
        return self._pod.id

    @property
    def phase(self) -> JobPhase:
        return self._pod.status.phase

    @property
    def is_finished(self) -> bool:
        return self.phase.is_terminal

    def refresh(self) -> Job:
        """Re-fetch the job's status into this object."""
        self._replace_snapshot(get_job(self._client, self.id))
        return self

    def terminate(self) -> None:
        terminate_job(self._client, self.id)


def submit_job(client: HttpClient, spec: JobSpec | dict[str, Any]) -> Job:
    if not isinstance(spec, JobSpec):
        spec = JobSpec.model_validate(spec)
    return Job(client, client.create(JOBS_EP, spec.to_wire()))


def get_job(client: HttpClient, job_id: JobId) -> Job:
    return Job(client, client.get(endpoint_for_id(job_id)))


def list_jobs(
    client: HttpClient, filter: ListJobsFilter | dict[str, Any] | None = None,
) -> Page[Job]:
    return list_page(client, JOBS_EP, Job, ListJobsFilter.coerce(filter))


def terminate_job(client: HttpClient, job_id: JobId) -> None:
    client.delete(endpoint_for_id(job_id))
