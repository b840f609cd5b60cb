"""Compute job wire models."""

from __future__ import annotations

from enum import Enum

from pydantic import ConfigDict, Field

from parcel_client.models.common import DatasetId, IdentityId, JobId, PODModel, WireModel
from parcel_client.models.filters import ListFilter


class JobPhase(str, Enum):
    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobPhase.SUCCEEDED, JobPhase.FAILED)


class InputDatasetMount(WireModel):
    """Mount dataset ``id`` at ``mount_path`` under ``/parcel/data/in``."""

    mount_path: str
    id: DatasetId


class OutputDatasetTarget(WireModel):
    """Upload ``mount_path`` under ``/parcel/data/out`` as a dataset owned by ``owner``."""

    mount_path: str
    owner: IdentityId


class PODJobSpec(WireModel):
    """The spec of a submitted job, as the gateway echoes it back."""

    name: str
    image: str
    cmd: list[str] = Field(default_factory=list)
    env: dict[str, str] | None = None
    input_datasets: list[InputDatasetMount] = Field(default_factory=list)
    output_datasets: list[OutputDatasetTarget] = Field(default_factory=list)
    memory: str | None = None
    cpus: float | None = None


class InputDatasetSpec(InputDatasetMount):
    model_config = ConfigDict(extra="forbid")


class OutputDatasetSpec(OutputDatasetTarget):
    model_config = ConfigDict(extra="forbid")


class JobSpec(PODJobSpec):
    """Request body for submitting a job; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")

    input_datasets: list[InputDatasetSpec] = Field(default_factory=list)
    output_datasets: list[OutputDatasetSpec] = Field(default_factory=list)


class OutputDataset(WireModel):
    mount_path: str
    id: DatasetId


class JobStatus(WireModel):
    phase: JobPhase
    message: str | None = None
    host: str | None = None
    output_datasets: list[OutputDataset] = Field(default_factory=list)


class PODJob(PODModel):
    id: JobId
    spec: PODJobSpec
    status: JobStatus


class ListJobsFilter(ListFilter):
    pass
