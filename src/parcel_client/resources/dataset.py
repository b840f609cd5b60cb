"""Datasets, including streaming upload and download."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import IO, Any, Protocol, Union

from parcel_client.client.errors import ParcelError
from parcel_client.client.http import HttpClient, MultipartPart
from parcel_client.models.common import DatasetId
from parcel_client.models.dataset import (
    DatasetUpdateParams,
    DatasetUploadParams,
    ListDatasetsFilter,
    PODDataset,
)
from parcel_client.resources.base import Page, Resource, list_page

logger = logging.getLogger(__name__)

DATASETS_EP = "/datasets"

UploadData = Union[bytes, bytearray, str, IO[bytes]]


def endpoint_for_id(dataset_id: DatasetId) -> str:
    return f"{DATASETS_EP}/{dataset_id}"


def endpoint_for_download(dataset_id: DatasetId) -> str:
    return f"{endpoint_for_id(dataset_id)}/download"


class Sink(Protocol):
    """Anything accepting byte chunks, e.g. a file opened in ``"wb"`` mode."""

    def write(self, data: bytes, /) -> Any: ...


class Dataset(Resource[PODDataset]):
    pod_type = PODDataset

    @property
    def id(self) -> DatasetId:
        return self._pod.id

    def update(self, params: DatasetUpdateParams | dict[str, Any]) -> Dataset:
        self._replace_snapshot(update_dataset(self._client, self.id, params))
        return self

    def delete(self) -> None:
        delete_dataset(self._client, self.id)

    def download(self) -> Download:
        return download_dataset(self._client, self.id)


class Upload:
    """A pending multipart dataset upload.

    Nothing is sent until :meth:`finished` is called. The upload is
    all-or-nothing: a failure is recorded and re-raised on every later call,
    and retrying means starting a new upload.
    """

    def __init__(
        self,
        client: HttpClient,
        data: UploadData,
        params: DatasetUploadParams | None = None,
    ) -> None:
        self._client = client
        if isinstance(data, str):
            data = data.encode()
        elif isinstance(data, bytearray):
            data = bytes(data)
        self._data = data
        self._params = params
        self._result: Dataset | None = None
        self._error: ParcelError | None = None

    @property
    def done(self) -> bool:
        return self._result is not None or self._error is not None

    def _parts(self) -> list[MultipartPart]:
        parts: list[MultipartPart] = []
        if self._params is not None and self._params.model_fields_set:
            metadata = json.dumps(self._params.to_wire(), separators=(",", ":")).encode()
            parts.append(("metadata", (None, metadata, "application/json")))
        parts.append(("data", (None, self._data, "application/octet-stream")))
        return parts

    def finished(self) -> Dataset:
        """Perform the upload (once) and return the created dataset."""
        if self._error is not None:
            raise self._error
        if self._result is None:
            try:
                pod = self._client.stream_upload(DATASETS_EP, self._parts())
                dataset = Dataset(self._client, pod)
            except ParcelError as exc:
                self._error = exc
                raise
            logger.debug("Uploaded dataset %s", dataset.id)
            self._result = dataset
        return self._result


class Download:
    """A dataset download that streams into a caller-supplied sink."""

    def __init__(self, client: HttpClient, dataset_id: DatasetId) -> None:
        self._client = client
        self.dataset_id = dataset_id

    def pipe_to(self, sink: Sink) -> int:
        """Stream the dataset into ``sink`` chunk by chunk, returning bytes written.

        HTTP errors are raised before the first ``sink.write``. Exceptions raised
        by ``sink.write`` abort the download and reach the caller unchanged.
        """
        total = 0
        with self._client.stream_download(endpoint_for_download(self.dataset_id)) as chunks:
            for chunk in chunks:
                sink.write(chunk)
                total += len(chunk)
        logger.debug("Downloaded %d byte(s) of dataset %s", total, self.dataset_id)
        return total

    def save(self, dest: str | os.PathLike[str]) -> int:
        """Download to ``dest`` atomically via a ``.partial`` file, returning bytes written."""
        dest = Path(dest)
        temp = dest.with_suffix(dest.suffix + ".partial")
        try:
            with open(temp, "wb") as f:
                total = self.pipe_to(f)
            temp.replace(dest)
            return total
        finally:
            temp.unlink(missing_ok=True)


def upload_dataset(
    client: HttpClient,
    data: UploadData,
    params: DatasetUploadParams | dict[str, Any] | None = None,
) -> Upload:
    coerced = DatasetUploadParams.coerce(params) if params is not None else None
    return Upload(client, data, coerced)


def download_dataset(client: HttpClient, dataset_id: DatasetId) -> Download:
    return Download(client, dataset_id)


def get_dataset(client: HttpClient, dataset_id: DatasetId) -> Dataset:
    return Dataset(client, client.get(endpoint_for_id(dataset_id)))


def list_datasets(
    client: HttpClient, filter: ListDatasetsFilter | dict[str, Any] | None = None,
) -> Page[Dataset]:
    return list_page(client, DATASETS_EP, Dataset, ListDatasetsFilter.coerce(filter))


def update_dataset(
    client: HttpClient,
    dataset_id: DatasetId,
    params: DatasetUpdateParams | dict[str, Any],
) -> Dataset:
    body = DatasetUpdateParams.coerce(params).to_wire()
    return Dataset(client, client.update(endpoint_for_id(dataset_id), body))


def delete_dataset(client: HttpClient, dataset_id: DatasetId) -> None:
    client.delete(endpoint_for_id(dataset_id))
