"""Tests for datasets, uploads and downloads."""

from __future__ import annotations

import io
import json

import httpx
import pytest
import respx

from parcel_client.client.errors import NotFoundError, RequestError
from parcel_client.resources.dataset import Dataset, Upload

API = "https://api.test/parcel/v1"


def multipart_body(route: respx.Route) -> bytes:
    request = route.calls.last.request
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    return request.read()


class FailingSink:
    def __init__(self) -> None:
        self.writes = 0

    def write(self, data: bytes) -> int:
        self.writes += 1
        raise OSError("disk full")


class TestUpload:
    @respx.mock
    def test_upload_with_metadata(self, parcel, make_pod_dataset, assert_matches_pod):
        pod = make_pod_dataset()
        route = respx.post(f"{API}/datasets").mock(return_value=httpx.Response(201, json=pod))
        upload = parcel.upload_dataset(b"the data", {"metadata": pod["metadata"]})
        assert isinstance(upload, Upload)
        assert not route.called
        dataset = upload.finished()
        assert_matches_pod(dataset, pod)
        body = multipart_body(route)
        assert b'name="metadata"' in body
        assert json.dumps({"metadata": pod["metadata"]}, separators=(",", ":")).encode() in body
        assert b'name="data"' in body
        assert b"the data" in body

    @respx.mock
    def test_upload_without_metadata(self, parcel, make_pod_dataset):
        route = respx.post(f"{API}/datasets").mock(
            return_value=httpx.Response(201, json=make_pod_dataset())
        )
        parcel.upload_dataset("text payload").finished()
        body = multipart_body(route)
        assert b'name="metadata"' not in body
        assert b"text payload" in body

    @respx.mock
    def test_upload_file_object(self, parcel, make_pod_dataset):
        route = respx.post(f"{API}/datasets").mock(
            return_value=httpx.Response(201, json=make_pod_dataset())
        )
        parcel.upload_dataset(io.BytesIO(b"streamed bytes")).finished()
        assert b"streamed bytes" in multipart_body(route)

    @respx.mock
    def test_finished_sends_once(self, parcel, make_pod_dataset):
        route = respx.post(f"{API}/datasets").mock(
            return_value=httpx.Response(201, json=make_pod_dataset())
        )
        upload = parcel.upload_dataset(b"x")
        first = upload.finished()
        assert upload.finished() is first
        assert route.call_count == 1
        assert upload.done

    @respx.mock
    def test_failed_upload_stays_failed(self, parcel):
        route = respx.post(f"{API}/datasets").mock(
            return_value=httpx.Response(500, json={"message": "storage unavailable"})
        )
        upload = parcel.upload_dataset(b"x")
        with pytest.raises(RequestError, match="storage unavailable") as first:
            upload.finished()
        with pytest.raises(RequestError) as second:
            upload.finished()
        assert second.value is first.value
        assert route.call_count == 1


class TestDownload:
    @respx.mock
    def test_pipe_to(self, parcel):
        respx.get(f"{API}/datasets/d1/download").mock(
            return_value=httpx.Response(200, content=b"dataset bytes")
        )
        sink = io.BytesIO()
        assert parcel.download_dataset("d1").pipe_to(sink) == len(b"dataset bytes")
        assert sink.getvalue() == b"dataset bytes"

    @respx.mock
    def test_missing_dataset_writes_nothing(self, parcel):
        respx.get(f"{API}/datasets/nope/download").mock(
            return_value=httpx.Response(404, json={"message": "dataset not found"})
        )
        sink = io.BytesIO()
        with pytest.raises(NotFoundError):
            parcel.download_dataset("nope").pipe_to(sink)
        assert sink.getvalue() == b""

    @respx.mock
    def test_sink_error_propagates(self, parcel):
        respx.get(f"{API}/datasets/d1/download").mock(
            return_value=httpx.Response(200, content=b"dataset bytes")
        )
        sink = FailingSink()
        with pytest.raises(OSError, match="disk full"):
            parcel.download_dataset("d1").pipe_to(sink)
        assert sink.writes == 1

    @respx.mock
    def test_save(self, parcel, tmp_path):
        respx.get(f"{API}/datasets/d1/download").mock(
            return_value=httpx.Response(200, content=b"saved")
        )
        dest = tmp_path / "out.bin"
        parcel.download_dataset("d1").save(dest)
        assert dest.read_bytes() == b"saved"
        assert not (tmp_path / "out.bin.partial").exists()

    @respx.mock
    def test_save_failure_leaves_no_file(self, parcel, tmp_path):
        respx.get(f"{API}/datasets/d1/download").mock(
            return_value=httpx.Response(404, json={"message": "gone"})
        )
        dest = tmp_path / "out.bin"
        with pytest.raises(NotFoundError):
            parcel.download_dataset("d1").save(dest)
        assert list(tmp_path.iterdir()) == []

    @respx.mock
    def test_dataset_download(self, parcel, make_pod_dataset):
        dataset = Dataset(parcel.client, make_pod_dataset())
        respx.get(f"{API}/datasets/{dataset.id}/download").mock(
            return_value=httpx.Response(200, content=b"abc")
        )
        sink = io.BytesIO()
        dataset.download().pipe_to(sink)
        assert sink.getvalue() == b"abc"


class TestDatasets:
    @respx.mock
    def test_get(self, parcel, make_pod_dataset, assert_matches_pod):
        pod = make_pod_dataset()
        respx.get(f"{API}/datasets/{pod['id']}").mock(return_value=httpx.Response(200, json=pod))
        assert_matches_pod(parcel.get_dataset(pod["id"]), pod)

    @respx.mock
    def test_list_by_tags(self, parcel, make_pod_dataset, results_page):
        route = respx.get(f"{API}/datasets").mock(
            return_value=httpx.Response(200, json=results_page(2, make_pod_dataset))
        )
        listed = parcel.list_datasets({"tags": "all:tag1,tag2", "creator": "c"})
        assert len(listed) == 2
        params = route.calls.last.request.url.params
        assert params["tags"] == "all:tag1,tag2"
        assert params["creator"] == "c"

    @respx.mock
    def test_update_metadata(self, parcel, make_pod_dataset):
        pod = make_pod_dataset()
        dataset = Dataset(parcel.client, pod)
        updated = {**pod, "metadata": {"tags": ["mock"]}}
        route = respx.put(f"{API}/datasets/{dataset.id}").mock(
            return_value=httpx.Response(200, json=updated)
        )
        dataset.update({"metadata": {"tags": ["mock"], "key": None}})
        assert dataset.metadata == {"tags": ["mock"]}
        assert json.loads(route.calls.last.request.read()) == {
            "metadata": {"tags": ["mock"], "key": None},
        }

    @respx.mock
    def test_delete(self, parcel, make_pod_dataset):
        dataset = Dataset(parcel.client, make_pod_dataset())
        route = respx.delete(f"{API}/datasets/{dataset.id}").mock(
            return_value=httpx.Response(204)
        )
        dataset.delete()
        assert route.called
