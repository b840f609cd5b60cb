"""Integration tests for compute job commands."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import respx
from typer.testing import CliRunner

from parcel_client.app import app

runner = CliRunner()
API = "https://api.test/parcel/v1"
CONN = ["--url", API, "--token", "tok"]

SPEC_YAML = """\
name: word-count
image: bash
cmd: ["-c", "wc -w </parcel/data/in/recipe.txt >/parcel/data/out/count.txt"]
inputDatasets:
  - mountPath: recipe.txt
    id: d1
outputDatasets:
  - mountPath: count.txt
    owner: me
"""


class TestJobCommands:
    @respx.mock
    def test_submit(self, tmp_path: Path, make_pod_job):
        pod = make_pod_job()
        route = respx.post(f"{API}/compute/jobs").mock(return_value=httpx.Response(201, json=pod))
        spec_file = tmp_path / "job.yaml"
        spec_file.write_text(SPEC_YAML)
        result = runner.invoke(app, ["job", "submit", str(spec_file), *CONN])
        assert result.exit_code == 0, result.output
        assert "Pending" in result.output
        body = json.loads(route.calls.last.request.read())
        assert body["inputDatasets"] == [{"mountPath": "recipe.txt", "id": "d1"}]
        assert body["outputDatasets"] == [{"mountPath": "count.txt", "owner": "me"}]

    def test_submit_invalid_spec(self, tmp_path: Path):
        spec_file = tmp_path / "job.yaml"
        spec_file.write_text("image: bash\n")
        result = runner.invoke(app, ["job", "submit", str(spec_file), *CONN])
        assert result.exit_code == 1

    def test_submit_non_mapping(self, tmp_path: Path):
        spec_file = tmp_path / "job.yaml"
        spec_file.write_text("- just\n- a list\n")
        result = runner.invoke(app, ["job", "submit", str(spec_file), *CONN])
        assert result.exit_code == 2

    @respx.mock
    def test_status(self, make_pod_job):
        pod = make_pod_job(
            phase="Succeeded", outputs=[{"mountPath": "count.txt", "id": "out-1"}],
        )
        respx.get(f"{API}/compute/jobs/{pod['id']}").mock(
            return_value=httpx.Response(200, json=pod)
        )
        result = runner.invoke(app, ["job", "status", pod["id"], *CONN])
        assert result.exit_code == 0, result.output
        assert "Succeeded" in result.output
        assert "count.txt -> out-1" in result.output

    @respx.mock
    def test_status_json_is_full_job(self, make_pod_job):
        pod = make_pod_job(phase="Running")
        respx.get(f"{API}/compute/jobs/{pod['id']}").mock(
            return_value=httpx.Response(200, json=pod)
        )
        result = runner.invoke(app, ["job", "status", pod["id"], "-f", "json", *CONN])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["status"]["phase"] == "Running"
        assert data["spec"]["image"] == "bash"

    @respx.mock
    def test_list(self, make_pod_job, results_page):
        page = results_page(2, make_pod_job, token=False)
        respx.get(f"{API}/compute/jobs").mock(return_value=httpx.Response(200, json=page))
        result = runner.invoke(app, ["job", "list", *CONN])
        assert result.exit_code == 0, result.output
        assert "word-count" in result.output

    @respx.mock
    def test_terminate(self):
        route = respx.delete(f"{API}/compute/jobs/j1").mock(return_value=httpx.Response(204))
        result = runner.invoke(app, ["job", "terminate", "j1", *CONN])
        assert result.exit_code == 0, result.output
        assert route.called
