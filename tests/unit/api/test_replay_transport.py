import json
from pathlib import Path

import pytest
import requests

from twinjet_jobs.api.replay import ReplayTransport


def test_replay_transport_loads_combined_json(tmp_path: Path):
    entries = [
        {"method": "POST", "path": "/jobs", "body": {"request_id": "R1"}},
        {"method": "delete", "path": "jobs/", "status": 200, "body": {"job_info": {}}},
    ]
    file_path = tmp_path / "responses.json"
    file_path.write_text(json.dumps(entries), encoding="utf-8")

    t = ReplayTransport(file_path)

    assert t.post("/jobs", json={"a": 1}).json() == {"request_id": "R1"}
    assert t.delete("/jobs", json={}).json() == {"job_info": {}}
    # unknown route answers 404
    resp = t.patch("/jobs", json={})
    assert resp.status_code == 404
    with pytest.raises(requests.HTTPError):
        resp.raise_for_status()


def test_replay_transport_single_entry_file(tmp_path: Path):
    file_path = tmp_path / "one.json"
    file_path.write_text(json.dumps(
        {"path": "/status", "body": {"ok": 1}}), encoding="utf-8")
    assert ReplayTransport(file_path).post("/status").json() == {"ok": 1}


def test_replay_transport_missing_file(tmp_path: Path):
    with pytest.raises(ValueError):
        ReplayTransport(tmp_path / "nope.json")


def test_replay_transport_rejects_entries_without_path(tmp_path: Path):
    file_path = tmp_path / "bad.json"
    file_path.write_text(json.dumps([{"body": {}}]), encoding="utf-8")
    with pytest.raises(ValueError):
        ReplayTransport(file_path)


def test_replay_transport_records_a_copy_of_each_request():
    t = ReplayTransport().add("POST", "/status", {})
    body = {"request_id": "X"}
    t.post("/status", json=body)
    body["request_id"] = "changed"

    assert t.last_request.json == {"request_id": "X"}
    assert [(r.method, r.path) for r in t.sent] == [("POST", "/status")]


def test_last_request_without_traffic():
    with pytest.raises(LookupError):
        ReplayTransport().last_request
