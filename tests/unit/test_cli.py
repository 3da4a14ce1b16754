import json
from pathlib import Path

import pytest

from twinjet_jobs import cli

KEYS = ("TWINJET_API_TOKEN", "TWINJET_BASE_URL", "TWINJET_TIMEOUT_MS", "TWINJET_LIVE")


@pytest.fixture(autouse=True)
def _token(monkeypatch):
    for n in KEYS:
        monkeypatch.setenv(n, "")
        monkeypatch.delenv(n)
    monkeypatch.setenv("TWINJET_API_TOKEN", "cli-token")


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def run_cli(tmp_path: Path, *args: str) -> int:
    return cli.main([*args, "--env-file", str(tmp_path / "missing.env"), "--no-console"])


def test_cli_status_prints_snapshot(tmp_path, capsys, job_status_body):
    replay = _write(tmp_path / "replay.json",
                    [{"method": "POST", "path": "/status", "body": job_status_body}])

    rc = run_cli(tmp_path, "status", "--request-id", "8MQXS0L84T",
                 "--replay-file", str(replay))

    assert rc == 0
    assert json.loads(capsys.readouterr().out) == job_status_body


def test_cli_create_prints_request_id(tmp_path, capsys, job_payload, pick_address):
    replay = _write(tmp_path / "replay.json",
                    {"method": "POST", "path": "/jobs", "body": {"request_id": "A1B2C3D4E5"}})
    payload = _write(tmp_path / "job.json", {**job_payload, "pick_address": pick_address})

    rc = run_cli(tmp_path, "create", str(payload), "--test-mode", "--replay-file", str(replay))

    assert rc == 0
    assert json.loads(capsys.readouterr().out) == {"request_id": "A1B2C3D4E5"}


def test_cli_missing_identifier_exit_2(tmp_path):
    replay = _write(tmp_path / "replay.json", [])
    assert run_cli(tmp_path, "cancel", "--replay-file", str(replay)) == 2


def test_cli_missing_address_exit_2(tmp_path, job_payload):
    replay = _write(tmp_path / "replay.json", [])
    payload = _write(tmp_path / "job.json", job_payload)
    assert run_cli(tmp_path, "create", str(payload), "--replay-file", str(replay)) == 2


def test_cli_validation_errors_exit_1(tmp_path, capsys, pick_address):
    replay = _write(tmp_path / "replay.json", [{
        "method": "POST",
        "path": "/validate",
        "body": {"errors": [{"pick_address": "Outside of available delivery area"}]},
    }])
    payload = _write(tmp_path / "addr.json", {"pick_address": pick_address})

    rc = run_cli(tmp_path, "validate", str(payload), "--replay-file", str(replay))

    assert rc == 1
    assert capsys.readouterr().out == ""


def test_cli_http_error_exit_1(tmp_path):
    replay = _write(tmp_path / "replay.json",
                    [{"method": "DELETE", "path": "/jobs", "status": 500, "body": {}}])
    assert run_cli(tmp_path, "cancel", "--job-id", "7", "--replay-file", str(replay)) == 1


def test_cli_missing_token_exit_2(tmp_path, monkeypatch):
    monkeypatch.delenv("TWINJET_API_TOKEN")
    replay = _write(tmp_path / "replay.json", [])
    assert run_cli(tmp_path, "status", "--job-id", "1", "--replay-file", str(replay)) == 2


def test_cli_unreadable_payload_exit_2(tmp_path):
    assert run_cli(tmp_path, "validate", str(tmp_path / "nope.json")) == 2


def test_cli_update_sends_identifier_and_fields(tmp_path, capsys, job_status_body):
    replay = _write(tmp_path / "replay.json",
                    [{"method": "PATCH", "path": "/jobs", "body": job_status_body}])
    payload = _write(tmp_path / "changes.json", {"tip": 4.0})

    rc = run_cli(tmp_path, "update", str(payload), "--external-id", "ORDER-1",
                 "--replay-file", str(replay))

    assert rc == 0
    assert json.loads(capsys.readouterr().out)["job_info"]["job_id"] == 3640041


def test_cli_log_file(tmp_path, job_status_body):
    replay = _write(tmp_path / "replay.json",
                    [{"method": "POST", "path": "/status", "body": job_status_body}])
    log_file = tmp_path / "twinjet.log"

    rc = run_cli(tmp_path, "status", "--reference", "R", "--replay-file", str(replay),
                 "--log-file", str(log_file), "--log-level", "DEBUG")

    assert rc == 0
    text = log_file.read_text(encoding="utf-8")
    assert "POST /status" in text
    # token is redacted from request logs
    assert "cli-token" not in text
