# src/twinjet_jobs/api/replay.py
from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from http import HTTPStatus
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import requests


def make_response(status: int, body: Any, *, method: str = "GET", url: str = "") -> requests.Response:
    """Build a real requests.Response carrying a JSON body (raise_for_status works as usual)."""
    resp = requests.Response()
    resp.status_code = status
    try:
        resp.reason = HTTPStatus(status).phrase
    except ValueError:
        resp.reason = ""
    resp._content = json.dumps(body).encode("utf-8")
    resp.encoding = "utf-8"
    resp.headers["Content-Type"] = "application/json"
    resp.url = url
    resp.request = requests.Request(method, url or "http://replay.invalid/").prepare()
    return resp


@dataclass
class RecordedRequest:
    method: str
    path: str
    json: Any = None
    params: Optional[Dict[str, Any]] = None


@dataclass
class ReplayTransport:
    """Transport that answers from canned bodies instead of the network.

    Routes are keyed by (METHOD, path). They can be registered with `add()` or
    loaded from a JSON file holding a single entry or a list of entries:

        [{"method": "POST", "path": "/status", "status": 200, "body": {...}}, ...]

    Every request is appended to `sent` so tests can inspect exactly what
    was sent. Unknown routes answer 404.
    """

    replay_file: Optional[Path] = None
    base_url: str = "http://replay.invalid"
    routes: Dict[Tuple[str, str], Tuple[int, Any]] = field(default_factory=dict)
    sent: List[RecordedRequest] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.replay_file is None:
            return
        self.replay_file = Path(self.replay_file)
        if not self.replay_file.is_file():
            raise ValueError(f"Replay file does not exist: {self.replay_file}")

        raw = json.loads(self.replay_file.read_text(encoding="utf-8"))
        entries = raw if isinstance(raw, list) else [raw]
        for entry in entries:
            if not isinstance(entry, dict) or "path" not in entry:
                raise ValueError(
                    f"Replay entries need at least a 'path': {entry!r}")
            self.add(entry.get("method", "POST"), entry["path"],
                     entry.get("body", {}), status=int(entry.get("status", 200)))

    @staticmethod
    def _key(method: str, path: str) -> Tuple[str, str]:
        return method.upper(), "/" + path.strip("/")

    def add(self, method: str, path: str, body: Any, *, status: int = 200) -> "ReplayTransport":
        self.routes[self._key(method, path)] = (status, body)
        return self

    @property
    def last_request(self) -> RecordedRequest:
        if not self.sent:
            raise LookupError("No request has been sent through this transport")
        return self.sent[-1]

    def request(self, method: str, path: str, *, json: Any = None, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        key = self._key(method, path)
        self.sent.append(RecordedRequest(key[0], key[1], copy.deepcopy(json), params))
        status, body = self.routes.get(key, (404, {"detail": "Not found"}))
        return make_response(status, body, method=key[0], url=self.base_url + key[1])

    def get(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self.request("GET", path, params=params)

    def post(self, path: str, *, json: Any = None) -> requests.Response:
        return self.request("POST", path, json=json)

    def patch(self, path: str, *, json: Any = None) -> requests.Response:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str, *, json: Any = None) -> requests.Response:
        return self.request("DELETE", path, json=json)

    def close(self) -> None:
        pass
