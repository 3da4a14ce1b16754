from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


class Transport(Protocol):
    """What JobsClient needs from an HTTP client. Paths are relative to the base URL."""

    def get(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        ...

    def post(self, path: str, *, json: Any = None) -> requests.Response:
        ...

    def patch(self, path: str, *, json: Any = None) -> requests.Response:
        ...

    def delete(self, path: str, *, json: Any = None) -> requests.Response:
        ...


class RequestsTransport:
    """Requests session bound to a base URL and timeout.

    Every call is a single attempt: urllib3 retries are switched off (including
    on DELETE/PATCH), so a failure surfaces to the caller as-is.
    """

    def __init__(self, base_url: str, timeout: float = 10.0, *, session: Optional[requests.Session] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

        adapter = HTTPAdapter(max_retries=Retry(
            total=0, read=False, raise_on_status=False))
        # mount both http and https
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.session.headers.update({"Accept": "application/json"})

    def url_for(self, path: str) -> str:
        return self.base_url + "/" + path.lstrip("/")

    def request(self, method: str, path: str, *, json: Any = None, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self.session.request(
            method, self.url_for(path), json=json, params=params, timeout=self.timeout)

    def get(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self.request("GET", path, params=params)

    def post(self, path: str, *, json: Any = None) -> requests.Response:
        return self.request("POST", path, json=json)

    def patch(self, path: str, *, json: Any = None) -> requests.Response:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str, *, json: Any = None) -> requests.Response:
        # TwinJet reads the job identifier from the DELETE body
        return self.request("DELETE", path, json=json)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
