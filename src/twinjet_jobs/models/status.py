# src/twinjet_jobs/models/status.py
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Optional, Union

from .enums import JobStatusCode

logger = logging.getLogger("twinjet_jobs.models.status")


def _coerce_status_code(value: Any) -> Union[JobStatusCode, int, None]:
    """Map a wire status code onto JobStatusCode; unknown codes are kept as plain ints."""
    if value is None:
        return None
    try:
        return JobStatusCode(int(value))
    except (TypeError, ValueError):
        logger.warning("Unknown job status code from server: %r", value)
        return value


@dataclass(frozen=True)
class JobInfo:
    job_id: Optional[int]
    reference: Optional[str]
    request_id: Optional[str]
    courier: Optional[str]
    external_id: Optional[str]
    user: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JobInfo":
        return cls(
            job_id=data.get("job_id"),
            reference=data.get("reference"),
            request_id=data.get("request_id"),
            courier=data.get("courier"),
            external_id=data.get("external_id"),
            user=data.get("user"),
        )


@dataclass(frozen=True)
class JobLocation:
    date: Optional[str]
    lat: Optional[float]
    lng: Optional[float]
    user: Optional[str]
    courier: Optional[str]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JobLocation":
        return cls(
            date=data.get("date"),
            lat=data.get("lat"),
            lng=data.get("lng"),
            user=data.get("user"),
            courier=data.get("courier"),
        )


@dataclass(frozen=True)
class JobCurrentStatus:
    # (lat, lng) of the courier's last ping, if any
    last_location: Optional[tuple[float, float]]
    status_code: Union[JobStatusCode, int, None]
    status_string: Optional[str]
    user: Optional[str]
    courier_name: Optional[str]
    remarks: Optional[str]
    status_time: Optional[str]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JobCurrentStatus":
        loc = data.get("last_location")
        return cls(
            last_location=tuple(loc) if loc else None,
            status_code=_coerce_status_code(data.get("status_code")),
            status_string=data.get("status_string"),
            user=data.get("user"),
            courier_name=data.get("courier_name"),
            remarks=data.get("remarks"),
            status_time=data.get("status_time"),
        )


@dataclass(frozen=True)
class JobHistory:
    date: Optional[str]
    log: Optional[str]
    lat: Optional[float]
    lng: Optional[float]
    user: Optional[str]
    courier: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JobHistory":
        return cls(
            date=data.get("date"),
            log=data.get("log"),
            lat=data.get("lat"),
            lng=data.get("lng"),
            user=data.get("user"),
            courier=data.get("courier"),
        )


@dataclass(frozen=True)
class JobStatus:
    """Read-only snapshot of a job as reported by the server."""

    job_info: Optional[JobInfo]
    job_locations: list[JobLocation]
    current_status: Optional[JobCurrentStatus]
    job_history: list[JobHistory]

    # decoded response body, untouched
    raw: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JobStatus":
        info = data.get("job_info")
        current = data.get("current_status")
        return cls(
            job_info=JobInfo.from_dict(info) if isinstance(info, dict) else None,
            job_locations=[
                JobLocation.from_dict(x) for x in data.get("job_locations") or [] if isinstance(x, dict)
            ],
            current_status=JobCurrentStatus.from_dict(
                current) if isinstance(current, dict) else None,
            job_history=[
                JobHistory.from_dict(x) for x in data.get("job_history") or [] if isinstance(x, dict)
            ],
            raw=data,
        )

    @property
    def status_code(self) -> Union[JobStatusCode, int, None]:
        return self.current_status.status_code if self.current_status else None

    def to_dict(self) -> dict[str, Any]:
        """The server's body as received (for printing/persisting)."""
        return dict(self.raw) if self.raw else asdict(self)
