# src/twinjet_jobs/api/normalize.py
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from twinjet_jobs.errors import AddressValidationError
from twinjet_jobs.models import AddressValidationResponse, JobStatus


def _entry_messages(entry: Any) -> str:
    """One errors[] entry -> "key: message. key2: message2" (mapping order)."""
    if isinstance(entry, Mapping):
        return ". ".join(f"{key}: {message}" for key, message in entry.items())
    return str(entry)


def format_validation_errors(errors: Iterable[Any]) -> str:
    """
    Flatten the `errors` list of a /validate body into one readable message.

    Example:
        [{"pick_address": "Outside of available delivery area"}, {"other": "x"}]
        -> "pick_address: Outside of available delivery area. other: x"
    """
    return ". ".join(_entry_messages(entry) for entry in errors)


def normalize_address_validation(body: Dict[str, Any]) -> AddressValidationResponse:
    """
    /validate answers HTTP 200 whether or not the addresses are acceptable.
    The failure shape differs only by carrying an `errors` list; when that list
    is present and non-empty, raise AddressValidationError with the aggregated
    message. A lone entry (a mapping or a string) counts as a one-entry list.
    Otherwise the body is the success shape and is returned as-is (wrapped,
    with `raw` holding the untouched body).
    """
    if not isinstance(body, dict):
        raise TypeError(
            f"Unexpected /validate response body: {type(body).__name__}")

    errors = body.get("errors")
    if errors:
        if not isinstance(errors, list):
            errors = [errors]
        raise AddressValidationError(
            format_validation_errors(errors), errors=list(errors), body=body)

    return AddressValidationResponse.from_dict(body)


def normalize_job_status(body: Dict[str, Any]) -> JobStatus:
    if not isinstance(body, dict):
        raise TypeError(f"Unexpected job status body: {type(body).__name__}")
    return JobStatus.from_dict(body)


def extract_request_id(body: Dict[str, Any]) -> str:
    """POST /jobs answers {"request_id": "..."}; only that value is kept."""
    if not isinstance(body, dict) or "request_id" not in body:
        raise KeyError("request_id")
    return body["request_id"]
