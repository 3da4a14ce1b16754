# src/twinjet_jobs/api/client.py
from __future__ import annotations

import json
import logging
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from twinjet_jobs.api.dates import normalize_temporal_fields
from twinjet_jobs.api.normalize import (
    extract_request_id,
    normalize_address_validation,
    normalize_job_status,
)
from twinjet_jobs.api.transport import RequestsTransport, Transport
from twinjet_jobs.errors import (
    AddressValidationError,
    ConfigurationError,
    MissingAddressError,
    MissingIdentifierError,
)
from twinjet_jobs.models import (
    AddressValidationPayload,
    AddressValidationResponse,
    ClientConfiguration,
    ClientOptions,
    JobEditionPayload,
    JobIdentifier,
    JobPayload,
    JobStatus,
    to_wire_fields,
)
from twinjet_jobs.models.job import IDENTIFIER_FIELDS, TEMPORAL_FIELDS
from twinjet_jobs.models.options import DEFAULT_BASE_URL, DEFAULT_LIVE, DEFAULT_TIMEOUT_MS

OptionsLike = Union[ClientOptions, Mapping[str, Any], None]

_DEFAULTS: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "timeout": DEFAULT_TIMEOUT_MS,
    "live": DEFAULT_LIVE,
}
_LOG_BODY_LIMIT = 4000


def resolve_config(options: OptionsLike = None, **overrides: Any) -> ClientConfiguration:
    """
    Overlay user options (then keyword overrides) on the defaults.

    Values left as None keep the default. A missing or blank api_token fails
    here rather than being sent to the API on every call.
    """
    if options is None:
        user: Dict[str, Any] = {}
    elif is_dataclass(options):
        user = {f.name: getattr(options, f.name) for f in fields(options)}
    elif isinstance(options, Mapping):
        user = dict(options)
    else:
        raise ConfigurationError(
            f"Unsupported options type: {type(options).__name__}")
    user.update(overrides)

    unknown = set(user) - {"api_token", *_DEFAULTS}
    if unknown:
        raise ConfigurationError(
            f"Unknown client option(s): {', '.join(sorted(unknown))}")

    merged = dict(_DEFAULTS)
    merged.update({k: v for k, v in user.items() if v is not None})

    token = merged.get("api_token")
    if not isinstance(token, str) or not token.strip():
        raise ConfigurationError("api_token is required")

    try:
        timeout = int(merged["timeout"])
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"timeout must be a number of milliseconds, got {merged['timeout']!r}") from e
    if timeout <= 0:
        raise ConfigurationError("timeout must be positive")

    return ClientConfiguration(
        api_token=token,
        base_url=str(merged["base_url"]),
        timeout=timeout,
        live=bool(merged["live"]),
    )


def validate_identifier(identifier: Any) -> Dict[str, Any]:
    """
    Check that at least one of request_id, job_id, external_id or reference is
    set, and return the identifier as wire fields.
    """
    data = to_wire_fields(identifier)
    if not any(name in data for name in IDENTIFIER_FIELDS):
        raise MissingIdentifierError()
    return data


def require_address(payload: Any) -> Dict[str, Any]:
    data = to_wire_fields(payload)
    if "pick_address" not in data and "deliver_address" not in data:
        raise MissingAddressError()
    return data


def _redacted(body: Dict[str, Any]) -> str:
    shown = dict(body)
    if "api_token" in shown:
        shown["api_token"] = "***"
    try:
        text = json.dumps(shown, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        text = str(shown)
    return (text[:_LOG_BODY_LIMIT] + "...") if len(text) > _LOG_BODY_LIMIT else text


class JobsClient:
    """Client to manage TwinJet jobs and validate addresses.

    Every operation builds one flat JSON body: the api_token (plus the live
    flag when creating), then the caller's identifier fields, then the
    caller's payload fields. Preconditions (an address to create/validate, an
    identifier to cancel/update/query) are checked before anything is sent.
    Transport errors, including non-2xx statuses, propagate unchanged; there is
    no retry.
    """

    def __init__(
        self,
        options: OptionsLike = None,
        *,
        transport: Optional[Transport] = None,
        logger: Optional[logging.Logger] = None,
        **overrides: Any,
    ) -> None:
        self.config = resolve_config(options, **overrides)
        self.transport: Transport = transport or RequestsTransport(
            self.config.base_url, timeout=self.config.timeout_seconds)
        self.logger: logging.Logger = logger or logging.getLogger(
            "twinjet_jobs.api.client")

    @classmethod
    def from_env(
        cls,
        dotenv_path: Path | str | None = ".env",
        *,
        transport: Optional[Transport] = None,
        logger: Optional[logging.Logger] = None,
        **overrides: Any,
    ) -> "JobsClient":
        """Build a client from TWINJET_* variables (process env or a .env file)."""
        from twinjet_jobs.config.env import get_app_env

        return cls(get_app_env(dotenv_path, strict=True), transport=transport, logger=logger, **overrides)

    # --- request composition --------------------------------------------

    def _compose(self, *layers: Dict[str, Any], live: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {"api_token": self.config.api_token}
        if live:
            data["live"] = self.config.live
        for layer in layers:
            data.update(layer)
        # caller fields never replace the configured token
        data["api_token"] = self.config.api_token
        return data

    def _send(self, method: str, path: str, body: Dict[str, Any]) -> Any:
        self.logger.debug("TwinJet %s %s request_body=%s",
                          method, path, _redacted(body))

        resp = getattr(self.transport, method.lower())(path, json=body)
        status = resp.status_code
        if status >= 400:
            self.logger.warning(
                "TwinJet %s %s returned error status=%s response_body=%s",
                method, path, status, (resp.text or "")[:_LOG_BODY_LIMIT])
        resp.raise_for_status()

        data = resp.json()
        self.logger.debug("TwinJet %s %s status=%s response_body=%s",
                          method, path, status, _redacted(data) if isinstance(data, dict) else data)
        return data

    # --- operations -----------------------------------------------------

    def create(self, payload: Union[JobPayload, Mapping[str, Any]]) -> str:
        """Create a new job and return its request_id."""
        job_fields = require_address(payload)
        data = self._compose(job_fields, live=True)
        normalize_temporal_fields(data, TEMPORAL_FIELDS)

        request_id = extract_request_id(self._send("POST", "/jobs", data))
        self.logger.info("TwinJet job created request_id=%s", request_id)
        return request_id

    def cancel(self, identifier: Union[JobIdentifier, Mapping[str, Any]]) -> JobStatus:
        """Cancel an existing job; the server answers with the job's status."""
        data = self._compose(validate_identifier(identifier))
        return normalize_job_status(self._send("DELETE", "/jobs", data))

    def update(
        self,
        identifier: Union[JobIdentifier, Mapping[str, Any]],
        payload: Union[JobEditionPayload, Mapping[str, Any]],
    ) -> JobStatus:
        """Edit an existing job. Only the supplied fields are sent."""
        data = self._compose(validate_identifier(identifier),
                             to_wire_fields(payload))
        normalize_temporal_fields(data, TEMPORAL_FIELDS, only_present=True)
        return normalize_job_status(self._send("PATCH", "/jobs", data))

    def status(self, identifier: Union[JobIdentifier, Mapping[str, Any]]) -> JobStatus:
        data = self._compose(validate_identifier(identifier))
        return normalize_job_status(self._send("POST", "/status", data))

    def address_validation(
        self, payload: Union[AddressValidationPayload, Mapping[str, Any]]
    ) -> AddressValidationResponse:
        """
        Validate addresses against the delivery zone; returns a price quote and
        pick up / delivery ETAs. Raises AddressValidationError when the server
        rejects the addresses (it still answers 200 in that case).
        """
        data = self._compose(require_address(payload))
        body = self._send("POST", "/validate", data)
        try:
            return normalize_address_validation(body)
        except AddressValidationError as ex:
            self.logger.info("TwinJet address validation rejected: %s", ex)
            raise

    # --- lifecycle ------------------------------------------------------

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "JobsClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


# Short alias
Client = JobsClient
