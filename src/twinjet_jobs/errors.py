# src/twinjet_jobs/errors.py
from __future__ import annotations

from typing import Any, Mapping, Optional


class TwinJetError(Exception):
    """Base class for errors raised by the TwinJet jobs client."""


class ConfigurationError(TwinJetError, RuntimeError):
    """Raised when client options cannot be resolved (e.g. missing api_token)."""


class MissingAddressError(TwinJetError, ValueError):
    """Neither pick_address nor deliver_address was supplied. No request is sent."""

    def __init__(self, message: str = "Pick address and/or deliver address must be defined"):
        super().__init__(message)


class MissingIdentifierError(TwinJetError, ValueError):
    """None of the four job identifiers was supplied. No request is sent."""

    def __init__(
        self,
        message: str = "One of request_id, job_id, external_id or reference must be defined",
    ):
        super().__init__(message)


class AddressValidationError(TwinJetError):
    """
    Raised when /validate answers 200 with an `errors` list.

    The message is the aggregated "key: message" text; the raw error entries and
    the full decoded body stay available for callers that want the details.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: Optional[list] = None,
        body: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.errors = list(errors or [])
        self.body = dict(body or {})


__all__ = [
    "TwinJetError",
    "ConfigurationError",
    "MissingAddressError",
    "MissingIdentifierError",
    "AddressValidationError",
]
