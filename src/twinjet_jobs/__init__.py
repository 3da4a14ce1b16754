# src/twinjet_jobs/__init__.py
from .api.client import Client, JobsClient, resolve_config
from .errors import (
    AddressValidationError,
    ConfigurationError,
    MissingAddressError,
    MissingIdentifierError,
    TwinJetError,
)
from .models import (
    Address,
    AddressValidationPayload,
    AddressValidationResponse,
    ClientConfiguration,
    ClientOptions,
    JobEditionPayload,
    JobIdentifier,
    JobItem,
    JobPayload,
    JobStatus,
    JobStatusCode,
    PaymentMethod,
)

__all__ = [
    "Address",
    "AddressValidationError",
    "AddressValidationPayload",
    "AddressValidationResponse",
    "Client",
    "ClientConfiguration",
    "ClientOptions",
    "ConfigurationError",
    "JobEditionPayload",
    "JobIdentifier",
    "JobItem",
    "JobPayload",
    "JobStatus",
    "JobStatusCode",
    "JobsClient",
    "MissingAddressError",
    "MissingIdentifierError",
    "PaymentMethod",
    "TwinJetError",
    "resolve_config",
]
