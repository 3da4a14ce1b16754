from .enums import JobStatusCode, PaymentMethod
from .job import (
    Address,
    AddressValidationPayload,
    DateLike,
    JobEditionPayload,
    JobIdentifier,
    JobItem,
    JobPayload,
    to_wire_fields,
)
from .options import ClientConfiguration, ClientOptions
from .status import JobCurrentStatus, JobHistory, JobInfo, JobLocation, JobStatus
from .validation import AddressValidationResponse, ValidatedAddress

__all__ = [
    "Address",
    "AddressValidationPayload",
    "AddressValidationResponse",
    "ClientConfiguration",
    "ClientOptions",
    "DateLike",
    "JobCurrentStatus",
    "JobEditionPayload",
    "JobHistory",
    "JobIdentifier",
    "JobInfo",
    "JobItem",
    "JobLocation",
    "JobPayload",
    "JobStatus",
    "JobStatusCode",
    "PaymentMethod",
    "ValidatedAddress",
    "to_wire_fields",
]
