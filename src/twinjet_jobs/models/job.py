# src/twinjet_jobs/models/job.py
from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, Optional, Union

import pandas as pd

from .enums import PaymentMethod

# Anything the temporal normalizer accepts: a datetime, epoch milliseconds, or a string.
DateLike = Union[datetime, date, pd.Timestamp, int, float, str]


@dataclass(kw_only=True)
class Address:
    # The house number + street name, e.g. "565 Ellis St"
    street_address: str
    city: str
    # Two letter USPS abbreviation: CA, not California.
    state: str
    # "Line 1" of the address, typically the company or recipient name.
    address_name: Optional[str] = None
    # Floor / suite / apartment / unit.
    floor: Optional[str] = None
    # 5 digit USPS zip, no zip+4.
    zip_code: Optional[str] = None
    contact: Optional[str] = None
    phone_number: Optional[str] = None
    special_instructions: Optional[str] = None


@dataclass(kw_only=True)
class JobItem:
    quantity: int
    description: Optional[str] = None
    sku: Optional[str] = None


@dataclass(kw_only=True)
class JobIdentifier:
    """Any one of these resolves a job for cancel/update/status."""

    # Returned by create().
    request_id: Optional[str] = None
    # TwinJet's own job id.
    job_id: Optional[int] = None
    # Your external reference number.
    external_id: Optional[str] = None
    # Billing reference.
    reference: Optional[str] = None


IDENTIFIER_FIELDS = ("request_id", "job_id", "external_id", "reference")
TEMPORAL_FIELDS = ("ready_time", "deliver_from_time", "deliver_to_time")


@dataclass(kw_only=True)
class _JobFields:
    """
    Fields shared by job creation and job edition.

    Everything here is optional so the edition payload can be a partial update.
    JobPayload re-declares the ones creation requires. reference, photo and
    external_id are creation-only: they are fixed once a job exists.
    """

    # Someone the courier can call if fulfilment goes wrong (not the recipient).
    order_contact_name: Optional[str] = None
    order_contact_phone: Optional[str] = None
    pick_address: Optional[Address] = None
    deliver_address: Optional[Address] = None
    # When the job is ready for pick up.
    ready_time: Optional[DateLike] = None
    # Delivery window.
    deliver_from_time: Optional[DateLike] = None
    deliver_to_time: Optional[DateLike] = None
    # URL receiving webhook events.
    webhook_url: Optional[str] = None
    # Only needed to change the service level from the courier's default.
    service_id: Optional[int] = None
    payment_method: Optional[PaymentMethod] = None
    order_total: Optional[float] = None
    delivery_fee: Optional[float] = None
    tip: Optional[float] = None
    job_items: Optional[list[JobItem]] = None
    special_instructions: Optional[str] = None


@dataclass(kw_only=True)
class JobEditionPayload(_JobFields):
    """Partial update of an existing job; unset fields are left untouched server-side."""


@dataclass(kw_only=True)
class JobPayload(_JobFields):
    order_contact_name: str
    order_contact_phone: str
    ready_time: DateLike
    deliver_from_time: DateLike
    deliver_to_time: DateLike
    # Billing reference. Use external_id for something the courier sees.
    reference: Optional[str] = None
    # Require a photo before the job can be marked delivered.
    photo: Optional[bool] = None
    # Reference number displayed to the courier.
    external_id: Optional[str] = None


@dataclass(kw_only=True)
class AddressValidationPayload:
    pick_address: Optional[Address] = None
    deliver_address: Optional[Address] = None


def _wire_value(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return to_wire_fields(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_wire_value(v) for v in value]
    return value


def to_wire_fields(value: Any) -> dict[str, Any]:
    """
    Flatten a model (dataclass or plain mapping) into wire fields.

    Top-level fields that are None are treated as absent and dropped; enums
    become their numeric codes and nested models become dicts. Nested mappings
    are single values and go out unchanged, explicit nulls included.
    """
    if value is None:
        return {}
    if is_dataclass(value) and not isinstance(value, type):
        pairs = ((f.name, getattr(value, f.name)) for f in fields(value))
    elif isinstance(value, Mapping):
        pairs = value.items()
    else:
        raise TypeError(
            f"Expected a dataclass or mapping, got {type(value).__name__}")
    return {k: _wire_value(v) for k, v in pairs if v is not None}

