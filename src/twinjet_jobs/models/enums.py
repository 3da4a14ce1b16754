from __future__ import annotations

from enum import IntEnum


class PaymentMethod(IntEnum):
    """Payment method for a delivery. Values are wire codes, not a sequence."""

    INVOICE = 1           # no transaction at delivery
    CUSTOMER_PREPAID = 2  # customer tips in advance
    CUSTOMER_CC = 4       # customer tips at delivery
    CUSTOMER_CASH = 6


class JobStatusCode(IntEnum):
    """
    Server-side lifecycle states of a job.

    The server owns the transitions; codes can appear outside the happy path
    (ERROR, REJECTED, CANCELLED, ORDER_NOT_READY), so treat this as a closed set
    rather than an ordered progression.
    """

    ERROR = 30
    PROCESSING = 40
    ACCEPTED = 50
    REJECTED = 51          # not yet implemented server-side
    CANCELLED = 52
    ORDER_NOT_READY = 53   # pick up attempted, order was not ready
    DISPATCHED = 60
    PICKED_UP = 61
    DELIVERED = 62
    UNDELIVERABLE = 63

