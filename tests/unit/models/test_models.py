import pytest

from twinjet_jobs import Address, JobIdentifier, JobItem, JobPayload, JobStatusCode, PaymentMethod
from twinjet_jobs.models import to_wire_fields


def test_payment_method_wire_values():
    assert {m.name: int(m) for m in PaymentMethod} == {
        "INVOICE": 1,
        "CUSTOMER_PREPAID": 2,
        "CUSTOMER_CC": 4,
        "CUSTOMER_CASH": 6,
    }


def test_job_status_code_wire_values():
    assert {m.name: int(m) for m in JobStatusCode} == {
        "ERROR": 30,
        "PROCESSING": 40,
        "ACCEPTED": 50,
        "REJECTED": 51,
        "CANCELLED": 52,
        "ORDER_NOT_READY": 53,
        "DISPATCHED": 60,
        "PICKED_UP": 61,
        "DELIVERED": 62,
        "UNDELIVERABLE": 63,
    }


def test_to_wire_fields_drops_none_and_flattens():
    payload = JobPayload(
        order_contact_name="A",
        order_contact_phone="1",
        ready_time="2020-01-01T00:00:00Z",
        deliver_from_time="2020-01-01T00:00:00Z",
        deliver_to_time="2020-01-01T00:00:00Z",
        pick_address=Address(street_address="1 Main", city="X", state="CA"),
        payment_method=PaymentMethod.INVOICE,
        job_items=[JobItem(quantity=1)],
    )
    wire = to_wire_fields(payload)
    assert wire["pick_address"] == {"street_address": "1 Main", "city": "X", "state": "CA"}
    assert wire["payment_method"] == 1 and type(wire["payment_method"]) is int
    assert wire["job_items"] == [{"quantity": 1}]
    assert "deliver_address" not in wire


def test_to_wire_fields_mapping_passthrough():
    assert to_wire_fields({"job_id": 3, "reference": None}) == {"job_id": 3}
    assert to_wire_fields({"pick_address": {"floor": None}}) == {"pick_address": {"floor": None}}
    assert to_wire_fields(None) == {}


def test_to_wire_fields_rejects_other_types():
    with pytest.raises(TypeError):
        to_wire_fields(["request_id", "x"])


def test_job_payload_requires_creation_fields():
    with pytest.raises(TypeError):
        JobPayload(order_contact_name="A")  # type: ignore[call-arg]


def test_identifier_defaults_all_absent():
    assert to_wire_fields(JobIdentifier()) == {}
