import copy

import pytest

from twinjet_jobs.api.client import JobsClient
from twinjet_jobs.api.replay import ReplayTransport

API_TOKEN = "Ahngohsieb5aijooghugheF6iel0AeGh"

# A cancelled job, as returned by DELETE /jobs
JOB_STATUS_BODY = {
    "job_info": {
        "reference": "8MQXS0L84T",
        "external_id": "",
        "job_id": 3640041,
        "courier": None,
        "request_id": "8MQXS0L84T",
    },
    "job_locations": [],
    "current_status": {
        "last_location": None,
        "status_code": 52,
        "status_string": "cancelled",
        "user": None,
        "courier_name": None,
        "remarks": "Canceled Testing",
        "status_time": "2020-06-08T01:00:54.178815",
    },
    "job_history": [
        {
            "date": "2020-06-08T00:43:27.849792+00:00",
            "lat": None,
            "lng": None,
            "log": "Job was created via the TwinJet API v1.",
            "user": None,
        },
        {
            "date": "2020-06-08T00:43:27.884726+00:00",
            "lat": 45.52169,
            "lng": -73.58406,
            "log": "Worker Routed",
            "user": None,
        },
        {
            "date": "2020-06-08T01:00:53.997215+00:00",
            "lat": None,
            "lng": None,
            "log": "Job was cancelled via the TwinJet API v1.",
            "user": None,
        },
    ],
}

PICK_ADDRESS = {
    "address_name": "TCB Courier",
    "street_address": "565 Ellis St",
    "floor": "Unit B",
    "city": "San Francisco",
    "state": "CA",
    "zip_code": "94109",
    "contact": "Larry Bluejeans",
    "special_instructions": "Come right in",
}

DELIVER_ADDRESS = {
    "address_name": "Important Office Building",
    "street_address": "560 Mission St",
    "floor": "13th floor",
    "city": "San Francisco",
    "state": "CA",
    "zip_code": "94105",
    "contact": "P. Pete",
    "special_instructions": "Go to the messenger center",
}


@pytest.fixture
def job_status_body():
    return copy.deepcopy(JOB_STATUS_BODY)


@pytest.fixture
def replay():
    return ReplayTransport()


@pytest.fixture
def client(replay):
    return JobsClient(api_token=API_TOKEN, base_url="http://0.0.0.0", live=False, transport=replay)


@pytest.fixture
def job_payload():
    """A create() payload without addresses; tests add the ones they need."""
    return {
        "order_contact_name": "Larry Bluejeans",
        "order_contact_phone": "5555555555",
        "ready_time": "2020-06-08T00:43:27.849Z",
        "deliver_from_time": 1591577007849,
        "deliver_to_time": "2014-08-04T14:54:28.630613-07:00",
        "service_id": 21,
        "order_total": 20.0,
        "tip": 5.0,
        "webhook_url": "https://www.myawesomecompany.io/order/1234/",
        "job_items": [
            {"quantity": 4, "description": "Fried Chickens"},
            {"quantity": 1, "description": "Coke"},
        ],
    }


@pytest.fixture
def api_token():
    return API_TOKEN


@pytest.fixture
def pick_address():
    return dict(PICK_ADDRESS)


@pytest.fixture
def deliver_address():
    return dict(DELIVER_ADDRESS)
