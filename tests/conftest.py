"""Shared fixtures: settings, a fake HTTP session and carrier responses."""

import pytest
import requests

from mondial_relay.config import MondialRelaySettings
from mondial_relay.models import Address

RESPONSE_NAMESPACE = "http://www.example.org/Response"


def status_xml(code, level, message):
    return f'<Status Code="{code}" Level="{level}" Message="{message}"/>'


def response_xml(
    statuses=(),
    shipment_number="12345678",
    label_output="https://www.mondialrelay.com/label/12345678.pdf",
    raw_content="JVBERi0xLjQK",
    with_shipments=True,
):
    status_list = "".join(status_xml(*s) for s in statuses)
    shipments = ""
    if with_shipments:
        shipments = (
            "<ShipmentsList>"
            f'<Shipment ShipmentNumber="{shipment_number}">'
            "<LabelList><Label>"
            f"<Output>{label_output}</Output>"
            f"<RawContent>{raw_content}</RawContent>"
            "</Label></LabelList>"
            "</Shipment>"
            "</ShipmentsList>"
        )
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        f'<ShipmentCreationResponse xmlns="{RESPONSE_NAMESPACE}">'
        f"<StatusList>{status_list}</StatusList>"
        f"{shipments}"
        "</ShipmentCreationResponse>"
    ).encode("utf-8")


class FakeResponse:
    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code


class FakeSession:
    """Stands in for requests.Session, replaying queued outcomes.

    Each queued item is either a FakeResponse or an exception to raise.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.headers = {}
        self.calls = []

    def post(self, url, data=None, timeout=None):
        self.calls.append({"url": url, "data": data, "timeout": timeout})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def business_address():
    return Address(
        title="Mme",
        firstname="Claire",
        lastname="Martin",
        streetname="12 rue des Lilas",
        country_code="fr",
        post_code="59000",
        city="Lille",
        mobile_no="+33600000000",
        email="shop@example.com",
    )


@pytest.fixture
def settings(business_address):
    return MondialRelaySettings(
        api_base_url="https://api.example.com/shipment",
        login="LOGIN@business-api.mondialrelay.com",
        password="secret",
        customer_id="CC123ABC",
        culture="fr-FR",
        business_address=business_address,
        return_location="FR-066974",
        timeout=5.0,
    )


@pytest.fixture
def order():
    return {
        "id": "order_01",
        "display_id": 1042,
        "email": "jean.dupont@example.com",
        "shipping_address": {
            "first_name": "Jean",
            "last_name": "Dupont",
            "address_1": "3 avenue Foch",
            "address_2": "020340",
            "country_code": "fr",
            "postal_code": "75016",
            "city": "Paris",
            "phone": "+33611111111",
            "metadata": {},
        },
    }


@pytest.fixture
def items():
    return [
        {"quantity": 2, "variant": {"weight": 300}},
        {"quantity": 1, "variant": {"weight": None}},
    ]


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection reset by peer")
