"""Shared fixtures for pirateship-rates tests."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest

from pirateship_rates.config import PirateShipConfig
from pirateship_rates.enums import MailClassKey, PackageType
from pirateship_rates.schemas import ShippingOptions

TEST_ENDPOINT = "https://rates.test/graphql?opname=RatesQuery"


def make_rate(**overrides: Any) -> dict[str, Any]:
    """Return one rate record in wire shape."""
    rate = {
        "title": "Priority Mail",
        "deliveryDescription": "1-3 business days",
        "trackingDescription": "USPS Tracking Included",
        "serviceDescription": "",
        "pricingDescription": "Cubic Price",
        "cubicTier": "0.2",
        "mailClassKey": "Priority",
        "mailClass": {
            "accuracy": None,
            "international": False,
            "__typename": "MailClass",
        },
        "packageTypeKey": "Parcel",
        "zone": "5",
        "surcharges": [
            {
                "title": "Nonstandard Fee",
                "price": 4.0,
                "__typename": "Surcharge",
            }
        ],
        "carrier": {
            "carrierKey": "usps",
            "title": "USPS",
            "__typename": "Carrier",
        },
        "totalPrice": 9.45,
        "priceBaseTypeKey": "NATIONAL",
        "basePrice": 5.45,
        "crossedTotalPrice": 15.9,
        "pricingType": "CUBIC",
        "pricingSubType": "",
        "ratePeriodId": 42,
        "learnMoreUrl": "https://support.pirateship.com/",
        "cheapest": True,
        "fastest": False,
        "__typename": "Rate",
    }
    rate.update(overrides)
    return rate


class RecordingTransport(httpx.MockTransport):
    """Mock transport that replies with a fixed response and keeps requests."""

    def __init__(self, status_code: int = 200, body: Any = None) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = body
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    def sent_json(self, index: int = 0) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture()
def config() -> PirateShipConfig:
    return PirateShipConfig(endpoint_url=TEST_ENDPOINT)


@pytest.fixture()
def options() -> ShippingOptions:
    return ShippingOptions(
        origin_zip="10001",
        destination_zip="94105",
        weight=16,
        dimension_x=10,
        dimension_y=8,
        dimension_z=4,
        mail_class_keys=[MailClassKey.PRIORITY],
        package_type_keys=[PackageType.PARCEL],
    )


@pytest.fixture()
async def http_client_factory() -> AsyncIterator[
    Callable[[RecordingTransport], httpx.AsyncClient]
]:
    clients: list[httpx.AsyncClient] = []

    def factory(transport: RecordingTransport) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=transport)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        await client.aclose()
