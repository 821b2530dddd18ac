"""
Shared fixtures: wire-format payloads and clients wired to mock transports.
"""

import json
from unittest.mock import Mock

import httpx
import pytest
import requests

from pwinty import AsyncPwintyClient, PwintyClient

MERCHANT_ID = "merchant-123"
API_KEY = "key-abcdef"


@pytest.fixture
def image_json():
    """Factory for an OrderImage as the API returns it."""

    def _make(image_id=1, sku="FRA-INSTA-40X40", url="https://i.imgur.com/4AiXzf8.jpg", copies=1):
        return {
            "id": image_id,
            "sku": sku,
            "url": url,
            "status": "NotYetSubmitted",
            "copies": copies,
            "sizing": "Crop",
            "price": 1500,
            "previewUrl": None,
        }

    return _make


@pytest.fixture
def order_json(image_json):
    """Factory for an Order as the API returns it."""

    def _make(**overrides):
        order = {
            "id": 42,
            "address1": None,
            "postalOrZipCode": "012345",
            "countryCode": "US",
            "recipientName": "Best Customer Ever",
            "status": "NotYetSubmitted",
            "payment": "InvoiceMe",
            "price": 0,
            "shippingInfo": {
                "price": 995,
                "shipments": [
                    {
                        "carrier": "FedEx",
                        "photoIds": [1],
                        "shipmentId": "sh-1",
                        "trackingNumber": None,
                        "isTracked": False,
                        "earliestEstimatedArrivalDate": "2019-05-20T00:00:00+00:00",
                        "shippedOn": "2019-05-18T09:30:00+00:00",
                    }
                ],
            },
            "images": [image_json()],
            "preferredShippingMethod": "Express",
            "created": "2019-05-17T12:00:00Z",
            "lastUpdated": "2019-05-17T12:05:00+01:00",
            "canCancel": True,
            "canHold": True,
            "canUpdateShipping": True,
            "canUpdateImages": True,
        }
        order.update(overrides)
        return order

    return _make


@pytest.fixture
def requests_seen():
    """httpx requests received by the mock transport, in order."""
    return []


@pytest.fixture
def async_client(requests_seen):
    """Factory for an AsyncPwintyClient backed by httpx.MockTransport."""

    def _make(status=200, payload=None, content=None, error=None):
        def handler(request):
            requests_seen.append(request)
            if error is not None:
                raise error(f"mock {error.__name__}", request=request)
            if content is not None:
                return httpx.Response(status, content=content)
            return httpx.Response(status, json=payload)

        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return AsyncPwintyClient.sandbox(MERCHANT_ID, API_KEY, http_client=http)

    return _make


@pytest.fixture
def mock_session():
    """requests.Session double returning a canned response."""
    session = Mock(spec=requests.Session)

    def respond(status=200, payload=None, content=None):
        body = content if content is not None else json.dumps(payload).encode("utf-8")
        session.request.return_value = Mock(status_code=status, content=body)
        return session

    session.respond = respond
    return session


@pytest.fixture
def sync_client(mock_session):
    """PwintyClient using the mock session."""
    return PwintyClient.sandbox(MERCHANT_ID, API_KEY, session=mock_session)
