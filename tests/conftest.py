"""Pytest configuration for the geocoding project."""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Callable, List

import httpx
import pytest

# Ensure the project root is on sys.path so that import geocoding works under pytest.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


OK_BODY = {
    "plus_code": {"compound_code": "V9M2+XM Paris, France", "global_code": "8FW4V9M2+XM"},
    "results": [
        {
            "address_components": [
                {"long_name": "Paris", "short_name": "Paris", "types": ["locality", "political"]},
            ],
            "formatted_address": "Paris, France",
            "geometry": {
                "location": {"lat": 48.856614, "lng": 2.3522219},
                "location_type": "APPROXIMATE",
                "viewport": {
                    "northeast": {"lat": 48.9021449, "lng": 2.4699208},
                    "southwest": {"lat": 48.815573, "lng": 2.224199},
                },
            },
            "place_id": "ChIJD7fiBh9u5kcRYJSMaMOCCwQ",
            "types": ["locality", "political"],
        }
    ],
    "status": "OK",
}


@pytest.fixture
def ok_body() -> dict:
    return json.loads(json.dumps(OK_BODY))


@pytest.fixture
def make_http_client() -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient backed by a MockTransport.

    Requests seen by the transport are appended to ``client.sent``.
    """

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        sent: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        client.sent = sent
        return client

    return factory
