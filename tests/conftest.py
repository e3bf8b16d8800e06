"""Shared fixtures for the LinkedIn v2 client tests."""
import json

import httpx
import pytest

from linkedin_v2.linkedin.client import LinkedInClient
from linkedin_v2.linkedin.request import HttpxTransport


class RecordingTransport:
    """AuthenticatedTransport stand-in that records every call."""

    def __init__(self, status: int = 201, text: str = "{}", headers=None):
        self.calls = []
        self.status = status
        self.text = text
        self.headers = headers or {}

    def _respond(self) -> httpx.Response:
        return httpx.Response(self.status, text=self.text, headers=self.headers)

    def get(self, url, headers):
        self.calls.append(("GET", url, None, headers))
        return self._respond()

    def post(self, url, body, headers):
        self.calls.append(("POST", url, body, headers))
        return self._respond()


def _picture_element(size: int) -> dict:
    return {
        "artifact": f"urn:li:digitalmediaMediaArtifact:(urn:li:digitalmediaAsset:C4D03AQH6G4DJiJMrvg,"
                    f"urn:li:digitalmediaMediaArtifactClass:profile-displayphoto-shrink_{size}_{size})",
        "authorizationMethod": "PUBLIC",
        "identifiers": [
            {
                "identifier": f"https://upload.wikimedia.org/wikipedia/en/1/13/MalReynoldsFirefly.JPG?w={size}",
                "index": 0,
                "mediaType": "image/jpeg",
                "identifierType": "EXTERNAL_URL",
            }
        ],
    }


@pytest.fixture
def profile_data() -> dict:
    locale = {"country": "US", "language": "en"}
    return {
        "firstName": {"localized": {"en_US": "Mal"}, "preferredLocale": locale},
        "lastName": {"localized": {"en_US": "Reynolds"}, "preferredLocale": locale},
        "profilePicture": {
            "displayImage": "urn:li:digitalmediaAsset:C4D03AQH6G4DJiJMrvg",
            "displayImage~": {
                "elements": [_picture_element(size) for size in (100, 200, 400, 800)],
                "paging": {"count": 10, "start": 0, "links": []},
            },
        },
        "id": "123456",
    }


@pytest.fixture
def profile_json(profile_data) -> str:
    return json.dumps(profile_data)


@pytest.fixture
def email_json() -> str:
    return json.dumps(
        {"elements": [{"handle": "urn:li:emailAddress:123456", "handle~": {"emailAddress": "mal@blue.sun"}}]}
    )


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def mock_api():
    """Build a client whose HttpxTransport talks to an httpx.MockTransport.

    Returns a factory ``(handler) -> (client, requests)``; ``requests`` collects
    every request the handler saw.
    """
    clients = []

    def factory(handler):
        requests = []

        def record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        transport = HttpxTransport("77j2rfbjbmkcdh", transport=httpx.MockTransport(record))
        clients.append(transport)
        return LinkedInClient(transport), requests

    yield factory

    for transport in clients:
        transport.close()
