"""HTTP request dispatch for the LinkedIn v2 API."""
import logging
from typing import Mapping, Optional, Protocol, Union

import httpx

from .errors import raise_for_linkedin_status

logger = logging.getLogger(__name__)

API_PATH = "/v2"
RESTLI_PROTOCOL_VERSION = "2.0.0"

Body = Union[str, bytes]


def default_headers(restli_protocol_version: str = RESTLI_PROTOCOL_VERSION) -> dict:
    """Headers sent with every v2 request."""
    return {
        "x-li-format": "json",
        "Content-Type": "application/json",
        "X-Restli-Protocol-Version": restli_protocol_version,
    }


class AuthenticatedTransport(Protocol):
    """Interface for an HTTP transport that already carries a bearer token."""

    def get(self, url: str, headers: Mapping[str, str]) -> httpx.Response:
        ...

    def post(self, url: str, body: Body, headers: Mapping[str, str]) -> httpx.Response:
        ...


class HttpxTransport:
    """``AuthenticatedTransport`` backed by an ``httpx.Client``.

    Relative URLs are resolved against ``base_url``; absolute URLs (such as
    pre-signed upload URLs) are used as given.

    Usage::

        transport = HttpxTransport(access_token="...")
        response = transport.get("/v2/me", headers={})
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = "https://api.linkedin.com",
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(
            base_url=base_url,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=timeout,
            transport=transport,
        )

    def get(self, url: str, headers: Mapping[str, str]) -> httpx.Response:
        return self._client.get(url, headers=headers)

    def post(self, url: str, body: Body, headers: Mapping[str, str]) -> httpx.Response:
        return self._client.post(url, content=body, headers=headers)

    def close(self) -> None:
        self._client.close()


class V2Request:
    """Dispatches scoped GET/POST calls and maps error statuses.

    Args:
        transport: Authenticated transport used for every call
        api_path: Prefix added to scoped paths
        restli_protocol_version: Value of ``X-Restli-Protocol-Version``
    """

    def __init__(
        self,
        transport: AuthenticatedTransport,
        api_path: str = API_PATH,
        restli_protocol_version: str = RESTLI_PROTOCOL_VERSION,
    ):
        self.transport = transport
        self.api_path = api_path
        self.restli_protocol_version = restli_protocol_version

    def _headers(self, headers: Optional[Mapping[str, str]]) -> httpx.Headers:
        merged = httpx.Headers(default_headers(self.restli_protocol_version))
        if headers:
            merged.update(headers)
        return merged

    def get(self, path: str, headers: Optional[Mapping[str, str]] = None) -> str:
        """GET ``path`` under the API path and return the response body."""
        url = f"{self.api_path}{path}"
        response = self.transport.get(url, headers=self._headers(headers))
        logger.debug(f"GET {url} -> {response.status_code}")
        raise_for_linkedin_status(response)
        return response.text

    def post(
        self,
        path: str,
        body: Body = "",
        headers: Optional[Mapping[str, str]] = None,
        unscoped_url: bool = False,
    ) -> httpx.Response:
        """POST ``body`` and return the response.

        ``unscoped_url`` sends ``path`` verbatim. LinkedIn hands out image
        upload URLs as complete URLs outside of ``/v2``.
        """
        url = path if unscoped_url else f"{self.api_path}{path}"
        response = self.transport.post(url, body=body, headers=self._headers(headers))
        logger.debug(f"POST {url} -> {response.status_code}")
        raise_for_linkedin_status(response)
        return response
