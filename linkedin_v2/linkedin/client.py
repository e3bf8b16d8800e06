"""LinkedIn v2 consumer API client."""
import json
import logging
from typing import Any, Iterable, Mapping, Optional, Union

import httpx

from ..config.settings import Settings, settings as default_settings
from .errors import UnavailableError
from .models import DEFAULT_EMAIL_FIELDS, DEFAULT_PROFILE_FIELDS, ProfileRecord, ShareRequest
from .parsers import parse_email, parse_profile
from .payloads import build_image_upload_payload, build_share_payload, projection_path
from .request import API_PATH, RESTLI_PROTOCOL_VERSION, AuthenticatedTransport, HttpxTransport, V2Request

logger = logging.getLogger(__name__)

UPLOAD_HEADERS = {"Content-Type": "application/octet-stream"}


def _require_urn(urn: Any) -> None:
    if not isinstance(urn, str) or not urn:
        raise UnavailableError("LinkedIn API: URN required")


class LinkedInClient:
    """Client for the LinkedIn v2 consumer API.

    Every public method issues exactly one request through ``transport``.

    Usage::

        with LinkedInClient.from_access_token("...") as client:
            profile = client.profile()
            client.add_share(profile.id, {"comment": "Hello LinkedIn!"})

    Args:
        transport: Authenticated transport, owned by the caller
        profile_fields: Projection used by ``profile()``
        email_fields: Projection used by ``email_address()``
        api_path: Prefix for scoped paths
        restli_protocol_version: Rest.li protocol header value
    """

    def __init__(
        self,
        transport: AuthenticatedTransport,
        profile_fields: Iterable[str] = DEFAULT_PROFILE_FIELDS,
        email_fields: Iterable[str] = DEFAULT_EMAIL_FIELDS,
        api_path: str = API_PATH,
        restli_protocol_version: str = RESTLI_PROTOCOL_VERSION,
    ):
        self.profile_fields = tuple(profile_fields)
        self.email_fields = tuple(email_fields)
        self._request = V2Request(transport, api_path, restli_protocol_version)
        self._owned_transport: Optional[HttpxTransport] = None

    @classmethod
    def from_access_token(cls, access_token: str, settings: Optional[Settings] = None) -> "LinkedInClient":
        """Build a client with an ``HttpxTransport`` configured from ``settings``."""
        settings = settings or default_settings
        transport = HttpxTransport(
            access_token,
            base_url=settings.LINKEDIN_API_BASE_URL,
            timeout=settings.REQUEST_TIMEOUT,
        )
        client = cls(
            transport,
            profile_fields=settings.LINKEDIN_PROFILE_FIELDS,
            email_fields=settings.LINKEDIN_EMAIL_FIELDS,
            api_path=settings.LINKEDIN_API_PATH,
            restli_protocol_version=settings.RESTLI_PROTOCOL_VERSION,
        )
        client._owned_transport = transport
        return client

    def close(self) -> None:
        if self._owned_transport is not None:
            self._owned_transport.close()

    def __enter__(self) -> "LinkedInClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def profile(self) -> ProfileRecord:
        """Obtain profile information for the authenticated member.

        Permissions: r_liteprofile
        """
        raw = self._request.get(projection_path("/me", self.profile_fields))
        return parse_profile(raw)

    def email_address(self) -> str:
        """Obtain the authenticated member's primary email address.

        Permissions: r_emailaddress
        """
        raw = self._request.get(projection_path("/emailAddress", self.email_fields, q="members"))
        return parse_email(raw)

    def add_share(self, urn: str, share: Union[ShareRequest, Mapping[str, Any], None] = None) -> httpx.Response:
        """Share content for the authenticated member.

        Permissions: w_member_social

        Args:
            urn: Member id returned with the access token
            share: Share content; at least a comment is required

        Raises:
            UnavailableError: If ``urn`` or the comment is missing
        """
        _require_urn(urn)
        if share is None:
            share = ShareRequest()
        elif isinstance(share, Mapping):
            share = ShareRequest.model_validate(share)
        if share.comment is None:
            raise UnavailableError("LinkedIn API: Comment required")

        logger.info(f"Creating share for member {urn}")
        payload = build_share_payload(urn, share)
        return self._request.post("/ugcPosts", json.dumps(payload))

    def request_image_upload_url(self, urn: str) -> httpx.Response:
        """Register an image upload for the authenticated member.

        Permissions: w_member_social

        The response body carries the pre-signed upload URL and the asset URN,
        see ``parse_upload_registration``.
        """
        _require_urn(urn)
        logger.info(f"Registering image upload for member {urn}")
        return self._request.post(
            "/assets?action=registerUpload",
            json.dumps(build_image_upload_payload(urn)),
        )

    def upload_image(self, url: str, body: bytes) -> httpx.Response:
        """Upload image bytes to a URL obtained from ``request_image_upload_url``."""
        return self._request.post(url, body, headers=UPLOAD_HEADERS, unscoped_url=True)
