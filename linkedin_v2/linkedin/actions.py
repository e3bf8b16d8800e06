"""Multi-step LinkedIn actions run by the MCP tools.

Each action is blocking and takes a ready ``LinkedInClient``; the server runs
them in a worker thread.
"""
from pathlib import Path
from typing import Optional

from .client import LinkedInClient
from .models import ShareRequest
from .parsers import parse_upload_registration, share_id


def format_profile(client: LinkedInClient) -> str:
    profile = client.profile()
    return f"""LinkedIn Profile:
- ID: {profile.id}
- First Name: {profile.first_name or 'N/A'}
- Last Name: {profile.last_name or 'N/A'}
- Picture URL: {profile.picture_url or 'N/A'}"""


def create_share(client: LinkedInClient, share: ShareRequest) -> Optional[str]:
    """Share as the authenticated member and return the new share id."""
    urn = client.profile().id
    return share_id(client.add_share(urn, share))


def create_image_share(client: LinkedInClient, share: ShareRequest, image_path: Path) -> Optional[str]:
    """Register an upload, send ``image_path`` to it and share the new asset."""
    image = image_path.read_bytes()
    urn = client.profile().id
    registration = parse_upload_registration(client.request_image_upload_url(urn).text)
    client.upload_image(registration.upload_url, image)
    share = share.model_copy(update={"image": registration.asset, "url": None})
    return share_id(client.add_share(urn, share))
