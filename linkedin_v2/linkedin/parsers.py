"""Response parsers for the LinkedIn v2 API."""
import json
from typing import Any, Optional

from .models import UPLOAD_MECHANISM_KEY, ProfileRecord, UploadRegistration


def _localized(field: Optional[dict]) -> Optional[str]:
    if not field or not field.get("localized"):
        return None
    locale = field.get("preferredLocale") or {}
    key = f"{locale.get('language')}_{locale.get('country')}"
    return field["localized"].get(key)


def _picture_url(data: dict) -> Optional[str]:
    picture = data.get("profilePicture")
    if not picture:
        return None
    display_image = picture.get("displayImage~")
    if not display_image:
        return None
    elements = display_image.get("elements")
    if not elements:
        return None
    # The last element is the largest rendition
    return elements[-1]["identifiers"][0]["identifier"]


def parse_profile(raw: str) -> ProfileRecord:
    """Normalize a ``/me`` response.

    Names are read from their ``localized`` map using the field's
    ``preferredLocale``. Any missing name or picture data is simply left out
    of the record.
    """
    data = json.loads(raw)
    return ProfileRecord(
        id=data["id"],
        first_name=_localized(data.get("firstName")),
        last_name=_localized(data.get("lastName")),
        picture_url=_picture_url(data),
    )


def parse_email(raw: str) -> str:
    """Return the primary email address from an ``/emailAddress`` response.

    Unlike ``parse_profile`` there is no fallback: an unexpected shape raises
    ``KeyError``, ``IndexError`` or ``TypeError``.
    """
    return json.loads(raw)["elements"][0]["handle~"]["emailAddress"]


def parse_upload_registration(raw: str) -> UploadRegistration:
    """Extract the upload URL and asset URN from a ``registerUpload`` response."""
    value = json.loads(raw)["value"]
    return UploadRegistration(
        upload_url=value["uploadMechanism"][UPLOAD_MECHANISM_KEY]["uploadUrl"],
        asset=value["asset"],
    )


def share_id(response: Any) -> Optional[str]:
    """Id of a created share, as returned in the ``x-restli-id`` header."""
    return response.headers.get("x-restli-id")
