"""Request payload builders for the LinkedIn v2 API.

All functions here are pure: they take already validated input and return
plain dicts/strings ready to be serialized onto the wire.
"""
from typing import Any, Iterable, Mapping, Sequence, Union
from urllib.parse import quote_plus

from .models import (
    MEMBER_VISIBILITY_KEY,
    PERSON_URN_PREFIX,
    SHARE_CONTENT_KEY,
    MediaCategory,
    ShareRequest,
    ShareVisibility,
)

IMAGE_RECIPE = "urn:li:digitalmediaRecipe:feedshare-image"
UGC_RELATIONSHIP = "urn:li:userGeneratedContent"


def person_urn(urn: str) -> str:
    return f"{PERSON_URN_PREFIX}{urn}"


def _media_entry(share: ShareRequest, **variant: str) -> dict:
    media = {"status": "READY", **variant}
    if share.description is not None:
        media["description"] = {"text": share.description}
    if share.title is not None:
        media["title"] = {"text": share.title}
    return media


def build_share_payload(author_urn: str, share: ShareRequest) -> dict:
    """Build the ``ugcPosts`` body for a share.

    Args:
        author_urn: Member id, without the ``urn:li:person:`` prefix
        share: Validated share content

    Returns:
        The payload dict. ``media`` is only present for article and image
        shares; the url is checked before the image.
    """
    visibility = share.visibility or ShareVisibility.PUBLIC
    content = {
        "shareCommentary": {"text": share.comment},
        "shareMediaCategory": MediaCategory.NONE.value,
    }

    if share.url is not None:
        content["shareMediaCategory"] = MediaCategory.ARTICLE.value
        content["media"] = [_media_entry(share, originalUrl=share.url)]
    elif share.image is not None:
        content["shareMediaCategory"] = MediaCategory.IMAGE.value
        content["media"] = [_media_entry(share, media=share.image)]

    return {
        "author": person_urn(author_urn),
        "lifecycleState": "PUBLISHED",
        "specificContent": {SHARE_CONTENT_KEY: content},
        "visibility": {MEMBER_VISIBILITY_KEY: ShareVisibility(visibility).value},
    }


def build_image_upload_payload(author_urn: str) -> dict:
    """Build the ``registerUpload`` body for a feed share image."""
    return {
        "registerUploadRequest": {
            "recipes": [IMAGE_RECIPE],
            "owner": person_urn(author_urn),
            "serviceRelationships": [
                {
                    "relationshipType": "OWNER",
                    "identifier": UGC_RELATIONSHIP,
                }
            ],
        }
    }


def build_projection(fields: Iterable[str]) -> str:
    """Render a Rest.li projection, e.g. ``(id,firstName)``."""
    return "(" + ",".join(fields) + ")"


QueryParams = Union[Mapping[str, Any], Sequence[tuple]]


def to_query(params: QueryParams, safe: str = "") -> str:
    """Render query parameters.

    List values repeat the key and ``None`` values render the bare key.
    Characters listed in ``safe`` are left unescaped, which Rest.li
    projections need for their parentheses.
    """
    items = params.items() if isinstance(params, Mapping) else params
    parts = []
    for key, value in items:
        if isinstance(value, (list, tuple)):
            parts.append(to_query([(key, v) for v in value], safe))
        elif value is None:
            parts.append(quote_plus(str(key), safe=safe))
        else:
            parts.append(f"{quote_plus(str(key), safe=safe)}={quote_plus(str(value), safe=safe)}")
    return "&".join(parts)


PROJECTION_SAFE = "(),~*:"


def projection_path(path: str, fields: Iterable[str], **params: Any) -> str:
    """Append query params plus a projection to ``path``."""
    query = dict(params)
    query["projection"] = build_projection(fields)
    return f"{path}?{to_query(query, safe=PROJECTION_SAFE)}"
