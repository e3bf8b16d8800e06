"""LinkedIn v2 request and response models."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

PERSON_URN_PREFIX = "urn:li:person:"
SHARE_CONTENT_KEY = "com.linkedin.ugc.ShareContent"
MEMBER_VISIBILITY_KEY = "com.linkedin.ugc.MemberNetworkVisibility"
UPLOAD_MECHANISM_KEY = "com.linkedin.digitalmedia.uploading.MediaUploadHttpRequest"

DEFAULT_PROFILE_FIELDS = (
    "id",
    "firstName",
    "lastName",
    "profilePicture(displayImage~:playableStreams)",
)
DEFAULT_EMAIL_FIELDS = ("elements*(handle~)",)


class MediaCategory(str, Enum):
    """Share media categories supported by ugcPosts."""
    NONE = "NONE"
    ARTICLE = "ARTICLE"
    IMAGE = "IMAGE"


class ShareVisibility(str, Enum):
    """Valid share visibility values."""
    PUBLIC = "PUBLIC"
    CONNECTIONS = "CONNECTIONS"


class ShareRequest(BaseModel):
    """Share content submitted on behalf of a member.

    ``url`` turns the share into an article, ``image`` (an asset URN returned
    by the upload registration) into an image share. When both are given the
    article wins.
    """
    model_config = ConfigDict(extra="ignore")

    comment: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    visibility: Optional[ShareVisibility] = None


class ProfileRecord(BaseModel):
    """Normalized member profile."""
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    picture_url: Optional[str] = None


class UploadRegistration(BaseModel):
    """Upload target returned by ``assets?action=registerUpload``."""
    upload_url: str
    asset: str
