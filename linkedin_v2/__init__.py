"""LinkedIn v2 API client package.

This package wraps LinkedIn's versioned v2 REST API:

Features:
- Member profile retrieval (localized name, largest profile picture)
- Primary email address retrieval
- Shares (text, article and image) via ugcPosts
- Image asset registration and binary upload
- HTTP status codes mapped onto typed exceptions
- Optional MCP server exposing the client as tools

Usage:
    from linkedin_v2 import LinkedInClient

    with LinkedInClient.from_access_token(token) as client:
        client.profile()

    Run the MCP server: linkedin-v2-mcp
"""
import logging

from .linkedin.client import LinkedInClient
from .linkedin.errors import (
    AccessDeniedError,
    ErrorKind,
    GeneralError,
    InformLinkedInError,
    LinkedInAPIError,
    LinkedInError,
    NotFoundError,
    ServiceUnavailableError,
    UnauthorizedError,
    UnavailableError,
)
from .linkedin.models import ProfileRecord, ShareRequest, ShareVisibility, UploadRegistration
from .linkedin.request import AuthenticatedTransport, HttpxTransport

# Set up a null handler to avoid "No handler found" warnings
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AccessDeniedError",
    "AuthenticatedTransport",
    "ErrorKind",
    "GeneralError",
    "HttpxTransport",
    "InformLinkedInError",
    "LinkedInAPIError",
    "LinkedInClient",
    "LinkedInError",
    "NotFoundError",
    "ProfileRecord",
    "ServiceUnavailableError",
    "ShareRequest",
    "ShareVisibility",
    "UnauthorizedError",
    "UnavailableError",
    "UploadRegistration",
]
