"""
LinkedIn v2 MCP Server with FastMCP OAuth Proxy
Exposes the LinkedIn v2 client (profile, email, shares, image shares) as MCP tools.
The OAuth Proxy runs the authorization code flow with LinkedIn and hands the
upstream access token to each tool call.
"""
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.server.auth import OAuthProxy
from fastmcp.server.dependencies import get_access_token

from .config.settings import settings
from .linkedin import actions
from .linkedin.client import LinkedInClient
from .linkedin.errors import LinkedInError
from .linkedin.models import ShareRequest
from .linkedin.token_verifier import LinkedInTokenVerifier
from .utils.logging import configure_logging

# Load environment variables
load_dotenv()

# Configure logging
configure_logging(log_level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

SERVER_BASE_URL = settings.server_base_url
JWT_SIGNING_KEY = settings.JWT_SIGNING_KEY.get_secret_value() if settings.JWT_SIGNING_KEY else None

auth = OAuthProxy(
    upstream_authorization_endpoint=str(settings.LINKEDIN_AUTH_URL),
    upstream_token_endpoint=str(settings.LINKEDIN_TOKEN_URL),
    upstream_client_id=settings.LINKEDIN_CLIENT_ID.get_secret_value(),
    upstream_client_secret=settings.LINKEDIN_CLIENT_SECRET.get_secret_value(),
    token_verifier=LinkedInTokenVerifier(required_scopes=settings.LINKEDIN_SCOPES),
    base_url=SERVER_BASE_URL,
    # Must match the redirect URL registered with the LinkedIn app
    redirect_path="/auth/callback",
    # LinkedIn expects client credentials in the POST body
    token_endpoint_auth_method="client_secret_post",
    forward_pkce=True,
    allowed_client_redirect_uris=None,
    extra_authorize_params={
        "scope": settings.formatted_scopes,
    },
    jwt_signing_key=JWT_SIGNING_KEY,
    require_authorization_consent=False
)

mcp = FastMCP("LinkedInV2Server", auth=auth)


def _access_token() -> str:
    access_token = get_access_token()
    if access_token is None or not access_token.token:
        raise RuntimeError(
            "Not authenticated. Please complete the OAuth flow first. "
            "Your MCP client should prompt you to authenticate."
        )
    return access_token.token


async def _run(action: str, func, *args):
    """Run a blocking client call in a worker thread with a fresh client."""
    token = _access_token()

    def call():
        with LinkedInClient.from_access_token(token, settings) as client:
            return func(client, *args)

    try:
        return await asyncio.to_thread(call)
    except LinkedInError as e:
        error_msg = f"Failed to {action}: {e}"
        logger.error(error_msg)
        raise RuntimeError(error_msg) from e


@mcp.tool()
async def get_profile() -> str:
    """Get the authenticated LinkedIn member's profile.

    Returns:
        Profile id, localized name and largest profile picture URL
    """
    logger.info("Getting LinkedIn profile...")
    return await _run("get profile", actions.format_profile)


@mcp.tool()
async def get_email_address() -> str:
    """Get the authenticated LinkedIn member's primary email address."""
    logger.info("Getting LinkedIn email address...")
    return await _run("get email address", lambda client: client.email_address())


@mcp.tool()
async def create_share(
    text: str,
    url: Optional[str] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    visibility: str = "PUBLIC",
) -> str:
    """Share a post on LinkedIn, optionally linking an article.

    Args:
        text: The commentary of the share (required)
        url: Optional article URL to attach
        title: Optional article title
        description: Optional article description
        visibility: "PUBLIC" or "CONNECTIONS" (default: PUBLIC)

    Returns:
        Success message with the share ID
    """
    if not text.strip():
        raise RuntimeError("Share text cannot be empty")
    share = ShareRequest(comment=text, url=url, title=title, description=description, visibility=visibility)

    post_id = await _run("create share", actions.create_share, share)
    success_msg = f"Successfully created LinkedIn share with ID: {post_id}"
    logger.info(success_msg)
    return success_msg


@mcp.tool()
async def create_image_share(
    text: str,
    image_path: str,
    title: Optional[str] = None,
    description: Optional[str] = None,
    visibility: str = "PUBLIC",
) -> str:
    """Upload a local image and share it on LinkedIn.

    Registers an image upload, sends the file to the returned upload URL and
    creates an IMAGE share referencing the new asset.

    Args:
        text: The commentary of the share (required)
        image_path: Path of the image file on the server host
        title: Optional image title
        description: Optional image description
        visibility: "PUBLIC" or "CONNECTIONS" (default: PUBLIC)
    """
    if not text.strip():
        raise RuntimeError("Share text cannot be empty")
    path = Path(image_path)
    if not path.is_file():
        raise RuntimeError(f"Image not found: {image_path}")
    share = ShareRequest(comment=text, title=title, description=description, visibility=visibility)

    post_id = await _run("create image share", actions.create_image_share, share, path)
    success_msg = f"Successfully created LinkedIn image share with ID: {post_id}"
    logger.info(success_msg)
    return success_msg


def main():
    """Run the LinkedIn v2 MCP server with OAuth Proxy."""
    if not settings.LINKEDIN_CLIENT_ID.get_secret_value() or not settings.LINKEDIN_CLIENT_SECRET.get_secret_value():
        logger.error("LINKEDIN_CLIENT_ID and LINKEDIN_CLIENT_SECRET must be set in environment variables or .env file")
        sys.exit(1)

    logger.info(f"Starting HTTP server on port {settings.SERVER_PORT}")
    logger.info(f"OAuth callback: {SERVER_BASE_URL}/auth/callback")
    logger.info(f"MCP endpoint: {SERVER_BASE_URL}/mcp")

    try:
        mcp.run(transport="http", host="0.0.0.0", port=settings.SERVER_PORT)
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    main()
