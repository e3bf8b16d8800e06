"""LinkedIn OAuth token verifier for the FastMCP OAuth proxy."""
import logging
from datetime import datetime, timedelta
from typing import Optional

from fastmcp.server.auth import TokenVerifier
from fastmcp.server.auth.providers.in_memory import AccessToken

logger = logging.getLogger(__name__)

DEFAULT_SCOPES = ["r_liteprofile", "r_emailaddress", "w_member_social"]


class LinkedInTokenVerifier(TokenVerifier):
    """Accepts any non-blank LinkedIn access token.

    LinkedIn v2 has no introspection endpoint for member tokens, so a bad
    token only shows up as an ``UnauthorizedError`` on the first API call.
    """

    def __init__(self, required_scopes: Optional[list[str]] = None, lifetime: timedelta = timedelta(hours=1)):
        super().__init__()
        self.required_scopes = required_scopes or list(DEFAULT_SCOPES)
        self.lifetime = lifetime
        logger.info(f"LinkedInTokenVerifier initialized with scopes: {self.required_scopes}")

    async def verify_token(self, token: str) -> Optional[AccessToken]:
        """Wrap ``token`` in an ``AccessToken``, or return None when blank."""
        if not token or not token.strip():
            logger.warning("Empty token provided")
            return None

        expires_at = int((datetime.now() + self.lifetime).timestamp())
        return AccessToken(
            token=token,
            client_id="linkedin-v2-client",
            expires_at=expires_at,
            scopes=self.required_scopes,
            claims={"service": "linkedin"}
        )
