"""LinkedIn v2 client configuration."""
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, HttpUrl, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..linkedin.models import DEFAULT_EMAIL_FIELDS, DEFAULT_PROFILE_FIELDS

load_dotenv()


class Settings(BaseSettings):
    """Application settings."""

    # LinkedIn OAuth Settings (only needed by the MCP server)
    LINKEDIN_CLIENT_ID: SecretStr = Field(
        default=SecretStr(""),
        description="LinkedIn OAuth Client ID"
    )
    LINKEDIN_CLIENT_SECRET: SecretStr = Field(
        default=SecretStr(""),
        description="LinkedIn OAuth Client Secret"
    )
    LINKEDIN_AUTH_URL: HttpUrl = Field(
        default="https://www.linkedin.com/oauth/v2/authorization",
        description="LinkedIn OAuth authorization endpoint"
    )
    LINKEDIN_TOKEN_URL: HttpUrl = Field(
        default="https://www.linkedin.com/oauth/v2/accessToken",
        description="LinkedIn OAuth token endpoint"
    )

    # API
    LINKEDIN_API_BASE_URL: str = Field(
        default="https://api.linkedin.com",
        description="Host every scoped request is sent to"
    )
    LINKEDIN_API_PATH: str = Field(
        default="/v2",
        description="Path prefix for scoped requests"
    )
    RESTLI_PROTOCOL_VERSION: str = "2.0.0"

    # Projections
    LINKEDIN_PROFILE_FIELDS: list[str] = list(DEFAULT_PROFILE_FIELDS)
    LINKEDIN_EMAIL_FIELDS: list[str] = list(DEFAULT_EMAIL_FIELDS)

    # OAuth Scopes
    LINKEDIN_SCOPES: list[str] = [
        "r_liteprofile",  # Profile fields
        "r_emailaddress",  # Email address access
        "w_member_social"  # Required for sharing
    ]

    REQUEST_TIMEOUT: float = 30.0

    # Logging Configuration
    LOG_LEVEL: str = "INFO"

    # Server Configuration
    SERVER_PORT: int = 8000
    SERVER_BASE_URL: str = "http://localhost:8000"
    JWT_SIGNING_KEY: Optional[SecretStr] = Field(
        default=None,
        description="Secret for signing FastMCP JWT tokens"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        validate_default=True,
        extra="ignore"  # Ignore extra environment variables
    )

    @property
    def formatted_scopes(self) -> str:
        """Get properly formatted scope string."""
        return " ".join(self.LINKEDIN_SCOPES)

    @property
    def server_base_url(self) -> str:
        return self.SERVER_BASE_URL.rstrip("/")


# Initialize settings
settings = Settings()
