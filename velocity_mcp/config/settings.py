"""Settings management using pydantic-settings."""

import logging
from typing import Literal

from pydantic import Field, ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from velocity_mcp.domain.auth import AuthMode, classify_credential
from velocity_mcp.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# CLI flag for each required setting, used in error messages
_FLAGS = {
    "graphql_url": "--url",
    "access_token": "--token",
    "tenant_id": "--tenant-id",
}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses .env file for local development. Values passed to the constructor
    (command-line flags) win over the environment, which wins over .env.

    The instance is frozen: it is built once at startup and handed to every
    component that needs the endpoint, the credential or the tenant.
    """

    # Velocity service
    graphql_url: str = Field(min_length=1)
    access_token: str = Field(min_length=1)
    tenant_id: str = Field(min_length=1)

    # "auto" infers the credential kind from its content
    auth_mode: Literal["auto", "session_cookie", "access_key"] = "auto"
    user_agent: str = "MCP-Velocity-Client/1.0.0"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="VELOCITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @property
    def credential_mode(self) -> AuthMode:
        """Explicitly configured auth mode, or the classified one for "auto"."""
        if self.auth_mode == "auto":
            return classify_credential(self.access_token)
        return AuthMode(self.auth_mode)


def load_settings(
    url: str | None = None,
    token: str | None = None,
    tenant_id: str | None = None,
    env_file: str | None = ".env",
) -> Settings:
    """
    Build settings from CLI overrides, environment and .env file.

    Args:
        url: --url value (overrides VELOCITY_GRAPHQL_URL)
        token: --token value (overrides VELOCITY_ACCESS_TOKEN)
        tenant_id: --tenant-id value (overrides VELOCITY_TENANT_ID)
        env_file: Dotenv file to read, None to skip

    Returns:
        Frozen Settings instance

    Raises:
        ConfigurationError: If endpoint, credential or tenant is missing
    """
    overrides = {
        key: value
        for key, value in (
            ("graphql_url", url),
            ("access_token", token),
            ("tenant_id", tenant_id),
        )
        if value
    }

    try:
        settings = Settings(_env_file=env_file, **overrides)
    except PydanticValidationError as e:
        raise ConfigurationError(_describe(e)) from e

    logger.info(
        "Config loaded: graphql_url=%s access_token=%s tenant_id=%s",
        "SET",
        f"SET (length: {len(settings.access_token)})",
        "SET",
    )
    return settings


def _describe(error: PydanticValidationError) -> str:
    messages = []
    for item in error.errors():
        field = str(item["loc"][0]) if item["loc"] else ""
        if field in _FLAGS:
            env_name = f"VELOCITY_{field.upper()}"
            messages.append(
                f"{field} is required. Set {env_name} environment variable "
                f"or use {_FLAGS[field]} argument."
            )
        else:
            messages.append(f"{field}: {item['msg']}")
    return " ".join(messages)
