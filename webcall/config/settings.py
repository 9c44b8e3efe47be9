"""
Environment-based settings for the relay service and the client.

Settings are read once, at process start, and then passed explicitly to
``create_app`` and to the session controller. A ``.env`` file in the working
directory is loaded first when present.
"""

import os
from pathlib import Path
from typing import List

import dotenv
from pydantic import BaseModel, Field, field_validator

from webcall.config.constants import (
    DEFAULT_API_PREFIX,
    DEFAULT_CAPTURE_DEVICE_ID,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_RELAY_URL,
    DEFAULT_RETELL_BASE_URL,
    DEFAULT_SAMPLE_RATE,
)
from webcall.errors import ConfigurationError


def load_env_file(env_path: Path = Path(".") / ".env") -> bool:
    """Load variables from a .env file if it exists.

    Returns:
        True if a file was loaded
    """
    if env_path.exists():
        dotenv.load_dotenv(env_path)
        return True
    return False


class RelaySettings(BaseModel):
    """Configuration of the relay HTTP service."""

    retell_api_key: str = Field(..., description="Bearer credential for the provider API")
    retell_base_url: str = DEFAULT_RETELL_BASE_URL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    api_prefix: str = DEFAULT_API_PREFIX
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @field_validator("retell_api_key")
    def validate_api_key(cls, v):
        """Reject an empty credential."""
        if not v or not v.strip():
            raise ValueError("RETELL_API_KEY cannot be empty")
        return v

    @field_validator("retell_base_url")
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    @field_validator("api_prefix")
    def normalize_prefix(cls, v):
        """Ensure the prefix is either empty or starts with a single slash."""
        v = v.strip().strip("/")
        return f"/{v}" if v else ""

    @classmethod
    def from_env(cls, environ=None) -> "RelaySettings":
        """Build settings from environment variables.

        Raises:
            ConfigurationError: If RETELL_API_KEY is not set
        """
        env = os.environ if environ is None else environ
        api_key = env.get("RETELL_API_KEY", "")
        if not api_key.strip():
            raise ConfigurationError("RETELL_API_KEY is not set")

        origins = [
            origin.strip()
            for origin in env.get("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        try:
            port = int(env.get("PORT", str(DEFAULT_PORT)))
        except ValueError:
            raise ConfigurationError(f"Invalid PORT value: {env.get('PORT')}")

        return cls(
            retell_api_key=api_key,
            retell_base_url=env.get("RETELL_BASE_URL", DEFAULT_RETELL_BASE_URL),
            host=env.get("HOST", DEFAULT_HOST),
            port=port,
            api_prefix=env.get("API_PREFIX", DEFAULT_API_PREFIX),
            cors_origins=origins or ["*"],
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )


class ClientSettings(BaseModel):
    """Configuration of the client side: which agent to call and through which relay."""

    agent_id: str = ""
    relay_url: str = DEFAULT_RELAY_URL
    sample_rate: int = DEFAULT_SAMPLE_RATE
    capture_device_id: str = DEFAULT_CAPTURE_DEVICE_ID

    @field_validator("relay_url")
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    @classmethod
    def from_env(cls, environ=None) -> "ClientSettings":
        env = os.environ if environ is None else environ
        return cls(
            agent_id=env.get("AGENT_ID", ""),
            relay_url=env.get("RELAY_URL", DEFAULT_RELAY_URL),
        )
