"""Pydantic Settings for the Brevo client.

All environment variables use the BREVO_ prefix.
Example: BREVO_API_KEY=xkeysib-..., BREVO_BASE_URL=https://api.brevo.com/v3
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://api.brevo.com/v3"


class BrevoSettings(BaseSettings):
    """Brevo client configuration validated from environment variables."""

    # Credentials; absence is reported on first request, not here
    api_key: str | None = None

    # Endpoint
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(default=30.0, gt=0)

    log_level: str = "INFO"

    model_config = {"env_prefix": "BREVO_"}

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("api_key")
    @classmethod
    def _blank_key_is_missing(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value
