"""Configuration module — client settings."""

from brevo_client.config.settings import DEFAULT_BASE_URL, BrevoSettings

__all__ = [
    "BrevoSettings",
    "DEFAULT_BASE_URL",
]
