"""Typed async client for the Brevo (Sendinblue) REST API v3."""

from brevo_client.client import DEFAULT_PAGE_SIZE, BrevoClient
from brevo_client.config.settings import BrevoSettings
from brevo_client.errors import BrevoError, BrevoTransportError, ConfigurationError
from brevo_client.logging_config import configure_logging
from brevo_client.models.responses import ApiError, ApiResponse

__all__ = [
    "ApiError",
    "ApiResponse",
    "BrevoClient",
    "BrevoError",
    "BrevoSettings",
    "BrevoTransportError",
    "ConfigurationError",
    "DEFAULT_PAGE_SIZE",
    "configure_logging",
]
