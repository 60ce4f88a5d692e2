"""Error hierarchy for the Brevo client.

HTTP error statuses returned by Brevo are NOT exceptions: they come back as an
``ApiResponse`` carrying an ``ApiError``. The exceptions below cover the
failures that happen before or around the HTTP exchange itself: a missing
API key, an unreachable host, or a request body that cannot be encoded.
"""

from __future__ import annotations


class BrevoError(Exception):
    """Base error for all client-side Brevo failures."""

    message: str = "Brevo client error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(BrevoError):
    """Client is missing configuration required to talk to Brevo."""

    message = "Brevo API key is not configured"


class BrevoTransportError(BrevoError):
    """Request could not be sent or no HTTP response was received."""

    message = "Brevo API request failed before a response was received"
