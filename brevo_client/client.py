"""Async client for the Brevo REST API v3.

Every call goes through ``BrevoClient.request``, which sends one request with
the ``api-key`` header and folds the outcome into an ``ApiResponse`` envelope.
HTTP error statuses come back as data (``response.error``); only transport
failures and missing configuration raise.

Collection getters go through ``fetch_all_paginated``, which walks Brevo's
``limit``/``offset`` pages sequentially and returns a single combined body
``{count, <field>: [...]}``.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter

from brevo_client.config.settings import BrevoSettings
from brevo_client.errors import BrevoTransportError, ConfigurationError
from brevo_client.models.requests import (
    ContactSelector,
    CreateContactRequest,
    CreateListRequest,
    SendEmailRequest,
    SendSmsRequest,
    selector_payload,
)
from brevo_client.models.responses import ApiResponse

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50

# Brevo returns collections in creation order only when asked to
_SORT_ASC = {"sort": "asc"}

_selector_adapter: TypeAdapter = TypeAdapter(ContactSelector)


def _parse_body(response: httpx.Response) -> Any:
    """Parsed JSON body, or None for empty and non-JSON bodies."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def _as_payload(model: type[BaseModel], value: BaseModel | dict) -> dict:
    if not isinstance(value, model):
        value = model.model_validate(value)
    return value.to_payload()  # type: ignore[attr-defined]


def _contact_path(identifier: Union[str, int]) -> str:
    # Emails may carry '+' and other characters that need escaping in a path
    return f"/contacts/{quote(str(identifier), safe='')}"


class BrevoClient:
    """Typed wrapper over the Brevo REST API v3.

    Parameters
    ----------
    settings:
        Client configuration. Read from ``BREVO_*`` environment variables
        when omitted.
    api_key:
        Overrides ``settings.api_key``.
    base_url:
        Overrides ``settings.base_url`` (e.g. "https://api.brevo.com/v3").
    """

    def __init__(
        self,
        settings: BrevoSettings | None = None,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
    ) -> None:
        settings = settings or BrevoSettings()
        self._api_key = api_key if api_key is not None else settings.api_key
        self._base_url = (base_url or settings.base_url).rstrip("/")
        self._timeout_seconds = settings.timeout_seconds

        if not self._api_key:
            logger.warning(
                "No Brevo API key configured (set BREVO_API_KEY); requests will fail"
            )

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self._base_url!r})"

    # ------------------------------------------------------------------
    # Core helpers
    # ------------------------------------------------------------------

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        *,
        json_body: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> ApiResponse[Any]:
        """Perform one request against ``base_url + endpoint``.

        Non-2xx statuses are returned as an error envelope, never raised.

        Raises
        ------
        ConfigurationError
            If no API key is configured.
        BrevoTransportError
            If the body cannot be encoded or no HTTP response was received.
        """
        if not self._api_key:
            raise ConfigurationError(
                "Brevo API key is not configured; set BREVO_API_KEY or pass api_key",
                endpoint=endpoint,
            )

        request_headers = httpx.Headers(
            {"Content-Type": "application/json", "api-key": self._api_key}
        )
        if headers:
            request_headers.update(headers)
            # The key is bound to the client, not to a call
            request_headers["api-key"] = self._api_key

        content: str | None = None
        if json_body is not None:
            try:
                content = json.dumps(json_body, allow_nan=False)
            except (TypeError, ValueError) as exc:
                raise BrevoTransportError(
                    f"Request body for {method} {endpoint} is not JSON serializable",
                    endpoint=endpoint,
                    method=method,
                ) from exc

        url = f"{self._base_url}{endpoint}"
        started = time.monotonic()
        try:
            async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
                response = await client.request(
                    method,
                    url,
                    content=content,
                    params=params,
                    headers=request_headers,
                )
        except httpx.RequestError as exc:
            logger.error(
                "Brevo %s %s failed: %s",
                method,
                endpoint,
                exc.__class__.__name__,
                extra={"method": method, "endpoint": endpoint, "error_reason": str(exc)},
            )
            raise BrevoTransportError(
                f"{method} {endpoint} failed: {exc}",
                endpoint=endpoint,
                method=method,
            ) from exc

        duration_ms = round((time.monotonic() - started) * 1000, 2)
        status = response.status_code
        body = _parse_body(response)
        log_extra = {
            "method": method,
            "endpoint": endpoint,
            "status": status,
            "duration_ms": duration_ms,
        }

        if not response.is_success:
            logger.warning(
                "Brevo %s %s returned %d", method, endpoint, status, extra=log_extra
            )
            return ApiResponse.failure(status, body, response.reason_phrase or None)

        logger.debug("Brevo %s %s returned %d", method, endpoint, status, extra=log_extra)
        return ApiResponse.success(status, body)

    async def fetch_all_paginated(
        self,
        endpoint: str,
        field: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        extra_params: dict[str, Any] | None = None,
    ) -> ApiResponse[Any]:
        """Fetch every page of ``endpoint`` and concatenate ``field`` arrays.

        Pages are requested one after another from offset 0 until a page holds
        fewer than ``page_size`` items. A page with any status other than 200
        is returned as-is and the items gathered so far are discarded.
        """
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        offset = 0
        page = 0
        collected: list[Any] = []

        while True:
            params = {**(extra_params or {}), "limit": page_size, "offset": offset}
            response = await self.request(endpoint, "GET", params=params)
            page += 1

            if response.status != 200:
                logger.warning(
                    "Aborting pagination of %s at page %d (status %d)",
                    endpoint,
                    page,
                    response.status,
                    extra={"endpoint": endpoint, "page": page, "status": response.status},
                )
                return response

            items = response.data.get(field) if isinstance(response.data, dict) else None
            if not isinstance(items, list):
                items = []
            collected.extend(items)
            offset += page_size

            if len(items) < page_size:
                break

        logger.debug(
            "Fetched %d %s from %s in %d page(s)",
            len(collected),
            field,
            endpoint,
            page,
            extra={"endpoint": endpoint, "page": page, "item_count": len(collected)},
        )
        return ApiResponse.success(200, {"count": len(collected), field: collected})

    # ------------------------------------------------------------------
    # Contacts
    # ------------------------------------------------------------------

    async def create_contact(
        self, contact: CreateContactRequest | dict
    ) -> ApiResponse[Any]:
        """Create a contact (or update it when ``update_enabled`` is set)."""
        return await self.request(
            "/contacts", "POST", json_body=_as_payload(CreateContactRequest, contact)
        )

    async def get_contact(self, identifier: Union[str, int]) -> ApiResponse[Any]:
        """Get a contact by email or numeric id."""
        return await self.request(_contact_path(identifier), "GET")

    async def delete_contact(self, identifier: Union[str, int]) -> ApiResponse[Any]:
        return await self.request(_contact_path(identifier), "DELETE")

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    async def get_lists(self) -> ApiResponse[Any]:
        """All contact lists, every page combined."""
        return await self.fetch_all_paginated(
            "/contacts/lists", "lists", extra_params=_SORT_ASC
        )

    async def get_list_contacts(self, list_id: int) -> ApiResponse[Any]:
        """All contacts of a list, every page combined."""
        return await self.fetch_all_paginated(
            f"/contacts/lists/{list_id}/contacts", "contacts", extra_params=_SORT_ASC
        )

    async def get_list_details(self, list_id: int) -> ApiResponse[Any]:
        return await self.request(f"/contacts/lists/{list_id}", "GET")

    async def create_list(self, contact_list: CreateListRequest | dict) -> ApiResponse[Any]:
        return await self.request(
            "/contacts/lists",
            "POST",
            json_body=_as_payload(CreateListRequest, contact_list),
        )

    async def update_list(self, list_id: int, name: str) -> ApiResponse[Any]:
        """Rename a list."""
        return await self.request(
            f"/contacts/lists/{list_id}", "PUT", json_body={"name": name}
        )

    async def delete_list(self, list_id: int) -> ApiResponse[Any]:
        return await self.request(f"/contacts/lists/{list_id}", "DELETE")

    async def add_contacts_to_list(
        self, list_id: int, contacts: ContactSelector | dict
    ) -> ApiResponse[Any]:
        """Add existing contacts to a list.

        ``contacts`` names them one way only: ``ContactsByEmail``,
        ``ContactsById`` or ``ContactsByExtId``. A dict is accepted when it
        carries the ``kind`` discriminator ("email", "id" or "ext_id").
        """
        if isinstance(contacts, dict):
            contacts = _selector_adapter.validate_python(contacts)
        return await self.request(
            f"/contacts/lists/{list_id}/contacts/add",
            "POST",
            json_body=selector_payload(contacts),
        )

    # ------------------------------------------------------------------
    # Folders
    # ------------------------------------------------------------------

    async def get_folders(self) -> ApiResponse[Any]:
        """All folders, every page combined."""
        return await self.fetch_all_paginated(
            "/contacts/folders", "folders", extra_params=_SORT_ASC
        )

    async def get_folder_lists(self, folder_id: int) -> ApiResponse[Any]:
        """All lists inside a folder, every page combined."""
        return await self.fetch_all_paginated(
            f"/contacts/folders/{folder_id}/lists", "lists", extra_params=_SORT_ASC
        )

    async def get_folder_details(self, folder_id: int) -> ApiResponse[Any]:
        return await self.request(f"/contacts/folders/{folder_id}", "GET")

    async def create_folder(self, name: str) -> ApiResponse[Any]:
        return await self.request("/contacts/folders", "POST", json_body={"name": name})

    async def update_folder(self, folder_id: int, name: str) -> ApiResponse[Any]:
        """Rename a folder."""
        return await self.request(
            f"/contacts/folders/{folder_id}", "PUT", json_body={"name": name}
        )

    async def delete_folder(self, folder_id: int) -> ApiResponse[Any]:
        """Delete a folder. Brevo deletes the lists inside it as well."""
        return await self.request(f"/contacts/folders/{folder_id}", "DELETE")

    # ------------------------------------------------------------------
    # Transactional messages
    # ------------------------------------------------------------------

    async def send_email(self, email: SendEmailRequest | dict) -> ApiResponse[Any]:
        """Send a transactional email (inline content or template)."""
        return await self.request(
            "/smtp/email", "POST", json_body=_as_payload(SendEmailRequest, email)
        )

    async def send_sms(self, sms: SendSmsRequest | dict) -> ApiResponse[Any]:
        return await self.request(
            "/transactionalSMS/sms", "POST", json_body=_as_payload(SendSmsRequest, sms)
        )

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------

    async def ping(self) -> ApiResponse[Any]:
        """Check credentials and reachability (GET /account)."""
        return await self.request("/account", "GET")
