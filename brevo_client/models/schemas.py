"""Resource schemas mirroring Brevo's JSON shapes.

Brevo speaks camelCase; these models expose snake_case attributes and accept
either spelling on input. Unknown fields are kept (``extra="allow"``) so a
payload validated through ``ApiResponse.data_as`` loses nothing the remote
service added. Apart from identifiers, fields are optional: the service omits
many of them depending on account features.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

AttributeScalar = Union[str, int, float, bool]
AttributeValue = Union[AttributeScalar, list[AttributeScalar]]

WIRE_MODEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "extra": "allow",
}


class BrevoModel(BaseModel):
    """Base for every model that crosses the wire."""

    model_config = WIRE_MODEL_CONFIG

    def to_payload(self) -> dict:
        """Serialize to a Brevo request body (camelCase, unset fields dropped)."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------


class TransactionalStatistics(BrevoModel):
    delivered: int | None = None
    opened: int | None = None
    click: int | None = None
    soft_bounces: int | None = None
    hard_bounces: int | None = None


class ContactStatistics(BrevoModel):
    """Engagement counters Brevo attaches to a single contact."""

    messages_sent: int | None = None
    delivered: int | None = None
    opened: int | None = None
    click: int | None = None
    hard_bounces: int | None = None
    soft_bounces: int | None = None
    complaints: int | None = None
    unsubscriptions: int | None = None
    transactional_stats: TransactionalStatistics | None = None


class Contact(BrevoModel):
    id: int | None = None
    email: str | None = None
    sms: str | None = None
    attributes: dict[str, AttributeValue] | None = None
    list_ids: list[int] = Field(default_factory=list)
    email_blacklisted: bool | None = None
    sms_blacklisted: bool | None = None
    ext_id: str | None = None
    created_at: str | None = None
    modified_at: str | None = None
    statistics: ContactStatistics | None = None


class CreateContactResponse(BrevoModel):
    id: int


class ContactsPage(BrevoModel):
    count: int
    contacts: list[Contact] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Contact attributes
# ---------------------------------------------------------------------------

AttributeType = Literal[
    "text", "date", "float", "boolean", "id", "category", "multiple_choice"
]


class AttributeEnumeration(BrevoModel):
    value: int
    label: str


class AttributeDefinition(BrevoModel):
    """Schema of one contact attribute as listed under /contacts/attributes."""

    name: str
    type: AttributeType
    category: str | None = None
    value: AttributeScalar | None = None
    enumeration: list[AttributeEnumeration] | None = None
    calculated_value: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None


class AttributeCategory(BrevoModel):
    name: str
    attributes: list[AttributeDefinition] = Field(default_factory=list)


class ListAttributesResponse(BrevoModel):
    attributes: list[AttributeDefinition] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------


class ContactList(BrevoModel):
    id: int
    name: str
    total_subscribers: int | None = None
    unique_subscribers: int | None = None
    total_blacklisted: int | None = None
    shared: bool | None = None
    folder_id: int | None = None
    created_at: str | None = None
    dynamic: bool | None = None


class CreateListResponse(BrevoModel):
    id: int


class ListsPage(BrevoModel):
    count: int
    lists: list[ContactList] = Field(default_factory=list)


class ContactsOutcome(BrevoModel):
    """Per-identifier result of adding contacts to a list."""

    success: list[Union[int, str]] = Field(default_factory=list)
    failure: list[Union[int, str]] = Field(default_factory=list)
    total: int | None = None


class AddContactsToListResponse(BrevoModel):
    contacts: ContactsOutcome


# ---------------------------------------------------------------------------
# Folders
# ---------------------------------------------------------------------------


class Folder(BrevoModel):
    id: int
    name: str
    unique_subscribers: int | None = None
    total_subscribers: int | None = None
    total_blacklisted: int | None = None


class CreateFolderResponse(BrevoModel):
    id: int


class FoldersPage(BrevoModel):
    count: int
    folders: list[Folder] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Transactional messages
# ---------------------------------------------------------------------------


class SendEmailResponse(BrevoModel):
    message_id: str | None = None
    message_ids: list[str] | None = None  # Batch sends


class SendSmsResponse(BrevoModel):
    message_id: Union[int, str]
    reference: str | None = None
    sms_count: int | None = None
    used_credits: float | None = None
    remaining_credits: float | None = None


# ---------------------------------------------------------------------------
# Marketing campaigns (read shapes only)
# ---------------------------------------------------------------------------


class CampaignSender(BrevoModel):
    name: str | None = None
    email: str


class CampaignStatistics(BrevoModel):
    delivered: int | None = None
    opened: int | None = None
    click: int | None = None


class Campaign(BrevoModel):
    id: int
    name: str
    subject: str | None = None
    sender: CampaignSender | None = None
    type: Literal["classic", "trigger"]
    status: Literal["draft", "sent", "archive", "queued", "suspended", "inProcess"]
    statistics: CampaignStatistics | None = None
    created_at: str | None = None
    modified_at: str | None = None


# ---------------------------------------------------------------------------
# Webhook events (payload shape only; nothing here receives them)
# ---------------------------------------------------------------------------

EmailEventType = Literal[
    "delivered",
    "opened",
    "clicked",
    "hardBounce",
    "softBounce",
    "spam",
    "invalidEmail",
    "deferred",
    "blocked",
    "unsubscribed",
    "error",
]


class EmailWebhookEvent(BrevoModel):
    """Transactional email event as posted by Brevo's webhook."""

    event: EmailEventType
    email: str
    id: Union[int, str]
    date: str
    subject: str | None = None
    tag: str | None = None
    message_id: str | None = None
    reason: str | None = None
    sending_ip: str | None = None
    ts: int | None = None
    ts_event: int | None = Field(default=None, alias="ts_event")
