"""Pydantic request models for Brevo endpoints."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field, model_validator

from brevo_client.models.schemas import AttributeValue, BrevoModel

# Brevo caps identifiers per add-to-list call
MAX_CONTACTS_PER_CALL = 150


# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------


class CreateContactRequest(BrevoModel):
    """Create a contact, or update it when ``update_enabled`` is set."""

    email: str | None = None
    sms: str | None = None
    ext_id: str | None = None
    attributes: dict[str, AttributeValue] | None = None
    list_ids: list[int] | None = None
    update_enabled: bool | None = None
    email_blacklisted: bool | None = None
    sms_blacklisted: bool | None = None


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------


class CreateListRequest(BrevoModel):
    name: str = Field(..., min_length=1)
    folder_id: int | None = None


class _Selector(BrevoModel):
    """One way of naming existing contacts; never mixed with another."""

    model_config = {**BrevoModel.model_config, "extra": "forbid"}


class ContactsByEmail(_Selector):
    kind: Literal["email"] = "email"
    emails: list[str] = Field(..., min_length=1, max_length=MAX_CONTACTS_PER_CALL)


class ContactsById(_Selector):
    kind: Literal["id"] = "id"
    ids: list[int] = Field(..., min_length=1, max_length=MAX_CONTACTS_PER_CALL)


class ContactsByExtId(_Selector):
    kind: Literal["ext_id"] = "ext_id"
    ext_ids: list[str] = Field(..., min_length=1, max_length=MAX_CONTACTS_PER_CALL)


ContactSelector = Annotated[
    Union[ContactsByEmail, ContactsById, ContactsByExtId],
    Field(discriminator="kind"),
]


def selector_payload(selector: ContactsByEmail | ContactsById | ContactsByExtId) -> dict:
    """Body for an add-to-list call: exactly one of emails / ids / extIds."""
    return selector.model_dump(by_alias=True, exclude={"kind"}, mode="json")


# ---------------------------------------------------------------------------
# Transactional email
# ---------------------------------------------------------------------------


class EmailRecipient(BrevoModel):
    email: str
    name: str | None = None


class EmailSender(EmailRecipient):
    id: int | None = None


class EmailAttachment(BrevoModel):
    """Attachment given either by absolute URL or base64 ``content``."""

    url: str | None = None
    content: str | None = None
    name: str | None = None

    @model_validator(mode="after")
    def _url_or_content(self) -> EmailAttachment:
        if self.url is None and self.content is None:
            raise ValueError("attachment needs either url or content")
        return self


class SendEmailRequest(BrevoModel):
    sender: EmailSender
    to: list[EmailRecipient] = Field(..., min_length=1)
    cc: list[EmailRecipient] | None = None
    bcc: list[EmailRecipient] | None = None
    reply_to: EmailRecipient | None = None
    subject: str | None = None
    html_content: str | None = None
    text_content: str | None = None
    template_id: int | None = None
    params: dict[str, Union[str, int, float, bool]] | None = None
    headers: dict[str, str] | None = None
    attachment: list[EmailAttachment] | None = None
    tags: list[str] | None = None

    @model_validator(mode="after")
    def _content_or_template(self) -> SendEmailRequest:
        if self.template_id is None and not (self.html_content or self.text_content):
            raise ValueError("either template_id or html_content/text_content is required")
        return self


# ---------------------------------------------------------------------------
# Transactional SMS
# ---------------------------------------------------------------------------


class SendSmsRequest(BrevoModel):
    sender: str = Field(..., min_length=1, max_length=11, pattern=r"^[A-Za-z0-9 ]+$")
    recipient: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    type: Literal["transactional", "marketing"] | None = None
    tag: str | None = None
    web_url: str | None = None
