"""Public models for the Brevo client."""

from brevo_client.models.requests import (
    ContactSelector,
    ContactsByEmail,
    ContactsByExtId,
    ContactsById,
    CreateContactRequest,
    CreateListRequest,
    EmailAttachment,
    EmailRecipient,
    EmailSender,
    SendEmailRequest,
    SendSmsRequest,
)
from brevo_client.models.responses import ApiError, ApiResponse, StatusResult
from brevo_client.models.schemas import (
    AddContactsToListResponse,
    AttributeCategory,
    AttributeDefinition,
    AttributeEnumeration,
    Campaign,
    CampaignSender,
    CampaignStatistics,
    Contact,
    ContactList,
    ContactsPage,
    ContactStatistics,
    CreateContactResponse,
    CreateFolderResponse,
    CreateListResponse,
    EmailWebhookEvent,
    Folder,
    FoldersPage,
    ListAttributesResponse,
    ListsPage,
    SendEmailResponse,
    SendSmsResponse,
)

__all__ = [
    "AddContactsToListResponse",
    "ApiError",
    "ApiResponse",
    "AttributeCategory",
    "AttributeDefinition",
    "AttributeEnumeration",
    "Campaign",
    "CampaignSender",
    "CampaignStatistics",
    "Contact",
    "ContactList",
    "ContactSelector",
    "ContactStatistics",
    "ContactsByEmail",
    "ContactsByExtId",
    "ContactsById",
    "ContactsPage",
    "CreateContactRequest",
    "CreateContactResponse",
    "CreateFolderResponse",
    "CreateListRequest",
    "CreateListResponse",
    "EmailAttachment",
    "EmailRecipient",
    "EmailSender",
    "EmailWebhookEvent",
    "Folder",
    "FoldersPage",
    "ListAttributesResponse",
    "ListsPage",
    "SendEmailRequest",
    "SendEmailResponse",
    "SendSmsRequest",
    "SendSmsResponse",
    "StatusResult",
]
