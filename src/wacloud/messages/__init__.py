"""Operações de mensagens da Cloud API sobre o dispatcher genérico.

Responsabilidades:
- Modelos de payload (texto, localização, reação, contatos, template, mídia)
- Builders de payload pré-serializado (reply, mídia) e headers de cache
- CloudApiClient: uma operação por endpoint, sem retry
"""

from wacloud.messages.client import CloudApiClient, create_cloud_api_client
from wacloud.messages.constants import MediaType, MessageType, VerificationCodeMethod
from wacloud.messages.models import (
    CacheOptions,
    Contact,
    ContactName,
    ContactPhone,
    Location,
    Media,
    Message,
    MessageResponse,
    Reaction,
    StatusResponse,
    Template,
    TemplateComponent,
    TemplateLanguage,
    TemplateParameter,
    Text,
)
from wacloud.messages.payloads import build_media_payload, build_reply_payload, cache_headers

__all__ = [
    "CacheOptions",
    "CloudApiClient",
    "Contact",
    "ContactName",
    "ContactPhone",
    "Location",
    "Media",
    "MediaType",
    "Message",
    "MessageResponse",
    "MessageType",
    "Reaction",
    "StatusResponse",
    "Template",
    "TemplateComponent",
    "TemplateLanguage",
    "TemplateParameter",
    "Text",
    "VerificationCodeMethod",
    "build_media_payload",
    "build_reply_payload",
    "cache_headers",
    "create_cloud_api_client",
]
