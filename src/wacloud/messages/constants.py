"""Enums de domínio para tipos de mensagem da Cloud API."""

from __future__ import annotations

from enum import StrEnum

MESSAGING_PRODUCT = "whatsapp"
RECIPIENT_TYPE_INDIVIDUAL = "individual"


class MessageType(StrEnum):
    """Tipos de conteúdo suportados pela API Meta/WhatsApp."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    STICKER = "sticker"
    LOCATION = "location"
    CONTACTS = "contacts"
    INTERACTIVE = "interactive"
    TEMPLATE = "template"
    REACTION = "reaction"


class MediaType(StrEnum):
    """Subconjunto de MessageType enviado como mídia."""

    AUDIO = "audio"
    DOCUMENT = "document"
    IMAGE = "image"
    STICKER = "sticker"
    VIDEO = "video"


class VerificationCodeMethod(StrEnum):
    """Canal de entrega do código de verificação do número."""

    SMS = "SMS"
    VOICE = "VOICE"
