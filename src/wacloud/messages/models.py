"""Modelos de payload e resposta da Cloud API.

Campos None são omitidos na serialização (extract_body usa exclude_none).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from wacloud.messages.constants import (
    MESSAGING_PRODUCT,
    RECIPIENT_TYPE_INDIVIDUAL,
    MessageType,
)


class Text(BaseModel):
    """Conteúdo de mensagem de texto."""

    preview_url: bool = False
    body: str


class Location(BaseModel):
    """Conteúdo de mensagem de localização."""

    latitude: float
    longitude: float
    name: str | None = None
    address: str | None = None


class Reaction(BaseModel):
    """Reação (emoji) a uma mensagem existente.

    Emoji vazio remove a reação anterior.
    """

    message_id: str
    emoji: str


class Context(BaseModel):
    """Referência à mensagem respondida (bolha contextual)."""

    message_id: str


class ContactName(BaseModel):
    formatted_name: str
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None


class ContactPhone(BaseModel):
    phone: str
    type: str | None = None
    wa_id: str | None = None


class ContactEmail(BaseModel):
    email: str
    type: str | None = None


class ContactUrl(BaseModel):
    url: str
    type: str | None = None


class ContactAddress(BaseModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = None
    type: str | None = None


class ContactOrg(BaseModel):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class Contact(BaseModel):
    """Cartão de contato enviado em mensagens do tipo contacts."""

    name: ContactName
    phones: list[ContactPhone] | None = None
    emails: list[ContactEmail] | None = None
    urls: list[ContactUrl] | None = None
    addresses: list[ContactAddress] | None = None
    org: ContactOrg | None = None
    birthday: str | None = Field(default=None, description="Formato YYYY-MM-DD.")


class TemplateLanguage(BaseModel):
    code: str
    policy: str | None = None


class TemplateParameter(BaseModel):
    """Parâmetro de componente de template.

    Apenas o campo correspondente a ``type`` deve ser preenchido
    (ex: type="text" -> text; type="image" -> image).
    """

    model_config = ConfigDict(extra="allow")

    type: str
    text: str | None = None
    payload: str | None = None
    currency: dict[str, Any] | None = None
    date_time: dict[str, Any] | None = None
    image: dict[str, Any] | None = None
    document: dict[str, Any] | None = None
    video: dict[str, Any] | None = None


class TemplateComponent(BaseModel):
    type: str
    sub_type: str | None = None
    index: str | None = None
    parameters: list[TemplateParameter] | None = None


class Template(BaseModel):
    name: str
    language: TemplateLanguage
    components: list[TemplateComponent] | None = None


class Media(BaseModel):
    """Mídia referenciada por ID (upload prévio) ou link público."""

    id: str | None = None
    link: str | None = None
    caption: str | None = None
    filename: str | None = None
    provider: str | None = None


class Message(BaseModel):
    """Envelope de mensagem enviado para /{phone_number_id}/messages."""

    messaging_product: str = MESSAGING_PRODUCT
    recipient_type: str | None = RECIPIENT_TYPE_INDIVIDUAL
    to: str
    type: MessageType
    context: Context | None = None
    text: Text | None = None
    location: Location | None = None
    reaction: Reaction | None = None
    contacts: list[Contact] | None = None
    template: Template | None = None
    image: Media | None = None
    audio: Media | None = None
    video: Media | None = None
    document: Media | None = None
    sticker: Media | None = None


class MessageStatusUpdate(BaseModel):
    """Payload de confirmação de leitura."""

    messaging_product: str = MESSAGING_PRODUCT
    status: str = "read"
    message_id: str


class CacheOptions(BaseModel):
    """Opções de cache HTTP para mídia enviada por link.

    Viram os headers Cache-Control, Last-Modified e ETag da requisição.
    ``cache_control`` tem precedência sobre ``expires`` (max-age em segundos).
    """

    cache_control: str | None = None
    last_modified: str | None = None
    etag: str | None = None
    expires: int | None = None


class ResponseContact(BaseModel):
    model_config = ConfigDict(extra="ignore")

    input: str | None = None
    wa_id: str | None = None


class ResponseMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    message_status: str | None = None


class MessageResponse(BaseModel):
    """Resposta de envio: ID da mensagem prefixado com wamid."""

    model_config = ConfigDict(extra="ignore")

    messaging_product: str = MESSAGING_PRODUCT
    contacts: list[ResponseContact] = Field(default_factory=list)
    messages: list[ResponseMessage] = Field(default_factory=list)

    @property
    def message_id(self) -> str | None:
        """ID da primeira mensagem aceita, se houver."""
        return self.messages[0].id if self.messages else None


class StatusResponse(BaseModel):
    """Resposta de operações sem corpo de domínio (read, verify, delete)."""

    model_config = ConfigDict(extra="ignore")

    success: bool = False
