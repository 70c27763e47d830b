"""Builders de payload pré-serializado (bytes) para reply e mídia.

O tipo da mensagem define o nome do campo de conteúdo ("text", "image", ...),
então o envelope é montado como dict e serializado aqui; o dispatcher envia
os bytes sem reprocessar.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from wacloud.http.body import encode_json
from wacloud.messages.constants import (
    MESSAGING_PRODUCT,
    RECIPIENT_TYPE_INDIVIDUAL,
    MediaType,
    MessageType,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pydantic import BaseModel

    from wacloud.messages.models import CacheOptions, Media


def build_reply_payload(
    recipient: str,
    message_id: str,
    message_type: MessageType | str,
    content: BaseModel | Mapping[str, Any],
) -> bytes:
    """Constrói payload de resposta a uma mensagem anterior.

    Args:
        recipient: Telefone ou wa_id do destinatário
        message_id: ID da mensagem respondida (context.message_id)
        message_type: Tipo do conteúdo (text, image, location...)
        content: Conteúdo do tipo informado

    Returns:
        JSON compacto em bytes.

    Raises:
        ValueError: Se message_id ou recipient estiverem vazios.
    """
    if not message_id:
        raise ValueError("message_id é obrigatório para reply")
    if not recipient:
        raise ValueError("recipient é obrigatório para reply")

    msg_type = str(message_type)
    payload: dict[str, Any] = {
        "messaging_product": MESSAGING_PRODUCT,
        "context": {"message_id": message_id},
        "to": recipient,
        "type": msg_type,
        msg_type: content,
    }
    return encode_json(payload)


def build_media_payload(
    recipient: str,
    media_type: MediaType | str,
    media: Media,
) -> bytes:
    """Constrói payload de mensagem de mídia.

    Exemplo (link):
        {"messaging_product":"whatsapp","recipient_type":"individual",
         "to":"PHONE","type":"image","image":{"link":"https://IMAGE_URL"}}

    Raises:
        ValueError: Se a mídia não tiver id nem link, ou tipo inválido.
    """
    if not media.id and not media.link:
        raise ValueError("media requer id ou link")

    kind = MediaType(media_type)
    payload: dict[str, Any] = {
        "messaging_product": MESSAGING_PRODUCT,
        "recipient_type": RECIPIENT_TYPE_INDIVIDUAL,
        "to": recipient,
        "type": str(kind),
        str(kind): media,
    }
    return encode_json(payload)


def cache_headers(options: CacheOptions | None) -> dict[str, str]:
    """Converte CacheOptions nos headers de cache da requisição."""
    if options is None:
        return {}

    headers: dict[str, str] = {}
    if options.cache_control:
        headers["Cache-Control"] = options.cache_control
    elif options.expires and options.expires > 0:
        headers["Cache-Control"] = f"max-age={options.expires}"
    if options.last_modified:
        headers["Last-Modified"] = options.last_modified
    if options.etag:
        headers["ETag"] = options.etag
    return headers
