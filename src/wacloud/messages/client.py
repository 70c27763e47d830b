"""Cliente de alto nível para a WhatsApp Cloud API.

Cada operação monta um Request e delega ao dispatcher genérico:
- Validação de access_token e phone_number_id antes de montar a chamada
- Nome de diagnóstico por operação (propagado aos hooks e logs)
- Logging estruturado de erros Meta sem PII; o erro é sempre repropagado
- Sem retry: o chamador decide como tratar cada erro
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from wacloud.config.settings import get_cloud_api_settings
from wacloud.http.dispatcher import dispatch
from wacloud.http.errors import UnexpectedStatusError
from wacloud.http.request import Request, RequestBuilder, RequestContext
from wacloud.messages.constants import MessageType, VerificationCodeMethod
from wacloud.messages.meta_logging import log_meta_error
from wacloud.messages.models import (
    CacheOptions,
    Contact,
    Location,
    Media,
    Message,
    MessageResponse,
    MessageStatusUpdate,
    Reaction,
    StatusResponse,
    Template,
    TemplateComponent,
    TemplateLanguage,
    Text,
)
from wacloud.messages.payloads import build_media_payload, build_reply_payload, cache_headers

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from pydantic import BaseModel

    from wacloud.config.settings import CloudApiSettings
    from wacloud.http.hooks import Hook
    from wacloud.messages.constants import MediaType

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")

MESSAGES_ENDPOINT = "messages"


class CloudApiClient:
    """Cliente da Cloud API ligado a um número (phone_number_id).

    Exemplo:
        async with create_cloud_api_client() as client:
            response = await client.send_text("5511999999999", "Olá!")
            print(response.message_id)
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: CloudApiSettings,
        hooks: Sequence[Hook] = (),
        *,
        owns_http_client: bool = False,
    ) -> None:
        """Inicializa o cliente.

        Args:
            http_client: Transporte HTTP (pool e limites são dele)
            settings: Credenciais, versão e base da API
            hooks: Observadores aplicados a todas as chamadas
            owns_http_client: Se True, aclose() fecha o http_client
        """
        self._http = http_client
        self._settings = settings
        self._hooks = tuple(hooks)
        self._owns_http_client = owns_http_client

    @property
    def settings(self) -> CloudApiSettings:
        return self._settings

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> CloudApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Montagem
    # ------------------------------------------------------------------

    def _access_token(self, request_name: str) -> str:
        token = self._settings.access_token
        if not token or not token.strip():
            logger.error(
                "access_token ausente ou vazio",
                extra={"request_name": request_name},
            )
            raise ValueError(
                "access_token é obrigatório. "
                "Verifique se WHATSAPP_ACCESS_TOKEN está configurado."
            )
        return token.strip()

    def _phone_number_id(self) -> str:
        if not self._settings.phone_number_id:
            raise ValueError("phone_number_id é obrigatório")
        return self._settings.phone_number_id

    def _builder(
        self,
        name: str,
        sender_id: str,
        *endpoints: str,
        method: str = "POST",
    ) -> RequestBuilder:
        context = RequestContext(
            base_url=self._settings.api_base_url,
            name=name,
            api_version=self._settings.api_version,
            sender_id=sender_id,
            endpoints=endpoints,
        )
        return (
            RequestBuilder()
            .with_context(context)
            .with_method(method)
            .with_bearer(self._access_token(name))
        )

    def _message_request(
        self,
        name: str,
        payload: Message | bytes,
        headers: Mapping[str, str] | None = None,
    ) -> Request:
        builder = self._builder(name, self._phone_number_id(), MESSAGES_ENDPOINT)
        if headers:
            builder.with_headers(headers)
        return builder.with_payload(payload).build()

    async def _dispatch(self, request: Request, target: type[T]) -> T:
        try:
            return await dispatch(
                self._http,
                request,
                target,
                hooks=self._hooks,
                timeout=self._settings.request_timeout_seconds,
            )
        except UnexpectedStatusError as exc:
            meta_error = exc.meta_error
            if meta_error is not None:
                log_meta_error(meta_error, request.context.name, exc.status_code)
            raise

    # ------------------------------------------------------------------
    # Mensagens
    # ------------------------------------------------------------------

    async def send_message(
        self,
        message: Message,
        *,
        name: str = "send message",
        headers: Mapping[str, str] | None = None,
    ) -> MessageResponse:
        """Envia um envelope Message já montado para /{phone_number_id}/messages."""
        request = self._message_request(name, message, headers)
        return await self._dispatch(request, MessageResponse)

    async def send_text(
        self,
        recipient: str,
        body: str,
        *,
        preview_url: bool = False,
    ) -> MessageResponse:
        """Envia mensagem de texto."""
        message = Message(
            to=recipient,
            type=MessageType.TEXT,
            text=Text(preview_url=preview_url, body=body),
        )
        return await self.send_message(message, name="send text")

    async def send_location(
        self,
        recipient: str,
        latitude: float,
        longitude: float,
        *,
        name: str | None = None,
        address: str | None = None,
    ) -> MessageResponse:
        """Envia mensagem de localização."""
        message = Message(
            to=recipient,
            type=MessageType.LOCATION,
            location=Location(
                latitude=latitude,
                longitude=longitude,
                name=name,
                address=address,
            ),
        )
        return await self.send_message(message, name="send location")

    async def react(self, recipient: str, message_id: str, emoji: str) -> MessageResponse:
        """Reage a uma mensagem com um emoji.

        Reações a mensagens com mais de 30 dias, apagadas ou que sejam
        reações não são entregues; a Meta notifica via webhook (código 131009).
        """
        message = Message(
            to=recipient,
            recipient_type=None,
            type=MessageType.REACTION,
            reaction=Reaction(message_id=message_id, emoji=emoji),
        )
        return await self.send_message(message, name="react")

    async def send_contacts(self, recipient: str, contacts: Sequence[Contact]) -> MessageResponse:
        """Envia um ou mais cartões de contato."""
        if not contacts:
            raise ValueError("contacts não pode ser vazio")
        message = Message(
            to=recipient,
            type=MessageType.CONTACTS,
            contacts=list(contacts),
        )
        return await self.send_message(message, name="send contacts")

    async def send_template(
        self,
        recipient: str,
        template_name: str,
        language_code: str,
        *,
        language_policy: str | None = None,
        components: Sequence[TemplateComponent] | None = None,
    ) -> MessageResponse:
        """Envia mensagem de template aprovado."""
        message = Message(
            to=recipient,
            type=MessageType.TEMPLATE,
            template=Template(
                name=template_name,
                language=TemplateLanguage(code=language_code, policy=language_policy),
                components=list(components) if components else None,
            ),
        )
        return await self.send_message(message, name="send template")

    async def send_media(
        self,
        recipient: str,
        media_type: MediaType | str,
        media: Media,
        *,
        cache: CacheOptions | None = None,
    ) -> MessageResponse:
        """Envia mídia (audio, document, image, sticker, video) por ID ou link.

        Com ``cache``, adiciona os headers Cache-Control/Last-Modified/ETag
        para que a Meta reutilize o asset servido pelo link.
        """
        payload = build_media_payload(recipient, media_type, media)
        request = self._message_request("send media", payload, cache_headers(cache))
        return await self._dispatch(request, MessageResponse)

    async def reply(
        self,
        recipient: str,
        message_id: str,
        message_type: MessageType | str,
        content: BaseModel | Mapping[str, Any],
    ) -> MessageResponse:
        """Responde a uma mensagem anterior com bolha contextual.

        O destinatário não vê a bolha em respostas com template nem em mídia
        (imagem, vídeo, PTT, áudio) quando usa KaiOS.
        """
        payload = build_reply_payload(recipient, message_id, message_type, content)
        request = self._message_request("reply", payload)
        return await self._dispatch(request, MessageResponse)

    async def mark_message_read(self, message_id: str) -> StatusResponse:
        """Marca uma mensagem recebida como lida (dois checks azuis).

        O token vai tanto no header Authorization quanto na query
        ``access_token``, como este endpoint exige.
        """
        name = "mark message read"
        token = self._access_token(name)
        request = (
            self._builder(name, self._phone_number_id(), MESSAGES_ENDPOINT)
            .with_query({"access_token": token})
            .with_payload(MessageStatusUpdate(message_id=message_id))
            .build()
        )
        return await self._dispatch(request, StatusResponse)

    # ------------------------------------------------------------------
    # Número de telefone e mídia
    # ------------------------------------------------------------------

    async def request_verification_code(
        self,
        code_method: VerificationCodeMethod | str,
        language: str,
    ) -> StatusResponse:
        """Solicita código de verificação do número por SMS ou voz."""
        method = VerificationCodeMethod(code_method)
        request = (
            self._builder("request verification code", self._phone_number_id(), "request_code")
            .with_form({"code_method": str(method), "language": language})
            .build()
        )
        return await self._dispatch(request, StatusResponse)

    async def verify_code(self, code: str) -> StatusResponse:
        """Confirma o código de verificação recebido."""
        if not code:
            raise ValueError("code é obrigatório")
        request = (
            self._builder("verify code", self._phone_number_id(), "verify_code")
            .with_form({"code": code})
            .build()
        )
        return await self._dispatch(request, StatusResponse)

    async def delete_media(self, media_id: str) -> StatusResponse:
        """Remove mídia enviada anteriormente (DELETE /{media_id})."""
        if not media_id:
            raise ValueError("media_id é obrigatório")
        request = self._builder("delete media", media_id, method="DELETE").build()
        return await self._dispatch(request, StatusResponse)


def create_cloud_api_client(
    settings: CloudApiSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
    hooks: Sequence[Hook] = (),
) -> CloudApiClient:
    """Factory para criar o cliente com config padrão.

    Args:
        settings: CloudApiSettings opcional. Se None, carrega do ambiente.
        http_client: Transporte opcional. Se None, cria um httpx.AsyncClient
            que passa a pertencer ao cliente (fechado em aclose()).
        hooks: Observadores aplicados a todas as chamadas.

    Returns:
        Cliente configurado.
    """
    cloud = settings or get_cloud_api_settings()
    owns = http_client is None
    transport = http_client or httpx.AsyncClient(timeout=cloud.request_timeout_seconds)
    return CloudApiClient(transport, cloud, hooks, owns_http_client=owns)
