"""Taxonomia de erros do dispatcher HTTP.

Erros detectados antes da rede (URL, payload, request incompleto) não têm
efeitos colaterais. Os demais carregam o contexto da troca HTTP para
diagnóstico. Nenhum erro é logado ou retentado dentro do core.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from wacloud.http.meta_errors import GraphApiError


class DispatchError(Exception):
    """Base para falhas de montagem ou execução de uma chamada."""


class URLCompositionError(DispatchError):
    """Falha ao compor a URL da requisição."""


class InvalidBaseURLError(URLCompositionError):
    """base_url vazia ou não absoluta."""

    def __init__(self, base_url: str) -> None:
        super().__init__(f"invalid_base_url: {base_url!r}")
        self.base_url = base_url


class PayloadEncodingError(DispatchError):
    """Falha ao serializar o payload para bytes."""


class UnsupportedPayloadTypeError(PayloadEncodingError):
    """Payload com formato não suportado pelo extrator de body."""

    def __init__(self, payload_type: str) -> None:
        super().__init__(f"unsupported_payload_type: {payload_type}")
        self.payload_type = payload_type


class IncompleteRequestError(DispatchError):
    """Request finalizado sem campo obrigatório (context/base_url)."""


class TransportError(DispatchError):
    """Falha de transporte (conexão, DNS, timeout).

    A causa original fica em ``__cause__``.
    """

    def __init__(self, message: str, *, timed_out: bool = False) -> None:
        super().__init__(message)
        self.timed_out = timed_out


class UnexpectedStatusError(DispatchError):
    """Resposta com status fora da faixa 2xx.

    O body é preservado sem decodificação para inspeção pelo chamador.
    """

    def __init__(
        self,
        status_code: int,
        body: bytes,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(f"unexpected_status: {status_code}")
        self.status_code = status_code
        self.body = body
        self.response = response

    @property
    def meta_error(self) -> GraphApiError | None:
        """Erro da Graph API contido no body, se houver."""
        from wacloud.http.meta_errors import parse_meta_error_body

        return parse_meta_error_body(self.body)


class ResponseDecodeError(DispatchError):
    """Body de sucesso com JSON malformado ou fora do schema esperado."""
