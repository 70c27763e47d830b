"""Descritores de requisição e builder de opções.

RequestContext diz onde chamar; Request diz como (método, headers, auth, body).
Ambos são imutáveis e construídos por chamada.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from wacloud.http.errors import IncompleteRequestError


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Alvo de uma chamada à Graph API.

    Attributes:
        base_url: Esquema + host (obrigatório para despacho)
        name: Rótulo de diagnóstico (propagado aos hooks)
        api_version: Versão da API (ex: v24.0), omitida se vazia
        sender_id: Recurso que age (ex: phone_number_id, media_id)
        endpoints: Segmentos adicionais de path (ex: ("messages",))
    """

    base_url: str
    name: str = ""
    api_version: str = ""
    sender_id: str = ""
    endpoints: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Request:
    """Descrição completa de uma chamada.

    Se ``form`` não estiver vazio, o body é form-encoded e ``payload`` é ignorado.
    ``method`` None equivale a POST.
    """

    context: RequestContext
    method: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, str] = field(default_factory=dict)
    bearer: str = ""
    form: Mapping[str, str] = field(default_factory=dict)
    payload: Any = None


class RequestBuilder:
    """Monta um Request a partir de opções nomeadas.

    Cada ``with_*`` define um único campo; aplicar o mesmo campo duas vezes
    mantém o último valor. ``build()`` valida os campos obrigatórios.

    Exemplo:
        request = (
            RequestBuilder()
            .with_context(RequestContext(base_url=GRAPH_API_BASE_URL, name="send text"))
            .with_method("POST")
            .with_bearer(token)
            .with_payload(message)
            .build()
        )
    """

    def __init__(self) -> None:
        self.context: RequestContext | None = None
        self.method: str | None = None
        self.headers: dict[str, str] = {}
        self.query: dict[str, str] = {}
        self.bearer: str = ""
        self.form: dict[str, str] = {}
        self.payload: Any = None

    def with_context(self, context: RequestContext) -> RequestBuilder:
        self.context = context
        return self

    def with_method(self, method: str) -> RequestBuilder:
        self.method = method.upper() if method else None
        return self

    def with_headers(self, headers: Mapping[str, str]) -> RequestBuilder:
        self.headers = dict(headers)
        return self

    def with_query(self, query: Mapping[str, str]) -> RequestBuilder:
        self.query = dict(query)
        return self

    def with_bearer(self, token: str) -> RequestBuilder:
        self.bearer = token
        return self

    def with_form(self, form: Mapping[str, str]) -> RequestBuilder:
        self.form = dict(form)
        return self

    def with_payload(self, payload: Any) -> RequestBuilder:
        self.payload = payload
        return self

    def build(self) -> Request:
        """Finaliza o Request.

        Raises:
            IncompleteRequestError: Se context ausente ou base_url vazia.
        """
        if self.context is None:
            raise IncompleteRequestError("request_context_missing")
        if not self.context.base_url:
            raise IncompleteRequestError("request_base_url_missing")
        return Request(
            context=self.context,
            method=self.method,
            headers=MappingProxyType(dict(self.headers)),
            query=MappingProxyType(dict(self.query)),
            bearer=self.bearer,
            form=MappingProxyType(dict(self.form)),
            payload=self.payload,
        )


def new_request(
    *,
    context: RequestContext | None = None,
    method: str | None = None,
    headers: Mapping[str, str] | None = None,
    query: Mapping[str, str] | None = None,
    bearer: str = "",
    form: Mapping[str, str] | None = None,
    payload: Any = None,
) -> Request:
    """Atalho para RequestBuilder com argumentos nomeados."""
    builder = RequestBuilder().with_bearer(bearer).with_payload(payload)
    if context is not None:
        builder.with_context(context)
    if method:
        builder.with_method(method)
    if headers:
        builder.with_headers(headers)
    if query:
        builder.with_query(query)
    if form:
        builder.with_form(form)
    return builder.build()
