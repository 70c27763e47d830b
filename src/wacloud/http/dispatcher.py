"""Dispatcher genérico de chamadas à Graph API.

Pipeline linear, uma troca HTTP por chamada:
1. Compõe a URL (context + query)
2. Monta headers (Content-Type padrão, headers do chamador, Bearer)
3. Extrai o body (form-encoded ou payload)
4. Envia pelo httpx.AsyncClient injetado
5. Executa hooks (sempre que o transporte foi acionado)
6. Valida status 2xx
7. Decodifica o JSON no tipo alvo, se informado

Sem retry, rate limiting ou pool próprio: o chamador decide o que fazer com
cada erro e o pool pertence ao cliente httpx injetado.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from functools import lru_cache
from typing import Any, TypeVar, overload
from urllib.parse import urlencode

import httpx
from pydantic import TypeAdapter, ValidationError

from wacloud.http.body import extract_body
from wacloud.http.errors import (
    ResponseDecodeError,
    TransportError,
    UnexpectedStatusError,
)
from wacloud.http.hooks import Hook, run_hooks
from wacloud.http.request import Request
from wacloud.http.urls import url_from_context
from wacloud.observability.request_name import reset_request_name, set_request_name

T = TypeVar("T")

DEFAULT_METHOD = "POST"
JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_headers(request: Request) -> httpx.Headers:
    """Headers finais: padrão JSON, sobrescrito pelo chamador, depois Bearer."""
    headers = httpx.Headers({"Content-Type": JSON_CONTENT_TYPE})
    headers.update(dict(request.headers))
    if request.bearer:
        headers["Authorization"] = f"Bearer {request.bearer}"
    return headers


def build_body(request: Request, headers: httpx.Headers) -> bytes:
    """Body da requisição; form tem precedência sobre payload."""
    if request.form:
        headers["Content-Type"] = FORM_CONTENT_TYPE
        return urlencode(dict(request.form)).encode("ascii")
    return extract_body(request.payload)


def build_http_request(client: httpx.AsyncClient, request: Request) -> httpx.Request:
    """Monta o httpx.Request sem tocar na rede.

    Raises:
        URLCompositionError: Se a URL não puder ser composta.
        PayloadEncodingError: Se o payload não puder ser serializado.
    """
    url = url_from_context(request.context, request.query)
    method = (request.method or DEFAULT_METHOD).upper()
    headers = build_headers(request)
    body = build_body(request, headers)
    return client.build_request(method, url, headers=headers, content=body or None)


async def _send(
    client: httpx.AsyncClient,
    outgoing: httpx.Request,
    timeout: float | None,
) -> httpx.Response:
    deadline = asyncio.timeout(timeout)
    try:
        async with deadline:
            return await client.send(outgoing)
    except TimeoutError as exc:
        if deadline.expired():
            raise TransportError("transport_deadline_exceeded", timed_out=True) from exc
        raise TransportError(f"transport_timeout: {type(exc).__name__}", timed_out=True) from exc
    except httpx.TimeoutException as exc:
        raise TransportError(f"transport_timeout: {type(exc).__name__}", timed_out=True) from exc
    except httpx.HTTPError as exc:
        raise TransportError(f"transport_failed: {type(exc).__name__}") from exc


@lru_cache(maxsize=128)
def _cached_adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _adapter(target: Any) -> TypeAdapter[Any]:
    try:
        return _cached_adapter(target)
    except TypeError:
        # alvo não hasheável (ex: Annotated com metadata mutável)
        return TypeAdapter(target)


def decode_response(response: httpx.Response, target: type[T]) -> T:
    """Decodifica o body JSON no tipo alvo.

    Raises:
        ResponseDecodeError: JSON malformado ou incompatível com o schema.
    """
    try:
        return _adapter(target).validate_json(response.content)
    except ValidationError as exc:
        raise ResponseDecodeError(
            f"response_decode_failed: {exc.error_count()} error(s)"
        ) from exc


@overload
async def dispatch(
    client: httpx.AsyncClient,
    request: Request,
    target: None = None,
    *,
    hooks: Sequence[Hook] = (),
    timeout: float | None = None,
) -> httpx.Response: ...


@overload
async def dispatch(
    client: httpx.AsyncClient,
    request: Request,
    target: type[T],
    *,
    hooks: Sequence[Hook] = (),
    timeout: float | None = None,
) -> T: ...


async def dispatch(
    client: httpx.AsyncClient,
    request: Request,
    target: type[T] | None = None,
    *,
    hooks: Sequence[Hook] = (),
    timeout: float | None = None,
) -> T | httpx.Response:
    """Executa uma chamada completa e retorna o resultado decodificado.

    Args:
        client: Transporte HTTP injetado (pool e config são do chamador)
        request: Descritor da chamada
        target: Tipo para decodificar o JSON de resposta (pydantic TypeAdapter).
            Se None, retorna o httpx.Response bruto.
        hooks: Observadores chamados uma vez cada, em ordem, após o transporte
        timeout: Prazo em segundos para a troca HTTP (None = sem prazo extra)

    Returns:
        Instância de ``target`` ou o httpx.Response.

    Raises:
        URLCompositionError: URL inválida (nenhuma chamada de rede)
        PayloadEncodingError: Payload não serializável (nenhuma chamada de rede)
        TransportError: Falha de conexão, DNS ou prazo
        UnexpectedStatusError: Status fora de 2xx (body preservado)
        ResponseDecodeError: JSON de sucesso inválido para ``target``
    """
    outgoing = build_http_request(client, request)
    request_name = request.context.name

    token = set_request_name(request_name)
    response: httpx.Response | None = None
    try:
        response = await _send(client, outgoing, timeout)
    finally:
        run_hooks(hooks, request_name, outgoing, response)
        reset_request_name(token)

    if not response.is_success:
        raise UnexpectedStatusError(response.status_code, response.content, response)

    if target is None:
        return response
    return decode_response(response, target)
