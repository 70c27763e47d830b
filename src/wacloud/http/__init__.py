"""Camada genérica de construção e despacho de requisições à Graph API.

Componentes:
- urls: composição de URL (base, versão, sender, endpoints, query)
- body: extração do body a partir de payloads heterogêneos
- request: RequestContext, Request e RequestBuilder
- hooks: observadores pós-troca e hook de logging
- dispatcher: dispatch(), o pipeline completo de uma chamada
- errors / meta_errors: taxonomia de erros e parsing de erros da Meta
"""

from wacloud.http.body import extract_body
from wacloud.http.dispatcher import dispatch
from wacloud.http.errors import (
    DispatchError,
    IncompleteRequestError,
    InvalidBaseURLError,
    PayloadEncodingError,
    ResponseDecodeError,
    TransportError,
    UnexpectedStatusError,
    UnsupportedPayloadTypeError,
    URLCompositionError,
)
from wacloud.http.hooks import Hook, log_exchange
from wacloud.http.meta_errors import GraphApiError, is_permanent_error, parse_meta_error
from wacloud.http.request import Request, RequestBuilder, RequestContext, new_request
from wacloud.http.urls import GRAPH_API_BASE_URL, compose_url, url_from_context

__all__ = [
    "GRAPH_API_BASE_URL",
    "DispatchError",
    "GraphApiError",
    "Hook",
    "IncompleteRequestError",
    "InvalidBaseURLError",
    "PayloadEncodingError",
    "Request",
    "RequestBuilder",
    "RequestContext",
    "ResponseDecodeError",
    "TransportError",
    "URLCompositionError",
    "UnexpectedStatusError",
    "UnsupportedPayloadTypeError",
    "compose_url",
    "dispatch",
    "extract_body",
    "is_permanent_error",
    "log_exchange",
    "new_request",
    "parse_meta_error",
    "url_from_context",
]
