"""Composição de URLs da Graph API.

Formato: {base_url}/{api_version}/{sender_id}/{endpoints...}?{query}

Fragmentos vazios são omitidos sem deixar separadores duplicados.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from wacloud.http.errors import InvalidBaseURLError, URLCompositionError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from wacloud.http.request import RequestContext

GRAPH_API_BASE_URL: str = "https://graph.facebook.com"


def _parse_base_url(base_url: str) -> httpx.URL:
    if not base_url or not base_url.strip():
        raise InvalidBaseURLError(base_url)
    try:
        url = httpx.URL(base_url.strip())
    except httpx.InvalidURL as exc:
        raise InvalidBaseURLError(base_url) from exc
    if not url.scheme or not url.host:
        raise InvalidBaseURLError(base_url)
    return url


def _join_path(base_path: str, fragments: tuple[str, ...]) -> str | None:
    parts = [fragment.strip("/") for fragment in fragments if fragment]
    parts = [part for part in parts if part]
    if not parts:
        return None
    prefix = base_path.rstrip("/")
    return f"{prefix}/{'/'.join(parts)}"


def compose_url(
    base_url: str,
    api_version: str = "",
    sender_id: str = "",
    *endpoints: str,
    query: Mapping[str, str] | None = None,
) -> str:
    """Compõe URL absoluta a partir dos fragmentos informados.

    Args:
        base_url: Esquema + host (ex: https://graph.facebook.com). Obrigatório.
        api_version: Versão da API (ex: v24.0). Omitida se vazia.
        sender_id: Segmento do recurso que age (ex: phone_number_id).
        endpoints: Segmentos adicionais, na ordem informada.
        query: Parâmetros de query, codificados na ordem de inserção.

    Returns:
        URL absoluta como string.

    Raises:
        InvalidBaseURLError: Se base_url vazia ou não absoluta.
        URLCompositionError: Se os fragmentos não formam uma URL válida.
    """
    url = _parse_base_url(base_url)
    path = _join_path(url.path, (api_version, sender_id, *endpoints))
    try:
        if path is not None:
            url = url.copy_with(path=path)
        if query:
            url = url.copy_merge_params(dict(query))
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise URLCompositionError(f"url_composition_failed: {exc}") from exc
    return str(url)


def url_from_context(
    context: RequestContext,
    query: Mapping[str, str] | None = None,
) -> str:
    """Compõe a URL de um RequestContext."""
    return compose_url(
        context.base_url,
        context.api_version,
        context.sender_id,
        *context.endpoints,
        query=query,
    )
