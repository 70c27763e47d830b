"""Hooks de observação executados após cada troca HTTP.

Um hook recebe (request_name, request, response) e não retorna nada.
``response`` é None quando o transporte falhou. Hooks são puramente
observacionais: exceções são logadas e nunca alteram o resultado da chamada.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeAlias

import httpx

logger = logging.getLogger(__name__)

Hook: TypeAlias = Callable[[str, httpx.Request, httpx.Response | None], None]


def run_hooks(
    hooks: Sequence[Hook],
    request_name: str,
    request: httpx.Request,
    response: httpx.Response | None,
) -> None:
    """Executa os hooks em ordem de registro, uma vez cada."""
    for hook in hooks:
        try:
            hook(request_name, request, response)
        except Exception:
            logger.warning(
                "dispatch_hook_failed",
                extra={
                    "request_name": request_name,
                    "hook": getattr(hook, "__name__", type(hook).__name__),
                },
                exc_info=True,
            )


def _elapsed_ms(response: httpx.Response) -> float | None:
    try:
        return round(response.elapsed.total_seconds() * 1000, 2)
    except RuntimeError:
        # elapsed só existe após o fechamento da resposta
        return None


def log_exchange(
    request_name: str,
    request: httpx.Request,
    response: httpx.Response | None,
) -> None:
    """Hook que loga a troca sem expor dados sensíveis.

    Loga apenas método, path (sem query, onde pode haver access_token),
    status e latência. Nunca loga headers, body ou números de telefone.
    """
    extra: dict[str, object] = {
        "request_name": request_name,
        "method": request.method,
        "path": request.url.path,
    }
    if response is None:
        logger.warning("graph_api_exchange", extra={**extra, "transport_failed": True})
        return

    extra["status_code"] = response.status_code
    extra["elapsed_ms"] = _elapsed_ms(response)
    if response.is_success:
        logger.debug("graph_api_exchange", extra=extra)
    else:
        logger.warning("graph_api_exchange", extra=extra)
