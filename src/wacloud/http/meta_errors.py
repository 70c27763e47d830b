"""Erros e helpers de parsing para a Graph API (Meta/WhatsApp)."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

PERMANENT_ERROR_CODES = frozenset({400, 401, 403, 404, 413})
PERMANENT_ERROR_TYPES = frozenset({"OAuthException", "InvalidRequest"})


@dataclass(frozen=True)
class GraphApiError:
    """Erro retornado pela Graph API no campo ``error``."""

    error_type: str
    error_code: int
    error_message: str
    is_permanent: bool  # True se erro não é retentável
    error_subcode: int | None = None
    fbtrace_id: str | None = None


def is_permanent_error(error_code: int, error_type: str) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros permanentes: 400, 401, 403, 404, 413
    Erros transitórios: 429 (rate limit), 500+ (server errors)

    A classificação é apenas informativa: a biblioteca não retenta.
    """
    if error_code in PERMANENT_ERROR_CODES:
        return True
    return error_type in PERMANENT_ERROR_TYPES


def parse_meta_error(response_data: dict[str, Any]) -> GraphApiError | None:
    """Extrai informações de erro do response da Meta.

    Args:
        response_data: Dict do response JSON

    Returns:
        GraphApiError se houver erro, None caso contrário
    """
    error_obj = response_data.get("error")
    if not error_obj or not isinstance(error_obj, dict):
        return None

    error_type = str(error_obj.get("type", "unknown"))
    error_code = error_obj.get("code", 0)
    if not isinstance(error_code, int):
        error_code = 0
    subcode = error_obj.get("error_subcode")

    return GraphApiError(
        error_type=error_type,
        error_code=error_code,
        error_message=str(error_obj.get("message", "Erro desconhecido")),
        is_permanent=is_permanent_error(error_code, error_type),
        error_subcode=subcode if isinstance(subcode, int) else None,
        fbtrace_id=error_obj.get("fbtrace_id"),
    )


def parse_meta_error_body(body: bytes) -> GraphApiError | None:
    """Variante de parse_meta_error para body bruto (ex: respostas não-2xx)."""
    try:
        data = json.loads(body) if body else None
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    return parse_meta_error(data)
