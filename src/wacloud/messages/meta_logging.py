"""Helpers de logging para erros da Graph API (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wacloud.http.meta_errors import GraphApiError

logger = logging.getLogger(__name__)


def log_meta_error(
    meta_error: GraphApiError,
    request_name: str,
    status_code: int,
) -> None:
    """Loga erro da Meta sem expor tokens, números ou mensagens do usuário."""
    logger.warning(
        "graph_api_error",
        extra={
            "request_name": request_name,
            "status_code": status_code,
            "error_type": meta_error.error_type,
            "error_code": meta_error.error_code,
            "error_subcode": meta_error.error_subcode,
            "fbtrace_id": meta_error.fbtrace_id,
            "is_permanent": meta_error.is_permanent,
        },
    )
