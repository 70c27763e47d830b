"""Filters de logging para injeção de contexto.

Campos injetados:
- request_name: nome de diagnóstico da chamada em andamento
- service: nome do serviço que usa a biblioteca
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class RequestNameFilter(logging.Filter):
    """Injeta request_name e service em cada record de log.

    Importante: nunca adicionar tokens, payloads brutos ou PII nos logs.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        request_name_getter: Função que retorna o request_name atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        request_name_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_request_name = request_name_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona request_name e service ao record.

        Se request_name já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "request_name", None)
        record.request_name = existing if existing else self._get_request_name()
        record.service = self._service_name
        return True
