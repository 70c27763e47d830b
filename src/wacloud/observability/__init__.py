"""Observabilidade: nome de diagnóstico propagado por contexto.

Uso:
    from wacloud.observability import get_request_name
"""

from wacloud.observability.request_name import (
    get_request_name,
    reset_request_name,
    set_request_name,
)

__all__ = [
    "get_request_name",
    "reset_request_name",
    "set_request_name",
]
