"""Nome de diagnóstico da requisição em andamento.

O dispatcher define o nome (RequestContext.name) antes de enviar e o restaura
ao final; hooks e filtros de logging leem o valor daqui.
Usa ContextVar para ser thread/async-safe.

Uso:
    from wacloud.observability import get_request_name

    def my_hook(name, request, response):
        assert name == get_request_name()
"""

from __future__ import annotations

from contextvars import ContextVar, Token

_request_name: ContextVar[str] = ContextVar("request_name", default="")


def get_request_name() -> str:
    """Retorna o nome da requisição do contexto atual.

    Returns:
        Nome ou string vazia se não definido.
    """
    return _request_name.get()


def set_request_name(name: str) -> Token[str]:
    """Define o nome da requisição no contexto atual.

    Args:
        name: Rótulo de diagnóstico (pode ser vazio).

    Returns:
        Token para reset posterior via reset_request_name().
    """
    return _request_name.set(name)


def reset_request_name(token: Token[str]) -> None:
    """Restaura o nome ao valor anterior."""
    _request_name.reset(token)
