"""Settings da WhatsApp Cloud API (Graph API).

Carregadas de variáveis de ambiente WHATSAPP_*.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from wacloud.http.urls import GRAPH_API_BASE_URL

GRAPH_API_VERSION: str = "v24.0"


@dataclass(frozen=True)
class CloudApiSettings:
    """Configurações de acesso à Cloud API.

    Attributes:
        access_token: Token de acesso à Graph API (Bearer)
        phone_number_id: ID do número de telefone no Meta Business
        business_account_id: ID da conta de negócios (WABA)
        api_version: Versão da Graph API (ex: v24.0)
        api_base_url: URL base da Graph API
        request_timeout_seconds: Prazo por chamada HTTP
    """

    access_token: str = ""
    phone_number_id: str = ""
    business_account_id: str = ""
    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL
    request_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.phone_number_id:
            errors.append("WHATSAPP_PHONE_NUMBER_ID não configurado")

        if not self.access_token:
            errors.append("WHATSAPP_ACCESS_TOKEN não configurado")

        if not self.api_base_url:
            errors.append("WHATSAPP_API_BASE_URL não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> CloudApiSettings:
    """Carrega CloudApiSettings a partir de variáveis de ambiente."""
    return CloudApiSettings(
        access_token=os.getenv("WHATSAPP_ACCESS_TOKEN", ""),
        phone_number_id=os.getenv("WHATSAPP_PHONE_NUMBER_ID", ""),
        business_account_id=os.getenv("WHATSAPP_BUSINESS_ACCOUNT_ID", ""),
        api_version=os.getenv("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
        api_base_url=os.getenv("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_cloud_api_settings() -> CloudApiSettings:
    """Retorna instância cacheada de CloudApiSettings."""
    return _load_from_env()
