"""Configuração de logging estruturado (JSON via python-json-logger).

Uso:
    from wacloud.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="my_service")
    logger = get_logger(__name__)

Campos obrigatórios em todo log:
- request_name
- service
- level
- logger
- message
- asctime
"""

from wacloud.config.logging.config import configure_logging, get_logger
from wacloud.config.logging.filters import RequestNameFilter
from wacloud.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "RequestNameFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
