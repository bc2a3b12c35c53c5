"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app.bootstrap)
    configure_logging(level="INFO", service_name="api_caller")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("api_call_completed", extra={"status_code": 200})

Campos em todo log: asctime, level, logger, message, correlation_id, service.
Nunca logar corpos de request/response.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
