"""Bootstrap — inicialização e wiring.

Composition root: configura logging, valida settings e cria o caller.

Uso:
    from app.bootstrap import initialize_app, create_api_caller

    initialize_app()
    caller = create_api_caller()
    result = caller.call(HttpGetJson("https://api.example.com/items", {"page": 1}))
"""

from __future__ import annotations

import logging

from app.bootstrap.clients import create_api_caller, create_engine
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_api_caller_settings

SERVICE_NAME = "api_caller"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id e valida settings.

    Raises:
        RuntimeError: Se as settings forem inválidas.
    """
    settings = get_api_caller_settings()
    configure_logging(
        level=settings.log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings()


def initialize_test_app() -> None:
    """Logging em DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup; falha rápido se inválidas."""
    errors = [f"api_caller: {error}" for error in get_api_caller_settings().validate()]

    if not errors:
        logger.info("settings_validated", extra={"component": "bootstrap", "result": "ok"})
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "error_count": len(errors),
            "errors": errors,
        },
    )
    details = "\n".join(f"- {error}" for error in errors)
    raise RuntimeError(f"Configuração inválida:\n{details}")


__all__ = [
    "SERVICE_NAME",
    "create_api_caller",
    "create_engine",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
