"""Factories do engine de transporte e do caller de APIs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.http import HttpxEngine
from app.services.api_caller import LoggingApiCaller

if TYPE_CHECKING:
    import httpx

    from config.settings import ApiCallerSettings

logger = logging.getLogger(__name__)


def create_engine(transport: httpx.BaseTransport | None = None) -> HttpxEngine:
    """Cria engine httpx (transport opcional para testes)."""
    return HttpxEngine(transport=transport)


def create_api_caller(
    settings: ApiCallerSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> LoggingApiCaller:
    """Cria LoggingApiCaller com opções padrão das settings.

    Args:
        settings: ApiCallerSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx opcional.

    Returns:
        Caller com engine httpx próprio.
    """
    # Import local para evitar dependência circular
    from config.settings import get_api_caller_settings

    caller_settings = settings or get_api_caller_settings()
    caller = LoggingApiCaller(
        engine=create_engine(transport),
        options=caller_settings.engine_options(),
        fresh_connection=caller_settings.fresh_connection,
    )
    logger.info(
        "api_caller_created",
        extra={
            "option_count": len(caller.options),
            "fresh_connection": caller_settings.fresh_connection,
        },
    )
    return caller
