"""Caller de APIs com logging estruturado.

Executa chamadas com opções padrão compartilhadas e registra início, fim e
falhas de conexão sem expor payloads.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from api.calls.status import CONNECTION_FAILED_STATUS
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols import ApiCallProtocol, TransportEngineProtocol

logger = logging.getLogger(__name__)


class LoggingApiCaller:
    """Executa ApiCalls num engine compartilhado.

    Args:
        engine: Engine de transporte (ex: HttpxEngine).
        options: Opções genéricas aplicadas a toda chamada; opções da
            própria chamada têm precedência.
        fresh_connection: Pede conexão nova a cada chamada.
    """

    def __init__(
        self,
        engine: TransportEngineProtocol,
        options: Mapping[str, Any] | None = None,
        fresh_connection: bool = False,
    ) -> None:
        self._engine = engine
        self._options: dict[str, Any] = dict(options or {})
        self._fresh_connection = fresh_connection

    @property
    def engine(self) -> TransportEngineProtocol:
        return self._engine

    @property
    def options(self) -> dict[str, Any]:
        return dict(self._options)

    def call(self, api_call: ApiCallProtocol) -> Any:
        """Executa a chamada e retorna o objeto de resposta.

        Status 0 (falha de conexão) é logado e retornado normalmente;
        cabe ao chamador inspecionar api_call.status_code.

        Raises:
            InvalidOptionError: Opção sem identificador no engine.
            HookNotImplementedError: Tipo de chamada incompleto.
        """
        token = None if get_correlation_id() else set_correlation_id()
        try:
            return self._call(api_call)
        finally:
            if token is not None:
                reset_correlation_id(token)

    def _call(self, api_call: ApiCallProtocol) -> Any:
        reset = getattr(self._engine, "reset", None)
        if callable(reset):
            reset()

        logger.info(
            "api_call_started",
            extra={"call": api_call.name, "url": api_call.url},
        )
        started = time.perf_counter()
        result = api_call.execute(self._options, self._engine, self._fresh_connection)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        extra = {
            "call": api_call.name,
            "url": api_call.url,
            "status_code": api_call.status_code,
            "status": api_call.status(),
            "elapsed_ms": elapsed_ms,
        }
        if api_call.status_code == CONNECTION_FAILED_STATUS:
            logger.warning("api_call_connection_failed", extra=extra)
        else:
            logger.info("api_call_completed", extra=extra)
        return result
