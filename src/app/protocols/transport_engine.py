"""Protocolo do engine de transporte.

O engine executa a transferência de rede; as chamadas apenas o configuram.
Evita dependência direta de app/infra.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Hashable, Mapping

    from api.calls.options import OptionRegistry


class EngineInfo(str, Enum):
    """Informações consultáveis após uma transferência."""

    HTTP_CODE = "http_code"
    EFFECTIVE_URL = "effective_url"
    CONTENT_TYPE = "content_type"
    TOTAL_TIME = "total_time"


@runtime_checkable
class TransportEngineProtocol(Protocol):
    """Contrato mínimo consumido pelo ciclo de vida da chamada."""

    @property
    def option_registry(self) -> OptionRegistry:
        """Registro de opções conhecidas por este engine."""
        ...

    def set_option(self, option: Hashable, value: Any) -> None:
        """Define uma opção antes da transferência."""
        ...

    def set_options(self, options: Mapping[Hashable, Any]) -> None:
        """Define várias opções de uma vez."""
        ...

    def execute(self) -> str:
        """Executa a transferência e retorna a resposta bruta."""
        ...

    def get_info(self, info: EngineInfo) -> Any:
        """Consulta informação da última transferência (ex: HTTP_CODE)."""
        ...
