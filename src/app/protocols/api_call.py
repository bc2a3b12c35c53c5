"""Protocolo público de uma chamada de API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .transport_engine import TransportEngineProtocol


@runtime_checkable
class ApiCallProtocol(Protocol):
    """Contrato que todo tipo de chamada expõe ao chamador."""

    @property
    def url(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def status_code(self) -> int | None: ...

    def status(self) -> str | None: ...

    def execute(
        self,
        options: Mapping[str, Any],
        engine: TransportEngineProtocol,
        fresh_connection: bool = False,
    ) -> Any: ...

    def request_object_representation(self) -> str: ...

    def response_object_representation(self) -> str: ...
