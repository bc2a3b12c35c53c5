"""Protocolos e contratos do core da aplicação."""

from .api_call import ApiCallProtocol
from .transport_engine import EngineInfo, TransportEngineProtocol

__all__ = [
    "ApiCallProtocol",
    "EngineInfo",
    "TransportEngineProtocol",
]
