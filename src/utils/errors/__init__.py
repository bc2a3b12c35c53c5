"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ApiCallerError,
    HookNotImplementedError,
    InvalidOptionError,
    TransportEngineError,
)

__all__ = [
    "ApiCallerError",
    "HookNotImplementedError",
    "InvalidOptionError",
    "TransportEngineError",
]
