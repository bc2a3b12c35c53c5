"""Exceções do api_caller.

Hierarquia única para que o chamador possa capturar tudo com ApiCallerError.
Falhas de transporte NÃO são exceções: viram status 0 na chamada.
"""

from __future__ import annotations


class ApiCallerError(RuntimeError):
    """Base para erros do api_caller."""


class InvalidOptionError(ApiCallerError, ValueError):
    """Opção de configuração sem identificador correspondente no engine."""

    def __init__(self, key: str, prefix: str, reason: str | None = None) -> None:
        super().__init__(
            f"Invalid option '{key}' in api_caller options. "
            + (reason or f"Use engine options without prefix '{prefix}'")
        )
        self.key = key
        self.prefix = prefix


class HookNotImplementedError(ApiCallerError, NotImplementedError):
    """Tipo de chamada concreto não implementou um hook obrigatório.

    Defeito de desenvolvimento, não condição operacional.
    """

    def __init__(self, class_name: str, hook: str, hint: str) -> None:
        super().__init__(
            f"Class {class_name} must implement method '{hook}'. Hint:\n\n{hint}"
        )
        self.class_name = class_name
        self.hook = hook


class TransportEngineError(ApiCallerError):
    """Uso inválido do engine de transporte (opção ou info desconhecida)."""
