"""Tradução de opções genéricas para identificadores do engine de transporte.

O registro de opções pertence ao adapter de transporte e é injetado aqui;
este módulo não conhece nenhuma biblioteca de transporte específica.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import Any

from utils.errors import InvalidOptionError


@dataclass(frozen=True)
class OptionRegistry:
    """Registro de opções conhecidas por um engine.

    Attributes:
        prefix: Convenção de namespace (ex: "CURLOPT_").
        options: Nome completo (prefixo + nome em maiúsculas) → identificador
            nativo do engine.
    """

    prefix: str
    options: Mapping[str, Hashable] = field(default_factory=dict)

    def lookup(self, key: str) -> Hashable | None:
        """Retorna o identificador nativo para a chave genérica, ou None."""
        return self.options.get(self.prefix + key.upper())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None


def translate_options(
    config: Mapping[str, Any],
    registry: OptionRegistry,
) -> dict[Hashable, Any]:
    """Traduz dict genérico de opções para identificadores nativos.

    Tudo ou nada: qualquer chave desconhecida aborta a tradução inteira.
    Chaves que diferem só na caixa ("timeout" e "TIMEOUT") apontam para o
    mesmo identificador e também abortam.

    Args:
        config: Opções genéricas, chaves case-insensitive (ex: {"timeout": 5}).
        registry: Registro de opções do engine.

    Returns:
        Mapping identificador nativo → valor original.

    Raises:
        InvalidOptionError: Se alguma chave não existe no registro ou repete
            outra chave do config.
    """
    translated: dict[Hashable, Any] = {}
    for key, value in config.items():
        identifier = registry.lookup(key)
        if identifier is None:
            raise InvalidOptionError(key, registry.prefix)
        if identifier in translated:
            raise InvalidOptionError(
                key,
                registry.prefix,
                reason="Option keys are case-insensitive and this one is already set",
            )
        translated[identifier] = value
    return translated
