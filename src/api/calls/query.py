"""Codificação de query strings para os tipos de chamada HTTP.

Dois modos:
- canônico: listas e dicts aninhados com colchetes (foo[0]=x&foo[1]=y)
- raw: chaves repetidas verbatim (foo=x&foo=y), aceita sequência de pares
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import urlencode


def _scalar(value: Any) -> str:
    if value is True:
        return "1"
    if value is False:
        return "0"
    return str(value)


def _flatten(prefix: str, value: Any) -> Iterable[tuple[str, str]]:
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _flatten(f"{prefix}[{key}]", item)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield from _flatten(f"{prefix}[{index}]", item)
    elif value is not None:
        yield prefix, _scalar(value)


def _items(data: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(data, Mapping):
        return data.items()
    if hasattr(data, "__dict__") and not isinstance(data, (list, tuple)):
        return vars(data).items()
    return data


def build_query(data: Any) -> str:
    """Codifica mapping/objeto em query string canônica.

    Valores None são omitidos; booleanos viram "1"/"0".
    """
    pairs: list[tuple[str, str]] = []
    for key, value in _items(data):
        pairs.extend(_flatten(str(key), value))
    return urlencode(pairs)


def build_raw_query(data: Any) -> str:
    """Codifica preservando chaves repetidas e irregulares.

    Args:
        data: Mapping (listas viram chave repetida) ou sequência de pares
            (chave, valor), que mantém ordem e duplicatas exatamente.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in _items(data):
        if isinstance(value, (list, tuple)):
            pairs.extend((str(key), _scalar(item)) for item in value)
        elif value is not None:
            pairs.append((str(key), _scalar(value)))
    return urlencode(pairs)
