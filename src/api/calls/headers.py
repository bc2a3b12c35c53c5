"""Parser de blocos brutos de cabeçalho HTTP.

Nunca levanta exceção: entrada malformada degrada para saída parcial.
"""

from __future__ import annotations

STATUS_HEADER = "Status"


def parse_header(raw_headers: str) -> dict[str, str | list[str]]:
    """Converte bloco bruto de cabeçalhos em mapping.

    Regras:
    - cada linha é dividida no primeiro ":" em nome/valor (valor com trim)
    - linha sem ":" antes de qualquer cabeçalho vira o valor de "Status"
    - linha sem ":" iniciada por TAB continua o valor anterior (CRLF + TAB)
    - nome repetido vira lista ordenada de valores

    Args:
        raw_headers: Linhas separadas por LF ou CRLF, opcionalmente com
            status line na primeira linha.

    Returns:
        Mapping nome → valor (str) ou valores (list[str]) quando repetido.
    """
    headers: dict[str, str | list[str]] = {}
    key = ""

    for line in raw_headers.split("\n"):
        name, sep, value = line.partition(":")

        if sep:
            value = value.strip()
            current = headers.get(name)
            if current is None:
                headers[name] = value
            elif isinstance(current, list):
                current.append(value)
            else:
                headers[name] = [current, value]
            key = name
            continue

        if line.startswith("\t") and key:
            _fold_continuation(headers, key, line.strip())
        elif not key:
            headers[STATUS_HEADER] = line.strip()

    return headers


def _fold_continuation(
    headers: dict[str, str | list[str]],
    key: str,
    content: str,
) -> None:
    """Anexa linha de continuação ao último valor do cabeçalho."""
    current = headers[key]
    if isinstance(current, list):
        current[-1] = f"{current[-1]}\r\n\t{content}"
    else:
        headers[key] = f"{current}\r\n\t{content}"
