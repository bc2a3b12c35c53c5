"""Tabela de mensagens de status HTTP.

Lookup exato; códigos desconhecidos voltam como o próprio número em texto.
O código 0 é reservado para falha de conexão (servidor nunca alcançado).
"""

from __future__ import annotations

CONNECTION_FAILED_STATUS = 0

STATUS_MESSAGES: dict[int, str] = {
    CONNECTION_FAILED_STATUS: "Connection failed",
    100: "Continue",
    101: "Switching Protocols",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    307: "Temporary Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Request Entity Too Large",
    414: "Request URI Too Long",
    415: "Unsupported Media Type",
    416: "Requested Range Not Satisfiable",
    417: "Expectation Failed",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
}


def status_label(code: int) -> str:
    """Retorna "<code> <mensagem>" ou apenas o código se desconhecido.

    Args:
        code: Código numérico de status.

    Returns:
        Ex: "200 OK", "0 Connection failed", "999".
    """
    message = STATUS_MESSAGES.get(code)
    if message is None:
        return str(code)
    return f"{code} {message}"
