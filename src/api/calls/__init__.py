"""Chamadas de API: ciclo de vida, opções, cabeçalhos e status.

Os tipos concretos ficam em api.calls.http (dependem do engine httpx).
"""

from api.calls.base import HttpCall
from api.calls.headers import parse_header
from api.calls.options import OptionRegistry, translate_options
from api.calls.query import build_query, build_raw_query
from api.calls.status import CONNECTION_FAILED_STATUS, STATUS_MESSAGES, status_label

__all__ = [
    "CONNECTION_FAILED_STATUS",
    "STATUS_MESSAGES",
    "HttpCall",
    "OptionRegistry",
    "build_query",
    "build_raw_query",
    "parse_header",
    "status_label",
    "translate_options",
]
