"""Tipos concretos de chamada HTTP.

Cada tipo escolhe codificação de request, método e decodificação de resposta:

- HttpGetJson / HttpDeleteJson: query string, resposta JSON
- HttpGetHtml: query string, resposta em texto
- HttpPostJson / HttpPutJson: corpo form-encoded, resposta JSON
- HttpPostJsonBody: corpo JSON, resposta JSON
"""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

from api.calls.base import HttpCall
from api.calls.query import build_query, build_raw_query
from app.infra.http.options import EngineOption

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.transport_engine import TransportEngineProtocol

JSON_HEADERS = ("Accept: application/json",)


def decode_json(data: str | None, as_mapping: bool) -> Any:
    """Decodifica JSON em dicts (as_mapping) ou SimpleNamespace.

    Corpo vazio ou inválido retorna None.
    """
    if not data:
        return None
    hook = None if as_mapping else (lambda fields: SimpleNamespace(**fields))
    try:
        return json.loads(data, object_hook=hook)
    except json.JSONDecodeError:
        return None


class _QueryCall(HttpCall):
    """Chamada cujo request vai na query string."""

    method = "GET"

    def generate_request_data(self) -> None:
        if not self._request_object:
            self._request_data = ""
        elif self._raw_query:
            self._request_data = build_raw_query(self._request_object)
        else:
            self._request_data = build_query(self._request_object)

    def target_url(self) -> str:
        if not self._request_data:
            return self._url
        separator = "&" if "?" in self._url else "?"
        return f"{self._url}{separator}{self._request_data}"

    def make_request(
        self,
        engine: TransportEngineProtocol,
        options: Mapping[Any, Any],
    ) -> None:
        engine.set_option(EngineOption.URL, self.target_url())
        engine.set_option(EngineOption.HTTPGET, True)
        if self.method != "GET":
            engine.set_option(EngineOption.CUSTOMREQUEST, self.method)
        engine.set_option(EngineOption.HTTPHEADER, list(JSON_HEADERS))
        engine.set_options(options)
        self.exec_transfer(engine)


class HttpGetJson(_QueryCall):
    """GET com query string e resposta JSON."""

    def parse_response_data(self) -> None:
        self._response_object = decode_json(self._response_data, self._as_mapping)


class HttpDeleteJson(_QueryCall):
    """DELETE com query string e resposta JSON."""

    method = "DELETE"

    def parse_response_data(self) -> None:
        self._response_object = decode_json(self._response_data, self._as_mapping)


class HttpGetHtml(_QueryCall):
    """GET com resposta em texto (HTML sem parsing)."""

    def parse_response_data(self) -> None:
        self._response_object = self._response_data


class _BodyCall(HttpCall):
    """Chamada cujo request vai no corpo."""

    method = "POST"
    content_type = "application/x-www-form-urlencoded"

    def generate_request_data(self) -> None:
        if self._raw_query:
            self._request_data = build_raw_query(self._request_object or {})
        else:
            self._request_data = build_query(self._request_object or {})

    def make_request(
        self,
        engine: TransportEngineProtocol,
        options: Mapping[Any, Any],
    ) -> None:
        engine.set_option(EngineOption.URL, self._url)
        engine.set_option(EngineOption.POST, True)
        if self.method != "POST":
            engine.set_option(EngineOption.CUSTOMREQUEST, self.method)
        engine.set_option(EngineOption.POSTFIELDS, self._request_data)
        engine.set_option(
            EngineOption.HTTPHEADER,
            [*JSON_HEADERS, f"Content-Type: {self.content_type}"],
        )
        engine.set_options(options)
        self.exec_transfer(engine)

    def parse_response_data(self) -> None:
        self._response_object = decode_json(self._response_data, self._as_mapping)


class HttpPostJson(_BodyCall):
    """POST form-encoded com resposta JSON."""


class HttpPutJson(_BodyCall):
    """PUT form-encoded com resposta JSON."""

    method = "PUT"


class HttpPostJsonBody(_BodyCall):
    """POST com corpo JSON e resposta JSON.

    Modo raw query não se aplica: o corpo é sempre JSON.
    """

    content_type = "application/json"

    def generate_request_data(self) -> None:
        self._request_data = json.dumps(
            self._request_object,
            default=lambda obj: getattr(obj, "__dict__", str(obj)),
        )
