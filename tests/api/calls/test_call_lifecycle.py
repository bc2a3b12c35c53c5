"""Testes para api.calls.base.HttpCall."""

from __future__ import annotations

from typing import Any

import pytest

from api.calls.base import HttpCall
from api.calls.query import build_query, build_raw_query
from app.infra.http.options import EngineOption
from tests.fakes.fake_transport_engine import FakeTransportEngine
from utils.errors import HookNotImplementedError, InvalidOptionError


class EchoCall(HttpCall):
    """Chamada mínima: query no request, corpo bruto como resposta."""

    def generate_request_data(self) -> None:
        encode = build_raw_query if self.raw_query else build_query
        self._request_data = encode(self._request_object)

    def make_request(self, engine: Any, options: Any) -> None:
        engine.set_option(EngineOption.URL, f"{self.url}?{self.request_data}")
        engine.set_options(options)
        self.exec_transfer(engine)

    def parse_response_data(self) -> None:
        self._response_object = self._response_data


class NoDecodeCall(HttpCall):
    """Não implementa parse_response_data."""

    def generate_request_data(self) -> None:
        self._request_data = ""

    def make_request(self, engine: Any, options: Any) -> None:
        self.exec_transfer(engine)


class TestConstruction:
    """Construção e derivação do request."""

    def test_encodes_request_on_construction(self) -> None:
        call = EchoCall("https://api.test/items", {"page": 1})
        assert call.request_data == "page=1"
        assert call.url == "https://api.test/items"
        assert call.name == "EchoCall"

    def test_response_state_unset_before_execute(self) -> None:
        call = EchoCall("https://api.test", {})
        assert call.status_code is None
        assert call.status() is None
        assert call.response_object is None
        assert call.response_header_object is None

    def test_base_class_without_encoder_fails(self) -> None:
        """Hook de codificação ausente falha na construção com dica."""
        with pytest.raises(HookNotImplementedError, match="generate_request_data") as exc_info:
            HttpCall("https://api.test", {})

        assert "def generate_request_data(self)" in str(exc_info.value)
        assert exc_info.value.class_name == "HttpCall"

    def test_request_object_not_mutated(self) -> None:
        request = {"foo": ["x", "y"]}
        call = EchoCall("https://api.test", request)
        call.set_raw_query(True)
        call.execute({}, FakeTransportEngine(response="ok"))
        assert request == {"foo": ["x", "y"]}
        assert call.request_object is request


class TestRawQueryMode:
    """Alternância de modo raw query."""

    def test_toggle_rederives_request_data(self) -> None:
        call = EchoCall("https://api.test", {"foo": ["x", "y"]})
        canonical = call.request_data

        call.set_raw_query(True)

        assert call.raw_query is True
        assert call.request_data == "foo=x&foo=y"
        assert call.request_data != canonical

    def test_toggle_back_restores_canonical(self) -> None:
        call = EchoCall("https://api.test", {"foo": ["x", "y"]})
        canonical = call.request_data
        call.set_raw_query(True)
        call.set_raw_query(False)
        assert call.request_data == canonical


class TestExecute:
    """Fluxo encode → transfer → decode."""

    def test_returns_decoded_response_and_status(self) -> None:
        engine = FakeTransportEngine(response="hello", http_code=200)
        call = EchoCall("https://api.test", {"a": 1})

        assert call.execute({}, engine) == "hello"
        assert call.status_code == 200
        assert call.status() == "200 OK"
        assert engine.options[EngineOption.URL] == "https://api.test?a=1"

    def test_forces_returntransfer(self) -> None:
        engine = FakeTransportEngine(response="x")
        EchoCall("https://api.test", {}).execute({"returntransfer": False}, engine)
        assert engine.options[EngineOption.RETURNTRANSFER] is True

    def test_call_options_take_precedence(self) -> None:
        engine = FakeTransportEngine(response="x")
        call = EchoCall("https://api.test", {}, options={"timeout": 2})
        call.execute({"timeout": 30, "useragent": "ua"}, engine)
        assert engine.options[EngineOption.TIMEOUT] == 2
        assert engine.options[EngineOption.USERAGENT] == "ua"
        assert call.options == {"timeout": 2}

    def test_option_merge_ignores_key_case(self) -> None:
        """Opções da chamada vencem mesmo com caixa diferente."""
        engine = FakeTransportEngine(response="x")
        call = EchoCall("https://api.test", {}, options={"timeout": 2})
        call.execute({"TIMEOUT": 30, "ReturnTransfer": False}, engine)
        assert engine.options[EngineOption.TIMEOUT] == 2
        assert engine.options[EngineOption.RETURNTRANSFER] is True

    def test_fresh_connection_sets_fresh_connect(self) -> None:
        engine = FakeTransportEngine(response="x")
        EchoCall("https://api.test", {}).execute({}, engine, fresh_connection=True)
        assert engine.options[EngineOption.FRESH_CONNECT] is True

    def test_invalid_option_fails_before_transfer(self) -> None:
        engine = FakeTransportEngine(response="x")
        call = EchoCall("https://api.test", {})
        with pytest.raises(InvalidOptionError, match="'nonsense'"):
            call.execute({"nonsense": 1}, engine)
        assert engine.executions == 0
        assert call.status_code is None

    def test_missing_decoder_fails_without_state_change(self) -> None:
        engine = FakeTransportEngine(response="HTTP/1.1 200 OK\r\nX: y\r\n\r\nbody")
        call = NoDecodeCall("https://api.test", {})

        with pytest.raises(HookNotImplementedError, match="parse_response_data"):
            call.execute({}, engine)

        assert engine.executions == 0
        assert call.response_data is None
        assert call.response_header_data is None
        assert call.response_object is None
        assert call.status_code is None

    def test_connection_failure_is_status_zero(self) -> None:
        engine = FakeTransportEngine(response="", http_code=0)
        call = EchoCall("https://api.test", {})
        assert call.execute({}, engine) == ""
        assert call.status_code == 0
        assert call.status() == "0 Connection failed"

    def test_unknown_status_returns_bare_code(self) -> None:
        engine = FakeTransportEngine(response="x", http_code=999)
        call = EchoCall("https://api.test", {})
        call.execute({}, engine)
        assert call.status() == "999"

    def test_reexecution_discards_previous_headers(self) -> None:
        engine = FakeTransportEngine(response="HTTP/1.1 200 OK\r\nX: y\r\n\r\nfirst")
        call = EchoCall("https://api.test", {})
        call.execute({}, engine)
        assert call.response_header_data == "HTTP/1.1 200 OK\r\nX: y"

        engine.response = "second"
        engine.http_code = 201
        assert call.execute({}, engine) == "second"
        assert call.response_header_data is None
        assert call.response_header_object is None
        assert call.status() == "201 Created"


class TestExecTransfer:
    """Separação de cabeçalhos e corpo."""

    def test_splits_headers_and_body(self) -> None:
        engine = FakeTransportEngine(response="HTTP/1.1 200 OK\r\nX: y\r\n\r\nbody-content")
        call = EchoCall("https://api.test", {})
        call.exec_transfer(engine)
        assert call.response_header_data == "HTTP/1.1 200 OK\r\nX: y"
        assert call.response_data == "body-content"

    def test_no_status_line_is_all_body(self) -> None:
        engine = FakeTransportEngine(response='{"a": 1}\r\n\r\nmore')
        call = EchoCall("https://api.test", {})
        call.exec_transfer(engine)
        assert call.response_header_data is None
        assert call.response_data == '{"a": 1}\r\n\r\nmore'

    def test_body_keeps_later_blank_lines(self) -> None:
        engine = FakeTransportEngine(response="HTTP/2.0 200 OK\r\nX: y\r\n\r\na\r\n\r\nb")
        call = EchoCall("https://api.test", {})
        call.exec_transfer(engine)
        assert call.response_data == "a\r\n\r\nb"


class TestHeaderOutputMode:
    """Cabeçalhos brutos vs estruturados."""

    RAW = "HTTP/1.1 200 OK\r\nX-Foo: bar\r\nX-Foo: baz\r\n\r\nbody"

    def test_mapping_mode_parses_headers(self) -> None:
        call = EchoCall("https://api.test", {}, as_mapping=True)
        call.execute({}, FakeTransportEngine(response=self.RAW))
        assert call.response_header_object == {
            "Status": "HTTP/1.1 200 OK",
            "X-Foo": ["bar", "baz"],
        }

    def test_object_mode_keeps_raw_blob(self) -> None:
        call = EchoCall("https://api.test", {})
        call.execute({}, FakeTransportEngine(response=self.RAW))
        assert call.response_header_object == "HTTP/1.1 200 OK\r\nX-Foo: bar\r\nX-Foo: baz"


class TestRepresentation:
    """Dump YAML para diagnóstico."""

    def test_request_representation(self) -> None:
        call = EchoCall("https://api.test", {"page": 1, "tags": ["a"]})
        assert call.request_object_representation() == "page: 1\ntags:\n- a\n"

    def test_response_representation_before_execute(self) -> None:
        call = EchoCall("https://api.test", {})
        assert call.response_object_representation().startswith("null")
