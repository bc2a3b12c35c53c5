"""Testes para app.services.api_caller.LoggingApiCaller."""

from __future__ import annotations

import logging

import pytest

from api.calls.http import HttpGetJson
from app.infra.http.options import EngineOption
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from app.services import LoggingApiCaller
from tests.fakes.fake_transport_engine import FakeTransportEngine
from utils.errors import InvalidOptionError


class TestLoggingApiCaller:
    """Execução via caller."""

    def test_call_uses_default_options(self) -> None:
        engine = FakeTransportEngine(response='{"ok": true}')
        caller = LoggingApiCaller(engine, options={"timeout": 10})

        result = caller.call(HttpGetJson("https://api.test", {}, as_mapping=True))

        assert result == {"ok": True}
        assert engine.options[EngineOption.TIMEOUT] == 10
        assert engine.resets == 1
        assert caller.options == {"timeout": 10}
        assert caller.engine is engine

    def test_fresh_connection_forwarded(self) -> None:
        engine = FakeTransportEngine(response="{}")
        LoggingApiCaller(engine, fresh_connection=True).call(HttpGetJson("https://api.test", {}))
        assert engine.options[EngineOption.FRESH_CONNECT] is True

    def test_logs_start_and_completion(self, caplog: pytest.LogCaptureFixture) -> None:
        engine = FakeTransportEngine(response="{}", http_code=200)
        caller = LoggingApiCaller(engine)

        with caplog.at_level(logging.INFO, logger="app.services.api_caller"):
            caller.call(HttpGetJson("https://api.test", {}))

        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["api_call_started", "api_call_completed"]
        completed = caplog.records[-1]
        assert completed.status == "200 OK"
        assert completed.call == "HttpGetJson"
        assert completed.elapsed_ms >= 0

    def test_logs_connection_failure_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        engine = FakeTransportEngine(response="", http_code=0)
        call = HttpGetJson("https://down.test", {})

        with caplog.at_level(logging.INFO, logger="app.services.api_caller"):
            assert LoggingApiCaller(engine).call(call) is None

        assert call.status() == "0 Connection failed"
        assert caplog.records[-1].levelno == logging.WARNING
        assert caplog.records[-1].getMessage() == "api_call_connection_failed"

    def test_configuration_error_propagates(self) -> None:
        engine = FakeTransportEngine(response="{}")
        caller = LoggingApiCaller(engine, options={"not_an_option": 1})
        with pytest.raises(InvalidOptionError):
            caller.call(HttpGetJson("https://api.test", {}))
        assert engine.executions == 0

    def test_sets_correlation_id_only_during_call(self, caplog: pytest.LogCaptureFixture) -> None:
        engine = FakeTransportEngine(response="{}")

        with caplog.at_level(logging.INFO, logger="app.services.api_caller"):
            LoggingApiCaller(engine).call(HttpGetJson("https://api.test", {}))

        assert get_correlation_id() == ""

    def test_keeps_existing_correlation_id(self) -> None:
        token = set_correlation_id("req-123")
        try:
            LoggingApiCaller(FakeTransportEngine(response="{}")).call(
                HttpGetJson("https://api.test", {})
            )
            assert get_correlation_id() == "req-123"
        finally:
            reset_correlation_id(token)
