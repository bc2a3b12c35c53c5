"""Testes para app.observability.correlation."""

from __future__ import annotations

import uuid

from app.observability import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


class TestCorrelationId:
    """Testes de correlation_id por contexto."""

    def test_default_is_empty(self) -> None:
        assert get_correlation_id() == ""

    def test_set_and_reset(self) -> None:
        token = set_correlation_id("abc")
        assert get_correlation_id() == "abc"
        reset_correlation_id(token)
        assert get_correlation_id() == ""

    def test_set_without_value_generates_uuid(self) -> None:
        token = set_correlation_id()
        try:
            uuid.UUID(get_correlation_id())
        finally:
            reset_correlation_id(token)

    def test_generate_is_unique(self) -> None:
        assert generate_correlation_id() != generate_correlation_id()
