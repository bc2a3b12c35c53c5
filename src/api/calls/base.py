"""Ciclo de vida base de uma chamada HTTP de API.

Template: codifica o objeto de request, executa a transferência no engine e
decodifica a resposta. Tipos concretos implementam três hooks:

- generate_request_data(): request_object → request_data
- make_request(engine, options): configura o engine e executa a transferência
- parse_response_data(): response_data → response_object

Exemplo:
    class HttpGetJson(HttpCall):
        def generate_request_data(self) -> None:
            self._request_data = build_query(self._request_object)
        ...

    call = HttpGetJson("https://api.example.com/items", {"page": 1})
    result = call.execute({"timeout": 5}, engine)
    call.status()  # "200 OK" ou "0 Connection failed"
"""

from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING, Any

import yaml

from api.calls.headers import parse_header
from api.calls.options import translate_options
from api.calls.status import status_label
from app.protocols.transport_engine import EngineInfo
from utils.errors import HookNotImplementedError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.transport_engine import TransportEngineProtocol

logger = logging.getLogger(__name__)

_STATUS_LINE = re.compile(r"^HTTP/\d\.\d")
_HEADER_BODY_SEPARATOR = "\r\n\r\n"

_HOOK_HINTS: dict[str, str] = {
    "generate_request_data": (
        "    def generate_request_data(self) -> None:\n"
        "        self._request_data = build_query(self._request_object)\n"
    ),
    "make_request": (
        "    def make_request(self, engine, options) -> None:\n"
        "        engine.set_option(EngineOption.URL, f\"{self.url}?{self.request_data}\")\n"
        "        engine.set_options(options)\n"
        "        self.exec_transfer(engine)\n"
    ),
    "parse_response_data": (
        "    def parse_response_data(self) -> None:\n"
        "        self._response_object = decode_json(self._response_data, self.as_mapping)\n"
    ),
}


class HttpCall:
    """Base de todas as chamadas HTTP de API.

    Uma instância por invocação lógica. Pode ser executada de novo; cada
    execução descarta o estado de resposta anterior.

    Args:
        url: URL alvo (imutável).
        request_object: Objeto de domínio a codificar; nunca é alterado.
        as_mapping: True retorna dicts (e cabeçalhos estruturados);
            False retorna objetos genéricos (e o bloco bruto de cabeçalhos).
        options: Opções do engine específicas desta chamada.
    """

    def __init__(
        self,
        url: str,
        request_object: Any,
        as_mapping: bool = False,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        self._url = url
        self._request_object = request_object
        self._as_mapping = as_mapping
        self._options: dict[str, Any] = dict(options or {})
        self._raw_query = False

        self._request_data: Any = None
        self._response_data: str | None = None
        self._response_header_data: str | None = None
        self._response_object: Any = None
        self._response_header_object: str | dict[str, str | list[str]] | None = None
        self._status_code: int | None = None

        self.generate_request_data()

    # ------------------------------------------------------------------
    # Modo raw query
    # ------------------------------------------------------------------

    @property
    def raw_query(self) -> bool:
        """True se a query preserva chaves repetidas/irregulares verbatim."""
        return self._raw_query

    def set_raw_query(self, enabled: bool) -> None:
        """Alterna o modo raw query e re-deriva request_data.

        Permite GET como foo=x&foo=y&status=new&status=on%20hold.
        """
        self._raw_query = enabled
        self.generate_request_data()

    # ------------------------------------------------------------------
    # Acessores
    # ------------------------------------------------------------------

    @property
    def url(self) -> str:
        return self._url

    @property
    def name(self) -> str:
        """Nome do tipo concreto de chamada."""
        return type(self).__name__

    @property
    def as_mapping(self) -> bool:
        return self._as_mapping

    @property
    def options(self) -> dict[str, Any]:
        return dict(self._options)

    @property
    def request_object(self) -> Any:
        return self._request_object

    @property
    def request_data(self) -> Any:
        return self._request_data

    @property
    def response_data(self) -> str | None:
        return self._response_data

    @property
    def response_header_data(self) -> str | None:
        return self._response_header_data

    @property
    def response_object(self) -> Any:
        return self._response_object

    @property
    def response_header_object(self) -> str | dict[str, str | list[str]] | None:
        return self._response_header_object

    @property
    def status_code(self) -> int | None:
        """Status numérico da última execução; 0 = falha de conexão."""
        return self._status_code

    def status(self) -> str | None:
        """Retorna "<code> <mensagem>", o código puro se desconhecido, ou None."""
        if self._status_code is None:
            return None
        return status_label(self._status_code)

    def request_object_representation(self) -> str:
        """Dump YAML do objeto de request (diagnóstico)."""
        return _dump_yaml(self._request_object)

    def response_object_representation(self) -> str:
        """Dump YAML do objeto de resposta (diagnóstico)."""
        return _dump_yaml(self._response_object)

    # ------------------------------------------------------------------
    # Execução
    # ------------------------------------------------------------------

    def execute(
        self,
        options: Mapping[str, Any],
        engine: TransportEngineProtocol,
        fresh_connection: bool = False,
    ) -> Any:
        """Executa a chamada no engine informado.

        Args:
            options: Opções genéricas da execução (ex: do caller).
            engine: Engine de transporte.
            fresh_connection: Pede ao engine uma conexão nova.

        Returns:
            response_object decodificado.

        Raises:
            HookNotImplementedError: Tipo concreto não implementa algum hook.
            InvalidOptionError: Opção sem identificador no engine.
        """
        self._require_hooks()

        merged = {key.lower(): value for key, value in options.items()}
        merged.update((key.lower(), value) for key, value in self._options.items())
        merged["returntransfer"] = True
        if fresh_connection:
            merged["fresh_connect"] = True
        translated = translate_options(merged, engine.option_registry)

        self._reset_response()
        self.make_request(engine, translated)
        self.parse_response_data()
        self.parse_response_header()
        self._status_code = int(engine.get_info(EngineInfo.HTTP_CODE))

        logger.debug(
            "api_call_executed",
            extra={"call": self.name, "url": self._url, "status_code": self._status_code},
        )
        return self._response_object

    def exec_transfer(self, engine: TransportEngineProtocol) -> None:
        """Executa o engine e separa cabeçalhos do corpo.

        Se a resposta começa com status line (HTTP/x.y), divide na primeira
        linha em branco; senão, tudo é corpo e não há cabeçalhos.
        """
        data = engine.execute()
        if _STATUS_LINE.match(data):
            header, _, body = data.partition(_HEADER_BODY_SEPARATOR)
            self._response_header_data = header
            self._response_data = body
        else:
            self._response_data = data

    def parse_response_header(self) -> None:
        """Popula response_header_object conforme o modo de saída."""
        if not self._response_header_data:
            self._response_header_object = None
        elif self._as_mapping:
            self._response_header_object = parse_header(self._response_header_data)
        else:
            self._response_header_object = self._response_header_data

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def generate_request_data(self) -> None:
        """Codifica request_object em request_data."""
        raise self._hook_error("generate_request_data")

    def make_request(
        self,
        engine: TransportEngineProtocol,
        options: Mapping[Any, Any],
    ) -> None:
        """Configura o engine e executa a transferência."""
        raise self._hook_error("make_request")

    def parse_response_data(self) -> None:
        """Decodifica response_data em response_object."""
        raise self._hook_error("parse_response_data")

    def _require_hooks(self) -> None:
        for hook in _HOOK_HINTS:
            if getattr(type(self), hook) is getattr(HttpCall, hook):
                raise self._hook_error(hook)

    def _hook_error(self, hook: str) -> HookNotImplementedError:
        return HookNotImplementedError(type(self).__name__, hook, _HOOK_HINTS[hook])

    def _reset_response(self) -> None:
        self._response_data = None
        self._response_header_data = None
        self._response_object = None
        self._response_header_object = None
        self._status_code = None


def _plain(value: Any) -> Any:
    """Converte objetos genéricos em estruturas JSON-compatíveis."""
    return json.loads(json.dumps(value, default=lambda obj: getattr(obj, "__dict__", str(obj))))


def _dump_yaml(value: Any) -> str:
    return yaml.safe_dump(_plain(value), allow_unicode=True, sort_keys=False)
