"""Engine de transporte síncrono sobre httpx.

Implementação concreta de IO — pertence a app/infra.

Comportamento:
- opções são acumuladas via set_option/set_options até execute()
- falhas de transporte (conexão, timeout, TLS) viram HTTP_CODE 0, sem exceção
- com HEADER ativo, o retorno inclui status line e cabeçalhos antes do corpo
- FRESH_CONNECT descarta o pool de conexões antes da transferência
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from app.infra.http.options import ENGINE_OPTION_REGISTRY, EngineOption
from app.protocols.transport_engine import EngineInfo
from utils.errors import TransportEngineError

if TYPE_CHECKING:
    from collections.abc import Hashable

    from api.calls.options import OptionRegistry

logger = logging.getLogger(__name__)

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
DEFAULT_MAX_REDIRECTS = 20


class HttpxEngine:
    """Engine de transporte compatível com TransportEngineProtocol.

    Args:
        transport: Transport httpx opcional (ex: httpx.MockTransport em testes).
        registry: Registro de opções exposto às chamadas.
    """

    def __init__(
        self,
        transport: httpx.BaseTransport | None = None,
        registry: OptionRegistry = ENGINE_OPTION_REGISTRY,
    ) -> None:
        self._transport = transport
        self._registry = registry
        self._options: dict[EngineOption, Any] = {}
        self._client: httpx.Client | None = None
        self._client_key: tuple[bool, int] | None = None
        self._info: dict[EngineInfo, Any] = _empty_info()

    @property
    def option_registry(self) -> OptionRegistry:
        return self._registry

    def set_option(self, option: Hashable, value: Any) -> None:
        """Define uma opção.

        HTTPGET e POST trocam o método da próxima transferência: descartam
        CUSTOMREQUEST e o flag oposto deixados por chamadas anteriores, e
        HTTPGET também descarta POSTFIELDS. Valor None remove a opção.

        Raises:
            TransportEngineError: Se a opção não pertence a este engine.
        """
        option = _coerce_option(option)
        if value is None:
            self._options.pop(option, None)
            return
        if option is EngineOption.HTTPGET and value:
            for stale in (EngineOption.CUSTOMREQUEST, EngineOption.POST, EngineOption.POSTFIELDS):
                self._options.pop(stale, None)
        elif option is EngineOption.POST and value:
            for stale in (EngineOption.CUSTOMREQUEST, EngineOption.HTTPGET):
                self._options.pop(stale, None)
        self._options[option] = value

    def set_options(self, options: Mapping[Hashable, Any]) -> None:
        for option, value in options.items():
            self.set_option(option, value)

    def reset(self) -> None:
        """Limpa opções e informações da última transferência."""
        self._options.clear()
        self._info = _empty_info()

    def get_info(self, info: EngineInfo) -> Any:
        """Consulta informação da última transferência.

        Raises:
            TransportEngineError: Se a informação não é suportada.
        """
        try:
            return self._info[EngineInfo(info)]
        except ValueError as exc:
            raise TransportEngineError(f"Informação de engine desconhecida: {info!r}") from exc

    def execute(self) -> str:
        """Executa a transferência configurada.

        Returns:
            Texto da resposta (com bloco de cabeçalhos se HEADER ativo), ou
            string vazia em falha de transporte ou RETURNTRANSFER desativado.

        Raises:
            TransportEngineError: Se URL não foi configurada.
        """
        url = self._options.get(EngineOption.URL)
        if not url:
            raise TransportEngineError("URL não configurada no engine")

        if self._options.get(EngineOption.FRESH_CONNECT):
            self._close_client()

        client = self._get_client()
        request = client.build_request(
            self._method(),
            url,
            headers=self._headers(),
            timeout=self._timeout(),
            **self._body(),
        )

        started = time.perf_counter()
        try:
            response = client.send(
                request,
                follow_redirects=bool(self._options.get(EngineOption.FOLLOWLOCATION)),
            )
        except httpx.RequestError as exc:
            elapsed = time.perf_counter() - started
            logger.warning(
                "transport_connection_failed",
                extra={
                    "url": url,
                    "error_type": type(exc).__name__,
                    "elapsed_ms": round(elapsed * 1000, 2),
                },
            )
            self._info = _empty_info(effective_url=url, total_time=elapsed)
            return ""

        elapsed = time.perf_counter() - started
        self._info = {
            EngineInfo.HTTP_CODE: response.status_code,
            EngineInfo.EFFECTIVE_URL: str(response.url),
            EngineInfo.CONTENT_TYPE: response.headers.get("content-type"),
            EngineInfo.TOTAL_TIME: elapsed,
        }
        logger.debug(
            "transport_request_completed",
            extra={
                "method": request.method,
                "url": url,
                "status_code": response.status_code,
                "elapsed_ms": round(elapsed * 1000, 2),
            },
        )

        output = response.text
        if self._options.get(EngineOption.HEADER):
            output = f"{_header_block(response)}\r\n\r\n{output}"

        if not self._options.get(EngineOption.RETURNTRANSFER):
            sys.stdout.write(output)
            return ""
        return output

    def close(self) -> None:
        self._close_client()

    def __enter__(self) -> HttpxEngine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get_client(self) -> httpx.Client:
        verify = bool(self._options.get(EngineOption.SSL_VERIFYPEER, True))
        max_redirects = int(self._options.get(EngineOption.MAXREDIRS, DEFAULT_MAX_REDIRECTS))
        key = (verify, max_redirects)
        if self._client is None or self._client_key != key:
            self._close_client()
            self._client = httpx.Client(
                transport=self._transport,
                verify=verify,
                max_redirects=max_redirects,
            )
            self._client_key = key
        return self._client

    def _close_client(self) -> None:
        if self._client is not None:
            self._client.close()
        self._client = None
        self._client_key = None

    def _method(self) -> str:
        custom = self._options.get(EngineOption.CUSTOMREQUEST)
        if custom:
            return str(custom).upper()
        if self._options.get(EngineOption.HTTPGET):
            return "GET"
        if self._options.get(EngineOption.POST) or EngineOption.POSTFIELDS in self._options:
            return "POST"
        return "GET"

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        for line in self._options.get(EngineOption.HTTPHEADER) or ():
            name, sep, value = str(line).partition(":")
            if sep:
                headers[name.strip()] = value.strip()
        user_agent = self._options.get(EngineOption.USERAGENT)
        if user_agent:
            headers["User-Agent"] = str(user_agent)
        fields = self._options.get(EngineOption.POSTFIELDS)
        if isinstance(fields, str) and not any(h.lower() == "content-type" for h in headers):
            headers["Content-Type"] = _FORM_CONTENT_TYPE
        return headers

    def _body(self) -> dict[str, Any]:
        fields = self._options.get(EngineOption.POSTFIELDS)
        if fields is None:
            return {}
        if isinstance(fields, Mapping):
            return {"data": dict(fields)}
        return {"content": fields}

    def _timeout(self) -> httpx.Timeout:
        total = self._options.get(EngineOption.TIMEOUT)
        connect = self._options.get(EngineOption.CONNECTTIMEOUT, total)
        return httpx.Timeout(total, connect=connect)


def _coerce_option(option: Hashable) -> EngineOption:
    if isinstance(option, EngineOption):
        return option
    try:
        return EngineOption(option)
    except ValueError as exc:
        raise TransportEngineError(f"Opção de engine desconhecida: {option!r}") from exc


def _header_block(response: httpx.Response) -> str:
    # httpx reporta "HTTP/2"; a status line sempre leva major.minor
    version = response.http_version
    if "." not in version:
        version = f"{version}.0"
    lines = [f"{version} {response.status_code} {response.reason_phrase}"]
    lines.extend(
        f"{name.decode('latin-1')}: {value.decode('latin-1')}"
        for name, value in response.headers.raw
    )
    return "\r\n".join(lines)


def _empty_info(effective_url: str | None = None, total_time: float = 0.0) -> dict[EngineInfo, Any]:
    return {
        EngineInfo.HTTP_CODE: 0,
        EngineInfo.EFFECTIVE_URL: effective_url,
        EngineInfo.CONTENT_TYPE: None,
        EngineInfo.TOTAL_TIME: total_time,
    }
