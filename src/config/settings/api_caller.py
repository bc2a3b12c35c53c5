"""Settings do api_caller.

Opções padrão do engine de transporte carregadas de variáveis de ambiente,
opcionalmente complementadas por um arquivo YAML (API_CALLER_OPTIONS_FILE).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_USER_AGENT = "api-caller/0.1"
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class ApiCallerSettings:
    """Configurações do caller de APIs.

    Attributes:
        timeout_seconds: Timeout total de cada transferência
        connect_timeout_seconds: Timeout de conexão
        follow_redirects: Segue redirects (followlocation)
        max_redirects: Máximo de redirects seguidos
        verify_ssl: Verifica certificado TLS do servidor
        user_agent: User-Agent enviado
        fresh_connection: Conexão nova a cada chamada
        log_level: Nível de log do serviço
        extra_options: Opções adicionais do engine (chave genérica → valor)
    """

    timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0
    follow_redirects: bool = False
    max_redirects: int = 20
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    fresh_connection: bool = False
    log_level: str = "INFO"
    extra_options: dict[str, Any] = field(default_factory=dict)

    def engine_options(self) -> dict[str, Any]:
        """Renderiza as settings como dict genérico de opções do engine."""
        return {
            "timeout": self.timeout_seconds,
            "connecttimeout": self.connect_timeout_seconds,
            "followlocation": self.follow_redirects,
            "maxredirs": self.max_redirects,
            "ssl_verifypeer": self.verify_ssl,
            "useragent": self.user_agent,
            **self.extra_options,
        }

    def validate(self) -> list[str]:
        """Valida configurações.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.timeout_seconds <= 0:
            errors.append("API_CALLER_TIMEOUT deve ser positivo")

        if self.connect_timeout_seconds <= 0:
            errors.append("API_CALLER_CONNECT_TIMEOUT deve ser positivo")

        if self.max_redirects < 0:
            errors.append("API_CALLER_MAX_REDIRECTS não pode ser negativo")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        return errors


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


def load_options_file(path: str | Path) -> dict[str, Any]:
    """Carrega opções extras do engine de um arquivo YAML.

    Aceita mapping no topo ou sob a chave "options".

    Raises:
        FileNotFoundError: Se o arquivo não existe.
        ValueError: Se o conteúdo não é um mapping.
    """
    yaml_path = Path(path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Arquivo de opções não encontrado: {yaml_path}")

    with yaml_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if isinstance(data, dict) and isinstance(data.get("options"), dict):
        data = data["options"]
    if not isinstance(data, dict):
        raise ValueError(f"Arquivo de opções deve conter um mapping: {yaml_path}")
    return {str(key): value for key, value in data.items()}


def _load_api_caller_from_env() -> ApiCallerSettings:
    """Carrega ApiCallerSettings de variáveis de ambiente."""
    options_file = os.getenv("API_CALLER_OPTIONS_FILE", "")
    return ApiCallerSettings(
        timeout_seconds=float(os.getenv("API_CALLER_TIMEOUT", "30")),
        connect_timeout_seconds=float(os.getenv("API_CALLER_CONNECT_TIMEOUT", "10")),
        follow_redirects=_parse_bool(os.getenv("API_CALLER_FOLLOW_REDIRECTS", "false")),
        max_redirects=int(os.getenv("API_CALLER_MAX_REDIRECTS", "20")),
        verify_ssl=_parse_bool(os.getenv("API_CALLER_VERIFY_SSL", "true")),
        user_agent=os.getenv("API_CALLER_USER_AGENT", DEFAULT_USER_AGENT),
        fresh_connection=_parse_bool(os.getenv("API_CALLER_FRESH_CONNECTION", "false")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        extra_options=load_options_file(options_file) if options_file else {},
    )


@lru_cache(maxsize=1)
def get_api_caller_settings() -> ApiCallerSettings:
    """Retorna instância cacheada de ApiCallerSettings."""
    return _load_api_caller_from_env()
