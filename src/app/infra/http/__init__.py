"""Engine de transporte HTTP baseado em httpx."""

from app.infra.http.engine import HttpxEngine
from app.infra.http.options import ENGINE_OPTION_REGISTRY, OPTION_PREFIX, EngineOption

__all__ = [
    "ENGINE_OPTION_REGISTRY",
    "OPTION_PREFIX",
    "EngineOption",
    "HttpxEngine",
]
