"""Agregador de settings do api_caller.

Re-exporta as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.api_caller import (
    DEFAULT_USER_AGENT,
    ApiCallerSettings,
    get_api_caller_settings,
    load_options_file,
)

__all__ = [
    "DEFAULT_USER_AGENT",
    "ApiCallerSettings",
    "get_api_caller_settings",
    "load_options_file",
]
