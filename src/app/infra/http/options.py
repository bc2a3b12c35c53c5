"""Opções e registro do engine httpx.

Nomes seguem a convenção CURLOPT_ para que configurações existentes
(timeout, followlocation, ssl_verifypeer...) continuem válidas.
"""

from __future__ import annotations

from enum import Enum

from api.calls.options import OptionRegistry

OPTION_PREFIX = "CURLOPT_"


class EngineOption(str, Enum):
    """Opções suportadas pelo HttpxEngine."""

    URL = "url"
    HTTPGET = "httpget"
    POST = "post"
    POSTFIELDS = "postfields"
    CUSTOMREQUEST = "customrequest"
    HTTPHEADER = "httpheader"
    HEADER = "header"
    RETURNTRANSFER = "returntransfer"
    TIMEOUT = "timeout"
    CONNECTTIMEOUT = "connecttimeout"
    FOLLOWLOCATION = "followlocation"
    MAXREDIRS = "maxredirs"
    SSL_VERIFYPEER = "ssl_verifypeer"
    USERAGENT = "useragent"
    FRESH_CONNECT = "fresh_connect"


ENGINE_OPTION_REGISTRY = OptionRegistry(
    prefix=OPTION_PREFIX,
    options={OPTION_PREFIX + option.name: option for option in EngineOption},
)
