"""Serviços de aplicação.

Implementações concretas de IO ficam em app/infra/.
"""

from app.services.api_caller import LoggingApiCaller

__all__ = [
    "LoggingApiCaller",
]
