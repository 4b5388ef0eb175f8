"""Serving via uvicorn.

O logging do uvicorn é desligado (``log_config=None``) para que seus
records passem pelo handler JSON instalado por configure_logging.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.protocols.server import ServerProtocol

if TYPE_CHECKING:
    from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class UvicornServer(ServerProtocol):
    """Executa a aplicação ASGI com ``uvicorn.run`` (bloqueante)."""

    def __init__(self, **options: Any) -> None:
        """
        Args:
            **options: Repassadas a ``uvicorn.run`` (ex: workers, access_log).
        """
        self._options = {"log_config": None, **options}

    def serve(self, app: ASGIApp, host: str, port: int) -> None:
        import uvicorn

        logger.info("uvicorn_starting", extra={"host": host, "port": port})
        uvicorn.run(app, host=host, port=port, **self._options)
