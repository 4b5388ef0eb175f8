"""Protocolo do servidor HTTP que recebe a aplicação ASGI já bootada."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from starlette.types import ASGIApp


class ServerProtocol(ABC):
    """Contrato mínimo do colaborador de serving.

    Método canônico:
    - serve(app, host, port) -> None
      Bloqueia servindo ``app`` até o processo encerrar.
    """

    @abstractmethod
    def serve(self, app: ASGIApp, host: str, port: int) -> None:
        """Serve a aplicação ASGI em ``host:port``."""
