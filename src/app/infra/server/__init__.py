"""Servidor HTTP — implementação concreta do ServerProtocol."""

from app.infra.server.uvicorn_server import UvicornServer

__all__ = ["UvicornServer"]
