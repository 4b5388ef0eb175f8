"""Protocolos (ABCs) dos colaboradores da Application."""

from app.protocols.boot_loader import BootLoader
from app.protocols.server import ServerProtocol

__all__ = [
    "BootLoader",
    "ServerProtocol",
]
