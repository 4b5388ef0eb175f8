"""Cadeia de boot — loaders ordenados e falíveis."""

from app.boot.chain import run_boot_chain
from app.boot.loaders import ConfigBootLoader, EnvBootLoader, FuncBootLoader
from app.protocols.boot_loader import BootLoader

__all__ = [
    "BootLoader",
    "ConfigBootLoader",
    "EnvBootLoader",
    "FuncBootLoader",
    "run_boot_chain",
]
