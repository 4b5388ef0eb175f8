"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AppError,
    ApplicationStateError,
    BootError,
    BootLoaderError,
    ConfigError,
    ConfigLoadError,
    ConfigLockedError,
    EnvFileError,
    EventListenerError,
)

__all__ = [
    "AppError",
    "ApplicationStateError",
    "BootError",
    "BootLoaderError",
    "ConfigError",
    "ConfigLoadError",
    "ConfigLockedError",
    "EnvFileError",
    "EventListenerError",
]
