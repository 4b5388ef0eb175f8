"""Exceções de domínio do ciclo de vida da aplicação.

Hierarquia:
    AppError
    ├── EventListenerError   — listener falhou durante must_fire
    ├── ConfigError
    │   ├── ConfigLoadError  — arquivo de config existe mas é inválido
    │   └── ConfigLockedError — escrita após o boot
    ├── EnvFileError         — arquivo .env existe mas é malformado
    ├── BootError            — falha fatal de boot
    │   └── BootLoaderError  — loader da cadeia falhou
    └── ApplicationStateError — operação inválida no estado atual
"""

from __future__ import annotations


class AppError(RuntimeError):
    """Base para falhas do container de aplicação."""


class EventListenerError(AppError):
    """Listener de evento levantou exceção em um disparo fatal."""

    def __init__(self, event_name: str, listener_name: str, message: str) -> None:
        super().__init__(f"Listener {listener_name} falhou em '{event_name}': {message}")
        self.event_name = event_name
        self.listener_name = listener_name


class ConfigError(AppError):
    """Base para falhas do config store."""


class ConfigLoadError(ConfigError):
    """Arquivo de configuração presente porém ilegível ou malformado."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"Falha ao carregar config {path}: {message}")
        self.path = path


class ConfigLockedError(ConfigError):
    """Tentativa de escrita no config store após o boot."""


class EnvFileError(AppError):
    """Arquivo de ambiente presente porém malformado."""

    def __init__(self, path: str, line: int | None, message: str) -> None:
        location = f"{path}:{line}" if line is not None else path
        super().__init__(f"Arquivo de ambiente inválido {location}: {message}")
        self.path = path
        self.line = line


class BootError(AppError):
    """Falha fatal durante o boot; a aplicação não deve servir."""

    def __init__(self, message: str, phase: str = "boot") -> None:
        super().__init__(message)
        self.phase = phase


class BootLoaderError(BootError):
    """Um loader da cadeia de boot falhou e abortou a cadeia."""

    def __init__(self, loader_name: str, message: str) -> None:
        super().__init__(f"Boot loader '{loader_name}' falhou: {message}", phase="loaders")
        self.loader_name = loader_name


class ApplicationStateError(AppError):
    """Operação não permitida no estado atual do ciclo de vida."""
