"""Tipos do barramento de eventos de ciclo de vida.

Cada evento conhecido é um descritor ``Event[P]`` que amarra o nome ao tipo
do payload; o EventManager confere o tipo no disparo. Eventos ad-hoc podem
usar o nome em string com payload ``dict``.

Payloads são passados por referência: um listener pode mutá-los e os
listeners seguintes (e quem disparou) enxergam a mutação.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from app.application import Application
    from config.store import ConfigStore

P = TypeVar("P")


@dataclass(frozen=True, slots=True)
class Event(Generic[P]):
    """Descritor de evento tipado."""

    name: str
    payload_type: type[P]

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("nome do evento não pode ser vazio")

    def __str__(self) -> str:
        return self.name


@dataclass(slots=True)
class AppPayload:
    """Payload de app.boot / app.booted."""

    app: Application


@dataclass(slots=True)
class ConfigBeforePayload:
    """Payload de config.before.

    ``files`` é a lista que o ConfigBootLoader vai carregar depois do disparo;
    listeners podem filtrá-la ou estendê-la in place.
    """

    files: list[str]
    config: ConfigStore


@dataclass(slots=True)
class ConfigAfterPayload:
    """Payload de config.after, com o store já populado."""

    config: ConfigStore


EVT_APP_BOOT = "app.boot"
EVT_APP_BOOTED = "app.booted"
EVT_CONFIG_BEFORE = "config.before"
EVT_CONFIG_AFTER = "config.after"

APP_BOOT: Event[AppPayload] = Event(EVT_APP_BOOT, AppPayload)
APP_BOOTED: Event[AppPayload] = Event(EVT_APP_BOOTED, AppPayload)
CONFIG_BEFORE: Event[ConfigBeforePayload] = Event(EVT_CONFIG_BEFORE, ConfigBeforePayload)
CONFIG_AFTER: Event[ConfigAfterPayload] = Event(EVT_CONFIG_AFTER, ConfigAfterPayload)


@dataclass(frozen=True, slots=True)
class FireResult:
    """Resultado de um disparo.

    Attributes:
        event_name: Evento disparado
        success: Se todos os listeners rodaram sem exceção
        invoked: Quantos listeners foram chamados (inclui o que falhou)
        error: Exceção do primeiro listener que falhou
        listener_name: Nome do listener que falhou
    """

    event_name: str
    success: bool
    invoked: int = 0
    error: BaseException | None = None
    listener_name: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("Disparo bem-sucedido não pode carregar error")
        if not self.success and self.error is None:
            raise ValueError("Disparo com falha deve incluir error")

    def to_log_dict(self) -> dict[str, Any]:
        return {
            "event": self.event_name,
            "success": self.success,
            "invoked": self.invoked,
            "listener": self.listener_name,
            "error_type": type(self.error).__name__ if self.error else None,
        }
