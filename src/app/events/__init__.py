"""Eventos de ciclo de vida — descritores tipados e EventManager."""

from app.events.manager import EventManager, Listener
from app.events.types import (
    APP_BOOT,
    APP_BOOTED,
    CONFIG_AFTER,
    CONFIG_BEFORE,
    EVT_APP_BOOT,
    EVT_APP_BOOTED,
    EVT_CONFIG_AFTER,
    EVT_CONFIG_BEFORE,
    AppPayload,
    ConfigAfterPayload,
    ConfigBeforePayload,
    Event,
    FireResult,
)

__all__ = [
    "APP_BOOT",
    "APP_BOOTED",
    "CONFIG_AFTER",
    "CONFIG_BEFORE",
    "EVT_APP_BOOT",
    "EVT_APP_BOOTED",
    "EVT_CONFIG_AFTER",
    "EVT_CONFIG_BEFORE",
    "AppPayload",
    "ConfigAfterPayload",
    "ConfigBeforePayload",
    "Event",
    "EventManager",
    "FireResult",
    "Listener",
]
