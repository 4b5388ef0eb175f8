"""Registro publish/subscribe de eventos de ciclo de vida.

Listeners são chamados de forma síncrona, na ordem de registro. Registros
duplicados disparam duas vezes. Evento sem listeners é no-op.

``fire`` para no primeiro listener que falhar e devolve a falha no
FireResult; ``must_fire`` aplica a política fatal e levanta
EventListenerError, que é como um listener aborta o boot.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from app.events.types import Event, FireResult
from utils.errors import EventListenerError

logger = logging.getLogger(__name__)

P = TypeVar("P")

Listener = Callable[[Any], None]
EventKey = Event[Any] | str


def _event_name(event: EventKey) -> str:
    name = event.name if isinstance(event, Event) else event
    if not name:
        raise ValueError("nome do evento não pode ser vazio")
    return name


def _listener_name(listener: Listener) -> str:
    return getattr(listener, "__qualname__", None) or repr(listener)


class EventManager:
    """Barramento de eventos síncrono, um por Application.

    O registro é uma operação de setup: após ``seal()`` (feito ao fim do
    boot) novos registros ainda funcionam mas geram warning, pois não são
    seguros com requisições concorrentes em curso.
    """

    __slots__ = ("_listeners", "_sealed")

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        self._sealed = True

    def on(self, event: Event[P] | str, listener: Callable[[P], None]) -> None:
        """Registra ``listener`` para ``event``."""
        if not callable(listener):
            raise TypeError(f"listener deve ser callable, recebido {type(listener).__name__}")
        name = _event_name(event)
        if self._sealed:
            logger.warning(
                "event_listener_registered_late",
                extra={"event": name, "listener": _listener_name(listener)},
            )
        self._listeners.setdefault(name, []).append(listener)

    def off(self, event: EventKey, listener: Listener | None = None) -> int:
        """Remove ``listener`` (todas as ocorrências) ou todos os listeners.

        Returns:
            Quantidade removida.
        """
        name = _event_name(event)
        current = self._listeners.get(name, [])
        if listener is None:
            removed = len(current)
            self._listeners.pop(name, None)
            return removed
        kept = [item for item in current if item != listener]
        removed = len(current) - len(kept)
        if kept:
            self._listeners[name] = kept
        else:
            self._listeners.pop(name, None)
        return removed

    def has_listeners(self, event: EventKey) -> bool:
        return bool(self._listeners.get(_event_name(event)))

    def listeners(self, event: EventKey) -> list[Listener]:
        """Cópia da lista de listeners, na ordem de invocação."""
        return list(self._listeners.get(_event_name(event), ()))

    def clear(self) -> None:
        self._listeners.clear()

    def fire(self, event: Event[P] | str, payload: P) -> FireResult:
        """Invoca os listeners de ``event`` com ``payload``.

        Para no primeiro listener que levantar exceção.

        Raises:
            TypeError: Payload incompatível com o descritor do evento.
        """
        name = _event_name(event)
        if isinstance(event, Event) and not isinstance(payload, event.payload_type):
            raise TypeError(
                f"Evento '{name}' espera payload {event.payload_type.__name__}, "
                f"recebido {type(payload).__name__}"
            )

        # Snapshot: registros feitos durante o disparo valem a partir do próximo
        listeners = list(self._listeners.get(name, ()))
        invoked = 0
        for listener in listeners:
            invoked += 1
            try:
                listener(payload)
            except Exception as exc:
                result = FireResult(
                    event_name=name,
                    success=False,
                    invoked=invoked,
                    error=exc,
                    listener_name=_listener_name(listener),
                )
                logger.warning("event_listener_failed", extra=result.to_log_dict())
                return result

        if listeners:
            logger.debug("event_fired", extra={"event": name, "invoked": invoked})
        return FireResult(event_name=name, success=True, invoked=invoked)

    def must_fire(self, event: Event[P] | str, payload: P) -> FireResult:
        """Como ``fire``, mas a falha de um listener é fatal para o chamador.

        Raises:
            EventListenerError: Primeiro listener que falhou (``__cause__``
                aponta para a exceção original).
        """
        result = self.fire(event, payload)
        if not result.success:
            raise EventListenerError(
                result.event_name,
                result.listener_name or "?",
                str(result.error) or type(result.error).__name__,
            ) from result.error
        return result
