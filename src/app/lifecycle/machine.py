"""
Máquina de estados do ciclo de vida (LifecycleMachine).

Valida cada transição contra VALID_TRANSITIONS e guarda o histórico.
"""

from typing import Any

from app.lifecycle.states import DEFAULT_INITIAL_STATE, AppState, is_terminal
from app.lifecycle.transitions import get_valid_targets, is_transition_valid
from app.lifecycle.types import StateTransition, TransitionResult


class LifecycleMachine:
    """
    Estado atual e histórico de uma Application.

    Attributes:
        current_state: Estado atual
        history: Transições realizadas
    """

    __slots__ = ("_current_state", "_history", "_owner")

    def __init__(
        self,
        initial_state: AppState | None = None,
        owner: str = "",
    ) -> None:
        """
        Args:
            initial_state: Estado inicial (UNINITIALIZED se None)
            owner: Nome da aplicação, para logs
        """
        self._current_state = initial_state or DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []
        self._owner = owner

    @property
    def current_state(self) -> AppState:
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia)."""
        return list(self._history)

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._current_state)

    def can_transition_to(self, target: AppState) -> bool:
        return is_transition_valid(self._current_state, target)

    def transition(
        self,
        target: AppState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta mover a máquina para ``target``.

        Args:
            target: Estado de destino
            trigger: Identificador do gatilho
            metadata: Dados adicionais para logs

        Returns:
            TransitionResult com sucesso ou motivo da recusa
        """
        if not is_transition_valid(self._current_state, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_state.name} → {target.name}"
                ),
            )

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
            metadata=metadata or {},
        )
        self._current_state = target
        self._history.append(transition)
        return TransitionResult(success=True, transition=transition)

    def get_state_summary(self) -> dict[str, Any]:
        """Resumo seguro para logs e para o endpoint de health."""
        return {
            "owner": self._owner,
            "current_state": self._current_state.name,
            "is_terminal": self.is_terminal,
            "transition_count": len(self._history),
            "valid_targets": sorted(s.name for s in get_valid_targets(self._current_state)),
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        return [t.to_log_dict() for t in self._history]
