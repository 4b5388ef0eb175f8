"""
Ciclo de vida da Application — estados, transições e máquina.
"""

from app.lifecycle.machine import LifecycleMachine
from app.lifecycle.states import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    AppState,
    is_terminal,
)
from app.lifecycle.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from app.lifecycle.types import StateTransition, TransitionResult

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "AppState",
    "LifecycleMachine",
    "StateTransition",
    "TransitionResult",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "validate_transition_map",
]
