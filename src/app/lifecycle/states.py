"""
Estados do ciclo de vida da Application.

    UNINITIALIZED → BOOTING → BOOTED
                       ↓         ↓
                     FAILED ←────┘

BOOTED encerra a fase de boot; só sai dele se um listener de app.booted
falhar. FAILED é terminal: a instância nunca serve tráfego.
"""

from enum import StrEnum


class AppState(StrEnum):
    """Estados do ciclo de vida de uma Application."""

    UNINITIALIZED = "UNINITIALIZED"
    BOOTING = "BOOTING"
    BOOTED = "BOOTED"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


DEFAULT_INITIAL_STATE = AppState.UNINITIALIZED

TERMINAL_STATES: frozenset[AppState] = frozenset({AppState.FAILED})


def is_terminal(state: AppState) -> bool:
    return state in TERMINAL_STATES
