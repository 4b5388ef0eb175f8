"""
Grafo de transições válidas do ciclo de vida.
"""

from app.lifecycle.states import TERMINAL_STATES, AppState

TransitionMap = dict[AppState, frozenset[AppState]]

VALID_TRANSITIONS: TransitionMap = {
    AppState.UNINITIALIZED: frozenset({AppState.BOOTING}),
    # Loader ou listener de app.boot falhou → FAILED
    AppState.BOOTING: frozenset({AppState.BOOTED, AppState.FAILED}),
    # Listener de app.booted falhou → FAILED
    AppState.BOOTED: frozenset({AppState.FAILED}),
    AppState.FAILED: frozenset(),
}


def get_valid_targets(state: AppState) -> frozenset[AppState]:
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: AppState, to_state: AppState) -> bool:
    """
    Verifica se a transição é permitida pelo grafo.

    Args:
        from_state: Estado de origem
        to_state: Estado de destino

    Returns:
        True se permitida
    """
    if from_state in TERMINAL_STATES:
        return False
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Confere a integridade de VALID_TRANSITIONS.

    Returns:
        Lista de erros (vazia se íntegro)
    """
    errors: list[str] = []

    for state in AppState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for state in TERMINAL_STATES:
        if VALID_TRANSITIONS.get(state):
            errors.append(f"Estado terminal {state.name} não deveria ter transições")

    return errors
