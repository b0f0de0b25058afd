"""Grafo de transições da sessão.

Não há estado terminal: toda sessão pode voltar a UNAUTHENTICATED e
de lá iniciar outro login.
"""

from fsm.states.session import SessionState

TransitionMap = dict[SessionState, frozenset[SessionState]]

_U = SessionState.UNAUTHENTICATED
_P = SessionState.AUTHENTICATING
_A = SessionState.AUTHENTICATED

VALID_TRANSITIONS: TransitionMap = {
    # login iniciado; restore; login pendente resolvido após logout
    _U: frozenset({_P, _A}),
    # sucesso; falha ou logout durante a espera
    _P: frozenset({_A, _U}),
    # troca de operador (novo login) ou logout
    _A: frozenset({_P, _U}),
}


def get_valid_targets(state: SessionState) -> frozenset[SessionState]:
    """Destinos a partir de `state` (vazio para valor desconhecido)."""
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: SessionState, to_state: SessionState) -> bool:
    return to_state in get_valid_targets(from_state)


def validate_transition_map(transitions: TransitionMap | None = None) -> list[str]:
    """
    Confere a integridade de um mapa de transições.

    Todo SessionState precisa ter entrada e ao menos uma saída, e todo
    destino precisa ser SessionState.

    Returns:
        Erros encontrados (vazia se íntegro)
    """
    graph = VALID_TRANSITIONS if transitions is None else transitions
    errors: list[str] = []

    for state in SessionState:
        targets = graph.get(state)
        if targets is None:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")
        elif not targets:
            errors.append(f"Estado {state.name} não tem saída")

    errors.extend(
        f"Transição {origin.name} → {target}: destino inválido"
        for origin, targets in graph.items()
        for target in targets
        if not isinstance(target, SessionState)
    )
    return errors
