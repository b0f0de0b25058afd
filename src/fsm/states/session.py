"""
Estados canônicos da sessão de autenticação do painel.

Este módulo define os estados que a sessão do operador pode assumir
durante a vida do processo. A máquina não tem estado terminal: depois
de um logout a sessão volta a aceitar login indefinidamente.
"""

from enum import StrEnum


class SessionState(StrEnum):
    """
    Estados canônicos da sessão de autenticação.

    Estados:
        - UNAUTHENTICATED: Nenhuma identidade presente
        - AUTHENTICATING: Login em andamento (aguardando o diretório)
        - AUTHENTICATED: Identidade adotada e capacidades derivadas
    """

    UNAUTHENTICATED = "UNAUTHENTICATED"
    AUTHENTICATING = "AUTHENTICATING"
    AUTHENTICATED = "AUTHENTICATED"

    def __str__(self) -> str:
        return self.value


# Estado inicial padrão antes de restore()
DEFAULT_INITIAL_STATE: SessionState = SessionState.UNAUTHENTICATED

# Estados em que uma identidade está presente
IDENTITY_STATES: frozenset[SessionState] = frozenset({
    SessionState.AUTHENTICATED,
})


def has_identity(state: SessionState) -> bool:
    """
    Verifica se o estado implica identidade adotada.

    Args:
        state: Estado a ser verificado

    Returns:
        True se há identidade corrente nesse estado
    """
    return state in IDENTITY_STATES


def is_valid_state(state: object) -> bool:
    """
    Verifica se o valor é um estado válido do enum.

    Args:
        state: Estado ou nome do estado

    Returns:
        True se corresponde a um SessionState
    """
    if isinstance(state, SessionState):
        return True
    try:
        SessionState(state)
    except ValueError:
        return False
    return True
