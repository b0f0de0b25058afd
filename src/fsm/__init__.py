"""
FSM da sessão de autenticação do painel.

Três estados (UNAUTHENTICATED, AUTHENTICATING, AUTHENTICATED), sem
estado terminal. O Session Store é o único cliente: ele decide o
destino e a máquina valida, registra e expõe o histórico.
"""

from fsm.manager import (
    DEFAULT_HISTORY_LIMIT,
    INITIAL_STATES,
    FSMStateMachine,
    create_fsm,
)
from fsm.rules import Guard, GuardResult, evaluate_guards
from fsm.states import (
    DEFAULT_INITIAL_STATE,
    IDENTITY_STATES,
    SessionState,
    has_identity,
    is_valid_state,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import StateTransition, TransitionResult

__all__ = [
    "DEFAULT_HISTORY_LIMIT",
    "DEFAULT_INITIAL_STATE",
    "IDENTITY_STATES",
    "INITIAL_STATES",
    "VALID_TRANSITIONS",
    "FSMStateMachine",
    "Guard",
    "GuardResult",
    "SessionState",
    "StateTransition",
    "TransitionResult",
    "create_fsm",
    "evaluate_guards",
    "get_valid_targets",
    "has_identity",
    "is_transition_valid",
    "is_valid_state",
    "validate_transition_map",
]
