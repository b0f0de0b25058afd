"""Estados da sessão: UNAUTHENTICATED, AUTHENTICATING, AUTHENTICATED."""

from fsm.states.session import (
    DEFAULT_INITIAL_STATE,
    IDENTITY_STATES,
    SessionState,
    has_identity,
    is_valid_state,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "IDENTITY_STATES",
    "SessionState",
    "has_identity",
    "is_valid_state",
]
