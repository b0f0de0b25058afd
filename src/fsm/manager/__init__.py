"""FSMStateMachine e constantes de histórico."""

from fsm.manager.machine import (
    DEFAULT_HISTORY_LIMIT,
    INITIAL_STATES,
    FSMStateMachine,
    create_fsm,
)

__all__ = [
    "DEFAULT_HISTORY_LIMIT",
    "INITIAL_STATES",
    "FSMStateMachine",
    "create_fsm",
]
