"""Registros de transição da sessão (histórico e resultado)."""

from fsm.types.transition import StateTransition, TransitionResult

__all__ = ["StateTransition", "TransitionResult"]
