"""
FSMStateMachine da sessão de autenticação.

Aplica VALID_TRANSITIONS e os guards a cada pedido de mudança de
estado e guarda as últimas transições aceitas para auditoria.
"""

import logging
from collections import deque
from typing import Any

from fsm.rules.guards import evaluate_guards
from fsm.states.session import (
    DEFAULT_INITIAL_STATE,
    SessionState,
    has_identity,
)
from fsm.transitions.rules import get_valid_targets, is_transition_valid
from fsm.types.transition import StateTransition, TransitionResult

logger = logging.getLogger(__name__)

# A sessão vive o processo inteiro; o histórico não pode crescer sem limite
DEFAULT_HISTORY_LIMIT = 50

INITIAL_STATES = frozenset({DEFAULT_INITIAL_STATE})


class FSMStateMachine:
    """
    Estado corrente da sessão e histórico limitado de transições.

    Não conhece identidades nem armazenamento: quem decide o destino é
    o Session Store; aqui só se valida e registra.
    """

    __slots__ = ("_history", "_session_id", "_state")

    def __init__(
        self,
        initial_state: SessionState | None = None,
        session_id: str = "",
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self._state = initial_state or DEFAULT_INITIAL_STATE
        self._history: deque[StateTransition] = deque(maxlen=history_limit)
        self._session_id = session_id

    @property
    def current_state(self) -> SessionState:
        return self._state

    @property
    def history(self) -> list[StateTransition]:
        """Cópia do histórico, da transição mais antiga à mais recente."""
        return list(self._history)

    @property
    def last_transition(self) -> StateTransition | None:
        return self._history[-1] if self._history else None

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def has_identity(self) -> bool:
        return has_identity(self._state)

    def can_transition_to(self, target: SessionState) -> bool:
        return self._check(target) is None

    def get_valid_targets(self) -> frozenset[SessionState]:
        return get_valid_targets(self._state)

    def transition(
        self,
        target: SessionState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Move a sessão para `target`.

        Args:
            target: Estado de destino
            trigger: Gatilho (ex: 'login_started', 'logout')
            metadata: Dados de auditoria sem PII

        Returns:
            TransitionResult; recusas não alteram estado nem histórico
        """
        reason = self._check(target)
        if reason is not None:
            logger.debug(
                "session_transition_rejected",
                extra={
                    "session_id": self._session_id,
                    "from_state": self._state.name,
                    "trigger": trigger,
                    "reason": reason,
                },
            )
            return TransitionResult(success=False, error_reason=reason)

        transition = StateTransition(
            from_state=self._state,
            to_state=target,
            trigger=trigger,
            metadata=metadata or {},
        )
        self._state = target
        self._history.append(transition)
        logger.debug(
            "session_transition",
            extra={"session_id": self._session_id, **transition.to_log_dict()},
        )
        return TransitionResult(success=True, transition=transition)

    def _check(self, target: SessionState) -> str | None:
        # Guards antes do mapa: reflexiva e estado inválido têm motivo próprio
        verdict = evaluate_guards(self._state, target)
        if not verdict.allowed:
            return verdict.reason
        if not is_transition_valid(self._state, target):
            return f"Transição inválida: {self._state.name} → {target.name}"
        return None

    def get_state_summary(self) -> dict[str, Any]:
        """Resumo seguro para logs (sem identidade)."""
        return {
            "session_id": self._session_id,
            "current_state": self._state.name,
            "has_identity": self.has_identity,
            "transition_count": len(self._history),
            "valid_targets": sorted(s.name for s in self.get_valid_targets()),
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        return [t.to_log_dict() for t in self._history]

    def reset(self, new_initial_state: SessionState | None = None) -> None:
        """Volta ao estado inicial e descarta o histórico."""
        self._state = new_initial_state or DEFAULT_INITIAL_STATE
        self._history.clear()


def create_fsm(
    session_id: str,
    initial_state: SessionState | None = None,
) -> FSMStateMachine:
    return FSMStateMachine(initial_state=initial_state, session_id=session_id)
