"""
Guards avaliados antes de cada transição da sessão.

Um guard recebe (origem, destino) e devolve GuardResult; o primeiro
que negar interrompe a avaliação e o motivo vai para TransitionResult.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from fsm.states.session import SessionState


@dataclass(frozen=True, slots=True)
class GuardResult:
    """
    Veredito de um guard.

    Attributes:
        allowed: Se a transição pode prosseguir
        reason: Motivo da negação (None quando allowed)
    """

    allowed: bool
    reason: str | None = None

    @classmethod
    def allow(cls) -> "GuardResult":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "GuardResult":
        return cls(allowed=False, reason=reason)


Guard = Callable[[SessionState, SessionState], GuardResult]


def guard_valid_state(
    from_state: SessionState,
    to_state: SessionState,
) -> GuardResult:
    """Origem e destino precisam ser membros de SessionState."""
    if not isinstance(from_state, SessionState):
        return GuardResult.deny(f"Estado de origem inválido: {from_state}")
    if not isinstance(to_state, SessionState):
        return GuardResult.deny(f"Estado de destino inválido: {to_state}")
    return GuardResult.allow()


def guard_same_state(
    from_state: SessionState,
    to_state: SessionState,
) -> GuardResult:
    """
    Nega transição reflexiva.

    O Session Store trata destino igual ao atual como no-op antes de
    chegar aqui; o histórico nunca registra UNAUTHENTICATED → UNAUTHENTICATED.
    """
    if from_state == to_state:
        return GuardResult.deny(
            f"Transição reflexiva não permitida: {from_state.name} → {to_state.name}"
        )
    return GuardResult.allow()


# Ordem importa: estados inválidos não chegam ao teste de reflexiva
DEFAULT_GUARDS: tuple[Guard, ...] = (
    guard_valid_state,
    guard_same_state,
)


def evaluate_guards(
    from_state: SessionState,
    to_state: SessionState,
    guards: Sequence[Guard] | None = None,
) -> GuardResult:
    """
    Avalia os guards em ordem.

    Args:
        from_state: Estado de origem
        to_state: Estado de destino
        guards: Guards a aplicar (DEFAULT_GUARDS quando None)

    Returns:
        Primeira negação encontrada, ou allow()
    """
    for guard in DEFAULT_GUARDS if guards is None else guards:
        result = guard(from_state, to_state)
        if not result.allowed:
            return result
    return GuardResult.allow()
