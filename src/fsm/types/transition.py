"""
Registros imutáveis das transições da sessão.

StateTransition entra no histórico limitado da máquina; TransitionResult
é o retorno de FSMStateMachine.transition().
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fsm.states.session import SessionState, has_identity


@dataclass(frozen=True, slots=True)
class StateTransition:
    """
    Uma mudança de estado da sessão.

    Attributes:
        from_state: Estado anterior
        to_state: Novo estado
        trigger: Gatilho (ex: 'login_started', 'login_resolved', 'logout')
        metadata: Dados de auditoria; nunca senha, email ou identidade completa
        timestamp: Instante da transição (UTC)
    """

    from_state: SessionState
    to_state: SessionState
    trigger: str
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.trigger or not self.trigger.strip():
            raise ValueError("trigger não pode ser vazio")

    @property
    def gains_identity(self) -> bool:
        """A transição adota uma identidade."""
        return has_identity(self.to_state) and not has_identity(self.from_state)

    @property
    def loses_identity(self) -> bool:
        """A transição descarta a identidade corrente."""
        return has_identity(self.from_state) and not has_identity(self.to_state)

    def to_log_dict(self) -> dict[str, Any]:
        """Representação para logs estruturados."""
        return {
            "from_state": self.from_state.name,
            "to_state": self.to_state.name,
            "trigger": self.trigger,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """
    Resultado de FSMStateMachine.transition().

    Attributes:
        success: Se o estado mudou
        transition: Registro da transição (quando success)
        error_reason: Motivo da recusa (quando não success)
    """

    success: bool
    transition: StateTransition | None = None
    error_reason: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.transition is None:
            raise ValueError("Transição bem-sucedida deve incluir transition")
        if not self.success and self.error_reason is None:
            raise ValueError("Transição falha deve incluir error_reason")
