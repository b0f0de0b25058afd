"""
Testes do módulo FSM da sessão de autenticação.

- Testamos comportamento e contrato público
- Um teste cobre múltiplos componentes relacionados
- Foco em cenários válidos + inválidos + bordas
"""

from datetime import datetime

import pytest

from fsm import (
    DEFAULT_HISTORY_LIMIT,
    DEFAULT_INITIAL_STATE,
    IDENTITY_STATES,
    INITIAL_STATES,
    VALID_TRANSITIONS,
    FSMStateMachine,
    GuardResult,
    SessionState,
    StateTransition,
    TransitionResult,
    create_fsm,
    evaluate_guards,
    get_valid_targets,
    has_identity,
    is_transition_valid,
    is_valid_state,
    validate_transition_map,
)
from fsm.rules.guards import DEFAULT_GUARDS, guard_same_state, guard_valid_state


class TestSessionStates:
    """SessionState, IDENTITY_STATES, has_identity e is_valid_state."""

    def test_enum_has_three_states_and_only_authenticated_has_identity(self) -> None:
        assert set(SessionState) == {
            SessionState.UNAUTHENTICATED,
            SessionState.AUTHENTICATING,
            SessionState.AUTHENTICATED,
        }
        assert frozenset({SessionState.AUTHENTICATED}) == IDENTITY_STATES
        assert has_identity(SessionState.AUTHENTICATED)
        assert not has_identity(SessionState.AUTHENTICATING)
        assert not has_identity(SessionState.UNAUTHENTICATED)

    def test_default_initial_state_is_unauthenticated(self) -> None:
        assert DEFAULT_INITIAL_STATE is SessionState.UNAUTHENTICATED
        assert frozenset({SessionState.UNAUTHENTICATED}) == INITIAL_STATES

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("UNAUTHENTICATED", True),
            ("AUTHENTICATED", True),
            (SessionState.AUTHENTICATING, True),
            ("LOGGED_IN", False),
            ("", False),
        ],
    )
    def test_is_valid_state(self, value: str, expected: bool) -> None:
        assert is_valid_state(value) is expected

    def test_str_is_value(self) -> None:
        assert str(SessionState.AUTHENTICATED) == "AUTHENTICATED"


class TestTransitionMap:
    """VALID_TRANSITIONS e funções auxiliares."""

    def test_map_is_complete_and_has_no_terminal_state(self) -> None:
        assert validate_transition_map() == []
        for state in SessionState:
            assert get_valid_targets(state), f"{state} sem saída"

    def test_no_reflexive_transitions_in_map(self) -> None:
        for state, targets in VALID_TRANSITIONS.items():
            assert state not in targets

    def test_login_lifecycle_edges(self) -> None:
        # login iniciado / sucesso / falha / logout
        assert is_transition_valid(
            SessionState.UNAUTHENTICATED, SessionState.AUTHENTICATING
        )
        assert is_transition_valid(
            SessionState.AUTHENTICATING, SessionState.AUTHENTICATED
        )
        assert is_transition_valid(
            SessionState.AUTHENTICATING, SessionState.UNAUTHENTICATED
        )
        assert is_transition_valid(
            SessionState.AUTHENTICATED, SessionState.UNAUTHENTICATED
        )

    def test_late_login_after_logout_is_allowed(self) -> None:
        """Login pendente que resolve depois do logout reautentica."""
        assert is_transition_valid(
            SessionState.UNAUTHENTICATED, SessionState.AUTHENTICATED
        )

    def test_validate_transition_map_reports_missing_and_dead_end(self) -> None:
        broken = {
            SessionState.UNAUTHENTICATED: frozenset({SessionState.AUTHENTICATING}),
            SessionState.AUTHENTICATING: frozenset(),
        }
        errors = validate_transition_map(broken)
        assert any("AUTHENTICATED ausente" in e for e in errors)
        assert any("AUTHENTICATING não tem saída" in e for e in errors)

    def test_unknown_state_has_no_targets(self) -> None:
        assert get_valid_targets("NOPE") == frozenset()  # type: ignore[arg-type]


class TestGuards:
    """Guards padrão e avaliação em cadeia."""

    def test_guard_result_factories(self) -> None:
        allowed = GuardResult.allow()
        denied = GuardResult.deny("motivo")
        assert allowed.allowed is True
        assert allowed.reason is None
        assert denied.allowed is False
        assert denied.reason == "motivo"

    def test_same_state_guard_denies_reflexive(self) -> None:
        result = guard_same_state(
            SessionState.AUTHENTICATED, SessionState.AUTHENTICATED
        )
        assert not result.allowed
        assert "reflexiva" in (result.reason or "")

    def test_valid_state_guard_rejects_non_enum(self) -> None:
        result = guard_valid_state(SessionState.AUTHENTICATED, "LOGGED_IN")  # type: ignore[arg-type]
        assert not result.allowed
        assert "destino inválido" in (result.reason or "")

    def test_evaluate_guards_returns_first_denial(self) -> None:
        assert DEFAULT_GUARDS == (guard_valid_state, guard_same_state)
        result = evaluate_guards(
            SessionState.UNAUTHENTICATED, SessionState.UNAUTHENTICATED
        )
        assert not result.allowed

    def test_evaluate_guards_with_custom_list(self) -> None:
        def deny_all(_from: SessionState, _to: SessionState) -> GuardResult:
            return GuardResult.deny("bloqueado")

        result = evaluate_guards(
            SessionState.UNAUTHENTICATED,
            SessionState.AUTHENTICATING,
            guards=[deny_all],
        )
        assert result.reason == "bloqueado"


class TestTransitionTypes:
    """StateTransition e TransitionResult."""

    def test_state_transition_log_dict_has_names_and_timestamp(self) -> None:
        transition = StateTransition(
            from_state=SessionState.UNAUTHENTICATED,
            to_state=SessionState.AUTHENTICATING,
            trigger="login_started",
            metadata={"attempt": 1},
        )
        assert isinstance(transition.timestamp, datetime)
        log = transition.to_log_dict()
        assert log["from_state"] == "UNAUTHENTICATED"
        assert log["to_state"] == "AUTHENTICATING"
        assert log["trigger"] == "login_started"
        assert log["metadata"] == {"attempt": 1}

    def test_state_transition_requires_trigger(self) -> None:
        with pytest.raises(ValueError, match="trigger"):
            StateTransition(
                from_state=SessionState.UNAUTHENTICATED,
                to_state=SessionState.AUTHENTICATING,
                trigger="  ",
            )

    def test_transition_result_consistency(self) -> None:
        with pytest.raises(ValueError, match="deve incluir transition"):
            TransitionResult(success=True)
        with pytest.raises(ValueError, match="deve incluir error_reason"):
            TransitionResult(success=False)


class TestFSMStateMachine:
    """FSMStateMachine: transições, histórico e resumos."""

    def test_full_login_logout_cycle_records_history(self) -> None:
        fsm = create_fsm("sess-1")
        assert fsm.current_state is SessionState.UNAUTHENTICATED
        assert not fsm.has_identity

        assert fsm.transition(SessionState.AUTHENTICATING, "login_started").success
        assert fsm.transition(SessionState.AUTHENTICATED, "login_resolved").success
        assert fsm.has_identity
        assert fsm.transition(SessionState.UNAUTHENTICATED, "logout").success

        triggers = [t.trigger for t in fsm.history]
        assert triggers == ["login_started", "login_resolved", "logout"]
        assert [h["to_state"] for h in fsm.get_history_summary()] == [
            "AUTHENTICATING",
            "AUTHENTICATED",
            "UNAUTHENTICATED",
        ]

    def test_reflexive_transition_is_denied_and_not_recorded(self) -> None:
        fsm = FSMStateMachine(session_id="s")
        result = fsm.transition(SessionState.UNAUTHENTICATED, "logout")
        assert not result.success
        assert "reflexiva" in (result.error_reason or "")
        assert fsm.history == []

    def test_can_transition_to_and_valid_targets(self) -> None:
        fsm = FSMStateMachine(initial_state=SessionState.AUTHENTICATED)
        assert fsm.can_transition_to(SessionState.UNAUTHENTICATED)
        assert fsm.can_transition_to(SessionState.AUTHENTICATING)
        assert not fsm.can_transition_to(SessionState.AUTHENTICATED)
        assert fsm.get_valid_targets() == frozenset(
            {SessionState.AUTHENTICATING, SessionState.UNAUTHENTICATED}
        )

    def test_history_is_bounded(self) -> None:
        fsm = FSMStateMachine(history_limit=3)
        for _ in range(5):
            fsm.transition(SessionState.AUTHENTICATING, "login_started")
            fsm.transition(SessionState.UNAUTHENTICATED, "login_resolved")
        assert len(fsm.history) == 3
        assert DEFAULT_HISTORY_LIMIT == 50

    def test_last_transition_and_identity_flags(self) -> None:
        fsm = FSMStateMachine()
        assert fsm.last_transition is None
        fsm.transition(SessionState.AUTHENTICATED, "restored")
        last = fsm.last_transition
        assert last is not None
        assert last.gains_identity
        assert not last.loses_identity
        fsm.transition(SessionState.UNAUTHENTICATED, "logout")
        assert fsm.last_transition.loses_identity  # type: ignore[union-attr]

    def test_history_property_returns_copy(self) -> None:
        fsm = FSMStateMachine()
        fsm.transition(SessionState.AUTHENTICATING, "login_started")
        fsm.history.clear()
        assert len(fsm.history) == 1

    def test_state_summary_is_log_safe(self) -> None:
        fsm = create_fsm("sess-42", initial_state=SessionState.AUTHENTICATED)
        summary = fsm.get_state_summary()
        assert summary == {
            "session_id": "sess-42",
            "current_state": "AUTHENTICATED",
            "has_identity": True,
            "transition_count": 0,
            "valid_targets": ["AUTHENTICATING", "UNAUTHENTICATED"],
        }

    def test_reset_clears_history(self) -> None:
        fsm = FSMStateMachine()
        fsm.transition(SessionState.AUTHENTICATING, "login_started")
        fsm.reset()
        assert fsm.current_state is DEFAULT_INITIAL_STATE
        assert fsm.history == []
        fsm.reset(SessionState.AUTHENTICATED)
        assert fsm.current_state is SessionState.AUTHENTICATED
