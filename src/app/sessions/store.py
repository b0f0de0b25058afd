"""Session Store: identidade corrente do painel.

Dono da Identity e do CapabilitySet derivado. Todas as mutações passam
pelos comandos deste módulo (restore, login, logout, update_profile,
change_password); a FSM de sessão registra cada transição.

Corrida conhecida: logins sobrepostos não são coalescidos (a última
resolução vence) e um logout durante login pendente não o aborta; um
sucesso posterior reautentica a sessão.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from typing import TYPE_CHECKING, Any

from app.constants.storage_keys import USER_KEY
from app.domain.identity import Identity, Role, parse_role
from app.domain.permissions import CapabilitySet, derive_permissions
from app.observability import (
    record_auth_event,
    record_latency,
    reset_correlation_id,
    set_correlation_id,
)
from app.sessions.models import (
    INVALID_CREDENTIALS_MESSAGE,
    LOGIN_FAILED_MESSAGE,
    LoginErrorKind,
    LoginResult,
)
from app.sessions.password_policy import PasswordPolicy
from config.logging import log_fallback
from fsm import FSMStateMachine, SessionState, StateTransition
from utils.errors import (
    CorruptPersistedStateError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    StorageUnavailableError,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from app.protocols.storage import KeyValueStorageProtocol
    from app.sessions.directory import IdentityDirectory

logger = logging.getLogger(__name__)

COMPONENT = "session_store"
DEFAULT_LOGIN_DELAY_SECONDS = 1.0


class SessionStore:
    """Estado de autenticação: identidade corrente ou ausência.

    Estados: UNAUTHENTICATED, AUTHENTICATING (login pendente) e
    AUTHENTICATED. O estado inicial vem de restore().
    """

    __slots__ = (
        "_directory",
        "_error",
        "_error_kind",
        "_fsm",
        "_identity",
        "_login_delay",
        "_password_policy",
        "_pending_logins",
        "_sleep",
        "_storage",
    )

    def __init__(
        self,
        storage: KeyValueStorageProtocol,
        directory: IdentityDirectory,
        *,
        login_delay_seconds: float = DEFAULT_LOGIN_DELAY_SECONDS,
        password_policy: PasswordPolicy | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        session_id: str | None = None,
    ) -> None:
        """Inicializa store sem identidade (chamar restore() em seguida).

        Args:
            storage: Armazenamento durável (chave `user`)
            directory: Diretório fechado de identidades
            login_delay_seconds: Atraso simulado do login
            password_policy: Política de troca de senha
            sleep: Função de espera (substituível em testes)
            session_id: Identificador para logs da FSM
        """
        self._storage = storage
        self._directory = directory
        self._login_delay = login_delay_seconds
        self._password_policy = password_policy or PasswordPolicy()
        self._sleep = sleep
        self._fsm = FSMStateMachine(session_id=session_id or uuid.uuid4().hex[:12])
        self._identity: Identity | None = None
        self._error: str | None = None
        self._error_kind: LoginErrorKind | None = None
        self._pending_logins = 0

    # ──────────────────────────────────────────────────────────────
    # Projeções
    # ──────────────────────────────────────────────────────────────

    @property
    def state(self) -> SessionState:
        return self._fsm.current_state

    @property
    def current_identity(self) -> Identity | None:
        return self._identity

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    @property
    def is_login_pending(self) -> bool:
        return self._pending_logins > 0

    @property
    def capabilities(self) -> CapabilitySet:
        """CapabilitySet derivado da identidade corrente (vazio sem identidade)."""
        return derive_permissions(self._identity)

    @property
    def error(self) -> str | None:
        """Última mensagem de falha de login retida."""
        return self._error

    @property
    def error_kind(self) -> LoginErrorKind | None:
        return self._error_kind

    @property
    def history(self) -> list[StateTransition]:
        return self._fsm.history

    derive_permissions = staticmethod(derive_permissions)

    def has_capability(self, name: str) -> bool:
        """False quando não autenticado ou capacidade desconhecida."""
        return self.capabilities.allows(name)

    def has_role(self, *roles: Role | str) -> bool:
        """Papel corrente está entre `roles`.

        Sem argumentos: True para qualquer identidade autenticada.
        """
        if self._identity is None:
            return False
        if not roles:
            return True
        wanted = {parse_role(r) for r in roles}
        return self._identity.role in wanted

    # ──────────────────────────────────────────────────────────────
    # Comandos
    # ──────────────────────────────────────────────────────────────

    def restore(self) -> Identity | None:
        """Adota a identidade persistida, se houver. Nunca levanta.

        Entrada ilegível é removida do armazenamento e a sessão fica
        sem identidade.
        """
        try:
            raw = self._storage.get_item(USER_KEY)
        except StorageUnavailableError:
            log_fallback(logger, COMPONENT, reason="storage_unavailable", key=USER_KEY)
            record_auth_event("restore", "storage_unavailable")
            return None

        if raw is None:
            record_auth_event("restore", "absent")
            return None

        try:
            identity = Identity.from_storage_json(raw)
        except CorruptPersistedStateError:
            log_fallback(
                logger, COMPONENT, reason="corrupt_persisted_state", key=USER_KEY
            )
            self._discard_persisted()
            self._adopt(None)
            self._settle(SessionState.UNAUTHENTICATED, "restore_discarded")
            record_auth_event("restore", "corrupt")
            return None

        self._adopt(identity)
        self._settle(SessionState.AUTHENTICATED, "restored")
        logger.info("session_restored", extra=identity.to_log_dict())
        record_auth_event("restore", "success", role=identity.role.value)
        return identity

    async def login(self, email: str, password: str) -> LoginResult:
        """Autentica contra o diretório após o atraso simulado.

        Falha de credencial não levanta: retorna LoginResult com
        error_kind=INVALID_CREDENTIALS e a identidade anterior intacta.
        """
        token = set_correlation_id()
        start = time.perf_counter()
        self._pending_logins += 1
        self._clear_error()
        self._settle(SessionState.AUTHENTICATING, "login_started")
        logger.info("login_started", extra={"pending_logins": self._pending_logins})

        try:
            await self._sleep(self._login_delay)
            result = self._resolve_login(email, password)
        except asyncio.CancelledError:
            logger.info("login_cancelled")
            record_auth_event("login", "cancelled")
            raise
        finally:
            self._pending_logins -= 1
            self._settle(self._resting_state(), "login_resolved")
            record_latency(
                COMPONENT,
                "login",
                (time.perf_counter() - start) * 1000,
            )
            reset_correlation_id(token)

        return result

    def _resolve_login(self, email: str, password: str) -> LoginResult:
        identity = self._directory.find(email, password)
        if identity is None:
            self._set_error(LoginErrorKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE)
            logger.info("login_rejected", extra={"reason": "invalid_credentials"})
            record_auth_event("login", "invalid_credentials")
            return LoginResult.failed(
                LoginErrorKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE
            )

        try:
            self._storage.set_item(USER_KEY, identity.to_storage_json())
        except StorageUnavailableError as exc:
            self._set_error(LoginErrorKind.STORAGE_UNAVAILABLE, LOGIN_FAILED_MESSAGE)
            logger.warning("login_persist_failed", extra={"error": str(exc)})
            record_auth_event("login", "storage_unavailable", role=identity.role.value)
            return LoginResult.failed(
                LoginErrorKind.STORAGE_UNAVAILABLE, LOGIN_FAILED_MESSAGE
            )

        self._adopt(identity)
        logger.info("login_succeeded", extra=identity.to_log_dict())
        record_auth_event("login", "success", role=identity.role.value)
        return LoginResult.ok(identity)

    def logout(self) -> bool:
        """Remove identidade persistida e corrente. Sempre sucede; idempotente.

        Returns:
            False quando a entrada persistida não pôde ser removida; a
            memória já está limpa, mas um restore() posterior readotaria
            a identidade, então quem chamou deve repetir o logout.
        """
        was_authenticated = self._identity is not None
        cleared = self._discard_persisted()
        self._adopt(None)
        self._clear_error()
        self._settle(SessionState.UNAUTHENTICATED, "logout")

        if not cleared:
            logger.warning("logout_persist_failed", extra={"storage_key": USER_KEY})
            record_auth_event("logout", "persist_failed")
            return False
        if was_authenticated:
            logger.info("logout_completed")
        record_auth_event("logout", "success" if was_authenticated else "noop")
        return True

    def clear_error(self) -> None:
        """Descarta a mensagem de falha retida."""
        self._clear_error()

    def update_profile(self, **fields: Any) -> Identity:
        """Mescla campos de perfil editáveis na identidade e persiste.

        Raises:
            NotAuthenticatedError: Sem identidade corrente
            ValueError: Campo não editável
            pydantic.ValidationError: Valor inválido
            StorageUnavailableError: Falha ao persistir (identidade mantida)
        """
        current = self._require_identity()
        updated = current.with_profile(**fields)
        self._storage.set_item(USER_KEY, updated.to_storage_json())
        self._adopt(updated)
        logger.info(
            "profile_updated",
            extra={**updated.to_log_dict(), "fields": sorted(fields)},
        )
        return updated

    def change_password(
        self,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> None:
        """Troca a senha do operador corrente no diretório.

        Política local primeiro; nada é alterado se ela rejeitar.

        Raises:
            NotAuthenticatedError: Sem identidade corrente
            PasswordPolicyViolationError: Nova senha rejeitada
            InvalidCredentialsError: Senha atual não confere
        """
        identity = self._require_identity()
        self._password_policy.enforce(new_password, confirm_password)

        if not self._directory.replace_password(
            identity.email, current_password, new_password
        ):
            record_auth_event("change_password", "invalid_credentials", role=identity.role.value)
            raise InvalidCredentialsError("Senha atual incorreta")

        logger.info("password_changed", extra=identity.to_log_dict())
        record_auth_event("change_password", "success", role=identity.role.value)

    # ──────────────────────────────────────────────────────────────
    # Internos
    # ──────────────────────────────────────────────────────────────

    def _require_identity(self) -> Identity:
        if self._identity is None:
            raise NotAuthenticatedError("Operação exige sessão autenticada")
        return self._identity

    def _adopt(self, identity: Identity | None) -> None:
        self._identity = identity

    def _set_error(self, kind: LoginErrorKind, message: str) -> None:
        self._error = message
        self._error_kind = kind

    def _clear_error(self) -> None:
        self._error = None
        self._error_kind = None

    def _discard_persisted(self) -> bool:
        try:
            self._storage.remove_item(USER_KEY)
        except StorageUnavailableError:
            log_fallback(logger, COMPONENT, reason="storage_unavailable", key=USER_KEY)
            return False
        return True

    def _resting_state(self) -> SessionState:
        if self._pending_logins > 0:
            return SessionState.AUTHENTICATING
        if self._identity is not None:
            return SessionState.AUTHENTICATED
        return SessionState.UNAUTHENTICATED

    def _settle(self, target: SessionState, trigger: str) -> None:
        """Leva a FSM ao estado alvo (sem transição reflexiva)."""
        if self._fsm.current_state == target:
            return
        result = self._fsm.transition(target, trigger)
        if not result.success:
            logger.warning(
                "session_transition_denied",
                extra={"target": target.name, "reason": result.error_reason},
            )
