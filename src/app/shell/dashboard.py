"""DashboardShell: fronteira de renderização do painel.

Conecta Session Store, Preference Store, coordenador de painéis e
controlador de layout. Quem renderiza só lê as projeções e emite os
comandos expostos aqui; não há outro caminho de mutação.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.panels.boundary import ElementBoundary
from app.panels.coordinator import HEADER_PANELS

if TYPE_CHECKING:
    from app.domain.identity import Identity
    from app.layout.controller import LayoutController, ShellLayout
    from app.panels.boundary import Boundary
    from app.panels.coordinator import PanelCoordinator
    from app.panels.events import PointerEvent, PointerEventHub
    from app.panels.notifications import NotificationFeed
    from app.preferences.models import ThemeMode
    from app.preferences.store import PreferenceStore
    from app.sessions.models import LoginResult
    from app.sessions.store import SessionStore
    from app.toasts.queue import Toast, ToastQueue

logger = logging.getLogger(__name__)

LOGIN_SUCCESS_MESSAGE = "Login realizado com sucesso"
LOGOUT_MESSAGE = "Sessão encerrada"
LOGOUT_PERSIST_FAILED_MESSAGE = "Não foi possível remover a sessão salva; saia novamente"


class DashboardShell:
    """Fachada do shell do back office."""

    __slots__ = (
        "_hub",
        "_layout",
        "_notifications",
        "_panels",
        "_preferences",
        "_session",
        "_started",
        "_toasts",
    )

    def __init__(
        self,
        session: SessionStore,
        preferences: PreferenceStore,
        panels: PanelCoordinator,
        layout: LayoutController,
        hub: PointerEventHub,
        notifications: NotificationFeed,
        toasts: ToastQueue,
    ) -> None:
        self._session = session
        self._preferences = preferences
        self._panels = panels
        self._layout = layout
        self._hub = hub
        self._notifications = notifications
        self._toasts = toasts
        self._started = False
        for panel_id in HEADER_PANELS:
            if panel_id not in panels.panel_ids:
                panels.register(panel_id, ElementBoundary(frozenset({panel_id})))

    # ──────────────────────────────────────────────────────────────
    # Ciclo de vida
    # ──────────────────────────────────────────────────────────────

    def start(self) -> None:
        """Hidrata preferências, restaura sessão e monta os listeners."""
        if self._started:
            return
        self._preferences.hydrate()
        self._session.restore()
        self._panels.mount()
        self._layout.mount()
        self._started = True
        logger.info(
            "shell_started",
            extra={
                "authenticated": self._session.is_authenticated,
                "theme": self._preferences.theme.value,
            },
        )

    def stop(self) -> None:
        """Remove os listeners; estado persistido fica intacto."""
        if not self._started:
            return
        self._panels.unmount()
        self._layout.unmount()
        self._started = False
        logger.info("shell_stopped")

    # ──────────────────────────────────────────────────────────────
    # Projeções
    # ──────────────────────────────────────────────────────────────

    @property
    def current_identity(self) -> Identity | None:
        return self._session.current_identity

    @property
    def is_authenticated(self) -> bool:
        return self._session.is_authenticated

    def has_capability(self, name: str) -> bool:
        return self._session.has_capability(name)

    @property
    def theme(self) -> ThemeMode:
        return self._preferences.theme

    @property
    def sidebar_collapsed(self) -> bool:
        return self._preferences.sidebar_collapsed

    def is_panel_open(self, panel_id: str) -> bool:
        return self._panels.is_open(panel_id)

    @property
    def login_error(self) -> str | None:
        return self._session.error

    @property
    def notifications(self) -> NotificationFeed:
        return self._notifications

    @property
    def toasts(self) -> tuple[Toast, ...]:
        return self._toasts.active()

    def render(self) -> ShellLayout | None:
        """Geometria do shell; None sem identidade."""
        return self._layout.render()

    # ──────────────────────────────────────────────────────────────
    # Comandos
    # ──────────────────────────────────────────────────────────────

    async def login(self, email: str, password: str) -> LoginResult:
        result = await self._session.login(email, password)
        if result.success:
            self._toasts.success(LOGIN_SUCCESS_MESSAGE)
        elif result.error:
            self._toasts.error(result.error)
        return result

    def logout(self) -> bool:
        """Encerra a sessão; False se a entrada persistida sobreviveu."""
        was_authenticated = self._session.is_authenticated
        cleared = self._session.logout()
        self._panels.close_all()
        self._layout.close_mobile_sidebar()
        if not cleared:
            self._toasts.warning(LOGOUT_PERSIST_FAILED_MESSAGE)
        elif was_authenticated:
            self._toasts.info(LOGOUT_MESSAGE)
        return cleared

    def toggle_theme(self) -> None:
        self._preferences.toggle_theme()

    def toggle_sidebar(self) -> None:
        self._preferences.toggle_sidebar()

    def open_panel(self, panel_id: str) -> None:
        self._panels.open(panel_id)

    def close_panel(self, panel_id: str) -> None:
        self._panels.close(panel_id)

    # ──────────────────────────────────────────────────────────────
    # Sinais do ambiente
    # ──────────────────────────────────────────────────────────────

    def set_panel_boundary(self, panel_id: str, boundary: Boundary) -> None:
        """Região do painel (gatilho + conteúdo) medida por quem renderiza.

        Raises:
            UnknownPanelError: Painel não registrado
        """
        self._panels.set_boundary(panel_id, boundary)

    def set_sidebar_boundary(self, boundary: Boundary) -> None:
        self._layout.set_sidebar_boundary(boundary)

    def resize(self, width: float) -> None:
        self._layout.on_resize(width)

    def pointer_down(self, event: PointerEvent) -> None:
        self._hub.dispatch(event)

    def open_mobile_menu(self) -> None:
        self._layout.open_mobile_sidebar()

    def backdrop_click(self) -> None:
        self._layout.backdrop_click()
