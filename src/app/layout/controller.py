"""Responsive Layout Controller.

Compõe Session Store, Preference Store e o flag do sidebar mobile na
geometria do shell. Nada protegido é produzido sem identidade.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from app.layout.navigation import visible_navigation
from app.layout.viewport import ViewportClass, classify_viewport
from app.panels.boundary import ElementBoundary
from app.panels.coordinator import PanelCoordinator
from config.settings.layout import LayoutSettings

if TYPE_CHECKING:
    from app.domain.identity import Identity
    from app.layout.navigation import NavItem
    from app.panels.boundary import Boundary
    from app.panels.events import PointerEventHub
    from app.preferences.models import ThemeMode
    from app.preferences.store import PreferenceStore
    from app.sessions.store import SessionStore

logger = logging.getLogger(__name__)

MOBILE_SIDEBAR = "mobile-sidebar"

# Largura inicial antes do primeiro sinal de resize
DEFAULT_VIEWPORT_WIDTH = 1024


class SidebarMode(StrEnum):
    OVERLAY = "overlay"
    INLINE = "inline"


@dataclass(frozen=True, slots=True)
class ShellLayout:
    """Geometria do shell para quem renderiza.

    Attributes:
        viewport: Classe do viewport
        sidebar_mode: Overlay (mobile) ou inline (desktop)
        sidebar_visible: Sidebar presente na tela
        sidebar_collapsed: Sidebar inline recolhido (sempre False no mobile)
        sidebar_width_px: Largura do sidebar
        content_offset_px: Margem do conteúdo principal
        backdrop_visible: Fundo escurecido do overlay
        show_menu_button: Botão que abre o overlay no cabeçalho
        theme: Tema ativo
        identity: Identidade corrente
        navigation: Itens de menu visíveis
    """

    viewport: ViewportClass
    sidebar_mode: SidebarMode
    sidebar_visible: bool
    sidebar_collapsed: bool
    sidebar_width_px: int
    content_offset_px: int
    backdrop_visible: bool
    show_menu_button: bool
    theme: ThemeMode
    identity: Identity
    navigation: tuple[NavItem, ...]


class LayoutController:
    """Dono da ViewportClass e do flag do sidebar mobile."""

    __slots__ = ("_preferences", "_session", "_settings", "_sidebar", "_viewport")

    def __init__(
        self,
        session: SessionStore,
        preferences: PreferenceStore,
        hub: PointerEventHub,
        settings: LayoutSettings | None = None,
        width: float = DEFAULT_VIEWPORT_WIDTH,
    ) -> None:
        self._session = session
        self._preferences = preferences
        self._settings = settings or LayoutSettings()
        self._viewport = classify_viewport(width, self._settings.mobile_breakpoint_px)
        # Overlay mobile: mesma regra de clique externo dos painéis
        self._sidebar = PanelCoordinator(hub)
        # Alvo com o id do próprio sidebar conta como clique interno
        self._sidebar.register(
            MOBILE_SIDEBAR, ElementBoundary(frozenset({MOBILE_SIDEBAR}))
        )

    @property
    def viewport(self) -> ViewportClass:
        return self._viewport

    @property
    def is_mobile(self) -> bool:
        return self._viewport is ViewportClass.MOBILE

    @property
    def mobile_sidebar_open(self) -> bool:
        return self._sidebar.is_open(MOBILE_SIDEBAR)

    def set_sidebar_boundary(self, boundary: Boundary) -> None:
        self._sidebar.set_boundary(MOBILE_SIDEBAR, boundary)

    def mount(self) -> None:
        self._sidebar.mount()

    def unmount(self) -> None:
        self._sidebar.unmount()

    def on_resize(self, width: float) -> ViewportClass:
        """Reavalia o viewport; ao virar mobile o overlay começa fechado."""
        previous = self._viewport
        self._viewport = classify_viewport(width, self._settings.mobile_breakpoint_px)
        if self._viewport is not previous:
            self._sidebar.close(MOBILE_SIDEBAR)
            logger.debug(
                "viewport_changed",
                extra={"from": previous.value, "to": self._viewport.value},
            )
        return self._viewport

    def open_mobile_sidebar(self) -> None:
        """Botão de menu do cabeçalho. Sem efeito no desktop."""
        if self.is_mobile:
            self._sidebar.open(MOBILE_SIDEBAR)

    def close_mobile_sidebar(self) -> None:
        self._sidebar.close(MOBILE_SIDEBAR)

    def backdrop_click(self) -> None:
        self.close_mobile_sidebar()

    def render(self) -> ShellLayout | None:
        """Geometria corrente; None enquanto não houver identidade."""
        identity = self._session.current_identity
        if identity is None:
            return None

        collapsed = self._preferences.sidebar_collapsed
        theme = self._preferences.theme
        navigation = visible_navigation(self._session)

        if self.is_mobile:
            is_open = self.mobile_sidebar_open
            return ShellLayout(
                viewport=self._viewport,
                sidebar_mode=SidebarMode.OVERLAY,
                sidebar_visible=is_open,
                sidebar_collapsed=False,
                sidebar_width_px=self._settings.sidebar_expanded_px,
                content_offset_px=0,
                backdrop_visible=is_open,
                show_menu_button=True,
                theme=theme,
                identity=identity,
                navigation=navigation,
            )

        width = (
            self._settings.sidebar_collapsed_px
            if collapsed
            else self._settings.sidebar_expanded_px
        )
        return ShellLayout(
            viewport=self._viewport,
            sidebar_mode=SidebarMode.INLINE,
            sidebar_visible=True,
            sidebar_collapsed=collapsed,
            sidebar_width_px=width,
            content_offset_px=width,
            backdrop_visible=False,
            show_menu_button=False,
            theme=theme,
            identity=identity,
            navigation=navigation,
        )
