"""Transient Panel Coordinator.

Painéis efêmeros (menu de perfil, menu de idioma, bandeja de
notificações) abertos de forma independente e fechados por uma regra
única de clique externo. Um só listener de pointer-down por conjunto
montado: instalado em mount(), removido em unmount().
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import StrEnum
from typing import TYPE_CHECKING

from app.panels.boundary import NO_BOUNDARY

if TYPE_CHECKING:
    from collections.abc import Iterator

    from app.panels.boundary import Boundary
    from app.panels.events import PointerEvent, PointerEventHub

logger = logging.getLogger(__name__)

# Painéis do cabeçalho
PROFILE_MENU = "profile-menu"
LANGUAGE_MENU = "language-menu"
NOTIFICATION_TRAY = "notification-tray"
HEADER_PANELS: tuple[str, ...] = (PROFILE_MENU, LANGUAGE_MENU, NOTIFICATION_TRAY)


class PanelPolicy(StrEnum):
    """Política de abertura, fixada na construção."""

    INDEPENDENT = "independent"
    EXCLUSIVE = "exclusive"


class UnknownPanelError(KeyError):
    """Painel não registrado no coordenador."""


class PanelCoordinator:
    """Dono do PanelState (id do painel → aberto)."""

    __slots__ = ("_boundaries", "_hub", "_mounted", "_open", "_policy")

    def __init__(
        self,
        hub: PointerEventHub,
        policy: PanelPolicy = PanelPolicy.INDEPENDENT,
    ) -> None:
        self._hub = hub
        self._policy = policy
        self._boundaries: dict[str, Boundary] = {}
        self._open: dict[str, bool] = {}
        self._mounted = False

    @property
    def policy(self) -> PanelPolicy:
        return self._policy

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def panel_ids(self) -> tuple[str, ...]:
        return tuple(self._boundaries)

    def register(self, panel_id: str, boundary: Boundary | None = None) -> None:
        """Registra o painel (fechado). Re-registro só troca a fronteira."""
        self._boundaries[panel_id] = boundary or NO_BOUNDARY
        self._open.setdefault(panel_id, False)

    def set_boundary(self, panel_id: str, boundary: Boundary) -> None:
        self._require(panel_id)
        self._boundaries[panel_id] = boundary

    def is_open(self, panel_id: str) -> bool:
        """False para painéis não registrados."""
        return self._open.get(panel_id, False)

    def open(self, panel_id: str) -> None:
        self._require(panel_id)
        if self._policy is PanelPolicy.EXCLUSIVE:
            for other in self._open:
                if other != panel_id:
                    self._open[other] = False
        self._set(panel_id, True)

    def close(self, panel_id: str) -> None:
        self._require(panel_id)
        self._set(panel_id, False)

    def toggle(self, panel_id: str) -> None:
        if self.is_open(panel_id):
            self.close(panel_id)
        else:
            self.open(panel_id)

    def close_all(self) -> None:
        for panel_id in self._open:
            self._open[panel_id] = False

    def snapshot(self) -> dict[str, bool]:
        """Cópia do PanelState."""
        return dict(self._open)

    # ──────────────────────────────────────────────────────────────
    # Ciclo de vida do listener
    # ──────────────────────────────────────────────────────────────

    def mount(self) -> None:
        """Instala o listener de clique externo (no máximo um)."""
        if self._mounted:
            return
        self._hub.add_listener(self._on_pointer_down)
        self._mounted = True
        logger.debug("panel_listener_installed", extra={"panels": len(self._open)})

    def unmount(self) -> None:
        """Remove o listener instalado por mount()."""
        if not self._mounted:
            return
        self._hub.remove_listener(self._on_pointer_down)
        self._mounted = False
        logger.debug("panel_listener_removed")

    @contextmanager
    def mounted(self) -> Iterator[PanelCoordinator]:
        """Escopo de montagem: listener removido mesmo em erro."""
        self.mount()
        try:
            yield self
        finally:
            self.unmount()

    def _on_pointer_down(self, event: PointerEvent) -> None:
        for panel_id, is_open in list(self._open.items()):
            if is_open and not self._boundaries[panel_id].contains(event):
                self._open[panel_id] = False
                logger.debug("panel_dismissed", extra={"panel_id": panel_id})

    def _set(self, panel_id: str, value: bool) -> None:
        self._open[panel_id] = value

    def _require(self, panel_id: str) -> None:
        if panel_id not in self._boundaries:
            raise UnknownPanelError(panel_id)
