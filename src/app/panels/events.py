"""Eventos de ponteiro e o hub process-wide que os distribui.

Equivalente headless do listener de `mousedown` no documento: quem
renderiza chama dispatch() para cada interação de ponteiro.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Interação de ponteiro (pointer-down).

    Attributes:
        x: Coordenada horizontal (px lógicos)
        y: Coordenada vertical (px lógicos)
        target: Identificador opcional do elemento atingido
    """

    x: float
    y: float
    target: str | None = None


class PointerEventHub:
    """Registro de listeners de pointer-down do processo."""

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        self._listeners: list[Callable[[PointerEvent], None]] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: Callable[[PointerEvent], None]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[PointerEvent], None]) -> bool:
        """Remove o listener. Retorna False se não estava registrado."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def dispatch(self, event: PointerEvent) -> None:
        """Entrega o evento a todos os listeners registrados."""
        # Cópia: listeners podem se remover durante a entrega
        for listener in list(self._listeners):
            listener(event)
