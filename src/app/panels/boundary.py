"""Fronteiras de painel: decidem se a interação foi dentro ou fora."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.panels.events import PointerEvent


class Boundary(Protocol):
    """Região ocupada por um painel (gatilho + conteúdo)."""

    def contains(self, event: PointerEvent) -> bool: ...


@dataclass(frozen=True, slots=True)
class RectBoundary:
    """Retângulo em px lógicos; bordas inclusivas."""

    left: float
    top: float
    width: float
    height: float

    def contains(self, event: PointerEvent) -> bool:
        return (
            self.left <= event.x <= self.left + self.width
            and self.top <= event.y <= self.top + self.height
        )


@dataclass(frozen=True, slots=True)
class ElementBoundary:
    """Fronteira por identificadores de elemento (event.target)."""

    element_ids: frozenset[str] = field(default_factory=frozenset)

    def contains(self, event: PointerEvent) -> bool:
        return event.target is not None and event.target in self.element_ids


@dataclass(frozen=True, slots=True)
class NullBoundary:
    """Painel sem região: toda interação é externa."""

    def contains(self, event: PointerEvent) -> bool:
        return False


NO_BOUNDARY = NullBoundary()
