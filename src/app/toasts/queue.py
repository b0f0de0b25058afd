"""Fila de toasts (feedback transitório ao operador).

Itens expiram pelo relógio monotônico e são podados na leitura;
duração 0 mantém o toast até dismiss().
"""

from __future__ import annotations

import itertools
import logging
import time
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_DURATION_SECONDS = 5.0
ERROR_DURATION_SECONDS = 7.0
STICKY = 0.0


class ToastKind(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class Toast:
    """Toast exibido.

    Attributes:
        id: Identificador crescente
        kind: Tipo visual
        message: Texto exibido
        duration: Segundos até expirar (0 = fixo)
        created_at: Instante monotônico de criação
    """

    id: int
    kind: ToastKind
    message: str
    duration: float
    created_at: float

    @property
    def is_sticky(self) -> bool:
        return self.duration == STICKY

    def expired(self, now: float) -> bool:
        return not self.is_sticky and now - self.created_at >= self.duration


class ToastQueue:
    """Fila ordenada por criação."""

    __slots__ = ("_clock", "_ids", "_toasts")

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._ids = itertools.count(1)
        self._toasts: list[Toast] = []

    def show(
        self,
        message: str,
        kind: ToastKind = ToastKind.INFO,
        duration: float | None = None,
    ) -> Toast:
        """Enfileira um toast.

        Raises:
            ValueError: Duração negativa
        """
        if duration is None:
            duration = (
                ERROR_DURATION_SECONDS
                if kind is ToastKind.ERROR
                else DEFAULT_DURATION_SECONDS
            )
        if duration < 0:
            raise ValueError("Duração do toast deve ser >= 0")

        toast = Toast(
            id=next(self._ids),
            kind=kind,
            message=message,
            duration=duration,
            created_at=self._clock(),
        )
        self._toasts.append(toast)
        logger.debug("toast_shown", extra={"toast_id": toast.id, "kind": kind.value})
        return toast

    def success(self, message: str, duration: float | None = None) -> Toast:
        return self.show(message, ToastKind.SUCCESS, duration)

    def error(self, message: str, duration: float | None = None) -> Toast:
        return self.show(message, ToastKind.ERROR, duration)

    def warning(self, message: str, duration: float | None = None) -> Toast:
        return self.show(message, ToastKind.WARNING, duration)

    def info(self, message: str, duration: float | None = None) -> Toast:
        return self.show(message, ToastKind.INFO, duration)

    def dismiss(self, toast_id: int) -> bool:
        before = len(self._toasts)
        self._toasts = [t for t in self._toasts if t.id != toast_id]
        return len(self._toasts) < before

    def clear(self) -> None:
        self._toasts.clear()

    def active(self) -> tuple[Toast, ...]:
        """Toasts não expirados (poda os expirados)."""
        now = self._clock()
        self._toasts = [t for t in self._toasts if not t.expired(now)]
        return tuple(self._toasts)

    def __len__(self) -> int:
        return len(self.active())
