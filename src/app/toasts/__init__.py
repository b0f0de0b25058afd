"""Fila de toasts."""

from app.toasts.queue import (
    DEFAULT_DURATION_SECONDS,
    ERROR_DURATION_SECONDS,
    STICKY,
    Toast,
    ToastKind,
    ToastQueue,
)

__all__ = [
    "DEFAULT_DURATION_SECONDS",
    "ERROR_DURATION_SECONDS",
    "STICKY",
    "Toast",
    "ToastKind",
    "ToastQueue",
]
