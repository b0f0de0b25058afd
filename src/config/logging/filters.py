"""Filters que enriquecem ou saneiam records antes da formatação."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Atributos de record que nunca podem sair em texto claro
SENSITIVE_FIELDS = frozenset(
    {
        "password",
        "current_password",
        "new_password",
        "confirm_password",
        "email",
    }
)

REDACTED = "[redacted]"


def _no_correlation_id() -> str:
    return ""


class CorrelationIdFilter(logging.Filter):
    """Preenche `service` e `correlation_id` em todo record.

    Um correlation_id já presente no record (via `extra`) é mantido;
    caso contrário vem do getter, tipicamente o ContextVar do login
    em curso.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id = correlation_id_getter or _no_correlation_id

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._correlation_id()
        record.service = self._service_name
        return True


class RedactSensitiveFilter(logging.Filter):
    """Mascara credenciais passadas por engano em `extra`."""

    def __init__(self, fields: frozenset[str] = SENSITIVE_FIELDS) -> None:
        super().__init__()
        self._fields = fields

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields.intersection(record.__dict__):
            setattr(record, name, REDACTED)
        return True
