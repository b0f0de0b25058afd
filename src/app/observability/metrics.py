"""Métricas do shell emitidas como logs estruturados.

Não há coletor no processo: cada ponto de medida vira uma linha JSON
(`metric_latency` ou `metric_auth_event`) agregável pelo pipeline de logs.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def _emit(event: str, metric_type: str, fields: dict[str, Any]) -> None:
    # Campos None ficam de fora; correlation_id ausente vem do ContextVar
    extra = {"metric_type": metric_type}
    extra.update({k: v for k, v in fields.items() if v is not None})
    logger.info(event, extra=extra)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Duração de uma operação, ex: ("session_store", "login", 1003.4)."""
    _emit(
        "metric_latency",
        "latency",
        {
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_auth_event(
    operation: str,
    outcome: str,
    role: str | None = None,
    correlation_id: str | None = None,
) -> None:
    """Contador de resultados de autenticação.

    Args:
        operation: login, logout, restore ou change_password
        outcome: success, invalid_credentials, storage_unavailable, noop...
        role: Papel envolvido, quando há identidade (nunca email)
        correlation_id: Sobrescreve o correlation_id do contexto
    """
    _emit(
        "metric_auth_event",
        "counter",
        {
            "operation": operation,
            "outcome": outcome,
            "role": role,
            "correlation_id": correlation_id,
        },
    )
