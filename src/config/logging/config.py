"""configure_logging, get_logger e log_fallback.

Chamado uma vez por initialize_app(); os módulos só fazem
`logging.getLogger(__name__)` e passam contexto em `extra`.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, Any

from config.logging.filters import CorrelationIdFilter, RedactSensitiveFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "clinic_shell"


def _normalize_level(level: str) -> str:
    normalized = level.upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return normalized


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Instala um único handler JSON no root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (sem distinção de caixa)
        service_name: Valor do campo `service`
        correlation_id_getter: Fonte do `correlation_id` corrente
        stream: Destino (stderr quando None)

    Raises:
        ValueError: Nível desconhecido
    """
    normalized = _normalize_level(level)

    handler = logging.StreamHandler(stream)
    handler.setLevel(normalized)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(RedactSensitiveFilter())
    handler.setFormatter(create_json_formatter())

    root = logging.getLogger()
    root.setLevel(normalized)
    # Reconfigurar não pode duplicar linhas
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    key: str | None = None,
) -> None:
    """Registra (WARNING) que um componente voltou ao valor padrão.

    Usado quando uma entrada persistida é ilegível ou desconhecida, ou
    quando o armazenamento está fora: identidade corrompida, tema
    inválido, backend indisponível.

        log_fallback(logger, "preference_store", reason="unknown_theme", key="theme")
    """
    extra: dict[str, Any] = {"fallback_used": True, "component": component}
    if reason:
        extra["reason"] = reason
    if key is not None:
        extra["storage_key"] = key
    logger.warning("Fallback applied for %s", component, extra=extra)
