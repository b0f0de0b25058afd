"""Bootstrap do shell: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import build_shell, initialize_app

    initialize_app()
    shell = build_shell()
    shell.start()
"""

from __future__ import annotations

import logging

from app.bootstrap.dependencies import build_shell, create_directory, create_storage
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_layout_settings,
    get_session_settings,
    get_storage_settings,
)

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)

__all__ = [
    "build_shell",
    "create_directory",
    "create_storage",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no início."""
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging para testes (DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Settings inválidas em ambiente estrito
    """
    base = get_base_settings()
    environment = base.environment
    groups = {
        "base": base.validate(),
        "storage": get_storage_settings().validate(base),
        "session": get_session_settings().validate(),
        "layout": get_layout_settings().validate(),
    }
    errors = [f"{group}: {error}" for group, found in groups.items() for error in found]

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
