"""Settings de processo: ambiente, nome do serviço e nível de log."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

ENVIRONMENTS: frozenset[str] = frozenset({"development", "staging", "production"})

# Apelidos aceitos em ENVIRONMENT; qualquer outro valor vira development
_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}

_TRUTHY = frozenset({"true", "1", "yes"})


@dataclass(frozen=True)
class BaseSettings:
    """Configurações compartilhadas pelo shell inteiro.

    Attributes:
        environment: development|staging|production
        service_name: Campo `service` dos logs
        debug: Modo debug
        log_level: Nível aplicado por initialize_app()
    """

    environment: Environment = "development"
    service_name: str = "clinic_shell"
    debug: bool = False
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_staging(self) -> bool:
        return self.environment == "staging"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.environment not in ENVIRONMENTS:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        return errors


def _environment_from(raw: str) -> Environment:
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """BaseSettings lido do ambiente (cacheado; limpar com cache_clear())."""
    return BaseSettings(
        environment=_environment_from(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "clinic_shell"),
        debug=os.getenv("DEBUG", "").lower() in _TRUTHY,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
