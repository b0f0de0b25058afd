"""Settings do armazenamento durável (chaves user/theme/sidebarCollapsed).

Configurações para o backend que sobrevive a reinícios do processo.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

StorageBackend = Literal["memory", "file", "redis"]


@dataclass(frozen=True)
class StorageSettings:
    """Configurações do armazenamento durável.

    Attributes:
        backend: Backend de armazenamento (memory|file|redis)
        path: Caminho do arquivo JSON (backend file)
        redis_url: URL de conexão Redis (backend redis)
        key_prefix: Namespace das chaves no Redis
    """

    backend: StorageBackend = "memory"
    path: str = ".clinic_shell/storage.json"
    redis_url: str = ""
    key_prefix: str = "clinic-shell:"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de armazenamento.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []
        valid_backends = {"memory", "file", "redis"}

        if self.backend not in valid_backends:
            errors.append(f"STORAGE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append(
                "STORAGE_BACKEND=memory proibido em staging/production. "
                "Use file ou redis."
            )

        if self.backend == "file" and not self.path:
            errors.append("STORAGE_BACKEND=file requer STORAGE_PATH configurado")

        if self.backend == "redis" and not self.redis_url:
            errors.append("STORAGE_BACKEND=redis requer REDIS_URL configurado")

        return errors


def _load_storage_from_env() -> StorageSettings:
    """Carrega StorageSettings de variáveis de ambiente."""
    backend_str = os.getenv("STORAGE_BACKEND", "memory").lower()
    backend: StorageBackend = (
        backend_str if backend_str in ("memory", "file", "redis") else "memory"
    )
    return StorageSettings(
        backend=backend,
        path=os.getenv("STORAGE_PATH", ".clinic_shell/storage.json"),
        redis_url=os.getenv("REDIS_URL", ""),
        key_prefix=os.getenv("STORAGE_KEY_PREFIX", "clinic-shell:"),
    )


@lru_cache(maxsize=1)
def get_storage_settings() -> StorageSettings:
    """Retorna instância cacheada de StorageSettings."""
    return _load_storage_from_env()
