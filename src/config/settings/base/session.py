"""Settings de autenticação/sessão.

Configurações do login simulado e da política de senha.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class SessionSettings:
    """Configurações de sessão/autenticação.

    Attributes:
        login_delay_ms: Atraso simulado do round-trip de login
        password_min_length: Tamanho mínimo da nova senha
        directory_path: Arquivo YAML com o diretório de identidades (opcional)
    """

    login_delay_ms: int = 1000
    password_min_length: int = 6
    directory_path: str = ""

    @property
    def login_delay_seconds(self) -> float:
        """Atraso de login em segundos (para asyncio.sleep)."""
        return self.login_delay_ms / 1000

    def validate(self) -> list[str]:
        """Valida configurações de sessão.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.login_delay_ms < 0:
            errors.append("LOGIN_DELAY_MS deve ser >= 0")

        if self.password_min_length < 1:
            errors.append("PASSWORD_MIN_LENGTH deve ser >= 1")

        if self.directory_path and not os.path.isfile(self.directory_path):
            errors.append(f"DIRECTORY_PATH não encontrado: {self.directory_path}")

        return errors


def _load_session_from_env() -> SessionSettings:
    """Carrega SessionSettings de variáveis de ambiente."""
    return SessionSettings(
        login_delay_ms=int(os.getenv("LOGIN_DELAY_MS", "1000")),
        password_min_length=int(os.getenv("PASSWORD_MIN_LENGTH", "6")),
        directory_path=os.getenv("DIRECTORY_PATH", ""),
    )


@lru_cache(maxsize=1)
def get_session_settings() -> SessionSettings:
    """Retorna instância cacheada de SessionSettings."""
    return _load_session_from_env()
