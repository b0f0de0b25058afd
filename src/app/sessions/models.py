"""Resultado do login e tipos de erro expostos à interface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.identity import Identity

INVALID_CREDENTIALS_MESSAGE = "Credenciais de login inválidas"
LOGIN_FAILED_MESSAGE = "Ocorreu um erro ao entrar"


class LoginErrorKind(StrEnum):
    """Tipos de falha de login."""

    INVALID_CREDENTIALS = "InvalidCredentials"
    STORAGE_UNAVAILABLE = "StorageUnavailable"


@dataclass(frozen=True, slots=True)
class LoginResult:
    """Resultado de login().

    Attributes:
        success: Se a identidade foi adotada
        identity: Identidade adotada (sem senha), se success
        error: Mensagem legível para o operador, se falhou
        error_kind: Tipo da falha, se falhou
    """

    success: bool
    identity: Identity | None = None
    error: str | None = None
    error_kind: LoginErrorKind | None = None

    def __post_init__(self) -> None:
        if self.success and self.identity is None:
            raise ValueError("Login bem-sucedido deve incluir identity")
        if not self.success and (self.error is None or self.error_kind is None):
            raise ValueError("Login falho deve incluir error e error_kind")

    @classmethod
    def ok(cls, identity: Identity) -> LoginResult:
        return cls(success=True, identity=identity)

    @classmethod
    def failed(cls, kind: LoginErrorKind, message: str) -> LoginResult:
        return cls(success=False, error=message, error_kind=kind)
