"""Exceções de domínio do painel e de infraestrutura de armazenamento."""

from __future__ import annotations


class ShellError(Exception):
    """Base para falhas recuperáveis do estado do painel."""


class InvalidCredentialsError(ShellError):
    """Email/senha sem correspondência no diretório de identidades."""


class PasswordPolicyViolationError(ShellError):
    """Nova senha rejeitada pela política local (nenhuma mutação ocorre)."""


class CorruptPersistedStateError(ShellError):
    """Identidade persistida ilegível; a entrada deve ser descartada."""


class NotAuthenticatedError(ShellError):
    """Operação exige identidade corrente e a sessão está sem identidade."""


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class StorageUnavailableError(InfrastructureError):
    """Falha de leitura/escrita no armazenamento durável."""


class RedisConnectionError(StorageUnavailableError):
    """Falha de conexão/timeout ao acessar Redis."""
