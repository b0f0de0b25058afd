"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CorruptPersistedStateError,
    InfrastructureError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    PasswordPolicyViolationError,
    RedisConnectionError,
    ShellError,
    StorageUnavailableError,
)

__all__ = [
    "CorruptPersistedStateError",
    "InfrastructureError",
    "InvalidCredentialsError",
    "NotAuthenticatedError",
    "PasswordPolicyViolationError",
    "RedisConnectionError",
    "ShellError",
    "StorageUnavailableError",
]
