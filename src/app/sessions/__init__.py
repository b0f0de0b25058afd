"""Módulo de sessão do painel.

Exporta o Session Store, o diretório de identidades e a política de senha.
"""

from app.sessions.directory import (
    DEFAULT_DIRECTORY_RECORDS,
    DirectoryEntry,
    IdentityDirectory,
    default_directory,
    load_directory,
)
from app.sessions.models import (
    INVALID_CREDENTIALS_MESSAGE,
    LOGIN_FAILED_MESSAGE,
    LoginErrorKind,
    LoginResult,
)
from app.sessions.password_policy import DEFAULT_MIN_LENGTH, PasswordPolicy
from app.sessions.store import DEFAULT_LOGIN_DELAY_SECONDS, SessionStore

__all__ = [
    "DEFAULT_DIRECTORY_RECORDS",
    "DEFAULT_LOGIN_DELAY_SECONDS",
    "DEFAULT_MIN_LENGTH",
    "INVALID_CREDENTIALS_MESSAGE",
    "LOGIN_FAILED_MESSAGE",
    "DirectoryEntry",
    "IdentityDirectory",
    "LoginErrorKind",
    "LoginResult",
    "PasswordPolicy",
    "SessionStore",
    "default_directory",
    "load_directory",
]
