"""Settings base: processo, armazenamento durável e sessão."""

from __future__ import annotations

from config.settings.base.core import (
    ENVIRONMENTS,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.session import SessionSettings, get_session_settings
from config.settings.base.storage import (
    StorageBackend,
    StorageSettings,
    get_storage_settings,
)

__all__ = [
    "ENVIRONMENTS",
    "BaseSettings",
    "Environment",
    "SessionSettings",
    "StorageBackend",
    "StorageSettings",
    "get_base_settings",
    "get_session_settings",
    "get_storage_settings",
]
