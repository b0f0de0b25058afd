"""Settings do shell, lidas de variáveis de ambiente.

Cada grupo é um dataclass congelado com validate() -> list[str] e um
getter cacheado; app.bootstrap.validate_runtime_settings() agrega os erros.
"""

from __future__ import annotations

from config.settings.base import (
    ENVIRONMENTS,
    BaseSettings,
    Environment,
    SessionSettings,
    StorageBackend,
    StorageSettings,
    get_base_settings,
    get_session_settings,
    get_storage_settings,
)
from config.settings.layout import (
    DEFAULT_MOBILE_BREAKPOINT_PX,
    LayoutSettings,
    get_layout_settings,
)

__all__ = [
    "DEFAULT_MOBILE_BREAKPOINT_PX",
    "ENVIRONMENTS",
    "BaseSettings",
    "Environment",
    "LayoutSettings",
    "SessionSettings",
    "StorageBackend",
    "StorageSettings",
    "get_base_settings",
    "get_layout_settings",
    "get_session_settings",
    "get_storage_settings",
]
