"""Constantes da aplicação."""

from app.constants.storage_keys import (
    ALL_KEYS,
    SIDEBAR_COLLAPSED_KEY,
    THEME_KEY,
    USER_KEY,
)

__all__ = [
    "ALL_KEYS",
    "SIDEBAR_COLLAPSED_KEY",
    "THEME_KEY",
    "USER_KEY",
]
