"""Chaves do armazenamento durável (string → string).

Formato compatível com o localStorage do painel web:
    user             → JSON da identidade, sem campo de senha
    theme            → "light" | "dark"
    sidebarCollapsed → "true" | "false"
"""

from __future__ import annotations

USER_KEY = "user"
THEME_KEY = "theme"
SIDEBAR_COLLAPSED_KEY = "sidebarCollapsed"

ALL_KEYS: tuple[str, ...] = (USER_KEY, THEME_KEY, SIDEBAR_COLLAPSED_KEY)
