"""PreferenceState: preferências de interface persistidas."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from app.constants.storage_keys import SIDEBAR_COLLAPSED_KEY, THEME_KEY


class ThemeMode(StrEnum):
    """Modo de tema. Os valores são os persistidos na chave `theme`."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> ThemeMode:
        return ThemeMode.LIGHT if self is ThemeMode.DARK else ThemeMode.DARK


# Rótulos persistidos em `sidebarCollapsed`
FLAG_LABELS: dict[str, bool] = {"true": True, "false": False}


def parse_flag(value: object) -> bool:
    """bool ou rótulo "true"/"false".

    Raises:
        ValueError: Qualquer outro valor
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value in FLAG_LABELS:
        return FLAG_LABELS[value]
    raise ValueError(f"Valor de flag inválido: {value!r}")


# Classe aplicada na raiz do documento quando o tema é escuro
DARK_CLASS = "dark"


@dataclass(frozen=True, slots=True)
class PreferenceState:
    """Tema e colapso da sidebar. Sempre definido (defaults abaixo).

    Attributes:
        theme_mode: Tema ativo
        sidebar_collapsed: Sidebar desktop recolhida
    """

    theme_mode: ThemeMode = ThemeMode.LIGHT
    sidebar_collapsed: bool = False

    def evolve(self, **changes: object) -> PreferenceState:
        return replace(self, **changes)

    def to_storage(self) -> dict[str, str]:
        """Valores serializados por chave de armazenamento."""
        return {
            THEME_KEY: self.theme_mode.value,
            SIDEBAR_COLLAPSED_KEY: "true" if self.sidebar_collapsed else "false",
        }


DEFAULT_PREFERENCES = PreferenceState()
