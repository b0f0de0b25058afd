"""Settings de layout responsivo do shell.

Limiar mobile/desktop e larguras do sidebar.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Abaixo deste limiar (px lógicos) o viewport é mobile
DEFAULT_MOBILE_BREAKPOINT_PX = 768


@dataclass(frozen=True)
class LayoutSettings:
    """Configurações de layout.

    Attributes:
        mobile_breakpoint_px: Largura abaixo da qual o viewport é mobile
        sidebar_expanded_px: Largura do sidebar inline expandido
        sidebar_collapsed_px: Largura do sidebar inline recolhido
    """

    mobile_breakpoint_px: int = DEFAULT_MOBILE_BREAKPOINT_PX
    sidebar_expanded_px: int = 256
    sidebar_collapsed_px: int = 64

    def validate(self) -> list[str]:
        """Valida configurações de layout.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.mobile_breakpoint_px <= 0:
            errors.append("MOBILE_BREAKPOINT_PX deve ser > 0")

        if self.sidebar_collapsed_px <= 0:
            errors.append("SIDEBAR_COLLAPSED_PX deve ser > 0")

        if self.sidebar_expanded_px <= self.sidebar_collapsed_px:
            errors.append("SIDEBAR_EXPANDED_PX deve ser maior que SIDEBAR_COLLAPSED_PX")

        return errors


def _load_layout_from_env() -> LayoutSettings:
    """Carrega LayoutSettings de variáveis de ambiente."""
    return LayoutSettings(
        mobile_breakpoint_px=int(
            os.getenv("MOBILE_BREAKPOINT_PX", str(DEFAULT_MOBILE_BREAKPOINT_PX))
        ),
        sidebar_expanded_px=int(os.getenv("SIDEBAR_EXPANDED_PX", "256")),
        sidebar_collapsed_px=int(os.getenv("SIDEBAR_COLLAPSED_PX", "64")),
    )


@lru_cache(maxsize=1)
def get_layout_settings() -> LayoutSettings:
    """Retorna instância cacheada de LayoutSettings."""
    return _load_layout_from_env()
