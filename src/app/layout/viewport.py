"""Classe de viewport derivada da largura."""

from __future__ import annotations

from enum import StrEnum

from config.settings.layout import DEFAULT_MOBILE_BREAKPOINT_PX


class ViewportClass(StrEnum):
    MOBILE = "mobile"
    DESKTOP = "desktop"


def classify_viewport(
    width: float,
    breakpoint: int = DEFAULT_MOBILE_BREAKPOINT_PX,
) -> ViewportClass:
    """Largura estritamente abaixo do limiar ⇒ mobile."""
    return ViewportClass.MOBILE if width < breakpoint else ViewportClass.DESKTOP
