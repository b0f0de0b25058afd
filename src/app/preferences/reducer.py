"""Reducer puro de preferências.

Cada ação produz um novo PreferenceState; efeitos (classe no documento,
escrita no armazenamento) ficam no PreferenceStore.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from app.preferences.models import PreferenceState, ThemeMode, parse_flag


class PreferenceActionType(StrEnum):
    TOGGLE_THEME = "toggle_theme"
    SET_THEME = "set_theme"
    TOGGLE_SIDEBAR = "toggle_sidebar"
    SET_SIDEBAR_COLLAPSED = "set_sidebar_collapsed"


@dataclass(frozen=True, slots=True)
class PreferenceAction:
    """Ação do reducer (payload opcional)."""

    type: PreferenceActionType
    payload: Any = None


def reduce_preferences(
    state: PreferenceState, action: PreferenceAction
) -> PreferenceState:
    """Aplica a ação ao estado.

    Raises:
        ValueError: Payload inválido para SET_THEME ou SET_SIDEBAR_COLLAPSED
    """
    if action.type is PreferenceActionType.TOGGLE_THEME:
        return state.evolve(theme_mode=state.theme_mode.toggled())

    if action.type is PreferenceActionType.SET_THEME:
        return state.evolve(theme_mode=ThemeMode(action.payload))

    if action.type is PreferenceActionType.TOGGLE_SIDEBAR:
        return state.evolve(sidebar_collapsed=not state.sidebar_collapsed)

    if action.type is PreferenceActionType.SET_SIDEBAR_COLLAPSED:
        return state.evolve(sidebar_collapsed=parse_flag(action.payload))

    return state
