"""Preferências de interface (tema e sidebar).

Uso:
    from app.preferences import DocumentRoot, PreferenceStore

    store = PreferenceStore(storage, DocumentRoot())
    store.hydrate()
    store.toggle_theme()
"""

from app.preferences.document import DocumentRoot
from app.preferences.models import (
    DARK_CLASS,
    DEFAULT_PREFERENCES,
    FLAG_LABELS,
    PreferenceState,
    ThemeMode,
    parse_flag,
)
from app.preferences.reducer import (
    PreferenceAction,
    PreferenceActionType,
    reduce_preferences,
)
from app.preferences.store import PreferenceStore

__all__ = [
    "DARK_CLASS",
    "DEFAULT_PREFERENCES",
    "FLAG_LABELS",
    "DocumentRoot",
    "PreferenceAction",
    "PreferenceActionType",
    "PreferenceState",
    "PreferenceStore",
    "ThemeMode",
    "parse_flag",
    "reduce_preferences",
]
