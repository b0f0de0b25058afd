"""Preference Store: tema e colapso da sidebar.

Cada comando roda o reducer e, como parte da mesma transição, aplica o
tema na raiz do documento e grava os dois campos no armazenamento
durável. Ao retornar, o armazenamento já reflete o novo estado; se uma
escrita falhar, memória, documento e armazenamento ficam no estado anterior
e StorageUnavailableError é relançado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants.storage_keys import SIDEBAR_COLLAPSED_KEY, THEME_KEY
from app.preferences.models import (
    DARK_CLASS,
    DEFAULT_PREFERENCES,
    FLAG_LABELS,
    PreferenceState,
    ThemeMode,
)
from app.preferences.reducer import (
    PreferenceAction,
    PreferenceActionType,
    reduce_preferences,
)
from config.logging import log_fallback
from utils.errors import StorageUnavailableError

if TYPE_CHECKING:
    from app.protocols.document import DocumentRootProtocol
    from app.protocols.storage import KeyValueStorageProtocol

logger = logging.getLogger(__name__)

COMPONENT = "preference_store"


class PreferenceStore:
    """Dono do PreferenceState."""

    __slots__ = ("_document", "_state", "_storage")

    def __init__(
        self,
        storage: KeyValueStorageProtocol,
        document: DocumentRootProtocol,
    ) -> None:
        self._storage = storage
        self._document = document
        self._state = DEFAULT_PREFERENCES

    @property
    def state(self) -> PreferenceState:
        return self._state

    @property
    def theme(self) -> ThemeMode:
        return self._state.theme_mode

    @property
    def is_dark(self) -> bool:
        return self._state.theme_mode is ThemeMode.DARK

    @property
    def is_light(self) -> bool:
        return self._state.theme_mode is ThemeMode.LIGHT

    @property
    def sidebar_collapsed(self) -> bool:
        return self._state.sidebar_collapsed

    def hydrate(self) -> PreferenceState:
        """Carrega preferências persistidas e aplica o tema.

        Valores ausentes ou desconhecidos voltam ao default.
        Não escreve no armazenamento.
        """
        theme = self._read_theme()
        collapsed = self._read_sidebar_collapsed()
        self._state = PreferenceState(theme_mode=theme, sidebar_collapsed=collapsed)
        self._apply_theme()
        logger.info(
            "preferences_hydrated",
            extra={"theme": theme.value, "sidebar_collapsed": collapsed},
        )
        return self._state

    def toggle_theme(self) -> PreferenceState:
        return self._dispatch(PreferenceAction(PreferenceActionType.TOGGLE_THEME))

    def set_theme(self, mode: ThemeMode | str) -> PreferenceState:
        """Define o tema.

        Raises:
            ValueError: Modo fora de ThemeMode
        """
        return self._dispatch(PreferenceAction(PreferenceActionType.SET_THEME, mode))

    def toggle_sidebar(self) -> PreferenceState:
        return self._dispatch(PreferenceAction(PreferenceActionType.TOGGLE_SIDEBAR))

    def set_sidebar_collapsed(self, collapsed: bool | str) -> PreferenceState:
        """Define o colapso (bool ou rótulo "true"/"false").

        Raises:
            ValueError: Valor fora desses dois formatos
        """
        return self._dispatch(
            PreferenceAction(PreferenceActionType.SET_SIDEBAR_COLLAPSED, collapsed)
        )

    def _dispatch(self, action: PreferenceAction) -> PreferenceState:
        new_state = reduce_preferences(self._state, action)
        # Grava antes de adotar: falha de escrita deixa memória e documento intactos
        self._persist(new_state)
        self._state = new_state
        self._apply_theme()
        logger.debug(
            "preferences_changed",
            extra={
                "action": action.type.value,
                "theme": self._state.theme_mode.value,
                "sidebar_collapsed": self._state.sidebar_collapsed,
            },
        )
        return self._state

    def _apply_theme(self) -> None:
        if self.is_dark:
            self._document.add_class(DARK_CLASS)
        else:
            self._document.remove_class(DARK_CLASS)

    def _persist(self, new_state: PreferenceState) -> None:
        """Grava as duas chaves; em falha, volta as já gravadas e relança."""
        previous = self._state.to_storage()
        written: list[str] = []
        try:
            for key, value in new_state.to_storage().items():
                self._storage.set_item(key, value)
                written.append(key)
        except StorageUnavailableError:
            self._rollback(previous, written)
            raise

    def _rollback(self, previous: dict[str, str], keys: list[str]) -> None:
        for key in keys:
            try:
                self._storage.set_item(key, previous[key])
            except StorageUnavailableError:
                log_fallback(logger, COMPONENT, reason="rollback_failed", key=key)

    def _read(self, key: str) -> str | None:
        try:
            return self._storage.get_item(key)
        except StorageUnavailableError:
            log_fallback(logger, COMPONENT, reason="storage_unavailable", key=key)
            return None

    def _read_theme(self) -> ThemeMode:
        raw = self._read(THEME_KEY)
        if raw is None:
            return DEFAULT_PREFERENCES.theme_mode
        try:
            return ThemeMode(raw)
        except ValueError:
            log_fallback(logger, COMPONENT, reason="unknown_theme", key=THEME_KEY)
            return DEFAULT_PREFERENCES.theme_mode

    def _read_sidebar_collapsed(self) -> bool:
        raw = self._read(SIDEBAR_COLLAPSED_KEY)
        if raw is None:
            return DEFAULT_PREFERENCES.sidebar_collapsed
        if raw not in FLAG_LABELS:
            log_fallback(
                logger, COMPONENT, reason="unknown_flag", key=SIDEBAR_COLLAPSED_KEY
            )
            return DEFAULT_PREFERENCES.sidebar_collapsed
        return FLAG_LABELS[raw]
