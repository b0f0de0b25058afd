"""Testes do PreferenceStore e do reducer de preferências."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from app.constants.storage_keys import SIDEBAR_COLLAPSED_KEY, THEME_KEY
from app.infra.storage import MemoryStorage
from app.preferences import (
    DARK_CLASS,
    DEFAULT_PREFERENCES,
    DocumentRoot,
    PreferenceAction,
    PreferenceActionType,
    PreferenceState,
    PreferenceStore,
    ThemeMode,
    parse_flag,
    reduce_preferences,
)
from utils.errors import StorageUnavailableError


class WriteFailingStorage(MemoryStorage):
    """Falha ao gravar as chaves listadas em `failing`."""

    def __init__(self, failing: set[str], initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.failing = failing

    def set_item(self, key: str, value: str) -> None:
        if key in self.failing:
            raise StorageUnavailableError(f"falha ao gravar {key}")
        super().set_item(key, value)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def document() -> DocumentRoot:
    return DocumentRoot()


@pytest.fixture
def store(storage: MemoryStorage, document: DocumentRoot) -> PreferenceStore:
    preferences = PreferenceStore(storage, document)
    preferences.hydrate()
    return preferences


class TestReducer:
    def test_toggle_theme_is_an_involution(self) -> None:
        action = PreferenceAction(PreferenceActionType.TOGGLE_THEME)
        once = reduce_preferences(DEFAULT_PREFERENCES, action)
        assert once.theme_mode is ThemeMode.DARK
        assert reduce_preferences(once, action) == DEFAULT_PREFERENCES

    def test_set_actions(self) -> None:
        state = reduce_preferences(
            PreferenceState(),
            PreferenceAction(PreferenceActionType.SET_THEME, "dark"),
        )
        state = reduce_preferences(
            state, PreferenceAction(PreferenceActionType.SET_SIDEBAR_COLLAPSED, True)
        )
        assert state == PreferenceState(ThemeMode.DARK, sidebar_collapsed=True)

    def test_set_theme_rejects_unknown_mode(self) -> None:
        with pytest.raises(ValueError):
            reduce_preferences(
                PreferenceState(),
                PreferenceAction(PreferenceActionType.SET_THEME, "sepia"),
            )


    @pytest.mark.parametrize(
        ("payload", "expected"),
        [(True, True), (False, False), ("true", True), ("false", False)],
    )
    def test_set_sidebar_collapsed_accepts_bool_and_labels(
        self, payload: object, expected: bool
    ) -> None:
        state = reduce_preferences(
            PreferenceState(sidebar_collapsed=not expected),
            PreferenceAction(PreferenceActionType.SET_SIDEBAR_COLLAPSED, payload),
        )
        assert state.sidebar_collapsed is expected

    @pytest.mark.parametrize("payload", ["False", "", "0", 1, None])
    def test_set_sidebar_collapsed_rejects_other_values(self, payload: object) -> None:
        with pytest.raises(ValueError, match="flag inválido"):
            parse_flag(payload)


class TestPreferenceStore:
    def test_defaults_without_persisted_values(
        self, store: PreferenceStore, storage: MemoryStorage, document: DocumentRoot
    ) -> None:
        assert store.theme is ThemeMode.LIGHT
        assert store.is_light and not store.is_dark
        assert store.sidebar_collapsed is False
        assert not document.has_class(DARK_CLASS)
        # hidratar não escreve
        assert storage.snapshot() == {}

    def test_toggle_theme_twice_restores_state_and_storage_tracks_each_call(
        self, store: PreferenceStore, storage: MemoryStorage, document: DocumentRoot
    ) -> None:
        original = store.state

        store.toggle_theme()
        assert storage.get_item(THEME_KEY) == "dark"
        assert storage.get_item(SIDEBAR_COLLAPSED_KEY) == "false"
        assert document.has_class(DARK_CLASS)

        store.toggle_theme()
        assert storage.get_item(THEME_KEY) == "light"
        assert not document.has_class(DARK_CLASS)
        assert store.state == original

    def test_sidebar_commands_persist_both_fields(
        self, store: PreferenceStore, storage: MemoryStorage
    ) -> None:
        store.toggle_sidebar()
        assert store.sidebar_collapsed is True
        assert storage.snapshot() == {THEME_KEY: "light", SIDEBAR_COLLAPSED_KEY: "true"}

        store.set_sidebar_collapsed(False)
        assert storage.get_item(SIDEBAR_COLLAPSED_KEY) == "false"

    def test_set_theme_accepts_enum_and_label(self, store: PreferenceStore) -> None:
        store.set_theme(ThemeMode.DARK)
        assert store.is_dark
        store.set_theme("light")
        assert store.is_light
        with pytest.raises(ValueError):
            store.set_theme("sepia")

    def test_hydrate_reads_persisted_values_and_applies_theme(
        self, document: DocumentRoot
    ) -> None:
        storage = MemoryStorage({THEME_KEY: "dark", SIDEBAR_COLLAPSED_KEY: "true"})
        preferences = PreferenceStore(storage, document)

        state = preferences.hydrate()

        assert state == PreferenceState(ThemeMode.DARK, sidebar_collapsed=True)
        assert document.has_class(DARK_CLASS)

    def test_hydrate_falls_back_on_unknown_values(self, document: DocumentRoot) -> None:
        storage = MemoryStorage({THEME_KEY: "sepia", SIDEBAR_COLLAPSED_KEY: "talvez"})
        state = PreferenceStore(storage, document).hydrate()
        assert state == DEFAULT_PREFERENCES

    def test_hydrate_survives_unavailable_storage(self, document: DocumentRoot) -> None:
        broken = MagicMock()
        broken.get_item.side_effect = StorageUnavailableError("x")
        state = PreferenceStore(broken, document).hydrate()
        assert state == DEFAULT_PREFERENCES

    def test_values_survive_new_store_instance(
        self, store: PreferenceStore, storage: MemoryStorage
    ) -> None:
        store.toggle_theme()
        store.toggle_sidebar()

        reopened = PreferenceStore(storage, DocumentRoot())
        assert reopened.hydrate() == store.state

    def test_set_sidebar_collapsed_label_false_is_not_truthy(
        self, store: PreferenceStore, storage: MemoryStorage
    ) -> None:
        store.set_sidebar_collapsed(True)
        store.set_sidebar_collapsed("false")
        assert store.sidebar_collapsed is False
        assert storage.get_item(SIDEBAR_COLLAPSED_KEY) == "false"


class TestPreferenceWriteFailure:
    """Escrita que falha não deixa memória e armazenamento divergentes."""

    @pytest.mark.parametrize("failing_key", [THEME_KEY, SIDEBAR_COLLAPSED_KEY])
    def test_toggle_theme_keeps_previous_state_everywhere(
        self, document: DocumentRoot, failing_key: str
    ) -> None:
        storage = WriteFailingStorage(
            set(), {THEME_KEY: "light", SIDEBAR_COLLAPSED_KEY: "false"}
        )
        store = PreferenceStore(storage, document)
        store.hydrate()
        storage.failing = {failing_key}

        with pytest.raises(StorageUnavailableError):
            store.toggle_theme()

        assert store.state == DEFAULT_PREFERENCES
        assert not document.has_class(DARK_CLASS)
        assert storage.snapshot() == {THEME_KEY: "light", SIDEBAR_COLLAPSED_KEY: "false"}

    def test_toggle_sidebar_failure_leaves_memory_untouched(
        self, document: DocumentRoot
    ) -> None:
        storage = WriteFailingStorage({SIDEBAR_COLLAPSED_KEY})
        store = PreferenceStore(storage, document)
        store.hydrate()

        with pytest.raises(StorageUnavailableError):
            store.toggle_sidebar()

        assert store.sidebar_collapsed is False
        assert storage.get_item(SIDEBAR_COLLAPSED_KEY) is None

    def test_store_recovers_once_storage_is_back(self, document: DocumentRoot) -> None:
        storage = WriteFailingStorage({THEME_KEY})
        store = PreferenceStore(storage, document)
        store.hydrate()
        with pytest.raises(StorageUnavailableError):
            store.toggle_theme()

        storage.failing = set()
        store.toggle_theme()

        assert store.is_dark
        assert document.has_class(DARK_CLASS)
        assert storage.get_item(THEME_KEY) == "dark"
        assert storage.get_item(SIDEBAR_COLLAPSED_KEY) == "false"
