"""Factories de armazenamento, diretório e shell a partir das settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_redis_client
from app.infra.storage import FileStorage, MemoryStorage, RedisStorage
from app.layout import LayoutController
from app.panels import PanelCoordinator, PanelPolicy, PointerEventHub, sample_feed
from app.preferences import DocumentRoot, PreferenceStore
from app.sessions import (
    IdentityDirectory,
    PasswordPolicy,
    SessionStore,
    default_directory,
    load_directory,
)
from app.shell import DashboardShell
from app.toasts import ToastQueue
from config.settings import (
    LayoutSettings,
    SessionSettings,
    StorageSettings,
    get_layout_settings,
    get_session_settings,
    get_storage_settings,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.panels import Boundary, NotificationFeed
    from app.protocols.document import DocumentRootProtocol
    from app.protocols.storage import KeyValueStorageProtocol

logger = logging.getLogger(__name__)


def create_storage(settings: StorageSettings | None = None) -> KeyValueStorageProtocol:
    """Cria o armazenamento durável conforme STORAGE_BACKEND.

    Raises:
        ValueError: Backend desconhecido ou REDIS_URL ausente
    """
    settings = settings or get_storage_settings()

    if settings.backend == "redis":
        client = create_redis_client(settings.redis_url)
        storage: KeyValueStorageProtocol = RedisStorage(client, settings.key_prefix)
    elif settings.backend == "file":
        storage = FileStorage(settings.path)
    elif settings.backend == "memory":
        storage = MemoryStorage()
    else:
        msg = f"STORAGE_BACKEND inválido: {settings.backend}"
        raise ValueError(msg)

    logger.info("storage_created", extra={"backend": settings.backend})
    return storage


def create_directory(settings: SessionSettings | None = None) -> IdentityDirectory:
    """Diretório de DIRECTORY_PATH, ou o embutido de demonstração."""
    settings = settings or get_session_settings()
    if settings.directory_path:
        return load_directory(settings.directory_path)
    logger.info("directory_default_used")
    return default_directory()


def build_shell(
    *,
    storage: KeyValueStorageProtocol | None = None,
    directory: IdentityDirectory | None = None,
    document: DocumentRootProtocol | None = None,
    notifications: NotificationFeed | None = None,
    session_settings: SessionSettings | None = None,
    layout_settings: LayoutSettings | None = None,
    panel_policy: PanelPolicy = PanelPolicy.INDEPENDENT,
    panel_boundaries: Mapping[str, Boundary] | None = None,
    sidebar_boundary: Boundary | None = None,
) -> DashboardShell:
    """Monta o DashboardShell com todas as dependências.

    Qualquer colaborador omitido vem das settings de ambiente. Painéis
    sem fronteira em `panel_boundaries` (e o sidebar mobile sem
    `sidebar_boundary`) usam o próprio id como alvo interno.
    O shell retornado ainda não foi iniciado (chamar start()).
    """
    session_settings = session_settings or get_session_settings()
    layout_settings = layout_settings or get_layout_settings()
    storage = storage if storage is not None else create_storage()
    directory = directory if directory is not None else create_directory(session_settings)

    hub = PointerEventHub()
    session = SessionStore(
        storage,
        directory,
        login_delay_seconds=session_settings.login_delay_seconds,
        password_policy=PasswordPolicy(min_length=session_settings.password_min_length),
    )
    preferences = PreferenceStore(storage, document or DocumentRoot())
    panels = PanelCoordinator(hub, policy=panel_policy)
    layout = LayoutController(session, preferences, hub, layout_settings)

    shell = DashboardShell(
        session=session,
        preferences=preferences,
        panels=panels,
        layout=layout,
        hub=hub,
        notifications=notifications if notifications is not None else sample_feed(),
        toasts=ToastQueue(),
    )
    for panel_id, boundary in (panel_boundaries or {}).items():
        shell.set_panel_boundary(panel_id, boundary)
    if sidebar_boundary is not None:
        shell.set_sidebar_boundary(sidebar_boundary)
    return shell
