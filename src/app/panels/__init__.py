"""Painéis efêmeros e a regra compartilhada de clique externo."""

from app.panels.boundary import (
    NO_BOUNDARY,
    Boundary,
    ElementBoundary,
    NullBoundary,
    RectBoundary,
)
from app.panels.coordinator import (
    HEADER_PANELS,
    LANGUAGE_MENU,
    NOTIFICATION_TRAY,
    PROFILE_MENU,
    PanelCoordinator,
    PanelPolicy,
    UnknownPanelError,
)
from app.panels.events import PointerEvent, PointerEventHub
from app.panels.notifications import Notification, NotificationFeed, sample_feed

__all__ = [
    "HEADER_PANELS",
    "LANGUAGE_MENU",
    "NOTIFICATION_TRAY",
    "NO_BOUNDARY",
    "PROFILE_MENU",
    "Boundary",
    "ElementBoundary",
    "Notification",
    "NotificationFeed",
    "NullBoundary",
    "PanelCoordinator",
    "PanelPolicy",
    "PointerEvent",
    "PointerEventHub",
    "RectBoundary",
    "UnknownPanelError",
    "sample_feed",
]
