"""Layout responsivo e menu lateral por papel."""

from app.layout.controller import (
    DEFAULT_VIEWPORT_WIDTH,
    MOBILE_SIDEBAR,
    LayoutController,
    ShellLayout,
    SidebarMode,
)
from app.layout.navigation import (
    NAVIGATION,
    NavItem,
    NavSection,
    is_active,
    visible_navigation,
)
from app.layout.viewport import ViewportClass, classify_viewport

__all__ = [
    "DEFAULT_VIEWPORT_WIDTH",
    "MOBILE_SIDEBAR",
    "NAVIGATION",
    "LayoutController",
    "NavItem",
    "NavSection",
    "ShellLayout",
    "SidebarMode",
    "ViewportClass",
    "classify_viewport",
    "is_active",
    "visible_navigation",
]
