"""Fachada do shell (fronteira de renderização)."""

from app.shell.dashboard import (
    LOGIN_SUCCESS_MESSAGE,
    LOGOUT_MESSAGE,
    LOGOUT_PERSIST_FAILED_MESSAGE,
    DashboardShell,
)

__all__ = [
    "LOGIN_SUCCESS_MESSAGE",
    "LOGOUT_MESSAGE",
    "LOGOUT_PERSIST_FAILED_MESSAGE",
    "DashboardShell",
]
