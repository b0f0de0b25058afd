"""Menu lateral filtrado por papel.

Lista estática; cada item declara os papéis que podem vê-lo. O texto
exibido é resolvido fora daqui a partir de `label_key`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from app.domain.identity import Role

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.sessions.store import SessionStore


class NavSection(StrEnum):
    MAIN = "main"
    MANAGEMENT = "management"
    SETTINGS = "settings"


@dataclass(frozen=True, slots=True)
class NavItem:
    """Item do menu.

    Attributes:
        label_key: Chave de tradução do rótulo
        href: Caminho da rota
        roles: Papéis autorizados a ver o item
        section: Grupo do menu
    """

    label_key: str
    href: str
    roles: frozenset[Role]
    section: NavSection = NavSection.MAIN


_ALL = frozenset(Role)
_ADMIN_DESK = frozenset({Role.ADMINISTRATOR, Role.FRONT_DESK})

NAVIGATION: tuple[NavItem, ...] = (
    NavItem("navigation.dashboard", "/dashboard", _ALL),
    NavItem("navigation.patients", "/patients", _ALL),
    NavItem("navigation.doctors", "/doctors", _ALL),
    NavItem("navigation.sessions", "/sessions", _ALL),
    NavItem("navigation.payments", "/payments", _ADMIN_DESK),
    NavItem("navigation.employees", "/employees", _ADMIN_DESK),
    NavItem("navigation.calendar", "/calendar", _ALL),
    NavItem("navigation.reports", "/reports", _ADMIN_DESK),
    NavItem(
        "navigation.manage",
        "/manage",
        frozenset({Role.ADMINISTRATOR}),
        NavSection.MANAGEMENT,
    ),
    NavItem("navigation.settings", "/settings", _ALL, NavSection.SETTINGS),
)


def visible_navigation(
    session: SessionStore,
    items: Iterable[NavItem] = NAVIGATION,
) -> tuple[NavItem, ...]:
    """Itens que a identidade corrente pode ver (nenhum sem identidade)."""
    return tuple(item for item in items if session.has_role(*item.roles))


def is_active(href: str, pathname: str) -> bool:
    """Caminho exato ou prefixo seguido de '/'."""
    return pathname == href or pathname.startswith(href + "/")
