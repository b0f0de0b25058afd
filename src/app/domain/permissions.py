"""Capacidades derivadas do papel do operador.

CapabilitySet é sempre recalculado a partir de Identity.role através
da tabela fixa CAPABILITY_TABLE; nunca é persistido nem mutado.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from app.domain.identity import Role, parse_role

if TYPE_CHECKING:
    from app.domain.identity import Identity


class Capability(StrEnum):
    """Capacidades nomeadas consumidas pela interface."""

    MANAGE_USERS = "manage-users"
    VIEW_PATIENTS = "view-patients"
    MODIFY_PATIENTS = "modify-patients"
    VIEW_PAYMENTS = "view-payments"
    MODIFY_PAYMENTS = "modify-payments"
    VIEW_SESSIONS = "view-sessions"
    MODIFY_SESSIONS = "modify-sessions"

    def __str__(self) -> str:
        return self.value


CAPABILITY_TABLE: dict[Role, frozenset[Capability]] = {
    Role.ADMINISTRATOR: frozenset(Capability),
    Role.CLINICIAN: frozenset({
        Capability.VIEW_PATIENTS,
        Capability.VIEW_SESSIONS,
        Capability.MODIFY_SESSIONS,
    }),
    Role.FRONT_DESK: frozenset({
        Capability.VIEW_PATIENTS,
        Capability.MODIFY_PATIENTS,
        Capability.VIEW_PAYMENTS,
        Capability.MODIFY_PAYMENTS,
        Capability.VIEW_SESSIONS,
        Capability.MODIFY_SESSIONS,
    }),
}


@dataclass(frozen=True, slots=True)
class CapabilitySet:
    """Conjunto somente-leitura de capacidades concedidas.

    Consultas por nome desconhecido retornam False.
    """

    granted: frozenset[Capability] = frozenset()

    def allows(self, name: str | Capability) -> bool:
        try:
            capability = Capability(name)
        except ValueError:
            return False
        return capability in self.granted

    def __getitem__(self, name: str | Capability) -> bool:
        return self.allows(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.allows(name)

    def __bool__(self) -> bool:
        return bool(self.granted)

    def as_dict(self) -> dict[str, bool]:
        """Mapa completo capacidade → bool (todas as capacidades conhecidas)."""
        return {c.value: c in self.granted for c in Capability}


NO_CAPABILITIES = CapabilitySet()


def derive_permissions(subject: Identity | Role | str | None) -> CapabilitySet:
    """Deriva o CapabilitySet do papel. Função pura, nunca levanta.

    Aceita Identity, Role ou o rótulo cru; papel ausente ou fora do
    enum resulta no conjunto vazio (tudo False).
    """
    if subject is None:
        return NO_CAPABILITIES
    label = getattr(subject, "role", subject)
    role = parse_role(label)
    if role is None:
        return NO_CAPABILITIES
    return CapabilitySet(granted=CAPABILITY_TABLE.get(role, frozenset()))
