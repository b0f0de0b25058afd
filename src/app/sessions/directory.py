"""Diretório fechado de identidades conhecidas.

Colaborador externo do Session Store: o login compara email e senha
por igualdade exata. Sem hash de credencial: simplificação conhecida
do modo demonstração, que não deve ir para um backend real.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from app.domain.identity import Identity

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class DirectoryEntry(Identity):
    """Registro do diretório: identidade + segredo."""

    password: str

    def to_identity(self) -> Identity:
        """Identidade pública, sem o campo de senha."""
        return Identity.from_directory_record(self.model_dump(by_alias=True))


DEFAULT_DIRECTORY_RECORDS: tuple[dict[str, Any], ...] = (
    {
        "id": 1,
        "name": "Ahmed Mohamed",
        "email": "admin@clinic.com",
        "password": "admin123",
        "role": "admin",
        "phone": "01234567890",
        "department": "Administração",
        "specialization": "Gestão de clínicas",
        "createdAt": "2024-01-01T00:00:00Z",
    },
    {
        "id": 2,
        "name": "Dra. Sara Ahmed",
        "email": "doctor1@clinic.com",
        "password": "doctor123",
        "role": "doctor",
        "phone": "01234567891",
        "department": "Fisioterapia geral",
        "specialization": "Ortopedia e articulações",
        "createdAt": "2024-01-01T00:00:00Z",
    },
    {
        "id": 3,
        "name": "Dr. Mohamed Ali",
        "email": "doctor2@clinic.com",
        "password": "doctor123",
        "role": "doctor",
        "phone": "01234567892",
        "department": "Fisioterapia pediátrica",
        "specialization": "Fisioterapia infantil",
        "createdAt": "2024-01-01T00:00:00Z",
    },
    {
        "id": 6,
        "name": "Fatima Hassan",
        "email": "reception@clinic.com",
        "password": "reception123",
        "role": "receptionist",
        "phone": "01234567895",
        "department": "Recepção",
        "createdAt": "2024-01-01T00:00:00Z",
    },
)


class IdentityDirectory:
    """Lista fechada de identidades aceitas no login."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[DirectoryEntry]) -> None:
        self._entries: dict[str, DirectoryEntry] = {e.email: e for e in entries}

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> IdentityDirectory:
        """Valida registros crus (dicts) e monta o diretório."""
        return cls(DirectoryEntry.model_validate(r) for r in records)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, email: object) -> bool:
        return email in self._entries

    def find(self, email: str, password: str) -> Identity | None:
        """Identidade pública para o par email/senha exato, ou None."""
        entry = self._entries.get(email)
        if entry is None or entry.password != password:
            return None
        return entry.to_identity()

    def replace_password(self, email: str, current: str, new: str) -> bool:
        """Troca a senha se `current` confere. Retorna False caso contrário."""
        entry = self._entries.get(email)
        if entry is None or entry.password != current:
            return False
        self._entries[email] = entry.model_copy(update={"password": new})
        return True


def default_directory() -> IdentityDirectory:
    """Diretório de demonstração embutido."""
    return IdentityDirectory.from_records(DEFAULT_DIRECTORY_RECORDS)


def load_directory(path: str | Path) -> IdentityDirectory:
    """Carrega diretório de um arquivo YAML.

    Formato aceito: lista de registros, ou mapa com a chave `identities`.

    Raises:
        ValueError: Formato inesperado
        pydantic.ValidationError: Registro inválido
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or []

    records = data.get("identities", []) if isinstance(data, dict) else data
    if not isinstance(records, list):
        msg = f"Diretório em formato inesperado: {path}"
        raise ValueError(msg)

    directory = IdentityDirectory.from_records(records)
    logger.info("directory_loaded", extra={"entries": len(directory)})
    return directory
