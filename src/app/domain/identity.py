"""Identity: operador autenticado do painel da clínica.

Modelo imutável; o papel é sempre um valor do enum fechado Role.
A identidade persistida nunca contém o campo de senha.
"""
from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from utils.errors import CorruptPersistedStateError

# Campos que o operador pode editar no próprio perfil
EDITABLE_PROFILE_FIELDS = frozenset(
    {"name", "phone", "specialization", "department", "avatar"}
)

# Campo secreto removido antes de persistir ou expor a identidade
SECRET_FIELD = "password"


class Role(StrEnum):
    """Papéis do back office. Os valores são os rótulos persistidos."""

    ADMINISTRATOR = "admin"
    CLINICIAN = "doctor"
    FRONT_DESK = "receptionist"

    def __str__(self) -> str:
        return self.value


def parse_role(label: object) -> Role | None:
    """Converte rótulo em Role; None para rótulos fora do enum."""
    if isinstance(label, Role):
        return label
    try:
        return Role(str(label).strip().lower())
    except ValueError:
        return None


class Identity(BaseModel):
    """Operador autenticado (sem segredo)."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: int
    name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    role: Role

    # Perfil opcional
    phone: str | None = None
    specialization: str | None = None
    department: str | None = None
    avatar: str | None = None
    created_at: datetime | None = Field(default=None, alias="createdAt")

    def to_storage_json(self) -> str:
        """Serializa para a chave `user` do armazenamento durável."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_storage_json(cls, raw: str) -> Identity:
        """Desserializa a chave `user`.

        Raises:
            CorruptPersistedStateError: JSON ilegível ou identidade inválida
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise CorruptPersistedStateError(
                f"Identidade persistida inválida ({exc.error_count()} erro(s))"
            ) from exc

    @classmethod
    def from_directory_record(cls, record: dict[str, Any]) -> Identity:
        """Constrói identidade a partir de registro do diretório, sem a senha."""
        public = {k: v for k, v in record.items() if k != SECRET_FIELD}
        return cls.model_validate(public)

    def with_profile(self, **fields: Any) -> Identity:
        """Retorna cópia com campos de perfil atualizados (revalidada).

        Raises:
            ValueError: Campo fora de EDITABLE_PROFILE_FIELDS
            pydantic.ValidationError: Valor inválido
        """
        blocked = set(fields) - EDITABLE_PROFILE_FIELDS
        if blocked:
            raise ValueError(f"Campos não editáveis: {', '.join(sorted(blocked))}")
        data = self.model_dump(by_alias=True)
        data.update(fields)
        return Identity.model_validate(data)

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs (sem email/telefone)."""
        return {"identity_id": self.id, "role": self.role.value}
