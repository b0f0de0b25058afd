"""Armazenamento em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from app.protocols.storage import KeyValueStorageProtocol


class MemoryStorage(KeyValueStorageProtocol):
    """Armazenamento chave/valor em memória: apenas para dev/test."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        """Lê valor da chave (None se ausente)."""
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        """Grava valor na chave."""
        self._items[key] = str(value)

    def remove_item(self, key: str) -> bool:
        """Remove a chave. Retorna False se não existia."""
        return self._items.pop(key, None) is not None

    def keys(self) -> list[str]:
        """Lista as chaves presentes."""
        return list(self._items)

    def snapshot(self) -> dict[str, str]:
        """Cópia do conteúdo (apenas para testes)."""
        return dict(self._items)
