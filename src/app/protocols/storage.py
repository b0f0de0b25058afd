"""Protocolo de armazenamento durável chave/valor.

Espelha a semântica do localStorage: chaves e valores são strings,
leitura de chave ausente retorna None, escrita é last-writer-wins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStorageProtocol(ABC):
    """Contrato mínimo síncrono para armazenamento durável."""

    @abstractmethod
    def get_item(self, key: str) -> str | None: ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None: ...

    @abstractmethod
    def remove_item(self, key: str) -> bool: ...

    @abstractmethod
    def keys(self) -> list[str]: ...
