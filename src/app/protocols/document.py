"""Protocolo da raiz do documento renderizado.

O Preference Store aplica o tema ativo adicionando ou removendo
a classe "dark" na raiz; quem renderiza implementa este contrato.
"""

from __future__ import annotations

from typing import Protocol


class DocumentRootProtocol(Protocol):
    """Raiz do documento com lista de classes mutável."""

    def add_class(self, name: str) -> None: ...

    def remove_class(self, name: str) -> None: ...

    def has_class(self, name: str) -> bool: ...
