"""Raiz de documento em memória (lista de classes)."""

from __future__ import annotations

from app.protocols.document import DocumentRootProtocol


class DocumentRoot(DocumentRootProtocol):
    """Implementação em memória para uso headless e testes."""

    __slots__ = ("_classes",)

    def __init__(self, classes: set[str] | None = None) -> None:
        self._classes: set[str] = set(classes or ())

    def add_class(self, name: str) -> None:
        self._classes.add(name)

    def remove_class(self, name: str) -> None:
        self._classes.discard(name)

    def has_class(self, name: str) -> bool:
        return name in self._classes

    @property
    def classes(self) -> frozenset[str]:
        return frozenset(self._classes)
