"""Protocolos e contratos do core da aplicação."""

from .document import DocumentRootProtocol
from .storage import KeyValueStorageProtocol

__all__ = [
    "DocumentRootProtocol",
    "KeyValueStorageProtocol",
]
