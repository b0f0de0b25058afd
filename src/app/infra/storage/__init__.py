"""Backends de armazenamento durável (memória, arquivo JSON, Redis)."""

from app.infra.storage.file_storage import FileStorage
from app.infra.storage.memory_storage import MemoryStorage
from app.infra.storage.redis_storage import DEFAULT_KEY_PREFIX, RedisStorage

__all__ = [
    "DEFAULT_KEY_PREFIX",
    "FileStorage",
    "MemoryStorage",
    "RedisStorage",
]
