"""Redis Storage: armazenamento durável compartilhado via Redis.

Cada chave do painel vira uma chave Redis com namespace. Sem TTL:
preferências e identidade persistem até remoção explícita.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from app.protocols.storage import KeyValueStorageProtocol
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis import Redis

logger = logging.getLogger(__name__)

# Prefixo padrão para namespace das chaves
DEFAULT_KEY_PREFIX = "clinic-shell:"


class RedisStorage(KeyValueStorageProtocol):
    """Store chave/valor usando Redis.

    Args:
        redis_client: Cliente Redis síncrono
        key_prefix: Namespace aplicado a todas as chaves
    """

    def __init__(
        self,
        redis_client: Redis[bytes],
        key_prefix: str = DEFAULT_KEY_PREFIX,
    ) -> None:
        self._redis = redis_client
        self._prefix = key_prefix

    def _key(self, key: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{self._prefix}{key}"

    def get_item(self, key: str) -> str | None:
        """Lê valor da chave (None se ausente)."""
        try:
            data = self._redis.get(self._key(key))
        except RedisError as exc:
            raise RedisConnectionError("Falha ao ler chave no Redis") from exc
        if data is None:
            return None
        return data.decode("utf-8") if isinstance(data, bytes) else str(data)

    def set_item(self, key: str, value: str) -> None:
        """Grava valor na chave."""
        try:
            self._redis.set(self._key(key), str(value))
        except RedisError as exc:
            raise RedisConnectionError("Falha ao gravar chave no Redis") from exc
        logger.debug("storage_item_saved", extra={"storage_key": key, "backend": "redis"})

    def remove_item(self, key: str) -> bool:
        """Remove a chave. Retorna False se não existia."""
        try:
            result = self._redis.delete(self._key(key))
        except RedisError as exc:
            raise RedisConnectionError("Falha ao remover chave no Redis") from exc
        return bool(result)

    def keys(self) -> list[str]:
        """Lista as chaves do namespace (sem o prefixo)."""
        try:
            raw_keys = list(self._redis.scan_iter(match=f"{self._prefix}*"))
        except RedisError as exc:
            raise RedisConnectionError("Falha ao listar chaves no Redis") from exc
        names: list[str] = []
        for raw in raw_keys:
            name = raw.decode("utf-8") if isinstance(raw, bytes) else str(raw)
            names.append(name[len(self._prefix):])
        return names
