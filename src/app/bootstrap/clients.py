"""Factory do cliente Redis usado pelo backend de armazenamento."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

import redis

if TYPE_CHECKING:
    from redis import Redis

logger = logging.getLogger(__name__)

REDIS_TIMEOUT_SECONDS = 5.0


@lru_cache(maxsize=4)
def create_redis_client(redis_url: str) -> Redis:
    """Cria cliente Redis síncrono (um por URL).

    Args:
        redis_url: URL de conexão (redis://host:port/db)

    Returns:
        Cliente Redis configurado

    Raises:
        ValueError: Se redis_url vazio
    """
    if not redis_url:
        msg = "REDIS_URL não configurado"
        raise ValueError(msg)

    client: Redis = redis.from_url(
        redis_url,
        decode_responses=False,
        socket_timeout=REDIS_TIMEOUT_SECONDS,
        socket_connect_timeout=REDIS_TIMEOUT_SECONDS,
        retry_on_timeout=True,
    )

    host = client.connection_pool.connection_kwargs.get("host", "unknown")
    logger.info("redis_client_created", extra={"host": host})
    return client
