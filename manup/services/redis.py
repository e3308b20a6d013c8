"""
Cliente Redis para o cache last-known-good da policy.
"""
import redis.asyncio as redis
import logging
from typing import Optional

from redis.exceptions import RedisError

from manup.core.config import settings
from manup.core.exceptions import CacheStoreError, ConfigurationError

logger = logging.getLogger(__name__)


def criar_redis_client(url: Optional[str] = None) -> redis.Redis:
    """
    Cria cliente Redis com decode de respostas.

    Raises:
        ConfigurationError: Sem URL (nem argumento nem REDIS_URL)
    """
    url = url or settings.REDIS_URL
    if not url:
        raise ConfigurationError("REDIS_URL não configurada", {"field": "REDIS_URL"})

    return redis.from_url(
        url,
        encoding="utf-8",
        decode_responses=True
    )


class RedisCacheStore:
    """
    CacheStore sobre Redis.

    Sem TTL: a policy em cache é last-known-good e só é sobrescrita
    quando a rede devolve uma nova.
    """

    def __init__(self, client: Optional[redis.Redis] = None, url: Optional[str] = None):
        self._client = client
        self._url = url

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            self._client = criar_redis_client(self._url)
        return self._client

    async def get(self, key: str) -> Optional[str]:
        try:
            value = await self.client.get(key)
        except RedisError as e:
            raise CacheStoreError(
                "Erro ao ler do Redis",
                {"key": key},
                original_error=e,
            ) from e

        if isinstance(value, bytes):
            return value.decode()
        return value

    async def set(self, key: str, value: str) -> None:
        try:
            await self.client.set(key, value)
        except RedisError as e:
            raise CacheStoreError(
                "Erro ao gravar no Redis",
                {"key": key},
                original_error=e,
            ) from e

    async def ping(self) -> bool:
        """Verifica se Redis está acessível."""
        try:
            await self.client.ping()
            logger.debug("Redis conectado")
            return True
        except RedisError as e:
            logger.error(f"Redis não acessível: {e}")
            return False

    async def close(self) -> None:
        """Fecha conexões do pool."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
