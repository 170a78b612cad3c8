"""
Key-value storage for seat layouts and per-dashboard auth sessions.

Backends:
  - MemoryKeyValueStore: process-local dict, the default
  - RedisKeyValueStore: redis.asyncio, fails open (errors are logged, reads
    return None, writes are dropped) so a Redis outage degrades to "not found"
    instead of failing requests

NamespacedStore prefixes every key with "<namespace>:" so the user, owner
and admin dashboards can share one backend without seeing each other's keys.
"""

from abc import ABC, abstractmethod
from typing import Optional

import redis.asyncio as redis

from bookmyblock.core.config import Settings
from bookmyblock.core.logging import get_logger

logger = get_logger(__name__)


class KeyValueStore(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        pass

    @abstractmethod
    async def keys(self, prefix: str = "") -> list[str]:
        pass

    async def status(self) -> dict:
        return {"backend": type(self).__name__}

    async def close(self) -> None:
        pass


class MemoryKeyValueStore(KeyValueStore):
    """TTLs are ignored; entries live as long as the process."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    async def keys(self, prefix: str = "") -> list[str]:
        return sorted(k for k in self._data if k.startswith(prefix))

    async def status(self) -> dict:
        return {"backend": "memory", "keys": len(self._data)}


class RedisKeyValueStore(KeyValueStore):
    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self._client.get(key)
        except Exception as e:
            logger.error("kv_get_error", key=key, error=str(e))
            return None

    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        try:
            if ttl:
                await self._client.setex(key, ttl, value)
            else:
                await self._client.set(key, value)
        except Exception as e:
            logger.error("kv_set_error", key=key, error=str(e))

    async def delete(self, key: str) -> bool:
        try:
            return bool(await self._client.delete(key))
        except Exception as e:
            logger.error("kv_delete_error", key=key, error=str(e))
            return False

    async def keys(self, prefix: str = "") -> list[str]:
        try:
            return sorted([key async for key in self._client.scan_iter(match=f"{prefix}*", count=100)])
        except Exception as e:
            logger.error("kv_scan_error", prefix=prefix, error=str(e))
            return []

    async def status(self) -> dict:
        try:
            await self._client.ping()
            return {"backend": "redis", "status": "connected"}
        except Exception as e:
            return {"backend": "redis", "status": "error", "error": str(e)}

    async def close(self) -> None:
        await self._client.close()


class NamespacedStore:
    """View of a KeyValueStore restricted to one namespace."""

    def __init__(self, store: KeyValueStore, namespace: str) -> None:
        self._store = store
        self.namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    async def get(self, key: str) -> Optional[str]:
        return await self._store.get(self._key(key))

    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        await self._store.set(self._key(key), value, ttl)

    async def delete(self, key: str) -> bool:
        return await self._store.delete(self._key(key))

    async def keys(self) -> list[str]:
        prefix = self._key("")
        return [k[len(prefix):] for k in await self._store.keys(prefix)]


async def create_kv_store(settings: Settings) -> KeyValueStore:
    """Redis when enabled and reachable, otherwise the in-memory store."""
    if not settings.REDIS_ENABLED:
        return MemoryKeyValueStore()

    try:
        client = redis.from_url(
            settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
        )
        await client.ping()
        logger.info("redis_connected", url=settings.REDIS_URL)
        return RedisKeyValueStore(client)
    except Exception as e:
        logger.error("redis_connection_failed", error=str(e))
        return MemoryKeyValueStore()
