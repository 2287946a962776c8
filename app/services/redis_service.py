"""
Redis Service - connection management for the key-value store.

Provides a single Redis client shared by the repositories for the
lifetime of the application.
"""

from typing import Optional

import redis.asyncio as redis

from app.config import get_settings
from app.utils.logging import get_logger

logger = get_logger(__name__)


class RedisService:
    """Singleton Redis service holding the shared client."""

    _instance: Optional["RedisService"] = None
    _redis_client: Optional[redis.Redis] = None

    def __new__(cls) -> "RedisService":
        """Ensure singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    async def connect(self) -> None:
        """Initialize Redis connection."""
        if self._redis_client is None:
            try:
                settings = get_settings()
                self._redis_client = redis.from_url(
                    settings.REDIS_URL,
                    encoding="utf-8",
                    decode_responses=True,
                )
                # Test connection
                await self._redis_client.ping()
                logger.info("redis_connected", url=settings.REDIS_URL)
            except Exception as e:
                # The client is kept; its pool reconnects once Redis is reachable
                logger.error("redis_connection_failed", error=str(e))
                raise

    async def disconnect(self) -> None:
        """Close Redis connection."""
        if self._redis_client:
            await self._redis_client.aclose()
            self._redis_client = None
            logger.info("redis_disconnected")

    def get_client(self) -> redis.Redis:
        """Get Redis client instance."""
        if self._redis_client is None:
            raise RuntimeError("Redis not connected. Call connect() first.")
        return self._redis_client

    async def health_check(self) -> bool:
        """Return True if Redis answers PING."""
        try:
            return bool(await self.get_client().ping())
        except Exception as e:
            logger.warning("redis_health_check_failed", error=str(e))
            return False


def get_redis_service() -> RedisService:
    """Get singleton Redis service instance."""
    return RedisService()
