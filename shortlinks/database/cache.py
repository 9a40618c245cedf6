"""Redis cache layer for short link lookups.

Only the immutable part of a link (id, short code, original URL) is cached.
Click counts always come from the store.
"""

import json
import logging
from typing import Optional

import redis.asyncio as redis

from .models import ShortLink


class RedisCache:
    """Redis cache for short code lookups."""

    def __init__(
        self,
        redis_url: Optional[str] = None,
        ttl_seconds: int = 3600,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Redis cache.

        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0)
            ttl_seconds: Default TTL for cached items
            logger: Optional logger instance
        """
        self.redis_url = redis_url
        self.ttl_seconds = ttl_seconds
        self.logger = logger or logging.getLogger(__name__)
        self.enabled = redis_url is not None
        self.client: Optional[redis.Redis] = None

        if redis_url:
            self.logger.info(f"Redis cache enabled with TTL={ttl_seconds}s")

    async def connect(self) -> None:
        """Connect to Redis. Disables the cache if the server is unreachable."""
        if not self.enabled:
            return

        try:
            self.client = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
            await self.client.ping()
            self.logger.info("Connected to Redis")
        except Exception as e:
            self.logger.error(f"Failed to connect to Redis: {e}")
            self.enabled = False

    async def get_link(self, short_code: str) -> Optional[ShortLink]:
        """Get a cached link.

        The returned link's clicks field is 0; it is not meant for display.

        Args:
            short_code: The short code

        Returns:
            Cached link or None on miss or cache error
        """
        if not self.enabled or not self.client:
            return None

        try:
            raw = await self.client.get(self.get_cache_key(short_code))
        except Exception as e:
            self.logger.error(f"Cache get error: {e}")
            return None

        if not raw:
            return None

        try:
            data = json.loads(raw)
            return ShortLink(
                id=data["id"],
                original_url=data["original_url"],
                short_code=short_code,
            )
        except (ValueError, KeyError) as e:
            self.logger.warning(f"Discarding malformed cache entry for {short_code}: {e}")
            return None

    async def set_link(self, link: ShortLink, ttl: Optional[int] = None) -> bool:
        """Cache a link.

        Args:
            link: Link to cache
            ttl: Optional TTL override (seconds)

        Returns:
            True if successful
        """
        if not self.enabled or not self.client:
            return False

        payload = json.dumps({"id": link.id, "original_url": link.original_url})
        try:
            await self.client.setex(self.get_cache_key(link.short_code), ttl or self.ttl_seconds, payload)
            return True
        except Exception as e:
            self.logger.error(f"Cache set error: {e}")
            return False

    async def ping(self) -> bool:
        """Check that Redis answers."""
        if not self.enabled or not self.client:
            return False
        try:
            await self.client.ping()
            return True
        except Exception as e:
            self.logger.error(f"Cache ping error: {e}")
            return False

    async def close(self) -> None:
        """Close Redis connection."""
        if self.client:
            await self.client.aclose()
            self.logger.info("Redis connection closed")

    def get_cache_key(self, short_code: str) -> str:
        """Generate cache key for short code."""
        return f"shortlinks:code:{short_code}"
