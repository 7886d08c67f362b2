import json
import logging
from typing import Any

import httpx
import redis.asyncio as aioredis
from redis.exceptions import RedisError

from catalog.clients.errors import APIClientError, ResourceNotFoundError
from catalog.config import settings

logger = logging.getLogger(__name__)


class CachedAPIClient:
    """Read-only JSON client with a Redis-backed freshness window.

    Successful payloads are cached for ``CACHE_TTL`` seconds; failures are never
    cached so the next call retries the provider. Redis being unavailable
    degrades to an uncached fetch instead of failing the request.
    """

    BASE_URL = ""
    PROVIDER = "upstream"
    CACHE_PREFIX = "upstream"
    CACHE_TTL = settings.CACHE_TTL

    def __init__(self, redis_url: str = None, base_url: str = None, timeout: float = None):
        self.client = httpx.AsyncClient(
            base_url=base_url or self.BASE_URL,
            timeout=timeout or settings.HTTP_TIMEOUT,
        )
        self.redis = aioredis.from_url(redis_url or settings.REDIS_URL, decode_responses=True)

    async def _cache_get(self, cache_key: str) -> Any | None:
        try:
            cached = await self.redis.get(cache_key)
        except RedisError as e:
            logger.warning(f"Cache unavailable, reading {cache_key} from {self.PROVIDER}: {e}")
            return None
        if cached is None:
            return None
        return json.loads(cached)

    async def _cache_set(self, cache_key: str, data: Any) -> None:
        try:
            await self.redis.setex(cache_key, self.CACHE_TTL, json.dumps(data))
        except RedisError as e:
            logger.warning(f"Cache unavailable, {cache_key} not stored: {e}")

    async def get_json(self, path: str, cache_key: str, params: dict | None = None) -> Any:
        """GET ``path`` and return the decoded body, served from cache when fresh."""
        cache_key = f"{self.CACHE_PREFIX}:{cache_key}"
        cached = await self._cache_get(cache_key)
        if cached is not None:
            logger.info(f"Cache hit for {cache_key}")
            return cached

        logger.info(f"Cache miss for {cache_key}")
        try:
            response = await self.client.get(path, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                logger.warning(f"{self.PROVIDER} has no resource at {path}")
                raise ResourceNotFoundError(detail=f"{self.PROVIDER} resource '{path}' not found.")
            logger.error(f"{self.PROVIDER} failed with status {e.response.status_code} for {path}")
            raise APIClientError(
                status_code=503,
                detail=f"{self.PROVIDER} failed with status {e.response.status_code}",
            )
        except httpx.RequestError as e:
            logger.error(f"{self.PROVIDER} network error for {path}: {e}")
            raise APIClientError(status_code=503, detail=f"{self.PROVIDER} network error: {str(e)}")
        except ValueError:
            logger.error(f"{self.PROVIDER} returned a non-JSON body for {path}")
            raise APIClientError(status_code=503, detail=f"{self.PROVIDER} returned an unexpected response format.")

        self._check_payload(path, data)
        await self._cache_set(cache_key, data)
        return data

    def _check_payload(self, path: str, data: Any) -> None:
        """Hook for providers that report errors inside a 200 response."""

    async def clear_cache(self):
        """Clear every cached entry of this provider. Useful for testing."""
        keys = await self.redis.keys(f"{self.CACHE_PREFIX}:*")
        if keys:
            await self.redis.delete(*keys)

    async def close(self):
        """Close the HTTP and Redis connections (call on app shutdown)."""
        await self.client.aclose()
        await self.redis.aclose()
