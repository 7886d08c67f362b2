import logging
from typing import Any

from catalog.clients.base import CachedAPIClient
from catalog.clients.errors import APIClientError, ConfigurationError, ResourceNotFoundError
from catalog.config import settings

logger = logging.getLogger(__name__)


class OMDbClient(CachedAPIClient):
    """Client for the OMDb search endpoint.

    OMDb answers almost everything with HTTP 200 and reports failures through
    ``{"Response": "False", "Error": "..."}``, so those bodies are turned into
    exceptions here and never cached.
    """

    BASE_URL = settings.OMDB_BASE_URL
    PROVIDER = "OMDb"
    CACHE_PREFIX = "omdb"

    def __init__(self, api_key: str = None, **kwargs):
        super().__init__(**kwargs)
        self.api_key = api_key or settings.OMDB_API_KEY

    async def get_by_title(self, title: str) -> dict:
        """Exact-title lookup returning one detailed record with the full plot."""
        return await self._query({"t": title.strip(), "type": "movie", "plot": "full"})

    async def search(self, title: str, page: int = 1) -> dict:
        """Fuzzy title search; returns ``Search`` (up to 10 items) and ``totalResults``."""
        return await self._query({"s": title.strip(), "type": "movie", "page": str(page)})

    async def _query(self, params: dict) -> dict:
        if not self.api_key or not self.api_key.strip():
            logger.error("OMDB_API_KEY is not configured")
            raise ConfigurationError("OMDB_API_KEY is not configured")

        # The credential stays out of the cache key
        cache_key = ":".join(f"{k}={v.lower()}" for k, v in sorted(params.items()))
        return await self.get_json("/", cache_key=cache_key, params={"apikey": self.api_key, **params})

    def _check_payload(self, path: str, data: Any) -> None:
        if not isinstance(data, dict):
            raise APIClientError(status_code=503, detail="OMDb returned an unexpected response format.")
        if data.get("Response") == "False":
            message = data.get("Error") or "Unknown error"
            if "not found" in message.lower():
                logger.warning(f"OMDb lookup found nothing: {message}")
                raise ResourceNotFoundError(detail=message)
            logger.error(f"OMDb reported an error: {message}")
            raise APIClientError(status_code=503, detail=message)
