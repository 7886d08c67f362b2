import logging

from catalog.clients.base import CachedAPIClient
from catalog.config import settings

logger = logging.getLogger(__name__)


class PokeAPIClient(CachedAPIClient):
    BASE_URL = settings.POKEAPI_BASE_URL
    PROVIDER = "PokeAPI"
    CACHE_PREFIX = "pokeapi"

    async def get_pokemon(self, identifier: str | int) -> dict:
        """Fetches the raw detail record for a Pokemon name or national dex id."""
        # Normalize the name to lowercase for consistent caching
        normalized = str(identifier).strip().lower()
        return await self.get_json(f"/pokemon/{normalized}", cache_key=f"pokemon:{normalized}")

    async def list_pokemon(self, offset: int, limit: int) -> dict:
        """Fetches one page of lightweight ``{name, url}`` references plus the total count."""
        return await self.get_json(
            "/pokemon",
            cache_key=f"list:{offset}:{limit}",
            params={"offset": offset, "limit": limit},
        )

    async def get_type(self, tag: str) -> dict:
        """Fetches a type record, whose ``pokemon`` field lists every member."""
        normalized = tag.strip().lower()
        return await self.get_json(f"/type/{normalized}", cache_key=f"type:{normalized}")
