import asyncio
import logging

from catalog.clients.errors import APIClientError, ResourceNotFoundError
from catalog.clients.pokeapi_client import PokeAPIClient
from catalog.config import settings
from catalog.models import Failure, NotFound, PokemonFound, PokemonListItem, PokemonPage
from catalog.normalizers import (
    MalformedPayloadError,
    listing_references,
    normalize_pokemon,
    normalize_pokemon_list_item,
    type_members,
)

logger = logging.getLogger(__name__)

CONNECTION_ERROR = "Could not reach the Pokemon API. Check your connection and try again."
UNFILTERED = {"", "all"}


class PokemonService:
    def __init__(
        self,
        poke_client: PokeAPIClient,
        universe_ceiling: int = settings.POKEMON_UNIVERSE_CEILING,
        hydration_concurrency: int = settings.HYDRATION_CONCURRENCY,
        max_page_size: int = settings.MAX_PAGE_SIZE,
    ):
        self._poke_client = poke_client
        self._universe_ceiling = universe_ceiling
        self._hydration_concurrency = hydration_concurrency
        self._max_page_size = max_page_size

    async def get_by_id(self, pokemon_id: int) -> PokemonFound | NotFound | Failure:
        """Fetches the full record of one Pokemon by national dex number."""
        if pokemon_id < 1:
            return Failure(message=f"Invalid Pokemon number: {pokemon_id}")
        return await self._fetch_one(pokemon_id, not_found=f"No Pokemon found with number #{pokemon_id}")

    async def search(self, name: str) -> PokemonFound | NotFound | Failure:
        """Looks a Pokemon up by name (case-insensitive)."""
        if not name or not name.strip():
            return Failure(message="Please enter a Pokemon name")
        return await self._fetch_one(name.strip().lower(), not_found=f'No Pokemon named "{name.strip()}" was found')

    async def _fetch_one(self, identifier, not_found: str) -> PokemonFound | NotFound | Failure:
        try:
            raw = await self._poke_client.get_pokemon(identifier)
            return PokemonFound(data=normalize_pokemon(raw))
        except ResourceNotFoundError:
            return NotFound(message=not_found)
        except MalformedPayloadError as e:
            logger.error(f"Unusable PokeAPI payload for {identifier}: {e}")
            return Failure(message="The Pokemon API returned incomplete data")
        except APIClientError as e:
            logger.error(f"PokeAPI lookup for {identifier} failed: {e.detail}")
            return Failure(message=CONNECTION_ERROR)

    async def list_page(
        self,
        offset: int = 0,
        limit: int = 24,
        type_filter: str | None = None,
    ) -> PokemonPage | NotFound | Failure:
        """
        Returns one grid page of hydrated Pokemon plus the total the pager should use.

        Without a type filter the provider's paged listing is used. With one, the
        whole type membership is fetched and sliced locally because PokeAPI has no
        filtered pagination; each member on the page then costs one detail call.
        """
        if offset < 0:
            return Failure(message="Offset must not be negative")
        if not 1 <= limit <= self._max_page_size:
            return Failure(message=f"Limit must be between 1 and {self._max_page_size}")

        tag = (type_filter or "").strip().lower()
        try:
            if tag in UNFILTERED:
                total, references = await self._unfiltered_references(offset, limit)
            else:
                total, references = await self._type_references(tag, offset, limit)
            items = await self._hydrate([pokemon_id for pokemon_id, _ in references])
        except ResourceNotFoundError as e:
            if tag in UNFILTERED:
                logger.error(f"PokeAPI listing endpoint missing: {e.detail}")
                return Failure(message=CONNECTION_ERROR)
            return NotFound(message=f'Unknown Pokemon type "{type_filter.strip()}"')
        except MalformedPayloadError as e:
            logger.error(f"Unusable PokeAPI listing payload: {e}")
            return Failure(message="The Pokemon API returned incomplete data")
        except APIClientError as e:
            logger.error(f"PokeAPI listing failed (offset={offset}, limit={limit}, type={tag or 'all'}): {e.detail}")
            return Failure(message=CONNECTION_ERROR)

        return PokemonPage(data=items, total=total)

    async def _unfiltered_references(self, offset: int, limit: int) -> tuple[int, list[tuple[int, str]]]:
        count, references = listing_references(await self._poke_client.list_pokemon(offset, limit))
        # Alternate forms (ids 10001+) follow the national dex in the listing
        references = [ref for ref in references if ref[0] <= self._universe_ceiling]
        return min(count, self._universe_ceiling), references

    async def _type_references(self, tag: str, offset: int, limit: int) -> tuple[int, list[tuple[int, str]]]:
        members = type_members(await self._poke_client.get_type(tag))
        members = [ref for ref in members if ref[0] <= self._universe_ceiling]
        return len(members), members[offset:offset + limit]

    async def _hydrate(self, pokemon_ids: list[int]) -> list[PokemonListItem]:
        # All-or-nothing: every fetch settles, then the first failure fails the whole page
        semaphore = asyncio.Semaphore(self._hydration_concurrency)

        async def hydrate_one(pokemon_id: int) -> PokemonListItem:
            async with semaphore:
                try:
                    raw = await self._poke_client.get_pokemon(pokemon_id)
                except ResourceNotFoundError as e:
                    # A listed member that 404s is an upstream inconsistency, not a missing page
                    raise APIClientError(status_code=503, detail=f"Pokemon #{pokemon_id} is listed but missing") from e
            return normalize_pokemon_list_item(raw)

        results = await asyncio.gather(
            *(hydrate_one(pokemon_id) for pokemon_id in pokemon_ids),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return list(results)
