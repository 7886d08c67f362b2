from catalog.clients import OMDbClient, PokeAPIClient
from catalog.services import MovieService, PokemonService
from fastapi import Depends

_poke_client = None
_omdb_client = None

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

def get_omdb_client() -> OMDbClient:
    global _omdb_client
    if _omdb_client is None:
        _omdb_client = OMDbClient()
    return _omdb_client

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> PokemonService:
    return PokemonService(poke_client=poke_client)

def get_movie_service(
    omdb_client: OMDbClient = Depends(get_omdb_client),
) -> MovieService:
    return MovieService(omdb_client=omdb_client)

async def close_clients():
    global _poke_client, _omdb_client
    for client in (_poke_client, _omdb_client):
        if client is not None:
            await client.close()
    _poke_client = None
    _omdb_client = None
