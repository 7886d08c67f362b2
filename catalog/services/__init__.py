"""
Retrieval operations exposed to the presentation layer.

``MovieService`` and ``PokemonService`` back the HTTP routes. ``QueryState``
and ``QueryStatus`` are the client-side helper for callers of those routes:
they track one query's state and discard stale responses.
"""
from .movie_service import MovieService
from .pokemon_service import PokemonService
from .query_state import QueryState, QueryStatus

__all__ = [
    'MovieService',
    'PokemonService',
    'QueryState',
    'QueryStatus',
]
