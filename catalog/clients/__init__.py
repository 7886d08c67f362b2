"""Client modules for external API communication."""
from .errors import APIClientError, ConfigurationError, ResourceNotFoundError
from .omdb_client import OMDbClient
from .pokeapi_client import PokeAPIClient

__all__ = [
    'APIClientError',
    'ConfigurationError',
    'OMDbClient',
    'PokeAPIClient',
    'ResourceNotFoundError',
]
