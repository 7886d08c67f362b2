import logging
import math

from catalog.clients.errors import APIClientError, ResourceNotFoundError
from catalog.clients.omdb_client import OMDbClient
from catalog.config import settings
from catalog.models import Failure, MovieFound, MoviePage, NotFound
from catalog.normalizers import MalformedPayloadError, normalize_movie, normalize_movie_page

logger = logging.getLogger(__name__)


class MovieService:
    # ConfigurationError from the client is deliberately not caught here
    def __init__(self, omdb_client: OMDbClient, page_size: int = settings.MOVIE_PAGE_SIZE):
        self._omdb_client = omdb_client
        self._page_size = page_size

    async def get_by_title(self, title: str) -> MovieFound | NotFound | Failure:
        """Exact-title lookup. Success always carries a complete record."""
        if not title or not title.strip():
            return Failure(message="Please enter a movie title")

        try:
            raw = await self._omdb_client.get_by_title(title)
            return MovieFound(data=normalize_movie(raw))
        except ResourceNotFoundError:
            return NotFound(message=f'No movie titled "{title.strip()}" was found')
        except MalformedPayloadError as e:
            logger.error(f"Unusable OMDb payload for '{title}': {e}")
            return Failure(message="The movie API returned incomplete data")
        except APIClientError as e:
            logger.error(f"OMDb lookup for '{title}' failed: {e.detail}")
            return Failure(message=e.detail)

    async def search(self, title: str, page: int = 1) -> MoviePage | NotFound | Failure:
        """
        Fuzzy title search, one provider call per page.

        ``total_pages`` is derived from the grid page size; the provider decides how
        many results a page actually holds.
        """
        if not title or not title.strip():
            return Failure(message="Please enter a title")
        if page < 1:
            return Failure(message="Page must be 1 or greater")

        try:
            items, total_results = normalize_movie_page(await self._omdb_client.search(title, page))
        except ResourceNotFoundError:
            return NotFound(message=f'No movies matching "{title.strip()}" were found')
        except MalformedPayloadError as e:
            logger.error(f"Unusable OMDb search payload for '{title}': {e}")
            return Failure(message="The movie API returned incomplete data")
        except APIClientError as e:
            logger.error(f"OMDb search for '{title}' (page {page}) failed: {e.detail}")
            return Failure(message=e.detail)

        return MoviePage(
            data=items,
            total_results=total_results,
            total_pages=math.ceil(total_results / self._page_size),
            page=page,
        )
