import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from catalog.clients import ConfigurationError
from catalog.config import settings
from catalog.dependencies import close_clients, get_movie_service, get_pokemon_service
from catalog.models import ListResult, MovieListResult, MovieSearchResult, SearchResult
from catalog.services import MovieService, PokemonService

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

# Every endpoint answers with a tagged outcome; the HTTP status mirrors the tag
STATUS_CODES = {
    "success": status.HTTP_200_OK,
    "not_found": status.HTTP_404_NOT_FOUND,
    "error": status.HTTP_502_BAD_GATEWAY,
}
NON_BLANK = r"^\s*\S"


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_clients()


app = FastAPI(
    title="Pokedex & Movie Catalog API",
    description="Read-only aggregator over PokeAPI and OMDb with normalized, tagged results.",
    lifespan=lifespan,
)


def _respond(outcome, response: Response):
    response.status_code = STATUS_CODES[outcome.status]
    return outcome


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    # A deployment problem, never reported as a retryable upstream error
    logger.error(f"Configuration error while serving {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": "configuration_error", "message": str(exc)},
    )


# --- Pokemon ---

@app.get("/pokemon", response_model=ListResult, summary="Returns one page of the Pokemon grid")
async def list_pokemon(
    response: Response,
    offset: int = Query(0, ge=0),
    limit: int = Query(24, ge=1, le=settings.MAX_PAGE_SIZE),
    type_filter: str | None = Query(None, alias="type", description="Type tag such as 'fire'; 'all' disables the filter"),
    service: PokemonService = Depends(get_pokemon_service),
):
    return _respond(await service.list_page(offset=offset, limit=limit, type_filter=type_filter), response)


@app.get("/pokemon/search", response_model=SearchResult, summary="Looks a Pokemon up by name")
async def search_pokemon(
    response: Response,
    name: str = Query(..., pattern=NON_BLANK),
    service: PokemonService = Depends(get_pokemon_service),
):
    return _respond(await service.search(name), response)


@app.get("/pokemon/{pokemon_id}", response_model=SearchResult, summary="Returns a Pokemon by national dex number")
async def get_pokemon(
    response: Response,
    pokemon_id: int = Path(..., ge=1),
    service: PokemonService = Depends(get_pokemon_service),
):
    return _respond(await service.get_by_id(pokemon_id), response)


# --- Movies ---

@app.get("/movies/search", response_model=MovieSearchResult, summary="Returns the movie with this exact title")
async def search_movie_by_title(
    response: Response,
    title: str = Query(..., pattern=NON_BLANK),
    service: MovieService = Depends(get_movie_service),
):
    return _respond(await service.get_by_title(title), response)


@app.get("/movies", response_model=MovieListResult, summary="Returns one page of fuzzy title matches")
async def search_movies(
    response: Response,
    title: str = Query(..., pattern=NON_BLANK),
    page: int = Query(1, ge=1),
    service: MovieService = Depends(get_movie_service),
):
    return _respond(await service.search(title, page), response)
