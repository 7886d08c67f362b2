from unittest.mock import AsyncMock

import pytest

from catalog.clients.errors import APIClientError, ConfigurationError, ResourceNotFoundError
from catalog.models import Failure, MovieFound, MoviePage, NotFound
from catalog.services.movie_service import MovieService


@pytest.fixture
def omdb_client():
    return AsyncMock()


@pytest.fixture
def movie_service(omdb_client):
    return MovieService(omdb_client=omdb_client, page_size=8)


# --- EXACT TITLE ---

@pytest.mark.asyncio
async def test_get_by_title_success(movie_service, omdb_client, inception_payload):
    omdb_client.get_by_title.return_value = inception_payload

    result = await movie_service.get_by_title("Inception")

    omdb_client.get_by_title.assert_called_once_with("Inception")
    assert isinstance(result, MovieFound)
    assert result.data.title == "Inception"
    assert result.data.genre == ["Action", "Adventure", "Sci-Fi"]


@pytest.mark.asyncio
@pytest.mark.parametrize("title", ["", "  "])
async def test_blank_title_is_rejected_before_network(movie_service, omdb_client, title):
    result = await movie_service.get_by_title(title)

    assert isinstance(result, Failure)
    omdb_client.get_by_title.assert_not_called()


@pytest.mark.asyncio
async def test_provider_not_found_maps_to_not_found(movie_service, omdb_client):
    omdb_client.get_by_title.side_effect = ResourceNotFoundError(detail="Movie not found!")

    result = await movie_service.get_by_title("Qwertyuiop")

    assert isinstance(result, NotFound)
    assert "Qwertyuiop" in result.message


@pytest.mark.asyncio
async def test_partial_record_is_never_a_success(movie_service, omdb_client, inception_payload):
    del inception_payload["Title"]
    omdb_client.get_by_title.return_value = inception_payload

    result = await movie_service.get_by_title("Inception")

    assert isinstance(result, Failure)


@pytest.mark.asyncio
async def test_provider_error_keeps_its_message(movie_service, omdb_client):
    omdb_client.get_by_title.side_effect = APIClientError(status_code=503, detail="Request limit reached!")

    result = await movie_service.get_by_title("Inception")

    assert isinstance(result, Failure)
    assert "Request limit reached!" in result.message


@pytest.mark.asyncio
async def test_missing_credential_is_not_turned_into_an_outcome(movie_service, omdb_client):
    """A configuration problem must stay loud instead of looking like a retryable error."""
    omdb_client.get_by_title.side_effect = ConfigurationError("OMDB_API_KEY is not configured")
    omdb_client.search.side_effect = ConfigurationError("OMDB_API_KEY is not configured")

    with pytest.raises(ConfigurationError):
        await movie_service.get_by_title("Inception")
    with pytest.raises(ConfigurationError):
        await movie_service.search("Inception")


# --- FUZZY SEARCH ---

@pytest.mark.asyncio
async def test_search_computes_total_pages(movie_service, omdb_client, batman_search_payload):
    omdb_client.search.return_value = batman_search_payload

    result = await movie_service.search("batman", page=2)

    omdb_client.search.assert_called_once_with("batman", 2)
    assert isinstance(result, MoviePage)
    assert result.total_results == 17
    assert result.total_pages == 3  # ceil(17 / 8)
    assert result.page == 2
    assert [m.title for m in result.data] == ["Batman Begins", "Batman"]


@pytest.mark.asyncio
async def test_search_without_matches_is_not_found(movie_service, omdb_client):
    omdb_client.search.side_effect = ResourceNotFoundError(detail="Movie not found!")

    result = await movie_service.search("zzzzzz")

    assert isinstance(result, NotFound)


@pytest.mark.asyncio
@pytest.mark.parametrize("title, page", [("", 1), ("batman", 0)])
async def test_invalid_search_is_rejected(movie_service, omdb_client, title, page):
    result = await movie_service.search(title, page)

    assert isinstance(result, Failure)
    omdb_client.search.assert_not_called()


@pytest.mark.asyncio
async def test_search_serializes_camel_case(movie_service, omdb_client, batman_search_payload):
    omdb_client.search.return_value = batman_search_payload

    result = await movie_service.search("batman")

    dumped = result.model_dump(by_alias=True)
    assert dumped["status"] == "success"
    assert dumped["totalResults"] == 17
    assert dumped["totalPages"] == 3
    assert dumped["data"][0]["imdbId"] == "tt0372784"
