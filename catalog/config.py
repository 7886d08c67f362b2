from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # OMDb credential (required only by the movie endpoints)
    OMDB_API_KEY: str | None = None

    # Cache
    REDIS_URL: str = "redis://localhost:6379"
    CACHE_TTL: int = 3600  # 1 hour freshness window

    # Upstream providers
    POKEAPI_BASE_URL: str = "https://pokeapi.co/api/v2"
    OMDB_BASE_URL: str = "https://www.omdbapi.com"
    HTTP_TIMEOUT: float = 5.0

    # Listing
    POKEMON_UNIVERSE_CEILING: int = 1025  # highest national dex number upstream
    HYDRATION_CONCURRENCY: int = 24
    MAX_PAGE_SIZE: int = 48
    MOVIE_PAGE_SIZE: int = 8  # only used to compute total pages, never sent to OMDb

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
