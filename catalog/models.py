from typing import Literal, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# Records are snake_case in Python and camelCase on the wire
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Pokemon records ---

class PokemonAbility(CamelModel):
    name: str
    is_hidden: bool


class PokemonMove(CamelModel):
    name: str
    level_learned_at: int


class PokemonHeldItem(CamelModel):
    name: str
    rarity: int


class PokemonStats(CamelModel):
    hp: int
    attack: int
    defense: int
    special_attack: int
    special_defense: int
    speed: int


class Pokemon(CamelModel):
    id: int
    name: str
    sprite: str
    sprite_shiny: str | None
    sprite_front: str | None
    sprite_back: str | None
    types: list[str]
    weight: float  # kg
    height: float  # m
    abilities: list[PokemonAbility]
    main_ability: str
    base_experience: int
    moves: list[PokemonMove]
    held_items: list[PokemonHeldItem]
    cry_url: str | None
    games: list[str]
    stats: PokemonStats


class PokemonListItem(CamelModel):
    id: int
    name: str
    sprite: str
    types: list[str]


# --- Movie records ---

class Movie(CamelModel):
    imdb_id: str
    title: str
    year: str
    rated: str
    release_date: str
    runtime: str
    genre: list[str]
    director: str
    writer: str
    actors: list[str]
    plot: str
    language: str
    country: str
    poster: str  # absolute URL or "" when there is no poster
    imdb_rating: str
    type: str


class MovieListItem(CamelModel):
    imdb_id: str
    title: str
    year: str
    type: str
    poster: str


# --- Tagged outcomes ---

class NotFound(CamelModel):
    status: Literal["not_found"] = "not_found"
    message: str


class Failure(CamelModel):
    status: Literal["error"] = "error"
    message: str


class PokemonFound(CamelModel):
    status: Literal["success"] = "success"
    data: Pokemon


class PokemonPage(CamelModel):
    status: Literal["success"] = "success"
    data: list[PokemonListItem]
    total: int


class MovieFound(CamelModel):
    status: Literal["success"] = "success"
    data: Movie


class MoviePage(CamelModel):
    status: Literal["success"] = "success"
    data: list[MovieListItem]
    total_results: int
    total_pages: int
    page: int


# The Literal status on each member selects the variant
SearchResult = Union[PokemonFound, NotFound, Failure]
ListResult = Union[PokemonPage, NotFound, Failure]
MovieSearchResult = Union[MovieFound, NotFound, Failure]
MovieListResult = Union[MoviePage, NotFound, Failure]
