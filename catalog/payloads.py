"""Typed views of the raw provider payloads.

Only the fields the normalizers read are declared; everything else the
providers send is ignored. Optional upstream fields are explicit here so the
fallback rules live in ``catalog.normalizers`` and nowhere else.
"""
from pydantic import BaseModel, ConfigDict, Field


# --- PokeAPI ---------------------------------------------------------------

class NamedResource(BaseModel):
    name: str
    url: str | None = None


class OfficialArtwork(BaseModel):
    front_default: str | None = None
    front_shiny: str | None = None


class OtherSprites(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    official_artwork: OfficialArtwork | None = Field(default=None, alias="official-artwork")


class SpritesPayload(BaseModel):
    front_default: str | None = None
    front_shiny: str | None = None
    back_default: str | None = None
    other: OtherSprites | None = None


class TypeSlot(BaseModel):
    slot: int | None = None
    type: NamedResource


class AbilitySlot(BaseModel):
    ability: NamedResource
    is_hidden: bool = False


class MoveVersionDetail(BaseModel):
    level_learned_at: int = 0
    move_learn_method: NamedResource


class MoveEntry(BaseModel):
    move: NamedResource
    version_group_details: list[MoveVersionDetail] = []


class HeldItemVersion(BaseModel):
    rarity: int | None = None


class HeldItemEntry(BaseModel):
    item: NamedResource
    version_details: list[HeldItemVersion] = []


class GameIndex(BaseModel):
    version: NamedResource


class Cries(BaseModel):
    latest: str | None = None
    legacy: str | None = None


class StatEntry(BaseModel):
    base_stat: int
    stat: NamedResource | None = None


class PokemonPayload(BaseModel):
    # Model for GET /pokemon/{name-or-id}
    id: int
    name: str
    sprites: SpritesPayload = SpritesPayload()
    types: list[TypeSlot] = []
    weight: int = 0  # hectograms
    height: int = 0  # decimetres
    base_experience: int | None = None
    abilities: list[AbilitySlot] = []
    moves: list[MoveEntry] = []
    held_items: list[HeldItemEntry] | None = None
    game_indices: list[GameIndex] | None = None
    cries: Cries | None = None
    stats: list[StatEntry]


class PokemonListPayload(BaseModel):
    # Model for GET /pokemon?offset=&limit=
    count: int
    results: list[NamedResource] = []


class TypeMember(BaseModel):
    pokemon: NamedResource


class TypePayload(BaseModel):
    # Model for GET /type/{tag}
    name: str
    pokemon: list[TypeMember] = []


# --- OMDb ------------------------------------------------------------------

class OMDbMoviePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(alias="Title")
    imdb_id: str = Field(alias="imdbID")
    year: str | None = Field(default=None, alias="Year")
    rated: str | None = Field(default=None, alias="Rated")
    released: str | None = Field(default=None, alias="Released")
    runtime: str | None = Field(default=None, alias="Runtime")
    genre: str | None = Field(default=None, alias="Genre")
    director: str | None = Field(default=None, alias="Director")
    writer: str | None = Field(default=None, alias="Writer")
    actors: str | None = Field(default=None, alias="Actors")
    plot: str | None = Field(default=None, alias="Plot")
    language: str | None = Field(default=None, alias="Language")
    country: str | None = Field(default=None, alias="Country")
    poster: str | None = Field(default=None, alias="Poster")
    imdb_rating: str | None = Field(default=None, alias="imdbRating")
    type: str | None = Field(default=None, alias="Type")


class OMDbSearchItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(default=None, alias="Title")
    year: str | None = Field(default=None, alias="Year")
    imdb_id: str | None = Field(default=None, alias="imdbID")
    type: str | None = Field(default=None, alias="Type")
    poster: str | None = Field(default=None, alias="Poster")


class OMDbSearchPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    search: list[OMDbSearchItem] = Field(default=[], alias="Search")
    total_results: str | None = Field(default=None, alias="totalResults")
