"""Pure mapping from raw provider JSON to the records in ``catalog.models``.

Every function here is deterministic: the same payload always produces the
same record. Shape violations raise ``MalformedPayloadError``; they are never
reported as "not found".
"""
from pydantic import BaseModel, ValidationError

from catalog.models import (
    Movie,
    MovieListItem,
    Pokemon,
    PokemonAbility,
    PokemonHeldItem,
    PokemonListItem,
    PokemonMove,
    PokemonStats,
)
from catalog.payloads import (
    OMDbMoviePayload,
    OMDbSearchItem,
    OMDbSearchPayload,
    PokemonListPayload,
    PokemonPayload,
    SpritesPayload,
    TypePayload,
)

# PokeAPI always returns base stats in this order; records rely on it
STAT_ORDER = ("hp", "attack", "defense", "special_attack", "special_defense", "speed")

LEVEL_UP_METHOD = "level-up"
MAX_MOVES = 12
MAX_GAMES = 8
UNKNOWN_ABILITY = "unknown"
NOT_AVAILABLE = "N/A"
DEFAULT_MOVIE_TYPE = "movie"


class MalformedPayloadError(ValueError):
    pass


def _decode(model: type[BaseModel], raw):
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise MalformedPayloadError(
            f"{model.__name__} payload has {e.error_count()} invalid field(s)"
        ) from e


def _first(*candidates: str | None) -> str | None:
    # Empty strings count as missing, like a falsy check upstream
    return next((c for c in candidates if c), None)


# --- Pokemon ---

def select_sprite(sprites: SpritesPayload) -> str | None:
    artwork = sprites.other.official_artwork if sprites.other else None
    return _first(artwork.front_default if artwork else None, sprites.front_default)


def select_shiny_sprite(sprites: SpritesPayload) -> str | None:
    artwork = sprites.other.official_artwork if sprites.other else None
    return _first(artwork.front_shiny if artwork else None, sprites.front_shiny)


def select_main_ability(abilities: list[PokemonAbility]) -> str:
    """First non-hidden ability, else the first ability, else ``"unknown"``."""
    visible = next((a for a in abilities if not a.is_hidden), None)
    if visible is not None:
        return visible.name
    if abilities:
        return abilities[0].name
    return UNKNOWN_ABILITY


def level_up_moves(payload: PokemonPayload) -> list[PokemonMove]:
    moves = []
    for entry in payload.moves:
        detail = next(
            (d for d in entry.version_group_details if d.move_learn_method.name == LEVEL_UP_METHOD),
            None,
        )
        if detail is not None:
            moves.append(PokemonMove(name=entry.move.name, level_learned_at=detail.level_learned_at))
    # sorted() is stable, so moves learned at the same level keep upstream order
    return sorted(moves, key=lambda m: m.level_learned_at)[:MAX_MOVES]


def unique_games(payload: PokemonPayload) -> list[str]:
    names = (g.version.name for g in payload.game_indices or [])
    return list(dict.fromkeys(names))[:MAX_GAMES]


def _stats(payload: PokemonPayload) -> PokemonStats:
    if len(payload.stats) < len(STAT_ORDER):
        raise MalformedPayloadError(
            f"Pokemon '{payload.name}' has {len(payload.stats)} stats, expected {len(STAT_ORDER)}"
        )
    return PokemonStats(**{
        field: payload.stats[index].base_stat for index, field in enumerate(STAT_ORDER)
    })


def _required_sprite(payload: PokemonPayload) -> str:
    sprite = select_sprite(payload.sprites)
    if sprite is None:
        raise MalformedPayloadError(f"Pokemon '{payload.name}' has no usable sprite")
    return sprite


def normalize_pokemon(raw: dict) -> Pokemon:
    payload = _decode(PokemonPayload, raw)
    abilities = [
        PokemonAbility(name=a.ability.name, is_hidden=a.is_hidden) for a in payload.abilities
    ]
    held_items = [
        PokemonHeldItem(
            name=h.item.name,
            rarity=(h.version_details[0].rarity or 0) if h.version_details else 0,
        )
        for h in payload.held_items or []
    ]
    cries = payload.cries

    return Pokemon(
        id=payload.id,
        name=payload.name,
        sprite=_required_sprite(payload),
        sprite_shiny=select_shiny_sprite(payload.sprites),
        sprite_front=_first(payload.sprites.front_default),
        sprite_back=_first(payload.sprites.back_default),
        types=[t.type.name for t in payload.types],
        weight=payload.weight / 10,
        height=payload.height / 10,
        abilities=abilities,
        main_ability=select_main_ability(abilities),
        base_experience=payload.base_experience or 0,
        moves=level_up_moves(payload),
        held_items=held_items,
        cry_url=_first(cries.latest, cries.legacy) if cries else None,
        games=unique_games(payload),
        stats=_stats(payload),
    )


def normalize_pokemon_list_item(raw: dict) -> PokemonListItem:
    payload = _decode(PokemonPayload, raw)
    return PokemonListItem(
        id=payload.id,
        name=payload.name,
        sprite=_required_sprite(payload),
        types=[t.type.name for t in payload.types],
    )


def parse_resource_id(url: str | None) -> int:
    """Extracts the trailing numeric segment of a canonical PokeAPI URL.

    ``https://pokeapi.co/api/v2/pokemon/25/`` -> ``25``
    """
    segment = (url or "").rstrip("/").rsplit("/", 1)[-1]
    if not segment.isdigit():
        raise MalformedPayloadError(f"Cannot read a resource id from URL '{url}'")
    return int(segment)


def listing_references(raw: dict) -> tuple[int, list[tuple[int, str]]]:
    """Returns the provider's total count and the ``(id, name)`` pairs of one listing page."""
    payload = _decode(PokemonListPayload, raw)
    return payload.count, [(parse_resource_id(r.url), r.name) for r in payload.results]


def type_members(raw: dict) -> list[tuple[int, str]]:
    """Returns the ``(id, name)`` pairs of every Pokemon in a type, in upstream order."""
    payload = _decode(TypePayload, raw)
    return [(parse_resource_id(m.pokemon.url), m.pokemon.name) for m in payload.pokemon]


# --- Movies ---

def split_csv(value: str | None) -> list[str]:
    """Splits OMDb's comma-joined lists, dropping blank entries."""
    return [token.strip() for token in (value or "").split(",") if token.strip()]


def poster_url(value: str | None) -> str:
    # OMDb uses "N/A" for a missing poster
    if value and value.startswith(("http://", "https://")):
        return value
    return ""


def normalize_movie(raw: dict) -> Movie:
    payload = _decode(OMDbMoviePayload, raw)
    if not payload.title.strip() or not payload.imdb_id.strip():
        raise MalformedPayloadError("OMDb movie payload has a blank Title or imdbID")

    return Movie(
        imdb_id=payload.imdb_id,
        title=payload.title,
        year=payload.year or "",
        rated=payload.rated or NOT_AVAILABLE,
        release_date=payload.released or "",
        runtime=payload.runtime or "",
        genre=split_csv(payload.genre),
        director=payload.director or "",
        writer=payload.writer or "",
        actors=split_csv(payload.actors),
        plot=payload.plot or "",
        language=payload.language or "",
        country=payload.country or "",
        poster=poster_url(payload.poster),
        imdb_rating=payload.imdb_rating or NOT_AVAILABLE,
        type=payload.type or DEFAULT_MOVIE_TYPE,
    )


def normalize_movie_list_item(item: OMDbSearchItem) -> MovieListItem:
    return MovieListItem(
        imdb_id=item.imdb_id or "",
        title=item.title or "",
        year=item.year or "",
        type=item.type or DEFAULT_MOVIE_TYPE,
        poster=poster_url(item.poster),
    )


def normalize_movie_page(raw: dict) -> tuple[list[MovieListItem], int]:
    """Returns the lightweight results of one search page and the overall match count."""
    payload = _decode(OMDbSearchPayload, raw)
    try:
        total = int(payload.total_results or "0")
    except ValueError as e:
        raise MalformedPayloadError(f"totalResults '{payload.total_results}' is not a number") from e
    return [normalize_movie_list_item(item) for item in payload.search], total
