import copy

import pytest
from fakeredis.aioredis import FakeRedis


def _stat(name, value):
    return {"base_stat": value, "stat": {"name": name}}


def _move(name, *details):
    return {
        "move": {"name": name},
        "version_group_details": [
            {"level_learned_at": level, "move_learn_method": {"name": method}}
            for method, level in details
        ],
    }


# Trimmed-down copy of GET https://pokeapi.co/api/v2/pokemon/25
PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "base_experience": 112,
    "weight": 60,
    "height": 4,
    "sprites": {
        "front_default": "https://img.example/sprites/25.png",
        "front_shiny": "https://img.example/sprites/shiny/25.png",
        "back_default": "https://img.example/sprites/back/25.png",
        "other": {
            "official-artwork": {
                "front_default": "https://img.example/artwork/25.png",
                "front_shiny": "https://img.example/artwork/shiny/25.png",
            }
        },
    },
    "types": [{"slot": 1, "type": {"name": "electric"}}],
    "abilities": [
        {"ability": {"name": "static"}, "is_hidden": False},
        {"ability": {"name": "lightning-rod"}, "is_hidden": True},
    ],
    "moves": [
        _move("thunderbolt", ("machine", 0)),
        _move("thunder-shock", ("level-up", 1)),
        _move("quick-attack", ("level-up", 10)),
        _move("growl", ("level-up", 1)),
        _move("tail-whip", ("egg", 0), ("level-up", 5)),
    ],
    "held_items": [
        {"item": {"name": "oran-berry"}, "version_details": [{"rarity": 50}, {"rarity": 5}]},
        {"item": {"name": "light-ball"}, "version_details": []},
    ],
    "game_indices": [
        {"version": {"name": "red"}},
        {"version": {"name": "blue"}},
        {"version": {"name": "red"}},
        {"version": {"name": "yellow"}},
    ],
    "cries": {
        "latest": "https://cries.example/latest/25.ogg",
        "legacy": "https://cries.example/legacy/25.ogg",
    },
    "stats": [
        _stat("hp", 35),
        _stat("attack", 55),
        _stat("defense", 40),
        _stat("special-attack", 50),
        _stat("special-defense", 50),
        _stat("speed", 90),
    ],
}

# GET https://www.omdbapi.com/?t=Inception
INCEPTION = {
    "Title": "Inception",
    "Year": "2010",
    "Rated": "PG-13",
    "Released": "16 Jul 2010",
    "Runtime": "148 min",
    "Genre": "Action, Adventure, Sci-Fi",
    "Director": "Christopher Nolan",
    "Writer": "Christopher Nolan",
    "Actors": "Leonardo DiCaprio, Joseph Gordon-Levitt, Elliot Page",
    "Plot": "A thief who steals corporate secrets through dream-sharing technology.",
    "Language": "English, Japanese, French",
    "Country": "United States, United Kingdom",
    "Poster": "https://m.media-amazon.com/images/inception.jpg",
    "imdbRating": "8.8",
    "imdbID": "tt1375666",
    "Type": "movie",
    "Response": "True",
}

# GET https://www.omdbapi.com/?s=batman&page=1
BATMAN_SEARCH = {
    "Search": [
        {"Title": "Batman Begins", "Year": "2005", "imdbID": "tt0372784", "Type": "movie",
         "Poster": "https://m.media-amazon.com/images/begins.jpg"},
        {"Title": "Batman", "Year": "1989", "imdbID": "tt0096895", "Type": "movie", "Poster": "N/A"},
    ],
    "totalResults": "17",
    "Response": "True",
}


@pytest.fixture
def pikachu_payload():
    """A fresh, mutable PokeAPI detail payload for Pikachu."""
    return copy.deepcopy(PIKACHU)


@pytest.fixture
def make_pokemon_payload():
    """Builds a minimal valid detail payload for any id, for listing tests."""
    def build(pokemon_id, name=None, types=("normal",)):
        payload = copy.deepcopy(PIKACHU)
        payload["id"] = pokemon_id
        payload["name"] = name or f"pokemon-{pokemon_id}"
        payload["sprites"]["other"]["official-artwork"]["front_default"] = (
            f"https://img.example/artwork/{pokemon_id}.png"
        )
        payload["types"] = [{"slot": i + 1, "type": {"name": t}} for i, t in enumerate(types)]
        return payload
    return build


@pytest.fixture
def inception_payload():
    return copy.deepcopy(INCEPTION)


@pytest.fixture
def batman_search_payload():
    return copy.deepcopy(BATMAN_SEARCH)


@pytest.fixture
def fake_redis():
    """Provides a fresh fake Redis instance for each test."""
    return FakeRedis(decode_responses=True)
