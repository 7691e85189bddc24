"""Data service: loads the Pokémon catalog and serves read-only lookups."""

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from loguru import logger

from pokedex_i18n.config import DATA_FILE
from pokedex_i18n.models.pokemon import LocalizedPokemon

_LOCALIZED_FIELDS = ("name", "type", "info")


class PokemonDataError(ValueError):
    """A catalog record is missing fields or has the wrong shape."""


def pokemon_from_dict(record: dict[str, Any]) -> LocalizedPokemon:
    """Build a LocalizedPokemon from one JSON record."""
    try:
        pokemon_id = int(record["id"])
        texts = {name: record[name] for name in _LOCALIZED_FIELDS}
        image = str(record.get("image", ""))
    except (KeyError, TypeError, ValueError) as err:
        raise PokemonDataError(f"Invalid Pokemon record {record!r}: {err}") from err
    for field_name, value in texts.items():
        if not isinstance(value, dict):
            raise PokemonDataError(f"Pokemon {pokemon_id}: '{field_name}' must map locale to text")
    return LocalizedPokemon(
        id=pokemon_id,
        name=dict(texts["name"]),
        type=dict(texts["type"]),
        info=dict(texts["info"]),
        image=image,
    )


class PokemonRepository:
    """Ordered, read-only collection of catalog entries.

    Lookups are linear scans; the catalog is small and never mutated after
    construction.
    """

    def __init__(self, pokemon: Iterable[LocalizedPokemon] = ()) -> None:
        self._pokemon: tuple[LocalizedPokemon, ...] = tuple(pokemon)

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> "PokemonRepository":
        return cls(pokemon_from_dict(r) for r in records)

    @classmethod
    def from_json(cls, path: Path = DATA_FILE) -> "PokemonRepository":
        """Load the catalog from a JSON array of records."""
        with open(path, encoding="utf-8") as f:
            records = json.load(f)
        if not isinstance(records, list):
            raise PokemonDataError(f"{path}: expected a JSON array of Pokemon records")
        repo = cls.from_records(records)
        logger.info("Loaded {} Pokemon from {}", len(repo), path)
        return repo

    def __iter__(self) -> Iterator[LocalizedPokemon]:
        return iter(self._pokemon)

    def __len__(self) -> int:
        return len(self._pokemon)

    def all(self) -> list[LocalizedPokemon]:
        return list(self._pokemon)

    def find_by_id(self, pokemon_id: int | None) -> LocalizedPokemon | None:
        if pokemon_id is None:
            return None
        for pokemon in self._pokemon:
            if pokemon.id == pokemon_id:
                return pokemon
        return None
