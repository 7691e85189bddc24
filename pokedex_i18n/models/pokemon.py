"""Catalog records: multi-locale source entries and their single-locale views."""

from collections.abc import Mapping
from dataclasses import dataclass

# locale -> text
LocalizedText = Mapping[str, str]


@dataclass(frozen=True)
class LocalizedPokemon:
    """One catalog entry carrying every translation of its text fields."""

    id: int
    name: LocalizedText
    type: LocalizedText
    info: LocalizedText
    image: str


@dataclass(frozen=True)
class PokemonView:
    """A Pokémon flattened to one locale. Missing translations are ``None``."""

    id: int
    name: str | None
    type: str | None
    info: str | None
    image: str
