"""Factories for small in-memory Pokémon catalogs used in tests."""

from pokedex_i18n.models.pokemon import LocalizedPokemon
from pokedex_i18n.services.data_service import PokemonRepository


def make_bulbasaur() -> LocalizedPokemon:
    return LocalizedPokemon(
        id=1,
        name={"en": "Bulbasaur", "fr": "Bulbizarre"},
        type={"en": "Grass", "fr": "Plante"},
        info={"en": "A seed grows on its back.", "fr": "Une graine pousse sur son dos."},
        image="bulbasaur.svg",
    )


def make_charmander() -> LocalizedPokemon:
    return LocalizedPokemon(
        id=4,
        name={"en": "Charmander", "fr": "Salamèche"},
        type={"en": "Fire", "fr": "Feu"},
        info={"en": "Its tail burns brightly.", "fr": "Sa queue brûle vivement."},
        image="charmander.svg",
    )


def make_repository(*pokemon: LocalizedPokemon) -> PokemonRepository:
    """Repository with the given entries, or Bulbasaur + Charmander by default."""
    if not pokemon:
        pokemon = (make_bulbasaur(), make_charmander())
    return PokemonRepository(pokemon)
