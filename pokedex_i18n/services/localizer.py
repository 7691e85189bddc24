"""Projection of multi-locale Pokémon records onto a single locale."""

from collections.abc import Iterable

from pokedex_i18n.models.pokemon import LocalizedPokemon, PokemonView


def localize_pokemon(pokemon: LocalizedPokemon, locale: str) -> PokemonView:
    """Pick the ``locale`` translation of each text field.

    There is no fallback here: a locale the record does not know yields
    ``None`` for that field.
    """
    return PokemonView(
        id=pokemon.id,
        name=pokemon.name.get(locale),
        type=pokemon.type.get(locale),
        info=pokemon.info.get(locale),
        image=pokemon.image,
    )


def localize_all(pokemon: Iterable[LocalizedPokemon], locale: str) -> list[PokemonView]:
    return [localize_pokemon(p, locale) for p in pokemon]
