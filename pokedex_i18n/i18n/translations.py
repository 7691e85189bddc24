"""UI string tables keyed by locale."""

GREETINGS: dict[str, str] = {
    "en": "Welcome!",
    "fr": "Bienvenue!",
}

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "site.title": "Pokédex",
        "nav.home": "Home",
        "nav.pokemon": "All Pokémon",
        "home.intro": "Browse the Pokédex in your language.",
        "home.browse": "See all Pokémon",
        "pokemon.type": "Type",
        "pokemon.info": "Info",
        "pokemon.back": "Back to the list",
        "pokemon.empty": "No Pokémon yet.",
        "lang.switch": "Language",
        "lang.en": "English",
        "lang.fr": "French",
    },
    "fr": {
        "site.title": "Pokédex",
        "nav.home": "Accueil",
        "nav.pokemon": "Tous les Pokémon",
        "home.intro": "Parcourez le Pokédex dans votre langue.",
        "home.browse": "Voir tous les Pokémon",
        "pokemon.type": "Type",
        "pokemon.info": "Description",
        "pokemon.back": "Retour à la liste",
        "pokemon.empty": "Aucun Pokémon pour le moment.",
        "lang.switch": "Langue",
        "lang.en": "Anglais",
        "lang.fr": "Français",
    },
}
