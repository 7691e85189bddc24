"""Central configuration: locales, paths, server settings."""

import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).parent

# Locales
SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "fr")
DEFAULT_LANGUAGE = "en"
LANGUAGE_COOKIE = "language"

# When enabled, unknown cookie locales resolve to DEFAULT_LANGUAGE instead of
# being carried through verbatim.
STRICT_LOCALE = os.environ.get("POKEDEX_STRICT_LOCALE", "0") == "1"

# Catalog data (overridable for Docker / custom catalogs)
DATA_FILE = Path(os.environ.get("POKEDEX_DATA_FILE", str(PACKAGE_DIR / "data" / "pokemon.json")))

TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

# Template identifiers
HOME_TEMPLATE = "home.html"
SHOW_TEMPLATE = "show.html"
LIST_TEMPLATE = "list.html"
ERROR_TEMPLATE = "error.html"

# Server
HOST = os.environ.get("POKEDEX_HOST", "0.0.0.0")
PORT = int(os.environ.get("POKEDEX_PORT", "8000"))
DEV_MODE = os.environ.get("POKEDEX_DEV", "1") == "1"
LOG_LEVEL = os.environ.get("POKEDEX_LOG_LEVEL", "INFO")

# Rate limiting (slowapi)
RATE_LIMIT_ENABLED = os.environ.get("POKEDEX_RATE_LIMIT", "1") == "1"
PAGE_RATE_LIMIT = "60/minute"
