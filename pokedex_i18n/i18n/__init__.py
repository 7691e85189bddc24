"""Internationalization support for English/French UI localization."""

import contextvars
from collections.abc import Mapping

from jinja2 import Environment

from pokedex_i18n.config import DEFAULT_LANGUAGE, LANGUAGE_COOKIE, SUPPORTED_LANGUAGES
from pokedex_i18n.i18n.translations import GREETINGS, TRANSLATIONS

_locale_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "locale", default=DEFAULT_LANGUAGE
)


def resolve_locale(cookies: Mapping[str, str], strict: bool = False) -> str:
    """Return the effective locale for a request's cookies.

    The ``language`` cookie is returned unchanged when present, even if it is
    not a supported locale. Only an absent (or empty) cookie falls back to
    ``DEFAULT_LANGUAGE``. With ``strict`` set, unsupported values fall back too.
    """
    lang = cookies.get(LANGUAGE_COOKIE)
    if not lang:
        return DEFAULT_LANGUAGE
    if strict and lang not in SUPPORTED_LANGUAGES:
        return DEFAULT_LANGUAGE
    return lang


def greeting(locale: str) -> str:
    """Home page title for ``locale``; unknown locales get the default greeting."""
    return GREETINGS.get(locale, GREETINGS[DEFAULT_LANGUAGE])


def get_locale() -> str:
    """Return the current request's locale from the ContextVar."""
    return _locale_var.get()


def set_locale(lang: str) -> None:
    """Set the current request's locale in the ContextVar."""
    _locale_var.set(lang)


def gettext(key: str) -> str:
    """Look up a translated UI string for the current locale.

    Falls back to the default locale, then to the key itself.
    """
    locale = get_locale()
    table = TRANSLATIONS.get(locale) or TRANSLATIONS[DEFAULT_LANGUAGE]
    return table.get(key, TRANSLATIONS[DEFAULT_LANGUAGE].get(key, key))


def ngettext(singular: str, plural: str, n: int) -> str:
    """Simple plural-aware translation lookup."""
    key = singular if n == 1 else plural
    return gettext(key)


def setup_jinja2_i18n(env: Environment) -> None:
    """Install gettext callables on a Jinja2 environment."""
    env.add_extension("jinja2.ext.i18n")
    env.install_gettext_callables(gettext, ngettext, newstyle=False)  # type: ignore[attr-defined]
