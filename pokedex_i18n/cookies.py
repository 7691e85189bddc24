"""Minimal ``Cookie`` header parsing and ``Set-Cookie`` formatting.

This is deliberately not RFC 6265: pairs are split on ``"; "`` and on the
first ``"="``, values are stored as-is (no trimming, no percent-decoding).
"""

from collections.abc import Mapping

from pokedex_i18n.config import LANGUAGE_COOKIE

PAIR_SEPARATOR = "; "


def parse_cookies(header: str | None) -> dict[str, str]:
    """Parse a raw ``Cookie`` header into a name -> value mapping.

    A missing or empty header gives an empty dict. A pair without ``=`` is
    kept with an empty value. Duplicate names: the last one wins.

    >>> parse_cookies("name=Pikachu; type=Electric")
    {'name': 'Pikachu', 'type': 'Electric'}
    """
    cookies: dict[str, str] = {}
    if not header:
        return cookies
    for pair in header.split(PAIR_SEPARATOR):
        name, _, value = pair.partition("=")
        cookies[name] = value
    return cookies


def serialize_cookies(cookies: Mapping[str, str]) -> str:
    """Inverse of :func:`parse_cookies` for well-formed jars."""
    return PAIR_SEPARATOR.join(f"{name}={value}" for name, value in cookies.items())


def language_cookie(value: str) -> str:
    """Session-scoped ``Set-Cookie`` value persisting the language site-wide."""
    return f"{LANGUAGE_COOKIE}={value}; Path=/"
