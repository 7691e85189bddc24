"""HTML page routes: home, language switch, Pokémon detail and list."""

import re
from dataclasses import asdict

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from loguru import logger
from starlette.responses import Response

from pokedex_i18n.config import (
    DEFAULT_LANGUAGE,
    ERROR_TEMPLATE,
    HOME_TEMPLATE,
    LIST_TEMPLATE,
    PAGE_RATE_LIMIT,
    SHOW_TEMPLATE,
)
from pokedex_i18n.cookies import language_cookie
from pokedex_i18n.i18n import greeting, resolve_locale
from pokedex_i18n.rate_limit import limiter
from pokedex_i18n.rendering import TemplateRenderer
from pokedex_i18n.services.data_service import PokemonRepository
from pokedex_i18n.services.localizer import localize_all, localize_pokemon

router = APIRouter(tags=["Pages"])

_NUMBER_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _lang(request: Request) -> str:
    return getattr(request.state, "lang", DEFAULT_LANGUAGE)


def _renderer(request: Request) -> TemplateRenderer:
    return request.app.state.renderer


def _data(request: Request) -> PokemonRepository:
    return request.app.state.data


def parse_pokemon_id(segment: str) -> int | None:
    """Numeric id from a URL segment, or None when it is not an integer.

    ``None`` plays the part of NaN: it never matches a catalog entry.
    """
    # float() alone would also take "1_0", "nan" and "inf".
    if not _NUMBER_RE.fullmatch(segment):
        return None
    value = float(segment)
    if not value.is_integer():
        return None
    return int(value)


@router.get("/", response_class=HTMLResponse)
@limiter.limit(PAGE_RATE_LIMIT)
async def home(request: Request) -> Response:
    lang = _lang(request)
    body = await _renderer(request).render(HOME_TEMPLATE, {"title": greeting(lang)})
    return HTMLResponse(body, headers={"Set-Cookie": language_cookie(lang)})


@router.api_route("/change-language", methods=["GET", "POST"])
@limiter.limit(PAGE_RATE_LIMIT)
async def change_language(request: Request) -> Response:
    """Re-affirm the current ``language`` cookie and send the user back."""
    try:
        # Same jar and strictness the middleware used for every other page.
        language = resolve_locale(request.state.cookies, strict=request.state.strict_locale)
        referer = request.headers.get("referer") or "/"
        return RedirectResponse(
            url=referer,
            status_code=302,
            headers={"Set-Cookie": language_cookie(language)},
        )
    except Exception:
        logger.exception("Error processing language change request")
        return PlainTextResponse("Internal Server Error", status_code=500)


@router.get("/pokemon", response_class=HTMLResponse)
@limiter.limit(PAGE_RATE_LIMIT)
async def get_all_pokemon(request: Request) -> Response:
    lang = _lang(request)
    pokemon = localize_all(_data(request), lang)
    body = await _renderer(request).render(
        LIST_TEMPLATE, {"pokemon": [asdict(p) for p in pokemon]}
    )
    return HTMLResponse(body, headers={"Set-Cookie": language_cookie(lang)})


@router.get("/pokemon/{pokemon_id}", response_class=HTMLResponse)
@limiter.limit(PAGE_RATE_LIMIT)
async def get_one_pokemon(request: Request, pokemon_id: str) -> Response:
    lang = _lang(request)
    found = _data(request).find_by_id(parse_pokemon_id(pokemon_id))
    if found is None:
        logger.debug("Pokemon {!r} not found", pokemon_id)
        # No Set-Cookie on this path.
        body = await _renderer(request).render(
            ERROR_TEMPLATE, {"title": "Error", "message": "Pokemon not found!"}
        )
        return HTMLResponse(body, status_code=404)

    view = localize_pokemon(found, lang)
    body = await _renderer(request).render(
        SHOW_TEMPLATE, {"name": view.name, "type": view.type, "info": view.info}
    )
    return HTMLResponse(body, headers={"Set-Cookie": language_cookie(lang)})
