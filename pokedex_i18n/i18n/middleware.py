"""Locale middleware: parses the cookie header and sets the locale per request."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from pokedex_i18n.config import STRICT_LOCALE
from pokedex_i18n.cookies import parse_cookies
from pokedex_i18n.i18n import resolve_locale, set_locale


class LocaleMiddleware(BaseHTTPMiddleware):
    """Expose the parsed cookie jar, strictness and resolved locale on ``request.state``."""

    def __init__(self, app, strict: bool = STRICT_LOCALE) -> None:
        super().__init__(app)
        self.strict = strict

    async def dispatch(self, request: Request, call_next) -> Response:
        cookies = parse_cookies(request.headers.get("cookie"))
        lang = resolve_locale(cookies, strict=self.strict)
        set_locale(lang)
        request.state.cookies = cookies
        request.state.strict_locale = self.strict
        request.state.lang = lang
        return await call_next(request)
