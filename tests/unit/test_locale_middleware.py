"""Tests for the per-request locale middleware."""

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from pokedex_i18n.i18n import get_locale
from pokedex_i18n.i18n.middleware import LocaleMiddleware


def _echo_app(strict: bool) -> FastAPI:
    app = FastAPI()
    app.add_middleware(LocaleMiddleware, strict=strict)

    @app.get("/echo")
    async def echo(request: Request) -> dict:
        return {
            "lang": request.state.lang,
            "context": get_locale(),
            "cookies": request.state.cookies,
        }

    return app


class TestLocaleMiddleware:
    def test_default_locale(self) -> None:
        with TestClient(_echo_app(strict=False)) as c:
            body = c.get("/echo").json()
        assert body == {"lang": "en", "context": "en", "cookies": {}}

    def test_cookie_locale_in_state_and_context(self) -> None:
        with TestClient(_echo_app(strict=False)) as c:
            body = c.get("/echo", headers={"cookie": "language=fr; theme=dark"}).json()
        assert body["lang"] == "fr"
        assert body["context"] == "fr"
        assert body["cookies"] == {"language": "fr", "theme": "dark"}

    def test_unknown_locale_verbatim(self) -> None:
        with TestClient(_echo_app(strict=False)) as c:
            body = c.get("/echo", headers={"cookie": "language=xx"}).json()
        assert body["lang"] == "xx"

    def test_strict_mode_falls_back(self) -> None:
        with TestClient(_echo_app(strict=True)) as c:
            body = c.get("/echo", headers={"cookie": "language=xx"}).json()
        assert body["lang"] == "en"
