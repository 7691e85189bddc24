"""Localized Pokédex: FastAPI application."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from loguru import logger
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from pokedex_i18n import __version__
from pokedex_i18n.config import DATA_FILE, DEV_MODE, HOST, PORT, STATIC_DIR
from pokedex_i18n.i18n.middleware import LocaleMiddleware
from pokedex_i18n.logging_config import setup_logging
from pokedex_i18n.middleware import SecurityHeadersMiddleware
from pokedex_i18n.rate_limit import limiter
from pokedex_i18n.rendering import TemplateRenderer
from pokedex_i18n.routes.pages import router as pages_router
from pokedex_i18n.services.data_service import PokemonRepository

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.data = PokemonRepository.from_json(DATA_FILE)
    app.state.renderer = TemplateRenderer()
    logger.info("Pokédex ready, serving {} Pokemon.", len(app.state.data))
    yield


app = FastAPI(
    title="Localized Pokédex",
    description="Pokémon catalog rendered in the language stored in a cookie",
    version=__version__,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(SecurityHeadersMiddleware)

# i18n: per-request locale from the language cookie
app.add_middleware(LocaleMiddleware)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(pages_router)


def main() -> None:
    uvicorn.run(
        "pokedex_i18n.main:app",
        host=HOST,
        port=PORT,
        reload=DEV_MODE,
    )


if __name__ == "__main__":
    main()
