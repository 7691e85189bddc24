"""Shared test fixtures."""

from contextlib import asynccontextmanager

import pytest
from fastapi.testclient import TestClient

from pokedex_i18n.config import DATA_FILE
from pokedex_i18n.rate_limit import limiter
from pokedex_i18n.rendering import TemplateRenderer
from pokedex_i18n.services.data_service import PokemonRepository
from tests.fixtures.sample_data import make_repository


def _make_client(repo: PokemonRepository) -> TestClient:
    """FastAPI TestClient whose lifespan injects ``repo`` (no JSON loading)."""

    @asynccontextmanager
    async def _test_lifespan(app):
        app.state.data = repo
        app.state.renderer = TemplateRenderer()
        yield

    from pokedex_i18n.main import app

    app.router.lifespan_context = _test_lifespan
    return TestClient(app)


@pytest.fixture(autouse=True)
def _no_rate_limit(monkeypatch):
    """Page limits would trip when many tests hit the app within a minute."""
    monkeypatch.setattr(limiter, "enabled", False)


@pytest.fixture()
def repository():
    """Two-entry catalog: Bulbasaur (1) and Charmander (4)."""
    return make_repository()


@pytest.fixture()
def client(repository):
    with _make_client(repository) as c:
        yield c


@pytest.fixture()
def empty_client():
    with _make_client(PokemonRepository()) as c:
        yield c


@pytest.fixture()
def catalog_client():
    """TestClient serving the bundled JSON catalog."""
    with _make_client(PokemonRepository.from_json(DATA_FILE)) as c:
        yield c
