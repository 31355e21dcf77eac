"""
Pytest configuration and fixtures for multilingual tests
"""

import os
import sys

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from multilingual.plugin import get_translation, setup_multilingual  # noqa: E402
from multilingual.resolver import TranslationContext  # noqa: E402


@pytest.fixture
def phrases():
    """Dictionaries keyed the way a loader returns them (pt_BR, not pt-BR)."""
    return {
        "it": {"hi": "Ciao", "not_found": "Pagina non trovata"},
        "en": {"hi": "Hi", "not_found": "Page not found"},
        "pt_BR": {"hi": "Olá", "not_found": "Página não encontrada"},
        "es": {"hi": "Hola"},
        "en_GB": {
            "hi": "Hi",
            "not_found": "Page not found",
            "nested": {"other": "Other nested value"},
        },
    }


def build_app(phrases=None, default_translation=None) -> FastAPI:
    """Small application exposing two translated keys, like a real route would."""
    app = FastAPI()
    setup_multilingual(app, phrases=phrases, default_translation=default_translation)

    @app.get("/")
    async def index(translation: TranslationContext = Depends(get_translation)):
        return {"hi": translation.t("hi"), "not_found": translation.t("not_found")}

    @app.get("/nested")
    async def nested(translation: TranslationContext = Depends(get_translation)):
        return {
            "hi": translation.t("hi"),
            "not_found": translation.t("not_found"),
            "nested": {"other": translation.t("nested.other")},
        }

    @app.get("/locale")
    async def locale(translation: TranslationContext = Depends(get_translation)):
        return {"locale": translation.locale}

    return app


@pytest.fixture
def client_factory():
    """Return a callable building a TestClient around build_app()."""

    def _factory(phrases=None, default_translation=None) -> TestClient:
        return TestClient(build_app(phrases, default_translation))

    return _factory
