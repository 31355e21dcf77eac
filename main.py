import logging
from collections.abc import Mapping
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Optional

from fastapi import Depends, FastAPI
from pydantic import BaseModel

from multilingual.config import settings
from multilingual.i18n.loader import DictionaryLoader, DirectoryDictionaryLoader
from multilingual.middleware.logging import setup_structured_logging
from multilingual.plugin import get_translation, setup_multilingual
from multilingual.resolver import TranslationContext

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent / "locales"


class GreetingResponse(BaseModel):
    locale: Optional[str]
    hi: str
    not_found: str
    welcome: str


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_structured_logging(settings.log_level, json_format=settings.log_json)
    logger.info("Starting %s with locales: %s", app.title, ", ".join(app.state.multilingual.registry.available_locales) or "none")
    yield
    logger.info("Shutting down the application...")


def create_app(
    phrases: Optional[Mapping[str, Mapping[Any, Any]]] = None,
    default_translation: Optional[str] = None,
    loader: Optional[DictionaryLoader] = None,
) -> FastAPI:
    """Create the FastAPI application.

    Dictionaries come from ``phrases`` when given, else from ``loader``,
    else from ``settings.phrases_dir`` (the bundled ``locales`` directory
    by default).
    """
    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=settings.app_version,
        lifespan=lifespan,
    )

    if phrases is None:
        if loader is None:
            loader = DirectoryDictionaryLoader(settings.phrases_dir or LOCALES_DIR)
        phrases = loader.load()

    setup_multilingual(
        app,
        phrases=phrases,
        default_translation=default_translation or settings.default_translation,
    )

    @app.get("/", response_model=GreetingResponse, tags=["Root"])
    async def root(translation: TranslationContext = Depends(get_translation)):
        return GreetingResponse(
            locale=translation.locale,
            hi=translation.t("greeting.hi"),
            not_found=translation.t("404.not_found"),
            welcome=translation.t("greeting.welcome", name="Ada"),
        )

    @app.get("/t/{key}", tags=["Translations"])
    async def translate(key: str, translation: TranslationContext = Depends(get_translation)):
        return {"locale": translation.locale, "key": key, "value": translation.t(key)}

    return app


app = create_app()
