"""
Multilingual plugin

setup_multilingual() registers dictionaries on a FastAPI application and
installs LanguageMiddleware; get_translation() is the dependency route
handlers use to read the request's translation.

    app = FastAPI()
    setup_multilingual(app, phrases={"en": {...}, "pt_BR": {...}}, default_translation="en")

    @app.get("/")
    async def index(translation: TranslationContext = Depends(get_translation)):
        return {"hi": translation.t("greeting.hi")}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI, Request

from multilingual.i18n.catalog import PhraseCatalog
from multilingual.middleware.language import LanguageMiddleware
from multilingual.resolver import TranslationContext, TranslationResolver

logger = logging.getLogger(__name__)

# Returned when the application has no resolver configured
FALLBACK_TRANSLATION = TranslationContext(locale=None, catalog=PhraseCatalog.fallback())


def get_resolver(app: FastAPI) -> TranslationResolver | None:
    """Return the resolver configured on ``app``, if any."""
    return getattr(app.state, "multilingual", None)


def setup_multilingual(
    app: FastAPI,
    phrases: Mapping[str, Mapping[Any, Any]] | None = None,
    default_translation: str | None = None,
    resolver: TranslationResolver | None = None,
) -> TranslationResolver:
    """
    Register dictionaries on ``app`` and install the language middleware.

    Calling it again on the same application reuses the existing resolver:
    new locales are added, already registered ones keep their first catalog,
    the first non-empty default locale is kept, and the middleware is only
    installed once.  Passing ``resolver`` shares one registry between a
    parent application and a mounted sub-application.

    Must be called before the application starts serving requests.

    Returns:
        The resolver bound to ``app.state.multilingual``.
    """
    existing = get_resolver(app)
    if existing is None:
        existing = resolver if resolver is not None else TranslationResolver()
        app.state.multilingual = existing
        app.add_middleware(LanguageMiddleware, resolver=existing)
        logger.info("Multilingual middleware installed on %s", app.title)

    existing.register(phrases)
    existing.set_default(default_translation)
    return existing


async def get_translation(request: Request) -> TranslationContext:
    """
    FastAPI dependency returning the translation bound to the request.

    Falls back to resolving on the spot when LanguageMiddleware did not run,
    and to the key-returning fallback when no resolver is configured.
    """
    translation = getattr(request.state, "translation", None)
    if translation is not None:
        return translation

    resolver = get_resolver(request.app)
    if resolver is None:
        return FALLBACK_TRANSLATION
    translation = resolver.resolve(request.headers.get("Accept-Language"))
    request.state.translation = translation
    return translation
