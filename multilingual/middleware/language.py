"""
Language Detection Middleware

Sets request.state.translation to the TranslationContext resolved from the
Accept-Language header (order of appearance, exact then prefix match),
falling back to the configured default locale and finally to the fallback
catalog that returns keys.

No I/O: resolution only reads the registry built at startup.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from multilingual.middleware.logging import locale_var

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

    from multilingual.resolver import TranslationResolver

logger = logging.getLogger(__name__)


class LanguageMiddleware(BaseHTTPMiddleware):
    """Resolve the request translation and attach it to request.state.translation."""

    def __init__(self, app: ASGIApp, resolver: TranslationResolver):
        super().__init__(app)
        self.resolver = resolver

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        translation = self.resolver.resolve(request.headers.get("Accept-Language"))
        request.state.translation = translation
        logger.debug(
            "Resolved locale %s",
            translation.locale or "fallback",
            extra={
                "method": request.method,
                "path": request.url.path,
                "accept_language": request.headers.get("Accept-Language", ""),
            },
        )

        token = locale_var.set(translation.locale or "")
        try:
            return await call_next(request)
        finally:
            locale_var.reset(token)
