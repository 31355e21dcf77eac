"""
Translation Resolver

Picks the PhraseCatalog for one request:
  1. Accept-Language preferences matched against the registered locales
  2. the configured default locale, when it is registered
  3. the fallback catalog (lookups return the key)

Resolution only reads the registry and builds a fresh TranslationContext,
so any number of requests can resolve concurrently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from multilingual.i18n.catalog import PhraseCatalog
from multilingual.i18n.locale import find_locale, normalize_locale, parse_accept_language
from multilingual.registry import TranslationRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslationContext:
    """
    Translation bound to a single request.

    Attributes:
        locale:  Locale identifier that was resolved, None for the fallback.
        catalog: Catalog used for lookups.
    """

    locale: str | None
    catalog: PhraseCatalog

    def t(self, key: str, _: str | None = None, **params: Any) -> str:
        """Translate ``key`` in the resolved locale (see PhraseCatalog.t)."""
        return self.catalog.t(key, _, **params)

    def lookup(self, key: str) -> str:
        return self.catalog.lookup(key)

    @property
    def is_fallback(self) -> bool:
        return self.locale is None


class TranslationResolver:
    """
    Resolves a TranslationContext from request language preferences.

    Args:
        registry:            Registry holding the available catalogs.  A new
                             one is created when omitted.
        default_translation: Locale used when no preference matches.  Ignored
                             when empty or not registered.
    """

    def __init__(
        self,
        registry: TranslationRegistry | None = None,
        default_translation: str | None = None,
    ) -> None:
        self.registry = registry if registry is not None else TranslationRegistry()
        self.default_translation = default_translation or None

    def register(self, phrases: Any) -> list[str]:
        """Register dictionaries; existing locales are left untouched."""
        return self.registry.register(phrases)

    def set_default(self, default_translation: str | None) -> None:
        """Set the default locale unless one is already configured."""
        if not self.default_translation and default_translation:
            self.default_translation = default_translation

    def fallback_context(self) -> TranslationContext:
        return TranslationContext(locale=None, catalog=self.registry.fallback)

    def resolve(self, accept_language: str | None) -> TranslationContext:
        """
        Resolve the translation for an Accept-Language header value.

        Args:
            accept_language: Raw header value, may be None or malformed.

        Returns:
            TranslationContext for the matched locale, the default locale,
            or the fallback catalog.
        """
        available = self.registry.available_locales
        if not available:
            return self.fallback_context()

        locale = find_locale(parse_accept_language(accept_language), list(available))
        if locale is None and self.default_translation:
            locale = normalize_locale(self.default_translation)

        catalog = self.registry.get(locale)
        if catalog is None:
            logger.debug("No translation for Accept-Language %r, using fallback", accept_language)
            return self.fallback_context()

        return TranslationContext(locale=catalog.locale, catalog=catalog)
