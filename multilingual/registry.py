"""
Translation Registry

TranslationRegistry: stores one PhraseCatalog per locale identifier.

Registration is insert-if-absent: the first catalog registered for a locale
identifier wins and later registrations for it are ignored, so registering
the same dictionaries twice (or from a nested application) never replaces or
duplicates a binding.  Registration belongs to startup; once traffic starts
the registry is only read.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping
from typing import Any

from multilingual.exceptions import NoPhrasesWarning
from multilingual.i18n.catalog import PhraseCatalog
from multilingual.i18n.locale import normalize_locale

logger = logging.getLogger(__name__)


class TranslationRegistry:
    """
    Registry of phrase catalogs keyed by normalized locale identifier.

    Always holds a fallback catalog, returned for locales that are not
    registered.
    """

    def __init__(self) -> None:
        self._catalogs: dict[str, PhraseCatalog] = {}
        self.fallback = PhraseCatalog.fallback()

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, phrases: Mapping[str, Mapping[Any, Any]] | None) -> list[str]:
        """
        Register a catalog for each locale in ``phrases``.

        Locale identifiers are normalized ("pt_BR" -> "pt-BR").  An empty
        mapping emits NoPhrasesWarning and leaves the registry as it is.

        Returns:
            The locale identifiers that were newly added.
        """
        if not phrases:
            warning = NoPhrasesWarning()
            logger.warning("%s: %s", warning.code, warning.message)
            warnings.warn(warning, stacklevel=2)
            return []

        added: list[str] = []
        for locale_key, locale_phrases in phrases.items():
            locale = normalize_locale(str(locale_key))
            if not locale:
                continue
            if locale in self._catalogs:
                logger.debug("Locale %s already registered, keeping the first catalog", locale)
                continue
            self._catalogs[locale] = PhraseCatalog(locale_phrases, locale=locale)
            added.append(locale)

        logger.info("Translations registered: %s", ", ".join(added) or "none new")
        return added

    # ── Lookup ────────────────────────────────────────────────────────────────

    def get(self, locale: str | None) -> PhraseCatalog | None:
        """Return the catalog for ``locale`` or None if it is not registered."""
        if not locale:
            return None
        return self._catalogs.get(normalize_locale(locale))

    def is_registered(self, locale: str) -> bool:
        """Return True if a catalog is registered for ``locale``."""
        return self.get(locale) is not None

    @property
    def available_locales(self) -> tuple[str, ...]:
        """Registered locale identifiers in registration order."""
        return tuple(self._catalogs)

    def __len__(self) -> int:
        return len(self._catalogs)

    def __contains__(self, locale: object) -> bool:
        return isinstance(locale, str) and self.is_registered(locale)
