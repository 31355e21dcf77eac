"""
multilingual — per-request translations for FastAPI

Public API:
    find_locale          — best locale for an ordered preference list
    PhraseCatalog        — nested phrases with dotted-key lookup
    TranslationRegistry  — insert-if-absent catalog registry
    TranslationResolver  — per-request resolution
    TranslationContext   — translation bound to one request
    setup_multilingual   — install on a FastAPI application
    get_translation      — FastAPI dependency
"""

from .i18n import PhraseCatalog, find_locale, load_dictionaries, lookup
from .plugin import get_translation, setup_multilingual
from .registry import TranslationRegistry
from .resolver import TranslationContext, TranslationResolver

__all__ = [
    "PhraseCatalog",
    "TranslationContext",
    "TranslationRegistry",
    "TranslationResolver",
    "find_locale",
    "get_translation",
    "load_dictionaries",
    "lookup",
    "setup_multilingual",
]
