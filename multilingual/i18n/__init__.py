"""
i18n (Internationalization) package

Locale negotiation, phrase catalogs and dictionary loading.
"""

from .catalog import NestedPhrases, PhraseCatalog, interpolate, lookup
from .loader import DictionaryLoader, DirectoryDictionaryLoader, load_dictionaries
from .locale import find_locale, normalize_locale, parse_accept_language

__all__ = [
    "DictionaryLoader",
    "DirectoryDictionaryLoader",
    "NestedPhrases",
    "PhraseCatalog",
    "find_locale",
    "interpolate",
    "load_dictionaries",
    "lookup",
    "normalize_locale",
    "parse_accept_language",
]
