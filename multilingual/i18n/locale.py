"""
Locale helpers

Pure functions for locale negotiation:
- locale identifier normalization ("pt_BR" -> "pt-BR")
- Accept-Language header parsing, order of appearance only
- best-locale matching with exact and prefix fallback
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

logger = logging.getLogger(__name__)


# ── Public helpers ────────────────────────────────────────────────────────────


def normalize_locale(locale: str) -> str:
    """Return the locale identifier with every underscore replaced by a hyphen.

    Casing is preserved: "pt_BR" becomes "pt-BR", "EN_us" becomes "EN-us".
    """
    return locale.replace("_", "-")


def parse_accept_language(header: Any) -> list[str]:
    """Split an Accept-Language header into an ordered preference list.

    Tags are kept in order of appearance. Anything after the first ``;``
    of a tag (quality values included) is ignored, so
    "fr-CA;q=0.9, en" gives ["fr-CA", "en"].

    Args:
        header: Value of the Accept-Language header. ``None``, non-string or
                empty values yield an empty list.

    Returns:
        List of stripped tags. Empty tags are kept; the matcher skips them.
    """
    if not header or not isinstance(header, str):
        return []

    return [part.split(";", 1)[0].strip() for part in header.split(",")]


def find_locale(preferred: Sequence[Any] | None, available: Sequence[Any] | None) -> str | None:
    """Find the best matching available locale for the client's preferences.

    Preferences are walked in order. For each one an exact, case-insensitive
    match is tried first, then a prefix match in either direction
    ("en" ~ "en-US", "en-US" ~ "en"). The first hit is returned, so a prefix
    match for an earlier preference beats an exact match for a later one.

    Never raises: missing, non-list or empty inputs give None, and
    non-string or empty entries on either side are skipped.

    Args:
        preferred: Preferred locales, most preferred first, e.g. ["en-US", "en"].
        available: Registered locales, e.g. ["en", "it", "pt-BR"].

    Returns:
        The matching entry of ``available`` with its original casing, or None.
    """
    if not isinstance(preferred, (list, tuple)) or not isinstance(available, (list, tuple)):
        return None
    if not preferred or not available:
        return None

    try:
        candidates = [(entry, entry.lower()) for entry in available if isinstance(entry, str) and entry]

        for entry in preferred:
            if not entry or not isinstance(entry, str):
                continue
            wanted = entry.lower()

            # Exact match
            for original, lowered in candidates:
                if lowered == wanted:
                    return original

            # Prefix match: "en" -> "en-US" and "en-US" -> "en"
            for original, lowered in candidates:
                if lowered.startswith(wanted) or wanted.startswith(lowered):
                    return original
    except Exception:
        logger.debug("Locale matching failed", exc_info=True)

    return None
