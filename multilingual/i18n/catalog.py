"""
Phrase catalog

PhraseCatalog: immutable nested phrase tree for one locale, resolved with
dotted keys ("greeting.hi").  Unknown keys are returned unchanged so a
missing translation never breaks a response.
"""

from __future__ import annotations

import copy
import logging
import re
from collections.abc import Mapping
from typing import Any, Union

logger = logging.getLogger(__name__)

NestedPhrases = dict[str, Union[str, "NestedPhrases"]]

KEY_SEPARATOR = "."

_PLACEHOLDER = re.compile(r"%\{(\w+)\}")


def _copy_tree(phrases: Mapping[Any, Any]) -> NestedPhrases:
    """Structural copy with string keys; leaf values are copied as-is."""
    tree: NestedPhrases = {}
    for key, value in phrases.items():
        if isinstance(value, Mapping):
            tree[str(key)] = _copy_tree(value)
        else:
            tree[str(key)] = copy.deepcopy(value)
    return tree


def _count_leaves(tree: Mapping[str, Any]) -> int:
    return sum(_count_leaves(value) if isinstance(value, Mapping) else 1 for value in tree.values())


def interpolate(phrase: str, params: Mapping[str, Any]) -> str:
    """Replace ``%{name}`` placeholders with values from ``params``.

    Placeholders without a matching param are left untouched.
    """
    if not params:
        return phrase

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in params:
            return str(params[name])
        return match.group(0)

    return _PLACEHOLDER.sub(_replace, phrase)


class PhraseCatalog:
    """
    Phrases for a single locale.

    The source mapping is copied once at construction and never mutated
    afterwards, so one catalog can be shared by every in-flight request.

    Attributes:
        locale: Locale identifier this catalog belongs to, or None for the
                fallback catalog.
    """

    __slots__ = ("_phrases", "_size", "locale")

    def __init__(self, phrases: Mapping[Any, Any] | None = None, locale: str | None = None) -> None:
        self._phrases = _copy_tree(phrases or {})
        self._size = _count_leaves(self._phrases)
        self.locale = locale

    @classmethod
    def fallback(cls) -> PhraseCatalog:
        """Return an empty catalog whose lookups always give back the key."""
        return cls(phrases={}, locale=None)

    # ── Lookup ────────────────────────────────────────────────────────────────

    def _resolve(self, key: str) -> str | None:
        node: Any = self._phrases
        for segment in key.split(KEY_SEPARATOR):
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return node if isinstance(node, str) else None

    def lookup(self, key: str) -> str:
        """Return the phrase for ``key``, or ``key`` itself when it does not
        resolve to a string leaf."""
        phrase = self._resolve(key)
        return key if phrase is None else phrase

    def has(self, key: str) -> bool:
        """Return True if ``key`` resolves to a phrase."""
        return self._resolve(key) is not None

    def t(self, key: str, _: str | None = None, **params: Any) -> str:
        """
        Translate ``key`` and interpolate ``%{name}`` placeholders.

        Args:
            key:     Dotted key, e.g. "greeting.hi".
            _:       Phrase to use when ``key`` is missing.
            params:  Values for ``%{name}`` placeholders.

        Returns:
            The interpolated phrase.  A missing key without ``_`` is returned
            verbatim.
        """
        phrase = self._resolve(key)
        if phrase is None:
            logger.debug("Missing translation for key %r (locale=%s)", key, self.locale)
            if _ is None:
                return key
            phrase = _
        return interpolate(phrase, params)

    # ── Introspection ─────────────────────────────────────────────────────────

    @property
    def phrases(self) -> NestedPhrases:
        """Copy of the phrase tree."""
        return _copy_tree(self._phrases)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"PhraseCatalog(locale={self.locale!r}, phrases={self._size})"


def lookup(catalog: PhraseCatalog, key: str) -> str:
    """Resolve ``key`` in ``catalog``; unknown keys are returned unchanged."""
    return catalog.lookup(key)
