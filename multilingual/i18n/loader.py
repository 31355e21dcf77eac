"""
Dictionary Loader

Reads phrase dictionaries from a directory and returns the mapping that
TranslationRegistry.register() expects.  One file per locale; the file name
without extension is the locale identifier ("en.json", "pt-BR.yaml",
"pt_BR.yml").  Identifiers are returned verbatim, normalization happens at
registration.

Any object with a ``load() -> dict`` method can stand in for the directory
loader (see DictionaryLoader), so dictionaries can come from a database, a
package resource or a test fixture instead.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

import yaml

from multilingual.exceptions import DictionaryDirectoryError

logger = logging.getLogger(__name__)

_PARSERS = {
    ".json": json.loads,
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
}


class DictionaryLoader(Protocol):
    """Anything that can produce a locale -> phrases mapping."""

    def load(self) -> dict[str, dict[str, Any]]: ...


def _read_dictionary(path: Path) -> dict[str, Any] | None:
    data = _PARSERS[path.suffix.lower()](path.read_text(encoding="utf-8"))
    if isinstance(data, dict) and isinstance(data.get("phrases"), dict):
        return data["phrases"]
    if isinstance(data, dict):
        return data
    return None


def load_dictionaries(dictionary_path: str | Path) -> dict[str, dict[str, Any]]:
    """
    Load every JSON/YAML dictionary file found in ``dictionary_path``.

    A file may hold the phrase tree directly or under a top-level
    ``phrases`` key.  Files that fail to parse, or that do not hold a
    mapping, are logged and skipped.

    Raises:
        DictionaryDirectoryError: the directory cannot be listed.
    """
    directory = Path(dictionary_path)
    try:
        files = sorted(directory.iterdir())
    except OSError as exc:
        raise DictionaryDirectoryError(str(dictionary_path)) from exc

    messages: dict[str, dict[str, Any]] = {}
    for file in files:
        if not file.is_file() or file.suffix.lower() not in _PARSERS:
            continue
        try:
            phrases = _read_dictionary(file)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            logger.warning("Failed to load dictionary file %s: %s", file.name, exc)
            continue
        if phrases is None:
            logger.warning("Dictionary file %s does not contain a mapping, skipped", file.name)
            continue
        messages[file.stem] = phrases

    logger.info("Loaded %d dictionaries from %s", len(messages), directory)
    return messages


class DirectoryDictionaryLoader:
    """DictionaryLoader reading JSON/YAML files from a directory."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> dict[str, dict[str, Any]]:
        return load_dictionaries(self.path)
