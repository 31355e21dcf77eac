"""
Custom Exception Classes for the multilingual package

The negotiation and lookup core never raises: malformed input degrades to
"no match" and unknown keys pass through.  The classes here cover the
collaborators around the core (dictionary loading) and the one
configuration warning the registry can emit.
"""

from typing import Any


class MultilingualException(Exception):
    """Base exception class for all multilingual errors"""

    code: str = "MULTILINGUAL_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        if code is not None:
            self.code = code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Dictionary loading
# ============================================================================


class DictionaryDirectoryError(MultilingualException):
    """Raised when the phrases directory cannot be read"""

    code = "MULTILINGUAL_NO_DICTIONARY"

    def __init__(self, path: str):
        super().__init__(
            message=f"Failed to read dictionary directory {path}.",
            details={"path": path},
        )


# ============================================================================
# Warnings
# ============================================================================


class NoPhrasesWarning(UserWarning):
    """Emitted when a registry is set up without any phrases"""

    code = "MULTILINGUAL_WARN_NO_PHRASES"

    def __init__(self, message: str = "No phrases provided to multilingual. Will return keys."):
        self.message = message
        super().__init__(message)
