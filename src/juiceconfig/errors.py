"""
Error hierarchy for juiceconfig.

Loading errors (selector, I/O, backend, parse) are raised straight to the
caller. Lookup errors (not found, type mismatch) also flip the owning store's
sticky error flag, after which every further lookup on that store fails with
AlreadyFailedError until the flag is reset.
"""

from __future__ import annotations

from typing import Any


class JuiceConfigError(Exception):
    """Base exception for juiceconfig errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidSelectorError(JuiceConfigError):
    """Raised when a selector matches none of the known schemes."""


class ParseError(JuiceConfigError):
    """Raised for malformed selectors and config documents that are not JSON objects."""


class FileReadError(JuiceConfigError):
    """Raised when a config file cannot be opened or read."""


class BackendError(JuiceConfigError):
    """Raised when the secrets store call fails."""


class NotFoundError(JuiceConfigError):
    """Raised for a missing environment variable or a missing config path."""


class TypeMismatchError(JuiceConfigError):
    """Raised when a config value does not have the requested type."""


class AlreadyFailedError(JuiceConfigError):
    """Raised by lookups on a store whose sticky error flag is set."""


__all__ = [
    "JuiceConfigError",
    "InvalidSelectorError",
    "ParseError",
    "FileReadError",
    "BackendError",
    "NotFoundError",
    "TypeMismatchError",
    "AlreadyFailedError",
]
