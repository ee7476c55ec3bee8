"""
Flattening config store.

A JSON document such as:

    {"app": {"name": "myApp", "size": 10}}

is flattened at load time into a single-level table:

    {"app.name": "myApp", "app.size": 10}

Lookups are typed (string, int64, bool) and share a sticky error flag: the
first failing lookup records its message on the store, and every lookup after
that fails with AlreadyFailedError until reset_error() is called. Callers can
therefore read a batch of values and check was_error() once at the end.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

import structlog

from juiceconfig.errors import (
    AlreadyFailedError,
    JuiceConfigError,
    NotFoundError,
    ParseError,
    TypeMismatchError,
)
from juiceconfig.logging import bind_context
from juiceconfig.selector import Selector, coerce_selector
from juiceconfig.settings import Settings
from juiceconfig.sources import resolve
from juiceconfig.values import ValueKind, matches_kind

logger = structlog.get_logger()


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class Lookup:
    """Outcome of a single lookup: a value or the error that prevented it."""

    value: Any = None
    error: JuiceConfigError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def flatten(obj: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """
    Recursively flatten nested objects into dotted paths.

    Non-object values (including arrays and null) are stored verbatim.
    When two entries flatten to the same path, the one visited last in
    document order wins.
    """
    flat: dict[str, Any] = {}
    for key, value in obj.items():
        path = prefix + key
        if isinstance(value, dict):
            flat.update(flatten(value, path + "."))
        else:
            flat[path] = value
    return flat


def _too_deep() -> ParseError:
    logger.error("config_parse_failed", error="document nested too deeply")
    return ParseError("Error parsing config file [document nested too deeply]")


def parse_document(data: bytes | str) -> dict[str, Any]:
    """Parse a UTF-8 JSON document whose top level must be an object."""
    try:
        text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
        document = json.loads(text, parse_constant=_reject_constant)
    except RecursionError as e:
        raise _too_deep() from e
    except ValueError as e:
        logger.error("config_parse_failed", error=str(e))
        raise ParseError(f"Error parsing config file [{e}]") from e

    if not isinstance(document, dict):
        logger.error("config_parse_failed", error="top level is not an object")
        raise ParseError(
            "Error parsing config file [top level is not an object]",
            details={"type": type(document).__name__},
        )
    return document


class ConfigStore:
    """Read-only flattened configuration with a sticky error flag."""

    def __init__(self, values: Mapping[str, Any], selector: str | None = None):
        self._values = MappingProxyType(dict(values))
        self.selector = selector
        self._had_error = False
        self._error_message = ""
        self._lock = threading.Lock()

    @classmethod
    def from_bytes(cls, data: bytes | str, selector: str | None = None) -> ConfigStore:
        """Parse and flatten a JSON document."""
        document = parse_document(data)
        try:
            values = flatten(document)
        except RecursionError as e:
            raise _too_deep() from e
        return cls(values, selector=selector)

    @property
    def values(self) -> Mapping[str, Any]:
        return self._values

    def paths(self) -> list[str]:
        return sorted(self._values)

    def __contains__(self, path: object) -> bool:
        return path in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ConfigStore(selector={self.selector!r}, paths={len(self._values)})"

    # Error state

    def was_error(self) -> bool:
        """
        Has an error occurred?

        Rather than checking for errors on every lookup, check once at the end.
        """
        return self._had_error

    def error_message(self) -> str:
        """Message recorded by the first failing lookup."""
        return self._error_message

    def reset_error(self) -> None:
        """Clear the error state. Values are unaffected."""
        with self._lock:
            self._had_error = False
            self._error_message = ""

    def _fail(self, error_cls: type[JuiceConfigError], message: str, path: str) -> Lookup:
        # Caller holds self._lock
        self._had_error = True
        self._error_message = message
        logger.debug("config_lookup_failed", path=path, reason=error_cls.__name__)
        return Lookup(error=error_cls(message, details={"path": path}))

    # Lookups

    def lookup(self, path: str, kind: ValueKind, default: Any = MISSING) -> Lookup:
        """
        Look up a typed value without raising.

        Args:
            path: Dotted path into the flattened document
            kind: Type the value must have
            default: Returned when the path is absent; omit to make absence an error

        Returns:
            Lookup carrying either the value or the error
        """
        kind = ValueKind(kind)
        with self._lock:
            if self._had_error:
                return Lookup(
                    error=AlreadyFailedError(
                        "Already had error",
                        details={"path": path, "first_error": self._error_message},
                    )
                )

            if path in self._values:
                value = self._values[path]
                if matches_kind(value, kind):
                    return Lookup(value=value)
                return self._fail(TypeMismatchError, f"Value is not {kind.value} [{path}]", path)

            if default is not MISSING:
                return Lookup(value=default)
            return self._fail(NotFoundError, f"Value not found [{path}]", path)

    def get_string(self, path: str, default: Any = MISSING) -> str:
        """Get a string configuration value."""
        return self.lookup(path, ValueKind.STRING, default).unwrap()

    def get_int(self, path: str, default: Any = MISSING) -> int:
        """Get a 64-bit integer configuration value."""
        return self.lookup(path, ValueKind.INT, default).unwrap()

    def get_bool(self, path: str, default: Any = MISSING) -> bool:
        """Get a boolean configuration value."""
        return self.lookup(path, ValueKind.BOOL, default).unwrap()

    def get_many(
        self, requests: Mapping[str, ValueKind | tuple[ValueKind, Any]]
    ) -> dict[str, Any]:
        """
        Read several values at once, stopping at the first failure.

        Each request maps a path to a ValueKind, or to (ValueKind, default).

        Example:
            store.get_many({
                "database.host": ValueKind.STRING,
                "database.port": (ValueKind.INT, 5432),
            })
        """
        results: dict[str, Any] = {}
        for path, request in requests.items():
            if isinstance(request, tuple):
                kind, default = request
            else:
                kind, default = request, MISSING
            results[path] = self.lookup(path, kind, default).unwrap()
        return results


def load(selector: str | Selector, settings: Settings | None = None) -> ConfigStore:
    """
    Load configuration from the source a selector points at.

    Args:
        selector: e.g. "file:::/etc/app.json", "environment:::APP_CONFIG",
            "secrets_manager:::us-east-1:::prod/app"
        settings: Optional settings override (Secrets Manager stage/endpoint)

    Returns:
        ConfigStore with the flattened document
    """
    selector = coerce_selector(selector)
    log = bind_context(scheme=selector.scheme.value)

    data = resolve(selector, settings)
    store = ConfigStore.from_bytes(data, selector=str(selector))

    log.info("config_loaded", paths=len(store))
    return store


__all__ = [
    "MISSING",
    "Lookup",
    "flatten",
    "parse_document",
    "ConfigStore",
    "load",
]
