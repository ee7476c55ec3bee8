"""
Convenience functions for simpler access.

A default configuration is defined by the selector in the JUICE_CONFIG
environment variable. It is loaded on first use and kept for the lifetime of
the process.
"""

from __future__ import annotations

import threading
from typing import Any

import structlog
from pydantic import ValidationError

from juiceconfig.errors import InvalidSelectorError, JuiceConfigError
from juiceconfig.settings import Settings
from juiceconfig.store import MISSING, ConfigStore, load

logger = structlog.get_logger()

DEFAULT_CONFIG_ENV = "JUICE_CONFIG"

_default_store: ConfigStore | None = None
_default_lock = threading.Lock()


def get_default_store() -> ConfigStore:
    """
    Get or load the process-wide default store.

    A failed load is not cached: the error is logged and raised, and the
    next call tries again.
    """
    global _default_store
    with _default_lock:
        if _default_store is not None:
            return _default_store

        try:
            settings = Settings()
            if not settings.config:
                raise InvalidSelectorError(f"Environment variable not set [{DEFAULT_CONFIG_ENV}]")
            scheme = settings.config.split(":::", 1)[0]
            logger.debug("loading_default_config", scheme=scheme)
            _default_store = load(settings.config, settings)
        except (JuiceConfigError, ValidationError) as e:
            logger.error(
                "default_config_load_failed",
                error_type=type(e).__name__,
                message=getattr(e, "message", str(e)),
            )
            raise
        return _default_store


def reset_default_store() -> None:
    """Drop the default store so the next access reloads it."""
    global _default_store
    with _default_lock:
        _default_store = None


def get_string(path: str, default: Any = MISSING) -> str:
    """Get a string value from the config defined by JUICE_CONFIG."""
    return get_default_store().get_string(path, default)


def get_int(path: str, default: Any = MISSING) -> int:
    """Get an integer value from the config defined by JUICE_CONFIG."""
    return get_default_store().get_int(path, default)


def get_bool(path: str, default: Any = MISSING) -> bool:
    """Get a boolean value from the config defined by JUICE_CONFIG."""
    return get_default_store().get_bool(path, default)


def was_error() -> bool:
    """
    Has an error occurred?

    Rather than checking for errors every time we get a config value,
    we can check at the end.
    """
    return get_default_store().was_error()


def error_message() -> str:
    """Get the previous error's message."""
    return get_default_store().error_message()


def reset_error() -> None:
    """Reset the error status."""
    get_default_store().reset_error()


__all__ = [
    "DEFAULT_CONFIG_ENV",
    "get_default_store",
    "reset_default_store",
    "get_string",
    "get_int",
    "get_bool",
    "was_error",
    "error_message",
    "reset_error",
]
