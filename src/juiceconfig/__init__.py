"""
juiceconfig: read application configuration from a JSON file, AWS Secrets
Manager, or an environment variable, chosen at runtime by a selector string.

Usage:
    import juiceconfig

    config = juiceconfig.load("file:::/etc/myapp/config.json")
    host = config.get_string("database.host")
    port = config.get_int("database.port", 5432)
    if config.was_error():
        raise SystemExit(config.error_message())

    # Or use the store defined by the JUICE_CONFIG environment variable
    debug = juiceconfig.get_bool("app.debug", False)
"""

from juiceconfig.default import (
    DEFAULT_CONFIG_ENV,
    error_message,
    get_bool,
    get_default_store,
    get_int,
    get_string,
    reset_default_store,
    reset_error,
    was_error,
)
from juiceconfig.errors import (
    AlreadyFailedError,
    BackendError,
    FileReadError,
    InvalidSelectorError,
    JuiceConfigError,
    NotFoundError,
    ParseError,
    TypeMismatchError,
)
from juiceconfig.selector import (
    EnvironmentSelector,
    FileSelector,
    SecretsManagerSelector,
    Selector,
    SourceScheme,
    parse_selector,
)
from juiceconfig.settings import Settings, get_settings
from juiceconfig.sources import resolve
from juiceconfig.store import MISSING, ConfigStore, Lookup, flatten, load
from juiceconfig.values import JsonType, ValueKind, json_type_of

__all__ = [
    # Loading
    "load",
    "resolve",
    "ConfigStore",
    "Lookup",
    "MISSING",
    "flatten",
    # Selectors
    "parse_selector",
    "Selector",
    "SourceScheme",
    "FileSelector",
    "SecretsManagerSelector",
    "EnvironmentSelector",
    # Values
    "JsonType",
    "ValueKind",
    "json_type_of",
    # Default store
    "DEFAULT_CONFIG_ENV",
    "get_default_store",
    "reset_default_store",
    "get_string",
    "get_int",
    "get_bool",
    "was_error",
    "error_message",
    "reset_error",
    # Settings
    "Settings",
    "get_settings",
    # Errors
    "JuiceConfigError",
    "InvalidSelectorError",
    "ParseError",
    "FileReadError",
    "BackendError",
    "NotFoundError",
    "TypeMismatchError",
    "AlreadyFailedError",
]
