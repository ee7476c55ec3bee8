"""
Selector strings identify where a configuration document lives.

Grammar:
    file:::<path>
    secrets_manager:::<region>:::<secret_name>
    environment:::<variable_name>

Prefixes are matched case-sensitively and nothing is URL-decoded.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Union

from juiceconfig.errors import InvalidSelectorError, ParseError

SEPARATOR = ":::"


class SourceScheme(StrEnum):
    """Supported configuration sources."""

    FILE = "file"
    SECRETS_MANAGER = "secrets_manager"
    ENVIRONMENT = "environment"

    @property
    def prefix(self) -> str:
        return f"{self.value}{SEPARATOR}"


@dataclass(frozen=True)
class FileSelector:
    """A JSON file on the local filesystem."""

    scheme: ClassVar[SourceScheme] = SourceScheme.FILE

    path: str

    def __str__(self) -> str:
        return f"{self.scheme.prefix}{self.path}"


@dataclass(frozen=True)
class SecretsManagerSelector:
    """A secret string held in AWS Secrets Manager."""

    scheme: ClassVar[SourceScheme] = SourceScheme.SECRETS_MANAGER

    region: str
    secret_name: str

    def __str__(self) -> str:
        return f"{self.scheme.prefix}{self.region}{SEPARATOR}{self.secret_name}"


@dataclass(frozen=True)
class EnvironmentSelector:
    """An environment variable holding a JSON blob."""

    scheme: ClassVar[SourceScheme] = SourceScheme.ENVIRONMENT

    variable_name: str

    def __str__(self) -> str:
        return f"{self.scheme.prefix}{self.variable_name}"


Selector = Union[FileSelector, SecretsManagerSelector, EnvironmentSelector]


def parse_selector(text: str) -> Selector:
    """
    Parse a selector string into a typed selector.

    Raises:
        InvalidSelectorError: If no scheme prefix matches
        ParseError: If a secrets_manager selector lacks its region/name split
    """
    if text.startswith(SourceScheme.FILE.prefix):
        return FileSelector(path=text[len(SourceScheme.FILE.prefix) :])

    if text.startswith(SourceScheme.SECRETS_MANAGER.prefix):
        payload = text[len(SourceScheme.SECRETS_MANAGER.prefix) :]
        region, separator, secret_name = payload.partition(SEPARATOR)
        if not separator:
            raise ParseError(
                f"Invalid selector [{text}]",
                details={"reason": "expected region:::secret_name"},
            )
        if not region or not secret_name:
            raise ParseError(
                f"Invalid selector [{text}]",
                details={"reason": "region and secret name must not be empty"},
            )
        return SecretsManagerSelector(region=region, secret_name=secret_name)

    if text.startswith(SourceScheme.ENVIRONMENT.prefix):
        return EnvironmentSelector(variable_name=text[len(SourceScheme.ENVIRONMENT.prefix) :])

    raise InvalidSelectorError(f"Invalid selector [{text}]")


def coerce_selector(selector: str | Selector) -> Selector:
    """Accept either a selector string or an already-parsed selector."""
    if isinstance(selector, str):
        return parse_selector(selector)
    return selector


__all__ = [
    "SEPARATOR",
    "SourceScheme",
    "FileSelector",
    "SecretsManagerSelector",
    "EnvironmentSelector",
    "Selector",
    "parse_selector",
    "coerce_selector",
]
