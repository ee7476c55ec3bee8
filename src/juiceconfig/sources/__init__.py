"""
Configuration sources with pluggable backend support.

Core sources (always available):
- Local JSON file (file:::)
- Environment variable holding a JSON blob (environment:::)

Cloud sources (loaded on demand):
- AWS Secrets Manager (secrets_manager:::), requires boto3
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod

import structlog

from juiceconfig.errors import FileReadError, NotFoundError
from juiceconfig.selector import (
    EnvironmentSelector,
    FileSelector,
    SecretsManagerSelector,
    Selector,
    coerce_selector,
)
from juiceconfig.settings import Settings

logger = structlog.get_logger()


def _sanitize_name(name: str) -> str:
    """Mask a secret name for logging, keeping only a short recognizable head."""
    if not name or len(name) < 4:
        return "***"
    if "/" in name:
        return f"{name.split('/')[0]}/***"
    return f"{name[:2]}***"


class BaseSource(ABC):
    """Base class for configuration sources."""

    @abstractmethod
    def read(self) -> bytes:
        """Fetch the raw configuration document."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short, log-safe description of where the document comes from."""
        pass


class FileSource(BaseSource):
    """Reads the whole document from a local file."""

    def __init__(self, path: str):
        self.path = path

    @property
    def description(self) -> str:
        return f"file:{self.path}"

    def read(self) -> bytes:
        try:
            with open(self.path, "rb") as f:
                return f.read()
        except OSError as e:
            logger.warning("config_file_unreadable", path=self.path, error=type(e).__name__)
            raise FileReadError(
                f"Unable to open config file [{self.path}]",
                details={"path": self.path},
            ) from e


class EnvironmentSource(BaseSource):
    """Reads the document from an environment variable."""

    def __init__(self, variable_name: str):
        self.variable_name = variable_name

    @property
    def description(self) -> str:
        return f"environment:{self.variable_name}"

    def read(self) -> bytes:
        # Unset and empty are treated the same
        value = os.environ.get(self.variable_name, "")
        if not value:
            logger.warning("config_env_missing", variable=self.variable_name)
            raise NotFoundError(
                f"Environment variable not set [{self.variable_name}]",
                details={"variable": self.variable_name},
            )
        # Undecodable bytes arrive as surrogates; restore them so parsing reports them
        return value.encode("utf-8", "surrogateescape")


def source_for(selector: str | Selector, settings: Settings | None = None) -> BaseSource:
    """Build the source a selector points at."""
    selector = coerce_selector(selector)

    if isinstance(selector, FileSelector):
        return FileSource(selector.path)
    if isinstance(selector, EnvironmentSelector):
        return EnvironmentSource(selector.variable_name)
    if isinstance(selector, SecretsManagerSelector):
        from juiceconfig.sources.backends import SecretsManagerSource

        settings = settings or Settings()
        return SecretsManagerSource(
            region=selector.region,
            secret_name=selector.secret_name,
            version_stage=settings.secrets_version_stage,
            endpoint_url=settings.aws_endpoint_url,
        )
    raise TypeError(f"Unsupported selector type: {type(selector).__name__}")


def resolve(selector: str | Selector, settings: Settings | None = None) -> bytes:
    """
    Fetch the raw configuration bytes a selector points at.

    A single attempt is made; any failure is raised to the caller.

    Raises:
        InvalidSelectorError: Unknown scheme
        ParseError: Malformed secrets_manager selector
        FileReadError: File could not be read
        NotFoundError: Environment variable unset or empty
        BackendError: Secrets Manager call failed
    """
    source = source_for(selector, settings)
    data = source.read()
    logger.debug("config_source_read", source=source.description, size=len(data))
    return data


__all__ = [
    "BaseSource",
    "FileSource",
    "EnvironmentSource",
    "source_for",
    "resolve",
]
