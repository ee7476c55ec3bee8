"""
Cloud configuration sources - lazy loaded when needed.

- SecretsManagerSource: boto3
"""

from __future__ import annotations

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from juiceconfig.errors import BackendError
from juiceconfig.sources import BaseSource, _sanitize_name

logger = structlog.get_logger()

DEFAULT_VERSION_STAGE = "AWSCURRENT"


def _sanitize_error(exc: Exception) -> str:
    """Sanitize error message to avoid leaking sensitive details."""
    return type(exc).__name__


class SecretsManagerSource(BaseSource):
    """AWS Secrets Manager source. The secret string is the JSON document."""

    def __init__(
        self,
        region: str,
        secret_name: str,
        version_stage: str = DEFAULT_VERSION_STAGE,
        endpoint_url: str | None = None,
    ):
        self.region = region
        self.secret_name = secret_name
        self.version_stage = version_stage
        self.endpoint_url = endpoint_url

    @property
    def description(self) -> str:
        return f"secrets_manager:{self.region}:{_sanitize_name(self.secret_name)}"

    def _get_client(self):
        kwargs = {"region_name": self.region}
        if self.endpoint_url:
            kwargs["endpoint_url"] = self.endpoint_url
        return boto3.client("secretsmanager", **kwargs)

    def read(self) -> bytes:
        try:
            client = self._get_client()
            response = client.get_secret_value(
                SecretId=self.secret_name,
                VersionStage=self.version_stage,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(
                "secrets_manager_fetch_failed",
                region=self.region,
                secret=_sanitize_name(self.secret_name),
                error=_sanitize_error(e),
            )
            raise BackendError(
                f"Unable to access AWS Secrets Manager [{e}]",
                details={"region": self.region},
            ) from e

        secret_string = response.get("SecretString")
        if secret_string is not None:
            return secret_string.encode("utf-8")

        secret_binary = response.get("SecretBinary")
        if secret_binary is not None:
            return bytes(secret_binary)

        raise BackendError(
            "Secret has no value [SecretString and SecretBinary are both empty]",
            details={"region": self.region},
        )


__all__ = [
    "DEFAULT_VERSION_STAGE",
    "SecretsManagerSource",
]
