"""S3 client configuration and management.

The S3ClientManager wraps boto3 client creation. Credentials are never
handled here: boto3 resolves them from its default chain (environment,
shared config files, instance roles).

S3-Compatible Services:
    Supports custom endpoints for services like MinIO, DigitalOcean Spaces,
    and other S3-compatible object storage providers via endpoint_url.
"""

from typing import Any, Dict, Optional

import boto3
from pydantic import BaseModel, ConfigDict, Field

from s3_file_manager.core import get_logger

logger = get_logger(__name__)

S3_API_VERSION = "2006-03-01"


class S3ClientConfig(BaseModel):
    """Configuration for S3 client connections.

    Example:
        # AWS region
        config = S3ClientConfig(region_name="us-west-2")

        # MinIO endpoint
        config = S3ClientConfig(endpoint_url="http://localhost:9000")
    """

    model_config = ConfigDict(extra="forbid")

    region_name: str = Field("us-east-1", description="AWS region name")
    endpoint_url: Optional[str] = Field(
        None, description="Custom S3 endpoint URL for S3-compatible services"
    )


class S3ClientManager:
    """Manages a lazily created S3 client."""

    def __init__(self, config: S3ClientConfig):
        """Initialize S3 client manager.

        Args:
            config: S3 client configuration
        """
        self.config = config
        self._client = None
        logger.info("S3 client manager initialized", region=config.region_name)

    @property
    def client(self):
        """Get or create S3 client instance."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self):
        """Create boto3 S3 client with the configured settings."""
        kwargs: Dict[str, Any] = {
            "region_name": self.config.region_name,
            "api_version": S3_API_VERSION,
        }

        if self.config.endpoint_url:
            kwargs["endpoint_url"] = self.config.endpoint_url

        client = boto3.client("s3", **kwargs)  # type: ignore
        logger.info(
            "S3 client created with default credential chain",
            endpoint_url=self.config.endpoint_url,
        )
        return client
