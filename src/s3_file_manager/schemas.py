"""Configuration and request/response schemas for s3-file-manager."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ObjectACL(str, Enum):
    """Canned ACLs accepted by S3 PutObject."""

    PRIVATE = "private"
    PUBLIC_READ = "public-read"
    PUBLIC_READ_WRITE = "public-read-write"
    AUTHENTICATED_READ = "authenticated-read"
    AWS_EXEC_READ = "aws-exec-read"
    BUCKET_OWNER_READ = "bucket-owner-read"
    BUCKET_OWNER_FULL_CONTROL = "bucket-owner-full-control"


class FileManagerConfig(BaseModel):
    """Bucket location for a FileManager.

    ``root_folder_name`` is given without a trailing slash, e.g. ``"uploads"``.
    It is used as-is; a trailing slash supplied by the caller is kept.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    region: str = Field(..., description="AWS region, e.g. us-west-2")
    bucket_name: str = Field(..., description="S3 bucket name")
    root_folder_name: str = Field(
        default="", description="Root folder prefix without trailing slash"
    )
    endpoint_url: Optional[str] = Field(
        default=None, description="Custom S3 endpoint URL for S3-compatible services"
    )


class WriteRequest(BaseModel):
    """A single PutObject request against an already qualified key."""

    model_config = ConfigDict(frozen=True)

    key: str
    body: Optional[bytes] = None
    acl: Optional[Union[ObjectACL, str]] = None
    content_type: Optional[str] = None
    metadata: Optional[dict[str, str]] = None

    def to_put_kwargs(self, bucket: str) -> dict[str, Any]:
        """Build boto3 put_object keyword arguments, omitting unset fields."""
        kwargs: dict[str, Any] = {"Bucket": bucket, "Key": self.key}
        if self.body is not None:
            kwargs["Body"] = self.body
        if self.acl is not None:
            kwargs["ACL"] = (
                self.acl.value if isinstance(self.acl, ObjectACL) else self.acl
            )
        if self.content_type is not None:
            kwargs["ContentType"] = self.content_type
        if self.metadata is not None:
            kwargs["Metadata"] = self.metadata
        return kwargs


@dataclass(frozen=True)
class ListResult:
    """One page of a ListObjectsV2 call.

    Attributes:
        entries: Object metadata dicts as returned in ``Contents``
        key_count: Number of keys in this page
        continuation_token: Token for the next page, None on the last page
        prefix: The fully-qualified prefix that was listed
    """

    entries: list[dict[str, Any]] = field(default_factory=list)
    key_count: int = 0
    continuation_token: Optional[str] = None
    prefix: str = ""

    @classmethod
    def from_response(cls, response: dict[str, Any], prefix: str) -> "ListResult":
        return cls(
            entries=list(response.get("Contents", [])),
            key_count=response.get("KeyCount", 0),
            continuation_token=response.get("NextContinuationToken"),
            prefix=prefix,
        )
