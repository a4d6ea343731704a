"""Capability protocol for the object storage backend.

A boto3 S3 client satisfies this protocol as-is, so production code passes
the real client while tests pass an in-memory fake.
"""

from typing import Any, Protocol


class ObjectStorageBackend(Protocol):
    """The four S3 requests the file manager issues."""

    def get_object(self, *, Bucket: str, Key: str, **kwargs: Any) -> dict[str, Any]:
        """Return payload and metadata for a key."""
        ...

    def list_objects_v2(
        self, *, Bucket: str, Prefix: str = "", **kwargs: Any
    ) -> dict[str, Any]:
        """Return one page of keys under a prefix."""
        ...

    def put_object(self, *, Bucket: str, Key: str, **kwargs: Any) -> dict[str, Any]:
        """Store an object."""
        ...

    def delete_object(
        self, *, Bucket: str, Key: str, **kwargs: Any
    ) -> dict[str, Any]:
        """Remove an object."""
        ...
