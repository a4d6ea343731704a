"""Test configuration and fixtures for s3-file-manager."""

from typing import Any, Optional

import boto3
import pytest
from moto import mock_aws

from s3_file_manager import file_manager
from s3_file_manager.schemas import FileManagerConfig

BUCKET = "test-bucket"


class FakeBackend:
    """In-memory ObjectStorageBackend that records every call.

    ``pages`` scripts list_objects_v2 responses in order; when it is empty,
    listings are computed from the stored objects.
    """

    def __init__(self, pages: Optional[list[dict[str, Any]]] = None):
        self.pages = list(pages or [])
        self.objects: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def calls_to(self, method: str) -> list[dict[str, Any]]:
        return [kwargs for name, kwargs in self.calls if name == method]

    def get_object(self, **kwargs):
        self.calls.append(("get_object", kwargs))
        stored = self.objects[kwargs["Key"]]
        return {
            "Body": stored.get("Body", b""),
            "Metadata": stored.get("Metadata", {}),
            "ContentType": stored.get("ContentType"),
        }

    def list_objects_v2(self, **kwargs):
        self.calls.append(("list_objects_v2", kwargs))
        if self.pages:
            return self.pages.pop(0)
        contents = [
            {"Key": key, "Size": len(obj.get("Body", b""))}
            for key, obj in sorted(self.objects.items())
            if key.startswith(kwargs.get("Prefix", ""))
        ]
        return {"Contents": contents, "KeyCount": len(contents)}

    def put_object(self, **kwargs):
        self.calls.append(("put_object", kwargs))
        self.objects[kwargs["Key"]] = kwargs
        return {"ETag": '"fake"'}

    def delete_object(self, **kwargs):
        self.calls.append(("delete_object", kwargs))
        self.objects.pop(kwargs["Key"], None)
        return {}


@pytest.fixture
def fake_backend():
    """Create an empty recording backend."""
    return FakeBackend()


@pytest.fixture
def make_manager():
    """Build a FileManager over a given backend and root folder."""

    def _make(backend, root_folder_name: str = "root"):
        config = FileManagerConfig(
            region="us-east-1",
            bucket_name=BUCKET,
            root_folder_name=root_folder_name,
        )
        return file_manager.FileManager(config, backend=backend)

    return _make


@pytest.fixture
def aws_credentials(monkeypatch):
    """Mocked AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def s3_bucket(aws_credentials):
    """Create a mocked S3 bucket and yield a raw boto3 client for it."""
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket=BUCKET)
        yield client


@pytest.fixture(autouse=True)
def reset_default_manager(monkeypatch):
    """Isolate tests from the process-wide file manager."""
    monkeypatch.setattr(file_manager, "_default", None)
