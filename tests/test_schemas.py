"""Tests for configuration and request schemas."""

import pytest
from pydantic import ValidationError

from s3_file_manager.objectstorage.clients import S3ClientConfig
from s3_file_manager.schemas import (
    FileManagerConfig,
    ListResult,
    ObjectACL,
    WriteRequest,
)


class TestFileManagerConfig:
    """Test file manager configuration."""

    def test_config_creation(self):
        config = FileManagerConfig(
            region="us-west-2", bucket_name="bucket", root_folder_name="root"
        )
        assert config.region == "us-west-2"
        assert config.bucket_name == "bucket"
        assert config.root_folder_name == "root"
        assert config.endpoint_url is None

    def test_config_defaults(self):
        config = FileManagerConfig(region="us-west-2", bucket_name="bucket")
        assert config.root_folder_name == ""

    def test_config_missing_required_fields(self):
        with pytest.raises(ValidationError):
            FileManagerConfig(region="us-west-2")

    def test_config_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            FileManagerConfig(region="r", bucket_name="b", prefix="x")

    def test_root_trailing_slash_kept(self):
        config = FileManagerConfig(region="r", bucket_name="b", root_folder_name="x/")
        assert config.root_folder_name == "x/"


class TestWriteRequest:
    """Test PutObject keyword construction."""

    def test_minimal_request(self):
        request = WriteRequest(key="root/docs/")
        assert request.to_put_kwargs("bucket") == {
            "Bucket": "bucket",
            "Key": "root/docs/",
        }

    def test_empty_body_is_sent(self):
        request = WriteRequest(key="k", body=b"")
        assert request.to_put_kwargs("bucket")["Body"] == b""

    def test_all_acl_values(self):
        assert [acl.value for acl in ObjectACL] == [
            "private",
            "public-read",
            "public-read-write",
            "authenticated-read",
            "aws-exec-read",
            "bucket-owner-read",
            "bucket-owner-full-control",
        ]

    def test_enum_acl_rendered_as_value(self):
        request = WriteRequest(key="k", acl=ObjectACL.AWS_EXEC_READ)
        assert request.to_put_kwargs("bucket")["ACL"] == "aws-exec-read"


class TestListResult:
    """Test ListResult construction and immutability."""

    def test_from_response(self):
        result = ListResult.from_response(
            {"Contents": [{"Key": "a"}], "KeyCount": 1, "NextContinuationToken": "t"},
            "root/",
        )
        assert result.entries == [{"Key": "a"}]
        assert result.key_count == 1
        assert result.continuation_token == "t"
        assert result.prefix == "root/"

        with pytest.raises(AttributeError):
            result.key_count = 2

    def test_from_empty_response(self):
        result = ListResult.from_response({"KeyCount": 0}, "")
        assert result.entries == []
        assert result.continuation_token is None


class TestS3ClientConfig:
    """Test S3 client configuration."""

    def test_defaults(self):
        config = S3ClientConfig()
        assert config.region_name == "us-east-1"
        assert config.endpoint_url is None

    def test_rejects_credentials(self):
        with pytest.raises(ValidationError):
            S3ClientConfig(access_key_id="key")
