"""Folder/file operations over an S3 bucket.

FileManager qualifies keys with the configured root folder, validates the
trailing-slash folder/file convention, and issues one S3 request per
operation. ``count`` is the exception: it follows continuation tokens until
S3 reports the last page.

Two ways to use it:

    >>> manager = FileManager(FileManagerConfig(region="us-west-2", bucket_name="b"))
    >>> manager.create_folder("reports/2024/")

or, process-wide:

    >>> from s3_file_manager import file_manager
    >>> file_manager.initialize("us-west-2", "b", root_folder_name="uploads")
    >>> file_manager.count("reports/")
"""

from typing import Any, Optional, Union

from s3_file_manager.core import get_logger, get_tracer, s3_span, settings
from s3_file_manager.core.exceptions import NotEmptyError, NotInitializedError
from s3_file_manager.objectstorage import (
    ObjectStorageBackend,
    S3ClientConfig,
    S3ClientManager,
    qualify_key,
    qualify_prefix,
    require_file_name,
    require_folder_name,
)
from s3_file_manager.schemas import (
    FileManagerConfig,
    ListResult,
    ObjectACL,
    WriteRequest,
)

logger = get_logger(__name__)
tracer = get_tracer(__name__)

ACL = Union[ObjectACL, str]


class FileManager:
    """Path-prefixing facade over a single bucket."""

    def __init__(
        self,
        config: FileManagerConfig,
        backend: Optional[ObjectStorageBackend] = None,
    ):
        """Initialize the file manager.

        Args:
            config: Bucket location and root folder
            backend: Object storage client; a boto3 S3 client is created
                from ``config`` on first use when omitted
        """
        self.config = config
        self._backend = backend
        self._client_manager: Optional[S3ClientManager] = None
        if backend is None:
            self._client_manager = S3ClientManager(
                S3ClientConfig(
                    region_name=config.region, endpoint_url=config.endpoint_url
                )
            )
        logger.info(
            "File manager initialized",
            bucket=config.bucket_name,
            root_folder=config.root_folder_name,
        )

    @property
    def backend(self) -> ObjectStorageBackend:
        if self._backend is None:
            assert self._client_manager is not None
            self._backend = self._client_manager.client
        return self._backend

    @property
    def bucket_name(self) -> str:
        return self.config.bucket_name

    def qualify(self, object_key: str) -> str:
        """Return the fully-qualified S3 key for a key under the root folder."""
        return qualify_key(self.config.root_folder_name, object_key)

    def read(self, object_key: str) -> dict[str, Any]:
        """Get an object.

        Args:
            object_key: Folder or file key under the root folder

        Returns:
            The raw GetObject response (``Body``, ``Metadata``, ...)
        """
        key = self.qualify(object_key)
        logger.debug("Reading object", bucket=self.bucket_name, key=key)
        with s3_span(tracer, "get_object", self.bucket_name, key=key):
            return self.backend.get_object(Bucket=self.bucket_name, Key=key)

    def list(
        self, path_to_folder: str, continuation_token: Optional[str] = None
    ) -> ListResult:
        """List one page of objects under a folder.

        Args:
            path_to_folder: Folder path under the root folder, e.g. ``cas/2021/``
            continuation_token: Token from a previous page

        Returns:
            ListResult for this page only
        """
        prefix = qualify_prefix(self.config.root_folder_name, path_to_folder)
        kwargs: dict[str, Any] = {"Bucket": self.bucket_name, "Prefix": prefix}
        if continuation_token is not None:
            kwargs["ContinuationToken"] = continuation_token

        logger.debug(
            "Listing objects",
            bucket=self.bucket_name,
            prefix=prefix,
            continued=continuation_token is not None,
        )
        with s3_span(tracer, "list_objects_v2", self.bucket_name, prefix=prefix):
            response = self.backend.list_objects_v2(**kwargs)
        return ListResult.from_response(response, prefix)

    def count(self, folder_name: str = "") -> int:
        """Count objects under a folder, including the folder marker itself.

        Follows continuation tokens until the last page; there is no upper
        bound on the number of pages fetched.

        Raises:
            InvalidNameError: If folder_name is non-empty and lacks a trailing slash
        """
        require_folder_name(folder_name, allow_empty=True)

        total = 0
        pages = 0
        token: Optional[str] = None
        while True:
            result = self.list(folder_name, token)
            total += result.key_count
            pages += 1
            token = result.continuation_token
            if token is None:
                break

        logger.info(
            "Objects counted",
            bucket=self.bucket_name,
            folder=folder_name,
            object_count=total,
            pages=pages,
        )
        return total

    def create_folder(
        self,
        folder_name: str,
        acl: Optional[ACL] = None,
        content_type: Optional[str] = None,
        metadata: Optional[dict[str, str]] = None,
    ) -> dict[str, Any]:
        """Create a zero-byte folder marker object.

        Raises:
            InvalidNameError: If folder_name does not end with a slash
        """
        require_folder_name(folder_name)
        return self.write(folder_name, None, acl, content_type, metadata)

    def create_file(
        self,
        file_name: str,
        body: bytes,
        acl: Optional[ACL] = None,
        content_type: Optional[str] = None,
        metadata: Optional[dict[str, str]] = None,
    ) -> dict[str, Any]:
        """Create a file object.

        Raises:
            InvalidNameError: If file_name ends with a slash
        """
        require_file_name(file_name)
        return self.write(file_name, body, acl, content_type, metadata)

    def write(
        self,
        object_key: str,
        body: Optional[bytes] = None,
        acl: Optional[ACL] = None,
        content_type: Optional[str] = None,
        metadata: Optional[dict[str, str]] = None,
    ) -> dict[str, Any]:
        """Put an object. Options left as None are not sent to S3."""
        request = WriteRequest(
            key=self.qualify(object_key),
            body=body,
            acl=acl,
            content_type=content_type,
            metadata=metadata,
        )
        logger.debug(
            "Writing object",
            bucket=self.bucket_name,
            key=request.key,
            size=len(body) if body is not None else 0,
        )
        with s3_span(tracer, "put_object", self.bucket_name, key=request.key):
            return self.backend.put_object(**request.to_put_kwargs(self.bucket_name))

    def delete_folder(self, folder_name: str) -> dict[str, Any]:
        """Delete a folder marker, provided the folder holds nothing else.

        Raises:
            InvalidNameError: If folder_name does not end with a slash
            NotEmptyError: If the folder holds more than its marker object
        """
        require_folder_name(folder_name)
        if self.count(folder_name) > 1:
            logger.warning(
                "Refusing to delete non-empty folder",
                bucket=self.bucket_name,
                folder=folder_name,
            )
            raise NotEmptyError(f"Folder {folder_name} is not empty")
        return self.delete(folder_name)

    def delete_file(self, file_name: str) -> dict[str, Any]:
        """Delete a file object.

        Raises:
            InvalidNameError: If file_name ends with a slash
        """
        require_file_name(file_name)
        return self.delete(file_name)

    def delete(self, object_key: str) -> dict[str, Any]:
        """Delete an object, folder marker or file."""
        key = self.qualify(object_key)
        logger.debug("Deleting object", bucket=self.bucket_name, key=key)
        with s3_span(tracer, "delete_object", self.bucket_name, key=key):
            return self.backend.delete_object(Bucket=self.bucket_name, Key=key)


# Process-wide default manager
_default: Optional[FileManager] = None


def initialize(
    region: str,
    bucket_name: str,
    root_folder_name: str = "",
    endpoint_url: Optional[str] = None,
    backend: Optional[ObjectStorageBackend] = None,
) -> FileManager:
    """Configure the process-wide file manager.

    Calling it again replaces the previous configuration.

    Args:
        region: AWS region, e.g. us-west-2
        bucket_name: S3 bucket name
        root_folder_name: Root folder name without trailing slash
        endpoint_url: Custom endpoint for S3-compatible services
        backend: Object storage client to use instead of boto3
    """
    global _default
    config = FileManagerConfig(
        region=region,
        bucket_name=bucket_name,
        root_folder_name=root_folder_name,
        endpoint_url=endpoint_url,
    )
    _default = FileManager(config, backend=backend)
    return _default


def initialize_from_settings(
    backend: Optional[ObjectStorageBackend] = None,
) -> FileManager:
    """Configure the process-wide file manager from S3FM_* environment settings."""
    if not settings.bucket_name:
        raise NotInitializedError("S3FM_BUCKET_NAME is not set")
    return initialize(
        settings.region,
        settings.bucket_name,
        root_folder_name=settings.root_folder_name,
        endpoint_url=settings.endpoint_url,
        backend=backend,
    )


def get_file_manager() -> FileManager:
    """Return the process-wide file manager."""
    if _default is None:
        raise NotInitializedError(
            "File manager is not initialized; call initialize() first"
        )
    return _default


def read(object_key: str) -> dict[str, Any]:
    return get_file_manager().read(object_key)


def list_objects(
    path_to_folder: str, continuation_token: Optional[str] = None
) -> ListResult:
    return get_file_manager().list(path_to_folder, continuation_token)


def count(folder_name: str = "") -> int:
    return get_file_manager().count(folder_name)


def create_folder(
    folder_name: str,
    acl: Optional[ACL] = None,
    content_type: Optional[str] = None,
    metadata: Optional[dict[str, str]] = None,
) -> dict[str, Any]:
    return get_file_manager().create_folder(folder_name, acl, content_type, metadata)


def create_file(
    file_name: str,
    body: bytes,
    acl: Optional[ACL] = None,
    content_type: Optional[str] = None,
    metadata: Optional[dict[str, str]] = None,
) -> dict[str, Any]:
    return get_file_manager().create_file(
        file_name, body, acl, content_type, metadata
    )


def write(
    object_key: str,
    body: Optional[bytes] = None,
    acl: Optional[ACL] = None,
    content_type: Optional[str] = None,
    metadata: Optional[dict[str, str]] = None,
) -> dict[str, Any]:
    return get_file_manager().write(object_key, body, acl, content_type, metadata)


def delete_folder(folder_name: str) -> dict[str, Any]:
    return get_file_manager().delete_folder(folder_name)


def delete_file(file_name: str) -> dict[str, Any]:
    return get_file_manager().delete_file(file_name)


def delete(object_key: str) -> dict[str, Any]:
    return get_file_manager().delete(object_key)
