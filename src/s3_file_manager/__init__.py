"""Folder and file semantics over an S3 bucket.

Keys are resolved under a configurable root folder. A trailing slash marks a
folder (stored as a zero-byte marker object); anything else is a file.

Recommended Usage:

    >>> from s3_file_manager import FileManager, FileManagerConfig
    >>> manager = FileManager(
    ...     FileManagerConfig(region="us-west-2", bucket_name="my-bucket",
    ...                       root_folder_name="uploads")
    ... )
    >>> manager.create_folder("cas/2021/")
    >>> manager.create_file("cas/2021/a.json", b"{}", content_type="application/json")
    >>> manager.count("cas/2021/")
    2

Process-wide Usage:

    >>> from s3_file_manager import file_manager
    >>> file_manager.initialize("us-west-2", "my-bucket", "uploads")
    >>> file_manager.delete_file("cas/2021/a.json")
"""

__version__ = "0.1.0"

from .core.exceptions import (
    FileManagerError,
    InvalidNameError,
    NotEmptyError,
    NotInitializedError,
    ValidationError,
)
from .file_manager import FileManager, initialize, initialize_from_settings
from .objectstorage import ObjectStorageBackend, qualify_key
from .schemas import FileManagerConfig, ListResult, ObjectACL, WriteRequest

__all__ = [
    # Facade
    "FileManager",
    "initialize",
    "initialize_from_settings",
    # Schemas
    "FileManagerConfig",
    "ListResult",
    "ObjectACL",
    "WriteRequest",
    # Backend
    "ObjectStorageBackend",
    "qualify_key",
    # Errors
    "FileManagerError",
    "InvalidNameError",
    "NotEmptyError",
    "NotInitializedError",
    "ValidationError",
]
