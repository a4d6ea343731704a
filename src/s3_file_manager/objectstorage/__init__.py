"""Object storage backend access and key handling."""

from .backend import ObjectStorageBackend
from .clients import S3ClientConfig, S3ClientManager
from .keys import (
    SEPARATOR,
    is_folder_key,
    qualify_key,
    qualify_prefix,
    require_file_name,
    require_folder_name,
)

__all__ = [
    "ObjectStorageBackend",
    "S3ClientConfig",
    "S3ClientManager",
    "SEPARATOR",
    "is_folder_key",
    "qualify_key",
    "qualify_prefix",
    "require_file_name",
    "require_folder_name",
]
