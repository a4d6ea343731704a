"""Key qualification and folder/file name validation.

Folder keys end with ``/``; file keys never do. Keys are qualified against
the configured root folder by inserting a ``/`` between root and key when the
key lacks one. The root itself is never normalised, so a root given with a
trailing slash yields a double slash.
"""

from s3_file_manager.core import get_logger
from s3_file_manager.core.exceptions import InvalidNameError

logger = get_logger(__name__)

SEPARATOR = "/"


def is_folder_key(key: str) -> bool:
    """Return True if the key names a folder."""
    return key.endswith(SEPARATOR)


def qualify_key(root_folder_name: str, object_key: str) -> str:
    """Prefix an object key with the root folder.

    Examples:
        >>> qualify_key("root", "a/b")
        'root/a/b'
        >>> qualify_key("root", "/a/b")
        'root/a/b'
        >>> qualify_key("", "a/b")
        'a/b'
    """
    if root_folder_name != "" and not object_key.startswith(SEPARATOR):
        object_key = SEPARATOR + object_key
    return root_folder_name + object_key


def qualify_prefix(root_folder_name: str, path_to_folder: str) -> str:
    """Qualify a folder path for listing, forcing a trailing separator."""
    if root_folder_name != "" and not path_to_folder.startswith(SEPARATOR):
        path_to_folder = SEPARATOR + path_to_folder
    if path_to_folder != "" and not path_to_folder.endswith(SEPARATOR):
        path_to_folder += SEPARATOR
    return root_folder_name + path_to_folder


def require_folder_name(folder_name: str, allow_empty: bool = False) -> None:
    """Raise InvalidNameError unless folder_name ends with a separator.

    Args:
        folder_name: Folder path relative to the root folder
        allow_empty: Accept "" as the root folder itself
    """
    if allow_empty and folder_name == "":
        return
    if not is_folder_key(folder_name):
        logger.warning("Rejected folder name", folder_name=folder_name)
        raise InvalidNameError(f"Invalid folder name: {folder_name}")


def require_file_name(file_name: str) -> None:
    """Raise InvalidNameError if file_name ends with a separator."""
    if is_folder_key(file_name):
        logger.warning("Rejected file name", file_name=file_name)
        raise InvalidNameError(f"Invalid file name: {file_name}")
