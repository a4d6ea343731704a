"""Core utilities and shared components for s3-file-manager."""

from .config import settings
from .exceptions import (
    FileManagerError,
    InvalidNameError,
    NotEmptyError,
    NotInitializedError,
    ValidationError,
)
from .observability import get_logger, get_tracer, s3_span

__all__ = [
    "settings",
    "FileManagerError",
    "InvalidNameError",
    "NotEmptyError",
    "NotInitializedError",
    "ValidationError",
    "get_logger",
    "get_tracer",
    "s3_span",
]
